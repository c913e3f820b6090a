"""FastAPI dependencies for authentication and services."""

from typing import Annotated

import pydantic
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.schemas.auth import CurrentUser
from src.services.auth import decode_access_token
from src.services.errors import Forbidden, Unauthorized
from src.services.point_service import PointService
from src.services.recycling_service import RecyclingService

# auto_error=False so a missing header maps to 401 rather than FastAPI's default
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Get the authenticated identity from the bearer token.

    The identity is taken from the signed payload; the user row is not reloaded.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise Forbidden("Invalid or expired token")

    try:
        return CurrentUser.model_validate(payload)
    except pydantic.ValidationError as e:
        raise Forbidden("Invalid or expired token") from e


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Allow only administrators through."""
    if not current_user.is_admin:
        raise Forbidden("Access denied: Admins only")
    return current_user


def get_point_service(
    db: Annotated[Session, Depends(get_db)],
) -> PointService:
    """Get point service with dependencies."""
    return PointService(db)


def get_recycling_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecyclingService:
    """Get recycling service with dependencies."""
    return RecyclingService(db)
