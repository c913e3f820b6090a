"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.schemas.auth import CurrentUser, LoginResponse, UserLogin, UserRegister, UserResponse
from src.services.auth import login_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user with the default role."""
    user = register_user(db, user_data.username, user_data.email, user_data.password)
    return user


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user, token = login_user(db, credentials.email, credentials.password)
    return LoginResponse(token=token, role=user.role, username=user.username)


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
):
    """Get the identity carried by the current token."""
    return current_user
