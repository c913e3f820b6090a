"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.enums import UserRole
from src.models.user import User
from src.services.errors import Conflict, Forbidden, UserNotFound

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user: User) -> str:
    """Create a JWT access token carrying the user's id, username and role."""
    to_encode = {
        "id": user.id,
        "username": user.username,
        "role": user.role,
    }
    if settings.jwt_expiration_minutes is not None:
        to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, username: str, email: str, password: str) -> User:
    """Create a new user with the default role.

    Raises Conflict when the email or username is already taken.
    """
    existing = (
        db.query(User.id).filter(or_(User.email == email, User.username == username)).first()
    )
    if existing:
        raise Conflict()

    user = User(
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        role=UserRole.USER.value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration
        db.rollback()
        logger.warning(f"Registration conflict for {email}: {e.orig}")
        raise Conflict() from e
    db.refresh(user)
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def login_user(db: Session, email: str, password: str) -> tuple[User, str]:
    """Check credentials and issue a token.

    Raises UserNotFound for an unknown email and Forbidden for a wrong password.
    """
    user = get_user_by_email(db, email)
    if not user:
        raise UserNotFound()
    if not verify_password(password, user.password_hash):
        raise Forbidden("Invalid password")
    return user, create_access_token(user)
