"""User model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.enums import UserRole
from src.models.mixins import CreatedAtMixin


class User(Base, CreatedAtMixin):
    """User model for authentication and point ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)  # "user" | "admin"
