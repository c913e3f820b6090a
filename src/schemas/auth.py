"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.models.enums import UserRole


class UserRegister(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    """Token issued on login."""

    token: str
    role: str
    username: str


class UserResponse(BaseModel):
    """Public identity of a user. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class CurrentUser(BaseModel):
    """Identity decoded from a bearer token."""

    id: int
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        """Check if the token grants moderation rights."""
        return self.role == UserRole.ADMIN.value
