"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import CurrentUser, LoginResponse, UserLogin, UserRegister, UserResponse
from src.schemas.category import CategoryResponse
from src.schemas.point import (
    AdminPointResponse,
    MessageResponse,
    NearestPointResponse,
    PointCreate,
    PointCreatedResponse,
    PointResponse,
    PointStatusUpdate,
)
from src.schemas.recycling import (
    GroupStats,
    RecordedEventsResponse,
    RecyclingEventCreate,
    RecyclingEventResponse,
    RecyclingStatsResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "LoginResponse",
    "UserResponse",
    "CurrentUser",
    "CategoryResponse",
    "PointCreate",
    "PointResponse",
    "NearestPointResponse",
    "PointCreatedResponse",
    "AdminPointResponse",
    "PointStatusUpdate",
    "MessageResponse",
    "RecyclingEventCreate",
    "RecordedEventsResponse",
    "RecyclingEventResponse",
    "GroupStats",
    "RecyclingStatsResponse",
]
