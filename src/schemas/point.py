"""Recycle point schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.models.enums import PointStatus


class PointCreate(BaseModel):
    """Submit a new recycle point."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    category_ids: list[int] = Field(..., min_length=1)


class PointResponse(BaseModel):
    """Publicly listed point with its categories."""

    id: int
    name: str
    description: str | None
    status: str
    lat: float
    lng: float
    categories: list[str]
    category_ids: list[int]


class NearestPointResponse(PointResponse):
    """Nearest approved point and how far away it is."""

    distance_m: float


class PointCreatedResponse(BaseModel):
    """Acknowledgement of a submitted point."""

    message: str
    id: int


class AdminPointResponse(BaseModel):
    """Point as shown in the moderation queue."""

    id: int
    name: str
    status: str
    created_at: datetime
    username: str | None


class PointStatusUpdate(BaseModel):
    """Moderation decision."""

    status: PointStatus


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
