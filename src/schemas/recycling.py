"""Recycling event and statistics schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.services.recycling_service import normalize_quantity


class RecyclingEventCreate(BaseModel):
    """Record that the current user recycled some categories at a point."""

    model_config = ConfigDict(populate_by_name=True)

    point_id: int = Field(..., alias="pointId")
    category_ids: list[int] = Field(..., alias="categoryIds", min_length=1)
    quantity: int = 1

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, value: Any) -> int:
        """Accept anything; unusable values fall back to 1."""
        return normalize_quantity(value)


class RecordedEventsResponse(BaseModel):
    """Acknowledgement of a recorded event batch."""

    message: str
    count: int


class RecyclingEventResponse(BaseModel):
    """Ledger row joined with display names."""

    id: int
    created_at: datetime
    quantity: int
    point_name: str
    category_name: str
    username: str | None


class GroupStats(BaseModel):
    """Event count and total quantity for one point or category."""

    id: int
    name: str
    events_count: int
    total_quantity: int


class RecyclingStatsResponse(BaseModel):
    """Ledger aggregated by point and by category."""

    model_config = ConfigDict(populate_by_name=True)

    by_point: list[GroupStats] = Field(..., alias="byPoint")
    by_category: list[GroupStats] = Field(..., alias="byCategory")
