"""SQLAlchemy models."""

from src.models.category import Category
from src.models.recycle_point import PointCategory, RecyclePoint
from src.models.recycling_event import RecyclingEvent
from src.models.user import User

__all__ = [
    "User",
    "Category",
    "RecyclePoint",
    "PointCategory",
    "RecyclingEvent",
]
