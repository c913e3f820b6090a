"""Recycling event model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer

from src.database import Base
from src.models.mixins import CreatedAtMixin


class RecyclingEvent(Base, CreatedAtMixin):
    """Append-only ledger row: a user recycled a category at a point."""

    __tablename__ = "recycling_events"
    __table_args__ = (CheckConstraint("quantity > 0", name="ck_recycling_events_quantity"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    point_id = Column(Integer, ForeignKey("recycle_points.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
