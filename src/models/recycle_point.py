"""Recycle point models."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import PointStatus
from src.models.mixins import CreatedAtMixin


class RecyclePoint(Base, CreatedAtMixin):
    """A user-submitted drop-off location awaiting or past moderation."""

    __tablename__ = "recycle_points"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # WGS84 degrees
    longitude = Column(Float, nullable=False)
    latitude = Column(Float, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    status = Column(
        String(20), nullable=False, default=PointStatus.PENDING.value, index=True
    )  # "pending" | "approved" | "rejected"

    # Relationships
    category_links = relationship(
        "PointCategory",
        back_populates="point",
        cascade="all, delete-orphan",
        order_by="PointCategory.id",
    )

    def category_refs(self) -> list[tuple[int, str]]:
        """Distinct (id, name) pairs of the point's categories, in insertion order."""
        seen: dict[int, str] = {}
        for link in self.category_links:
            seen.setdefault(link.category_id, link.category.name)
        return list(seen.items())


class PointCategory(Base):
    """Junction row linking a point to one of its categories."""

    __tablename__ = "point_categories"

    id = Column(Integer, primary_key=True, index=True)
    point_id = Column(Integer, ForeignKey("recycle_points.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    # Relationships
    point = relationship("RecyclePoint", back_populates="category_links")
    category = relationship("Category")
