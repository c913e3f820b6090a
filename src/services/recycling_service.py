"""Recycling event ledger and statistics service."""

import logging
import math
import re
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.category import Category
from src.models.recycle_point import RecyclePoint
from src.models.recycling_event import RecyclingEvent
from src.models.user import User
from src.services.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

RECENT_EVENTS_LIMIT = 200

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def normalize_quantity(value: Any) -> int:
    """Coerce a client-supplied quantity to a positive integer.

    Strings are read up to the first non-digit ("3 bags" -> 3). Anything that
    does not yield a number above zero becomes 1.
    """
    quantity: int | None = None
    if isinstance(value, bool):
        quantity = None
    elif isinstance(value, int):
        quantity = value
    elif isinstance(value, float):
        quantity = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            quantity = int(match.group(1))

    if quantity is None or quantity <= 0:
        return 1
    return quantity


class RecyclingService:
    """Service for recording recycling events and aggregating them."""

    def __init__(self, db: Session):
        self.db = db

    def record_events(
        self,
        user_id: int | None,
        point_id: int,
        category_ids: list[int],
        quantity: Any = None,
    ) -> list[RecyclingEvent]:
        """Append one ledger row per category, all sharing point and quantity.

        All rows are written in one transaction; a single failing insert
        discards the whole batch.
        """
        if not point_id or not category_ids:
            raise ValidationError("Missing point or waste category")

        safe_quantity = normalize_quantity(quantity)
        events = [
            RecyclingEvent(
                user_id=user_id,
                point_id=point_id,
                category_id=category_id,
                quantity=safe_quantity,
            )
            for category_id in category_ids
        ]
        self.db.add_all(events)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Failed to record recycling events at point {point_id}")
            raise PersistenceError("Could not save the recycling event") from e

        logger.info(
            f"User {user_id} recorded {len(events)} event(s) at point {point_id} "
            f"(quantity {safe_quantity})"
        )
        return events

    def list_recent_events(
        self,
        category_id: int | None = None,
        limit: int = RECENT_EVENTS_LIMIT,
    ) -> list[dict[str, Any]]:
        """Return the newest ledger rows joined with point, category and user names."""
        query = (
            self.db.query(
                RecyclingEvent.id,
                RecyclingEvent.created_at,
                RecyclingEvent.quantity,
                RecyclePoint.name.label("point_name"),
                Category.name.label("category_name"),
                User.username,
            )
            .select_from(RecyclingEvent)
            .join(RecyclePoint, RecyclePoint.id == RecyclingEvent.point_id)
            .join(Category, Category.id == RecyclingEvent.category_id)
            .outerjoin(User, User.id == RecyclingEvent.user_id)
        )
        if category_id is not None:
            query = query.filter(RecyclingEvent.category_id == category_id)

        rows = (
            query.order_by(RecyclingEvent.created_at.desc(), RecyclingEvent.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def aggregate_by_point(self, category_id: int | None = None) -> list[dict[str, Any]]:
        """Event count and summed quantity per point, busiest first."""
        return self._aggregate(RecyclePoint, RecyclingEvent.point_id, category_id)

    def aggregate_by_category(self, category_id: int | None = None) -> list[dict[str, Any]]:
        """Event count and summed quantity per category, busiest first."""
        return self._aggregate(Category, RecyclingEvent.category_id, category_id)

    def _aggregate(self, model, foreign_key, category_id: int | None) -> list[dict[str, Any]]:
        events_count = func.count(RecyclingEvent.id).label("events_count")
        total_quantity = func.coalesce(func.sum(RecyclingEvent.quantity), 0).label(
            "total_quantity"
        )
        query = (
            self.db.query(model.id, model.name, events_count, total_quantity)
            .select_from(RecyclingEvent)
            .join(model, model.id == foreign_key)
        )
        if category_id is not None:
            query = query.filter(RecyclingEvent.category_id == category_id)

        rows = (
            query.group_by(model.id, model.name)
            .order_by(events_count.desc(), model.id)
            .all()
        )
        return [
            {
                "id": row.id,
                "name": row.name,
                "events_count": int(row.events_count),
                "total_quantity": int(row.total_quantity),
            }
            for row in rows
        ]
