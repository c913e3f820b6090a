"""Point registry and moderation service."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from src.models.category import Category
from src.models.enums import PointStatus
from src.models.recycle_point import PointCategory, RecyclePoint
from src.models.user import User
from src.services.errors import NotFound, PersistenceError, ValidationError
from src.services.geo import haversine_distance

logger = logging.getLogger(__name__)


class PointService:
    """Service for recycle point submission, listing and moderation."""

    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> list[Category]:
        """Return the category reference table."""
        return self.db.query(Category).order_by(Category.id).all()

    def list_approved_points(self, category_id: int | None = None) -> list[RecyclePoint]:
        """Return publicly visible points.

        Only approved points with at least one category are listed. When
        ``category_id`` is given, points not tagged with it are left out, but
        each listed point still reports its full category set.
        """
        query = (
            self.db.query(RecyclePoint)
            .options(selectinload(RecyclePoint.category_links).joinedload(PointCategory.category))
            .filter(
                RecyclePoint.status == PointStatus.APPROVED.value,
                RecyclePoint.category_links.any(),
            )
        )
        if category_id is not None:
            query = query.filter(
                RecyclePoint.category_links.any(PointCategory.category_id == category_id)
            )
        return query.order_by(RecyclePoint.id).all()

    def nearest_approved_point(
        self,
        lat: float,
        lng: float,
        category_id: int | None = None,
    ) -> tuple[RecyclePoint, float] | None:
        """Find the approved point closest to (lat, lng).

        Returns the point and its distance in metres, or None when nothing matches.
        """
        best: tuple[RecyclePoint, float] | None = None
        for point in self.list_approved_points(category_id):
            distance = haversine_distance(lat, lng, point.latitude, point.longitude)
            if best is None or distance < best[1]:
                best = (point, distance)
        return best

    def submit_point(
        self,
        user_id: int,
        name: str,
        description: str | None,
        lat: float,
        lng: float,
        category_ids: list[int],
    ) -> RecyclePoint:
        """Store a new point as pending together with its category links.

        The point and every link are written in one transaction; if any insert
        fails nothing is kept.
        """
        if not name or lat is None or lng is None or not category_ids:
            raise ValidationError("Missing fields")

        point = RecyclePoint(
            name=name,
            description=description,
            latitude=lat,
            longitude=lng,
            user_id=user_id,
            status=PointStatus.PENDING.value,
        )
        point.category_links = [PointCategory(category_id=cid) for cid in category_ids]
        self.db.add(point)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Failed to submit point '{name}' for user {user_id}")
            raise PersistenceError("Database error") from e

        self.db.refresh(point)
        logger.info(f"User {user_id} submitted point {point.id} with categories {category_ids}")
        return point

    def list_all_points(self) -> list[tuple[RecyclePoint, str | None]]:
        """Return every point with its submitter's username, newest first."""
        return (
            self.db.query(RecyclePoint, User.username)
            .outerjoin(User, RecyclePoint.user_id == User.id)
            .order_by(RecyclePoint.created_at.desc(), RecyclePoint.id.desc())
            .all()
        )

    def set_status(self, point_id: int, new_status: PointStatus) -> RecyclePoint:
        """Move a point through moderation.

        Pending points can become approved or rejected. Decided points stay
        decided; repeating the current status succeeds without a change.
        """
        point = self.db.get(RecyclePoint, point_id)
        if not point:
            raise NotFound("Point not found")

        current = PointStatus(point.status)
        if not current.can_transition_to(new_status):
            raise ValidationError(
                f"Cannot change status from {current.value} to {new_status.value}"
            )
        if current == new_status:
            return point

        point.status = new_status.value
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Failed to set point {point_id} to {new_status.value}")
            raise PersistenceError("Database error") from e

        logger.info(f"Point {point_id}: {current.value} -> {new_status.value}")
        return point
