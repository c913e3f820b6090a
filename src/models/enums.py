"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Roles a user can hold."""

    USER = "user"
    ADMIN = "admin"


class PointStatus(str, Enum):
    """Moderation status of a recycle point."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Check if moderation has already decided this point."""
        return self in (PointStatus.APPROVED, PointStatus.REJECTED)

    def can_transition_to(self, target: "PointStatus") -> bool:
        """Check if a point in this status may move to ``target``.

        Re-applying the current status is allowed so updates stay idempotent.
        """
        if target == self:
            return True
        return self == PointStatus.PENDING and target.is_terminal
