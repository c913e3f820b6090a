"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, func


class CreatedAtMixin:
    """Mixin to add a server-populated created_at column."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
