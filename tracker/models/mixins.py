"""Mixins for SQLAlchemy models."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String, func


def new_id() -> str:
    """Generate a fresh primary key."""
    return uuid4().hex


class IdMixin:
    """Mixin to add a string primary key generated by the application."""

    id = Column(String(36), primary_key=True, index=True, default=new_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
