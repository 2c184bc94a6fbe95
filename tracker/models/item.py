"""Item model."""

from sqlalchemy import Boolean, Column, ForeignKey, String

from tracker.database import Base
from tracker.models.mixins import IdMixin, TimestampMixin


class Item(Base, IdMixin, TimestampMixin):
    """Item model for the daily checklist."""

    __tablename__ = "items"

    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    name = Column(String(500), nullable=False)
    checked = Column(Boolean, nullable=False, default=False, index=True)
