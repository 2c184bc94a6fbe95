"""Category model."""

from sqlalchemy import Column, String

from tracker.database import Base
from tracker.models.mixins import IdMixin, TimestampMixin

UNSORTED_ID = "unsorted"
UNSORTED_NAME = "Unsorted"
UNSORTED_COLOR = "#95a5a6"
UNSORTED_ICON = "box"


class Category(Base, IdMixin, TimestampMixin):
    """Category model for grouping items."""

    __tablename__ = "categories"

    name = Column(String(255), nullable=False)
    icon = Column(String(50), nullable=False, default="box")
    color = Column(String(20), nullable=False, default="blue")

    @property
    def is_unsorted(self) -> bool:
        """Check if this is the Unsorted sentinel category."""
        return self.id == UNSORTED_ID
