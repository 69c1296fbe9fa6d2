"""Product SQLAlchemy model"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, String, Text, DateTime

from .base import Base


class Product(Base):
    """Product master data.

    Products are maintained by the catalog; the orders service only checks
    that a referenced product exists.
    """
    __tablename__ = "product"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid4()))
    name = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self):
        """Convert product to dictionary representation"""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
