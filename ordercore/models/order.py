"""Order and OrderItem models for ordercore

An Order is created in DRAFT status and collects OrderItem rows, each linking
a quantity of one Product to the order.
"""

from datetime import datetime, timezone
from typing import Dict, Any
from uuid import uuid4

from sqlalchemy import (
    Column, String, Text, DateTime, Integer, Enum as SQLEnum,
    ForeignKey, Index
)
from sqlalchemy.orm import relationship

from .base import Base
from ..orders.status import OrderStatus


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(Base):
    """Order header.

    Lifecycle:
    1. Created by the orders service (status=DRAFT)
    2. Line items attached while DRAFT
    3. Submitted/confirmed/cancelled by downstream flows
    """

    __tablename__ = 'order'

    id = Column(String(36), primary_key=True, default=_new_id)

    status = Column(
        SQLEnum(
            *[s.value for s in OrderStatus],
            name='order_status'
        ),
        nullable=False,
        default=OrderStatus.DRAFT.value,
        comment="DRAFT → SUBMITTED → CONFIRMED, or CANCELLED"
    )

    buyer_organization_id = Column(
        Text,
        nullable=False,
        comment="Organization placing the order; never NULL"
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow
    )

    __table_args__ = (
        Index('ix_order_buyer_status', 'buyer_organization_id', 'status'),
    )

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.created_at"
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for API responses."""
        return {
            'id': self.id,
            'status': self.status,
            'buyer_organization_id': self.buyer_organization_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Order(id={self.id}, status='{self.status}')>"


class OrderItem(Base):
    """Line item: a quantity of one product on one order.

    Rows are immutable once written.
    """

    __tablename__ = 'order_item'

    id = Column(String(36), primary_key=True, default=_new_id)

    order_id = Column(
        String(36),
        ForeignKey('order.id', ondelete='CASCADE'),
        nullable=False
    )
    product_id = Column(
        String(64),
        ForeignKey('product.id', ondelete='RESTRICT'),
        nullable=False
    )
    quantity = Column(
        Integer,
        nullable=False,
        comment="Quantity ordered, always > 0"
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow
    )

    __table_args__ = (
        Index('ix_order_item_order', 'order_id'),
    )

    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for API responses."""
        return {
            'id': self.id,
            'order_id': self.order_id,
            'product_id': self.product_id,
            'quantity': self.quantity,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
