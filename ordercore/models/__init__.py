"""SQLAlchemy Models for ordercore"""

from .base import Base
from .order import Order, OrderItem
from .product import Product

__all__ = [
    "Base",
    "Order",
    "OrderItem",
    "Product",
]
