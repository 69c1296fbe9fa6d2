"""Order Store Port - interface the orders service uses to reach persistence.

Adapters implement this interface over a concrete store (SQLAlchemy in
production, in-memory fakes in tests).
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.order import Order, OrderItem
from ..models.product import Product


class OrderStorePort(ABC):
    """Port interface for the reads and writes behind the orders service.

    Example Usage:
        store = SqlAlchemyOrderStore(db)

        order = store.insert_order(status="DRAFT", buyer_organization_id="org-1")
        if store.find_product_by_id("prod-1"):
            store.insert_order_item(order.id, "prod-1", 2)
    """

    @abstractmethod
    def find_order_by_id(self, order_id: str) -> Optional[Order]:
        """Load an order by identity.

        Returns:
            The order, or None if no order has this id
        """

    @abstractmethod
    def find_product_by_id(self, product_id: str) -> Optional[Product]:
        """Load a product by identity.

        Returns:
            The product, or None if no product has this id
        """

    @abstractmethod
    def insert_order(self, status: str, buyer_organization_id: str) -> Order:
        """Persist a new order and return it with store-assigned fields populated."""

    @abstractmethod
    def insert_order_item(self, order_id: str, product_id: str, quantity: int) -> OrderItem:
        """Persist a new order item and return it with store-assigned fields populated."""
