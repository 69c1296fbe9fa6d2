"""SQLAlchemy implementation of the order store port."""

from typing import Optional

from sqlalchemy.orm import Session

from ..models.order import Order, OrderItem
from ..models.product import Product
from .ports import OrderStorePort


class SqlAlchemyOrderStore(OrderStorePort):
    """Order store backed by a SQLAlchemy session.

    Each insert commits on its own. Database errors are not caught here and
    reach the caller unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_order_by_id(self, order_id: str) -> Optional[Order]:
        return self.db.query(Order).filter(Order.id == order_id).first()

    def find_product_by_id(self, product_id: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def insert_order(self, status: str, buyer_organization_id: str) -> Order:
        order = Order(
            status=status,
            buyer_organization_id=buyer_organization_id,
        )
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def insert_order_item(self, order_id: str, product_id: str, quantity: int) -> OrderItem:
        item = OrderItem(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item
