"""Order service - business logic for draft order operations.

Rules enforced when attaching an item (checked in this order):
- product_id is a non-empty string
- quantity is a number greater than 0
- the order exists
- the order status is DRAFT
- the product exists

No pricing or inventory checks are made.
"""

import logging
import math
from decimal import Decimal
from typing import Any, Optional, Tuple

from ..config import OrderConfig
from ..models.order import Order, OrderItem
from ..observability import metrics
from .errors import BadRequestError, ConflictError, NotFoundError, OrderError
from .ports import OrderStorePort
from .status import OrderStatus, is_draft

logger = logging.getLogger(__name__)

PLACEHOLDER_BUYER_ORG_ID = "00000000-0000-0000-0000-000000000000"

PRODUCT_ID_REQUIRED = "productId is required and must be a string"
QUANTITY_INVALID = "quantity must be a number greater than 0"
QUANTITY_NOT_WHOLE = "quantity must be a whole number"
ORDER_NOT_FOUND = "Order not found"
ORDER_NOT_DRAFT = "Items can only be added to orders with status DRAFT"
PRODUCT_NOT_FOUND = "Product not found"


def resolve_buyer_organization_id(
    buyer_organization_id: Optional[str],
    config: OrderConfig
) -> Tuple[str, str]:
    """Pick the buyer organization for a new draft order.

    Args:
        buyer_organization_id: Value supplied by the caller, may be None or empty
        config: Order configuration with the fallback buyer

    Returns:
        Tuple of (buyer id, source) where source is argument|config|placeholder
    """
    if buyer_organization_id:
        return buyer_organization_id, "argument"
    if config.default_buyer_organization_id:
        return config.default_buyer_organization_id, "config"
    return PLACEHOLDER_BUYER_ORG_ID, "placeholder"


def validate_product_id(product_id: Any) -> str:
    if not product_id or not isinstance(product_id, str):
        raise BadRequestError(PRODUCT_ID_REQUIRED)
    return product_id


def validate_quantity(quantity: Any) -> int:
    """Check quantity and return it as an int.

    bool is rejected even though it subclasses int. NaN and infinities are
    rejected as not being numbers greater than 0.

    Raises:
        BadRequestError: If quantity is missing, non-numeric, <= 0 or fractional
    """
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float, Decimal)):
        raise BadRequestError(QUANTITY_INVALID)

    if isinstance(quantity, Decimal):
        if not quantity.is_finite():
            raise BadRequestError(QUANTITY_INVALID)
    elif isinstance(quantity, float) and not math.isfinite(quantity):
        raise BadRequestError(QUANTITY_INVALID)

    if quantity <= 0:
        raise BadRequestError(QUANTITY_INVALID)

    if quantity != int(quantity):
        raise BadRequestError(QUANTITY_NOT_WHOLE)

    return int(quantity)


class OrderService:
    """Service for draft order operations."""

    def __init__(self, store: OrderStorePort, config: OrderConfig):
        self.store = store
        self.config = config

    def create_draft_order(self, buyer_organization_id: Optional[str] = None) -> Order:
        """Create a new order in DRAFT status.

        The buyer organization is taken from the argument, then from
        configuration, then the all-zero placeholder. It is not validated
        until authorization is in place.

        Args:
            buyer_organization_id: Buyer organization, optional

        Returns:
            The created Order

        Raises:
            SQLAlchemyError: Store failures propagate unchanged
        """
        buyer_id, source = resolve_buyer_organization_id(buyer_organization_id, self.config)

        order = self.store.insert_order(
            status=OrderStatus.DRAFT.value,
            buyer_organization_id=buyer_id,
        )

        metrics.draft_orders_created_total.labels(buyer_source=source).inc()
        logger.info(
            f"Draft order created: {order.id}",
            extra={"order_id": order.id, "buyer_source": source}
        )
        return order

    def add_item_to_draft_order(
        self,
        order_id: str,
        product_id: Any,
        quantity: Any
    ) -> OrderItem:
        """Add an item to an existing draft order.

        Args:
            order_id: Order to attach the item to
            product_id: Product being ordered
            quantity: Number of units, must be a whole number > 0

        Returns:
            The created OrderItem

        Raises:
            BadRequestError: Invalid product_id/quantity, or unknown product (400)
            NotFoundError: Order does not exist (404)
            ConflictError: Order is not in DRAFT status (400)
        """
        try:
            product_id = validate_product_id(product_id)
            quantity = validate_quantity(quantity)

            order = self.store.find_order_by_id(order_id)
            if not order:
                raise NotFoundError(ORDER_NOT_FOUND)

            if not is_draft(order.status):
                raise ConflictError(ORDER_NOT_DRAFT)

            product = self.store.find_product_by_id(product_id)
            if not product:
                raise BadRequestError(PRODUCT_NOT_FOUND)
        except OrderError as e:
            metrics.order_items_rejected_total.labels(kind=e.kind.value).inc()
            logger.warning(
                f"Item rejected for order {order_id}: {e.message}",
                extra={"order_id": order_id, "error_kind": e.kind.value}
            )
            raise

        # Status was read above without a lock; a concurrent status change
        # between that read and this insert is not detected.
        item = self.store.insert_order_item(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
        )

        metrics.order_items_added_total.inc()
        logger.info(
            f"Item {item.id} added to order {order_id}",
            extra={"order_id": order_id, "product_id": product_id, "quantity": quantity}
        )
        return item
