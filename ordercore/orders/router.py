"""Orders API Router - draft order creation and item attachment.

OrderError subclasses raised by the service are turned into responses by the
exception handler registered in main.py.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import OrderConfig, Settings, get_settings
from ..database import get_db
from .repository import SqlAlchemyOrderStore
from .schemas import (
    DraftOrderCreate,
    ErrorResponse,
    OrderItemCreate,
    OrderItemResponse,
    OrderResponse,
)
from .service import OrderService


router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_config(settings: Settings = Depends(get_settings)) -> OrderConfig:
    return OrderConfig.from_settings(settings)


def get_order_service(
    db: Session = Depends(get_db),
    config: OrderConfig = Depends(get_order_config)
) -> OrderService:
    """Build an OrderService bound to the request's database session."""
    return OrderService(SqlAlchemyOrderStore(db), config)


@router.post(
    "",
    response_model=OrderResponse,
    status_code=201,
    summary="Create draft order",
    description="""
    Create a new order in DRAFT status.

    **Buyer organization** is resolved in order: request body,
    `SEED_BUYER_ORG_ID` setting, then `00000000-0000-0000-0000-000000000000`.
    It is not validated until authorization is in place.
    """
)
def create_draft_order(
    payload: Optional[DraftOrderCreate] = None,
    service: OrderService = Depends(get_order_service)
) -> OrderResponse:
    buyer_organization_id = payload.buyer_organization_id if payload else None
    order = service.create_draft_order(buyer_organization_id)
    return OrderResponse.model_validate(order)


@router.post(
    "/{order_id}/items",
    response_model=OrderItemResponse,
    status_code=201,
    summary="Add item to draft order",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input, order not DRAFT, or unknown product"},
        404: {"model": ErrorResponse, "description": "Order not found"},
    },
    description="""
    Attach a product line to a DRAFT order.

    **Checks (in order):** product_id, quantity, order exists (404),
    order is DRAFT (400), product exists (400).

    No pricing or inventory checks are made.
    """
)
def add_item_to_draft_order(
    order_id: str,
    payload: OrderItemCreate,
    service: OrderService = Depends(get_order_service)
) -> OrderItemResponse:
    item = service.add_item_to_draft_order(
        order_id=order_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    return OrderItemResponse.model_validate(item)
