"""Pydantic schemas for the Orders API"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DraftOrderCreate(BaseModel):
    """Request body for POST /orders (body may be omitted entirely)"""
    buyer_organization_id: Optional[str] = Field(
        None,
        description="Buyer organization; falls back to SEED_BUYER_ORG_ID, then the all-zero id"
    )

    model_config = ConfigDict(extra='forbid')


class OrderItemCreate(BaseModel):
    """Request body for POST /orders/{order_id}/items

    Fields are deliberately loose; the service validates them so that
    product_id errors are always reported before quantity errors.
    """
    product_id: Any = Field(None, description="Product to add (string id)")
    quantity: Any = Field(None, description="Whole number greater than 0")


class OrderResponse(BaseModel):
    """Response schema for an order"""
    id: str
    status: str
    buyer_organization_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemResponse(BaseModel):
    """Response schema for an order item"""
    id: str
    order_id: str
    product_id: str
    quantity: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    """Error body returned for order errors"""
    error: str
    message: str
