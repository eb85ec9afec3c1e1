"""Pydantic schemas for order endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from vtrade.domain.models.enums import OrderSide, OrderType, OrderStatus


class OrderCreateRequest(BaseModel):
    """
    Request schema for placing an order.

    price is the quote the client saw; when omitted the server looks up
    the current quote.
    """

    symbol: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    side: OrderSide = Field(..., description="BUY or SELL")
    quantity: int = Field(..., gt=0, strict=True, description="Whole number of shares")
    price: Optional[Decimal] = Field(default=None, gt=0, description="Execution price")
    order_type: OrderType = Field(default=OrderType.MARKET)

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("side", "order_type", mode="before")
    @classmethod
    def uppercase_enum(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


class OrderResponse(BaseModel):
    """Response schema for a single order."""

    model_config = {"from_attributes": True}

    order_id: str
    account_id: str
    symbol: str
    side: OrderSide
    order_type: OrderType
    quantity: int
    execution_price: Decimal
    total_amount: Decimal
    status: OrderStatus
    created_at: datetime


class OrderPlacedResponse(BaseModel):
    """Response schema for a placed order."""

    message: str
    order: OrderResponse
    new_balance: Decimal
