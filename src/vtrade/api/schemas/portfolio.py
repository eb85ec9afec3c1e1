"""Pydantic schemas for portfolio endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class HoldingResponse(BaseModel):
    """A holding with current market figures (None when no price is available)."""

    model_config = {"from_attributes": True}

    symbol: str
    quantity: int
    average_cost: Decimal
    invested: Decimal
    company_name: Optional[str] = None
    current_price: Optional[Decimal] = None
    market_value: Optional[Decimal] = None
    unrealized_gain: Optional[Decimal] = None
    unrealized_gain_pct: Optional[Decimal] = None


class PortfolioSummaryResponse(BaseModel):
    """Response schema for portfolio totals."""

    model_config = {"from_attributes": True}

    cash_balance: Decimal
    invested: Decimal
    holdings_count: int
    market_value: Optional[Decimal] = None
    total_equity: Optional[Decimal] = None
    unpriced_symbols: list[str] = []
