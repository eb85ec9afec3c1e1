"""Pydantic schemas for stock quote endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class QuoteResponse(BaseModel):
    """Response schema for a market quote."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    price: Decimal
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
    previous_close: Optional[Decimal] = None
    volume: Optional[int] = None
    change: Optional[Decimal] = None
    change_percent: Optional[Decimal] = None
    as_of: datetime
    stale: bool = False


class SymbolMatchResponse(BaseModel):
    """Response schema for one symbol search result."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    exchange: Optional[str] = None
