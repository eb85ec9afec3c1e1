"""View models for quotes and portfolio outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Quote:
    """Market quote for a symbol as reported by a price source."""

    symbol: str
    price: Decimal
    as_of: datetime
    company_name: Optional[str] = None
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
    previous_close: Optional[Decimal] = None
    volume: Optional[int] = None
    stale: bool = False

    @property
    def change(self) -> Optional[Decimal]:
        if self.previous_close is None:
            return None
        return self.price - self.previous_close

    @property
    def change_percent(self) -> Optional[Decimal]:
        if not self.previous_close:
            return None
        return ((self.price - self.previous_close) / self.previous_close * 100).quantize(
            Decimal("0.01")
        )


@dataclass
class SymbolMatch:
    """A listed instrument matching a search query."""

    symbol: str
    company_name: Optional[str] = None
    exchange: Optional[str] = None


@dataclass
class PositionView:
    """A holding enriched with the current market price."""

    symbol: str
    quantity: int
    average_cost: Decimal
    invested: Decimal
    company_name: Optional[str] = None
    current_price: Optional[Decimal] = None
    market_value: Optional[Decimal] = None
    unrealized_gain: Optional[Decimal] = None
    unrealized_gain_pct: Optional[Decimal] = None


@dataclass
class PortfolioSummaryView:
    """
    Account-level totals.

    market_value and total_equity are None when any holding lacks a price.
    """

    cash_balance: Decimal
    invested: Decimal
    holdings_count: int
    market_value: Optional[Decimal] = None
    total_equity: Optional[Decimal] = None
    unpriced_symbols: list[str] = field(default_factory=list)
