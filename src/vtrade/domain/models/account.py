"""Account and Holding domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Holding:
    """
    Accumulated position in one symbol.

    quantity is always positive; a fully sold holding is removed from
    the account rather than kept at zero.
    """

    symbol: str
    quantity: int
    average_cost: Decimal

    @property
    def cost_basis(self) -> Decimal:
        """Total amount paid for the shares currently held."""
        return self.average_cost * self.quantity


@dataclass
class Account:
    """
    Trading account: simulated cash plus holdings keyed by symbol.

    Only the order executor mutates an account after registration.
    version tracks committed mutations for optimistic concurrency.
    """

    account_id: str
    name: str
    email: str
    cash_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    holdings: dict[str, Holding] = field(default_factory=dict)
    password_hash: Optional[str] = None
    version: Optional[int] = None
    created_at: Optional[datetime] = None

    def get_holding(self, symbol: str) -> Optional[Holding]:
        """Return the holding for a symbol, if any."""
        return self.holdings.get(symbol)
