"""Watchlist domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class WatchlistItem:
    """A symbol an account is watching."""

    account_id: str
    symbol: str
    company_name: Optional[str] = None
    added_at: Optional[datetime] = None
