"""Watchlist repository protocol."""

from typing import Protocol, Optional

from vtrade.domain.models import WatchlistItem


class WatchlistRepository(Protocol):
    """Interface for per-account watchlist data access."""

    def get(self, account_id: str, symbol: str) -> Optional[WatchlistItem]:
        ...

    def list_by_account(self, account_id: str) -> list[WatchlistItem]:
        """List watched symbols, oldest first."""
        ...

    def add(self, item: WatchlistItem) -> None:
        ...

    def remove(self, account_id: str, symbol: str) -> bool:
        """Remove a symbol; returns False if it was not present."""
        ...
