"""Unit of work protocol: one transaction spanning several repositories."""

from typing import Protocol

from vtrade.repositories.protocols.account_repo import AccountRepository
from vtrade.repositories.protocols.order_repo import OrderRepository
from vtrade.repositories.protocols.watchlist_repo import WatchlistRepository


class UnitOfWork(Protocol):
    """
    Groups repository writes so they persist all-or-nothing.

    Repositories only stage changes; nothing is durable until commit().
    """

    accounts: AccountRepository
    orders: OrderRepository
    watchlist: WatchlistRepository

    def commit(self) -> None:
        """Persist all staged changes atomically."""
        ...

    def rollback(self) -> None:
        """Discard all staged changes."""
        ...
