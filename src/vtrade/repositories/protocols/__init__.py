"""Repository protocol definitions (interfaces)."""

from vtrade.repositories.protocols.account_repo import AccountRepository
from vtrade.repositories.protocols.order_repo import OrderRepository
from vtrade.repositories.protocols.watchlist_repo import WatchlistRepository
from vtrade.repositories.protocols.unit_of_work import UnitOfWork

__all__ = [
    "AccountRepository",
    "OrderRepository",
    "WatchlistRepository",
    "UnitOfWork",
]
