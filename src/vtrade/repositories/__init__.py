"""Repository layer - data access abstractions and implementations."""

from vtrade.repositories.protocols import (
    AccountRepository,
    OrderRepository,
    WatchlistRepository,
    UnitOfWork,
)

__all__ = [
    "AccountRepository",
    "OrderRepository",
    "WatchlistRepository",
    "UnitOfWork",
]
