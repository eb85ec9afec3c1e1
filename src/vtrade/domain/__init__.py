"""Domain layer - pure business models with no external dependencies."""

from vtrade.domain.models import (
    Account,
    Holding,
    Order,
    WatchlistItem,
    OrderSide,
    OrderType,
    OrderStatus,
)

__all__ = [
    "Account",
    "Holding",
    "Order",
    "WatchlistItem",
    "OrderSide",
    "OrderType",
    "OrderStatus",
]
