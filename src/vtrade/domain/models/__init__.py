"""Domain models package."""

from vtrade.domain.models.enums import OrderSide, OrderType, OrderStatus
from vtrade.domain.models.account import Account, Holding
from vtrade.domain.models.order import Order
from vtrade.domain.models.watchlist import WatchlistItem

__all__ = [
    "OrderSide",
    "OrderType",
    "OrderStatus",
    "Account",
    "Holding",
    "Order",
    "WatchlistItem",
]
