"""Enumerations for domain models."""

from enum import Enum


class OrderSide(str, Enum):
    """Direction of an order."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """Order types accepted at submission. Both execute immediately."""

    MARKET = "MARKET"
    LIMIT = "LIMIT"  # recorded only; no book or matching


class OrderStatus(str, Enum):
    """Order states. Only EXECUTED is produced by the executor."""

    EXECUTED = "EXECUTED"
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
