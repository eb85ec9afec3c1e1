"""Order domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from vtrade.domain.models.enums import OrderSide, OrderType, OrderStatus


@dataclass(frozen=True)
class Order:
    """
    Immutable record of one executed buy or sell.

    total_amount is fixed at execution time (quantity * execution_price)
    and is never recomputed.
    """

    order_id: str
    account_id: str
    symbol: str
    side: OrderSide
    quantity: int
    execution_price: Decimal
    total_amount: Decimal
    created_at: datetime
    status: OrderStatus = OrderStatus.EXECUTED
    order_type: OrderType = OrderType.MARKET

    def __post_init__(self) -> None:
        # frozen dataclass: coerce through object.__setattr__
        if isinstance(self.side, str):
            object.__setattr__(self, "side", OrderSide(self.side))
        if isinstance(self.status, str):
            object.__setattr__(self, "status", OrderStatus(self.status))
        if isinstance(self.order_type, str):
            object.__setattr__(self, "order_type", OrderType(self.order_type))
