"""Order placement and history endpoints."""

from fastapi import APIRouter, Depends, Query

from vtrade.api.deps import (
    get_current_account_id,
    get_market_data_service,
    get_order_executor,
    get_order_log,
)
from vtrade.api.schemas import OrderCreateRequest, OrderPlacedResponse, OrderResponse
from vtrade.services import MarketDataService, OrderExecutor, OrderLog
from vtrade.services.order_log import DEFAULT_HISTORY_LIMIT

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderPlacedResponse, status_code=201)
def place_order(
    data: OrderCreateRequest,
    account_id: str = Depends(get_current_account_id),
    executor: OrderExecutor = Depends(get_order_executor),
    market_data: MarketDataService = Depends(get_market_data_service),
) -> OrderPlacedResponse:
    """
    Place a buy or sell order, executed immediately.

    Without a price the current quote is used; if none can be sourced the
    request fails with 503 and nothing is executed.
    """
    price = data.price
    if price is None:
        price = market_data.get_quote(data.symbol).price

    receipt = executor.place_order(
        account_id=account_id,
        symbol=data.symbol,
        side=data.side,
        quantity=data.quantity,
        price=price,
        order_type=data.order_type,
    )
    order = receipt.order
    return OrderPlacedResponse(
        message=f"{order.side.value} order executed: {order.quantity} {order.symbol} @ {order.execution_price}",
        order=OrderResponse.model_validate(order),
        new_balance=receipt.new_balance,
    )


@router.get("", response_model=list[OrderResponse])
def list_orders(
    limit: int = Query(DEFAULT_HISTORY_LIMIT, ge=1, description="Maximum orders to return"),
    account_id: str = Depends(get_current_account_id),
    order_log: OrderLog = Depends(get_order_log),
) -> list[OrderResponse]:
    """List the account's orders, newest first."""
    orders = order_log.list_by_account(account_id, limit=limit)
    return [OrderResponse.model_validate(o) for o in orders]
