"""API routers package."""

from vtrade.api.routers.auth import router as auth_router
from vtrade.api.routers.orders import router as orders_router
from vtrade.api.routers.portfolio import router as portfolio_router
from vtrade.api.routers.watchlist import router as watchlist_router
from vtrade.api.routers.stocks import router as stocks_router

__all__ = [
    "auth_router",
    "orders_router",
    "portfolio_router",
    "watchlist_router",
    "stocks_router",
]
