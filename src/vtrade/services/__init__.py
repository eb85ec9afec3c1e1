"""Business logic services."""

from vtrade.services.ledger_service import LedgerService, normalize_symbol
from vtrade.services.order_log import OrderLog, DEFAULT_HISTORY_LIMIT
from vtrade.services.order_executor import (
    OrderExecutor,
    OrderReceipt,
    AccountLockRegistry,
)
from vtrade.services.market_data_service import MarketDataService
from vtrade.services.portfolio_service import PortfolioService
from vtrade.services.watchlist_service import WatchlistService
from vtrade.services.account_service import AccountService

__all__ = [
    "LedgerService",
    "normalize_symbol",
    "OrderLog",
    "DEFAULT_HISTORY_LIMIT",
    "OrderExecutor",
    "OrderReceipt",
    "AccountLockRegistry",
    "MarketDataService",
    "PortfolioService",
    "WatchlistService",
    "AccountService",
]
