"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from vtrade.config.settings import get_settings
from vtrade.core.exceptions import AuthenticationError
from vtrade.core.security import decode_access_token
from vtrade.providers import (
    MarketDataProvider,
    StubMarketDataProvider,
    YFinanceProvider,
)
from vtrade.repositories.sqlalchemy import SqlAlchemyUnitOfWork
from vtrade.repositories.sqlalchemy.database import get_db
from vtrade.services import (
    AccountService,
    LedgerService,
    MarketDataService,
    OrderExecutor,
    OrderLog,
    PortfolioService,
    WatchlistService,
)

# auto_error=False: get_current_account_id reports missing credentials
security = HTTPBearer(auto_error=False)

# One market data service per process so the quote cache is shared
_market_data_service: Optional[MarketDataService] = None


def get_unit_of_work(db: Session = Depends(get_db)) -> SqlAlchemyUnitOfWork:
    """Provide a unit of work bound to the request's session."""
    return SqlAlchemyUnitOfWork(db)


def get_market_provider() -> MarketDataProvider:
    """Provide the configured MarketDataProvider."""
    if get_settings().market_data_provider == "stub":
        return StubMarketDataProvider()
    return YFinanceProvider()


def get_market_data_service() -> MarketDataService:
    """Provide the process-wide MarketDataService instance."""
    global _market_data_service
    if _market_data_service is None:
        settings = get_settings()
        _market_data_service = MarketDataService(
            provider=get_market_provider(),
            cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
            fetch_timeout_seconds=settings.market_data_timeout_seconds,
        )
    return _market_data_service


def reset_market_data_service() -> None:
    """Drop the cached MarketDataService (for reconfiguration)."""
    global _market_data_service
    _market_data_service = None


def get_current_account_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Resolve the authenticated account id from the bearer token.

    Missing credentials raise AuthenticationError (401); a bad or expired
    token raises InvalidTokenError (403).
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    return decode_access_token(credentials.credentials)


def get_order_executor(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> OrderExecutor:
    """Provide OrderExecutor instance."""
    settings = get_settings()
    return OrderExecutor(
        uow=uow,
        max_conflict_retries=settings.order_conflict_retries,
        lock_timeout_seconds=settings.db_timeout_seconds,
    )


def get_order_log(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> OrderLog:
    """Provide OrderLog instance."""
    return OrderLog(uow.orders, max_limit=get_settings().order_history_max_limit)


def get_ledger_service(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(uow.accounts)


def get_portfolio_service(
    ledger_service: LedgerService = Depends(get_ledger_service),
    market_data_service: MarketDataService = Depends(get_market_data_service),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        ledger_service=ledger_service,
        market_data_service=market_data_service,
    )


def get_watchlist_service(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> WatchlistService:
    """Provide WatchlistService instance."""
    return WatchlistService(uow)


def get_account_service(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> AccountService:
    """Provide AccountService instance."""
    return AccountService(uow, starting_balance=get_settings().starting_balance)
