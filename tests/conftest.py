"""
Pytest configuration and fixtures for virtual trading tests.

This module provides:
- In-memory SQLite database fixtures
- Repository, unit of work and service fixtures
- Deterministic and failing market data providers
- Factory helpers for funded accounts
- FastAPI test client with an authenticated account
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from vtrade.main import app
from vtrade.api.deps import get_market_data_service
from vtrade.config.settings import Settings, set_settings, reset_settings
from vtrade.core.exceptions import UpstreamPriceUnavailableError
from vtrade.core.security import create_access_token
from vtrade.core.timezone import UTC
from vtrade.domain.models import Account, Holding
from vtrade.domain.views import Quote, SymbolMatch
from vtrade.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from vtrade.repositories.sqlalchemy import orm_models  # noqa: F401
from vtrade.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyWatchlistRepository,
    SqlAlchemyUnitOfWork,
)
from vtrade.services import (
    AccountLockRegistry,
    AccountService,
    LedgerService,
    MarketDataService,
    OrderExecutor,
    OrderLog,
    PortfolioService,
    WatchlistService,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic quotes."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def order_repo(test_session) -> SqlAlchemyOrderRepository:
    """Provide test OrderRepository."""
    return SqlAlchemyOrderRepository(test_session)


@pytest.fixture
def watchlist_repo(test_session) -> SqlAlchemyWatchlistRepository:
    """Provide test WatchlistRepository."""
    return SqlAlchemyWatchlistRepository(test_session)


@pytest.fixture
def uow(test_session) -> SqlAlchemyUnitOfWork:
    """Provide test unit of work over the shared session."""
    return SqlAlchemyUnitOfWork(test_session)


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Provides fixed quotes with no randomness. Tests may edit `prices`, mark
    symbols as failing or set `search_down` to simulate an outage.
    """

    FIXED_QUOTES = {
        "AAA": ("AAA Corp", Decimal("100.00"), Decimal("98.00")),
        "BBB": ("BBB Industries", Decimal("50.00"), Decimal("51.00")),
        "AAPL": ("Apple Inc.", Decimal("185.50"), Decimal("184.25")),
        "MSFT": ("Microsoft Corporation", Decimal("378.25"), Decimal("376.80")),
    }

    def __init__(self, as_of: datetime):
        self._as_of = as_of
        self.prices = {s: q[1] for s, q in self.FIXED_QUOTES.items()}
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self.search_down = False

    def get_quote(self, symbol: str) -> Quote:
        upper_symbol = symbol.upper()
        self.calls.append(upper_symbol)
        if upper_symbol in self.failing:
            raise ConnectionError("Network unavailable")
        if upper_symbol not in self.prices:
            raise UpstreamPriceUnavailableError(upper_symbol, "unknown symbol")
        name, _, prev_close = self.FIXED_QUOTES[upper_symbol]
        return Quote(
            symbol=upper_symbol,
            price=self.prices[upper_symbol],
            as_of=self._as_of,
            company_name=name,
            previous_close=prev_close,
            volume=1_000_000,
        )

    def search(self, query: str) -> list[SymbolMatch]:
        if self.search_down:
            raise ConnectionError("Network unavailable")
        needle = query.upper()
        return [
            SymbolMatch(symbol=symbol, company_name=row[0], exchange="NMS")
            for symbol, row in self.FIXED_QUOTES.items()
            if needle in symbol or needle in row[0].upper()
        ]


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_quote(self, symbol: str) -> Quote:
        raise ConnectionError("Network unavailable")

    def search(self, query: str) -> list[SymbolMatch]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def deterministic_provider(fixed_now) -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider(as_of=fixed_now)


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(account_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(account_repo)


@pytest.fixture
def order_log(order_repo) -> OrderLog:
    """Provide test OrderLog."""
    return OrderLog(order_repo, max_limit=500)


@pytest.fixture
def order_executor(uow) -> OrderExecutor:
    """Provide test OrderExecutor with its own lock registry."""
    return OrderExecutor(uow, max_conflict_retries=3, account_locks=AccountLockRegistry())


@pytest.fixture
def market_data_service(deterministic_provider) -> MarketDataService:
    """Provide test MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache_ttl_seconds=60,
        fetch_timeout_seconds=2,
    )


@pytest.fixture
def portfolio_service(ledger_service, market_data_service) -> PortfolioService:
    """Provide test PortfolioService."""
    return PortfolioService(
        ledger_service=ledger_service,
        market_data_service=market_data_service,
    )


@pytest.fixture
def watchlist_service(uow) -> WatchlistService:
    """Provide test WatchlistService."""
    return WatchlistService(uow)


@pytest.fixture
def account_service(uow) -> AccountService:
    """Provide test AccountService with a 100,000 starting balance."""
    return AccountService(uow, starting_balance=Decimal("100000"))


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(uow) -> Callable[..., Account]:
    """Factory for creating funded test accounts (no password)."""

    def _create_account(
        cash_balance: Decimal = Decimal("100000"),
        holdings: Optional[dict[str, tuple[int, Decimal]]] = None,
        name: Optional[str] = None,
    ) -> Account:
        suffix = uuid.uuid4().hex[:8]
        account = Account(
            account_id=str(uuid.uuid4()),
            name=name or f"Trader {suffix}",
            email=f"trader-{suffix}@example.com",
            cash_balance=cash_balance,
            holdings={
                symbol: Holding(symbol=symbol, quantity=qty, average_cost=avg)
                for symbol, (qty, avg) in (holdings or {}).items()
            },
            created_at=utc_datetime(2024, 1, 2),
        )
        uow.accounts.create(account)
        uow.commit()
        return uow.accounts.get_by_id(account.account_id)

    return _create_account


@pytest.fixture
def sample_account(account_factory) -> Account:
    """Create a sample account holding 100,000 in cash."""
    return account_factory(cash_balance=Decimal("100000"))


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_settings() -> Settings:
    """Settings for API tests: in-memory database, deterministic overview symbols."""
    settings = Settings(
        _env_file=None,
        database_url="sqlite://",
        market_data_provider="stub",
        market_overview_symbols=["AAA", "BBB", "ZZZ"],
        starting_balance=Decimal("100000"),
    )
    set_settings(settings)
    reset_database()
    yield settings
    reset_database()
    reset_settings()


@pytest.fixture
def api_market_data_service(deterministic_provider) -> MarketDataService:
    """MarketDataService used by the API under test."""
    return MarketDataService(
        provider=deterministic_provider,
        cache_ttl_seconds=60,
        fetch_timeout_seconds=2,
    )


@pytest.fixture
def client(test_engine, api_settings, api_market_data_service) -> TestClient:
    """Provide FastAPI test client with test database and market data."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = lambda: api_market_data_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_account(client, account_factory) -> Account:
    """An account with 100,000 in cash, created directly in the test database."""
    return account_factory(cash_balance=Decimal("100000"))


@pytest.fixture
def auth_headers(auth_account) -> dict[str, str]:
    """Bearer token headers for auth_account."""
    return auth_headers_for(auth_account)


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def auth_headers_for(account: Account) -> dict[str, str]:
    """Build Authorization headers for an account."""
    token = create_access_token(account.account_id, account.email)
    return {"Authorization": f"Bearer {token}"}


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(Decimal(str(actual)) - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
