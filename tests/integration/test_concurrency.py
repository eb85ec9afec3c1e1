"""
Integration tests for concurrent orders against a file-backed SQLite database.

Tests cover:
- Two competing buys that only one balance can cover
- A stale account version detected at commit
"""

import threading
import uuid

import pytest
from decimal import Decimal
from sqlalchemy.orm import sessionmaker

from vtrade.core.exceptions import ConcurrencyConflictError, InsufficientFundsError
from vtrade.domain.models import Account
from vtrade.repositories.sqlalchemy import Base, SqlAlchemyUnitOfWork, create_db_engine
from vtrade.services import AccountLockRegistry, OrderExecutor
from tests.conftest import utc_datetime


@pytest.fixture
def file_session_factory(tmp_path):
    """Session factory over a SQLite file so each thread gets its own connection."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'concurrency.db'}", timeout_seconds=10)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def funded_account_id(file_session_factory) -> str:
    """An account with 1,500 cash in the file database."""
    account_id = str(uuid.uuid4())
    session = file_session_factory()
    try:
        uow = SqlAlchemyUnitOfWork(session)
        uow.accounts.create(Account(
            account_id=account_id,
            name="Racer",
            email="racer@example.com",
            cash_balance=Decimal("1500"),
            created_at=utc_datetime(2024, 1, 1),
        ))
        uow.commit()
    finally:
        session.close()
    return account_id


class TestCompetingOrders:
    """Two orders for the same account at the same time."""

    def test_only_one_of_two_competing_buys_succeeds(self, file_session_factory, funded_account_id):
        """
        GIVEN an account with 1,500 cash
        WHEN two threads each buy 1 AAA @ 1,000 at the same time
        THEN exactly one succeeds, the other gets InsufficientFundsError, and 500 remains
        """
        locks = AccountLockRegistry()
        barrier = threading.Barrier(2)
        outcomes: list = []
        outcomes_lock = threading.Lock()

        def buy():
            session = file_session_factory()
            try:
                executor = OrderExecutor(SqlAlchemyUnitOfWork(session), account_locks=locks)
                barrier.wait(timeout=5)
                try:
                    receipt = executor.place_order(funded_account_id, "AAA", "BUY", 1, Decimal("1000"))
                    result = receipt
                except InsufficientFundsError as e:
                    result = e
                with outcomes_lock:
                    outcomes.append(result)
            finally:
                session.close()

        threads = [threading.Thread(target=buy) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=30)

        assert len(outcomes) == 2
        failures = [o for o in outcomes if isinstance(o, InsufficientFundsError)]
        successes = [o for o in outcomes if not isinstance(o, Exception)]
        assert len(successes) == 1
        assert len(failures) == 1

        session = file_session_factory()
        try:
            uow = SqlAlchemyUnitOfWork(session)
            account = uow.accounts.get_by_id(funded_account_id)
            orders = uow.orders.list_by_account(funded_account_id, limit=10)
        finally:
            session.close()
        assert account.cash_balance == Decimal("500")
        assert account.get_holding("AAA").quantity == 1
        assert len(orders) == 1


class TestStaleVersion:
    """Optimistic version check across independent sessions."""

    def test_stale_write_raises_conflict(self, file_session_factory, funded_account_id):
        """
        GIVEN two sessions that loaded the same account
        WHEN the second commits a change and the first then commits its own
        THEN the first commit raises ConcurrencyConflictError and the second change stands
        """
        first = file_session_factory()
        second = file_session_factory()
        try:
            uow_a = SqlAlchemyUnitOfWork(first)
            uow_b = SqlAlchemyUnitOfWork(second)
            account_a = uow_a.accounts.get_by_id(funded_account_id)
            account_b = uow_b.accounts.get_by_id(funded_account_id)

            account_b.cash_balance = Decimal("1400")
            uow_b.accounts.save(account_b)
            uow_b.commit()

            account_a.cash_balance = Decimal("1300")
            uow_a.accounts.save(account_a)
            with pytest.raises(ConcurrencyConflictError):
                uow_a.commit()

            assert uow_a.accounts.get_by_id(funded_account_id).cash_balance == Decimal("1400")
        finally:
            first.close()
            second.close()
