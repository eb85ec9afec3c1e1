"""SQLAlchemy repository implementations."""

from vtrade.repositories.sqlalchemy.database import (
    create_db_engine,
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    Base,
)
from vtrade.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from vtrade.repositories.sqlalchemy.order_repo import SqlAlchemyOrderRepository
from vtrade.repositories.sqlalchemy.watchlist_repo import SqlAlchemyWatchlistRepository
from vtrade.repositories.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyWatchlistRepository",
    "SqlAlchemyUnitOfWork",
]
