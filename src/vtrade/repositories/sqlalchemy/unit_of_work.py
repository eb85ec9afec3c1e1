"""SQLAlchemy unit of work: all repository writes share one session transaction."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from vtrade.core.exceptions import ConcurrencyConflictError, PersistenceError
from vtrade.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from vtrade.repositories.sqlalchemy.order_repo import SqlAlchemyOrderRepository
from vtrade.repositories.sqlalchemy.watchlist_repo import SqlAlchemyWatchlistRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork:
    """
    Wraps a Session so account, order and watchlist writes commit together.

    Storage errors are translated into PersistenceError; a stale account
    version becomes ConcurrencyConflictError so callers can retry.
    """

    def __init__(self, db: Session):
        self._db = db
        self.accounts = SqlAlchemyAccountRepository(db)
        self.orders = SqlAlchemyOrderRepository(db)
        self.watchlist = SqlAlchemyWatchlistRepository(db)

    def commit(self) -> None:
        """Flush and commit everything staged in this session."""
        try:
            self._db.commit()
        except StaleDataError as e:
            self._db.rollback()
            logger.warning(f"Stale account version on commit: {e}")
            raise ConcurrencyConflictError() from e
        except IntegrityError as e:
            self._db.rollback()
            logger.error(f"Integrity error on commit: {e.orig}")
            raise PersistenceError(f"Constraint violated: {e.orig}") from e
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Database error on commit: {e}")
            raise PersistenceError(f"Database error: {e.__class__.__name__}") from e

    def rollback(self) -> None:
        """Discard everything staged in this session."""
        try:
            self._db.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Database error on rollback: {e}")
            raise PersistenceError(f"Database error: {e.__class__.__name__}") from e

