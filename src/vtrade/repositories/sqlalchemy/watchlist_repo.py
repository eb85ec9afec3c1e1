"""SQLAlchemy implementation of WatchlistRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from vtrade.core.timezone import ensure_utc
from vtrade.domain.models import WatchlistItem
from vtrade.repositories.sqlalchemy.orm_models import WatchlistItemORM


class SqlAlchemyWatchlistRepository:
    """SQLAlchemy-backed watchlist repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, account_id: str, symbol: str) -> Optional[WatchlistItem]:
        orm_item = self._db.get(WatchlistItemORM, (account_id, symbol))
        return self._to_domain(orm_item) if orm_item else None

    def list_by_account(self, account_id: str) -> list[WatchlistItem]:
        """List watched symbols, oldest first."""
        orm_items = (
            self._db.query(WatchlistItemORM)
            .filter(WatchlistItemORM.account_id == account_id)
            .order_by(WatchlistItemORM.added_at, WatchlistItemORM.symbol)
            .all()
        )
        return [self._to_domain(i) for i in orm_items]

    def add(self, item: WatchlistItem) -> None:
        self._db.add(
            WatchlistItemORM(
                account_id=item.account_id,
                symbol=item.symbol,
                company_name=item.company_name,
                added_at=item.added_at,
            )
        )

    def remove(self, account_id: str, symbol: str) -> bool:
        deleted = (
            self._db.query(WatchlistItemORM)
            .filter(
                WatchlistItemORM.account_id == account_id,
                WatchlistItemORM.symbol == symbol,
            )
            .delete()
        )
        return deleted > 0

    @staticmethod
    def _to_domain(orm: WatchlistItemORM) -> WatchlistItem:
        return WatchlistItem(
            account_id=orm.account_id,
            symbol=orm.symbol,
            company_name=orm.company_name,
            added_at=ensure_utc(orm.added_at),
        )
