"""SQLAlchemy implementation of AccountRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session, selectinload

from vtrade.core.exceptions import AccountNotFoundError, ConcurrencyConflictError
from vtrade.core.timezone import ensure_utc
from vtrade.domain.models import Account, Holding
from vtrade.repositories.sqlalchemy.orm_models import AccountORM, HoldingORM


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository. Writes are flushed by the unit of work."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Stage a new account."""
        orm_account = AccountORM(
            account_id=account.account_id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            cash_balance=account.cash_balance,
            created_at=account.created_at,
        )
        for holding in account.holdings.values():
            orm_account.holdings.append(self._holding_to_orm(holding))
        self._db.add(orm_account)
        return account

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account with its holdings by ID."""
        orm_account = (
            self._db.query(AccountORM)
            .options(selectinload(AccountORM.holdings))
            .filter(AccountORM.account_id == account_id)
            .first()
        )
        return self._to_domain(orm_account) if orm_account else None

    def get_by_email(self, email: str) -> Optional[Account]:
        """Retrieve account by login email."""
        orm_account = (
            self._db.query(AccountORM)
            .options(selectinload(AccountORM.holdings))
            .filter(AccountORM.email == email)
            .first()
        )
        return self._to_domain(orm_account) if orm_account else None

    def exists(self, account_id: str) -> bool:
        """Return True if an account with this ID exists."""
        return (
            self._db.query(AccountORM.account_id)
            .filter(AccountORM.account_id == account_id)
            .first()
            is not None
        )

    def save(self, account: Account) -> None:
        """Stage balance and holdings; the version check runs when the unit of work flushes."""
        orm_account = self._db.get(AccountORM, account.account_id)
        if orm_account is None:
            raise AccountNotFoundError(account.account_id)
        if account.version is not None and orm_account.version != account.version:
            raise ConcurrencyConflictError(account.account_id)

        orm_account.cash_balance = account.cash_balance

        existing = {h.symbol: h for h in orm_account.holdings}
        for symbol, orm_holding in existing.items():
            if symbol not in account.holdings:
                # delete-orphan cascade removes the row
                orm_account.holdings.remove(orm_holding)

        for symbol, holding in account.holdings.items():
            orm_holding = existing.get(symbol)
            if orm_holding is None:
                orm_account.holdings.append(self._holding_to_orm(holding))
            else:
                orm_holding.quantity = holding.quantity
                orm_holding.average_cost = holding.average_cost

    @staticmethod
    def _holding_to_orm(holding: Holding) -> HoldingORM:
        return HoldingORM(
            symbol=holding.symbol,
            quantity=holding.quantity,
            average_cost=holding.average_cost,
        )

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        holdings = {
            h.symbol: Holding(
                symbol=h.symbol,
                quantity=h.quantity,
                average_cost=Decimal(str(h.average_cost)),
            )
            for h in orm.holdings
        }
        return Account(
            account_id=orm.account_id,
            name=orm.name,
            email=orm.email,
            cash_balance=Decimal(str(orm.cash_balance)) if orm.cash_balance else Decimal("0"),
            holdings=holdings,
            password_hash=orm.password_hash,
            version=orm.version,
            created_at=ensure_utc(orm.created_at),
        )
