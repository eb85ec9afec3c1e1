"""SQLAlchemy implementation of OrderRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from vtrade.core.timezone import ensure_utc
from vtrade.domain.models import Order
from vtrade.repositories.sqlalchemy.orm_models import OrderORM


class SqlAlchemyOrderRepository:
    """SQLAlchemy-backed append-only order store."""

    def __init__(self, db: Session):
        self._db = db

    def add(self, order: Order) -> None:
        """Stage a new order."""
        self._db.add(self._to_orm(order))

    def get_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by ID."""
        orm_order = self._db.query(OrderORM).filter(OrderORM.order_id == order_id).first()
        return self._to_domain(orm_order) if orm_order else None

    def list_by_account(self, account_id: str, limit: int) -> list[Order]:
        """List an account's orders, newest first."""
        query = (
            self._db.query(OrderORM)
            .filter(OrderORM.account_id == account_id)
            .order_by(OrderORM.created_at.desc(), OrderORM.id.desc())
            .limit(limit)
        )
        return [self._to_domain(o) for o in query.all()]

    @staticmethod
    def _to_orm(order: Order) -> OrderORM:
        """Convert domain model to ORM model."""
        return OrderORM(
            order_id=order.order_id,
            account_id=order.account_id,
            symbol=order.symbol,
            side=order.side,
            order_type=order.order_type,
            quantity=order.quantity,
            execution_price=order.execution_price,
            total_amount=order.total_amount,
            status=order.status,
            created_at=order.created_at,
        )

    @staticmethod
    def _to_domain(orm: OrderORM) -> Order:
        """Convert ORM model to domain model."""
        return Order(
            order_id=orm.order_id,
            account_id=orm.account_id,
            symbol=orm.symbol,
            side=orm.side,
            order_type=orm.order_type,
            quantity=orm.quantity,
            execution_price=Decimal(str(orm.execution_price)),
            total_amount=Decimal(str(orm.total_amount)),
            status=orm.status,
            created_at=ensure_utc(orm.created_at),
        )
