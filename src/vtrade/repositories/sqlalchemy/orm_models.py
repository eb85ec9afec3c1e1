"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Numeric,
    Index,
    CheckConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from vtrade.repositories.sqlalchemy.database import Base
from vtrade.domain.models.enums import OrderSide, OrderType, OrderStatus


class AccountORM(Base):
    """SQLAlchemy model for Account. version guards against lost updates."""

    __tablename__ = "accounts"

    account_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=True)
    cash_balance = Column(Numeric(precision=18, scale=4), nullable=False, default=Decimal("0"))
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    holdings = relationship(
        "HoldingORM",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="HoldingORM.symbol",
    )

    __table_args__ = (
        CheckConstraint("cash_balance >= 0", name="ck_accounts_cash_non_negative"),
    )
    __mapper_args__ = {"version_id_col": version}


class HoldingORM(Base):
    """SQLAlchemy model for Holding (one row per account/symbol)."""

    __tablename__ = "holdings"

    account_id = Column(String(36), ForeignKey("accounts.account_id"), primary_key=True)
    symbol = Column(String(20), primary_key=True)
    quantity = Column(Integer, nullable=False)
    average_cost = Column(Numeric(precision=18, scale=6), nullable=False)

    account = relationship("AccountORM", back_populates="holdings")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_holdings_quantity_positive"),
    )


class OrderORM(Base):
    """SQLAlchemy model for Order (append-only)."""

    __tablename__ = "orders"

    # Surrogate key gives a stable tiebreak for orders created in the same instant
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), unique=True, nullable=False)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False)
    symbol = Column(String(20), nullable=False)
    side = Column(SqlEnum(OrderSide), nullable=False)
    order_type = Column(SqlEnum(OrderType), nullable=False, default=OrderType.MARKET)
    quantity = Column(Integer, nullable=False)
    execution_price = Column(Numeric(precision=18, scale=4), nullable=False)
    total_amount = Column(Numeric(precision=18, scale=4), nullable=False)
    status = Column(SqlEnum(OrderStatus), nullable=False, default=OrderStatus.EXECUTED)
    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_orders_account_created", "account_id", "created_at"),
    )


class WatchlistItemORM(Base):
    """SQLAlchemy model for WatchlistItem."""

    __tablename__ = "watchlist_items"

    account_id = Column(String(36), ForeignKey("accounts.account_id"), primary_key=True)
    symbol = Column(String(20), primary_key=True)
    company_name = Column(String(255), nullable=True)
    added_at = Column(DateTime(timezone=True), nullable=False)
