"""Order executor: places one order as a single all-or-nothing transaction."""

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterator, Union

from vtrade.core.exceptions import (
    ConcurrencyConflictError,
    InvalidInputError,
    PersistenceError,
)
from vtrade.core.timezone import now_utc
from vtrade.domain.models import Order, OrderSide, OrderType, OrderStatus
from vtrade.repositories.protocols import UnitOfWork
from vtrade.services.ledger_service import LedgerService, normalize_symbol
from vtrade.services.order_log import OrderLog

logger = logging.getLogger(__name__)

MAX_PRICE_DECIMALS = 4
# Money columns must round-trip through SQLite REAL (15 significant digits)
MAX_PRICE = Decimal("1000000000")
MAX_ORDER_TOTAL = Decimal("100000000000")


@dataclass
class OrderReceipt:
    """Result of a placed order."""

    order: Order
    new_balance: Decimal


class _AccountLock:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0


class AccountLockRegistry:
    """
    One in-process lock per account id, serializing load-mutate-save.

    An entry lives only while some caller holds or waits on it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, _AccountLock] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, account_id: str, timeout: float) -> Iterator[None]:
        with self._guard:
            entry = self._locks.get(account_id)
            if entry is None:
                entry = self._locks[account_id] = _AccountLock()
            entry.users += 1
        try:
            if not entry.lock.acquire(timeout=timeout):
                raise PersistenceError(f"Timed out waiting for account {account_id}")
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[account_id]


# Shared by every executor in the process
_account_locks = AccountLockRegistry()


class OrderExecutor:
    """
    Orchestrates an order end to end.

    Steps: validate input, load the account, apply the buy/sell to the
    ledger, stage the account and the new Order, commit once. Any failure
    rolls the unit of work back, so no account change survives without its
    order and no order exists without its account change.

    Same-account orders are serialized with an in-process lock; writers in
    other processes are caught by the account version check, and those
    conflicts are retried from a fresh load.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        max_conflict_retries: int = 3,
        lock_timeout_seconds: float = 10.0,
        account_locks: AccountLockRegistry = _account_locks,
    ):
        self._uow = uow
        self._ledger = LedgerService(uow.accounts)
        self._order_log = OrderLog(uow.orders)
        self._max_conflict_retries = max_conflict_retries
        self._lock_timeout = lock_timeout_seconds
        self._account_locks = account_locks

    def place_order(
        self,
        account_id: str,
        symbol: str,
        side: Union[OrderSide, str],
        quantity: int,
        price: Union[Decimal, int, str, None],
        order_type: Union[OrderType, str] = OrderType.MARKET,
    ) -> OrderReceipt:
        """
        Execute an order immediately at the given price.

        The price must come from the caller (a quote snapshot); the executor
        never looks one up or substitutes a default.
        """
        symbol = self._validate_symbol(symbol)
        side = self._validate_enum(OrderSide, side, "side")
        order_type = self._validate_enum(OrderType, order_type, "order_type")
        quantity = self._validate_quantity(quantity)
        price = self._validate_price(price)
        if price * quantity >= MAX_ORDER_TOTAL:
            raise InvalidInputError(f"Order total must be below {MAX_ORDER_TOTAL}")

        attempts = self._max_conflict_retries + 1
        attempt = 0
        with self._account_locks.hold(account_id, self._lock_timeout):
            while True:
                attempt += 1
                try:
                    receipt = self._execute_once(account_id, symbol, side, quantity, price, order_type)
                except ConcurrencyConflictError as e:
                    if attempt >= attempts:
                        logger.error(
                            f"Order for {account_id} abandoned after {attempts} conflicting attempts"
                        )
                        raise PersistenceError(
                            f"Account {account_id} is busy; order was not placed"
                        ) from e
                    logger.warning(
                        f"Version conflict on {account_id} (attempt {attempt}/{attempts}), retrying"
                    )
                    continue

                logger.info(
                    f"Executed {side.value} {quantity} {symbol} @ {price} for {account_id} "
                    f"(order {receipt.order.order_id}, balance {receipt.new_balance})"
                )
                return receipt

    def _execute_once(
        self,
        account_id: str,
        symbol: str,
        side: OrderSide,
        quantity: int,
        price: Decimal,
        order_type: OrderType,
    ) -> OrderReceipt:
        try:
            account = self._ledger.load(account_id)
            if side is OrderSide.BUY:
                self._ledger.apply_buy(account, symbol, quantity, price)
            else:
                self._ledger.apply_sell(account, symbol, quantity, price)

            order = Order(
                order_id=str(uuid.uuid4()),
                account_id=account_id,
                symbol=symbol,
                side=side,
                order_type=order_type,
                quantity=quantity,
                execution_price=price,
                total_amount=price * quantity,
                status=OrderStatus.EXECUTED,
                created_at=now_utc(),
            )
            self._ledger.save(account)
            self._order_log.append(order)
            self._uow.commit()
        except Exception as e:
            self._uow.rollback()
            logger.info(f"Order rejected for {account_id} ({side.value} {quantity} {symbol}): {e}")
            raise

        return OrderReceipt(order=order, new_balance=account.cash_balance)

    @staticmethod
    def _validate_symbol(symbol: str) -> str:
        if not isinstance(symbol, str) or not normalize_symbol(symbol):
            raise InvalidInputError("Symbol is required")
        return normalize_symbol(symbol)

    @staticmethod
    def _validate_enum(enum_cls, value, field_name: str):
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, str):
            try:
                return enum_cls(value.strip().upper())
            except ValueError:
                pass
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidInputError(f"{field_name} must be one of {allowed}")

    @staticmethod
    def _validate_quantity(quantity) -> int:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidInputError("Quantity must be a positive integer")
        return quantity

    @staticmethod
    def _validate_price(price) -> Decimal:
        if price is None or isinstance(price, bool):
            raise InvalidInputError("Price is required")
        if isinstance(price, float):
            price = str(price)
        try:
            value = Decimal(price)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidInputError(f"Price is not a number: {price!r}") from e
        if not value.is_finite() or value <= 0:
            raise InvalidInputError("Price must be a positive number")
        if value.normalize().as_tuple().exponent < -MAX_PRICE_DECIMALS:
            raise InvalidInputError(f"Price supports at most {MAX_PRICE_DECIMALS} decimal places")
        if value >= MAX_PRICE:
            raise InvalidInputError(f"Price must be below {MAX_PRICE}")
        return value
