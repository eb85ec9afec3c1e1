"""Order log: append-only order history per account."""

from vtrade.core.exceptions import InvalidInputError
from vtrade.domain.models import Order
from vtrade.repositories.protocols import OrderRepository

DEFAULT_HISTORY_LIMIT = 50


class OrderLog:
    """
    Append-only history of orders.

    Orders are inserted once and never updated or deleted. Listing always
    re-queries, so each call reflects exactly the orders committed so far.
    """

    def __init__(self, order_repo: OrderRepository, max_limit: int = 500):
        self._order_repo = order_repo
        self._max_limit = max_limit

    def append(self, order: Order) -> None:
        """Stage an order for insertion in the caller's unit of work."""
        self._order_repo.add(order)

    def list_by_account(self, account_id: str, limit: int = DEFAULT_HISTORY_LIMIT) -> list[Order]:
        """Return an account's orders, newest first."""
        if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= self._max_limit:
            raise InvalidInputError(f"limit must be between 1 and {self._max_limit}")
        return self._order_repo.list_by_account(account_id, limit)
