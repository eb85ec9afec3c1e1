"""Order repository protocol."""

from typing import Protocol, Optional

from vtrade.domain.models import Order


class OrderRepository(Protocol):
    """Interface for the append-only order store."""

    def add(self, order: Order) -> None:
        """Stage a new order for the next commit. Orders are never updated."""
        ...

    def get_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by ID."""
        ...

    def list_by_account(self, account_id: str, limit: int) -> list[Order]:
        """List an account's orders, newest first."""
        ...
