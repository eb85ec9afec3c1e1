"""Account repository protocol."""

from typing import Protocol, Optional

from vtrade.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account (ledger document) data access."""

    def create(self, account: Account) -> Account:
        """Stage a new account with its starting balance."""
        ...

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account with its holdings by ID."""
        ...

    def get_by_email(self, email: str) -> Optional[Account]:
        """Retrieve account by login email."""
        ...

    def exists(self, account_id: str) -> bool:
        """Return True if an account with this ID exists."""
        ...

    def save(self, account: Account) -> None:
        """
        Stage the full account (balance and holdings) for the next commit.

        The commit fails with ConcurrencyConflictError if another writer
        committed a newer version since the account was loaded.
        """
        ...
