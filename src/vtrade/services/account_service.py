"""Account service: registration, login and lookup."""

import logging
import uuid
from decimal import Decimal

from vtrade.core.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    InvalidInputError,
    PersistenceError,
    ValidationError,
)
from vtrade.core.security import hash_password, verify_password
from vtrade.core.timezone import now_utc
from vtrade.domain.models import Account
from vtrade.repositories.protocols import UnitOfWork

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AccountService:
    """
    Creates accounts with the starting cash balance and checks credentials.

    After registration an account's balance and holdings change only
    through the order executor.
    """

    def __init__(self, uow: UnitOfWork, starting_balance: Decimal):
        self._uow = uow
        self._starting_balance = starting_balance

    def register(self, name: str, email: str, password: str) -> Account:
        """
        Register a new account.

        Raises ValidationError (EMAIL_TAKEN) if the email is already in use.
        """
        name = (name or "").strip()
        email = (email or "").strip().lower()
        if not name:
            raise InvalidInputError("Name is required")
        if not email:
            raise InvalidInputError("Email is required")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if self._uow.accounts.get_by_email(email):
            raise ValidationError(f"Email already registered: {email}", code="EMAIL_TAKEN")

        account = Account(
            account_id=str(uuid.uuid4()),
            name=name,
            email=email,
            cash_balance=self._starting_balance,
            password_hash=hash_password(password),
            created_at=now_utc(),
        )
        try:
            self._uow.accounts.create(account)
            self._uow.commit()
        except PersistenceError:
            self._uow.rollback()
            # Lost a race with a concurrent registration of the same email
            if self._uow.accounts.get_by_email(email):
                raise ValidationError(
                    f"Email already registered: {email}", code="EMAIL_TAKEN"
                ) from None
            raise
        except Exception:
            self._uow.rollback()
            raise

        logger.info(f"Registered account {account.account_id} ({email})")
        return self.get_account(account.account_id)

    def authenticate(self, email: str, password: str) -> Account:
        """Return the account for valid credentials, else raise AuthenticationError."""
        account = self._uow.accounts.get_by_email((email or "").strip().lower())
        if (
            account is None
            or not account.password_hash
            or not verify_password(password or "", account.password_hash)
        ):
            logger.info(f"Failed login for {email}")
            raise AuthenticationError("Incorrect email or password")
        return account

    def get_account(self, account_id: str) -> Account:
        account = self._uow.accounts.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account
