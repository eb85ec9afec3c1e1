"""
Unit tests for AccountService and token helpers.

Tests cover:
- Registration with the starting balance
- Duplicate emails, including a lost registration race
- Login success and failure
- Access token round trip and rejection
"""

import pytest
from decimal import Decimal
from jose import jwt

from vtrade.core.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    InvalidInputError,
    InvalidTokenError,
    ValidationError,
)
from vtrade.core.security import create_access_token, decode_access_token
from vtrade.services import AccountService


class TestRegister:
    """Tests for account registration."""

    def test_register_funds_account(self, account_service: AccountService):
        """
        GIVEN a starting balance of 100,000
        WHEN I register "Asha" with a mixed-case email
        THEN the account has 100,000 cash, no holdings, a lower-cased email and a hashed password
        """
        account = account_service.register("Asha", "Asha@Example.com", "secret123")

        assert account.account_id
        assert account.name == "Asha"
        assert account.email == "asha@example.com"
        assert account.cash_balance == Decimal("100000")
        assert account.holdings == {}
        assert account.password_hash and account.password_hash != "secret123"

    def test_register_duplicate_email(self, account_service: AccountService):
        """
        GIVEN an account registered with asha@example.com
        WHEN I register again with ASHA@example.com
        THEN ValidationError with code EMAIL_TAKEN is raised
        """
        account_service.register("Asha", "asha@example.com", "secret123")

        with pytest.raises(ValidationError) as exc_info:
            account_service.register("Other", "ASHA@example.com", "secret456")

        assert exc_info.value.code == "EMAIL_TAKEN"

    def test_register_losing_email_race(self, account_service: AccountService, uow, monkeypatch):
        """
        GIVEN another registration commits asha@example.com after my duplicate check passed
        WHEN my insert hits the unique email constraint
        THEN ValidationError with code EMAIL_TAKEN is raised and one account remains
        """
        account_service.register("Asha", "asha@example.com", "secret123")
        real_get_by_email = uow.accounts.get_by_email
        lookups = []

        def get_by_email_missing_first(email):
            lookups.append(email)
            return None if len(lookups) == 1 else real_get_by_email(email)

        monkeypatch.setattr(uow.accounts, "get_by_email", get_by_email_missing_first)

        with pytest.raises(ValidationError) as exc_info:
            account_service.register("Other", "asha@example.com", "secret456")

        assert exc_info.value.code == "EMAIL_TAKEN"
        assert real_get_by_email("asha@example.com").name == "Asha"

    @pytest.mark.parametrize(
        "name, email, password",
        [
            ("", "a@example.com", "secret123"),
            ("Asha", "", "secret123"),
            ("Asha", "a@example.com", "123"),
        ],
    )
    def test_register_invalid_input(self, account_service: AccountService, name, email, password):
        """
        GIVEN missing name, email, or a short password
        WHEN I register
        THEN InvalidInputError is raised
        """
        with pytest.raises(InvalidInputError):
            account_service.register(name, email, password)


class TestAuthenticate:
    """Tests for login."""

    def test_authenticate_success(self, account_service: AccountService):
        """
        GIVEN a registered account
        WHEN I authenticate with the right password (email in other case)
        THEN the account is returned
        """
        registered = account_service.register("Asha", "asha@example.com", "secret123")

        account = account_service.authenticate("ASHA@example.com", "secret123")

        assert account.account_id == registered.account_id

    def test_authenticate_wrong_password(self, account_service: AccountService):
        """
        GIVEN a registered account
        WHEN I authenticate with a wrong password
        THEN AuthenticationError is raised
        """
        account_service.register("Asha", "asha@example.com", "secret123")

        with pytest.raises(AuthenticationError) as exc_info:
            account_service.authenticate("asha@example.com", "wrong-password")

        assert exc_info.value.status_code == 401

    def test_authenticate_unknown_email(self, account_service: AccountService):
        """
        GIVEN no accounts
        WHEN I authenticate
        THEN AuthenticationError is raised
        """
        with pytest.raises(AuthenticationError):
            account_service.authenticate("nobody@example.com", "secret123")

    def test_get_unknown_account(self, account_service: AccountService):
        """
        GIVEN no account "ghost"
        WHEN I look it up
        THEN AccountNotFoundError is raised
        """
        with pytest.raises(AccountNotFoundError):
            account_service.get_account("ghost")


class TestAccessTokens:
    """Tests for JWT helpers."""

    def test_token_round_trip(self):
        """
        GIVEN a token issued for account "acct-1"
        WHEN I decode it
        THEN "acct-1" is returned
        """
        token = create_access_token("acct-1", "a@example.com")

        assert decode_access_token(token) == "acct-1"

    def test_foreign_signature_rejected(self):
        """
        GIVEN a token signed with a different secret
        WHEN I decode it
        THEN InvalidTokenError is raised
        """
        tampered = jwt.encode({"sub": "acct-1", "type": "access"}, "some-other-secret", algorithm="HS256")

        with pytest.raises(InvalidTokenError) as exc_info:
            decode_access_token(tampered)

        assert exc_info.value.status_code == 403

    def test_garbage_token_rejected(self):
        """
        GIVEN a string that is not a JWT
        WHEN I decode it
        THEN InvalidTokenError is raised
        """
        with pytest.raises(InvalidTokenError):
            decode_access_token("not-a-token")
