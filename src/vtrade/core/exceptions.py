"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class InvalidInputError(ValidationError):
    """Raised when an order request is missing fields or is malformed."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_INPUT")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        super().__init__(f"{resource} not found: {identifier}", code=code)


class AccountNotFoundError(NotFoundError):
    """Raised when no account exists for the given id."""

    def __init__(self, account_id: str):
        super().__init__("Account", account_id, code="ACCOUNT_NOT_FOUND")


class InsufficientFundsError(AppError):
    """Raised when a buy costs more than the available cash balance."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient funds: order costs {requested}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class InsufficientSharesError(AppError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, symbol: str, requested: str, available: str):
        super().__init__(
            f"Insufficient shares of {symbol}: requested {requested}, available {available}",
            code="INSUFFICIENT_SHARES",
        )


class AlreadyWatchedError(AppError):
    """Raised when adding a symbol that is already on the watchlist."""

    def __init__(self, symbol: str):
        super().__init__(f"{symbol} is already in the watchlist", code="ALREADY_WATCHED")


class AuthenticationError(AppError):
    """Raised when credentials are missing or wrong."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="AUTHENTICATION_FAILED")


class InvalidTokenError(AppError):
    """Raised when a bearer token cannot be verified."""

    status_code = 403

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class PersistenceError(AppError):
    """Raised when the storage layer fails or times out."""

    status_code = 500

    def __init__(self, message: str, code: str = "PERSISTENCE_FAILURE"):
        super().__init__(message, code=code)


class ConcurrencyConflictError(PersistenceError):
    """Raised when an account was modified by another writer since it was loaded."""

    def __init__(self, account_id: Optional[str] = None):
        super().__init__(
            f"Account {account_id or '(unknown)'} was modified concurrently",
            code="CONCURRENCY_CONFLICT",
        )
        self.account_id = account_id


class UpstreamPriceUnavailableError(AppError):
    """Raised when the market data provider cannot supply a price."""

    status_code = 503

    def __init__(self, symbol: str, reason: str = "no price available"):
        super().__init__(
            f"Price unavailable for {symbol}: {reason}",
            code="UPSTREAM_PRICE_UNAVAILABLE",
        )
        self.symbol = symbol


class UpstreamSearchUnavailableError(AppError):
    """Raised when the market data provider cannot run a symbol search."""

    status_code = 503

    def __init__(self, query: str, reason: str = "search failed"):
        super().__init__(
            f"Symbol search unavailable for {query!r}: {reason}",
            code="UPSTREAM_SEARCH_UNAVAILABLE",
        )
        self.query = query
