"""Core utilities and shared functionality."""

from vtrade.core.timezone import now_utc, ensure_utc, UTC
from vtrade.core.exceptions import (
    AppError,
    ValidationError,
    InvalidInputError,
    NotFoundError,
    AccountNotFoundError,
    InsufficientFundsError,
    InsufficientSharesError,
    AlreadyWatchedError,
    AuthenticationError,
    InvalidTokenError,
    PersistenceError,
    ConcurrencyConflictError,
    UpstreamPriceUnavailableError,
    UpstreamSearchUnavailableError,
)

__all__ = [
    "now_utc",
    "ensure_utc",
    "UTC",
    "AppError",
    "ValidationError",
    "InvalidInputError",
    "NotFoundError",
    "AccountNotFoundError",
    "InsufficientFundsError",
    "InsufficientSharesError",
    "AlreadyWatchedError",
    "AuthenticationError",
    "InvalidTokenError",
    "PersistenceError",
    "ConcurrencyConflictError",
    "UpstreamPriceUnavailableError",
    "UpstreamSearchUnavailableError",
]
