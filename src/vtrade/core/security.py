"""Password hashing and JWT access tokens."""

import logging
from datetime import timedelta

import bcrypt
from jose import JWTError, jwt

from vtrade.config.settings import get_settings
from vtrade.core.exceptions import InvalidTokenError
from vtrade.core.timezone import now_utc

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(account_id: str, email: str) -> str:
    """Create a signed JWT access token for an account."""
    settings = get_settings()
    issued_at = now_utc()
    payload = {
        "sub": account_id,
        "email": email,
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.jwt_access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """
    Verify an access token and return the account id it was issued for.

    Raises InvalidTokenError on bad signature, expiry or wrong token type.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        raise InvalidTokenError() from e

    if payload.get("type") != "access" or not payload.get("sub"):
        raise InvalidTokenError("Invalid token type")
    return payload["sub"]
