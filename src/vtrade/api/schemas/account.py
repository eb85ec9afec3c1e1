"""Pydantic schemas for auth and account endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request schema for registering an account."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(BaseModel):
    """Request schema for logging in."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AccountResponse(BaseModel):
    """Response schema for an account (never includes the password hash)."""

    model_config = {"from_attributes": True}

    account_id: str
    name: str
    email: str
    cash_balance: Decimal
    created_at: Optional[datetime] = None


class TokenResponse(BaseModel):
    """Response schema for register/login."""

    access_token: str
    token_type: str = "bearer"
    account: AccountResponse
