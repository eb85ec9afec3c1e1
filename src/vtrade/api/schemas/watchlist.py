"""Pydantic schemas for watchlist endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class WatchlistAddRequest(BaseModel):
    """Request schema for watching a symbol."""

    symbol: str = Field(..., min_length=1, max_length=20)
    company_name: Optional[str] = Field(default=None, max_length=255)

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()


class WatchlistItemResponse(BaseModel):
    """Response schema for a watched symbol."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    added_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str
