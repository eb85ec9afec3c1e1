"""Pydantic schemas for API request/response."""

from vtrade.api.schemas.account import (
    RegisterRequest,
    LoginRequest,
    AccountResponse,
    TokenResponse,
)
from vtrade.api.schemas.order import (
    OrderCreateRequest,
    OrderResponse,
    OrderPlacedResponse,
)
from vtrade.api.schemas.portfolio import (
    HoldingResponse,
    PortfolioSummaryResponse,
)
from vtrade.api.schemas.watchlist import (
    WatchlistAddRequest,
    WatchlistItemResponse,
    MessageResponse,
)
from vtrade.api.schemas.stock import QuoteResponse, SymbolMatchResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "AccountResponse",
    "TokenResponse",
    "OrderCreateRequest",
    "OrderResponse",
    "OrderPlacedResponse",
    "HoldingResponse",
    "PortfolioSummaryResponse",
    "WatchlistAddRequest",
    "WatchlistItemResponse",
    "MessageResponse",
    "QuoteResponse",
    "SymbolMatchResponse",
]
