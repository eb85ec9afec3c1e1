"""Stock quote and search endpoints."""

from fastapi import APIRouter, Depends, Query

from vtrade.api.deps import get_market_data_service
from vtrade.api.schemas import QuoteResponse, SymbolMatchResponse
from vtrade.config.settings import get_settings
from vtrade.services import MarketDataService

router = APIRouter(prefix="/api/stocks", tags=["stocks"])


# Literal paths are registered before /{symbol} so they win
@router.get("/market-overview", response_model=list[QuoteResponse])
def get_market_overview(
    market_data: MarketDataService = Depends(get_market_data_service),
) -> list[QuoteResponse]:
    """Quotes for the configured overview symbols; unavailable symbols are left out."""
    symbols = get_settings().market_overview_symbols
    quotes = market_data.get_quotes(symbols)
    return [QuoteResponse.model_validate(quotes[s]) for s in symbols if s in quotes]


@router.get("/search", response_model=list[SymbolMatchResponse])
def search_stocks(
    q: str = Query(..., min_length=1, max_length=100, description="Symbol or company name"),
    limit: int = Query(10, ge=1, le=50),
    market_data: MarketDataService = Depends(get_market_data_service),
) -> list[SymbolMatchResponse]:
    """Search equities by symbol or company name."""
    return [SymbolMatchResponse.model_validate(m) for m in market_data.search(q, limit=limit)]


@router.get("/details/{symbol}", response_model=QuoteResponse)
def get_stock_details(
    symbol: str,
    market_data: MarketDataService = Depends(get_market_data_service),
) -> QuoteResponse:
    """Quote with OHLC, volume, previous close and change figures."""
    return QuoteResponse.model_validate(market_data.get_quote(symbol))


@router.get("/{symbol}", response_model=QuoteResponse)
def get_stock_quote(
    symbol: str,
    market_data: MarketDataService = Depends(get_market_data_service),
) -> QuoteResponse:
    """Get the current quote for a symbol."""
    return QuoteResponse.model_validate(market_data.get_quote(symbol))
