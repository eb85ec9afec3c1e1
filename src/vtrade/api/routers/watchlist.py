"""Watchlist endpoints."""

from fastapi import APIRouter, Depends

from vtrade.api.deps import get_current_account_id, get_watchlist_service
from vtrade.api.schemas import (
    MessageResponse,
    WatchlistAddRequest,
    WatchlistItemResponse,
)
from vtrade.services import WatchlistService

router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])


@router.get("", response_model=list[WatchlistItemResponse])
def list_watchlist(
    account_id: str = Depends(get_current_account_id),
    watchlist: WatchlistService = Depends(get_watchlist_service),
) -> list[WatchlistItemResponse]:
    return [WatchlistItemResponse.model_validate(i) for i in watchlist.list(account_id)]


@router.post("", response_model=WatchlistItemResponse, status_code=201)
def add_to_watchlist(
    data: WatchlistAddRequest,
    account_id: str = Depends(get_current_account_id),
    watchlist: WatchlistService = Depends(get_watchlist_service),
) -> WatchlistItemResponse:
    """Watch a symbol. Fails with ALREADY_WATCHED if it is already listed."""
    item = watchlist.add(account_id, data.symbol, company_name=data.company_name)
    return WatchlistItemResponse.model_validate(item)


@router.delete("/{symbol}", response_model=MessageResponse)
def remove_from_watchlist(
    symbol: str,
    account_id: str = Depends(get_current_account_id),
    watchlist: WatchlistService = Depends(get_watchlist_service),
) -> MessageResponse:
    """Stop watching a symbol. Removing an unwatched symbol also succeeds."""
    watchlist.remove(account_id, symbol)
    return MessageResponse(message=f"{symbol.strip().upper()} removed from watchlist")
