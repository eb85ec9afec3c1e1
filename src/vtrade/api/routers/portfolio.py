"""Portfolio endpoints."""

from fastapi import APIRouter, Depends

from vtrade.api.deps import get_current_account_id, get_portfolio_service
from vtrade.api.schemas import HoldingResponse, PortfolioSummaryResponse
from vtrade.services import PortfolioService

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=list[HoldingResponse])
def get_portfolio(
    account_id: str = Depends(get_current_account_id),
    portfolio: PortfolioService = Depends(get_portfolio_service),
) -> list[HoldingResponse]:
    """Get holdings with current market prices."""
    positions = portfolio.get_portfolio(account_id)
    return [HoldingResponse.model_validate(p) for p in positions]


@router.get("/summary", response_model=PortfolioSummaryResponse)
def get_portfolio_summary(
    account_id: str = Depends(get_current_account_id),
    portfolio: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioSummaryResponse:
    """Get cash, invested amount and total equity."""
    summary = portfolio.get_summary(account_id)
    return PortfolioSummaryResponse.model_validate(summary)
