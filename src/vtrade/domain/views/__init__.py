"""View models for service outputs."""

from vtrade.domain.views.portfolio import (
    Quote,
    SymbolMatch,
    PositionView,
    PortfolioSummaryView,
)

__all__ = [
    "Quote",
    "SymbolMatch",
    "PositionView",
    "PortfolioSummaryView",
]
