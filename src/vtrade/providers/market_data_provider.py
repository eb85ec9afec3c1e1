"""Market data provider protocol."""

from typing import Protocol

from vtrade.domain.views import Quote, SymbolMatch


class MarketDataProvider(Protocol):
    """
    Protocol for price sources.

    Implementations return a sourced price (plus OHLC, previous close,
    volume and company name where available) or raise
    UpstreamPriceUnavailableError. They must never invent a price.
    Symbol search returns matching equities, possibly none.
    """

    def get_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for one symbol."""
        ...

    def search(self, query: str) -> list[SymbolMatch]:
        """Find equities whose symbol or company name matches the query."""
        ...
