"""Stub market data provider for offline/testing use."""

from decimal import Decimal

from vtrade.core.exceptions import UpstreamPriceUnavailableError
from vtrade.core.timezone import now_utc
from vtrade.domain.views import Quote, SymbolMatch


# symbol -> (company, price, open, high, low, previous close, volume)
_STUB_QUOTES: dict[str, tuple[str, Decimal, Decimal, Decimal, Decimal, Decimal, int]] = {
    "AAPL": ("Apple Inc.", Decimal("185.50"), Decimal("184.30"), Decimal("186.10"), Decimal("183.90"), Decimal("184.25"), 52_000_000),
    "MSFT": ("Microsoft Corporation", Decimal("378.25"), Decimal("377.00"), Decimal("379.40"), Decimal("375.10"), Decimal("376.80"), 21_000_000),
    "GOOGL": ("Alphabet Inc.", Decimal("142.75"), Decimal("141.60"), Decimal("143.20"), Decimal("141.10"), Decimal("141.50"), 25_000_000),
    "TSLA": ("Tesla, Inc.", Decimal("248.75"), Decimal("251.00"), Decimal("252.40"), Decimal("246.30"), Decimal("250.10"), 98_000_000),
    "RELIANCE.NS": ("Reliance Industries Limited", Decimal("2950.40"), Decimal("2935.00"), Decimal("2961.75"), Decimal("2928.10"), Decimal("2931.55"), 5_400_000),
    "TCS.NS": ("Tata Consultancy Services Limited", Decimal("3890.15"), Decimal("3902.00"), Decimal("3911.60"), Decimal("3871.25"), Decimal("3899.80"), 1_900_000),
    "INFY.NS": ("Infosys Limited", Decimal("1521.30"), Decimal("1510.00"), Decimal("1526.45"), Decimal("1505.20"), Decimal("1508.70"), 6_200_000),
    "HDFCBANK.NS": ("HDFC Bank Limited", Decimal("1642.85"), Decimal("1650.00"), Decimal("1655.30"), Decimal("1638.40"), Decimal("1648.90"), 11_300_000),
    "ICICIBANK.NS": ("ICICI Bank Limited", Decimal("1098.60"), Decimal("1090.25"), Decimal("1102.00"), Decimal("1087.75"), Decimal("1091.40"), 9_800_000),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fixed quotes for offline operation.

    Symbols outside the fixed table are reported as unavailable.
    """

    def get_quote(self, symbol: str) -> Quote:
        """Return the fixed quote for a symbol."""
        upper_symbol = symbol.upper()
        if upper_symbol not in _STUB_QUOTES:
            raise UpstreamPriceUnavailableError(upper_symbol, "unknown symbol")

        name, price, open_, high, low, prev_close, volume = _STUB_QUOTES[upper_symbol]
        return Quote(
            symbol=upper_symbol,
            price=price,
            as_of=now_utc(),
            company_name=name,
            open=open_,
            high=high,
            low=low,
            previous_close=prev_close,
            volume=volume,
        )

    def search(self, query: str) -> list[SymbolMatch]:
        """Case-insensitive substring match on symbol or company name."""
        needle = query.strip().upper()
        if not needle:
            return []
        return [
            SymbolMatch(
                symbol=symbol,
                company_name=row[0],
                exchange="NSI" if symbol.endswith(".NS") else "NMS",
            )
            for symbol, row in _STUB_QUOTES.items()
            if needle in symbol or needle in row[0].upper()
        ]
