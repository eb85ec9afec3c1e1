"""Yahoo Finance price source via yfinance."""

import logging
import math
from decimal import Decimal
from typing import Optional

from vtrade.core.exceptions import UpstreamPriceUnavailableError
from vtrade.core.timezone import now_utc
from vtrade.domain.views import Quote, SymbolMatch

logger = logging.getLogger(__name__)

PRICE_QUANT = Decimal("0.01")
SEARCH_MAX_RESULTS = 20


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _to_price(value) -> Optional[Decimal]:
    """Convert a provider number to a 2dp Decimal; None/NaN/non-positive -> None."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number <= 0:
        return None
    return Decimal(str(number)).quantize(PRICE_QUANT)


def _to_volume(value) -> Optional[int]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else int(number)


class YFinanceProvider:
    """
    Fetches the latest daily bar and company info from Yahoo Finance.

    The close of the most recent bar is the current price. Company name and
    previous close come from ticker info and are optional.
    """

    def get_quote(self, symbol: str) -> Quote:
        upper_symbol = symbol.upper()
        yf = _get_yf()
        ticker = yf.Ticker(upper_symbol)

        history = ticker.history(period="5d")
        if history is None or history.empty:
            raise UpstreamPriceUnavailableError(upper_symbol, "no price history")

        bar = history.iloc[-1]
        price = _to_price(bar["Close"])
        if price is None:
            raise UpstreamPriceUnavailableError(upper_symbol, "no closing price")

        info = self._get_info(ticker, upper_symbol)
        previous_close = _to_price(
            info.get("previousClose") or info.get("regularMarketPreviousClose")
        )
        if previous_close is None and len(history) > 1:
            previous_close = _to_price(history.iloc[-2]["Close"])

        return Quote(
            symbol=upper_symbol,
            price=price,
            as_of=now_utc(),
            company_name=(info.get("longName") or info.get("shortName") or "").strip() or None,
            open=_to_price(bar["Open"]),
            high=_to_price(bar["High"]),
            low=_to_price(bar["Low"]),
            previous_close=previous_close,
            volume=_to_volume(bar["Volume"]),
        )

    def search(self, query: str) -> list[SymbolMatch]:
        """Equity matches from Yahoo Finance search; funds, indices and FX are dropped."""
        yf = _get_yf()
        results = yf.Search(query, max_results=SEARCH_MAX_RESULTS, news_count=0)

        matches = []
        for item in results.quotes or []:
            if item.get("quoteType") != "EQUITY" or not item.get("symbol"):
                continue
            matches.append(SymbolMatch(
                symbol=item["symbol"].upper(),
                company_name=item.get("longname") or item.get("shortname"),
                exchange=item.get("exchange"),
            ))
        logger.debug(f"Search {query!r}: {len(matches)} equity matches")
        return matches

    @staticmethod
    def _get_info(ticker, symbol: str) -> dict:
        """Company info is enrichment only; a failed lookup yields an empty dict."""
        try:
            info = ticker.info
        except Exception as e:
            logger.debug(f"Info lookup failed for {symbol}: {e}")
            return {}
        return info if isinstance(info, dict) else {}
