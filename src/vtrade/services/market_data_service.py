"""Market data service for quotes."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from dataclasses import replace
from typing import Optional

from vtrade.core.exceptions import UpstreamPriceUnavailableError, UpstreamSearchUnavailableError
from vtrade.domain.views import Quote, SymbolMatch
from vtrade.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for fetching market quotes.

    Wraps a provider with a per-symbol TTL cache and a bounded wait on every
    provider call. When the provider fails, the last sourced quote is served
    marked stale; with nothing cached the failure is raised. Prices are never
    fabricated.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: float = 60,
        fetch_timeout_seconds: float = 10,
        max_workers: int = 4,
    ):
        self._provider = provider
        self._ttl = cache_ttl_seconds
        self._fetch_timeout = fetch_timeout_seconds
        # Cache: symbol -> (quote, cached_at monotonic)
        self._cache: dict[str, tuple[Quote, float]] = {}
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="quote-fetch")

    def get_quote(self, symbol: str) -> Quote:
        """
        Return a quote for one symbol.

        Raises UpstreamPriceUnavailableError when the provider fails and no
        cached quote exists.
        """
        key = (symbol or "").strip().upper()
        if not key:
            raise UpstreamPriceUnavailableError(symbol, "empty symbol")

        cached = self._cache.get(key)
        if cached and time.monotonic() - cached[1] <= self._ttl:
            return cached[0]

        try:
            quote = self._fetch(key)
        except UpstreamPriceUnavailableError as e:
            fallback = self._stale(key)
            if fallback is None:
                raise
            logger.warning(f"Serving stale quote for {key}: {e.message}")
            return fallback

        self._cache[key] = (quote, time.monotonic())
        return quote

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Best-effort quotes for several symbols.

        Symbols with no available price are omitted from the result.
        """
        result: dict[str, Quote] = {}
        for symbol in symbols:
            try:
                quote = self.get_quote(symbol)
            except UpstreamPriceUnavailableError:
                continue
            result[quote.symbol] = quote
        return result

    def search(self, query: str, limit: int = 10) -> list[SymbolMatch]:
        """
        Search the provider for equities matching a symbol or company name.

        Results are not cached. A blank query matches nothing; a failed or
        timed-out provider raises UpstreamSearchUnavailableError.
        """
        text = (query or "").strip()
        if not text:
            return []

        future = self._pool.submit(self._provider.search, text)
        try:
            matches = future.result(timeout=self._fetch_timeout)
        except FuturesTimeoutError as e:
            future.cancel()
            logger.warning(f"Search for {text!r} timed out after {self._fetch_timeout}s")
            raise UpstreamSearchUnavailableError(text, "provider timed out") from e
        except Exception as e:
            logger.warning(f"Search for {text!r} failed: {e}")
            raise UpstreamSearchUnavailableError(text, "provider error") from e

        return list(matches)[:limit]

    def clear_cache(self) -> None:
        self._cache.clear()

    def _fetch(self, symbol: str) -> Quote:
        future = self._pool.submit(self._provider.get_quote, symbol)
        try:
            quote = future.result(timeout=self._fetch_timeout)
        except FuturesTimeoutError as e:
            future.cancel()
            logger.warning(f"Quote fetch for {symbol} timed out after {self._fetch_timeout}s")
            raise UpstreamPriceUnavailableError(symbol, "provider timed out") from e
        except UpstreamPriceUnavailableError:
            raise
        except Exception as e:
            logger.warning(f"Quote fetch for {symbol} failed: {e}")
            raise UpstreamPriceUnavailableError(symbol, "provider error") from e

        if quote is None or quote.price is None or quote.price <= 0:
            raise UpstreamPriceUnavailableError(symbol, "provider returned no price")
        return quote

    def _stale(self, symbol: str) -> Optional[Quote]:
        cached = self._cache.get(symbol)
        if cached is None:
            return None
        return replace(cached[0], stale=True)
