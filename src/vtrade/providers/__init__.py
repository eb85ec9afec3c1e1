"""Market data providers module."""

from vtrade.providers.market_data_provider import MarketDataProvider
from vtrade.providers.stub_provider import StubMarketDataProvider
from vtrade.providers.yfinance_provider import YFinanceProvider

__all__ = [
    "MarketDataProvider",
    "StubMarketDataProvider",
    "YFinanceProvider",
]
