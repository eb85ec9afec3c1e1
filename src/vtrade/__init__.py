"""Virtual trading backend: simulated accounts, orders, portfolio and watchlist."""

__version__ = "0.1.0"
