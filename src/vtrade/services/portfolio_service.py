"""Portfolio service: holdings valued at current market prices."""

from decimal import Decimal
from typing import Optional

from vtrade.domain.models import Account
from vtrade.domain.views import PositionView, PortfolioSummaryView, Quote
from vtrade.services.ledger_service import LedgerService
from vtrade.services.market_data_service import MarketDataService

PERCENT_QUANT = Decimal("0.01")
MONEY_QUANT = Decimal("0.0001")


class PortfolioService:
    """
    Read-only portfolio views over the ledger.

    Formula: market_value = quantity × current_price,
    unrealized_gain = market_value - quantity × average_cost.
    A holding whose price cannot be sourced is reported without market
    figures; no price is ever substituted.
    """

    def __init__(
        self,
        ledger_service: LedgerService,
        market_data_service: MarketDataService,
    ):
        self._ledger = ledger_service
        self._market = market_data_service

    def get_portfolio(self, account_id: str) -> list[PositionView]:
        """Return the account's holdings sorted by symbol, enriched with prices."""
        account = self._ledger.load(account_id)
        quotes = self._quotes_for(account)
        return [
            self._to_position(holding, quotes.get(symbol))
            for symbol, holding in sorted(account.holdings.items())
        ]

    def get_summary(self, account_id: str) -> PortfolioSummaryView:
        """Return cash, invested amount and, when every holding is priced, equity."""
        account = self._ledger.load(account_id)
        quotes = self._quotes_for(account)

        invested = Decimal("0")
        market_value = Decimal("0")
        unpriced: list[str] = []
        for symbol, holding in sorted(account.holdings.items()):
            invested += holding.cost_basis
            quote = quotes.get(symbol)
            if quote is None:
                unpriced.append(symbol)
            else:
                market_value += quote.price * holding.quantity

        invested = invested.quantize(MONEY_QUANT)
        if unpriced:
            return PortfolioSummaryView(
                cash_balance=account.cash_balance,
                invested=invested,
                holdings_count=len(account.holdings),
                unpriced_symbols=unpriced,
            )

        market_value = market_value.quantize(MONEY_QUANT)
        return PortfolioSummaryView(
            cash_balance=account.cash_balance,
            invested=invested,
            holdings_count=len(account.holdings),
            market_value=market_value,
            total_equity=account.cash_balance + market_value,
        )

    def _quotes_for(self, account: Account) -> dict[str, Quote]:
        if not account.holdings:
            return {}
        return self._market.get_quotes(list(account.holdings))

    @staticmethod
    def _to_position(holding, quote: Optional[Quote]) -> PositionView:
        invested = holding.cost_basis.quantize(MONEY_QUANT)
        view = PositionView(
            symbol=holding.symbol,
            quantity=holding.quantity,
            average_cost=holding.average_cost,
            invested=invested,
        )
        if quote is None:
            return view

        market_value = (quote.price * holding.quantity).quantize(MONEY_QUANT)
        gain = market_value - invested
        view.company_name = quote.company_name
        view.current_price = quote.price
        view.market_value = market_value
        view.unrealized_gain = gain
        if invested:
            view.unrealized_gain_pct = (gain / invested * 100).quantize(PERCENT_QUANT)
        return view
