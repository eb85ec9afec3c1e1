"""Ledger service: authoritative cash balance and holdings per account."""

from decimal import Decimal, ROUND_HALF_UP

from vtrade.core.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidInputError,
)
from vtrade.domain.models import Account, Holding
from vtrade.repositories.protocols import AccountRepository

AVERAGE_COST_QUANT = Decimal("0.000001")


def normalize_symbol(symbol: str) -> str:
    """Strip whitespace and uppercase a symbol."""
    return (symbol or "").strip().upper()


class LedgerService:
    """
    Service owning account balance and holdings mutations.

    apply_buy/apply_sell validate first and only then mutate, so a rejected
    trade leaves the account object exactly as it was. Persistence happens
    through save(), which stages the account in the caller's unit of work.
    """

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def load(self, account_id: str) -> Account:
        """Get account with holdings by ID."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)
        return account

    def save(self, account: Account) -> None:
        """Stage the full account document for the next commit."""
        self._account_repo.save(account)

    def apply_buy(
        self,
        account: Account,
        symbol: str,
        quantity: int,
        price: Decimal,
    ) -> Account:
        """
        Debit cash and add shares at the weighted-average cost.

        new_avg = (q0 * avg0 + q * price) / (q0 + q)
        """
        symbol = normalize_symbol(symbol)
        self._check_trade_args(symbol, quantity, price)

        cost = price * quantity
        if account.cash_balance < cost:
            raise InsufficientFundsError(str(cost), str(account.cash_balance))

        account.cash_balance -= cost

        existing = account.holdings.get(symbol)
        if existing:
            total_quantity = existing.quantity + quantity
            total_cost = existing.quantity * existing.average_cost + cost
            account.holdings[symbol] = Holding(
                symbol=symbol,
                quantity=total_quantity,
                average_cost=(total_cost / total_quantity).quantize(
                    AVERAGE_COST_QUANT, rounding=ROUND_HALF_UP
                ),
            )
        else:
            account.holdings[symbol] = Holding(
                symbol=symbol,
                quantity=quantity,
                average_cost=price,
            )
        return account

    def apply_sell(
        self,
        account: Account,
        symbol: str,
        quantity: int,
        price: Decimal,
    ) -> Account:
        """Credit cash and remove shares; a holding sold down to zero is deleted."""
        symbol = normalize_symbol(symbol)
        self._check_trade_args(symbol, quantity, price)

        holding = account.holdings.get(symbol)
        available = holding.quantity if holding else 0
        if available < quantity:
            raise InsufficientSharesError(symbol, str(quantity), str(available))

        account.cash_balance += price * quantity

        remaining = holding.quantity - quantity
        if remaining == 0:
            del account.holdings[symbol]
        else:
            # Selling does not change the cost basis of the remaining shares
            account.holdings[symbol] = Holding(
                symbol=symbol,
                quantity=remaining,
                average_cost=holding.average_cost,
            )
        return account

    @staticmethod
    def _check_trade_args(symbol: str, quantity: int, price: Decimal) -> None:
        if not symbol:
            raise InvalidInputError("Symbol is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidInputError("Quantity must be a positive integer")
        if not isinstance(price, Decimal) or not price.is_finite() or price <= 0:
            raise InvalidInputError("Price must be a positive decimal")
