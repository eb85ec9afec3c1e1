"""Watchlist service."""

import logging
from typing import Optional

from vtrade.core.exceptions import (
    AccountNotFoundError,
    AlreadyWatchedError,
    InvalidInputError,
)
from vtrade.core.timezone import now_utc
from vtrade.domain.models import WatchlistItem
from vtrade.repositories.protocols import UnitOfWork
from vtrade.services.ledger_service import normalize_symbol

logger = logging.getLogger(__name__)


class WatchlistService:
    """Per-account list of watched symbols. Does not touch balances or holdings."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    def list(self, account_id: str) -> list[WatchlistItem]:
        self._require_account(account_id)
        return self._uow.watchlist.list_by_account(account_id)

    def add(
        self,
        account_id: str,
        symbol: str,
        company_name: Optional[str] = None,
    ) -> WatchlistItem:
        """
        Add a symbol to the account's watchlist.

        Raises AlreadyWatchedError if the symbol is already present.
        """
        symbol = normalize_symbol(symbol)
        if not symbol:
            raise InvalidInputError("Symbol is required")
        self._require_account(account_id)

        if self._uow.watchlist.get(account_id, symbol):
            raise AlreadyWatchedError(symbol)

        item = WatchlistItem(
            account_id=account_id,
            symbol=symbol,
            company_name=company_name,
            added_at=now_utc(),
        )
        try:
            self._uow.watchlist.add(item)
            self._uow.commit()
        except Exception:
            self._uow.rollback()
            raise
        logger.info(f"{account_id} is now watching {symbol}")
        return item

    def remove(self, account_id: str, symbol: str) -> bool:
        """Remove a symbol. Removing an absent symbol is a no-op returning False."""
        symbol = normalize_symbol(symbol)
        self._require_account(account_id)
        try:
            removed = self._uow.watchlist.remove(account_id, symbol)
            self._uow.commit()
        except Exception:
            self._uow.rollback()
            raise
        if removed:
            logger.info(f"{account_id} stopped watching {symbol}")
        return removed

    def _require_account(self, account_id: str) -> None:
        if not self._uow.accounts.exists(account_id):
            raise AccountNotFoundError(account_id)
