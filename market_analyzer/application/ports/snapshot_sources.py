"""Ports for reading already fetched ledger and holdings snapshots.

Fetching from the marketplace (sessions, paging, rate limits) happens
outside this package; these ports only hand over complete snapshots.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from market_analyzer.domain.models import AccountDTO, HoldingItem, LedgerSnapshot


class LedgerSourcePort(Protocol):
    """Port exposing an account's marketplace ledger."""

    def fetch_ledger(
        self,
        account: AccountDTO,
    ) -> Mapping[str, Any] | LedgerSnapshot:
        """Return the ledger payload for the account."""


class HoldingsSourcePort(Protocol):
    """Port exposing an account's current holdings."""

    def fetch_holdings(
        self,
        account: AccountDTO,
    ) -> Sequence[Mapping[str, Any] | HoldingItem] | None:
        """Return the holdings, or None when no snapshot is available."""


__all__ = ["LedgerSourcePort", "HoldingsSourcePort"]
