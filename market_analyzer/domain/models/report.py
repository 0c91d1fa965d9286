"""Domain model bundling one account's analysis outputs."""

from dataclasses import dataclass

from market_analyzer.domain.models.accounts import AccountDTO
from market_analyzer.domain.models.analysis import (
    AccountStatistics,
    MatchResult,
    ROIRecord,
)
from market_analyzer.domain.models.ledger import HoldingItem
from market_analyzer.domain.models.transactions import ParseResult


@dataclass(frozen=True)
class AccountReport:
    """Outputs of one analysis run.

    Attributes:
        account: Analyzed account.
        parse_result: Linked transactions and summary counts.
        match_result: Holdings match, None when no holdings were available.
        roi_records: ROI per completed pair.
        statistics: Overall rollup and per-item breakdown.
        holdings: Current holdings in inventory order, None when no
            holdings were available.
    """

    account: AccountDTO
    parse_result: ParseResult
    match_result: MatchResult | None
    roi_records: tuple[ROIRecord, ...]
    statistics: AccountStatistics
    holdings: tuple[HoldingItem, ...] | None = None


__all__ = ["AccountReport"]
