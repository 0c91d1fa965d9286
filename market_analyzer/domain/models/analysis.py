"""Domain models for holdings matching, ROI and account statistics."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MatchedPurchase:
    """Purchase checked against the current holdings.

    Attributes:
        app_id: Game identifier.
        asset_id: Asset id before disposal.
        new_asset_id: Asset id issued on disposal, looked up in holdings.
        market_name: Resolved display name.
        paid_amount: Amount paid.
        paid_fee: Fee paid.
        paid_total: Total paid.
        currency_id: Currency of the paid amounts.
        match_type: "purchased" or "other_source".
        time_sold: Unix timestamp of the purchase.
        transaction_id: Originating linked record id.
        transaction_status: Status of the originating linked record.
        icon_url: Icon taken from holdings when matched.
    """

    app_id: str | None
    asset_id: str | None
    new_asset_id: str
    market_name: str
    paid_amount: Decimal
    paid_fee: Decimal
    paid_total: Decimal
    currency_id: str | None
    match_type: str
    time_sold: int | None
    transaction_id: str
    transaction_status: str
    icon_url: str | None = None


@dataclass(frozen=True)
class MatchResult:
    """Eligible purchases split by presence in the holdings snapshot."""

    matched: tuple[MatchedPurchase, ...]
    unmatched: tuple[MatchedPurchase, ...]
    total_purchases: int
    matched_percentage: str
    unmatched_percentage: str

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)


@dataclass(frozen=True)
class ROIRecord:
    """Profitability of one completed purchase/sale pair."""

    transaction_id: str
    market_name: str
    app_id: str | None
    buy_price: Decimal
    sell_price: Decimal
    profit: Decimal
    roi_percent: Decimal
    time_purchase: int | None
    time_sale: int | None
    purchase_id: str
    sale_id: str


@dataclass(frozen=True)
class TransactionTrace:
    """Normalized ledger entry kept in the per-item trace."""

    type: str
    transaction_id: str
    asset_id: str | None
    new_asset_id: str | None
    amount: Decimal
    status: str
    timestamp: int | None
    date: str | None
    currency_id: str | None
    purchaser_id: str | None = None


@dataclass(frozen=True)
class ItemStatistics:
    """Per-item totals keyed by display name."""

    market_name: str
    total_invested: Decimal
    total_received: Decimal
    purchase_count: int
    sale_count: int
    completed_count: int
    uncompleted_count: int
    received_count: int
    transactions: tuple[TransactionTrace, ...]

    @property
    def profit(self) -> Decimal:
        return self.total_received - self.total_invested


@dataclass(frozen=True)
class OverallStatistics:
    """Account-wide rollup.

    Monetary totals are computed by the aggregator; the counts are the
    parser's summary counts, carried through unchanged.
    """

    total_invested: Decimal
    total_received: Decimal
    total_profit: Decimal
    roi_percent: Decimal
    total_transactions: int
    purchases_count: int
    sales_count: int
    completed_purchases: int
    uncompleted_purchases: int
    received_sales: int


@dataclass(frozen=True)
class AccountStatistics:
    """Overall rollup plus the per-item breakdown in first-seen order."""

    overall: OverallStatistics
    items: tuple[ItemStatistics, ...]

    def item(self, market_name: str) -> ItemStatistics | None:
        """Return the breakdown for a display name, if present."""
        for item in self.items:
            if item.market_name == market_name:
                return item
        return None


__all__ = [
    "MatchedPurchase",
    "MatchResult",
    "ROIRecord",
    "TransactionTrace",
    "ItemStatistics",
    "OverallStatistics",
    "AccountStatistics",
]
