"""Domain models for parsed and linked ledger transactions."""

from dataclasses import dataclass
from decimal import Decimal

from market_analyzer.domain.constants import ROLE_PURCHASE, ROLE_SALE
from market_analyzer.domain.models.ledger import RawLedgerEntry


@dataclass(frozen=True)
class ParsedTransaction:
    """Ledger entry classified from the account's point of view.

    Attributes:
        record_id: Key of the raw ledger entry.
        role: "purchase" when the account bought the item, else "sale".
        app_id: Game identifier.
        context_id: Inventory context identifier.
        asset_id: Asset id before disposal.
        new_asset_id: Asset id issued on disposal.
        market_name: Resolved display name.
        paid_amount: Amount paid by the purchaser.
        paid_fee: Fee paid by the purchaser.
        paid_total: paid_amount + paid_fee.
        currency_id: Currency of the paid amounts.
        time_sold: Unix timestamp of completion.
        purchaser_id: Identifier of the purchaser.
        raw: Originating ledger entry.
    """

    record_id: str
    role: str
    app_id: str | None
    context_id: str | None
    asset_id: str | None
    new_asset_id: str | None
    market_name: str
    paid_amount: Decimal
    paid_fee: Decimal
    paid_total: Decimal
    currency_id: str | None
    time_sold: int | None
    purchaser_id: str | None
    raw: RawLedgerEntry

    @property
    def is_purchase(self) -> bool:
        return self.role == ROLE_PURCHASE

    @property
    def is_sale(self) -> bool:
        return self.role == ROLE_SALE

    @property
    def received_amount(self) -> Decimal:
        """Amount credited to the seller, zero when the ledger omits it."""
        if self.raw.received_amount is None:
            return Decimal("0")
        return self.raw.received_amount

    @property
    def received_currency_id(self) -> str | None:
        return self.raw.received_currency_id


@dataclass(frozen=True)
class LinkedTransactionRecord:
    """A parsed transaction together with its linked counterpart.

    A completed purchase and its sale produce two records that reference
    each other through ``counterpart``.

    Attributes:
        transaction_id: "<role>:<record id>".
        status: "completed", "uncompleted" or "received".
        transaction: The transaction this record stands for.
        counterpart: Linked transaction of the opposite role, if any.
    """

    transaction_id: str
    status: str
    transaction: ParsedTransaction
    counterpart: ParsedTransaction | None = None

    @property
    def role(self) -> str:
        return self.transaction.role

    @property
    def linked_sale_id(self) -> str | None:
        if self.transaction.is_purchase and self.counterpart is not None:
            return self.counterpart.record_id
        return None

    @property
    def linked_purchase_id(self) -> str | None:
        if self.transaction.is_sale and self.counterpart is not None:
            return self.counterpart.record_id
        return None


@dataclass(frozen=True)
class ParseCounts:
    """Summary counts of a parse run."""

    purchases_count: int
    sales_count: int
    completed_count: int
    uncompleted_count: int
    received_count: int
    total_transactions: int


@dataclass(frozen=True)
class ParseResult:
    """Output of the ledger parser."""

    account_id: str
    transactions: tuple[LinkedTransactionRecord, ...]
    counts: ParseCounts


__all__ = [
    "ParsedTransaction",
    "LinkedTransactionRecord",
    "ParseCounts",
    "ParseResult",
]
