"""Domain models package."""

from .accounts import AccountDTO
from .analysis import (
    AccountStatistics,
    ItemStatistics,
    MatchedPurchase,
    MatchResult,
    OverallStatistics,
    ROIRecord,
    TransactionTrace,
)
from .ledger import (
    AssetMetadata,
    AssetReference,
    CatalogKey,
    HoldingItem,
    LedgerSnapshot,
    RawLedgerEntry,
)
from .report import AccountReport
from .transactions import (
    LinkedTransactionRecord,
    ParseCounts,
    ParsedTransaction,
    ParseResult,
)

__all__ = [
    "AccountDTO",
    "AccountReport",
    "AccountStatistics",
    "ItemStatistics",
    "MatchedPurchase",
    "MatchResult",
    "OverallStatistics",
    "ROIRecord",
    "TransactionTrace",
    "AssetMetadata",
    "AssetReference",
    "CatalogKey",
    "HoldingItem",
    "LedgerSnapshot",
    "RawLedgerEntry",
    "LinkedTransactionRecord",
    "ParseCounts",
    "ParsedTransaction",
    "ParseResult",
]
