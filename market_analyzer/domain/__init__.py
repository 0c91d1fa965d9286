"""Domain package for ledger reconciliation rules and core models."""

from .constants import (
    MATCH_TYPE_OTHER_SOURCE,
    MATCH_TYPE_PURCHASED,
    ROLE_PURCHASE,
    ROLE_SALE,
    STATUS_COMPLETED,
    STATUS_RECEIVED,
    STATUS_UNCOMPLETED,
    UNKNOWN_ITEM,
)
from .errors import InvalidInputError
from .models import (
    AccountDTO,
    AccountReport,
    AccountStatistics,
    HoldingItem,
    LedgerSnapshot,
    LinkedTransactionRecord,
    MatchResult,
    ParsedTransaction,
    ParseResult,
    ROIRecord,
)
from .services import (
    aggregate_statistics,
    compute_roi,
    match_holdings,
    parse_ledger,
)

__all__ = [
    "MATCH_TYPE_OTHER_SOURCE",
    "MATCH_TYPE_PURCHASED",
    "ROLE_PURCHASE",
    "ROLE_SALE",
    "STATUS_COMPLETED",
    "STATUS_RECEIVED",
    "STATUS_UNCOMPLETED",
    "UNKNOWN_ITEM",
    "InvalidInputError",
    "AccountDTO",
    "AccountReport",
    "AccountStatistics",
    "HoldingItem",
    "LedgerSnapshot",
    "LinkedTransactionRecord",
    "MatchResult",
    "ParsedTransaction",
    "ParseResult",
    "ROIRecord",
    "aggregate_statistics",
    "compute_roi",
    "match_holdings",
    "parse_ledger",
]
