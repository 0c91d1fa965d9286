"""Domain services package."""

from .holdings_matcher import match_holdings
from .ingestion import (
    build_asset_catalog,
    build_holdings,
    build_ledger_entry,
    build_ledger_snapshot,
)
from .ledger_parser import parse_ledger, resolve_market_name
from .normalization import (
    compute_percent,
    format_share,
    normalize_identifier,
    normalize_timestamp,
    timestamp_to_iso,
)
from .roi import compute_roi
from .statistics import aggregate_statistics

__all__ = [
    "aggregate_statistics",
    "build_asset_catalog",
    "build_holdings",
    "build_ledger_entry",
    "build_ledger_snapshot",
    "compute_percent",
    "compute_roi",
    "format_share",
    "match_holdings",
    "normalize_identifier",
    "normalize_timestamp",
    "parse_ledger",
    "resolve_market_name",
    "timestamp_to_iso",
]
