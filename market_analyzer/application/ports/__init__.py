"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .database import DatabaseEnginePort
from .report_writer import ReportWriterPort
from .snapshot_sources import HoldingsSourcePort, LedgerSourcePort

__all__ = [
    "AccountsRepositoryPort",
    "DatabaseEnginePort",
    "ReportWriterPort",
    "HoldingsSourcePort",
    "LedgerSourcePort",
]
