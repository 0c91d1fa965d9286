"""Port for exporting analysis reports."""

from pathlib import Path
from typing import Protocol

from market_analyzer.domain.models import AccountReport


class ReportWriterPort(Protocol):
    """Port exposing report serialization."""

    file_extension: str

    def write(self, report: AccountReport, path: Path) -> Path:
        """Write the report to path and return the written path."""


__all__ = ["ReportWriterPort"]
