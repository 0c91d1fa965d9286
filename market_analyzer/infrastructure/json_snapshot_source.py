"""Snapshot source reading fetched marketplace payloads from JSON files.

Each account has a folder ``<data dir>/<username>/`` holding the market
history payload and, optionally, the inventory payload.
"""

from collections.abc import Mapping
import json
from pathlib import Path
from typing import Any

from market_analyzer.application.ports.snapshot_sources import (
    HoldingsSourcePort,
    LedgerSourcePort,
)
from market_analyzer.domain.models import AccountDTO
from market_analyzer.infrastructure.logging.logger import get_app_logger
from market_analyzer.infrastructure.settings import (
    DEFAULT_HOLDINGS_FILENAME,
    DEFAULT_LEDGER_FILENAME,
)


class JsonSnapshotSource(LedgerSourcePort, HoldingsSourcePort):
    """Ledger and holdings source backed by per-account JSON files."""

    def __init__(
        self,
        data_dir: Path,
        ledger_filename: str = DEFAULT_LEDGER_FILENAME,
        holdings_filename: str = DEFAULT_HOLDINGS_FILENAME,
        logger=None,
    ) -> None:
        """Initialize the source.

        Args:
            data_dir: Directory holding one folder per account.
            ledger_filename: Ledger file name inside an account folder.
            holdings_filename: Holdings file name inside an account folder.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._data_dir = Path(data_dir)
        self._ledger_filename = ledger_filename
        self._holdings_filename = holdings_filename
        self._logger = logger or get_app_logger()

    def account_dir(self, account: AccountDTO) -> Path:
        return self._data_dir / account.username

    def fetch_ledger(self, account: AccountDTO) -> Mapping[str, Any]:
        """Return the market history payload for the account.

        Raises:
            RuntimeError: If the ledger file is missing or not an object.
        """
        path = self.account_dir(account) / self._ledger_filename
        if not path.exists():
            raise RuntimeError(f"Ledger snapshot not found at {path}")
        payload = self._read_json(path)
        if not isinstance(payload, Mapping):
            raise RuntimeError(f"Ledger snapshot at {path} is not an object")
        self._logger.info(f"Loaded ledger snapshot from {path}")
        return payload

    def fetch_holdings(self, account: AccountDTO) -> list[Any] | None:
        """Return inventory items for the account, None when absent.

        The payload may be a bare list of items or an object with an
        ``items`` list.
        """
        path = self.account_dir(account) / self._holdings_filename
        if not path.exists():
            self._logger.warning(f"Holdings snapshot not found at {path}")
            return None
        payload = self._read_json(path)
        if isinstance(payload, Mapping):
            payload = payload.get("items", [])
        if not isinstance(payload, list):
            raise RuntimeError(f"Holdings snapshot at {path} is not a list")
        self._logger.info(
            f"Loaded {len(payload)} holdings items from {path}"
        )
        return payload

    @staticmethod
    def _read_json(path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as handle:
                return json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RuntimeError(f"Invalid JSON in {path}: {exc}") from exc


__all__ = ["JsonSnapshotSource"]
