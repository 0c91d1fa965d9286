"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from market_analyzer.infrastructure.logging.logger import get_app_logger
from market_analyzer.utils.utils import get_project_root


DEFAULT_LEDGER_FILENAME = "market_history.json"
DEFAULT_HOLDINGS_FILENAME = "inventory.json"


@dataclass(frozen=True)
class AnalyzerSettings:
    """Settings for snapshot sources, reports and the account registry.

    Attributes:
        data_dir: Directory holding one snapshot folder per account.
        reports_dir: Directory receiving exported reports.
        accounts_db_url: SQLAlchemy URL of the account registry.
        ledger_filename: Ledger snapshot file name inside an account folder.
        holdings_filename: Holdings snapshot file name inside an account
            folder.
    """

    data_dir: Path
    reports_dir: Path
    accounts_db_url: str
    ledger_filename: str = DEFAULT_LEDGER_FILENAME
    holdings_filename: str = DEFAULT_HOLDINGS_FILENAME

    @classmethod
    def from_env(cls) -> "AnalyzerSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            AnalyzerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        root = get_project_root()
        data_dir = cls._normalize_dir(
            os.getenv("LEDGER_DATA_DIR"),
            root / "data",
            logger=logger,
        )
        reports_dir = cls._normalize_dir(
            os.getenv("REPORTS_DIR"),
            root / "reports",
        )
        accounts_db_url = os.getenv("ACCOUNTS_DB_URL", "").strip()
        if not accounts_db_url:
            accounts_db_url = f"sqlite:///{data_dir / 'accounts.db'}"
        return cls(
            data_dir=data_dir,
            reports_dir=reports_dir,
            accounts_db_url=accounts_db_url,
            ledger_filename=(
                os.getenv("LEDGER_FILENAME", "").strip()
                or DEFAULT_LEDGER_FILENAME
            ),
            holdings_filename=(
                os.getenv("HOLDINGS_FILENAME", "").strip()
                or DEFAULT_HOLDINGS_FILENAME
            ),
        )

    @staticmethod
    def _normalize_dir(
        raw_path: str | None,
        default: Path,
        logger=None,
    ) -> Path:
        """Expand and resolve a directory path.

        Args:
            raw_path: Raw path from the environment, if any.
            default: Path used when raw_path is empty.
            logger: Logger used to warn about missing directories.

        Returns:
            Path: Resolved directory path.
        """
        path = (
            Path(raw_path.strip()).expanduser()
            if raw_path and raw_path.strip()
            else default
        ).resolve()
        if logger is not None and not path.exists():
            logger.warning(f"Directory does not exist at {path}")
        return path


__all__ = [
    "AnalyzerSettings",
    "DEFAULT_LEDGER_FILENAME",
    "DEFAULT_HOLDINGS_FILENAME",
]
