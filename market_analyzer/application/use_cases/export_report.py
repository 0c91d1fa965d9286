"""Use case exporting an analysis report to the reports directory."""

from datetime import date
from pathlib import Path

from market_analyzer.application.ports.report_writer import ReportWriterPort
from market_analyzer.domain.models import AccountReport
from market_analyzer.infrastructure.logging.logger import get_app_logger


class ExportReportUseCase:
    """Write an AccountReport as report_<account>_<date> file."""

    def __init__(
        self,
        writer: ReportWriterPort,
        reports_dir: Path,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            writer: Port serializing the report.
            reports_dir: Directory receiving the report files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._writer = writer
        self._reports_dir = Path(reports_dir)
        self._logger = logger or get_app_logger()

    def execute(
        self,
        report: AccountReport,
        report_date: date | None = None,
    ) -> Path:
        """Write the report and return its path.

        Args:
            report: Analysis outputs to export.
            report_date: Date stamped into the file name (default: today).

        Returns:
            Path: Path of the written report.
        """
        stamp = (report_date or date.today()).isoformat()
        self._reports_dir.mkdir(parents=True, exist_ok=True)
        filename = (
            f"report_{report.account.username}_{stamp}"
            f".{self._writer.file_extension}"
        )
        written = self._writer.write(report, self._reports_dir / filename)
        self._logger.info(f"Report saved: {written}")
        return written


__all__ = ["ExportReportUseCase"]
