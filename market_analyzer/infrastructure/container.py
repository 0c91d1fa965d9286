"""Composition root for wiring infrastructure adapters."""

from market_analyzer.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from market_analyzer.application.ports.database import DatabaseEnginePort
from market_analyzer.application.ports.report_writer import ReportWriterPort
from market_analyzer.application.use_cases.analyze_account import (
    AnalyzeAccountUseCase,
)
from market_analyzer.application.use_cases.export_report import (
    ExportReportUseCase,
)
from market_analyzer.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from market_analyzer.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from market_analyzer.infrastructure.excel_report_writer import (
    ExcelReportWriter,
)
from market_analyzer.infrastructure.json_snapshot_source import (
    JsonSnapshotSource,
)
from market_analyzer.infrastructure.logging.logger import get_app_logger
from market_analyzer.infrastructure.settings import AnalyzerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the account registry with its schema in place."""
    resolved_db = db_port or build_database_adapter()
    repository = SqlAlchemyAccountsRepository(resolved_db)
    repository.ensure_schema()
    return repository


def build_snapshot_source(
    settings: AnalyzerSettings | None = None,
) -> JsonSnapshotSource:
    """Return the JSON snapshot source for the configured data directory."""
    resolved = settings or AnalyzerSettings.from_env()
    return JsonSnapshotSource(
        resolved.data_dir,
        ledger_filename=resolved.ledger_filename,
        holdings_filename=resolved.holdings_filename,
        logger=get_app_logger(),
    )


def build_analyze_account_use_case(
    settings: AnalyzerSettings | None = None,
) -> AnalyzeAccountUseCase:
    """Return the analysis use case wired to the snapshot source."""
    source = build_snapshot_source(settings)
    return AnalyzeAccountUseCase(
        ledger_source=source,
        holdings_source=source,
        logger=get_app_logger(),
    )


def build_report_writer() -> ReportWriterPort:
    """Return the report writer."""
    return ExcelReportWriter()


def build_export_report_use_case(
    settings: AnalyzerSettings | None = None,
) -> ExportReportUseCase:
    """Return the export use case writing into the reports directory."""
    resolved = settings or AnalyzerSettings.from_env()
    return ExportReportUseCase(
        writer=build_report_writer(),
        reports_dir=resolved.reports_dir,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_snapshot_source",
    "build_analyze_account_use_case",
    "build_report_writer",
    "build_export_report_use_case",
]
