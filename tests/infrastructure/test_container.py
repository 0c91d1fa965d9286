"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from market_analyzer.application.use_cases.analyze_account import (
    AnalyzeAccountUseCase,
)
from market_analyzer.application.use_cases.export_report import (
    ExportReportUseCase,
)
from market_analyzer.infrastructure import container
from market_analyzer.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from market_analyzer.infrastructure.excel_report_writer import (
    ExcelReportWriter,
)
from market_analyzer.infrastructure.json_snapshot_source import (
    JsonSnapshotSource,
)
from market_analyzer.infrastructure.settings import AnalyzerSettings


def _settings(tmp_path: Path) -> AnalyzerSettings:
    return AnalyzerSettings(
        data_dir=tmp_path / "data",
        reports_dir=tmp_path / "reports",
        accounts_db_url="sqlite://",
        ledger_filename="history.json",
        holdings_filename="items.json",
    )


def test_build_accounts_repository_ensures_schema(monkeypatch) -> None:
    """The registry should be returned with its schema created."""
    ensure = MagicMock()
    monkeypatch.setattr(SqlAlchemyAccountsRepository, "ensure_schema", ensure)
    db_port = MagicMock()

    repository = container.build_accounts_repository(db_port)

    assert isinstance(repository, SqlAlchemyAccountsRepository)
    ensure.assert_called_once()


def test_build_snapshot_source_uses_settings(
    monkeypatch, tmp_path: Path
) -> None:
    """The snapshot source should read from the configured folder."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    source = container.build_snapshot_source(_settings(tmp_path))

    assert isinstance(source, JsonSnapshotSource)
    assert source._data_dir == tmp_path / "data"
    assert source._ledger_filename == "history.json"
    assert source._holdings_filename == "items.json"


def test_build_analyze_account_use_case_wires_source(
    monkeypatch, tmp_path: Path
) -> None:
    """Ledger and holdings should come from the same snapshot source."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_analyze_account_use_case(_settings(tmp_path))

    assert isinstance(use_case, AnalyzeAccountUseCase)
    assert use_case._ledger_source is use_case._holdings_source


def test_build_export_report_use_case_targets_reports_dir(
    monkeypatch, tmp_path: Path
) -> None:
    """Exports should go to the configured reports directory."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_export_report_use_case(_settings(tmp_path))

    assert isinstance(use_case, ExportReportUseCase)
    assert isinstance(use_case._writer, ExcelReportWriter)
    assert use_case._reports_dir == tmp_path / "reports"
