"""Tests for the Excel report writer."""

from pathlib import Path
from unittest.mock import MagicMock

from openpyxl import load_workbook

from market_analyzer.application.use_cases.analyze_account import (
    AnalyzeAccountUseCase,
)
from market_analyzer.domain.models import AccountDTO
from market_analyzer.infrastructure.excel_report_writer import (
    ExcelReportWriter,
)


def _report(account_id, ledger, holdings):
    ledger_source = MagicMock()
    ledger_source.fetch_ledger.return_value = ledger
    holdings_source = MagicMock()
    holdings_source.fetch_holdings.return_value = holdings
    use_case = AnalyzeAccountUseCase(
        ledger_source,
        holdings_source,
        logger=MagicMock(),
    )
    return use_case.execute(AccountDTO(username="alice", steam_id=account_id))


def test_write_creates_all_sheets(
    tmp_path: Path, account_id, round_trip_ledger
) -> None:
    """The workbook should hold every sheet, inventory included."""
    holdings = [
        {
            "assetid": "400",
            "appid": 730,
            "market_hash_name": "AWP | Asiimov (Battle-Scarred)",
            "type": "Covert Sniper Rifle",
            "tradable": 1,
        }
    ]
    report = _report(account_id, round_trip_ledger, holdings)
    target = tmp_path / "out" / "report.xlsx"

    written = ExcelReportWriter().write(report, target)

    assert written == target
    workbook = load_workbook(target)
    assert workbook.sheetnames == [
        "Dashboard",
        "Matched",
        "Unmatched",
        "ROI",
        "Items",
        "Inventory",
    ]
    dashboard = workbook["Dashboard"]
    assert dashboard["A1"].value == "Total Invested"
    assert dashboard["B1"].value == 1725
    assert dashboard["D1"].value == "Total Transactions"
    assert dashboard["E1"].value == 4
    assert dashboard["A6"].value == "Matched %"
    assert dashboard["B6"].value == "50.00%"

    roi = workbook["ROI"]
    assert roi["A1"].value == "appid"
    assert roi.max_row == 2
    assert roi["C2"].value == 1150
    assert roi["D2"].value == 1500
    assert roi["E2"].value == 350
    assert roi.freeze_panes == "A2"

    matched = workbook["Matched"]
    assert matched["C2"].value == "400"
    assert matched["G2"].value == "purchased"

    items = workbook["Items"]
    assert [items.cell(row, 1).value for row in range(2, 5)] == [
        "AK-47 | Redline (Field-Tested)",
        "AWP | Asiimov (Battle-Scarred)",
        "Sticker | Crown (Foil)",
    ]

    inventory = workbook["Inventory"]
    assert [cell.value for cell in inventory[1]] == [
        "assetid",
        "appId",
        "market_hash_name",
        "type",
        "tradable",
        "marketable",
        "commodity",
    ]
    assert [cell.value for cell in inventory[2]] == [
        "400",
        "730",
        "AWP | Asiimov (Battle-Scarred)",
        "Covert Sniper Rifle",
        True,
        False,
        False,
    ]


def test_write_without_holdings_skips_match_sheets(
    tmp_path: Path, account_id, round_trip_ledger
) -> None:
    """Reports without a holdings match should omit the match sheets."""
    report = _report(account_id, round_trip_ledger, None)
    target = tmp_path / "report.xlsx"

    ExcelReportWriter().write(report, target)

    workbook = load_workbook(target)
    assert workbook.sheetnames == ["Dashboard", "ROI", "Items"]
    assert workbook["Dashboard"].max_row == 5


def test_write_empty_report(tmp_path: Path, account_id) -> None:
    """An empty ledger and empty holdings should still produce headers."""
    report = _report(account_id, {"purchases": []}, [])
    target = tmp_path / "report.xlsx"

    ExcelReportWriter().write(report, target)

    workbook = load_workbook(target)
    assert workbook["ROI"].max_row == 1
    assert workbook["Inventory"].max_row == 1
    assert workbook["Dashboard"]["B6"].value == "0%"
