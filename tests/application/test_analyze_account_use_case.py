"""Tests for the AnalyzeAccountUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from market_analyzer.application.use_cases.analyze_account import (
    AnalyzeAccountUseCase,
)
from market_analyzer.domain.models import AccountDTO


def _account(steam_id: str) -> AccountDTO:
    return AccountDTO(username="trader", steam_id=steam_id)


def test_execute_builds_full_report(account_id, round_trip_ledger) -> None:
    """The report should hold parse, match, ROI and statistics outputs."""
    account = _account(account_id)
    ledger_source = MagicMock()
    ledger_source.fetch_ledger.return_value = round_trip_ledger
    holdings_source = MagicMock()
    holdings_source.fetch_holdings.return_value = [{"assetid": "400"}]
    logger = MagicMock()

    use_case = AnalyzeAccountUseCase(
        ledger_source=ledger_source,
        holdings_source=holdings_source,
        logger=logger,
    )

    report = use_case.execute(account)

    ledger_source.fetch_ledger.assert_called_once_with(account)
    holdings_source.fetch_holdings.assert_called_once_with(account)
    assert report.account is account
    assert report.parse_result.account_id == account_id
    assert len(report.parse_result.transactions) == 4
    assert [item.new_asset_id for item in report.match_result.matched] == [
        "400"
    ]
    assert [item.new_asset_id for item in report.match_result.unmatched] == [
        "200"
    ]
    assert [record.purchase_id for record in report.roi_records] == ["p1"]
    assert [item.asset_id for item in report.holdings] == ["400"]
    assert report.statistics.overall.total_profit == Decimal("25")
    logger.info.assert_called()


def test_execute_skips_matching_without_holdings(
    account_id, round_trip_ledger
) -> None:
    """Missing holdings should leave match_result empty and warn."""
    ledger_source = MagicMock()
    ledger_source.fetch_ledger.return_value = round_trip_ledger
    holdings_source = MagicMock()
    holdings_source.fetch_holdings.return_value = None
    logger = MagicMock()

    use_case = AnalyzeAccountUseCase(ledger_source, holdings_source, logger)

    report = use_case.execute(_account(account_id))

    assert report.match_result is None
    assert report.holdings is None
    assert len(report.roi_records) == 1
    warnings = [call.args[0] for call in logger.warning.call_args_list]
    assert any("No holdings available for trader" in w for w in warnings)


def test_execute_without_holdings_source(account_id, round_trip_ledger) -> None:
    """A use case built without a holdings port still analyzes the ledger."""
    ledger_source = MagicMock()
    ledger_source.fetch_ledger.return_value = round_trip_ledger

    use_case = AnalyzeAccountUseCase(ledger_source, logger=MagicMock())

    report = use_case.execute(_account(account_id))

    assert report.match_result is None
    assert report.statistics.overall.purchases_count == 2


def test_execute_uses_steam_id_as_purchaser(
    other_id, round_trip_ledger
) -> None:
    """Roles should be decided from the account's steam id."""
    ledger_source = MagicMock()
    ledger_source.fetch_ledger.return_value = round_trip_ledger

    use_case = AnalyzeAccountUseCase(ledger_source, logger=MagicMock())

    report = use_case.execute(_account(other_id))

    counts = report.parse_result.counts
    assert counts.purchases_count == 2
    assert counts.sales_count == 2
    assert report.roi_records == ()
