"""Use case producing the full ledger analysis for one account.

The ledger is parsed first; holdings matching, ROI and statistics are
independent consumers of the parsed transactions.
"""

from market_analyzer.application.ports.snapshot_sources import (
    HoldingsSourcePort,
    LedgerSourcePort,
)
from market_analyzer.domain.models import AccountDTO, AccountReport
from market_analyzer.domain.services import (
    aggregate_statistics,
    build_holdings,
    compute_roi,
    match_holdings,
    parse_ledger,
)
from market_analyzer.infrastructure.logging.logger import get_app_logger


class AnalyzeAccountUseCase:
    """Reconcile an account's ledger and compute its profitability."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        holdings_source: HoldingsSourcePort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_source: Port providing the ledger snapshot.
            holdings_source: Optional port providing current holdings.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_source = ledger_source
        self._holdings_source = holdings_source
        self._logger = logger or get_app_logger()

    def execute(self, account: AccountDTO) -> AccountReport:
        """Return the analysis report for the account.

        Args:
            account: Account whose ledger is analyzed.

        Returns:
            AccountReport: Parse, match, ROI and statistics outputs.
        """
        ledger = self._ledger_source.fetch_ledger(account)
        parse_result = parse_ledger(
            ledger,
            account.steam_id,
            logger=self._logger,
        )
        transactions = parse_result.transactions

        holdings = None
        if self._holdings_source is not None:
            holdings = self._holdings_source.fetch_holdings(account)
        if holdings is None:
            self._logger.warning(
                f"No holdings available for {account.username}; "
                f"skipping holdings match"
            )
            match_result = None
        else:
            holdings = build_holdings(holdings, self._logger)
            match_result = match_holdings(
                transactions,
                holdings,
                logger=self._logger,
            )

        roi_records = compute_roi(transactions, logger=self._logger)
        statistics = aggregate_statistics(parse_result, logger=self._logger)
        self._logger.info(
            f"Analysis finished for {account.username}: "
            f"{len(transactions)} transactions, "
            f"{len(roi_records)} ROI records"
        )
        return AccountReport(
            account=account,
            parse_result=parse_result,
            match_result=match_result,
            roi_records=tuple(roi_records),
            statistics=statistics,
            holdings=holdings,
        )


__all__ = ["AnalyzeAccountUseCase"]
