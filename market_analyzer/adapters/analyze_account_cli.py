"""CLI adapter analyzing a registered account's ledger snapshot.

Usage: ``python -m market_analyzer.adapters.analyze_account_cli <username>
[--export]``. The username may also come from ``ANALYZE_ACCOUNT``.
"""

import os
import sys

from market_analyzer.application.use_cases.get_accounts import (
    GetAccountsUseCase,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import AccountReport
from market_analyzer.infrastructure.container import (
    build_accounts_repository,
    build_analyze_account_use_case,
    build_export_report_use_case,
)
from market_analyzer.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from market_analyzer.infrastructure.settings import AnalyzerSettings


EXPORT_FLAG = "--export"


def _print_report(report: AccountReport) -> None:
    """Print the overall rollup and holdings match summary."""
    stats = report.statistics.overall
    print(f"Account: {report.account.username} ({report.account.steam_id})")
    print(
        f"Invested={stats.total_invested} Received={stats.total_received} "
        f"Profit={stats.total_profit} ROI={stats.roi_percent}%"
    )
    print(
        f"Transactions={stats.total_transactions} "
        f"purchases={stats.purchases_count} sales={stats.sales_count} "
        f"completed={stats.completed_purchases} "
        f"uncompleted={stats.uncompleted_purchases} "
        f"received={stats.received_sales}"
    )
    print(f"ROI records: {len(report.roi_records)}")
    match = report.match_result
    if match is not None:
        print(
            f"Holdings: matched={match.matched_count} "
            f"({match.matched_percentage}), "
            f"unmatched={match.unmatched_count} "
            f"({match.unmatched_percentage})"
        )


def main(argv: list[str] | None = None) -> int:
    """Run the analysis for one account.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        int: Process exit code.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    logger = get_app_logger()
    export = EXPORT_FLAG in args
    names = [arg for arg in args if not arg.startswith("--")]
    username = names[0] if names else os.getenv("ANALYZE_ACCOUNT", "")
    get_usage_logger().info(
        f"analyze_account_cli username={username!r} export={export}"
    )
    if not username.strip():
        print(
            "Usage: analyze_account_cli <username> [--export] "
            "(or set ANALYZE_ACCOUNT)"
        )
        return 1

    try:
        settings = AnalyzerSettings.from_env()
        accounts = GetAccountsUseCase(build_accounts_repository())
        account = accounts.find(username)
        if account is None:
            available = ", ".join(a.username for a in accounts.execute())
            logger.error(f"Account '{username}' not found")
            print(f"Account '{username}' not found")
            print(f"Available accounts: {available or '-'}")
            return 1

        report = build_analyze_account_use_case(settings).execute(account)
        _print_report(report)
        if export:
            path = build_export_report_use_case(settings).execute(report)
            print(f"Excel report saved: {path}")
    except (InvalidInputError, RuntimeError) as exc:
        logger.error(f"Analysis failed for {username}: {exc}")
        print(f"Analysis failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
