"""CLI adapter listing registered accounts."""

from market_analyzer.application.use_cases.get_accounts import (
    GetAccountsUseCase,
)
from market_analyzer.infrastructure.container import build_accounts_repository
from market_analyzer.infrastructure.logging.logger import get_usage_logger


def main() -> int:
    """Print every active account with its last login."""
    get_usage_logger().info("list_accounts_cli invoked")
    use_case = GetAccountsUseCase(build_accounts_repository())
    accounts = use_case.execute()
    if not accounts:
        print("No accounts found. Run add_account_cli first.")
        return 0

    print(f"Available accounts: {len(accounts)}")
    for index, account in enumerate(accounts, 1):
        last_login = (
            account.last_login.strftime("%Y-%m-%d %H:%M")
            if account.last_login
            else "Never"
        )
        print(
            f"  {index}. {account.username} "
            f"(steam id: {account.steam_id}, last login: {last_login})"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
