"""CLI adapter registering an account: ``add_account_cli <username> <steam_id>``."""

import sys

from market_analyzer.application.use_cases.add_account import (
    AddAccountUseCase,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.infrastructure.container import build_accounts_repository
from market_analyzer.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main(argv: list[str] | None = None) -> int:
    """Register the account given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    get_usage_logger().info(f"add_account_cli args={len(args)}")
    if len(args) != 2:
        print("Usage: add_account_cli <username> <steam_id>")
        return 1

    logger = get_app_logger()
    use_case = AddAccountUseCase(build_accounts_repository(), logger=logger)
    try:
        account = use_case.execute(args[0], args[1])
    except (InvalidInputError, RuntimeError) as exc:
        logger.error(str(exc))
        print(f"Could not add account: {exc}")
        return 1

    print(f"Account '{account.username}' added.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
