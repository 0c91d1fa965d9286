"""Port for reading and registering marketplace accounts."""

from typing import Protocol

from market_analyzer.domain.models.accounts import AccountDTO


class AccountsRepositoryPort(Protocol):
    """Port exposing the account registry."""

    def ensure_schema(self) -> None:
        """Create the registry storage if it does not exist."""

    def fetch_accounts(self, active_only: bool = True) -> list[AccountDTO]:
        """Return registered accounts ordered by username."""

    def get_account(self, username: str) -> AccountDTO | None:
        """Return the account registered under username, if any."""

    def add_account(self, account: AccountDTO) -> None:
        """Register a new account."""


__all__ = ["AccountsRepositoryPort"]
