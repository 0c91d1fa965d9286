"""Use case to read registered accounts for presentation layers."""

from typing import List

from market_analyzer.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from market_analyzer.domain.models import AccountDTO


class GetAccountsUseCase:
    """Fetch accounts from the registry."""

    def __init__(self, repository: AccountsRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository

    def execute(self, active_only: bool = True) -> List[AccountDTO]:
        """Return registered accounts ordered by username."""
        return self._repository.fetch_accounts(active_only=active_only)

    def find(self, username: str) -> AccountDTO | None:
        """Return the account registered under username, if any."""
        return self._repository.get_account(username.strip())


__all__ = ["GetAccountsUseCase"]
