"""Use case registering a marketplace account for analysis."""

from market_analyzer.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import AccountDTO
from market_analyzer.domain.services.normalization import normalize_identifier
from market_analyzer.infrastructure.logging.logger import get_app_logger


class AddAccountUseCase:
    """Register an account under a unique username."""

    def __init__(self, repository: AccountsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the account registry.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, username: str, steam_id) -> AccountDTO:
        """Validate and register the account.

        Args:
            username: Login name of the account.
            steam_id: Identifier used as purchaser id in the ledger.

        Returns:
            AccountDTO: Registered account.

        Raises:
            InvalidInputError: If username or steam_id is empty.
            RuntimeError: If the username is already registered.
        """
        name = (username or "").strip()
        identifier = normalize_identifier(steam_id)
        if not name or identifier is None:
            raise InvalidInputError("Username and steam id are required")

        self._repository.ensure_schema()
        if self._repository.get_account(name) is not None:
            raise RuntimeError(f"Account '{name}' is already registered")
        account = AccountDTO(username=name, steam_id=identifier)
        self._repository.add_account(account)
        self._logger.info(f"Registered account {name}")
        return account


__all__ = ["AddAccountUseCase"]
