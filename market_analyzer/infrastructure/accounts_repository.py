"""SQLAlchemy-backed registry of marketplace accounts."""

from datetime import datetime

from sqlalchemy import text

from market_analyzer.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from market_analyzer.application.ports.database import DatabaseEnginePort
from market_analyzer.domain.models.accounts import AccountDTO


CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    username TEXT PRIMARY KEY,
    steam_id TEXT NOT NULL,
    is_active BOOLEAN NOT NULL DEFAULT 1,
    last_login TIMESTAMP
)
"""

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT username, steam_id, is_active, last_login
    FROM accounts
    ORDER BY username
    """
)

SELECT_ACTIVE_ACCOUNTS_SQL = text(
    """
    SELECT username, steam_id, is_active, last_login
    FROM accounts
    WHERE is_active = :is_active
    ORDER BY username
    """
)

SELECT_ACCOUNT_SQL = text(
    """
    SELECT username, steam_id, is_active, last_login
    FROM accounts
    WHERE username = :username
    """
)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (username, steam_id, is_active, last_login)
    VALUES (:username, :steam_id, :is_active, :last_login)
    """
)


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Registry backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the registry engine.
        """
        self._db_port = db_port

    def ensure_schema(self) -> None:
        """Create the accounts table if it does not exist."""
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ACCOUNTS_SQL)

    def fetch_accounts(self, active_only: bool = True) -> list[AccountDTO]:
        """Return registered accounts ordered by username."""
        engine = self._db_port.get_accounts_engine()
        with engine.connect() as conn:
            if active_only:
                rows = conn.execute(
                    SELECT_ACTIVE_ACCOUNTS_SQL,
                    {"is_active": True},
                ).all()
            else:
                rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [self._to_dto(row) for row in rows]

    def get_account(self, username: str) -> AccountDTO | None:
        """Return the account registered under username, if any."""
        engine = self._db_port.get_accounts_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_SQL,
                {"username": username},
            ).first()
        return self._to_dto(row) if row is not None else None

    def add_account(self, account: AccountDTO) -> None:
        """Insert a new account row."""
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_ACCOUNT_SQL,
                {
                    "username": account.username,
                    "steam_id": account.steam_id,
                    "is_active": account.is_active,
                    "last_login": account.last_login,
                },
            )

    @staticmethod
    def _to_dto(row) -> AccountDTO:
        last_login = row.last_login
        if isinstance(last_login, str):
            last_login = datetime.fromisoformat(last_login)
        return AccountDTO(
            username=row.username,
            steam_id=str(row.steam_id),
            is_active=bool(row.is_active),
            last_login=last_login,
        )


__all__ = ["SqlAlchemyAccountsRepository"]
