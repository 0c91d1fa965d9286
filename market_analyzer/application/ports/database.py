"""Database ports for the account registry.

Infrastructure implementations provide concrete adapters that satisfy
this protocol.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the account registry engine."""

    def get_accounts_engine(self) -> Engine:
        """Get the engine for the account registry database.

        Returns:
            Engine: SQLAlchemy engine connected to the registry.
        """


__all__ = ["DatabaseEnginePort"]
