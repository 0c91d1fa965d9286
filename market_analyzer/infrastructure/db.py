"""Database infrastructure for the account registry.

This module creates and reuses the SQLAlchemy engine connected to the
account registry. SQLite files are the default backend; any other URL
gets a small pooled engine with health checks.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from market_analyzer.application.ports.database import DatabaseEnginePort
from market_analyzer.infrastructure.settings import AnalyzerSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: SQLAlchemy engine. SQLite files get their parent directory
        created; server databases get a small connection pool.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_accounts_engine: Optional[Engine] = None


def get_accounts_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the account registry.

    Returns:
        Engine: Lazily initialized engine connected to the registry.
    """
    global _accounts_engine
    if _accounts_engine is None:
        settings = AnalyzerSettings.from_env()
        _accounts_engine = _create_engine(settings.accounts_db_url)
    return _accounts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines."""

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine; defaults to the registry singleton.
        """
        self._engine = engine

    def get_accounts_engine(self) -> Engine:
        """Get the engine for the account registry.

        Returns:
            Engine: SQLAlchemy engine connected to the registry.
        """
        return self._engine or get_accounts_engine()


__all__ = [
    "get_accounts_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
