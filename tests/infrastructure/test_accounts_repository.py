"""Tests for the SQLAlchemy account registry."""

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError

from market_analyzer.domain.models import AccountDTO
from market_analyzer.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from market_analyzer.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


@pytest.fixture
def repository(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path / 'accounts.db'}", future=True)
    repo = SqlAlchemyAccountsRepository(SqlAlchemyDatabaseEngineAdapter(engine))
    repo.ensure_schema()
    yield repo
    engine.dispose()


def test_add_and_get_account(repository) -> None:
    """Registered accounts should be readable by username."""
    repository.add_account(AccountDTO(username="alice", steam_id="1"))

    account = repository.get_account("alice")

    assert account == AccountDTO(
        username="alice",
        steam_id="1",
        is_active=True,
        last_login=None,
    )
    assert repository.get_account("missing") is None


def test_fetch_accounts_filters_inactive(repository) -> None:
    """Inactive accounts are only listed when requested."""
    repository.add_account(AccountDTO(username="carol", steam_id="3"))
    repository.add_account(
        AccountDTO(username="bob", steam_id="2", is_active=False)
    )
    repository.add_account(AccountDTO(username="alice", steam_id="1"))

    active = repository.fetch_accounts()
    everyone = repository.fetch_accounts(active_only=False)

    assert [account.username for account in active] == ["alice", "carol"]
    assert [account.username for account in everyone] == [
        "alice",
        "bob",
        "carol",
    ]
    assert everyone[1].is_active is False


def test_ensure_schema_is_idempotent(repository) -> None:
    """Creating the schema twice should keep existing rows."""
    repository.add_account(AccountDTO(username="alice", steam_id="1"))

    repository.ensure_schema()

    assert len(repository.fetch_accounts()) == 1


def test_to_dto_parses_text_timestamps() -> None:
    """SQLite returns timestamps as text; they should become datetimes."""
    row = SimpleNamespace(
        username="alice",
        steam_id=76561198000000001,
        is_active=1,
        last_login="2024-05-01 08:30:00",
    )

    account = SqlAlchemyAccountsRepository._to_dto(row)

    assert account.steam_id == "76561198000000001"
    assert account.is_active is True
    assert account.last_login == datetime(2024, 5, 1, 8, 30)


def test_duplicate_username_is_rejected(repository) -> None:
    """The username is the registry's primary key."""
    repository.add_account(AccountDTO(username="alice", steam_id="1"))

    with pytest.raises(IntegrityError):
        repository.add_account(AccountDTO(username="alice", steam_id="2"))

    with repository._db_port.get_accounts_engine().connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM accounts")).scalar()
    assert count == 1
