"""Domain models for registered marketplace accounts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AccountDTO:
    """Registered account whose ledger can be analyzed.

    Attributes:
        username: Login name, also the snapshot folder name.
        steam_id: Identifier compared against ledger purchaser ids.
        is_active: Whether the account is offered for analysis.
        last_login: Time of the last successful login, if known.
    """

    username: str
    steam_id: str
    is_active: bool = True
    last_login: datetime | None = None


__all__ = ["AccountDTO"]
