"""Domain models for raw ledger and holdings snapshots.

These records are produced at the ingestion boundary from the already
fetched marketplace history. Identifiers are canonical strings (or None)
and amounts are Decimals, so downstream services compare and sum them
without further coercion.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class AssetReference:
    """Item instance referenced by a ledger entry.

    Attributes:
        app_id: Game identifier.
        context_id: Inventory context identifier.
        asset_id: Asset id valid before disposal.
        new_asset_id: Asset id issued on disposal (sales only).
    """

    app_id: str | None
    context_id: str | None
    asset_id: str | None
    new_asset_id: str | None = None


@dataclass(frozen=True)
class RawLedgerEntry:
    """One purchase or sale event from the marketplace ledger."""

    record_id: str
    purchaser_id: str | None
    asset: AssetReference
    paid_amount: Decimal
    paid_fee: Decimal
    currency_id: str | None
    time_sold: int | None
    received_amount: Decimal | None = None
    received_currency_id: str | None = None
    market_name: str | None = None


@dataclass(frozen=True)
class AssetMetadata:
    """Display metadata of a catalog asset.

    Attributes:
        app_id: Game identifier.
        context_id: Inventory context identifier.
        asset_id: Asset id the catalog entry is keyed by.
        market_hash_name: Market display name.
        icon_url: Icon path on the marketplace CDN.
        unowned_id: Pre-disposal asset id recorded for sold items.
    """

    app_id: str
    context_id: str
    asset_id: str
    market_hash_name: str | None = None
    icon_url: str | None = None
    unowned_id: str | None = None


CatalogKey = tuple[str, str, str]


@dataclass(frozen=True)
class LedgerSnapshot:
    """Complete ledger for one account.

    Attributes:
        entries: Ledger entries in input order.
        assets: Catalog keyed by (app id, context id, asset id).
    """

    entries: tuple[RawLedgerEntry, ...]
    assets: Mapping[CatalogKey, AssetMetadata] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True)
class HoldingItem:
    """Item currently held by the account."""

    asset_id: str
    app_id: str | None = None
    context_id: str | None = None
    market_hash_name: str | None = None
    icon_url: str | None = None
    item_type: str | None = None
    tradable: bool = False
    marketable: bool = False
    commodity: bool = False


__all__ = [
    "AssetReference",
    "RawLedgerEntry",
    "AssetMetadata",
    "CatalogKey",
    "LedgerSnapshot",
    "HoldingItem",
]
