"""Conversion of fetched marketplace payloads into domain snapshots.

The marketplace serializes empty collections as JSON arrays rather than
objects, so an empty list is accepted wherever a mapping is expected.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
import logging
from logging import Logger
from types import MappingProxyType
from typing import Any

from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import (
    AssetMetadata,
    AssetReference,
    CatalogKey,
    HoldingItem,
    LedgerSnapshot,
    RawLedgerEntry,
)
from market_analyzer.domain.services.normalization import (
    normalize_identifier,
    normalize_timestamp,
)
from market_analyzer.utils.decimal_utils import coerce_decimal


_module_logger = logging.getLogger(__name__)


def _as_mapping(value: Any, label: str) -> Mapping:
    """Return value as a mapping, accepting an empty JSON array."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (list, tuple)) and not value:
        return {}
    raise InvalidInputError(
        f"Ledger {label} must be a mapping, got {type(value).__name__}"
    )


def _amount(record_id, field: str, value: Any) -> Decimal:
    """Coerce a ledger amount, rejecting non-numeric and non-finite values."""
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Ledger entry {record_id!r} has a non-numeric {field}: {value!r}"
        ) from exc
    if not amount.is_finite():
        raise InvalidInputError(
            f"Ledger entry {record_id!r} has a non-finite {field}: {value!r}"
        )
    return amount


def _timestamp(record_id, value: Any) -> int | None:
    try:
        return normalize_timestamp(value)
    except ValueError as exc:
        raise InvalidInputError(
            f"Ledger entry {record_id!r} has an invalid time_sold: {value!r}"
        ) from exc


def build_ledger_entry(record_id, payload: Mapping[str, Any]) -> RawLedgerEntry:
    """Build a RawLedgerEntry from one marketplace purchase record.

    Args:
        record_id: Key of the record in the purchases collection.
        payload: Raw record as returned by the marketplace.

    Returns:
        RawLedgerEntry: Entry with canonical identifiers and Decimal amounts.

    Raises:
        InvalidInputError: If the payload is not a mapping, or an amount or
            the sale time cannot be read.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError(
            f"Ledger entry {record_id!r} must be a mapping"
        )
    asset = payload.get("asset") or {}
    if not isinstance(asset, Mapping):
        raise InvalidInputError(
            f"Asset of ledger entry {record_id!r} must be a mapping"
        )
    received = payload.get("received_amount")
    return RawLedgerEntry(
        record_id=normalize_identifier(record_id) or "",
        purchaser_id=normalize_identifier(payload.get("steamid_purchaser")),
        asset=AssetReference(
            app_id=normalize_identifier(asset.get("appid")),
            context_id=normalize_identifier(asset.get("contextid")),
            asset_id=normalize_identifier(asset.get("id")),
            new_asset_id=normalize_identifier(asset.get("new_id")),
        ),
        paid_amount=_amount(record_id, "paid_amount", payload.get("paid_amount")),
        paid_fee=_amount(record_id, "paid_fee", payload.get("paid_fee")),
        currency_id=normalize_identifier(payload.get("currencyid")),
        time_sold=_timestamp(record_id, payload.get("time_sold")),
        received_amount=(
            None
            if received is None
            else _amount(record_id, "received_amount", received)
        ),
        received_currency_id=normalize_identifier(
            payload.get("received_currencyid")
        ),
        market_name=payload.get("market_name") or None,
    )


def build_asset_catalog(
    assets: Mapping[Any, Any],
) -> Mapping[CatalogKey, AssetMetadata]:
    """Flatten the nested app/context/asset catalog.

    Args:
        assets: Mapping of app id -> context id -> asset id -> metadata.

    Returns:
        Mapping[CatalogKey, AssetMetadata]: Read-only catalog keyed by
        (app id, context id, asset id), in input order.
    """
    catalog: dict[CatalogKey, AssetMetadata] = {}
    for raw_app_id, contexts in _as_mapping(assets, "assets").items():
        app_id = normalize_identifier(raw_app_id)
        for raw_context_id, items in _as_mapping(contexts, "contexts").items():
            context_id = normalize_identifier(raw_context_id)
            for raw_asset_id, item in _as_mapping(items, "asset items").items():
                asset_id = normalize_identifier(raw_asset_id)
                if not (app_id and context_id and asset_id):
                    continue
                item = _as_mapping(item, "asset metadata")
                catalog[(app_id, context_id, asset_id)] = AssetMetadata(
                    app_id=app_id,
                    context_id=context_id,
                    asset_id=asset_id,
                    market_hash_name=item.get("market_hash_name") or None,
                    icon_url=item.get("icon_url") or None,
                    unowned_id=normalize_identifier(item.get("unowned_id")),
                )
    return MappingProxyType(catalog)


def build_ledger_snapshot(
    ledger: Mapping[str, Any] | LedgerSnapshot | None,
    logger: Logger | None = None,
) -> LedgerSnapshot:
    """Validate a fetched ledger and convert it into a LedgerSnapshot.

    Args:
        ledger: Raw ``{"purchases": ..., "assets": ...}`` payload, or an
            already built snapshot which is returned unchanged.
        logger: Logger used for diagnostics.

    Returns:
        LedgerSnapshot: Immutable snapshot of entries and catalog.

    Raises:
        InvalidInputError: If the ledger or its purchases are missing or
            malformed.
    """
    if isinstance(ledger, LedgerSnapshot):
        return ledger
    log = logger or _module_logger
    if not isinstance(ledger, Mapping):
        raise InvalidInputError("Ledger must be a mapping with purchases")
    if ledger.get("purchases") is None:
        raise InvalidInputError("Ledger has no purchases collection")

    purchases = _as_mapping(ledger["purchases"], "purchases")
    entries = tuple(
        build_ledger_entry(record_id, payload)
        for record_id, payload in purchases.items()
    )
    raw_assets = ledger.get("assets")
    if raw_assets is None:
        log.warning("Ledger has no asset catalog; names will be unresolved")
        raw_assets = {}
    return LedgerSnapshot(entries=entries, assets=build_asset_catalog(raw_assets))


def build_holding_item(payload: Mapping[str, Any]) -> HoldingItem | None:
    """Build a HoldingItem, or None when the item has no asset id."""
    if not isinstance(payload, Mapping):
        raise InvalidInputError("Holdings items must be mappings")
    asset_id = normalize_identifier(
        payload.get("assetid", payload.get("asset_id", payload.get("id")))
    )
    if asset_id is None:
        return None
    return HoldingItem(
        asset_id=asset_id,
        app_id=normalize_identifier(payload.get("appid", payload.get("appId"))),
        context_id=normalize_identifier(payload.get("contextid")),
        market_hash_name=payload.get("market_hash_name") or None,
        icon_url=payload.get("icon_url") or None,
        item_type=payload.get("type") or None,
        tradable=bool(payload.get("tradable", False)),
        marketable=bool(payload.get("marketable", False)),
        commodity=bool(payload.get("commodity", False)),
    )


def build_holdings(
    items: Iterable[Mapping[str, Any] | HoldingItem],
    logger: Logger | None = None,
) -> tuple[HoldingItem, ...]:
    """Convert a fetched inventory listing into HoldingItems.

    Args:
        items: Raw inventory items or HoldingItems, in inventory order.
        logger: Logger used for diagnostics.

    Returns:
        tuple[HoldingItem, ...]: Items carrying an asset id.

    Raises:
        InvalidInputError: If items is not iterable or holds non-mappings.
    """
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(
        items, Iterable
    ):
        raise InvalidInputError("Holdings must be a sequence of items")
    log = logger or _module_logger
    holdings: list[HoldingItem] = []
    skipped = 0
    for item in items:
        holding = item if isinstance(item, HoldingItem) else build_holding_item(item)
        if holding is None:
            skipped += 1
            continue
        holdings.append(holding)
    if skipped:
        log.warning(f"Skipped {skipped} holdings items without an asset id")
    return tuple(holdings)


__all__ = [
    "build_ledger_entry",
    "build_asset_catalog",
    "build_ledger_snapshot",
    "build_holding_item",
    "build_holdings",
]
