"""Ledger parser: classify ledger entries and link purchases to sales.

An item's asset id changes when it is sold, so a purchase is linked to
the sale of the same physical item by matching the purchase's
post-disposal id against the sale's asset id. Every parsed transaction
ends up in exactly one linked record:

* ``completed``: a purchase and the sale it was linked to (one record per
  side, each referencing the other);
* ``uncompleted``: a purchase with no linked sale;
* ``received``: a sale with no linked purchase.
"""

from collections.abc import Callable, Iterable, Mapping
import logging
from logging import Logger
from types import MappingProxyType
from typing import Any

from market_analyzer.domain.constants import (
    ROLE_PURCHASE,
    ROLE_SALE,
    STATUS_COMPLETED,
    STATUS_RECEIVED,
    STATUS_UNCOMPLETED,
    UNKNOWN_ITEM,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import (
    AssetMetadata,
    CatalogKey,
    LedgerSnapshot,
    LinkedTransactionRecord,
    ParseCounts,
    ParsedTransaction,
    ParseResult,
    RawLedgerEntry,
)
from market_analyzer.domain.services.ingestion import build_ledger_snapshot
from market_analyzer.domain.services.normalization import normalize_identifier


_module_logger = logging.getLogger(__name__)


def parse_ledger(
    ledger: Mapping[str, Any] | LedgerSnapshot | None,
    account_id,
    *,
    logger: Logger | None = None,
) -> ParseResult:
    """Parse a ledger snapshot from the point of view of one account.

    Args:
        ledger: Raw ``{"purchases": ..., "assets": ...}`` payload or a
            LedgerSnapshot.
        account_id: Identifier of the account; entries purchased by it are
            purchases, every other entry is a sale.
        logger: Logger used for unresolved names and summary counts.

    Returns:
        ParseResult: Linked records plus summary counts.

    Raises:
        InvalidInputError: If the ledger has no purchases collection or the
            account identifier is empty.
    """
    log = logger or _module_logger
    account = normalize_identifier(account_id)
    if account is None:
        raise InvalidInputError("Account identifier is required")
    snapshot = build_ledger_snapshot(ledger, log)

    unowned_index = _build_unowned_index(snapshot.assets)
    purchases: list[ParsedTransaction] = []
    sales: list[ParsedTransaction] = []
    for entry in snapshot.entries:
        parsed = _parse_entry(
            entry,
            account,
            snapshot.assets,
            unowned_index,
            log,
        )
        if parsed.is_purchase:
            purchases.append(parsed)
        else:
            sales.append(parsed)

    records = _link_transactions(purchases, sales, log)
    counts = _summarize(records, len(purchases), len(sales))
    log.info(
        f"Parsed ledger for account {account}: "
        f"purchases={counts.purchases_count}, sales={counts.sales_count}, "
        f"completed={counts.completed_count}, "
        f"uncompleted={counts.uncompleted_count}, "
        f"received={counts.received_count}"
    )
    return ParseResult(
        account_id=account,
        transactions=tuple(records),
        counts=counts,
    )


def resolve_market_name(
    entry: RawLedgerEntry,
    catalog: Mapping[CatalogKey, AssetMetadata],
    unowned_index: Mapping[CatalogKey, AssetMetadata] | None = None,
) -> str | None:
    """Resolve the display name of a ledger entry from the catalog.

    The catalog is searched by the entry's asset id, then by catalog entries
    recording that id as their pre-disposal id, then by the post-disposal
    id. The entry's own market name is used when no catalog entry names it.

    Args:
        entry: Ledger entry to resolve.
        catalog: Catalog keyed by (app id, context id, asset id).
        unowned_index: Catalog keyed by (app id, context id, unowned id).

    Returns:
        str | None: Display name, or None when unresolved.
    """
    asset = entry.asset
    if unowned_index is None:
        unowned_index = _build_unowned_index(catalog)
    metadata = None
    if asset.app_id and asset.context_id:
        candidates = []
        if asset.asset_id:
            key = (asset.app_id, asset.context_id, asset.asset_id)
            candidates.extend([catalog.get(key), unowned_index.get(key)])
        if asset.new_asset_id:
            new_key = (asset.app_id, asset.context_id, asset.new_asset_id)
            candidates.append(catalog.get(new_key))
        metadata = next((found for found in candidates if found), None)
    if metadata is not None and metadata.market_hash_name:
        return metadata.market_hash_name
    return entry.market_name


def _build_unowned_index(
    catalog: Mapping[CatalogKey, AssetMetadata],
) -> Mapping[CatalogKey, AssetMetadata]:
    """Index catalog entries by their pre-disposal id, first entry wins."""
    index: dict[CatalogKey, AssetMetadata] = {}
    for metadata in catalog.values():
        if metadata.unowned_id:
            key = (metadata.app_id, metadata.context_id, metadata.unowned_id)
            index.setdefault(key, metadata)
    return MappingProxyType(index)


def _parse_entry(
    entry: RawLedgerEntry,
    account_id: str,
    catalog: Mapping[CatalogKey, AssetMetadata],
    unowned_index: Mapping[CatalogKey, AssetMetadata],
    logger: Logger,
) -> ParsedTransaction:
    """Classify one ledger entry and resolve its display name."""
    role = ROLE_PURCHASE if entry.purchaser_id == account_id else ROLE_SALE
    market_name = resolve_market_name(entry, catalog, unowned_index)
    if not market_name:
        logger.warning(
            f"Unknown Item detected: asset_id={entry.asset.asset_id} "
            f"record_id={entry.record_id}"
        )
        market_name = UNKNOWN_ITEM
    if role == ROLE_SALE and entry.received_amount is None:
        logger.warning(
            f"Sale {entry.record_id} has no received amount; counting 0"
        )
    return ParsedTransaction(
        record_id=entry.record_id,
        role=role,
        app_id=entry.asset.app_id,
        context_id=entry.asset.context_id,
        asset_id=entry.asset.asset_id,
        new_asset_id=entry.asset.new_asset_id,
        market_name=market_name,
        paid_amount=entry.paid_amount,
        paid_fee=entry.paid_fee,
        paid_total=entry.paid_amount + entry.paid_fee,
        currency_id=entry.currency_id,
        time_sold=entry.time_sold,
        purchaser_id=entry.purchaser_id,
        raw=entry,
    )


def _index_first(
    transactions: Iterable[ParsedTransaction],
    key: Callable[[ParsedTransaction], str | None],
) -> Mapping[str, ParsedTransaction]:
    """Index transactions by key, keeping the first one per key."""
    index: dict[str, ParsedTransaction] = {}
    for transaction in transactions:
        value = key(transaction)
        if value is not None:
            index.setdefault(value, transaction)
    return MappingProxyType(index)


def _link_transactions(
    purchases: list[ParsedTransaction],
    sales: list[ParsedTransaction],
    logger: Logger,
) -> list[LinkedTransactionRecord]:
    """Link purchases to sales and build the unified record list.

    Purchases are processed in input order. When several purchases share a
    post-disposal id, the first one claims the sale and the others stay
    uncompleted.
    """
    purchases_by_new_id = _index_first(purchases, lambda p: p.new_asset_id)
    with_new_id = sum(1 for p in purchases if p.new_asset_id is not None)
    duplicates = with_new_id - len(purchases_by_new_id)
    if duplicates:
        logger.warning(
            f"{duplicates} purchases share a post-disposal id with an "
            f"earlier purchase"
        )
    sales_by_asset_id = _index_first(sales, lambda s: s.asset_id)

    records: list[LinkedTransactionRecord] = []
    consumed_sale_ids: set[str] = set()
    for purchase in purchases:
        sale = None
        if purchase.new_asset_id is not None:
            sale = sales_by_asset_id.get(purchase.new_asset_id)
        if sale is None or sale.record_id in consumed_sale_ids:
            records.append(
                LinkedTransactionRecord(
                    transaction_id=f"{ROLE_PURCHASE}:{purchase.record_id}",
                    status=STATUS_UNCOMPLETED,
                    transaction=purchase,
                )
            )
            continue
        consumed_sale_ids.add(sale.record_id)
        records.append(
            LinkedTransactionRecord(
                transaction_id=f"{ROLE_PURCHASE}:{purchase.record_id}",
                status=STATUS_COMPLETED,
                transaction=purchase,
                counterpart=sale,
            )
        )
        records.append(
            LinkedTransactionRecord(
                transaction_id=f"{ROLE_SALE}:{sale.record_id}",
                status=STATUS_COMPLETED,
                transaction=sale,
                counterpart=purchase,
            )
        )

    for sale in sales:
        if sale.record_id not in consumed_sale_ids:
            records.append(
                LinkedTransactionRecord(
                    transaction_id=f"{ROLE_SALE}:{sale.record_id}",
                    status=STATUS_RECEIVED,
                    transaction=sale,
                )
            )
    return records


def _summarize(
    records: list[LinkedTransactionRecord],
    purchases_count: int,
    sales_count: int,
) -> ParseCounts:
    completed = uncompleted = received = 0
    for record in records:
        if record.status == STATUS_COMPLETED and record.role == ROLE_PURCHASE:
            completed += 1
        elif record.status == STATUS_UNCOMPLETED:
            uncompleted += 1
        elif record.status == STATUS_RECEIVED:
            received += 1
    return ParseCounts(
        purchases_count=purchases_count,
        sales_count=sales_count,
        completed_count=completed,
        uncompleted_count=uncompleted,
        received_count=received,
        total_transactions=purchases_count + sales_count,
    )


__all__ = ["parse_ledger", "resolve_market_name"]
