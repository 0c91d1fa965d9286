"""Domain service matching purchases against current holdings."""

from collections.abc import Iterable, Mapping, Sequence
import logging
from logging import Logger
from typing import Any

from market_analyzer.domain.constants import (
    MATCH_TYPE_OTHER_SOURCE,
    MATCH_TYPE_PURCHASED,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import (
    HoldingItem,
    LinkedTransactionRecord,
    MatchedPurchase,
    MatchResult,
)
from market_analyzer.domain.services.ingestion import build_holdings
from market_analyzer.domain.services.normalization import format_share


_module_logger = logging.getLogger(__name__)


def match_holdings(
    transactions: Sequence[LinkedTransactionRecord],
    holdings: Iterable[Mapping[str, Any] | HoldingItem],
    *,
    logger: Logger | None = None,
) -> MatchResult:
    """Split purchases into still-held and disposed-elsewhere items.

    Only purchases carrying a post-disposal id take part; that id is the
    item's current identity and is looked up in the holdings snapshot.

    Args:
        transactions: Linked records from the ledger parser.
        holdings: Current holdings as HoldingItems or raw inventory items.
        logger: Logger used for summary counts.

    Returns:
        MatchResult: Matched and unmatched purchases with percentages.

    Raises:
        InvalidInputError: If transactions is not a sequence or holdings
            is malformed.
    """
    if isinstance(transactions, (str, bytes)) or not isinstance(
        transactions, Sequence
    ):
        raise InvalidInputError("transactions must be a sequence")
    log = logger or _module_logger
    holdings_by_asset_id: dict[str, HoldingItem] = {}
    for item in build_holdings(holdings, log):
        holdings_by_asset_id.setdefault(item.asset_id, item)

    matched: list[MatchedPurchase] = []
    unmatched: list[MatchedPurchase] = []
    for record in transactions:
        purchase = record.transaction
        if not purchase.is_purchase or purchase.new_asset_id is None:
            continue
        held = holdings_by_asset_id.get(purchase.new_asset_id)
        result = MatchedPurchase(
            app_id=purchase.app_id,
            asset_id=purchase.asset_id,
            new_asset_id=purchase.new_asset_id,
            market_name=purchase.market_name,
            paid_amount=purchase.paid_amount,
            paid_fee=purchase.paid_fee,
            paid_total=purchase.paid_total,
            currency_id=purchase.currency_id,
            match_type=(
                MATCH_TYPE_PURCHASED if held else MATCH_TYPE_OTHER_SOURCE
            ),
            time_sold=purchase.time_sold,
            transaction_id=record.transaction_id,
            transaction_status=record.status,
            icon_url=held.icon_url if held else None,
        )
        if held:
            matched.append(result)
        else:
            unmatched.append(result)

    total = len(matched) + len(unmatched)
    log.info(
        f"Matched {len(matched)} of {total} purchases against "
        f"{len(holdings_by_asset_id)} held items"
    )
    return MatchResult(
        matched=tuple(matched),
        unmatched=tuple(unmatched),
        total_purchases=total,
        matched_percentage=format_share(len(matched), total),
        unmatched_percentage=format_share(len(unmatched), total),
    )


__all__ = ["match_holdings"]
