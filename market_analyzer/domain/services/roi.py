"""Domain service computing ROI for completed purchase/sale pairs."""

from collections.abc import Sequence
import logging
from logging import Logger

from market_analyzer.domain.constants import STATUS_COMPLETED
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import LinkedTransactionRecord, ROIRecord
from market_analyzer.domain.services.normalization import compute_percent


_module_logger = logging.getLogger(__name__)


def compute_roi(
    transactions: Sequence[LinkedTransactionRecord],
    *,
    logger: Logger | None = None,
) -> list[ROIRecord]:
    """Compute profit and ROI for every completed purchase.

    Uncompleted purchases have no sell price and received sales have no
    buy price, so neither yields a record.

    Args:
        transactions: Linked records from the ledger parser.
        logger: Logger used for summary counts.

    Returns:
        list[ROIRecord]: One record per completed pair, in ledger order.

    Raises:
        InvalidInputError: If transactions is not a sequence.
    """
    if isinstance(transactions, (str, bytes)) or not isinstance(
        transactions, Sequence
    ):
        raise InvalidInputError("transactions must be a sequence")
    log = logger or _module_logger

    results: list[ROIRecord] = []
    for record in transactions:
        if record.status != STATUS_COMPLETED:
            continue
        buy = record.transaction
        sell = record.counterpart
        if not buy.is_purchase or sell is None:
            continue

        buy_price = buy.paid_total
        sell_price = sell.received_amount
        profit = sell_price - buy_price
        results.append(
            ROIRecord(
                transaction_id=buy.record_id,
                market_name=buy.market_name,
                app_id=buy.app_id,
                buy_price=buy_price,
                sell_price=sell_price,
                profit=profit,
                roi_percent=compute_percent(profit, buy_price),
                time_purchase=buy.time_sold,
                time_sale=sell.time_sold,
                purchase_id=buy.record_id,
                sale_id=sell.record_id,
            )
        )

    log.info(f"Computed ROI for {len(results)} completed pairs")
    return results


__all__ = ["compute_roi"]
