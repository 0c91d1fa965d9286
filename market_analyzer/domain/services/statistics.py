"""Domain service aggregating per-item and account-wide statistics."""

from dataclasses import dataclass, field
from decimal import Decimal
import logging
from logging import Logger

from market_analyzer.domain.constants import (
    STATUS_COMPLETED,
    STATUS_RECEIVED,
    STATUS_UNCOMPLETED,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import (
    AccountStatistics,
    ItemStatistics,
    LinkedTransactionRecord,
    OverallStatistics,
    ParseResult,
    TransactionTrace,
)
from market_analyzer.domain.services.normalization import (
    compute_percent,
    timestamp_to_iso,
)


_module_logger = logging.getLogger(__name__)


@dataclass
class _ItemAccumulator:
    market_name: str
    total_invested: Decimal = Decimal("0")
    total_received: Decimal = Decimal("0")
    purchase_count: int = 0
    sale_count: int = 0
    completed_count: int = 0
    uncompleted_count: int = 0
    received_count: int = 0
    transactions: list[TransactionTrace] = field(default_factory=list)

    def add_purchase(self, record: LinkedTransactionRecord) -> Decimal:
        purchase = record.transaction
        invested = purchase.paid_total
        self.total_invested += invested
        self.purchase_count += 1
        if record.status == STATUS_COMPLETED:
            self.completed_count += 1
        elif record.status == STATUS_UNCOMPLETED:
            self.uncompleted_count += 1
        self.transactions.append(
            TransactionTrace(
                type=purchase.role,
                transaction_id=record.transaction_id,
                asset_id=purchase.asset_id,
                new_asset_id=purchase.new_asset_id,
                amount=invested,
                status=record.status,
                timestamp=purchase.time_sold,
                date=timestamp_to_iso(purchase.time_sold),
                currency_id=purchase.currency_id,
            )
        )
        return invested

    def add_sale(self, record: LinkedTransactionRecord) -> Decimal:
        sale = record.transaction
        received = sale.received_amount
        self.total_received += received
        self.sale_count += 1
        if record.status == STATUS_RECEIVED:
            self.received_count += 1
        self.transactions.append(
            TransactionTrace(
                type=sale.role,
                transaction_id=record.transaction_id,
                asset_id=sale.asset_id,
                new_asset_id=sale.new_asset_id,
                amount=received,
                status=record.status,
                timestamp=sale.time_sold,
                date=timestamp_to_iso(sale.time_sold),
                currency_id=sale.received_currency_id,
                purchaser_id=sale.purchaser_id,
            )
        )
        return received

    def freeze(self) -> ItemStatistics:
        return ItemStatistics(
            market_name=self.market_name,
            total_invested=self.total_invested,
            total_received=self.total_received,
            purchase_count=self.purchase_count,
            sale_count=self.sale_count,
            completed_count=self.completed_count,
            uncompleted_count=self.uncompleted_count,
            received_count=self.received_count,
            transactions=tuple(self.transactions),
        )


def aggregate_statistics(
    parse_result: ParseResult,
    *,
    logger: Logger | None = None,
) -> AccountStatistics:
    """Fold the parsed transactions into per-item and overall totals.

    Purchases add their paid total to the invested amounts and sales add
    their received amount to the received amounts. Counts in the overall
    rollup are taken from the parser summary as-is.

    Args:
        parse_result: Output of the ledger parser.
        logger: Logger used for summary totals.

    Returns:
        AccountStatistics: Overall rollup and per-item breakdown.

    Raises:
        InvalidInputError: If parse_result is not a ParseResult.
    """
    if not isinstance(parse_result, ParseResult):
        raise InvalidInputError("aggregate_statistics expects a ParseResult")
    log = logger or _module_logger

    total_invested = Decimal("0")
    total_received = Decimal("0")
    items: dict[str, _ItemAccumulator] = {}
    for record in parse_result.transactions:
        name = record.transaction.market_name
        accumulator = items.setdefault(name, _ItemAccumulator(name))
        if record.transaction.is_purchase:
            total_invested += accumulator.add_purchase(record)
        else:
            total_received += accumulator.add_sale(record)

    total_profit = total_received - total_invested
    counts = parse_result.counts
    overall = OverallStatistics(
        total_invested=total_invested,
        total_received=total_received,
        total_profit=total_profit,
        roi_percent=compute_percent(total_profit, total_invested),
        total_transactions=len(parse_result.transactions),
        purchases_count=counts.purchases_count,
        sales_count=counts.sales_count,
        completed_purchases=counts.completed_count,
        uncompleted_purchases=counts.uncompleted_count,
        received_sales=counts.received_count,
    )
    log.info(
        f"Account statistics: invested={total_invested}, "
        f"received={total_received}, profit={total_profit}, "
        f"roi={overall.roi_percent}%"
    )
    return AccountStatistics(
        overall=overall,
        items=tuple(item.freeze() for item in items.values()),
    )


__all__ = ["aggregate_statistics"]
