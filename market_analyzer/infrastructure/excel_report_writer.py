"""Excel export of account analysis reports."""

from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from market_analyzer.application.ports.report_writer import ReportWriterPort
from market_analyzer.domain.models import AccountReport, MatchedPurchase


HEADER_BG = "1A237E"
HEADER_FG = "FFFFFF"
ALT_ROW = "E8EAF6"
MONEY_FORMAT = "#,##0.00;[Red]-#,##0.00"

MATCH_COLUMNS = (
    "appid",
    "assetid",
    "new_assetid",
    "market_name",
    "paid_total",
    "currencyid",
    "match_type",
    "time_sold",
    "transaction_status",
)
ROI_COLUMNS = (
    "appid",
    "market_name",
    "buy_price",
    "sell_price",
    "profit",
    "roi_percent",
    "time_purchase",
    "time_sale",
)
ITEM_COLUMNS = (
    "market_name",
    "total_invested",
    "total_received",
    "profit",
    "purchase_count",
    "sale_count",
    "completed_count",
    "uncompleted_count",
    "received_count",
)
INVENTORY_COLUMNS = (
    "assetid",
    "appId",
    "market_hash_name",
    "type",
    "tradable",
    "marketable",
    "commodity",
)
MONEY_COLUMNS = {
    "paid_total",
    "buy_price",
    "sell_price",
    "profit",
    "total_invested",
    "total_received",
}


def _border() -> Border:
    side = Side(style="thin", color="BDBDBD")
    return Border(left=side, right=side, top=side, bottom=side)


def _cell_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


class ExcelReportWriter(ReportWriterPort):
    """ReportWriterPort implementation producing .xlsx workbooks."""

    file_extension = "xlsx"

    def write(self, report: AccountReport, path: Path) -> Path:
        """Write the report workbook.

        Args:
            report: Analysis outputs to export.
            path: Target file path.

        Returns:
            Path: The written path.
        """
        workbook = openpyxl.Workbook()
        self._write_dashboard(workbook, report)
        if report.match_result is not None:
            self._write_rows(
                workbook.create_sheet("Matched"),
                MATCH_COLUMNS,
                [self._match_row(item) for item in report.match_result.matched],
            )
            self._write_rows(
                workbook.create_sheet("Unmatched"),
                MATCH_COLUMNS,
                [
                    self._match_row(item)
                    for item in report.match_result.unmatched
                ],
            )
        self._write_rows(
            workbook.create_sheet("ROI"),
            ROI_COLUMNS,
            [
                (
                    record.app_id,
                    record.market_name,
                    record.buy_price,
                    record.sell_price,
                    record.profit,
                    record.roi_percent,
                    record.time_purchase,
                    record.time_sale,
                )
                for record in report.roi_records
            ],
        )
        self._write_rows(
            workbook.create_sheet("Items"),
            ITEM_COLUMNS,
            [
                (
                    item.market_name,
                    item.total_invested,
                    item.total_received,
                    item.profit,
                    item.purchase_count,
                    item.sale_count,
                    item.completed_count,
                    item.uncompleted_count,
                    item.received_count,
                )
                for item in report.statistics.items
            ],
        )
        if report.holdings is not None:
            self._write_rows(
                workbook.create_sheet("Inventory"),
                INVENTORY_COLUMNS,
                [
                    (
                        item.asset_id,
                        item.app_id,
                        item.market_hash_name,
                        item.item_type,
                        item.tradable,
                        item.marketable,
                        item.commodity,
                    )
                    for item in report.holdings
                ],
            )
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
        return path

    @staticmethod
    def _write_dashboard(workbook, report: AccountReport) -> None:
        """Fill the default sheet with the overall rollup."""
        sheet = workbook.active
        sheet.title = "Dashboard"
        stats = report.statistics.overall
        rows = [
            ("Total Invested", stats.total_invested, None,
             "Total Transactions", stats.total_transactions),
            ("Total Received", stats.total_received, None,
             "Purchases Count", stats.purchases_count),
            ("Total Profit", stats.total_profit, None,
             "Sales Count", stats.sales_count),
            ("ROI %", stats.roi_percent, None,
             "Received Sales", stats.received_sales),
            ("Completed Purchases", stats.completed_purchases, None,
             "Uncompleted Purchases", stats.uncompleted_purchases),
        ]
        if report.match_result is not None:
            rows.append(
                ("Matched %", report.match_result.matched_percentage, None,
                 "Unmatched %", report.match_result.unmatched_percentage)
            )
        for row in rows:
            sheet.append([_cell_value(value) for value in row])
        for row_cells in sheet.iter_rows():
            for cell in row_cells:
                if cell.value is None:
                    continue
                cell.border = _border()
                if cell.column in (1, 4):
                    cell.font = Font(name="Arial", bold=True)
        sheet.column_dimensions["A"].width = 22
        sheet.column_dimensions["D"].width = 24

    @staticmethod
    def _write_rows(
        sheet: Worksheet,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
    ) -> None:
        """Write a header row and data rows with alternating fills."""
        header_font = Font(name="Arial", bold=True, color=HEADER_FG)
        header_fill = PatternFill("solid", fgColor=HEADER_BG)
        for col, name in enumerate(columns, 1):
            cell = sheet.cell(1, col, name)
            cell.font = header_font
            cell.fill = header_fill
            cell.border = _border()
            cell.alignment = Alignment(horizontal="center")

        for index, values in enumerate(rows):
            row = index + 2
            fill = PatternFill(
                "solid",
                fgColor=ALT_ROW if index % 2 == 0 else "FFFFFF",
            )
            for col, (name, value) in enumerate(zip(columns, values), 1):
                cell = sheet.cell(row, col, _cell_value(value))
                cell.fill = fill
                cell.border = _border()
                if name in MONEY_COLUMNS:
                    cell.number_format = MONEY_FORMAT

        for col, name in enumerate(columns, 1):
            sheet.column_dimensions[get_column_letter(col)].width = max(
                12,
                len(name) + 4,
            )
        sheet.freeze_panes = "A2"

    @staticmethod
    def _match_row(item: MatchedPurchase) -> tuple:
        return (
            item.app_id,
            item.asset_id,
            item.new_asset_id,
            item.market_name,
            item.paid_total,
            item.currency_id,
            item.match_type,
            item.time_sold,
            item.transaction_status,
        )


__all__ = ["ExcelReportWriter"]
