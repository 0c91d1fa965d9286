"""Streamlit report viewer entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from market_analyzer.application.use_cases.get_accounts import (
    GetAccountsUseCase,
)
from market_analyzer.domain.errors import InvalidInputError
from market_analyzer.domain.models import (
    AccountDTO,
    AccountReport,
    AccountStatistics,
    MatchedPurchase,
    ROIRecord,
)
from market_analyzer.infrastructure.container import (
    build_accounts_repository,
    build_analyze_account_use_case,
)


def _fetch_accounts() -> Sequence[AccountDTO]:
    """Fetch active accounts from the registry."""
    use_case = GetAccountsUseCase(build_accounts_repository())
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_accounts() -> Sequence[AccountDTO]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts()


def _fetch_report(account: AccountDTO) -> AccountReport:
    """Run the analysis for an account."""
    use_case = build_analyze_account_use_case()
    return use_case.execute(account)


@st.cache_data(show_spinner=False)
def _load_report(account: AccountDTO) -> AccountReport:
    """Cached wrapper around _fetch_report."""
    return _fetch_report(account)


def _format_amount(value: Decimal) -> str:
    """Format ledger amounts (minor units) for display."""
    return f"{value:,.0f}"


def _format_percent(value: Decimal) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.2f}%"


def _prepare_profit_chart_data(
    statistics: AccountStatistics,
    max_items: int = 15,
) -> list[dict[str, str | float]]:
    """Return the items with the largest absolute profit.

    Args:
        statistics: Per-item breakdown.
        max_items: Maximum number of items to keep.

    Returns:
        Altair-ready rows sorted by profit, largest first.
    """
    ranked = sorted(
        statistics.items,
        key=lambda item: abs(item.profit),
        reverse=True,
    )[:max_items]
    return [
        {
            "item": item.market_name,
            "profit": float(item.profit),
            "profit_label": _format_amount(item.profit),
        }
        for item in sorted(ranked, key=lambda item: item.profit, reverse=True)
    ]


def _roi_rows(records: Sequence[ROIRecord]) -> list[dict[str, object]]:
    return [
        {
            "Item": record.market_name,
            "Buy": float(record.buy_price),
            "Sell": float(record.sell_price),
            "Profit": float(record.profit),
            "ROI %": float(record.roi_percent),
        }
        for record in records
    ]


def _match_rows(items: Sequence[MatchedPurchase]) -> list[dict[str, object]]:
    return [
        {
            "Item": item.market_name,
            "Asset": item.new_asset_id,
            "Paid": float(item.paid_total),
            "Status": item.transaction_status,
            "Source": item.match_type,
        }
        for item in items
    ]


def _render_profit_chart(statistics: AccountStatistics) -> None:
    """Render the per-item profit bar chart."""
    data = _prepare_profit_chart_data(statistics)
    if not data:
        st.caption("No items to chart.")
        return
    chart = (
        alt.Chart(alt.Data(values=data))
        .mark_bar()
        .encode(
            x=alt.X("profit:Q", title="Profit"),
            y=alt.Y("item:N", sort="-x", title=None),
            color=alt.condition(
                alt.datum.profit >= 0,
                alt.value("#1B5E20"),
                alt.value("#B71C1C"),
            ),
            tooltip=[alt.Tooltip("item:N"), alt.Tooltip("profit_label:N")],
        )
        .properties(height=max(120, 24 * len(data)))
    )
    st.subheader("Profit by Item")
    st.altair_chart(chart, width="stretch")


def _render_report(report: AccountReport) -> None:
    """Render metrics, chart and tables of a report."""
    overall = report.statistics.overall
    invested_col, received_col, profit_col, roi_col = st.columns(4)
    invested_col.metric("Invested", _format_amount(overall.total_invested))
    received_col.metric("Received", _format_amount(overall.total_received))
    profit_col.metric("Profit", _format_amount(overall.total_profit))
    roi_col.metric("ROI", _format_percent(overall.roi_percent))
    st.caption(
        f"{overall.total_transactions} transactions: "
        f"{overall.purchases_count} purchases "
        f"({overall.completed_purchases} completed, "
        f"{overall.uncompleted_purchases} uncompleted), "
        f"{overall.sales_count} sales "
        f"({overall.received_sales} received)"
    )

    _render_profit_chart(report.statistics)

    st.subheader("ROI")
    st.dataframe(
        _roi_rows(report.roi_records),
        width="stretch",
        hide_index=True,
    )

    match = report.match_result
    if match is None:
        st.warning("No holdings snapshot available for this account.")
        return
    matched_col, unmatched_col = st.columns(2)
    with matched_col:
        st.subheader(f"Still held ({match.matched_percentage})")
        st.dataframe(_match_rows(match.matched), hide_index=True)
    with unmatched_col:
        st.subheader(f"Disposed elsewhere ({match.unmatched_percentage})")
        st.dataframe(_match_rows(match.unmatched), hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Market Ledger Analyzer", layout="wide")
    st.title("Market Ledger Analyzer")

    accounts = _load_accounts()
    if not accounts:
        st.warning("No accounts found. Register one with add_account_cli.")
        return
    by_name = {account.username: account for account in accounts}
    username = st.sidebar.selectbox("Account", list(by_name))
    try:
        report = _load_report(by_name[username])
    except (InvalidInputError, RuntimeError) as exc:
        st.error(str(exc))
        return
    _render_report(report)


if __name__ == "__main__":  # pragma: no cover
    main()
