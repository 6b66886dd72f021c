"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import streamlit as st
import altair as alt

from beanledger.application.ledger_service import Ledger
from beanledger.application.use_cases.get_account_balances import (
    AccountBalanceDTO,
    GetAccountBalancesUseCase,
)
from beanledger.application.use_cases.get_account_journal import (
    AccountJournal,
    GetAccountJournalUseCase,
)
from beanledger.application.use_cases.get_accounts import (
    AccountDTO,
    GetAccountsUseCase,
)
from beanledger.application.use_cases.get_cashflow import (
    CashflowView,
    GetCashflowUseCase,
)
from beanledger.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from beanledger.domain.errors import LedgerError
from beanledger.domain.models.accounts import AccountType
from beanledger.domain.models.time_context import TimeContext, TimeRange
from beanledger.infrastructure.container import load_ledger
from beanledger.infrastructure.logging.logger import get_usage_logger
from beanledger.infrastructure.settings import LedgerSettings

_PERIODS = {
    "MTD": TimeRange.MONTH,
    "QTD": TimeRange.QUARTER,
    "YTD": TimeRange.YEAR,
    "All Time": TimeRange.ALL,
}


def _fetch_ledger() -> Ledger:
    """Load the ledger configured through environment variables."""
    return load_ledger(LedgerSettings.from_env())


@st.cache_resource(show_spinner=False)
def _load_ledger() -> Ledger:
    """Cached wrapper around _fetch_ledger shared across sessions."""
    return _fetch_ledger()


def _fetch_accounts() -> Sequence[AccountDTO]:
    """Fetch accounts from the loaded ledger."""
    use_case = GetAccountsUseCase(ledger_repository=_load_ledger())
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_accounts() -> Sequence[AccountDTO]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts()


def _fetch_net_worth_summary(as_of: date | None) -> NetWorthSummary:
    """Fetch the net worth summary at a date."""
    use_case = GetNetWorthSummaryUseCase(ledger_repository=_load_ledger())
    return use_case.execute(as_of=as_of)


@st.cache_data(show_spinner=False)
def _load_net_worth_summary(as_of: date | None) -> NetWorthSummary:
    """Cached wrapper around _fetch_net_worth_summary."""
    return _fetch_net_worth_summary(as_of)


def _fetch_account_balances(as_of: date | None) -> list[AccountBalanceDTO]:
    """Fetch per-account balances at a date."""
    use_case = GetAccountBalancesUseCase(ledger_repository=_load_ledger())
    return use_case.execute(as_of=as_of)


@st.cache_data(show_spinner=False)
def _load_account_balances(as_of: date | None) -> list[AccountBalanceDTO]:
    """Cached wrapper around _fetch_account_balances."""
    return _fetch_account_balances(as_of)


def _fetch_cashflow(time_range: TimeRange) -> CashflowView:
    """Fetch income and expense items for a reporting range."""
    ledger = _load_ledger()
    ledger.set_time_range(time_range)
    return GetCashflowUseCase(ledger_repository=ledger).execute()


@st.cache_data(show_spinner=False)
def _load_cashflow(time_range: TimeRange) -> CashflowView:
    """Cached wrapper around _fetch_cashflow."""
    return _fetch_cashflow(time_range)


def _fetch_account_journal(
    account_name: str,
    page: int,
    query: str,
) -> AccountJournal:
    """Fetch one page of an account's running-balance timeline."""
    ledger = _load_ledger()
    settings = LedgerSettings.from_env()
    use_case = GetAccountJournalUseCase(
        ledger_repository=ledger,
        page_size=settings.records_per_page,
    )
    return use_case.execute(account_name, page=page, query=query)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "¥" if currency_code == "CNY" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / baseline) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _get_period_start(
    period: str,
    today: date,
) -> date | None:
    """Return the start date for the selected period."""
    time_range = _PERIODS.get(period, TimeRange.ALL)
    return TimeContext(time_range).start_date(today)


def _render_metrics(today: date, start_date: date | None) -> None:
    """Render asset, liability and net worth metrics with period deltas."""
    summary = _load_net_worth_summary(today)
    currency_code = summary.currency_code
    baseline_end = start_date - timedelta(days=1) if start_date else None
    baseline = (
        _load_net_worth_summary(baseline_end)
        if baseline_end
        else NetWorthSummary(
            asset_total=Decimal("0"),
            liability_total=Decimal("0"),
            net_worth=Decimal("0"),
            currency_code=currency_code,
        )
    )

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(summary.asset_total, currency_code),
        _format_delta_with_percent(
            summary.asset_total - baseline.asset_total,
            baseline.asset_total,
        ),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(summary.liability_total, currency_code),
        _format_delta_with_percent(
            summary.liability_total - baseline.liability_total,
            baseline.liability_total,
        ),
        delta_color="inverse",
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.net_worth, currency_code),
        _format_delta_with_percent(
            summary.net_worth - baseline.net_worth,
            baseline.net_worth,
        ),
    )


def _prepare_cashflow_chart_data(
    view: CashflowView,
) -> list[dict[str, str | float]]:
    """Group cashflow items by top-level category for the bar chart.

    Args:
        view: Income and expense items of the period.

    Returns:
        Altair-ready rows with ``kind``, ``category`` and ``amount`` keys.
    """
    totals: dict[tuple[str, str], Decimal] = {}
    groups = (("Income", view.incoming), ("Expenses", view.outgoing))
    for kind, items in groups:
        for item in items:
            key = (kind, item.top_parent_name or item.account_full_name)
            totals[key] = totals.get(key, Decimal("0")) + item.amount
    return [
        {
            "kind": kind,
            "category": category,
            "amount": float(amount),
            "amount_label": _format_currency(
                amount,
                view.summary.currency_code,
            ),
        }
        for (kind, category), amount in sorted(totals.items())
    ]


def _render_cashflow_chart(view: CashflowView, title: str) -> None:
    """Render a stacked bar chart of income against expenses."""
    st.subheader(title)
    if not view.incoming and not view.outgoing:
        st.info("No income or expenses in this period.")
        return
    data = _prepare_cashflow_chart_data(view)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("kind:N", title=None),
        y=alt.Y("amount:Q", title=view.summary.currency_code),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=360)
    st.altair_chart(chart, width="stretch")
    summary = view.summary
    st.caption(
        f"Income {_format_currency(summary.total_in, summary.currency_code)}"
        f" · Expenses "
        f"{_format_currency(summary.total_out, summary.currency_code)}"
    )


def _render_balance_sheet(balances: Sequence[AccountBalanceDTO]) -> None:
    """Render non-zero balance sheet accounts."""
    st.subheader("Balance Sheet")
    data = [
        {
            "Account": item.name,
            "Type": item.account_type,
            "Balance": _format_currency(item.balance, item.currency_code),
        }
        for item in balances
        if AccountType(item.account_type).is_balance_sheet
        and item.balance != 0
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_accounts(accounts: Sequence[AccountDTO]) -> None:
    """Render the accounts table with light filtering."""
    st.subheader("Accounts")
    query = st.text_input("Search by name", placeholder="Type to filter")
    account_types = sorted({acc.account_type for acc in accounts})
    account_type_filter = st.selectbox(
        "Filter by type",
        options=["All"] + account_types,
        index=0,
    )

    filtered = []
    query_lower = query.strip().lower()
    for acc in accounts:
        if (account_type_filter != "All"
                and acc.account_type != account_type_filter):
            continue
        if query_lower and query_lower not in acc.name.lower():
            continue
        filtered.append(acc)

    st.caption(f"{len(filtered)} accounts shown")
    data = [
        {
            "Name": acc.name,
            "Type": acc.account_type,
            "Status": acc.status,
            "Currency": acc.currency or "-",
            "Opened": acc.open_date.isoformat() if acc.open_date else "-",
        }
        for acc in filtered
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _render_journal(accounts: Sequence[AccountDTO]) -> None:
    """Render the paginated running-balance journal of one account."""
    st.subheader("Journal")
    account_name = st.selectbox(
        "Account",
        options=[acc.name for acc in accounts],
    )
    query = st.text_input("Search descriptions", placeholder="Payee or memo")
    page = int(st.number_input("Page", min_value=1, value=1, step=1))
    try:
        journal = _fetch_account_journal(account_name, page, query)
    except LedgerError as exc:
        st.error(str(exc))
        return

    currency_code = journal.account.currency or ""
    st.caption(
        f"{journal.timeline.total_count} events · page {journal.page} "
        f"of {journal.total_pages}"
    )
    data = [
        {
            "Date": event.date.isoformat(),
            "Time": event.time.strftime("%H:%M") if event.time else "",
            "Type": event.event_type.value,
            "Description": event.description,
            "Amount": _format_delta(event.amount),
            "Balance": _format_currency(event.running_balance, currency_code),
        }
        for event in journal.timeline.events
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=520)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    try:
        _load_ledger()
        accounts = _load_accounts()
    except LedgerError as exc:
        st.error(f"Could not load the ledger: {exc}")
        return
    if not accounts:
        st.warning("No accounts found. Check LEDGER_FILE.")
        return

    page = st.sidebar.selectbox("Page", ["Dashboard", "Accounts", "Journal"])
    get_usage_logger().info(f"Dashboard page viewed: {page}")

    if page == "Dashboard":
        period = st.sidebar.selectbox("Period", list(_PERIODS))
        today = date.today()
        start_date = _get_period_start(period, today)
        _render_metrics(today, start_date)
        chart_col, table_col = st.columns(2)
        with chart_col:
            _render_cashflow_chart(
                _load_cashflow(_PERIODS[period]),
                f"Income vs Expenses ({period})",
            )
        with table_col:
            _render_balance_sheet(_load_account_balances(today))
    elif page == "Accounts":
        st.caption(f"{len(accounts)} accounts in the ledger")
        _render_accounts(accounts)
    else:
        _render_journal(accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
