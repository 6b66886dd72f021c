"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from beanledger.adapters.interface.streamlit import app
from beanledger.domain.errors import LedgerConfigError
from beanledger.domain.models.finance import (
    CashflowItem,
    CashflowSummary,
    CashflowView,
)


def test_fetch_accounts_invokes_use_case(monkeypatch):
    """_fetch_accounts should build the use case on the cached ledger."""
    fake_accounts = ["a"]

    class _FakeUseCase:
        def __init__(self, ledger_repository):
            self.ledger_repository = ledger_repository

        def execute(self):
            return fake_accounts

    monkeypatch.setattr(app, "_load_ledger", lambda: "ledger")
    monkeypatch.setattr(app, "GetAccountsUseCase", _FakeUseCase)

    assert app._fetch_accounts() == fake_accounts


def test_fetch_cashflow_sets_time_range(monkeypatch):
    """The selected range is applied before computing cashflow."""
    ledger = MagicMock()
    view = object()
    use_case = MagicMock()
    use_case.return_value.execute.return_value = view
    monkeypatch.setattr(app, "_load_ledger", lambda: ledger)
    monkeypatch.setattr(app, "GetCashflowUseCase", use_case)

    assert app._fetch_cashflow(app.TimeRange.MONTH) is view
    ledger.set_time_range.assert_called_once_with(app.TimeRange.MONTH)


def test_get_period_start_maps_to_time_ranges():
    """Dashboard periods map onto reporting ranges."""
    today = date(2024, 5, 20)

    assert app._get_period_start("YTD", today) == date(2024, 1, 1)
    assert app._get_period_start("QTD", today) == date(2024, 4, 1)
    assert app._get_period_start("MTD", today) == date(2024, 5, 1)
    assert app._get_period_start("All Time", today) is None


def test_formatting_helpers():
    """Currency and delta strings are display-ready."""
    assert app._format_currency(Decimal("1234.5"), "CNY") == "1,234.50 ¥"
    assert app._format_currency(Decimal("2"), "USD") == "2.00 USD"
    assert app._format_delta_with_percent(
        Decimal("10"), Decimal("100")
    ) == "+10.00 (+10.00%)"
    assert app._format_delta_with_percent(
        Decimal("-5"), Decimal("0")
    ) == "-5.00"


def test_prepare_cashflow_chart_data_groups_categories():
    """Items are grouped by kind and top-level category."""
    view = CashflowView(
        summary=CashflowSummary(
            total_in=Decimal("100"),
            total_out=Decimal("60"),
            currency_code="CNY",
        ),
        incoming=[CashflowItem("Income:Salary", Decimal("100"), "Salary")],
        outgoing=[
            CashflowItem("Expenses:Food:Lunch", Decimal("20"), "Food"),
            CashflowItem("Expenses:Food:Dinner", Decimal("30"), "Food"),
            CashflowItem("Expenses:Rent", Decimal("10"), None),
        ],
    )

    data = app._prepare_cashflow_chart_data(view)

    assert [(row["kind"], row["category"], row["amount"]) for row in data] == [
        ("Expenses", "Expenses:Rent", 10.0),
        ("Expenses", "Food", 50.0),
        ("Income", "Salary", 100.0),
    ]


class _FakeStreamlit:
    def __init__(self, page: str = "Accounts") -> None:
        self.config_called = False
        self.title_called = False
        self.captions: list[str] = []
        self.warning_called = False
        self.error_text = None
        self.dataframe_payload = None
        self.sidebar = SimpleNamespace(
            selectbox=lambda label, options, **kwargs: page
        )

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_called = True
        self.title_text = text

    def subheader(self, text: str):
        self.subheader_text = text

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warning_called = True
        self.warning_text = text

    def error(self, text: str):
        self.error_text = text

    def text_input(self, label: str, **kwargs):
        return ""

    def selectbox(self, label: str, options, **kwargs):
        return options[0]

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)


def _account_dto(name: str) -> SimpleNamespace:
    return SimpleNamespace(
        name=name,
        account_type=name.split(":")[0],
        status="open",
        currency="CNY",
        open_date=date(2024, 1, 1),
    )


def test_main_displays_accounts(monkeypatch):
    """main should render the accounts table on the Accounts page."""
    fake_st = _FakeStreamlit(page="Accounts")
    accounts = [_account_dto("Assets:Cash"), _account_dto("Expenses:Food")]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_ledger", lambda: "ledger")
    monkeypatch.setattr(app, "_load_accounts", lambda: accounts)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)

    app.main()

    assert fake_st.config_called
    assert fake_st.title_called
    assert fake_st.warning_called is False
    table_data, kwargs = fake_st.dataframe_payload
    assert table_data[0]["Name"] == "Assets:Cash"
    assert table_data[0]["Opened"] == "2024-01-01"
    assert kwargs["hide_index"] is True
    assert "2 accounts shown" in fake_st.captions


def test_main_warns_when_no_accounts(monkeypatch):
    """main should warn the user when the ledger has no accounts."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_ledger", lambda: "ledger")
    monkeypatch.setattr(app, "_load_accounts", lambda: [])

    app.main()

    assert fake_st.warning_called


def test_main_reports_load_errors(monkeypatch):
    """Ledger errors are shown instead of raising."""
    fake_st = _FakeStreamlit()

    def _fail():
        raise LedgerConfigError("No ledger file configured")

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_ledger", _fail)

    app.main()

    assert "No ledger file configured" in fake_st.error_text


def test_render_balance_sheet_skips_income_statement_rows(monkeypatch):
    """Only non-zero balance sheet accounts are listed."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    balances = [
        SimpleNamespace(
            name="Assets:Cash",
            account_type="Assets",
            balance=Decimal("90"),
            currency_code="CNY",
        ),
        SimpleNamespace(
            name="Assets:Empty",
            account_type="Assets",
            balance=Decimal("0"),
            currency_code="CNY",
        ),
        SimpleNamespace(
            name="Expenses:Food",
            account_type="Expenses",
            balance=Decimal("35"),
            currency_code="CNY",
        ),
    ]

    app._render_balance_sheet(balances)

    table_data, _ = fake_st.dataframe_payload
    assert [row["Account"] for row in table_data] == ["Assets:Cash"]
    assert table_data[0]["Balance"] == "90.00 ¥"
