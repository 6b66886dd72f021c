"""Domain models for financial reports."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from beanledger.domain.models.transactions import Transaction


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset balances.
        liability_total: Sum of liability balances (absolute value).
        net_worth: Assets minus liabilities.
        currency_code: Reporting currency.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class BalanceReportEntry:
    """Balance of one account on the balance sheet."""

    account: str
    account_type: str
    balance: Decimal
    currency: str
    percentage: Decimal


@dataclass(frozen=True)
class BalanceReport:
    """Balance sheet as of a date.

    Attributes:
        as_of: Report date, None when the window is unbounded.
        assets: Asset entries sorted by account name.
        liabilities: Liability entries sorted by account name.
        equity: Equity entries sorted by account name.
        summary: Asset, liability and net worth totals.
        equity_total: Sum of equity balances.
    """

    as_of: date | None
    assets: list[BalanceReportEntry]
    liabilities: list[BalanceReportEntry]
    equity: list[BalanceReportEntry]
    summary: NetWorthSummary
    equity_total: Decimal

    @property
    def total_assets(self) -> Decimal:
        return self.summary.asset_total

    @property
    def total_liabilities(self) -> Decimal:
        return self.summary.liability_total

    @property
    def net_worth(self) -> Decimal:
        return self.summary.net_worth


@dataclass(frozen=True)
class IncomeExpenseEntry:
    """Total of one Income or Expenses account within a period."""

    account: str
    category: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class IncomeExpenseReport:
    """Income statement for the active time context."""

    period_start: date | None
    period_end: date | None
    income: list[IncomeExpenseEntry]
    expenses: list[IncomeExpenseEntry]
    total_income: Decimal
    total_expenses: Decimal
    currency_code: str

    @property
    def net_income(self) -> Decimal:
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category: str
    amount: Decimal
    parent_category: str | None = None


@dataclass(frozen=True)
class ExpenseCategoryReport:
    """Expenses grouped by their second name component."""

    currency_code: str
    categories: list[CategoryAmount]
    total: Decimal


@dataclass(frozen=True)
class NetWorthPoint:
    """Net worth at the end of one month."""

    date: date
    summary: NetWorthSummary


@dataclass(frozen=True)
class NetWorthReport:
    """Month-end net worth series."""

    points: list[NetWorthPoint]
    currency_code: str


@dataclass(frozen=True)
class CashflowSummary:
    """Summary of cashflow totals."""

    total_in: Decimal
    total_out: Decimal
    currency_code: str

    @property
    def difference(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class CashflowItem:
    """Cashflow aggregate for a single account."""

    account_full_name: str
    amount: Decimal
    top_parent_name: str | None = None


@dataclass(frozen=True)
class CashflowView:
    """Cashflow summary and details for UI rendering."""

    summary: CashflowSummary
    incoming: list[CashflowItem]
    outgoing: list[CashflowItem]


@dataclass(frozen=True)
class TimePeriodSummary:
    """Headline figures for the active time context."""

    description: str
    start_date: date | None
    end_date: date | None
    transaction_count: int
    total_income: Decimal
    total_expenses: Decimal
    currency_code: str

    @property
    def net_income(self) -> Decimal:
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class TransactionStats:
    """Aggregate counts over all transactions."""

    total_transactions: int
    total_postings: int
    pad_transactions: int
    first_date: date | None
    last_date: date | None
    payee_count: int
    tag_count: int


@dataclass(frozen=True)
class TransactionPage:
    """A page of transactions sorted by date descending."""

    transactions: list[Transaction]
    total_count: int
    offset: int
    limit: int | None

    @property
    def has_more(self) -> bool:
        if self.limit is None:
            return False
        return self.offset + self.limit < self.total_count


__all__ = [
    "NetWorthSummary",
    "BalanceReportEntry",
    "BalanceReport",
    "IncomeExpenseEntry",
    "IncomeExpenseReport",
    "CategoryAmount",
    "ExpenseCategoryReport",
    "NetWorthPoint",
    "NetWorthReport",
    "CashflowSummary",
    "CashflowItem",
    "CashflowView",
    "TimePeriodSummary",
    "TransactionStats",
    "TransactionPage",
]
