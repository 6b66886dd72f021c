"""Domain services for financial reports."""

import calendar
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from beanledger.domain.models.accounts import Account, AccountType
from beanledger.domain.models.finance import (
    BalanceReport,
    BalanceReportEntry,
    CategoryAmount,
    ExpenseCategoryReport,
    IncomeExpenseEntry,
    IncomeExpenseReport,
    NetWorthPoint,
    NetWorthReport,
    NetWorthSummary,
    TimePeriodSummary,
    TransactionStats,
)
from beanledger.domain.models.time_context import TimeContext
from beanledger.domain.models.transactions import BalanceEntry, Transaction
from beanledger.domain.policies.account_filters import account_category
from beanledger.domain.services.balances import calculate_account_balances
from beanledger.domain.services.validation import validate_balance_sign
from beanledger.utils.decimal_utils import coerce_decimal, percentage


def _open_on(account: Account, as_of: date | None) -> bool:
    if as_of is None:
        return account.is_open
    if account.open_date is not None and account.open_date > as_of:
        return False
    if account.close_date is not None and account.close_date <= as_of:
        return False
    return True


def compute_net_worth_summary(
    accounts: Iterable[Account],
    balances: dict[str, Decimal],
    *,
    currency_code: str,
    as_of: date | None = None,
) -> NetWorthSummary:
    """Compute net worth totals from account balances.

    Args:
        accounts: Accounts to consider.
        balances: Balance per account name.
        currency_code: Reporting currency.
        as_of: Date used to decide which accounts were open.

    Returns:
        NetWorthSummary: Assets, liabilities (absolute) and net worth.
    """
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    for account in accounts:
        if not _open_on(account, as_of):
            continue
        balance = coerce_decimal(balances.get(account.name))
        if account.account_type == AccountType.ASSETS:
            asset_total += balance
        elif account.account_type == AccountType.LIABILITIES:
            liability_total += abs(balance)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def _balance_entries(
    accounts: Sequence[Account],
    balances: dict[str, Decimal],
    account_type: AccountType,
    currency_code: str,
    as_of: date | None,
    logger: Logger,
) -> list[BalanceReportEntry]:
    selected = [
        account
        for account in sorted(accounts, key=lambda item: item.name)
        if account.account_type == account_type and _open_on(account, as_of)
    ]
    amounts = {
        account.name: coerce_decimal(balances.get(account.name))
        for account in selected
    }
    total = sum((abs(value) for value in amounts.values()), Decimal("0"))
    entries = []
    for account in selected:
        balance = amounts[account.name]
        validate_balance_sign(account.name, account_type, balance, logger)
        currency = account.currency or (
            account.balance.currency if account.balance else currency_code
        )
        entries.append(
            BalanceReportEntry(
                account=account.name,
                account_type=account_type.value,
                balance=balance,
                currency=currency,
                percentage=percentage(abs(balance), total),
            )
        )
    return entries


def compute_balance_report(
    accounts: Sequence[Account],
    balances: dict[str, Decimal],
    *,
    as_of: date | None,
    currency_code: str,
    logger: Logger,
) -> BalanceReport:
    """Build a balance sheet from computed account balances.

    Args:
        accounts: All known accounts.
        balances: Balance per account name as of ``as_of``.
        as_of: Report date, None for the latest state.
        currency_code: Reporting currency.
        logger: Logger used for sign warnings.

    Returns:
        BalanceReport: Entries per section with totals and net worth.
    """
    assets = _balance_entries(
        accounts, balances, AccountType.ASSETS, currency_code, as_of, logger
    )
    liabilities = _balance_entries(
        accounts,
        balances,
        AccountType.LIABILITIES,
        currency_code,
        as_of,
        logger,
    )
    equity = _balance_entries(
        accounts, balances, AccountType.EQUITY, currency_code, as_of, logger
    )
    summary = compute_net_worth_summary(
        accounts,
        balances,
        currency_code=currency_code,
        as_of=as_of,
    )
    equity_total = sum((entry.balance for entry in equity), Decimal("0"))
    return BalanceReport(
        as_of=as_of,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        summary=summary,
        equity_total=equity_total,
    )


def _income_statement_totals(
    transactions: Iterable[Transaction],
    context: TimeContext,
    operating_currency: str,
    today: date | None,
) -> tuple[dict[str, Decimal], dict[str, Decimal], int]:
    income: dict[str, Decimal] = {}
    expenses: dict[str, Decimal] = {}
    count = 0
    for transaction in transactions:
        if not context.contains(transaction.date, today):
            continue
        count += 1
        for posting in transaction.postings:
            account_type = AccountType.from_name(posting.account)
            if account_type not in (AccountType.INCOME, AccountType.EXPENSES):
                continue
            value = posting.total_value(operating_currency)
            if value is None:
                value = transaction.resolved_amount(posting)
            amount = value[0]
            if account_type == AccountType.INCOME:
                income[posting.account] = (
                    income.get(posting.account, Decimal("0")) - amount
                )
            else:
                expenses[posting.account] = (
                    expenses.get(posting.account, Decimal("0")) + amount
                )
    return income, expenses, count


def _income_expense_entries(
    totals: dict[str, Decimal],
) -> tuple[list[IncomeExpenseEntry], Decimal]:
    kept = {name: value for name, value in totals.items() if value != 0}
    total = sum(kept.values(), Decimal("0"))
    entries = [
        IncomeExpenseEntry(
            account=name,
            category=account_category(name),
            amount=value,
            percentage=percentage(value, total),
        )
        for name, value in kept.items()
    ]
    entries.sort(key=lambda entry: (-entry.amount, entry.account))
    return entries, total


def compute_income_expense_report(
    transactions: Iterable[Transaction],
    context: TimeContext,
    *,
    operating_currency: str,
    today: date | None = None,
) -> IncomeExpenseReport:
    """Build an income statement for the time context.

    Income is reported positive (credits to Income accounts) and expenses
    positive (debits to Expenses accounts); refunds reduce the totals.
    Priced postings are valued in their price currency.

    Args:
        transactions: All transactions.
        context: Reporting window.
        operating_currency: Reporting currency.
        today: Reference date for rolling windows.

    Returns:
        IncomeExpenseReport: Per-account totals sorted by amount.
    """
    income, expenses, _count = _income_statement_totals(
        transactions, context, operating_currency, today
    )
    income_entries, total_income = _income_expense_entries(income)
    expense_entries, total_expenses = _income_expense_entries(expenses)
    return IncomeExpenseReport(
        period_start=context.start_date(today),
        period_end=context.end_date(today),
        income=income_entries,
        expenses=expense_entries,
        total_income=total_income,
        total_expenses=total_expenses,
        currency_code=operating_currency,
    )


def compute_expense_category_report(
    report: IncomeExpenseReport,
) -> ExpenseCategoryReport:
    """Group the expense side of an income statement by category."""
    totals: dict[str, Decimal] = {}
    for entry in report.expenses:
        totals[entry.category] = (
            totals.get(entry.category, Decimal("0")) + entry.amount
        )
    categories = [
        CategoryAmount(
            category=category,
            amount=amount,
            parent_category=AccountType.EXPENSES.value,
        )
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]
    return ExpenseCategoryReport(
        currency_code=report.currency_code,
        categories=categories,
        total=report.total_expenses,
    )


def _month_ends(start: date, end: date) -> list[date]:
    points = []
    year, month = start.year, start.month
    while True:
        month_end = date(year, month, calendar.monthrange(year, month)[1])
        if month_end >= end:
            points.append(end)
            return points
        points.append(month_end)
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def compute_net_worth_report(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    balances: Sequence[BalanceEntry],
    context: TimeContext,
    *,
    currency_code: str,
    today: date | None = None,
) -> NetWorthReport:
    """Compute net worth at each month end of the reporting window.

    Unbounded ends are clamped to the first transaction or balance date and
    to ``today``.

    Args:
        accounts: All known accounts.
        transactions: All transactions including synthesized pads.
        balances: Balance assertion history.
        context: Reporting window.
        currency_code: Reporting currency.
        today: Reference date for rolling windows.

    Returns:
        NetWorthReport: One point per month end plus the window end.
    """
    today = today or date.today()
    known_dates = [t.date for t in transactions] + [b.date for b in balances]
    if not known_dates:
        return NetWorthReport(points=[], currency_code=currency_code)
    start = context.start_date(today) or min(known_dates)
    end = context.end_date(today) or max(max(known_dates), today)
    if end < start:
        return NetWorthReport(points=[], currency_code=currency_code)
    points = []
    for point in _month_ends(start, end):
        amounts = calculate_account_balances(
            accounts, transactions, balances, as_of=point
        )
        points.append(
            NetWorthPoint(
                date=point,
                summary=compute_net_worth_summary(
                    accounts,
                    amounts,
                    currency_code=currency_code,
                    as_of=point,
                ),
            )
        )
    return NetWorthReport(points=points, currency_code=currency_code)


def compute_time_period_summary(
    transactions: Sequence[Transaction],
    context: TimeContext,
    *,
    operating_currency: str,
    today: date | None = None,
) -> TimePeriodSummary:
    """Summarise activity inside the time context."""
    income, expenses, count = _income_statement_totals(
        transactions, context, operating_currency, today
    )
    return TimePeriodSummary(
        description=context.description(),
        start_date=context.start_date(today),
        end_date=context.end_date(today),
        transaction_count=count,
        total_income=sum(income.values(), Decimal("0")),
        total_expenses=sum(expenses.values(), Decimal("0")),
        currency_code=operating_currency,
    )


def compute_transaction_stats(
    transactions: Sequence[Transaction],
) -> TransactionStats:
    """Count transactions, postings, payees and tags."""
    dates = [transaction.date for transaction in transactions]
    payees = {t.payee for t in transactions if t.payee}
    tags = {tag for t in transactions for tag in t.tags}
    return TransactionStats(
        total_transactions=len(transactions),
        total_postings=sum(len(t.postings) for t in transactions),
        pad_transactions=sum(1 for t in transactions if t.is_pad),
        first_date=min(dates) if dates else None,
        last_date=max(dates) if dates else None,
        payee_count=len(payees),
        tag_count=len(tags),
    )


__all__ = [
    "compute_net_worth_summary",
    "compute_balance_report",
    "compute_income_expense_report",
    "compute_expense_category_report",
    "compute_net_worth_report",
    "compute_time_period_summary",
    "compute_transaction_stats",
]
