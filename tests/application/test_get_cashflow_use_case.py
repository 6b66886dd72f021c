"""Tests for the GetCashflowUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from beanledger.application.use_cases.get_cashflow import GetCashflowUseCase
from beanledger.domain.models.finance import (
    IncomeExpenseEntry,
    IncomeExpenseReport,
)


def test_execute_splits_income_and_expenses() -> None:
    """Income entries become inflows, expense entries outflows."""
    report = IncomeExpenseReport(
        period_start=date(2024, 1, 1),
        period_end=date(2024, 1, 31),
        income=[
            IncomeExpenseEntry(
                "Income:Salary", "Salary", Decimal("150.00"), Decimal("100")
            ),
        ],
        expenses=[
            IncomeExpenseEntry(
                "Expenses:Food", "Food", Decimal("40.00"), Decimal("80")
            ),
            IncomeExpenseEntry(
                "Expenses:Refunds", "Refunds", Decimal("-5.00"), Decimal("0")
            ),
            IncomeExpenseEntry(
                "Expenses:Fees", "Fees", Decimal("10.00"), Decimal("20")
            ),
        ],
        total_income=Decimal("150.00"),
        total_expenses=Decimal("45.00"),
        currency_code="CNY",
    )
    repository = MagicMock()
    repository.income_expense_report.return_value = report

    result = GetCashflowUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    ).execute()

    assert result.summary.total_in == Decimal("150.00")
    assert result.summary.total_out == Decimal("50.00")
    assert result.summary.difference == Decimal("100.00")
    assert result.summary.currency_code == "CNY"
    assert [item.account_full_name for item in result.incoming] == [
        "Income:Salary",
    ]
    assert [item.top_parent_name for item in result.outgoing] == [
        "Food",
        "Fees",
    ]
