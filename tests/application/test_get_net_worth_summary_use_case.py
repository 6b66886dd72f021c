"""Tests for the GetNetWorthSummaryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from beanledger.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from beanledger.domain.models.accounts import (
    Account,
    AccountStatus,
    AccountType,
)


def _account(name: str, **kwargs) -> Account:
    return Account(
        name=name,
        account_type=AccountType.from_name(name),
        status=kwargs.pop("status", AccountStatus.OPEN),
        **kwargs,
    )


def test_execute_returns_summary_totals() -> None:
    """Use case should aggregate assets, liabilities, and net worth."""
    repository = MagicMock()
    repository.operating_currency = "CNY"
    repository.accounts.return_value = [
        _account("Assets:Bank"),
        _account("Assets:Cash"),
        _account("Liabilities:Card"),
        _account("Expenses:Food"),
    ]
    repository.calculate_account_balances.return_value = {
        "Assets:Bank": Decimal("1000"),
        "Assets:Cash": Decimal("50"),
        "Liabilities:Card": Decimal("-200"),
        "Expenses:Food": Decimal("99"),
    }

    summary = GetNetWorthSummaryUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    ).execute()

    assert summary.asset_total == Decimal("1050")
    assert summary.liability_total == Decimal("200")
    assert summary.net_worth == Decimal("850")
    assert summary.currency_code == "CNY"


def test_execute_ignores_accounts_not_open_at_date() -> None:
    """Accounts opened later or closed earlier are left out."""
    repository = MagicMock()
    repository.operating_currency = "CNY"
    repository.accounts.return_value = [
        _account("Assets:Old", close_date=date(2024, 1, 31)),
        _account("Assets:New", open_date=date(2024, 6, 1)),
        _account("Assets:Live", open_date=date(2024, 1, 1)),
    ]
    repository.calculate_account_balances.return_value = {
        "Assets:Old": Decimal("1"),
        "Assets:New": Decimal("2"),
        "Assets:Live": Decimal("4"),
    }

    summary = GetNetWorthSummaryUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    ).execute(as_of=date(2024, 3, 1))

    assert summary.asset_total == Decimal("4")
    repository.calculate_account_balances.assert_called_once_with(
        date(2024, 3, 1)
    )
