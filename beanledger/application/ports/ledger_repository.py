"""Port for read access to reconciled ledger state."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from beanledger.domain.models.accounts import Account
from beanledger.domain.models.finance import (
    BalanceReport,
    IncomeExpenseReport,
)
from beanledger.domain.models.time_context import TimeContext
from beanledger.domain.models.timeline import TimelinePage
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Transaction,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing the read-only query surface of a loaded ledger."""

    @property
    def operating_currency(self) -> str:
        """Return the reporting currency."""

    def accounts(self) -> list[Account]:
        """Return every account in open order."""

    def account(self, name: str) -> Account:
        """Return one account by exact name."""

    def transactions(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Transaction]:
        """Return transactions in ledger order."""

    def transaction(self, transaction_id: str) -> Transaction:
        """Return one transaction by identifier."""

    def search_transactions(self, query: str) -> list[Transaction]:
        """Return transactions matching a free-text query."""

    def balances_by_account(self, name: str) -> list[BalanceEntry]:
        """Return the balance assertions of an account."""

    def pads_by_account(self, name: str) -> list[PadEntry]:
        """Return the pads targeting an account."""

    def calculate_account_balances(
        self,
        as_of: date | None = None,
    ) -> dict[str, Decimal]:
        """Return the balance of every account."""

    def account_timeline(
        self,
        name: str,
        offset: int = 0,
        limit: int | None = None,
    ) -> TimelinePage:
        """Return a most-recent-first page of an account's timeline."""

    def balance_report(self) -> BalanceReport:
        """Return the balance sheet for the current time context."""

    def income_expense_report(self) -> IncomeExpenseReport:
        """Return the income statement for the current time context."""

    def time_context(self) -> TimeContext:
        """Return the current time context."""

    def set_time_context(self, context: TimeContext) -> None:
        """Replace the current time context."""


__all__ = ["LedgerRepositoryPort"]
