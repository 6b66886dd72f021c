"""Use case to compute cashflow details for the active period."""

from decimal import Decimal

from beanledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from beanledger.domain.models.finance import (
    CashflowItem,
    CashflowSummary,
    CashflowView,
    IncomeExpenseEntry,
)
from beanledger.infrastructure.logging.logger import get_app_logger


def _items(entries: list[IncomeExpenseEntry]) -> list[CashflowItem]:
    return [
        CashflowItem(
            account_full_name=entry.account,
            amount=entry.amount,
            top_parent_name=entry.category,
        )
        for entry in entries
        if entry.amount > 0
    ]


class GetCashflowUseCase:
    """Turn the income statement into inflow and outflow items."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> CashflowView:
        """Return cashflow totals and details for the current time context.

        Returns:
            CashflowView: Income accounts as inflows, expense accounts as
            outflows, both positive.
        """
        report = self._ledger_repository.income_expense_report()
        incoming = _items(report.income)
        outgoing = _items(report.expenses)
        total_in = sum((item.amount for item in incoming), Decimal("0"))
        total_out = sum((item.amount for item in outgoing), Decimal("0"))
        summary = CashflowSummary(
            total_in=total_in,
            total_out=total_out,
            currency_code=report.currency_code,
        )
        self._logger.info(
            f"Cashflow totals computed: in={total_in}, out={total_out}, "
            f"currency={report.currency_code}"
        )
        return CashflowView(
            summary=summary,
            incoming=incoming,
            outgoing=outgoing,
        )


__all__ = ["GetCashflowUseCase", "CashflowView"]
