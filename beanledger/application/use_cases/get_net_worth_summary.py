"""Use case to compute net worth from the loaded ledger."""

from datetime import date

from beanledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from beanledger.domain.models.finance import NetWorthSummary
from beanledger.domain.services.finance import compute_net_worth_summary
from beanledger.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth at a date."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger queries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, as_of: date | None = None) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            as_of: Optional inclusive cut-off date, None for the latest
                state.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        balances = self._ledger_repository.calculate_account_balances(as_of)
        summary = compute_net_worth_summary(
            self._ledger_repository.accounts(),
            balances,
            currency_code=self._ledger_repository.operating_currency,
            as_of=as_of,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
