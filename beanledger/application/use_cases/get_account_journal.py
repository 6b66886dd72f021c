"""Use case assembling the account detail view."""

from dataclasses import dataclass

from beanledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from beanledger.domain.constants import DEFAULT_RECORDS_PER_PAGE
from beanledger.domain.models.accounts import Account
from beanledger.domain.models.timeline import TimelinePage
from beanledger.domain.models.transactions import BalanceEntry, PadEntry
from beanledger.domain.services.timeline import paginate_timeline
from beanledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AccountJournal:
    """Account header data plus one page of its timeline."""

    account: Account
    timeline: TimelinePage
    balances: list[BalanceEntry]
    pads: list[PadEntry]
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.timeline.total_count == 0:
            return 1
        return -(-self.timeline.total_count // self.page_size)


class GetAccountJournalUseCase:
    """Page through an account's running-balance timeline."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        page_size: int = DEFAULT_RECORDS_PER_PAGE,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger queries.
            logger: Optional logger compatible with logging.Logger-like API.
            page_size: Events per page.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._page_size = page_size

    def execute(
        self,
        account_name: str,
        page: int = 1,
        query: str = "",
    ) -> AccountJournal:
        """Return one page of the account timeline, newest first.

        Args:
            account_name: Exact account name.
            page: 1-based page number; values below 1 are treated as 1.
            query: Optional case-insensitive filter on event descriptions.
                Running balances are those of the unfiltered timeline.

        Returns:
            AccountJournal: Account, timeline page, balances and pads.

        Raises:
            AccountNotFoundError: If the account does not exist.
        """
        account = self._ledger_repository.account(account_name)
        page = max(page, 1)
        offset = (page - 1) * self._page_size
        if query.strip():
            full = self._ledger_repository.account_timeline(account_name)
            needle = query.strip().lower()
            kept = [
                event
                for event in reversed(full.events)
                if needle in event.description.lower()
            ]
            timeline = paginate_timeline(kept, offset, self._page_size)
        else:
            timeline = self._ledger_repository.account_timeline(
                account_name,
                offset=offset,
                limit=self._page_size,
            )
        self._logger.info(
            f"Fetched {len(timeline.events)} of {timeline.total_count} "
            f"timeline events for {account_name}"
        )
        return AccountJournal(
            account=account,
            timeline=timeline,
            balances=self._ledger_repository.balances_by_account(account_name),
            pads=self._ledger_repository.pads_by_account(account_name),
            page=page,
            page_size=self._page_size,
        )


__all__ = ["GetAccountJournalUseCase", "AccountJournal"]
