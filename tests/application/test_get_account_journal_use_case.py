"""Tests for the GetAccountJournalUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from beanledger.application.use_cases.get_account_journal import (
    GetAccountJournalUseCase,
)
from beanledger.domain.errors import AccountNotFoundError
from beanledger.domain.models.timeline import (
    TimelineEvent,
    TimelineEventType,
    TimelinePage,
)


def _event(day: int, description: str, running: str) -> TimelineEvent:
    return TimelineEvent(
        date=date(2024, 1, day),
        time=None,
        event_type=TimelineEventType.TRANSACTION,
        amount=Decimal("1"),
        running_balance=Decimal(running),
        currency="CNY",
        description=description,
        transaction_id=f"t{day}",
    )


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.account.return_value = MagicMock(name="account")
    repository.balances_by_account.return_value = []
    repository.pads_by_account.return_value = []
    return repository


def test_execute_requests_page_offset() -> None:
    """Page numbers translate to timeline offsets."""
    repository = _repository()
    page = TimelinePage(
        events=[_event(3, "Shop", "3")],
        total_count=5,
        offset=2,
        limit=2,
        final_balance=Decimal("5"),
    )
    repository.account_timeline.return_value = page

    journal = GetAccountJournalUseCase(
        repository,
        logger=MagicMock(),
        page_size=2,
    ).execute("Assets:Cash", page=2)

    repository.account_timeline.assert_called_once_with(
        "Assets:Cash",
        offset=2,
        limit=2,
    )
    assert journal.timeline is page
    assert journal.total_pages == 3
    assert journal.page == 2


def test_execute_filters_descriptions_with_query() -> None:
    """A query filters the full timeline, keeping running balances."""
    repository = _repository()
    newest_first = [
        _event(3, "Coffee", "3"),
        _event(2, "Rent", "2"),
        _event(1, "coffee beans", "1"),
    ]
    repository.account_timeline.return_value = TimelinePage(
        events=newest_first,
        total_count=3,
        offset=0,
        limit=None,
        final_balance=Decimal("3"),
    )

    journal = GetAccountJournalUseCase(
        repository,
        logger=MagicMock(),
        page_size=10,
    ).execute("Assets:Cash", query="COFFEE")

    assert [e.description for e in journal.timeline.events] == [
        "Coffee",
        "coffee beans",
    ]
    assert [e.running_balance for e in journal.timeline.events] == [
        Decimal("3"),
        Decimal("1"),
    ]
    assert journal.timeline.total_count == 2


def test_execute_propagates_unknown_account() -> None:
    """Unknown accounts raise before any timeline work."""
    repository = _repository()
    repository.account.side_effect = AccountNotFoundError("Assets:Nope")

    with pytest.raises(AccountNotFoundError):
        GetAccountJournalUseCase(
            repository,
            logger=MagicMock(),
        ).execute("Assets:Nope")
    repository.account_timeline.assert_not_called()
