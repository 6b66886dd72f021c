"""Running-balance timeline of a single account.

Balance assertions set the running balance; pads and transactions add the
amount they post to the account. Events are replayed in (date, time) order,
with balances first, then pads, then transactions on the same instant.
"""

from collections.abc import Iterable, Sequence
from datetime import date, time
from decimal import Decimal
from typing import NamedTuple

from beanledger.domain.constants import PAD_SOURCE_META
from beanledger.domain.models.timeline import (
    TimelineEvent,
    TimelineEventType,
    TimelinePage,
)
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Transaction,
)


class _Pending(NamedTuple):
    date: date
    time: time | None
    event_type: TimelineEventType
    order: int
    amount: Decimal
    currency: str | None
    description: str
    transaction_id: str | None

    def sort_key(self):
        return (
            self.date,
            self.time or time.min,
            self.event_type.sort_rank,
            self.order,
        )


def _is_pad_for(
    transaction: Transaction,
    pads: Sequence[PadEntry],
) -> PadEntry | None:
    for pad in pads:
        if (
            pad.date == transaction.date
            and transaction.touches(pad.account)
            and transaction.touches(pad.source_account)
        ):
            return pad
    return None


def _pad_description(
    account: str,
    transaction: Transaction,
    pad: PadEntry | None,
) -> str:
    if pad is not None:
        padded, funding = pad.account, pad.source_account
    else:
        funding = transaction.metadata.get(PAD_SOURCE_META, "")
        others = [name for name in transaction.accounts() if name != funding]
        padded = others[0] if others else ""
    if account == funding:
        return f"Pad to {padded}"
    return f"Pad from {funding}"


def _posting_currency(transaction: Transaction, account: str) -> str | None:
    for posting in transaction.postings_for(account):
        _amount, currency = transaction.resolved_amount(posting)
        if currency:
            return currency
    return None


def build_account_timeline(
    account: str,
    transactions: Iterable[Transaction],
    balances: Iterable[BalanceEntry],
    pads: Sequence[PadEntry] = (),
) -> list[TimelineEvent]:
    """Replay an account's history into running-balance events.

    Args:
        account: Account name.
        transactions: Candidate transactions; those not touching the
            account are ignored.
        balances: Balance assertions; other accounts' entries are ignored.
        pads: Optional pad entries used to recognise padding transactions
            that do not carry the synthesized pad marker.

    Returns:
        list[TimelineEvent]: Events in chronological order, each annotated
        with the balance after it.
    """
    pending: list[_Pending] = []
    for entry in balances:
        if entry.account != account:
            continue
        pending.append(
            _Pending(
                date=entry.date,
                time=None,
                event_type=TimelineEventType.BALANCE,
                order=len(pending),
                amount=entry.value,
                currency=entry.currency,
                description=f"Balance {entry.amount} {entry.currency}",
                transaction_id=None,
            )
        )
    for transaction in transactions:
        if not transaction.touches(account):
            continue
        pad = _is_pad_for(transaction, pads)
        if transaction.is_pad or pad is not None:
            event_type = TimelineEventType.PAD
            description = _pad_description(account, transaction, pad)
        else:
            event_type = TimelineEventType.TRANSACTION
            description = transaction.description
        pending.append(
            _Pending(
                date=transaction.date,
                time=transaction.time,
                event_type=event_type,
                order=len(pending),
                amount=transaction.posting_amount(account),
                currency=_posting_currency(transaction, account),
                description=description,
                transaction_id=transaction.id,
            )
        )
    pending.sort(key=_Pending.sort_key)

    events: list[TimelineEvent] = []
    running = Decimal("0")
    for item in pending:
        if item.event_type == TimelineEventType.BALANCE:
            running = item.amount
        else:
            running += item.amount
        events.append(
            TimelineEvent(
                date=item.date,
                time=item.time,
                event_type=item.event_type,
                amount=item.amount,
                running_balance=running,
                currency=item.currency,
                description=item.description,
                transaction_id=item.transaction_id,
            )
        )
    return events


def final_running_balance(events: Sequence[TimelineEvent]) -> Decimal:
    """Return the running balance after the last event (zero when empty)."""
    if not events:
        return Decimal("0")
    return events[-1].running_balance


def paginate_timeline(
    events: Sequence[TimelineEvent],
    offset: int = 0,
    limit: int | None = None,
) -> TimelinePage:
    """Return a most-recent-first page of a chronological timeline.

    Args:
        events: Events in chronological order.
        offset: Number of most recent events to skip.
        limit: Maximum events to return, None for all.

    Returns:
        TimelinePage: Requested slice plus totals.
    """
    offset = max(offset, 0)
    newest_first = list(reversed(events))
    end = None if limit is None else offset + max(limit, 0)
    return TimelinePage(
        events=newest_first[offset:end],
        total_count=len(newest_first),
        offset=offset,
        limit=limit,
        final_balance=final_running_balance(events),
    )


__all__ = [
    "build_account_timeline",
    "final_running_balance",
    "paginate_timeline",
]
