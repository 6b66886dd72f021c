"""Models for per-account running-balance timelines."""

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum


class TimelineEventType(str, Enum):
    """Kind of timeline event, in same-day ordering precedence.

    A pad replays before a balance assertion of the same day, the one the
    padding solver sized it against.
    """

    PAD = "pad"
    BALANCE = "balance"
    TRANSACTION = "transaction"

    @property
    def sort_rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    TimelineEventType.PAD: 0,
    TimelineEventType.BALANCE: 1,
    TimelineEventType.TRANSACTION: 2,
}


@dataclass(frozen=True)
class TimelineEvent:
    """One row of an account timeline.

    Attributes:
        date: Event date.
        time: Optional wall-clock time used for same-day ordering.
        event_type: Balance, Pad or Transaction.
        amount: Asserted amount for balances, posted amount otherwise.
        running_balance: Account balance after this event.
        currency: Currency of the amount, if known.
        description: Human readable summary.
        transaction_id: Identifier of the underlying transaction, if any.
    """

    date: date
    time: time | None
    event_type: TimelineEventType
    amount: Decimal
    running_balance: Decimal
    currency: str | None
    description: str
    transaction_id: str | None = None


@dataclass(frozen=True)
class TimelinePage:
    """Most-recent-first slice of a timeline."""

    events: list[TimelineEvent]
    total_count: int
    offset: int
    limit: int | None
    final_balance: Decimal

    @property
    def has_more(self) -> bool:
        if self.limit is None:
            return False
        return self.offset + self.limit < self.total_count


__all__ = ["TimelineEventType", "TimelineEvent", "TimelinePage"]
