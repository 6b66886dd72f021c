"""Tests for the running-balance timeline calculator."""

from datetime import date, time
from decimal import Decimal

from beanledger.domain.models.timeline import TimelineEventType
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Posting,
    Transaction,
)
from beanledger.domain.services.timeline import (
    build_account_timeline,
    final_running_balance,
    paginate_timeline,
)


def _txn(
    txn_id: str,
    day: date,
    amount: str,
    other: str = "Expenses:Food",
    when: time | None = None,
) -> Transaction:
    return Transaction(
        id=txn_id,
        date=day,
        time=when,
        narration=txn_id,
        postings=(
            Posting("Assets:Cash", f"{amount} CNY", "CNY"),
            Posting(other),
        ),
    )


def test_running_balances_follow_balance_then_transactions() -> None:
    """Balance sets the running total; transactions add to it."""
    balances = [BalanceEntry("Assets:Cash", "100", "CNY", date(2024, 1, 1))]
    transactions = [
        _txn("t1", date(2024, 1, 2), "-20"),
        _txn("t2", date(2024, 1, 3), "5"),
    ]

    events = build_account_timeline("Assets:Cash", transactions, balances)

    assert [e.running_balance for e in events] == [
        Decimal("100"),
        Decimal("80"),
        Decimal("85"),
    ]
    page = paginate_timeline(events)
    assert [e.running_balance for e in page.events] == [
        Decimal("85"),
        Decimal("80"),
        Decimal("100"),
    ]
    assert page.final_balance == Decimal("85")


def test_same_day_orders_pad_before_balance_before_transaction() -> None:
    """Events on one day should replay pad, balance, transaction."""
    day = date(2024, 3, 1)
    pad = PadEntry("Assets:Cash", "Equity:Opening", day)
    pad_txn = Transaction(
        id="pad",
        date=day,
        postings=(
            Posting("Assets:Cash", "30 CNY", "CNY"),
            Posting("Equity:Opening", "-30 CNY", "CNY"),
        ),
    )
    transactions = [_txn("t1", day, "-5"), pad_txn]
    balances = [BalanceEntry("Assets:Cash", "10", "CNY", day)]

    events = build_account_timeline(
        "Assets:Cash", transactions, balances, pads=[pad]
    )

    assert [e.event_type for e in events] == [
        TimelineEventType.PAD,
        TimelineEventType.BALANCE,
        TimelineEventType.TRANSACTION,
    ]
    assert events[0].description == "Pad from Equity:Opening"
    assert [e.running_balance for e in events] == [
        Decimal("30"),
        Decimal("10"),
        Decimal("5"),
    ]


def test_times_order_transactions_within_a_day() -> None:
    """Transactions with earlier times should replay first."""
    day = date(2024, 3, 1)
    late = _txn("late", day, "1", when=time(18, 0))
    early = _txn("early", day, "2", when=time(8, 0))

    events = build_account_timeline("Assets:Cash", [late, early], [])

    assert [e.transaction_id for e in events] == ["early", "late"]


def test_inferred_amounts_are_used_for_the_other_leg() -> None:
    """The omitted posting should contribute the inferred amount."""
    transactions = [_txn("t1", date(2024, 1, 2), "-20")]

    events = build_account_timeline("Expenses:Food", transactions, [])

    assert events[0].amount == Decimal("20")
    assert events[0].currency == "CNY"


def test_paginate_timeline_slices_newest_first() -> None:
    """Offset and limit should apply to the reversed sequence."""
    transactions = [
        _txn(f"t{index}", date(2024, 1, index), "1") for index in range(1, 6)
    ]
    events = build_account_timeline("Assets:Cash", transactions, [])

    page = paginate_timeline(events, offset=1, limit=2)

    assert [e.transaction_id for e in page.events] == ["t4", "t3"]
    assert page.total_count == 5
    assert page.has_more is True
    assert final_running_balance([]) == Decimal("0")
