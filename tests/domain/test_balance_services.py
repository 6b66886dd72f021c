"""Tests for balance aggregation and the padding solver."""

from datetime import date
from decimal import Decimal

from beanledger.domain.models.accounts import (
    Account,
    AccountType,
    BalanceSnapshot,
)
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Posting,
    Transaction,
)
from beanledger.domain.services.balances import calculate_account_balances
from beanledger.domain.services.padding import (
    compute_padding_amount,
    synthesize_pad_transaction,
)


def _transfer(day: date, amount: str) -> Transaction:
    return Transaction(
        id=f"t-{day.isoformat()}",
        date=day,
        postings=(
            Posting("Assets:Cash", f"{amount} CNY", "CNY"),
            Posting("Expenses:Misc"),
        ),
    )


def test_balances_start_from_snapshot_date() -> None:
    """Postings before the snapshot are assumed to be included in it."""
    cash = Account(
        name="Assets:Cash",
        account_type=AccountType.ASSETS,
        balance=BalanceSnapshot(Decimal("100"), "CNY", date(2024, 2, 1)),
    )
    transactions = [
        _transfer(date(2024, 1, 15), "-30"),
        _transfer(date(2024, 2, 1), "-10"),
        _transfer(date(2024, 3, 1), "5"),
    ]

    result = calculate_account_balances([cash], transactions)

    assert result["Assets:Cash"] == Decimal("95")
    assert result["Expenses:Misc"] == Decimal("35")


def test_pad_on_snapshot_date_is_part_of_the_snapshot() -> None:
    """A pad dated on the snapshot day replays before the assertion."""
    day = date(2024, 2, 1)
    cash = Account(
        name="Assets:Cash",
        account_type=AccountType.ASSETS,
        balance=BalanceSnapshot(Decimal("150"), "CNY", day),
    )
    pad = synthesize_pad_transaction(
        PadEntry("Assets:Cash", "Income:Gift", day),
        Decimal("50"),
        "CNY",
        0,
    )

    result = calculate_account_balances(
        [cash],
        [pad, _transfer(day, "-10")],
    )

    assert result["Assets:Cash"] == Decimal("140")
    assert result["Income:Gift"] == Decimal("-50")


def test_balances_as_of_use_history() -> None:
    """With a cut-off, the latest assertion on or before it is the start."""
    cash = Account(
        name="Assets:Cash",
        account_type=AccountType.ASSETS,
        balance=BalanceSnapshot(Decimal("500"), "CNY", date(2024, 6, 1)),
    )
    history = [
        BalanceEntry("Assets:Cash", "100", "CNY", date(2024, 2, 1)),
        BalanceEntry("Assets:Cash", "500", "CNY", date(2024, 6, 1)),
        BalanceEntry("Assets:Ghost", "9", "CNY", date(2024, 2, 1)),
    ]
    transactions = [
        _transfer(date(2024, 2, 10), "-10"),
        _transfer(date(2024, 4, 1), "-20"),
    ]

    result = calculate_account_balances(
        [cash],
        transactions,
        history,
        as_of=date(2024, 3, 1),
    )

    assert result["Assets:Cash"] == Decimal("90")
    assert "Assets:Ghost" not in result


def test_padding_without_following_assertion_uses_snapshot() -> None:
    """With no later assertion the account snapshot is used."""
    account = Account(
        name="Assets:Cash",
        account_type=AccountType.ASSETS,
        currency="USD",
        balance=BalanceSnapshot(Decimal("7"), "USD", date(2024, 1, 1)),
    )
    pad = PadEntry("Assets:Cash", "Equity:Opening", date(2024, 2, 1))

    assert compute_padding_amount(pad, [], [], account, "CNY") == (
        Decimal("7"),
        "USD",
    )
    assert compute_padding_amount(pad, [], [], None, "CNY") == (
        Decimal("0"),
        "CNY",
    )


def test_padding_from_expenses_without_baseline() -> None:
    """Missing earlier assertions count as a zero baseline."""
    pad = PadEntry("Assets:Cash", "Expenses:Adjust", date(2024, 1, 1))
    balances = [BalanceEntry("Assets:Cash", "80", "CNY", date(2024, 1, 31))]
    transactions = [
        _transfer(date(2024, 1, 10), "30"),
        Transaction(
            id="touches-funding",
            date=date(2024, 1, 12),
            postings=(
                Posting("Assets:Cash", "1000 CNY", "CNY"),
                Posting("Expenses:Adjust"),
            ),
        ),
    ]

    amount, currency = compute_padding_amount(
        pad, balances, transactions, None, "CNY"
    )

    assert (amount, currency) == (Decimal("50"), "CNY")


def test_synthesized_pad_transaction_shape() -> None:
    """The pad transaction carries the pad tag, metadata and two legs."""
    pad = PadEntry("Assets:X", "Income:Gift", date(2024, 1, 15))

    transaction = synthesize_pad_transaction(pad, Decimal("50"), "CNY", 3)

    assert transaction.is_pad
    assert transaction.tags == ("pad",)
    assert transaction.metadata == {
        "pad_source": "Income:Gift",
        "pad_date": "2024-01-15",
    }
    assert [p.amount for p in transaction.postings] == ["50 CNY", "-50 CNY"]
    assert transaction.id.startswith("pad-2024-01-15:3:")
    assert transaction.source is None
