"""Aggregate account balances from snapshots and postings."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from beanledger.domain.models.accounts import Account
from beanledger.domain.models.transactions import BalanceEntry, Transaction


def _starting_points(
    accounts: Iterable[Account],
    balances: Iterable[BalanceEntry],
    as_of: date | None,
) -> dict[str, tuple[Decimal, date]]:
    starts: dict[str, tuple[Decimal, date]] = {}
    if as_of is None:
        for account in accounts:
            if account.balance is not None:
                starts[account.name] = (
                    account.balance.amount,
                    account.balance.date,
                )
        return starts
    known = {account.name for account in accounts}
    for entry in balances:
        if entry.account not in known or entry.date > as_of:
            continue
        current = starts.get(entry.account)
        if current is None or entry.date > current[1]:
            starts[entry.account] = (entry.value, entry.date)
    return starts


def calculate_account_balances(
    accounts: Sequence[Account],
    transactions: Iterable[Transaction],
    balances: Iterable[BalanceEntry] = (),
    as_of: date | None = None,
) -> dict[str, Decimal]:
    """Compute the balance of every account.

    Each account starts from its latest balance snapshot, if any, and adds
    only postings dated on or after that snapshot's date; earlier postings
    are assumed to be reflected in the snapshot. A pad dated on the
    snapshot's date replays before the assertion and is skipped too.
    Accounts without a snapshot sum all their postings. Omitted amounts
    are inferred.

    Args:
        accounts: Known accounts, carrying their latest snapshot.
        transactions: All transactions including synthesized pads.
        balances: Balance history, used only when ``as_of`` is given.
        as_of: Optional inclusive cut-off date. The snapshot then becomes
            the latest assertion dated on or before it.

    Returns:
        dict[str, Decimal]: Balance per account name.
    """
    starts = _starting_points(accounts, balances, as_of)
    result: dict[str, Decimal] = {
        account.name: Decimal("0") for account in accounts
    }
    for name, (amount, _snapshot_date) in starts.items():
        result[name] = amount
    for transaction in transactions:
        if as_of is not None and transaction.date > as_of:
            continue
        for posting in transaction.postings:
            start = starts.get(posting.account)
            if start is not None and (
                transaction.date < start[1]
                or (transaction.is_pad and transaction.date == start[1])
            ):
                continue
            amount, _currency = transaction.resolved_amount(posting)
            result[posting.account] = (
                result.get(posting.account, Decimal("0")) + amount
            )
    return result


__all__ = ["calculate_account_balances"]
