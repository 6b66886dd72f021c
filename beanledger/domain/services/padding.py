"""Padding solver: turn pad directives into balancing transactions.

``pad A F`` inserts a transaction moving money from F into A so that the
next balance assertion on A holds. When F is an Income or Expenses account
the amount is the gap between A's asserted balances around the pad date
once A's other postings in between are accounted for. For any other
funding account the amount is the next asserted balance of A.

Transactions that touch F are left out of the in-between postings. This
keeps the solver from counting the pad's own effect twice but also ignores
unrelated postings that happen to involve F in the same window.
"""

from collections.abc import Sequence
from decimal import Decimal

from beanledger.domain.constants import (
    PAD_DATE_META,
    PAD_FLAG,
    PAD_SOURCE_META,
    PAD_TAG,
)
from beanledger.domain.models.accounts import Account, AccountType
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Posting,
    Transaction,
)
from beanledger.domain.services.identifiers import pad_transaction_id
from beanledger.domain.services.timeline import (
    build_account_timeline,
    final_running_balance,
)


_INFERRED_FUNDING_TYPES = (AccountType.INCOME, AccountType.EXPENSES)


def compute_padding_amount(
    pad: PadEntry,
    balances: Sequence[BalanceEntry],
    transactions: Sequence[Transaction],
    account: Account | None,
    operating_currency: str,
) -> tuple[Decimal, str]:
    """Return the amount to post to the padded account.

    Args:
        pad: Pad being resolved.
        balances: Full balance assertion history.
        transactions: Ordinary (non-synthesized) transactions.
        account: Padded account, when it was opened.
        operating_currency: Fallback currency.

    Returns:
        tuple[Decimal, str]: Amount added to the padded account and its
        currency. The funding account receives the negation.
    """
    history = sorted(
        (entry for entry in balances if entry.account == pad.account),
        key=lambda entry: entry.date,
    )
    preceding = [entry for entry in history if entry.date < pad.date]
    following = [entry for entry in history if entry.date >= pad.date]

    fallback_currency = operating_currency
    if account and account.currency:
        fallback_currency = account.currency
    if not following:
        if account is not None and account.balance is not None:
            return account.balance.amount, account.balance.currency
        return Decimal("0"), fallback_currency

    target = following[0]
    funding_type = AccountType.from_name(pad.source_account)
    if funding_type not in _INFERRED_FUNDING_TYPES:
        return target.value, target.currency

    baseline = preceding[-1] if preceding else None
    window = [
        transaction
        for transaction in transactions
        if not transaction.is_pad
        and not transaction.touches(pad.source_account)
        and transaction.date < target.date
        and (baseline is None or transaction.date > baseline.date)
    ]
    events = build_account_timeline(
        pad.account,
        window,
        [baseline] if baseline is not None else [],
    )
    return target.value - final_running_balance(events), target.currency


def synthesize_pad_transaction(
    pad: PadEntry,
    amount: Decimal,
    currency: str,
    ordinal: int,
) -> Transaction:
    """Build the two-posting transaction realising a pad.

    Args:
        pad: Pad being realised.
        amount: Amount added to the padded account.
        currency: Currency of the amount.
        ordinal: Position of the pad among all pads, for identifier
            uniqueness.

    Returns:
        Transaction: Synthetic transaction tagged ``pad``.
    """
    narration = f"{pad.account} from {pad.source_account}"
    negated = Decimal("0") - amount
    return Transaction(
        id=pad_transaction_id(pad.date, ordinal, narration),
        date=pad.date,
        flag=PAD_FLAG,
        narration=narration,
        tags=(PAD_TAG,),
        metadata={
            PAD_SOURCE_META: pad.source_account,
            PAD_DATE_META: pad.date.isoformat(),
        },
        postings=(
            Posting(
                account=pad.account,
                amount=f"{amount} {currency}",
                currency=currency,
            ),
            Posting(
                account=pad.source_account,
                amount=f"{negated} {currency}",
                currency=currency,
            ),
        ),
    )


__all__ = ["compute_padding_amount", "synthesize_pad_transaction"]
