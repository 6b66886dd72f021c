"""Transaction matching rules used by search and range queries."""

from datetime import date

from beanledger.domain.models.transactions import Transaction


def transaction_matches(transaction: Transaction, query: str) -> bool:
    """Return True when ``query`` occurs in any searchable field.

    Searched fields are payee, narration, tags, links and posting account
    names; matching is a case-insensitive substring test.

    Args:
        transaction: Transaction to test.
        query: Free-text query. An empty query matches everything.

    Returns:
        bool: True on a match.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    haystacks = [transaction.payee, transaction.narration]
    haystacks.extend(transaction.tags)
    haystacks.extend(transaction.links)
    haystacks.extend(p.account for p in transaction.postings)
    return any(needle in value.lower() for value in haystacks)


def in_date_range(
    transaction: Transaction,
    start: date | None,
    end: date | None,
) -> bool:
    """Inclusive date filter; None bounds are open."""
    if start is not None and transaction.date < start:
        return False
    if end is not None and transaction.date > end:
        return False
    return True


__all__ = ["transaction_matches", "in_date_range"]
