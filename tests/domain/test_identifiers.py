"""Tests for transaction identifiers."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from beanledger.domain.models.directives import (
    Amount,
    PostingLine,
    TransactionDirective,
)
from beanledger.domain.services.identifiers import (
    canonical_text,
    pad_transaction_id,
    short_hash,
    transaction_id,
)


def _directive() -> TransactionDirective:
    return TransactionDirective(
        date=date(2024, 1, 5),
        flag="*",
        payee="Shop",
        narration="Lunch",
        tags=("food",),
        links=("r1",),
        postings=(
            PostingLine("Assets:Cash", Amount(Decimal("-10"), "CNY")),
            PostingLine("Expenses:Food"),
        ),
    )


def test_canonical_text_covers_header_and_postings() -> None:
    """The canonical form lists header, tags, links and postings."""
    assert canonical_text(_directive()) == (
        '2024-01-05 * "Shop" "Lunch" #food ^r1'
        "\n    Assets:Cash -10 CNY"
        "\n    Expenses:Food"
    )


def test_transaction_id_is_stable_and_content_sensitive() -> None:
    """Same content gives the same id; any edit changes the hash."""
    first = transaction_id("books/2024.bean", 12, _directive())
    again = transaction_id("books/2024.bean", 12, _directive())
    edited = transaction_id(
        "books/2024.bean",
        12,
        replace(_directive(), narration="Dinner"),
    )

    assert first == again
    assert first.startswith("txn-books-2024.bean:12:")
    assert first != edited
    assert transaction_id(None, 3, _directive()).startswith("txn-memory:3:")


def test_pad_transaction_id_shape() -> None:
    """Pad ids carry date, ordinal and a short hash."""
    narration = "Assets:X from Income:Gift"

    assert pad_transaction_id(date(2024, 1, 15), 0, narration) == (
        f"pad-2024-01-15:0:{short_hash(narration)}"
    )
    assert len(short_hash("x")) == 8
