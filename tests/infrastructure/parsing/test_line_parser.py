"""Tests for the block-level directive parser."""

from unittest.mock import MagicMock

from beanledger.domain.models.directives import (
    CloseDirective,
    CommentDirective,
    CommodityDirective,
    IncludeDirective,
    OpenDirective,
    TransactionDirective,
)
from beanledger.infrastructure.parsing.parser import LineDirectiveParser


def _parse(text: str, source: str | None = None):
    return LineDirectiveParser(logger=MagicMock()).parse(text, source=source)


def test_transaction_block_owns_indented_lines() -> None:
    """Postings and metadata attach to the preceding transaction."""
    text = (
        "2024-01-01 open Assets:Cash CNY\n"
        "\n"
        '2024-01-05 * "Shop" ""\n'
        "  Assets:Cash -10 CNY\n"
        "  Expenses:Food\n"
        "2024-01-06 close Assets:Cash\n"
    )

    spanned = _parse(text, source="main.bean")

    assert [type(s.directive) for s in spanned] == [
        OpenDirective,
        TransactionDirective,
        CloseDirective,
    ]
    transaction = spanned[1].directive
    assert len(transaction.postings) == 2
    assert spanned[1].line == 3
    assert spanned[2].line == 6
    assert all(s.source == "main.bean" for s in spanned)


def test_spans_end_at_utf8_byte_offsets() -> None:
    """The span end is the byte offset after the block's last line."""
    block = (
        '2024-01-05 * "Café" "Déjeuner"\n'
        "  Assets:Cash -10 EUR\n"
        "  Expenses:Food\n"
    )
    text = block + "2024-01-06 close Assets:Cash\n"

    spanned = _parse(text)

    assert spanned[0].end == len(block.encode("utf-8"))
    assert spanned[1].end == len(text.encode("utf-8"))
    assert spanned[0].source is None


def test_comments_and_headings_are_skipped() -> None:
    """Comment, org-mode and blank lines produce no directives."""
    text = (
        "; comment\n"
        "# hash comment\n"
        "* Heading\n"
        "** Sub heading\n"
        "\n"
        "2024-01-01 open Assets:Cash\n"
    )

    spanned = _parse(text)

    assert len(spanned) == 1
    assert spanned[0].line == 6


def test_commodity_block_collects_metadata() -> None:
    """Commodity directives may carry indented metadata."""
    text = (
        "2024-01-01 commodity USD\n"
        '  name: "US Dollar"\n'
        "  precision: 2\n"
    )

    spanned = _parse(text)

    assert spanned[0].directive == CommodityDirective(
        spanned[0].directive.date,
        "USD",
        {"name": "US Dollar", "precision": "2"},
    )


def test_unknown_lines_degrade_and_includes_are_unresolved() -> None:
    """Unknown dated lines become comments; includes pass through."""
    text = (
        'include "other.bean"\n'
        "2024-01-01 something odd\n"
        "plugin \"beancount.plugins.auto\"\n"
    )

    spanned = _parse(text)

    assert spanned[0].directive == IncludeDirective("other.bean")
    assert spanned[1].directive == CommentDirective("2024-01-01 something odd")
    assert isinstance(spanned[2].directive, CommentDirective)
