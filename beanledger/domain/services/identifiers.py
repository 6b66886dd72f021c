"""Stable identifiers for transactions."""

import hashlib
from datetime import date

from beanledger.domain.models.directives import TransactionDirective


def short_hash(text: str) -> str:
    """Return the first 8 hex characters of the SHA-256 of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:8]


def canonical_text(directive: TransactionDirective) -> str:
    """Rebuild the transaction in a canonical textual form.

    The form covers date, flag, payee, narration, tags, links and every
    posting's account and amount, so any content edit changes the hash.

    Args:
        directive: Parsed transaction.

    Returns:
        str: Canonical text used for hashing.
    """
    header = (
        f'{directive.date.isoformat()} {directive.flag} '
        f'"{directive.payee}" "{directive.narration}"'
    )
    parts = [header]
    parts.extend(f" #{tag}" for tag in directive.tags)
    parts.extend(f" ^{link}" for link in directive.links)
    for posting in directive.postings:
        line = f"\n    {posting.account}"
        if posting.units is not None:
            line += f" {posting.units}"
        parts.append(line)
    return "".join(parts)


def transaction_id(
    source: str | None,
    line: int,
    directive: TransactionDirective,
) -> str:
    """Return ``txn-<source>:<line>:<hash>`` for a parsed transaction.

    Args:
        source: Source file identifier, None for in-memory text.
        line: 1-indexed start line.
        directive: Parsed transaction.

    Returns:
        str: Identifier stable across reloads of unchanged text.
    """
    if source:
        slug = source.replace("/", "-").replace(":", "-")
    else:
        slug = "memory"
    return f"txn-{slug}:{line}:{short_hash(canonical_text(directive))}"


def pad_transaction_id(pad_date: date, ordinal: int, narration: str) -> str:
    """Return the identifier of a synthesized pad transaction."""
    return f"pad-{pad_date.isoformat()}:{ordinal}:{short_hash(narration)}"


__all__ = [
    "short_hash",
    "canonical_text",
    "transaction_id",
    "pad_transaction_id",
]
