"""Typed directives produced by the ledger parser.

Each directive kind is its own frozen dataclass; ``Directive`` is the union
of all kinds and consumers dispatch on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Amount:
    """A number paired with its commodity."""

    number: Decimal
    currency: str

    def __str__(self) -> str:
        return f"{self.number} {self.currency}"


@dataclass(frozen=True)
class Cost:
    """Per-unit acquisition cost of a lot, written as ``{500 USD}``."""

    number: Decimal | None
    currency: str | None
    date: date | None = None

    def __str__(self) -> str:
        parts = []
        if self.number is not None:
            parts.append(f"{self.number} {self.currency or ''}".strip())
        if self.date is not None:
            parts.append(self.date.isoformat())
        return "{" + ", ".join(parts) + "}"


@dataclass(frozen=True)
class PriceAnnotation:
    """Conversion price of a posting: ``@`` per unit or ``@@`` in total."""

    number: Decimal
    currency: str
    is_total: bool = False

    def __str__(self) -> str:
        marker = "@@" if self.is_total else "@"
        return f"{marker} {self.number} {self.currency}"


@dataclass(frozen=True)
class PostingLine:
    """One posting line of a transaction block as written in the source."""

    account: str
    units: Amount | None = None
    cost: Cost | None = None
    price: PriceAnnotation | None = None
    flag: str | None = None


@dataclass(frozen=True)
class TransactionDirective:
    date: date
    flag: str
    payee: str = ""
    narration: str = ""
    tags: tuple[str, ...] = ()
    links: tuple[str, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)
    postings: tuple[PostingLine, ...] = ()


@dataclass(frozen=True)
class OpenDirective:
    date: date
    account: str
    currencies: tuple[str, ...] = ()
    booking: str | None = None


@dataclass(frozen=True)
class CloseDirective:
    date: date
    account: str


@dataclass(frozen=True)
class BalanceDirective:
    date: date
    account: str
    amount: Amount


@dataclass(frozen=True)
class PadDirective:
    """``pad ACCOUNT SOURCE``: ``account`` is funded by ``source_account``."""

    date: date
    account: str
    source_account: str


@dataclass(frozen=True)
class CommodityDirective:
    date: date
    currency: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PriceDirective:
    date: date
    currency: str
    amount: Amount


@dataclass(frozen=True)
class DocumentDirective:
    date: date
    account: str
    filename: str


@dataclass(frozen=True)
class EventDirective:
    date: date
    event_type: str
    description: str


@dataclass(frozen=True)
class NoteDirective:
    date: date
    account: str
    comment: str


@dataclass(frozen=True)
class OptionDirective:
    name: str
    value: str


@dataclass(frozen=True)
class IncludeDirective:
    path: str


@dataclass(frozen=True)
class CustomDirective:
    date: date
    custom_type: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class CommentDirective:
    """Inert line kept as written, such as an unknown directive."""

    text: str


Directive = Union[
    TransactionDirective,
    OpenDirective,
    CloseDirective,
    BalanceDirective,
    PadDirective,
    CommodityDirective,
    PriceDirective,
    DocumentDirective,
    EventDirective,
    NoteDirective,
    OptionDirective,
    IncludeDirective,
    CustomDirective,
    CommentDirective,
]


@dataclass(frozen=True)
class SpannedDirective:
    """A directive tagged with where it came from.

    Attributes:
        directive: Parsed directive.
        source: Identifier of the source file, None for in-memory text.
        line: 1-indexed line on which the directive starts.
        end: UTF-8 byte offset just past the directive's last line.
    """

    directive: Directive
    source: str | None
    line: int
    end: int


__all__ = [
    "Amount",
    "Cost",
    "PriceAnnotation",
    "PostingLine",
    "TransactionDirective",
    "OpenDirective",
    "CloseDirective",
    "BalanceDirective",
    "PadDirective",
    "CommodityDirective",
    "PriceDirective",
    "DocumentDirective",
    "EventDirective",
    "NoteDirective",
    "OptionDirective",
    "IncludeDirective",
    "CustomDirective",
    "CommentDirective",
    "Directive",
    "SpannedDirective",
]
