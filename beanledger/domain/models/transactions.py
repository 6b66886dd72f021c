"""Domain models for transactions, balance assertions and pads."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal

from beanledger.domain.constants import PAD_SOURCE_META, PAD_TAG
from beanledger.domain.models.directives import Amount, Cost, PriceAnnotation
from beanledger.utils.decimal_utils import parse_decimal


@dataclass(frozen=True)
class Posting:
    """One leg of a transaction.

    Attributes:
        account: Account name the posting applies to.
        amount: Raw ``"<number> <currency>"`` text, None when omitted.
        currency: Currency of the amount, None when omitted.
        cost: Optional per-unit cost of a held lot.
        price: Optional ``@``/``@@`` conversion price.
        balance: Optional balance assertion attached to the posting.
        metadata: Posting-level metadata.
    """

    account: str
    amount: str | None = None
    currency: str | None = None
    cost: Cost | None = None
    price: PriceAnnotation | None = None
    balance: Amount | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def display_amount(self) -> str:
        """Amount text with cost and price annotations."""
        if self.amount is None:
            return ""
        parts = [self.amount]
        if self.cost is not None:
            parts.append(str(self.cost))
        if self.price is not None:
            parts.append(str(self.price))
        return " ".join(parts)

    def amount_value(self) -> Decimal | None:
        """Return the numeric part of ``amount`` parsed leniently."""
        if not self.amount:
            return None
        return parse_decimal(self.amount.split()[0])

    def units(self) -> Amount | None:
        """Return the posted units, None when the amount is omitted."""
        number = self.amount_value()
        if number is None or self.currency is None:
            return None
        return Amount(number, self.currency)

    def price_info(self) -> tuple[Decimal, str] | None:
        """Return the per-unit price and its currency, if priced."""
        if self.price is None:
            return None
        if not self.price.is_total:
            return self.price.number, self.price.currency
        units = self.amount_value()
        if not units:
            return None
        return self.price.number / abs(units), self.price.currency

    def weight(self) -> tuple[Decimal, str | None] | None:
        """Return the amount this posting contributes to the balance rule.

        Priced postings weigh in the price currency, postings held at cost
        weigh in the cost currency, everything else in its own currency.
        """
        units = self.amount_value()
        if units is None:
            return None
        if self.price is not None:
            if self.price.is_total:
                total = self.price.number
                return (-total if units < 0 else total), self.price.currency
            return units * self.price.number, self.price.currency
        if self.cost is not None and self.cost.number is not None:
            return units * self.cost.number, self.cost.currency
        return units, self.currency

    def total_value(
        self,
        operating_currency: str,
    ) -> tuple[Decimal, str | None] | None:
        """Return the amount expressed in the operating currency when possible.

        Args:
            operating_currency: Reporting currency.

        Returns:
            tuple | None: ``(value, currency)``; units times price when a
            price is present and the posting currency differs, otherwise the
            raw units. None when the amount is omitted.
        """
        units = self.amount_value()
        if units is None:
            return None
        if self.price is not None and self.currency != operating_currency:
            return self.weight()
        return units, self.currency

    def is_debit(self) -> bool:
        units = self.amount_value()
        return units is not None and units > 0

    def is_credit(self) -> bool:
        units = self.amount_value()
        return units is not None and units < 0


@dataclass(frozen=True)
class Transaction:
    """A dated, balanced set of postings.

    Attributes:
        id: Stable identifier derived from source position and content.
        date: Booking date.
        time: Wall-clock time taken from metadata, if any.
        payee: Payee text.
        narration: Narration text.
        flag: ``*``, ``!``, ``txn`` or ``P`` for synthesized pads.
        tags: Tags in order of appearance.
        links: Links in order of appearance.
        metadata: Transaction metadata.
        postings: Postings in source order.
        source: Source file identifier, None for synthesized entries.
        line: 1-indexed source line, None for synthesized entries.
    """

    id: str
    date: date
    time: time | None = None
    payee: str = ""
    narration: str = ""
    flag: str | None = None
    tags: tuple[str, ...] = ()
    links: tuple[str, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)
    postings: tuple[Posting, ...] = ()
    source: str | None = None
    line: int | None = None

    @property
    def is_pad(self) -> bool:
        """True for transactions synthesized from a pad directive."""
        return PAD_TAG in self.tags and PAD_SOURCE_META in self.metadata

    @property
    def description(self) -> str:
        if self.payee and self.narration:
            return f"{self.payee} - {self.narration}"
        return self.payee or self.narration

    def accounts(self) -> list[str]:
        seen: list[str] = []
        for posting in self.postings:
            if posting.account not in seen:
                seen.append(posting.account)
        return seen

    def touches(self, account: str) -> bool:
        return any(posting.account == account for posting in self.postings)

    def postings_for(self, account: str) -> Iterator[Posting]:
        return (p for p in self.postings if p.account == account)

    def imbalance(self) -> dict[str | None, Decimal]:
        """Return the per-currency sum of explicit posting weights."""
        totals: dict[str | None, Decimal] = {}
        for posting in self.postings:
            weight = posting.weight()
            if weight is None:
                continue
            value, currency = weight
            totals[currency] = totals.get(currency, Decimal("0")) + value
        return totals

    def inferred_amount(self) -> tuple[Decimal, str | None] | None:
        """Return the value of the single posting whose amount is omitted.

        Returns:
            tuple | None: Additive inverse of the other postings' sum, or
            None when no posting (or more than one) omits its amount.
        """
        missing = [p for p in self.postings if p.amount_value() is None]
        if len(missing) != 1:
            return None
        totals = self.imbalance()
        for currency, value in totals.items():
            if value != 0:
                return -value, currency
        currency = next(iter(totals), None)
        return Decimal("0"), currency

    def resolved_amount(self, posting: Posting) -> tuple[Decimal, str | None]:
        """Return the explicit or inferred amount of ``posting``."""
        units = posting.amount_value()
        if units is not None:
            return units, posting.currency
        inferred = self.inferred_amount()
        if inferred is None:
            return Decimal("0"), None
        return inferred

    def posting_amount(self, account: str) -> Decimal:
        """Return the net amount this transaction posts to ``account``."""
        return sum(
            (self.resolved_amount(p)[0] for p in self.postings_for(account)),
            Decimal("0"),
        )


@dataclass(frozen=True)
class BalanceEntry:
    """One balance assertion, kept as an append-only history."""

    account: str
    amount: str
    currency: str
    date: date

    @property
    def value(self) -> Decimal:
        return parse_decimal(self.amount) or Decimal("0")


@dataclass(frozen=True)
class PadEntry:
    """One pad directive: ``account`` is padded from ``source_account``."""

    account: str
    source_account: str
    date: date


__all__ = ["Posting", "Transaction", "BalanceEntry", "PadEntry"]
