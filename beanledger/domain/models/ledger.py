"""Immutable snapshot of reconciled ledger state."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from beanledger.domain.models.accounts import Account
from beanledger.domain.models.directives import SpannedDirective
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Transaction,
)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Everything derived from one parse of the ledger files.

    A snapshot is never mutated; a reload builds a new one and swaps it in.

    Attributes:
        accounts: Accounts in the order they were opened.
        transactions: Parsed transactions followed by synthesized pads.
        balances: Balance assertion history in directive order.
        pads: Pad entries in directive order.
        directives: Directives the snapshot was built from.
        options: Values of ``option`` directives.
        source_path: Entry file, None for in-memory snapshots.
        loaded_at: When the snapshot was built.
    """

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    balances: tuple[BalanceEntry, ...] = ()
    pads: tuple[PadEntry, ...] = ()
    directives: tuple[SpannedDirective, ...] = ()
    options: dict[str, str] = field(default_factory=dict)
    source_path: Path | None = None
    loaded_at: datetime | None = None
    accounts_by_name: dict[str, Account] = field(
        init=False, repr=False, compare=False
    )
    transactions_by_id: dict[str, Transaction] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "accounts_by_name",
            {account.name: account for account in self.accounts},
        )
        object.__setattr__(
            self,
            "transactions_by_id",
            {transaction.id: transaction for transaction in self.transactions},
        )


__all__ = ["LedgerSnapshot"]
