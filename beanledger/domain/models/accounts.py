"""Domain models for ledger accounts."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from beanledger.domain.constants import ACCOUNT_SEPARATOR


class AccountType(str, Enum):
    """Account category derived from the first name component."""

    ASSETS = "Assets"
    LIABILITIES = "Liabilities"
    EQUITY = "Equity"
    INCOME = "Income"
    EXPENSES = "Expenses"

    @classmethod
    def from_name(cls, name: str) -> "AccountType":
        """Return the type of a colon-delimited account name.

        Unknown roots fall back to ASSETS.

        Args:
            name: Full account name such as ``Assets:Bank``.

        Returns:
            AccountType: Type derived from the leading component.
        """
        root = name.split(ACCOUNT_SEPARATOR, 1)[0]
        for member in cls:
            if member.value == root:
                return member
        return cls.ASSETS

    @classmethod
    def parse(cls, value: str) -> "AccountType":
        """Parse a type name case-insensitively.

        Raises:
            ValueError: If the name is unknown.
        """
        cleaned = value.strip().lower()
        for member in cls:
            if member.value.lower() == cleaned:
                return member
        raise ValueError(f"Unknown account type: {value!r}")

    @property
    def is_balance_sheet(self) -> bool:
        return self in (
            AccountType.ASSETS,
            AccountType.LIABILITIES,
            AccountType.EQUITY,
        )


class AccountStatus(str, Enum):
    """Lifecycle state of an account."""

    OPEN = "open"
    CLOSED = "closed"
    PAUSED = "paused"

    @classmethod
    def parse(cls, value: str) -> "AccountStatus":
        cleaned = value.strip().lower()
        for member in cls:
            if member.value == cleaned:
                return member
        raise ValueError(f"Unknown account status: {value!r}")


@dataclass(frozen=True)
class BalanceSnapshot:
    """Latest asserted balance of an account."""

    amount: Decimal
    currency: str
    date: date


@dataclass(frozen=True)
class Account:
    """A ledger account built from Open/Close/Balance directives.

    Attributes:
        name: Full colon-delimited name.
        account_type: Type derived from the name; never changes.
        status: Lifecycle state.
        currency: First currency listed on the Open directive.
        open_date: Date of the first Open directive.
        close_date: Date of the Close directive, if any.
        balance: Latest balance snapshot, replaced only by later dates.
    """

    name: str
    account_type: AccountType
    status: AccountStatus = AccountStatus.OPEN
    currency: str | None = None
    open_date: date | None = None
    close_date: date | None = None
    balance: BalanceSnapshot | None = None

    @property
    def components(self) -> list[str]:
        return self.name.split(ACCOUNT_SEPARATOR)

    @property
    def depth(self) -> int:
        return len(self.components)

    @property
    def leaf_name(self) -> str:
        return self.components[-1]

    @property
    def parent_name(self) -> str | None:
        if ACCOUNT_SEPARATOR not in self.name:
            return None
        return self.name.rsplit(ACCOUNT_SEPARATOR, 1)[0]

    @property
    def is_open(self) -> bool:
        return self.status == AccountStatus.OPEN

    def is_descendant_of(self, ancestor: str) -> bool:
        return self.name.startswith(ancestor + ACCOUNT_SEPARATOR)


@dataclass(frozen=True)
class AccountDTO:
    """Serializable representation of an account."""

    name: str
    account_type: str
    status: str
    currency: str | None
    parent_name: str | None
    open_date: date | None
    close_date: date | None


@dataclass(frozen=True)
class AccountBalanceDTO:
    """Serializable account balance for presentation layers."""

    name: str
    account_type: str
    parent_name: str | None
    balance: Decimal
    currency_code: str


@dataclass
class AccountTreeNode:
    """Node of the account hierarchy.

    Intermediate nodes exist for every name prefix even when no account was
    opened with that exact name; ``account`` is None for those.
    """

    name: str
    full_name: str
    account: Account | None = None
    children: list["AccountTreeNode"] = field(default_factory=list)

    def walk(self):
        """Yield this node and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


__all__ = [
    "AccountType",
    "AccountStatus",
    "BalanceSnapshot",
    "Account",
    "AccountDTO",
    "AccountBalanceDTO",
    "AccountTreeNode",
]
