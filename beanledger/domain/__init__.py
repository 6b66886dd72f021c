"""Domain package for ledger rules and core models."""

from .constants import ACCOUNT_ROOTS, DEFAULT_OPERATING_CURRENCY
from .errors import (
    AccountNotFoundError,
    ErrorCode,
    LedgerError,
    LedgerIOError,
    LedgerNotLoadedError,
    TransactionNotFoundError,
)
from .models import (
    Account,
    AccountStatus,
    AccountType,
    BalanceEntry,
    PadEntry,
    Posting,
    SpannedDirective,
    TimeContext,
    TimeRange,
    Transaction,
)
from .policies import is_valid_account_name, transaction_matches
from .services import (
    build_account_timeline,
    calculate_account_balances,
    paginate_timeline,
)

__all__ = [
    "ACCOUNT_ROOTS",
    "DEFAULT_OPERATING_CURRENCY",
    "AccountNotFoundError",
    "ErrorCode",
    "LedgerError",
    "LedgerIOError",
    "LedgerNotLoadedError",
    "TransactionNotFoundError",
    "Account",
    "AccountStatus",
    "AccountType",
    "BalanceEntry",
    "PadEntry",
    "Posting",
    "SpannedDirective",
    "TimeContext",
    "TimeRange",
    "Transaction",
    "is_valid_account_name",
    "transaction_matches",
    "build_account_timeline",
    "calculate_account_balances",
    "paginate_timeline",
]
