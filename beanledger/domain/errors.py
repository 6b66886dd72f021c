"""Error taxonomy for the ledger core.

Every error carries a machine-readable ``code`` so adapters can map failures
without matching on message text.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers for ledger failures."""

    NOT_LOADED = "NOT_LOADED"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    IO_ERROR = "IO_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class LedgerError(Exception):
    """Base class for all ledger failures."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR


class LedgerIOError(LedgerError):
    """A ledger file or one of its includes could not be read."""

    code = ErrorCode.IO_ERROR

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Cannot read ledger file {path}: {reason}")
        self.path = path


class LedgerNotLoadedError(LedgerError):
    """A query or reload ran before any ledger was successfully loaded."""

    code = ErrorCode.NOT_LOADED

    def __init__(self, message: str = "Ledger not loaded") -> None:
        super().__init__(message)


class AccountNotFoundError(LedgerError):
    """No account with the requested name exists."""

    code = ErrorCode.ACCOUNT_NOT_FOUND

    def __init__(self, name: str) -> None:
        super().__init__(f"Account not found: {name}")
        self.name = name


class TransactionNotFoundError(LedgerError):
    """No transaction with the requested identifier exists."""

    code = ErrorCode.TRANSACTION_NOT_FOUND

    def __init__(self, transaction_id: str) -> None:
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


class LedgerParseError(LedgerError):
    """Fatal syntax problem. Line-level problems degrade instead."""

    code = ErrorCode.PARSE_ERROR

    def __init__(self, message: str, line: int | None = None) -> None:
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"{message}{location}")
        self.line = line


class LedgerValidationError(LedgerError):
    """Ledger content violates a checked rule."""

    code = ErrorCode.VALIDATION_ERROR


class LedgerConfigError(LedgerError):
    """Settings are missing or invalid."""

    code = ErrorCode.CONFIG_ERROR


class InternalLedgerError(LedgerError):
    """Unexpected failure inside the core."""

    code = ErrorCode.INTERNAL_ERROR


__all__ = [
    "ErrorCode",
    "LedgerError",
    "LedgerIOError",
    "LedgerNotLoadedError",
    "AccountNotFoundError",
    "TransactionNotFoundError",
    "LedgerParseError",
    "LedgerValidationError",
    "LedgerConfigError",
    "InternalLedgerError",
]
