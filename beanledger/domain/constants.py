"""Domain constants for ledger reconciliation."""

ASSET_ROOT = "Assets"
LIABILITY_ROOT = "Liabilities"
EQUITY_ROOT = "Equity"
INCOME_ROOT = "Income"
EXPENSE_ROOT = "Expenses"

ACCOUNT_ROOTS = (
    ASSET_ROOT,
    LIABILITY_ROOT,
    EQUITY_ROOT,
    INCOME_ROOT,
    EXPENSE_ROOT,
)

BALANCE_SHEET_ROOTS = (ASSET_ROOT, LIABILITY_ROOT, EQUITY_ROOT)
INCOME_STATEMENT_ROOTS = (INCOME_ROOT, EXPENSE_ROOT)

ACCOUNT_SEPARATOR = ":"

# Metadata keys carrying a wall-clock time, in lookup order.
TIME_METADATA_KEYS = (
    "time",
    "trade_time",
    "tgbot_time",
    "payTime",
    "created_at",
)

DEFAULT_OPERATING_CURRENCY = "CNY"
DEFAULT_RECORDS_PER_PAGE = 50

PAD_TAG = "pad"
PAD_FLAG = "P"
PAD_SOURCE_META = "pad_source"
PAD_DATE_META = "pad_date"

EPOCH_DATE_ISO = "1970-01-01"


__all__ = [
    "ASSET_ROOT",
    "LIABILITY_ROOT",
    "EQUITY_ROOT",
    "INCOME_ROOT",
    "EXPENSE_ROOT",
    "ACCOUNT_ROOTS",
    "BALANCE_SHEET_ROOTS",
    "INCOME_STATEMENT_ROOTS",
    "ACCOUNT_SEPARATOR",
    "TIME_METADATA_KEYS",
    "DEFAULT_OPERATING_CURRENCY",
    "DEFAULT_RECORDS_PER_PAGE",
    "PAD_TAG",
    "PAD_FLAG",
    "PAD_SOURCE_META",
    "PAD_DATE_META",
    "EPOCH_DATE_ISO",
]
