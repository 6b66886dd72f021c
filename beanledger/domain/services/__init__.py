"""Domain services package."""

from .balances import calculate_account_balances
from .finance import (
    compute_balance_report,
    compute_expense_category_report,
    compute_income_expense_report,
    compute_net_worth_report,
    compute_net_worth_summary,
    compute_time_period_summary,
    compute_transaction_stats,
)
from .identifiers import (
    canonical_text,
    pad_transaction_id,
    short_hash,
    transaction_id,
)
from .normalization import (
    extract_time,
    normalize_currency,
    parse_time,
    strip_quotes,
)
from .padding import compute_padding_amount, synthesize_pad_transaction
from .timeline import (
    build_account_timeline,
    final_running_balance,
    paginate_timeline,
)
from .validation import check_transaction_balanced, validate_balance_sign

__all__ = [
    "calculate_account_balances",
    "compute_balance_report",
    "compute_expense_category_report",
    "compute_income_expense_report",
    "compute_net_worth_report",
    "compute_net_worth_summary",
    "compute_time_period_summary",
    "compute_transaction_stats",
    "canonical_text",
    "pad_transaction_id",
    "short_hash",
    "transaction_id",
    "extract_time",
    "normalize_currency",
    "parse_time",
    "strip_quotes",
    "compute_padding_amount",
    "synthesize_pad_transaction",
    "build_account_timeline",
    "final_running_balance",
    "paginate_timeline",
    "check_transaction_balanced",
    "validate_balance_sign",
]
