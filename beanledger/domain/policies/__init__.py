"""Domain policies package."""

from .account_filters import (
    account_category,
    is_account_root,
    is_valid_account_name,
    matches_account_query,
)
from .transaction_filters import in_date_range, transaction_matches

__all__ = [
    "account_category",
    "is_account_root",
    "is_valid_account_name",
    "matches_account_query",
    "in_date_range",
    "transaction_matches",
]
