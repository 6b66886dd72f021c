"""Account naming rules shared by the parser and the query surface."""

from beanledger.domain.constants import ACCOUNT_ROOTS, ACCOUNT_SEPARATOR


def is_account_root(text: str) -> bool:
    """Return True when ``text`` is one of the five account roots.

    Args:
        text: Candidate root such as ``Assets``.

    Returns:
        bool: True for Assets, Liabilities, Equity, Income or Expenses.
    """
    return text in ACCOUNT_ROOTS


def is_valid_account_name(name: str) -> bool:
    """Return True when the name is a well-formed hierarchical account.

    Args:
        name: Account name to evaluate.

    Returns:
        bool: True when the name has a known root, at least one more
        component and no empty or whitespace-bearing components.
    """
    candidate = name.strip()
    if not candidate or candidate != name:
        return False
    components = candidate.split(ACCOUNT_SEPARATOR)
    if len(components) < 2 or not is_account_root(components[0]):
        return False
    for component in components[1:]:
        if not component or any(char.isspace() for char in component):
            return False
    return True


def account_category(name: str) -> str:
    """Return the second name component, or the root for top-level names."""
    components = name.split(ACCOUNT_SEPARATOR)
    return components[1] if len(components) > 1 else components[0]


def matches_account_query(name: str, query: str) -> bool:
    """Case-insensitive substring match used by account search."""
    return query.strip().lower() in name.lower()


__all__ = [
    "is_account_root",
    "is_valid_account_name",
    "account_category",
    "matches_account_query",
]
