"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from beanledger.domain.models.accounts import AccountType


def validate_balance_sign(
    account_name: str,
    account_type: AccountType,
    balance: Decimal,
    logger: Logger,
) -> None:
    """Warn when balances violate expected sign conventions.

    Args:
        account_name: Account being reported.
        account_type: Type of the account.
        balance: Balance in ledger sign convention.
        logger: Logger used for warnings.
    """
    if account_type == AccountType.ASSETS and balance < 0:
        logger.warning(
            f"Asset balance is negative for {account_name}: {balance}"
        )
    if account_type == AccountType.LIABILITIES and balance > 0:
        logger.warning(
            f"Liability balance is positive for {account_name}: {balance}"
        )


def check_transaction_balanced(
    transaction,
    logger: Logger,
    tolerance: Decimal = Decimal("0.005"),
) -> bool:
    """Log a warning when a fully explicit transaction does not sum to zero.

    Args:
        transaction: Transaction to check.
        logger: Logger used for warnings.
        tolerance: Largest residual accepted per currency.

    Returns:
        bool: True when balanced or when an amount is inferred.
    """
    if transaction.inferred_amount() is not None:
        return True
    if any(p.amount_value() is None for p in transaction.postings):
        return True
    for currency, residual in transaction.imbalance().items():
        if abs(residual) > tolerance:
            logger.warning(
                f"Transaction {transaction.id} does not balance: "
                f"{residual} {currency}"
            )
            return False
    return True


__all__ = ["validate_balance_sign", "check_transaction_balanced"]
