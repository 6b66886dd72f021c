"""Use case to compute account balances for tree display."""

from datetime import date

from beanledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from beanledger.domain.models.accounts import AccountBalanceDTO, AccountType
from beanledger.infrastructure.logging.logger import get_app_logger


_CREDIT_NORMAL_TYPES = (
    AccountType.INCOME,
    AccountType.LIABILITIES,
    AccountType.EQUITY,
)


class GetAccountBalancesUseCase:
    """Compute per-account balances with display-friendly signs."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger queries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        as_of: date | None = None,
    ) -> list[AccountBalanceDTO]:
        """Return the balance of every known account.

        Credit-normal accounts (Income, Liabilities, Equity) are negated so
        that their usual balances display as positive numbers.

        Args:
            as_of: Optional inclusive cut-off date.

        Returns:
            list[AccountBalanceDTO]: Balances sorted by account name.
        """
        amounts = self._ledger_repository.calculate_account_balances(as_of)
        currency_code = self._ledger_repository.operating_currency
        currencies = {
            account.name: account.currency
            for account in self._ledger_repository.accounts()
        }
        balances = []
        for name, amount in amounts.items():
            account_type = AccountType.from_name(name)
            if account_type in _CREDIT_NORMAL_TYPES:
                amount = -amount
            parent_name = name.rsplit(":", 1)[0] if ":" in name else None
            balances.append(
                AccountBalanceDTO(
                    name=name,
                    account_type=account_type.value,
                    parent_name=parent_name,
                    balance=amount,
                    currency_code=currencies.get(name) or currency_code,
                )
            )
        balances = sorted(balances, key=lambda item: item.name.lower())
        self._logger.info(f"Fetched {len(balances)} account balances")
        return balances


__all__ = ["GetAccountBalancesUseCase", "AccountBalanceDTO"]
