"""Use case to read ledger accounts for presentation layers."""

from typing import List

from beanledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from beanledger.domain.models.accounts import (
    AccountDTO,
    AccountStatus,
    AccountType,
)
from beanledger.domain.policies.account_filters import (
    is_valid_account_name,
    matches_account_query,
)
from beanledger.infrastructure.logging.logger import get_app_logger


class GetAccountsUseCase:
    """Fetch accounts from the loaded ledger."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_type: AccountType | None = None,
        status: AccountStatus | None = None,
        query: str = "",
    ) -> List[AccountDTO]:
        """Return accounts sorted by name, optionally filtered.

        Args:
            account_type: Keep only accounts of this type.
            status: Keep only accounts in this state.
            query: Case-insensitive substring of the account name.

        Returns:
            List[AccountDTO]: Matching accounts.
        """
        accounts = self._ledger_repository.accounts()
        result = []
        for account in sorted(accounts, key=lambda item: item.name):
            if not is_valid_account_name(account.name):
                self._logger.warning(
                    f"Skipping malformed account name '{account.name}'"
                )
                continue
            if (
                account_type is not None
                and account.account_type != account_type
            ):
                continue
            if status is not None and account.status != status:
                continue
            if query and not matches_account_query(account.name, query):
                continue
            result.append(
                AccountDTO(
                    name=account.name,
                    account_type=account.account_type.value,
                    status=account.status.value,
                    currency=account.currency,
                    parent_name=account.parent_name,
                    open_date=account.open_date,
                    close_date=account.close_date,
                )
            )
        self._logger.info(f"Fetched {len(result)} accounts")
        return result


__all__ = ["GetAccountsUseCase", "AccountDTO"]
