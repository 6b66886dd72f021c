"""Use case building reconciled ledger state from parsed directives."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from beanledger.domain.constants import DEFAULT_OPERATING_CURRENCY
from beanledger.domain.models.accounts import (
    Account,
    AccountStatus,
    AccountType,
    BalanceSnapshot,
)
from beanledger.domain.models.directives import (
    BalanceDirective,
    CloseDirective,
    OpenDirective,
    OptionDirective,
    PadDirective,
    PostingLine,
    SpannedDirective,
    TransactionDirective,
)
from beanledger.domain.models.ledger import LedgerSnapshot
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Posting,
    Transaction,
)
from beanledger.domain.services.identifiers import transaction_id
from beanledger.domain.services.normalization import extract_time
from beanledger.domain.services.padding import (
    compute_padding_amount,
    synthesize_pad_transaction,
)
from beanledger.domain.services.validation import check_transaction_balanced
from beanledger.infrastructure.logging.logger import get_app_logger


def _convert_posting(line: PostingLine) -> Posting:
    amount = None
    currency = None
    if line.units is not None:
        currency = line.units.currency or None
        amount = str(line.units.number)
        if currency:
            amount = f"{amount} {currency}"
    return Posting(
        account=line.account,
        amount=amount,
        currency=currency,
        cost=line.cost,
        price=line.price,
    )


class ReconcileLedgerUseCase:
    """Derive accounts, transactions, balances and pads from directives.

    Processing runs in three passes: pads are collected first because their
    amounts depend on balance assertions that may come later in the file;
    accounts, transactions and balances are then built in directive order;
    finally every pad becomes one synthesized two-posting transaction.
    Conversion never fails: missing data falls back to defaults.
    """

    def __init__(
        self,
        logger=None,
        operating_currency: str = DEFAULT_OPERATING_CURRENCY,
        extract_times: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            operating_currency: Fallback currency for pads.
            extract_times: Whether to read transaction times from metadata.
        """
        self._logger = logger or get_app_logger()
        self._operating_currency = operating_currency
        self._extract_times = extract_times

    def execute(
        self,
        directives: Sequence[SpannedDirective],
        source_path: Path | None = None,
    ) -> LedgerSnapshot:
        """Return a fresh snapshot built from ``directives``.

        Args:
            directives: Parsed directives with includes already resolved.
            source_path: Entry file the directives came from.

        Returns:
            LedgerSnapshot: Reconciled state.
        """
        pads = [
            PadEntry(
                account=spanned.directive.account,
                source_account=spanned.directive.source_account,
                date=spanned.directive.date,
            )
            for spanned in directives
            if isinstance(spanned.directive, PadDirective)
        ]

        accounts: dict[str, Account] = {}
        transactions: list[Transaction] = []
        balances: list[BalanceEntry] = []
        options: dict[str, str] = {}
        for spanned in directives:
            directive = spanned.directive
            if isinstance(directive, OpenDirective):
                self._open(accounts, directive)
            elif isinstance(directive, CloseDirective):
                self._close(accounts, directive)
            elif isinstance(directive, TransactionDirective):
                transactions.append(self._convert_transaction(spanned))
            elif isinstance(directive, BalanceDirective):
                balances.append(self._balance_entry(directive))
            elif isinstance(directive, OptionDirective):
                options[directive.name] = directive.value
            # Remaining kinds are kept in the snapshot's directive list only.
        self._apply_snapshots(accounts, balances)

        synthesized = []
        for ordinal, pad in enumerate(pads):
            amount, currency = compute_padding_amount(
                pad,
                balances,
                transactions,
                accounts.get(pad.account),
                self._operating_currency,
            )
            synthesized.append(
                synthesize_pad_transaction(pad, amount, currency, ordinal)
            )
        transactions.extend(synthesized)

        self._logger.info(
            f"Reconciled {len(accounts)} accounts, "
            f"{len(transactions)} transactions ({len(synthesized)} pads), "
            f"{len(balances)} balance assertions"
        )
        return LedgerSnapshot(
            accounts=tuple(accounts.values()),
            transactions=tuple(transactions),
            balances=tuple(balances),
            pads=tuple(pads),
            directives=tuple(directives),
            options=options,
            source_path=source_path,
            loaded_at=datetime.now(),
        )

    def _open(
        self,
        accounts: dict[str, Account],
        directive: OpenDirective,
    ) -> None:
        if directive.account in accounts:
            self._logger.debug(
                f"Ignoring duplicate open of {directive.account}"
            )
            return
        accounts[directive.account] = Account(
            name=directive.account,
            account_type=AccountType.from_name(directive.account),
            status=AccountStatus.OPEN,
            currency=directive.currencies[0] if directive.currencies else None,
            open_date=directive.date,
        )

    def _close(
        self,
        accounts: dict[str, Account],
        directive: CloseDirective,
    ) -> None:
        account = accounts.get(directive.account)
        if account is None:
            self._logger.debug(
                f"Ignoring close of unknown account {directive.account}"
            )
            return
        accounts[directive.account] = replace(
            account,
            status=AccountStatus.CLOSED,
            close_date=directive.date,
        )

    @staticmethod
    def _balance_entry(directive: BalanceDirective) -> BalanceEntry:
        return BalanceEntry(
            account=directive.account,
            amount=str(directive.amount.number),
            currency=directive.amount.currency,
            date=directive.date,
        )

    @staticmethod
    def _apply_snapshots(
        accounts: dict[str, Account],
        balances: Sequence[BalanceEntry],
    ) -> None:
        """Set each account's snapshot to its latest-dated assertion.

        Runs after every Open was seen, so assertions written before their
        account's Open still count. On equal dates the first one wins.
        """
        for entry in balances:
            account = accounts.get(entry.account)
            if account is None:
                continue
            if account.balance is None or entry.date > account.balance.date:
                accounts[entry.account] = replace(
                    account,
                    balance=BalanceSnapshot(
                        amount=entry.value,
                        currency=entry.currency,
                        date=entry.date,
                    ),
                )

    def _convert_transaction(self, spanned: SpannedDirective) -> Transaction:
        directive: TransactionDirective = spanned.directive
        transaction = Transaction(
            id=transaction_id(spanned.source, spanned.line, directive),
            date=directive.date,
            time=(
                extract_time(directive.metadata)
                if self._extract_times
                else None
            ),
            payee=directive.payee,
            narration=directive.narration,
            flag=directive.flag,
            tags=directive.tags,
            links=directive.links,
            metadata=dict(directive.metadata),
            postings=tuple(_convert_posting(p) for p in directive.postings),
            source=spanned.source,
            line=spanned.line,
        )
        check_transaction_balanced(transaction, self._logger)
        return transaction


__all__ = ["ReconcileLedgerUseCase"]
