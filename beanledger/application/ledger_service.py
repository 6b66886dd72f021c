"""Stateful ledger service: load, reload, query and report.

Readers take the current snapshot reference once per call and work on that
immutable value, so a concurrent reload never exposes partial state. Loads
are serialised by a writer lock; the time context has its own lock.
"""

from collections.abc import Callable
from datetime import date, time
from decimal import Decimal
from pathlib import Path
import threading
from time import perf_counter

from beanledger.application.ports.directive_parser import DirectiveParserPort
from beanledger.application.use_cases.reconcile_ledger import (
    ReconcileLedgerUseCase,
)
from beanledger.domain.constants import (
    ACCOUNT_SEPARATOR,
    DEFAULT_OPERATING_CURRENCY,
)
from beanledger.domain.errors import (
    AccountNotFoundError,
    LedgerError,
    LedgerNotLoadedError,
    LedgerValidationError,
    TransactionNotFoundError,
)
from beanledger.domain.models.accounts import (
    Account,
    AccountStatus,
    AccountTreeNode,
    AccountType,
)
from beanledger.domain.models.finance import (
    BalanceReport,
    ExpenseCategoryReport,
    IncomeExpenseReport,
    NetWorthReport,
    TimePeriodSummary,
    TransactionPage,
    TransactionStats,
)
from beanledger.domain.models.ledger import LedgerSnapshot
from beanledger.domain.models.time_context import TimeContext, TimeRange
from beanledger.domain.models.timeline import TimelinePage
from beanledger.domain.models.transactions import (
    BalanceEntry,
    PadEntry,
    Transaction,
)
from beanledger.domain.policies.account_filters import matches_account_query
from beanledger.domain.policies.transaction_filters import (
    in_date_range,
    transaction_matches,
)
from beanledger.domain.services.balances import calculate_account_balances
from beanledger.domain.services.finance import (
    compute_balance_report,
    compute_expense_category_report,
    compute_income_expense_report,
    compute_net_worth_report,
    compute_time_period_summary,
    compute_transaction_stats,
)
from beanledger.domain.services.timeline import (
    build_account_timeline,
    paginate_timeline,
)
from beanledger.infrastructure.logging.logger import get_app_logger


class Ledger:
    """Own the current ledger snapshot and answer queries against it."""

    def __init__(
        self,
        parser: DirectiveParserPort,
        logger=None,
        operating_currency: str = DEFAULT_OPERATING_CURRENCY,
        default_range: TimeRange = TimeRange.ALL,
        extract_times: bool = True,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            parser: Port parsing an entry file and its includes.
            logger: Optional logger compatible with logging.Logger-like API.
            operating_currency: Reporting currency.
            default_range: Initial time context range.
            extract_times: Whether transaction times come from metadata.
            clock: Returns today's date; injectable for tests.
        """
        self._parser = parser
        self._logger = logger or get_app_logger()
        self._operating_currency = operating_currency
        self._clock = clock or date.today
        self._reconciler = ReconcileLedgerUseCase(
            logger=self._logger,
            operating_currency=operating_currency,
            extract_times=extract_times,
        )
        self._snapshot: LedgerSnapshot | None = None
        self._path: Path | None = None
        self._write_lock = threading.Lock()
        self._time_lock = threading.Lock()
        self._time_context = TimeContext(default_range)

    # Lifecycle

    @property
    def operating_currency(self) -> str:
        return self._operating_currency

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def loaded_path(self) -> Path | None:
        return self._path

    def snapshot(self) -> LedgerSnapshot:
        """Return the current snapshot.

        Raises:
            LedgerNotLoadedError: If nothing was loaded yet.
        """
        snapshot = self._snapshot
        if snapshot is None:
            raise LedgerNotLoadedError()
        return snapshot

    def load(self, path: Path | str) -> LedgerSnapshot:
        """Parse ``path`` and replace all derived state.

        Args:
            path: Entry ledger file.

        Returns:
            LedgerSnapshot: The newly active snapshot.

        Raises:
            LedgerError: If parsing fails; the previous state stays active.
        """
        entry = Path(path)
        with self._write_lock:
            started = perf_counter()
            try:
                directives = self._parser.parse_file(entry)
                snapshot = self._reconciler.execute(
                    directives,
                    source_path=entry,
                )
            except LedgerError as exc:
                self._logger.error(f"Failed to load {entry}: {exc}")
                raise
            self._snapshot = snapshot
            self._path = entry
        elapsed = perf_counter() - started
        self._logger.info(f"Loaded ledger from {entry} in {elapsed:.3f}s")
        return snapshot

    def reload(self) -> LedgerSnapshot:
        """Reload the last loaded entry file from disk.

        Raises:
            LedgerNotLoadedError: If nothing was loaded yet or the entry
                file no longer exists.
        """
        path = self._path
        if path is None:
            raise LedgerNotLoadedError("No ledger file has been loaded")
        if not path.is_file():
            self._logger.warning(
                f"Ledger file {path} is missing, not reloading"
            )
            raise LedgerNotLoadedError(f"Ledger file {path} does not exist")
        return self.load(path)

    # Accounts

    def accounts(self) -> list[Account]:
        return list(self.snapshot().accounts)

    def find_account(self, name: str) -> Account | None:
        return self.snapshot().accounts_by_name.get(name)

    def account(self, name: str) -> Account:
        """Return the account named ``name``.

        Raises:
            AccountNotFoundError: If no such account was opened.
        """
        account = self.find_account(name)
        if account is None:
            raise AccountNotFoundError(name)
        return account

    def accounts_by_type(
        self,
        account_type: AccountType | str,
    ) -> list[Account]:
        """Return accounts of one type; names match case-insensitively.

        Raises:
            LedgerValidationError: If the type name is unknown.
        """
        try:
            wanted = AccountType.parse(account_type)
        except ValueError as exc:
            raise LedgerValidationError(str(exc)) from exc
        return [a for a in self.accounts() if a.account_type == wanted]

    def accounts_by_status(
        self,
        status: AccountStatus | str,
    ) -> list[Account]:
        try:
            wanted = AccountStatus.parse(status)
        except ValueError as exc:
            raise LedgerValidationError(str(exc)) from exc
        return [a for a in self.accounts() if a.status == wanted]

    def root_accounts(self) -> list[Account]:
        """Return accounts whose parent was never opened itself."""
        snapshot = self.snapshot()
        return [
            account
            for account in snapshot.accounts
            if account.parent_name not in snapshot.accounts_by_name
        ]

    def child_accounts(self, name: str) -> list[Account]:
        return [a for a in self.accounts() if a.parent_name == name]

    def descendant_accounts(self, name: str) -> list[Account]:
        return [a for a in self.accounts() if a.is_descendant_of(name)]

    def search_accounts(self, query: str) -> list[Account]:
        return [
            a for a in self.accounts() if matches_account_query(a.name, query)
        ]

    def account_count_by_type(self) -> dict[AccountType, int]:
        counts = {account_type: 0 for account_type in AccountType}
        for account in self.accounts():
            counts[account.account_type] += 1
        return counts

    def account_tree(self) -> list[AccountTreeNode]:
        """Return the account hierarchy rooted at the first name components."""
        snapshot = self.snapshot()
        roots: dict[str, AccountTreeNode] = {}
        nodes: dict[str, AccountTreeNode] = {}
        for account in sorted(snapshot.accounts, key=lambda a: a.name):
            parent = None
            prefix = ""
            for component in account.components:
                prefix = (
                    f"{prefix}{ACCOUNT_SEPARATOR}{component}"
                    if prefix
                    else component
                )
                node = nodes.get(prefix)
                if node is None:
                    node = AccountTreeNode(name=component, full_name=prefix)
                    nodes[prefix] = node
                    if parent is None:
                        roots[prefix] = node
                    else:
                        parent.children.append(node)
                parent = node
            parent.account = account
        return list(roots.values())

    # Transactions

    def transactions(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Transaction]:
        """Return transactions in ledger order, synthesized pads last."""
        items = self.snapshot().transactions
        end = None if limit is None else offset + limit
        return list(items[offset:end])

    def transaction(self, transaction_id: str) -> Transaction:
        """Return one transaction by identifier.

        Raises:
            TransactionNotFoundError: If the identifier is unknown.
        """
        found = self.snapshot().transactions_by_id.get(transaction_id)
        if found is None:
            raise TransactionNotFoundError(transaction_id)
        return found

    def transactions_by_account(self, name: str) -> list[Transaction]:
        return [t for t in self.snapshot().transactions if t.touches(name)]

    def transactions_by_date_range(
        self,
        start: date | None,
        end: date | None,
    ) -> list[Transaction]:
        return [
            t
            for t in self.snapshot().transactions
            if in_date_range(t, start, end)
        ]

    def search_transactions(self, query: str) -> list[Transaction]:
        """Case-insensitive search over payee, narration, tags, links and
        posting accounts."""
        return [
            t
            for t in self.snapshot().transactions
            if transaction_matches(t, query)
        ]

    def transaction_query(
        self,
        limit: int | None = None,
        offset: int = 0,
        account: str | None = None,
        context: TimeContext | None = None,
    ) -> TransactionPage:
        """Return a newest-first page, optionally filtered.

        Args:
            limit: Page size, None for everything.
            offset: Number of newest transactions to skip.
            account: Only transactions posting to this account.
            context: Only transactions inside this window.

        Returns:
            TransactionPage: Requested page and total match count.
        """
        today = self._clock()
        matches = [
            t
            for t in self.snapshot().transactions
            if (account is None or t.touches(account))
            and (context is None or context.contains(t.date, today))
        ]
        matches.sort(
            key=lambda t: (t.date, t.time or time.min),
            reverse=True,
        )
        end = None if limit is None else offset + limit
        return TransactionPage(
            transactions=matches[offset:end],
            total_count=len(matches),
            offset=offset,
            limit=limit,
        )

    def recent_transactions(self, count: int = 10) -> list[Transaction]:
        return self.transaction_query(limit=count).transactions

    def filtered_transactions(self) -> list[Transaction]:
        """Return transactions inside the current time context."""
        context = self.time_context()
        today = self._clock()
        return [
            t
            for t in self.snapshot().transactions
            if context.contains(t.date, today)
        ]

    def transaction_stats(self) -> TransactionStats:
        return compute_transaction_stats(self.snapshot().transactions)

    # Balances and pads

    def balances_by_account(self, name: str) -> list[BalanceEntry]:
        return [b for b in self.snapshot().balances if b.account == name]

    def all_balances(self) -> list[BalanceEntry]:
        return list(self.snapshot().balances)

    def pads_by_account(self, name: str) -> list[PadEntry]:
        return [p for p in self.snapshot().pads if p.account == name]

    def pads_by_source_account(self, name: str) -> list[PadEntry]:
        return [p for p in self.snapshot().pads if p.source_account == name]

    def all_pads(self) -> list[PadEntry]:
        return list(self.snapshot().pads)

    def calculate_account_balances(
        self,
        as_of: date | None = None,
    ) -> dict[str, Decimal]:
        """Return the balance of every account, optionally as of a date."""
        snapshot = self.snapshot()
        return calculate_account_balances(
            snapshot.accounts,
            snapshot.transactions,
            snapshot.balances,
            as_of=as_of,
        )

    def account_timeline(
        self,
        name: str,
        offset: int = 0,
        limit: int | None = None,
    ) -> TimelinePage:
        """Return the newest-first running-balance timeline of an account."""
        snapshot = self.snapshot()
        pads = [
            p
            for p in snapshot.pads
            if name in (p.account, p.source_account)
        ]
        events = build_account_timeline(
            name,
            snapshot.transactions,
            snapshot.balances,
            pads,
        )
        return paginate_timeline(events, offset=offset, limit=limit)

    # Reports

    def balance_report(self) -> BalanceReport:
        """Return the balance sheet as of the current context's end date."""
        snapshot = self.snapshot()
        as_of = self.time_context().end_date(self._clock())
        balances = calculate_account_balances(
            snapshot.accounts,
            snapshot.transactions,
            snapshot.balances,
            as_of=as_of,
        )
        report = compute_balance_report(
            snapshot.accounts,
            balances,
            as_of=as_of,
            currency_code=self._operating_currency,
            logger=self._logger,
        )
        self._logger.info(
            f"Balance report computed: assets={report.total_assets}, "
            f"liabilities={report.total_liabilities}"
        )
        return report

    def income_expense_report(self) -> IncomeExpenseReport:
        """Return the income statement for the current context."""
        return compute_income_expense_report(
            self.snapshot().transactions,
            self.time_context(),
            operating_currency=self._operating_currency,
            today=self._clock(),
        )

    def expense_category_report(self) -> ExpenseCategoryReport:
        return compute_expense_category_report(self.income_expense_report())

    def net_worth_report(self) -> NetWorthReport:
        snapshot = self.snapshot()
        return compute_net_worth_report(
            snapshot.accounts,
            snapshot.transactions,
            snapshot.balances,
            self.time_context(),
            currency_code=self._operating_currency,
            today=self._clock(),
        )

    def time_period_summary(self) -> TimePeriodSummary:
        return compute_time_period_summary(
            self.snapshot().transactions,
            self.time_context(),
            operating_currency=self._operating_currency,
            today=self._clock(),
        )

    # Time context

    def time_context(self) -> TimeContext:
        with self._time_lock:
            return self._time_context

    def set_time_context(self, context: TimeContext) -> None:
        with self._time_lock:
            self._time_context = context
        self._logger.info(f"Time context set to {context.description()}")

    def set_time_range(self, time_range: TimeRange | str) -> TimeContext:
        """Switch to a named range, keeping custom bounds for CUSTOM.

        Raises:
            LedgerValidationError: If the range name is unknown.
        """
        if isinstance(time_range, str):
            try:
                time_range = TimeRange.parse(time_range)
            except ValueError as exc:
                raise LedgerValidationError(str(exc)) from exc
        with self._time_lock:
            current = self._time_context
            if time_range == TimeRange.CUSTOM:
                context = TimeContext.custom(
                    current.custom_start,
                    current.custom_end,
                )
            else:
                context = TimeContext(time_range)
            self._time_context = context
        self._logger.info(f"Time context set to {context.description()}")
        return context

    def set_custom_range(
        self,
        start: date | None,
        end: date | None,
    ) -> TimeContext:
        """Switch to an explicit inclusive date window.

        Raises:
            LedgerValidationError: If ``start`` is after ``end``.
        """
        if start is not None and end is not None and start > end:
            raise LedgerValidationError(
                f"Custom range start {start} is after end {end}"
            )
        context = TimeContext.custom(start, end)
        self.set_time_context(context)
        return context


__all__ = ["Ledger"]
