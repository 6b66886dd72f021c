"""CLI adapter printing a summary of a ledger file."""

import argparse
from pathlib import Path
from typing import Sequence

from beanledger.application.use_cases.get_account_journal import (
    GetAccountJournalUseCase,
)
from beanledger.domain.errors import LedgerError
from beanledger.domain.models.time_context import TimeRange
from beanledger.infrastructure.container import build_ledger
from beanledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from beanledger.infrastructure.settings import LedgerSettings


def _time_range(value: str) -> TimeRange:
    try:
        return TimeRange.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def create_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the summary command."""
    parser = argparse.ArgumentParser(
        prog="beanledger-summary",
        description="Print balances and income/expense totals of a ledger.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Entry ledger file (defaults to LEDGER_FILE or data/main.bean).",
    )
    parser.add_argument(
        "--range",
        type=_time_range,
        default=None,
        help="Reporting range: month, quarter, year or all.",
    )
    parser.add_argument(
        "--account",
        help="Also print the running-balance timeline of this account.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of timeline rows to print.",
    )
    return parser


def _print_report(ledger) -> None:
    report = ledger.balance_report()
    currency = report.summary.currency_code
    print(f"Balance sheet ({ledger.time_context().description()})")
    for entry in report.assets + report.liabilities + report.equity:
        print(
            f"  {entry.account:<40} {entry.balance:>14,.2f} {entry.currency}"
        )
    print(
        f"Assets={report.total_assets:,.2f} "
        f"Liabilities={report.total_liabilities:,.2f} "
        f"NetWorth={report.net_worth:,.2f} {currency}"
    )
    income = ledger.income_expense_report()
    print(
        f"Income={income.total_income:,.2f} "
        f"Expenses={income.total_expenses:,.2f} "
        f"Net={income.net_income:,.2f} {income.currency_code}"
    )


def _print_timeline(ledger, account: str, limit: int) -> None:
    use_case = GetAccountJournalUseCase(ledger, page_size=limit)
    journal = use_case.execute(account)
    print(f"Timeline of {account} ({journal.timeline.total_count} events)")
    for event in journal.timeline.events:
        print(
            f"  {event.date.isoformat()} {event.event_type.value:<11} "
            f"{event.amount:>12,.2f} {event.running_balance:>14,.2f}  "
            f"{event.description}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the summary command.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit code, 0 on success and 1 on ledger errors.
    """
    args = create_parser().parse_args(argv)
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    ledger_file = args.file or settings.ledger_file
    if ledger_file is None:
        logger.warning(
            "LEDGER_FILE is required when data/ holds no single ledger file."
        )
        return 1

    ledger = build_ledger(settings)
    if args.range is not None:
        ledger.set_time_range(args.range)
    try:
        ledger.load(ledger_file)
        _print_report(ledger)
        if args.account:
            _print_timeline(
                ledger,
                args.account,
                args.limit or settings.records_per_page,
            )
    except LedgerError as exc:
        logger.error(str(exc))
        print(f"error [{exc.code.value}]: {exc}")
        return 1
    get_usage_logger().info(f"Summary printed for {ledger_file}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
