"""Composition root for wiring infrastructure adapters."""

from beanledger.application.ledger_service import Ledger
from beanledger.application.ports.directive_parser import DirectiveParserPort
from beanledger.domain.errors import LedgerConfigError
from beanledger.infrastructure.logging.logger import get_app_logger
from beanledger.infrastructure.parsing import (
    FileDirectiveParser,
    LineDirectiveParser,
)
from beanledger.infrastructure.settings import LedgerSettings


def build_directive_parser() -> DirectiveParserPort:
    """Return the file parser with include resolution."""
    logger = get_app_logger()
    return FileDirectiveParser(
        line_parser=LineDirectiveParser(logger=logger),
        logger=logger,
    )


def build_ledger(settings: LedgerSettings | None = None) -> Ledger:
    """Return an unloaded ledger configured from settings."""
    resolved = settings or LedgerSettings.from_env()
    return Ledger(
        parser=build_directive_parser(),
        logger=get_app_logger(),
        operating_currency=resolved.operating_currency,
        default_range=resolved.default_range,
        extract_times=resolved.extract_times,
    )


def load_ledger(settings: LedgerSettings | None = None) -> Ledger:
    """Return a ledger loaded from the configured entry file.

    Raises:
        LedgerConfigError: If no ledger file is configured or discovered.
        LedgerError: If loading fails.
    """
    resolved = settings or LedgerSettings.from_env()
    if resolved.ledger_file is None:
        raise LedgerConfigError(
            "No ledger file configured. Set LEDGER_FILE or add main.bean "
            "to the data directory."
        )
    ledger = build_ledger(resolved)
    ledger.load(resolved.ledger_file)
    return ledger


__all__ = ["build_directive_parser", "build_ledger", "load_ledger"]
