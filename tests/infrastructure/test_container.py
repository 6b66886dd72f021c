"""Tests for the composition root."""

from pathlib import Path

import pytest

from beanledger.application.ledger_service import Ledger
from beanledger.domain.errors import LedgerConfigError
from beanledger.domain.models.time_context import TimeRange
from beanledger.infrastructure import container
from beanledger.infrastructure.parsing import FileDirectiveParser
from beanledger.infrastructure.settings import LedgerSettings


def test_build_directive_parser_returns_file_parser() -> None:
    """The default parser resolves includes."""
    assert isinstance(container.build_directive_parser(), FileDirectiveParser)


def test_build_ledger_applies_settings() -> None:
    """Settings configure currency and the initial time range."""
    settings = LedgerSettings(
        operating_currency="USD",
        default_range=TimeRange.YEAR,
    )

    ledger = container.build_ledger(settings)

    assert isinstance(ledger, Ledger)
    assert ledger.operating_currency == "USD"
    assert ledger.time_context().range == TimeRange.YEAR
    assert ledger.is_loaded is False


def test_load_ledger_reads_configured_file(tmp_path: Path) -> None:
    """load_ledger returns a loaded ledger."""
    ledger_file = tmp_path / "main.bean"
    ledger_file.write_text(
        "2024-01-01 open Assets:Cash CNY\n", encoding="utf-8"
    )

    ledger = container.load_ledger(LedgerSettings(ledger_file=ledger_file))

    assert ledger.is_loaded
    assert [a.name for a in ledger.accounts()] == ["Assets:Cash"]


def test_load_ledger_requires_a_file() -> None:
    """Without a ledger file a configuration error is raised."""
    with pytest.raises(LedgerConfigError):
        container.load_ledger(LedgerSettings(ledger_file=None))
