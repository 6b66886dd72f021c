"""Tests for infrastructure settings."""

from pathlib import Path

from beanledger.domain.models.time_context import TimeRange
from beanledger.infrastructure import settings as settings_module
from beanledger.infrastructure.settings import LedgerSettings

_ENV_VARS = (
    "LEDGER_FILE",
    "LEDGER_DATA_DIR",
    "LEDGER_MAIN_FILE",
    "LEDGER_OPERATING_CURRENCY",
    "LEDGER_TIME_RANGE",
    "LEDGER_RECORDS_PER_PAGE",
    "LEDGER_EXTRACT_TIMES",
)


def _clear_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path) -> None:
    """File paths should resolve to absolute Path instances."""
    _clear_env(monkeypatch)
    ledger = tmp_path / "main.bean"
    ledger.write_text("", encoding="utf-8")
    monkeypatch.setenv("LEDGER_FILE", str(ledger))

    settings = LedgerSettings.from_env()

    assert isinstance(settings.ledger_file, Path)
    assert settings.ledger_file == ledger.resolve()


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path) -> None:
    """file:// URIs should be turned into paths."""
    _clear_env(monkeypatch)
    ledger = tmp_path / "my books.bean"
    ledger.write_text("", encoding="utf-8")
    monkeypatch.setenv("LEDGER_FILE", ledger.as_uri())

    settings = LedgerSettings.from_env()

    assert settings.ledger_file == ledger.resolve()


def test_from_env_defaults(monkeypatch, tmp_path: Path) -> None:
    """Unset variables fall back to documented defaults."""
    _clear_env(monkeypatch)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = LedgerSettings.from_env()

    assert settings.ledger_file is None
    assert settings.operating_currency == "CNY"
    assert settings.default_range == TimeRange.ALL
    assert settings.records_per_page == 50
    assert settings.extract_times is True


def test_from_env_discovers_main_file(monkeypatch, tmp_path: Path) -> None:
    """The data directory's main file is preferred."""
    _clear_env(monkeypatch)
    (tmp_path / "main.bean").write_text("", encoding="utf-8")
    (tmp_path / "other.bean").write_text("", encoding="utf-8")
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path))

    settings = LedgerSettings.from_env()

    assert settings.ledger_file == (tmp_path / "main.bean").resolve()


def test_from_env_single_ledger_file_or_none(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """One candidate is picked; several candidates are ambiguous."""
    _clear_env(monkeypatch)
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path))
    (tmp_path / "books.beancount").write_text("", encoding="utf-8")

    assert LedgerSettings.from_env().ledger_file == (
        tmp_path / "books.beancount"
    ).resolve()

    (tmp_path / "extra.bean").write_text("", encoding="utf-8")
    assert LedgerSettings.from_env().ledger_file is None


def test_from_env_parses_overrides(monkeypatch) -> None:
    """Valid overrides apply and invalid ones fall back."""
    _clear_env(monkeypatch)
    monkeypatch.setenv("LEDGER_OPERATING_CURRENCY", " usd ")
    monkeypatch.setenv("LEDGER_TIME_RANGE", "Quarter")
    monkeypatch.setenv("LEDGER_RECORDS_PER_PAGE", "25")
    monkeypatch.setenv("LEDGER_EXTRACT_TIMES", "false")
    monkeypatch.setenv("LEDGER_DATA_DIR", "/nonexistent/dir")

    settings = LedgerSettings.from_env()

    assert settings.operating_currency == "USD"
    assert settings.default_range == TimeRange.QUARTER
    assert settings.records_per_page == 25
    assert settings.extract_times is False

    monkeypatch.setenv("LEDGER_TIME_RANGE", "decade")
    monkeypatch.setenv("LEDGER_RECORDS_PER_PAGE", "-3")
    settings = LedgerSettings.from_env()

    assert settings.default_range == TimeRange.ALL
    assert settings.records_per_page == 50
