"""Tests for normalization helpers."""

from datetime import time

from beanledger.domain.services.normalization import (
    extract_time,
    normalize_currency,
    parse_time,
    strip_quotes,
)


def test_parse_time_accepts_supported_shapes() -> None:
    """Bare times, datetimes and longer stamps should all parse."""
    assert parse_time("12:30:00") == time(12, 30)
    assert parse_time("12:30:00.123456") == time(12, 30)
    assert parse_time("2024-01-05 08:15:30") == time(8, 15, 30)
    assert parse_time("2024-01-05 08:15:30 +0800 CST") == time(8, 15, 30)
    assert parse_time("noon") is None


def test_extract_time_uses_first_parseable_key() -> None:
    """Unparseable values are skipped in key priority order."""
    metadata = {"time": "later", "payTime": "2024-01-05 09:00:00"}

    assert extract_time(metadata) == time(9, 0)
    assert extract_time({"other": "09:00:00"}) is None


def test_string_helpers() -> None:
    """Quotes are stripped once; currencies upper-cased."""
    assert strip_quotes(' "hello" ') == "hello"
    assert strip_quotes('"') == '"'
    assert normalize_currency(" cny ") == "CNY"
    assert normalize_currency("") is None
