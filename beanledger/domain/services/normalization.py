"""Domain normalization helpers."""

from collections.abc import Mapping
from datetime import datetime, time

from beanledger.domain.constants import TIME_METADATA_KEYS


_TIME_FORMATS = (
    "%H:%M:%S",
    "%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
)


def normalize_currency(currency: str | None) -> str | None:
    """Normalize commodity codes.

    Args:
        currency: Raw currency text.

    Returns:
        str | None: Upper-cased code, or None when empty.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def strip_quotes(value: str) -> str:
    """Remove one pair of surrounding double quotes and outer whitespace."""
    cleaned = value.strip()
    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] == '"':
        return cleaned[1:-1]
    return cleaned


def parse_time(value: str) -> time | None:
    """Parse a wall-clock time from a metadata value.

    Accepts a bare time, a date and time, either with fractional seconds,
    and longer values whose first two tokens are a date and a time (for
    example ``2024-01-05 12:30:00 +0800 CST``).

    Args:
        value: Raw metadata value.

    Returns:
        time | None: Parsed time truncated to seconds.
    """
    cleaned = value.strip()
    candidates = [cleaned]
    tokens = cleaned.split()
    if len(tokens) > 2:
        candidates.append(" ".join(tokens[:2]))
    for candidate in candidates:
        for fmt in _TIME_FORMATS:
            try:
                parsed = datetime.strptime(candidate, fmt)
            except ValueError:
                continue
            return parsed.time().replace(microsecond=0)
    return None


def extract_time(metadata: Mapping[str, str]) -> time | None:
    """Return the first parseable time found under the known metadata keys."""
    for key in TIME_METADATA_KEYS:
        raw = metadata.get(key)
        if not raw:
            continue
        parsed = parse_time(raw)
        if parsed is not None:
            return parsed
    return None


__all__ = ["normalize_currency", "strip_quotes", "parse_time", "extract_time"]
