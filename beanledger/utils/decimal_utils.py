"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from the parser or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_decimal(raw: str | None) -> Decimal | None:
    """Parse a ledger number leniently.

    Thousands separators and surrounding whitespace are ignored, a leading
    ``+`` or ``-`` sign is honoured and the fractional part is optional.

    Args:
        raw: Raw number text such as ``"-1,234.50"``.

    Returns:
        Decimal | None: Parsed value, or None when the text is not a number.
    """
    if raw is None:
        return None
    cleaned = raw.strip().replace(",", "")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def percentage(part: Decimal, total: Decimal) -> Decimal:
    """Return ``part`` as a percentage of ``total`` (zero when total is 0)."""
    if total == 0:
        return Decimal("0")
    return (part / total) * Decimal("100")


__all__ = ["coerce_decimal", "parse_decimal", "percentage"]
