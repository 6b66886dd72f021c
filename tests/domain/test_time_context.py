"""Tests for reporting time ranges."""

from datetime import date

import pytest

from beanledger.domain.models.time_context import TimeContext, TimeRange


def test_year_range_on_fixed_date() -> None:
    """YEAR should cover the whole calendar year of today."""
    context = TimeContext(TimeRange.YEAR)
    today = date(2024, 6, 15)

    assert context.start_date(today) == date(2024, 1, 1)
    assert context.end_date(today) == date(2024, 12, 31)


def test_month_and_quarter_bounds() -> None:
    """MONTH and QUARTER should end on the last day of their period."""
    today = date(2024, 2, 10)

    month = TimeContext(TimeRange.MONTH)
    quarter = TimeContext(TimeRange.QUARTER)

    assert month.start_date(today) == date(2024, 2, 1)
    assert month.end_date(today) == date(2024, 2, 29)
    assert quarter.start_date(today) == date(2024, 1, 1)
    assert quarter.end_date(today) == date(2024, 3, 31)


def test_all_range_is_unbounded() -> None:
    """ALL should contain any date."""
    context = TimeContext()

    assert context.start_date(date(2024, 1, 1)) is None
    assert context.end_date(date(2024, 1, 1)) is None
    assert context.contains(date(1999, 1, 1))
    assert context.description() == "All Time"


def test_custom_range_contains_is_inclusive() -> None:
    """Custom windows include both bounds and describe open ends."""
    context = TimeContext.custom(date(2024, 1, 1), date(2024, 1, 31))
    open_ended = TimeContext.custom(None, date(2024, 1, 31))

    assert context.contains(date(2024, 1, 1))
    assert context.contains(date(2024, 1, 31))
    assert not context.contains(date(2024, 2, 1))
    assert context.description() == "2024-01-01 to 2024-01-31"
    assert open_ended.description() == "... to 2024-01-31"


def test_parse_is_case_insensitive_and_rejects_unknown() -> None:
    """TimeRange.parse should accept any case and fail on unknown names."""
    assert TimeRange.parse(" Quarter ") == TimeRange.QUARTER
    with pytest.raises(ValueError):
        TimeRange.parse("fortnight")
