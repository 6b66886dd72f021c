"""Reporting date ranges."""

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum


class TimeRange(str, Enum):
    """Named reporting ranges."""

    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    ALL = "all"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str) -> "TimeRange":
        """Parse a range name case-insensitively.

        Args:
            value: Range name such as ``"month"`` or ``"Year"``.

        Returns:
            TimeRange: Matching range.

        Raises:
            ValueError: If the name is unknown.
        """
        cleaned = value.strip().lower()
        for member in cls:
            if member.value == cleaned:
                return member
        raise ValueError(f"Unknown time range: {value!r}")


_DESCRIPTIONS = {
    TimeRange.MONTH: "Current Month",
    TimeRange.QUARTER: "Current Quarter",
    TimeRange.YEAR: "Current Year",
    TimeRange.ALL: "All Time",
}


@dataclass(frozen=True)
class TimeContext:
    """A reporting window computed relative to ``today``.

    Attributes:
        range: Selected range.
        custom_start: Inclusive start for CUSTOM, None for unbounded.
        custom_end: Inclusive end for CUSTOM, None for unbounded.
    """

    range: TimeRange = TimeRange.ALL
    custom_start: date | None = None
    custom_end: date | None = None

    @classmethod
    def custom(cls, start: date | None, end: date | None) -> "TimeContext":
        return cls(TimeRange.CUSTOM, custom_start=start, custom_end=end)

    def start_date(self, today: date | None = None) -> date | None:
        """Return the inclusive start of the window, None when unbounded."""
        today = today or date.today()
        if self.range == TimeRange.MONTH:
            return date(today.year, today.month, 1)
        if self.range == TimeRange.QUARTER:
            first_month = (today.month - 1) // 3 * 3 + 1
            return date(today.year, first_month, 1)
        if self.range == TimeRange.YEAR:
            return date(today.year, 1, 1)
        if self.range == TimeRange.CUSTOM:
            return self.custom_start
        return None

    def end_date(self, today: date | None = None) -> date | None:
        """Return the inclusive end of the window, None when unbounded."""
        today = today or date.today()
        if self.range == TimeRange.MONTH:
            last_day = calendar.monthrange(today.year, today.month)[1]
            return date(today.year, today.month, last_day)
        if self.range == TimeRange.QUARTER:
            last_month = (today.month - 1) // 3 * 3 + 3
            last_day = calendar.monthrange(today.year, last_month)[1]
            return date(today.year, last_month, last_day)
        if self.range == TimeRange.YEAR:
            return date(today.year, 12, 31)
        if self.range == TimeRange.CUSTOM:
            return self.custom_end
        return None

    def contains(self, day: date, today: date | None = None) -> bool:
        """Return True when ``day`` falls inside the window (inclusive)."""
        start = self.start_date(today)
        end = self.end_date(today)
        if start is not None and day < start:
            return False
        if end is not None and day > end:
            return False
        return True

    def description(self) -> str:
        if self.range != TimeRange.CUSTOM:
            return _DESCRIPTIONS[self.range]
        start = self.custom_start.isoformat() if self.custom_start else "..."
        end = self.custom_end.isoformat() if self.custom_end else "..."
        return f"{start} to {end}"


__all__ = ["TimeRange", "TimeContext"]
