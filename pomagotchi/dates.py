"""Calendar helpers for the streak and weekly counters.

Dates are stored as ISO strings (YYYY-MM-DD) in the save file. "Today" is
always the UTC calendar date so a streak does not depend on the machine's
local timezone.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

Clock = Callable[[], date]

DATE_FORMAT = "%Y-%m-%d"


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def parse_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD string. Returns None if it is malformed."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None


def format_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def is_consecutive_day(last_date: str, current_date: str) -> bool:
    """True iff current_date is exactly one calendar day after last_date."""
    last = parse_date(last_date)
    current = parse_date(current_date)
    if last is None or current is None:
        return False
    return current - last == timedelta(days=1)


def same_iso_week(last_date: str | None, current: date) -> bool:
    """True if last_date falls in the same ISO year and week as current."""
    if last_date is None:
        return False
    last = parse_date(last_date)
    if last is None:
        return False
    return last.isocalendar()[:2] == current.isocalendar()[:2]
