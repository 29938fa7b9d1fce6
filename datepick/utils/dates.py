"""Pure calendar arithmetic used by the grid and the navigation state."""

import calendar
import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)

SUNDAY = 0
SATURDAY = 6


def add_days(value: date, days: int) -> date:
    """Return the date ``days`` days after ``value`` (negative moves back)."""
    return value + timedelta(days=days)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month, leap years included."""
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Return the same day ``months`` months later.

    When the target month is shorter than ``value.day`` the result is clamped
    to the last day of that month, so Jan 31 + 1 month is Feb 28 (or 29).

    Args:
        value: Starting date
        months: Number of months to move, may be negative

    Returns:
        Date in the target month
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, days_in_month(year, month))
    return date(year, month, day)


def add_years(value: date, years: int) -> date:
    """Return the same month and day ``years`` years later, clamping Feb 29."""
    return add_months(value, 12 * years)


def first_of_month(value: date) -> date:
    """Return the first day of the month containing ``value``."""
    return value.replace(day=1)


def last_of_month(value: date) -> date:
    """Return the last day of the month containing ``value``."""
    return value.replace(day=days_in_month(value.year, value.month))


def weekday(value: date) -> int:
    """Return the weekday with 0 = Sunday through 6 = Saturday."""
    return (value.weekday() + 1) % 7


def week_start_offset(value: date, week_starts_monday: bool) -> int:
    """Column of ``value`` in a week row under the given week-start convention."""
    raw = weekday(value)
    if week_starts_monday:
        return (raw - 1) % 7
    return raw


def last_weekday_of_week(week_starts_monday: bool) -> int:
    """Raw weekday that closes a week row (Sunday or Saturday)."""
    return SUNDAY if week_starts_monday else SATURDAY


def days_since_week_start(value: date, week_starts_monday: bool) -> int:
    """Days between the first day of ``value``'s week and ``value``."""
    return week_start_offset(value, week_starts_monday)


def days_until_week_end(value: date, week_starts_monday: bool) -> int:
    """Days between ``value`` and the last day of its week."""
    return 6 - week_start_offset(value, week_starts_monday)


def is_weekend(value: date) -> bool:
    return weekday(value) in (SUNDAY, SATURDAY)


def format_date(value: date, pattern: str) -> str:
    """Format ``value`` with a strftime pattern.

    A pattern the platform's strftime rejects falls back to ISO format.

    Args:
        value: Date to format
        pattern: strftime format string

    Returns:
        Formatted date string
    """
    try:
        return value.strftime(pattern)
    except ValueError as e:
        logger.warning(f"Invalid date format {pattern!r}, using ISO format: {e}")
        return value.isoformat()
