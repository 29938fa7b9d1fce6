"""Month grid generation and multi-month composition."""

import logging
from datetime import date
from typing import List, Optional, Sequence, TypeVar

from ..utils.dates import (
    add_days,
    add_months,
    first_of_month,
    last_of_month,
    last_weekday_of_week,
    week_start_offset,
    weekday,
)

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
MONTH_COLUMN_WIDTH = 22
SCREEN_MARGIN = 4

MONDAY_HEADERS = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
SUNDAY_HEADERS = ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]

Week = List[Optional[date]]
MonthGrid = List[Week]

T = TypeVar("T")


def month_weeks(anchor: date, week_starts_monday: bool) -> MonthGrid:
    """Partition the month containing ``anchor`` into week rows.

    The first row is padded on the left with empty slots up to the weekday of
    the 1st, and the last row is padded on the right, so every row holds
    exactly seven slots ordered by the configured week start.

    Args:
        anchor: Any date inside the month to lay out
        week_starts_monday: Monday-first columns when True, Sunday-first otherwise

    Returns:
        List of 4 to 6 weeks, each a list of 7 dates or None
    """
    first_day = first_of_month(anchor)
    last_day = last_of_month(anchor)
    closing_weekday = last_weekday_of_week(week_starts_monday)

    weeks: MonthGrid = []
    current_week: Week = [None] * week_start_offset(first_day, week_starts_monday)

    day = first_day
    while day <= last_day:
        current_week.append(day)
        if weekday(day) == closing_weekday:
            weeks.append(current_week)
            current_week = []
        day = add_days(day, 1)

    if current_week:
        current_week.extend([None] * (DAYS_PER_WEEK - len(current_week)))
        weeks.append(current_week)

    return weeks


def month_range(anchor: date, months_before: int, months_after: int) -> List[date]:
    """Return first-of-month anchors around ``anchor`` in chronological order.

    ``months_before`` is not validated; a negative value trims months from the
    start of the range, which is empty once it passes ``months_after``.
    Months outside ``date.min`` .. ``date.max`` are left out.
    """
    anchor_index = _month_index(anchor)
    first_offset = max(-months_before, _month_index(date.min) - anchor_index)
    last_offset = min(months_after, _month_index(date.max) - anchor_index)
    return [
        first_of_month(add_months(anchor, offset))
        for offset in range(first_offset, last_offset + 1)
    ]


def _month_index(value: date) -> int:
    return value.year * 12 + value.month - 1


def layout_rows(months: Sequence[T], columns_per_row: int) -> List[List[T]]:
    """Split ``months`` into consecutive side-by-side groups.

    Args:
        months: Month anchors in display order
        columns_per_row: Months per row, values below 1 are treated as 1

    Returns:
        Groups of at most ``columns_per_row`` months, order preserved
    """
    size = max(columns_per_row, 1)
    return [list(months[i : i + size]) for i in range(0, len(months), size)]


def columns_for_width(width: int) -> int:
    """Number of month columns that fit a terminal of ``width`` characters."""
    return max((width - SCREEN_MARGIN) // MONTH_COLUMN_WIDTH, 1)


def weekday_headers(week_starts_monday: bool) -> List[str]:
    """Two-letter weekday labels in column order."""
    return list(MONDAY_HEADERS if week_starts_monday else SUNDAY_HEADERS)
