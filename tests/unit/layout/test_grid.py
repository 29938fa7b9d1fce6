"""Unit tests for month grid generation and multi-month layout."""

from datetime import date, timedelta

import pytest

from datepick.layout.grid import (
    columns_for_width,
    layout_rows,
    month_range,
    month_weeks,
    weekday_headers,
)
from datepick.utils.dates import days_in_month


def _all_months(start_year: int, end_year: int):
    for year in range(start_year, end_year + 1):
        for month in range(1, 13):
            yield date(year, month, 1)


class TestMonthWeeks:
    """Test partitioning a month into week rows."""

    @pytest.mark.parametrize("week_starts_monday", [True, False])
    def test_month_weeks_when_any_month_then_rows_cover_month_in_order(
        self, week_starts_monday: bool
    ) -> None:
        for anchor in _all_months(2023, 2025):
            weeks = month_weeks(anchor, week_starts_monday)

            assert 4 <= len(weeks) <= 6
            assert all(len(week) == 7 for week in weeks)

            days = [day for week in weeks for day in week if day is not None]
            expected = [
                anchor + timedelta(days=i) for i in range(days_in_month(anchor.year, anchor.month))
            ]
            assert days == expected

    def test_month_weeks_when_monday_first_then_columns_follow_weekday(self) -> None:
        for anchor in _all_months(2024, 2024):
            for week in month_weeks(anchor, True):
                for column, day in enumerate(week):
                    if day is not None:
                        assert day.weekday() == column

    def test_month_weeks_when_sunday_first_then_sunday_in_first_column(self) -> None:
        for anchor in _all_months(2024, 2024):
            for week in month_weeks(anchor, False):
                for column, day in enumerate(week):
                    if day is not None:
                        assert (day.weekday() + 1) % 7 == column

    def test_month_weeks_when_feb_2015_sunday_first_then_exactly_four_rows(self) -> None:
        weeks = month_weeks(date(2015, 2, 10), False)

        assert len(weeks) == 4
        assert weeks[0][0] == date(2015, 2, 1)
        assert weeks[-1][-1] == date(2015, 2, 28)

    def test_month_weeks_when_feb_2015_monday_first_then_padded_rows(self) -> None:
        weeks = month_weeks(date(2015, 2, 1), True)

        assert len(weeks) == 5
        assert weeks[0] == [None] * 6 + [date(2015, 2, 1)]
        assert weeks[-1][-1] is None

    def test_month_weeks_when_anchor_mid_month_then_same_as_first(self) -> None:
        assert month_weeks(date(2024, 3, 20), True) == month_weeks(date(2024, 3, 1), True)


class TestMonthRange:
    """Test the range of visible months."""

    def test_month_range_when_defaults_then_three_months(self) -> None:
        assert month_range(date(2024, 3, 15), 1, 1) == [
            date(2024, 2, 1),
            date(2024, 3, 1),
            date(2024, 4, 1),
        ]

    def test_month_range_when_crossing_year_then_chronological(self) -> None:
        assert month_range(date(2024, 1, 31), 2, 0) == [
            date(2023, 11, 1),
            date(2023, 12, 1),
            date(2024, 1, 1),
        ]

    def test_month_range_when_months_before_negative_then_trims_start(self) -> None:
        assert month_range(date(2024, 3, 15), -1, 1) == [date(2024, 4, 1)]

    def test_month_range_when_negative_past_after_then_empty(self) -> None:
        assert month_range(date(2024, 3, 15), -3, 1) == []

    def test_month_range_when_months_before_past_first_year_then_starts_at_min(self) -> None:
        months = month_range(date(2024, 1, 1), 30000, 1)

        assert months[0] == date(1, 1, 1)
        assert months[-1] == date(2024, 2, 1)
        assert len(months) == 2023 * 12 + 2

    def test_month_range_when_months_after_past_last_year_then_ends_at_max(self) -> None:
        months = month_range(date(2024, 1, 1), 0, 100000)

        assert months[0] == date(2024, 1, 1)
        assert months[-1] == date(9999, 12, 1)
        assert len(months) == (9999 - 2024 + 1) * 12

    def test_month_range_when_anchor_at_edges_then_no_overflow(self) -> None:
        assert month_range(date.max, 1, 1) == [date(9999, 11, 1), date(9999, 12, 1)]
        assert month_range(date.min, 1, 1) == [date(1, 1, 1), date(1, 2, 1)]


class TestLayoutRows:
    """Test grouping months into side-by-side rows."""

    def test_layout_rows_when_uneven_then_last_row_shorter(self) -> None:
        assert layout_rows([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_layout_rows_when_zero_columns_then_one_per_row(self) -> None:
        assert layout_rows([1, 2, 3], 0) == [[1], [2], [3]]

    def test_layout_rows_when_empty_then_no_rows(self) -> None:
        assert layout_rows([], 3) == []

    @pytest.mark.parametrize("width,expected", [(80, 3), (48, 2), (10, 1), (0, 1), (200, 8)])
    def test_columns_for_width(self, width: int, expected: int) -> None:
        assert columns_for_width(width) == expected


class TestWeekdayHeaders:
    """Test weekday header labels."""

    def test_weekday_headers_when_monday_first(self) -> None:
        assert weekday_headers(True) == ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]

    def test_weekday_headers_when_sunday_first(self) -> None:
        assert weekday_headers(False) == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]

    def test_weekday_headers_when_modified_then_constants_unchanged(self) -> None:
        weekday_headers(True).append("xx")
        assert len(weekday_headers(True)) == 7
