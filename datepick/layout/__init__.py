"""Calendar grid layout: month partitioning and multi-month composition."""

from .grid import (
    MonthGrid,
    columns_for_width,
    layout_rows,
    month_range,
    month_weeks,
    weekday_headers,
)

__all__ = [
    "MonthGrid",
    "columns_for_width",
    "layout_rows",
    "month_range",
    "month_weeks",
    "weekday_headers",
]
