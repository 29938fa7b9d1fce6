"""Translate picker state into role-tagged text for the painter.

Nothing here knows about escape codes: every piece of text carries a
:class:`Role` and the painter decides how a role looks on screen.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Sequence

from ..layout.grid import (
    MONTH_COLUMN_WIDTH,
    columns_for_width,
    layout_rows,
    month_range,
    month_weeks,
    weekday_headers,
)
from ..settings.models import DisplayConfig
from ..utils.dates import format_date, is_weekend

logger = logging.getLogger(__name__)

MAX_WEEKS = 6

BROWSE_HELP = (
    "n/p:month | N/P:year | t:today | H/L:week | Home/End:month | "
    "Enter:select | c:config | q:quit"
)
CONFIG_HELP = "Navigate: ↑↓ | Edit: Enter | Cancel: Esc"


class Role(Enum):
    """Display role of a piece of text."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    SELECTED = "selected"
    TODAY = "today"
    WEEKEND = "weekend"
    STATUS = "status"
    WEEKDAY_HEADER = "weekday_header"
    WEEKEND_HEADER = "weekend_header"
    NORMAL = "normal"
    MUTED = "muted"


@dataclass(frozen=True)
class Token:
    """A run of text with a single display role."""

    text: str
    role: Role = Role.NORMAL
    bold: bool = False
    underline: bool = False
    reverse: bool = False


Line = List[Token]


def line_text(line: Sequence[Token]) -> str:
    return "".join(token.text for token in line)


@dataclass
class Frame:
    """One full screen: main area, log area, help line and status line."""

    main: List[Line] = field(default_factory=list)
    log: List[str] = field(default_factory=list)
    help: Line = field(default_factory=list)
    status: Line = field(default_factory=list)

    def text(self) -> str:
        """Plain text of the whole frame, used to detect unchanged frames."""
        parts = [line_text(line) for line in self.main]
        parts.extend(self.log)
        parts.append(line_text(self.help))
        parts.append(line_text(self.status))
        return "\n".join(parts)


def _month_header(month: date, today: date) -> Token:
    label = month.strftime("%B %Y").ljust(MONTH_COLUMN_WIDTH)
    is_current = (month.year, month.month) == (today.year, today.month)
    return Token(label, Role.MONTH, bold=is_current, underline=is_current)


def _weekday_header_line(months: Sequence[date], week_starts_monday: bool) -> Line:
    headers = weekday_headers(week_starts_monday)
    weekend_columns = {5, 6} if week_starts_monday else {0, 6}
    line: Line = []
    for _ in months:
        for index, name in enumerate(headers):
            role = Role.WEEKEND_HEADER if index in weekend_columns else Role.WEEKDAY_HEADER
            line.append(Token(name, role, bold=True))
            line.append(Token(" "))
        line.append(Token(" "))
    return line


def _day_token(day: date, selected: date, today: date, config: DisplayConfig) -> Token:
    text = str(day.day).rjust(2)
    if day == selected:
        return Token(text, Role.SELECTED, bold=True)
    if day == today:
        return Token(text, Role.TODAY, bold=True)
    if config.highlight_weekends and is_weekend(day):
        return Token(text, Role.WEEKEND)
    return Token(text, Role.DAY)


def month_row_lines(
    months: Sequence[date], selected: date, today: date, config: DisplayConfig
) -> List[Line]:
    """Lines for one row of side-by-side months.

    Args:
        months: Month anchors shown next to each other
        selected: Currently selected date
        today: Today's date
        config: Display configuration

    Returns:
        Header line, weekday line and one line per non-empty week row
    """
    lines: List[Line] = [
        [_month_header(month, today) for month in months],
        _weekday_header_line(months, config.week_starts_monday),
    ]

    grids = [month_weeks(month, config.week_starts_monday) for month in months]
    for week_index in range(MAX_WEEKS):
        line: Line = []
        for grid in grids:
            week = grid[week_index] if week_index < len(grid) else [None] * 7
            for day in week:
                if day is None:
                    line.append(Token("   "))
                else:
                    line.append(_day_token(day, selected, today, config))
                    line.append(Token(" "))
            line.append(Token(" "))
        if line_text(line).strip():
            lines.append(line)

    return lines


def calendar_lines(
    anchor: date,
    selected: date,
    today: date,
    config: DisplayConfig,
    width: int,
    height: Optional[int] = None,
) -> List[Line]:
    """Main-area lines for the calendar screen.

    Args:
        anchor: Month the range is centred on
        selected: Currently selected date
        today: Today's date
        config: Display configuration
        width: Terminal columns, deciding how many months share a row
        height: Stop adding month rows once this many lines exist

    Returns:
        Month row lines, each row group followed by an empty line
    """
    months = month_range(anchor, config.months_before, config.months_after)
    lines: List[Line] = []
    for group in layout_rows(months, columns_for_width(width)):
        if height is not None and len(lines) >= height:
            break
        lines.extend(month_row_lines(group, selected, today, config))
        lines.append([])
    return lines


def browse_help(numeric_prefix: str) -> Line:
    """Help line for browsing, showing the pending jump when digits were typed."""
    parts = []
    if numeric_prefix:
        parts.append(f"{numeric_prefix}g:jump {numeric_prefix} days")
    else:
        parts.append("←↓↑→/hjkl")
    parts.append(BROWSE_HELP)
    return [Token(" | ".join(parts), Role.MUTED)]


def status_line(selected: date, config: DisplayConfig) -> Line:
    return [Token(f"Selected: {format_date(selected, config.date_format)}", Role.STATUS)]


def calendar_frame(
    anchor: date,
    selected: date,
    today: date,
    numeric_prefix: str,
    config: DisplayConfig,
    width: int,
    log_lines: Sequence[str] = (),
    height: Optional[int] = None,
) -> Frame:
    """Full frame for browsing mode."""
    return Frame(
        main=calendar_lines(anchor, selected, today, config, width, height),
        log=list(log_lines),
        help=browse_help(numeric_prefix),
        status=status_line(selected, config),
    )


def config_frame(
    items: Sequence[tuple[str, str]],
    cursor: int,
    selected: date,
    config: DisplayConfig,
    log_lines: Sequence[str] = (),
) -> Frame:
    """Full frame for the configuration screen."""
    main: List[Line] = [[], [Token("Configuration", Role.YEAR, bold=True)], []]
    for index, (label, value) in enumerate(items):
        main.append([Token(f"  {label}: {value}", reverse=index == cursor)])
        main.append([])

    return Frame(
        main=main,
        log=list(log_lines),
        help=[Token(CONFIG_HELP, Role.MUTED)],
        status=status_line(selected, config),
    )
