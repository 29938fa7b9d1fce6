"""Navigation state management for interactive date selection."""

import logging
from datetime import date
from enum import Enum
from typing import Callable, Optional

from ..utils.dates import (
    add_days,
    add_months,
    add_years,
    days_since_week_start,
    days_until_week_end,
    first_of_month,
    format_date,
    last_of_month,
)
from .commands import Command, CommandKind

logger = logging.getLogger(__name__)


class NavigationOutcome(Enum):
    """What the controller should do after a browsing command."""

    CONTINUE = "continue"
    REDRAW = "redraw"
    ENTER_CONFIG = "enter_config"
    CONFIRM = "confirm"
    QUIT = "quit"


_DAY_STEPS = {
    CommandKind.MOVE_DAY_BACK: -1,
    CommandKind.MOVE_DAY_FORWARD: 1,
    CommandKind.MOVE_WEEK_BACK: -7,
    CommandKind.MOVE_WEEK_FORWARD: 7,
}

_MONTH_STEPS = {
    CommandKind.MOVE_MONTH_BACK: -1,
    CommandKind.MOVE_MONTH_FORWARD: 1,
}

_YEAR_STEPS = {
    CommandKind.MOVE_YEAR_BACK: -1,
    CommandKind.MOVE_YEAR_FORWARD: 1,
}

_TERMINAL_OUTCOMES = {
    CommandKind.ENTER_CONFIG: NavigationOutcome.ENTER_CONFIG,
    CommandKind.CONFIRM: NavigationOutcome.CONFIRM,
    CommandKind.QUIT: NavigationOutcome.QUIT,
    CommandKind.INTERRUPT: NavigationOutcome.QUIT,
    CommandKind.FORCE_REDRAW: NavigationOutcome.REDRAW,
}


class NavigationState:
    """Holds the selected date, the anchor month and the numeric prefix."""

    def __init__(
        self,
        initial_date: Optional[date] = None,
        today_provider: Callable[[], date] = date.today,
    ):
        """Initialize navigation state.

        Args:
            initial_date: Initial selected date, defaults to today
            today_provider: Callable returning the current date
        """
        self._today_provider = today_provider
        self._selected_date = initial_date or today_provider()
        self._anchor_month = first_of_month(self._selected_date)
        self._numeric_prefix = ""

        logger.debug(f"Navigation state initialized with date: {self._selected_date}")

    @property
    def selected_date(self) -> date:
        """Get the currently selected date."""
        return self._selected_date

    @property
    def anchor_month(self) -> date:
        """Get the month the visible grid is centred on."""
        return self._anchor_month

    @property
    def numeric_prefix(self) -> str:
        """Get the pending digit count, empty when none was typed."""
        return self._numeric_prefix

    @property
    def today(self) -> date:
        """Get today's date."""
        return self._today_provider()

    def handle(self, command: Command, week_starts_monday: bool) -> NavigationOutcome:
        """Apply a browsing command.

        Args:
            command: Decoded command
            week_starts_monday: Week-start convention for week-relative jumps

        Returns:
            What the controller should do next
        """
        kind = command.kind

        if kind is CommandKind.DIGIT:
            self._numeric_prefix += command.digit or ""
            return NavigationOutcome.CONTINUE

        if kind is CommandKind.EXECUTE_JUMP:
            self._execute_jump()
            return NavigationOutcome.CONTINUE

        self._numeric_prefix = ""

        if kind in _TERMINAL_OUTCOMES:
            return _TERMINAL_OUTCOMES[kind]

        if kind is CommandKind.TODAY:
            self.jump_to_today()
            return NavigationOutcome.CONTINUE

        try:
            target = self._target_for(kind, week_starts_monday)
        except (OverflowError, ValueError) as e:
            logger.debug(f"Ignoring {kind.name} from {self._selected_date}: {e}")
            return NavigationOutcome.CONTINUE

        if target is None:
            logger.debug(f"Ignoring command in browsing mode: {kind}")
        else:
            self._select(target)
        return NavigationOutcome.CONTINUE

    def _target_for(self, kind: CommandKind, week_starts_monday: bool) -> Optional[date]:
        """Date a movement command leads to, or None for non-movement commands.

        Raises:
            OverflowError: If the target lies outside the supported date range
            ValueError: If the target year is outside the supported date range
        """
        current = self._selected_date
        if kind in _DAY_STEPS:
            return add_days(current, _DAY_STEPS[kind])
        if kind in _MONTH_STEPS:
            return add_months(current, _MONTH_STEPS[kind])
        if kind in _YEAR_STEPS:
            return add_years(current, _YEAR_STEPS[kind])
        if kind is CommandKind.START_OF_WEEK:
            return add_days(current, -days_since_week_start(current, week_starts_monday))
        if kind is CommandKind.END_OF_WEEK:
            return add_days(current, days_until_week_end(current, week_starts_monday))
        if kind is CommandKind.START_OF_MONTH:
            return first_of_month(current)
        if kind is CommandKind.END_OF_MONTH:
            return last_of_month(current)
        return None

    def jump_to_today(self) -> date:
        """Select today and centre the grid on today itself.

        Returns:
            Today's date
        """
        today = self.today
        old_date = self._selected_date
        self._selected_date = today
        self._anchor_month = today

        logger.debug(f"Jumped to today: {old_date} -> {today}")
        return today

    def _execute_jump(self) -> None:
        """Move forward by the accumulated numeric prefix, if any.

        A jump past the last supported date leaves the selection unchanged.
        """
        if not self._numeric_prefix:
            return
        days = int(self._numeric_prefix)
        self._numeric_prefix = ""
        try:
            target = add_days(self._selected_date, days)
        except OverflowError as e:
            logger.debug(f"Ignoring jump of {days} days from {self._selected_date}: {e}")
            return
        self._select(target)

    def _select(self, new_date: date) -> None:
        old_date = self._selected_date
        self._selected_date = new_date
        self._anchor_month = first_of_month(new_date)
        logger.debug(f"Selected date changed: {old_date} -> {new_date}")

    def formatted(self, pattern: str) -> str:
        """Get the selected date formatted with a strftime pattern."""
        return format_date(self._selected_date, pattern)

    def __str__(self) -> str:
        """String representation of navigation state."""
        return f"NavigationState(selected={self._selected_date}, anchor={self._anchor_month})"

    def __repr__(self) -> str:
        """Detailed string representation."""
        return (
            f"NavigationState(selected_date={self._selected_date!r}, "
            f"anchor_month={self._anchor_month!r}, "
            f"numeric_prefix={self._numeric_prefix!r})"
        )
