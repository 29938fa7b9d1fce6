"""ANSI terminal painter for the picker."""

import logging
import shutil
import sys
from collections import deque
from typing import Deque, List, Optional, Sequence, TextIO, Tuple

from ..settings.models import DisplayConfig
from .layout_tokens import Frame, Line, Role, Token

logger = logging.getLogger(__name__)

CSI = "\033["
RESET = f"{CSI}0m"
CLEAR_SCREEN = f"{CSI}H{CSI}2J"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
ENTER_ALT_SCREEN = f"{CSI}?1049h"
LEAVE_ALT_SCREEN = f"{CSI}?1049l"

MUTED_COLOR = 245
WEEKDAY_HEADER_COLOR = 244
WEEKEND_HEADER_COLOR = 88
SELECTED_BACKGROUND = 236
DEFAULT_GEOMETRY = (80, 24)


class ConsoleRenderer:
    """Paints frames with ANSI escape codes.

    The picker UI goes to stderr by default so that stdout only ever carries
    the selected date.
    """

    def __init__(
        self, config: DisplayConfig, stream: Optional[TextIO] = None, max_log_lines: int = 3
    ) -> None:
        """Initialize console renderer.

        Args:
            config: Display configuration providing the colour palette
            stream: Output stream, defaults to stderr
            max_log_lines: Number of log lines kept for the log area
        """
        self.config = config
        self.stream = stream or sys.stderr
        self.log_area_lines: Deque[str] = deque(maxlen=max_log_lines)
        self._prev_content: Optional[str] = None
        self._active = False

        logger.debug("Console renderer initialized")

    def geometry(self) -> Tuple[int, int]:
        """Terminal size as (columns, rows)."""
        size = shutil.get_terminal_size(DEFAULT_GEOMETRY)
        return size.columns, size.lines

    def start(self) -> None:
        """Switch to the alternate screen and hide the cursor."""
        self._write(ENTER_ALT_SCREEN + HIDE_CURSOR + CLEAR_SCREEN)
        self._active = True

    def stop(self) -> None:
        """Restore the cursor and the original screen."""
        if not self._active:
            return
        self._write(RESET + SHOW_CURSOR + LEAVE_ALT_SCREEN)
        self._active = False

    def invalidate(self) -> None:
        """Force the next paint to redraw even if nothing changed."""
        self._prev_content = None

    def update_log_area(self, lines: Sequence[str]) -> None:
        """Replace the lines shown in the log area."""
        self.log_area_lines.clear()
        self.log_area_lines.extend(lines)

    def log_lines(self) -> List[str]:
        return list(self.log_area_lines)

    def paint(self, frame: Frame, force: bool = False) -> bool:
        """Paint a frame, skipping it when identical to the previous one.

        Args:
            frame: Frame to draw
            force: Redraw even if the content did not change

        Returns:
            True if the screen was redrawn
        """
        content = frame.text()
        if not force and content == self._prev_content:
            return False

        _, rows = self.geometry()
        out = [CLEAR_SCREEN]
        for line in frame.main[: max(rows - 4 - len(frame.log), 0)]:
            out.append(self.render_line(line) + "\r\n")

        log_top = rows - 3 - len(frame.log)
        for offset, text in enumerate(frame.log):
            out.append(self._move(log_top + offset) + self._style(MUTED_COLOR) + text + RESET)

        out.append(self._move(rows - 2) + self.render_line(frame.help))
        out.append(self._move(rows) + self.render_line(frame.status))

        self._write("".join(out))
        self._prev_content = content
        return True

    def paint_prompt(self, label: str, text: str, help_text: Optional[str] = None) -> None:
        """Draw a one-line text prompt above the help line."""
        _, rows = self.geometry()
        out = []
        if help_text:
            out.append(self._move(rows - 5) + f"{CSI}2K" + self._style(MUTED_COLOR) + help_text + RESET)
        out.append(self._move(rows - 4) + f"{CSI}2K" + f"{label}: {text}" + SHOW_CURSOR)
        self._write("".join(out))

    def end_prompt(self) -> None:
        self._write(HIDE_CURSOR)
        self.invalidate()

    def render_line(self, line: Line) -> str:
        """Render tokens to a string with ANSI styling."""
        return "".join(self.render_token(token) for token in line)

    def render_token(self, token: Token) -> str:
        codes = []
        if token.bold:
            codes.append("1")
        if token.underline:
            codes.append("4")
        if token.reverse:
            codes.append("7")

        color = self._role_color(token.role)
        if color is not None:
            codes.append(f"38;5;{color}")
        if token.role is Role.SELECTED:
            codes.append(f"48;5;{SELECTED_BACKGROUND}")

        if not codes:
            return token.text
        return f"{CSI}{';'.join(codes)}m{token.text}{RESET}"

    def _role_color(self, role: Role) -> Optional[int]:
        if role is Role.NORMAL:
            return None
        if role is Role.MUTED:
            return MUTED_COLOR
        if role is Role.WEEKDAY_HEADER:
            return WEEKDAY_HEADER_COLOR
        if role is Role.WEEKEND_HEADER:
            return WEEKEND_HEADER_COLOR
        if role is Role.STATUS:
            return self.config.color_for(Role.SELECTED.value)
        return self.config.color_for(role.value)

    @staticmethod
    def _move(row: int) -> str:
        return f"{CSI}{max(row, 1)};1H"

    @staticmethod
    def _style(color: int) -> str:
        return f"{CSI}38;5;{color}m"

    def _write(self, data: str) -> None:
        try:
            self.stream.write(data)
            self.stream.flush()
        except OSError as e:
            logger.warning(f"Failed to write to terminal: {e}")
