"""Keyboard input handling for the interactive picker."""

import asyncio
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.02
MAX_ESCAPE_SEQUENCE = 8


class KeyCode(Enum):
    """Logical key vocabulary delivered to the state machines."""

    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    UP_ARROW = "up"
    DOWN_ARROW = "down"
    LEFT_ARROW = "left"
    RIGHT_ARROW = "right"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    INTERRUPT = "interrupt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press; ``char`` is set for printable characters."""

    code: KeyCode
    char: Optional[str] = None

    @classmethod
    def of_char(cls, char: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, char)


class KeyboardHandler:
    """Reads raw terminal input one key at a time.

    Use as a context manager so the terminal is put in raw mode for the
    duration of the picker and always restored afterwards.
    """

    def __init__(self) -> None:
        """Initialize keyboard handler."""
        self._old_settings: Optional[list[Any]] = None
        self._fallback_mode = False
        self._pending: list[KeyEvent] = []
        self._setup_platform_input()

        logger.debug("Keyboard handler initialized")

    def _setup_platform_input(self) -> None:
        """Set up platform-specific keyboard input handling."""
        if not hasattr(sys.stdin, "isatty") or not sys.stdin.isatty():
            self._setup_fallback_input()
            return

        def _getch() -> str:
            """Read a single character, empty string on timeout."""
            return sys.stdin.read(1)

        def _kbhit() -> bool:
            """Check for available input using select."""
            import select  # noqa: PLC0415

            return select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], [])

        self._getch: Callable[[], str] = _getch
        self._kbhit: Callable[[], bool] = _kbhit

    def _setup_fallback_input(self) -> None:
        """Line-based input for non-terminal stdin, one key name per line."""
        logger.info("Using fallback input method - one key per line")
        self._fallback_mode = True

        def _getch_fallback() -> str:
            line = sys.stdin.readline()
            if not line:
                return "\x03"
            return line.rstrip("\n")

        def _kbhit_fallback() -> bool:
            return True

        self._getch = _getch_fallback
        self._kbhit = _kbhit_fallback

    def _setup_terminal(self) -> None:
        """Set up terminal for raw input mode on Unix systems."""
        if self._fallback_mode or sys.platform == "win32":
            return
        try:
            import termios  # noqa: PLC0415

            fd = sys.stdin.fileno()
            self._old_settings = termios.tcgetattr(fd)

            new_settings = termios.tcgetattr(fd)
            new_settings[3] &= ~(termios.ICANON | termios.ECHO)
            new_settings[6][termios.VMIN] = 0
            new_settings[6][termios.VTIME] = 1

            termios.tcsetattr(fd, termios.TCSAFLUSH, new_settings)
            logger.debug("Terminal set to raw input mode with timeout")

        except Exception as e:
            logger.warning(f"Could not set terminal to raw mode: {e}")
            self._setup_fallback_input()

    def _restore_terminal(self) -> None:
        """Restore terminal settings on Unix systems."""
        if not self._old_settings:
            return
        try:
            import termios  # noqa: PLC0415

            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._old_settings)
            self._old_settings = None
            logger.debug("Terminal settings restored")
        except Exception as e:
            logger.warning(f"Could not restore terminal settings: {e}")

    def __enter__(self) -> "KeyboardHandler":
        self._setup_terminal()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._restore_terminal()

    def parse_key_sequence(self, key_data: str) -> KeyEvent:
        """Parse raw key data into a KeyEvent.

        Args:
            key_data: Raw key data from input

        Returns:
            Corresponding KeyEvent
        """
        if not key_data:
            return KeyEvent(KeyCode.UNKNOWN)
        if self._fallback_mode and len(key_data) > 1:
            return self._parse_fallback_name(key_data)
        if len(key_data) == 1:
            return self._parse_single_char(key_data)
        if key_data.startswith(("\x1b[", "\x1bO")):
            return self._parse_escape_sequence(key_data[2:])
        return KeyEvent(KeyCode.UNKNOWN)

    def _parse_single_char(self, char: str) -> KeyEvent:
        """Parse a single character input."""
        char_mappings = {
            "\x1b": KeyCode.ESCAPE,
            "\r": KeyCode.ENTER,
            "\n": KeyCode.ENTER,
            "\x7f": KeyCode.BACKSPACE,
            "\x08": KeyCode.BACKSPACE,
            "\x03": KeyCode.INTERRUPT,
        }
        if char in char_mappings:
            return KeyEvent(char_mappings[char])
        if char.isprintable():
            return KeyEvent.of_char(char)
        return KeyEvent(KeyCode.UNKNOWN)

    def _parse_escape_sequence(self, sequence: str) -> KeyEvent:
        """Parse an escape sequence without its ``ESC [`` or ``ESC O`` prefix."""
        escape_mappings = {
            "A": KeyCode.UP_ARROW,
            "B": KeyCode.DOWN_ARROW,
            "C": KeyCode.RIGHT_ARROW,
            "D": KeyCode.LEFT_ARROW,
        }

        # Home and End keys can have multiple representations
        if sequence in {"H", "1~", "7~"}:
            return KeyEvent(KeyCode.HOME)
        if sequence in {"F", "4~", "8~"}:
            return KeyEvent(KeyCode.END)

        return KeyEvent(escape_mappings.get(sequence, KeyCode.UNKNOWN))

    def _parse_fallback_name(self, name: str) -> KeyEvent:
        """Parse a named key typed on its own line in fallback mode."""
        fallback_mappings = {
            "left": KeyCode.LEFT_ARROW,
            "right": KeyCode.RIGHT_ARROW,
            "up": KeyCode.UP_ARROW,
            "down": KeyCode.DOWN_ARROW,
            "home": KeyCode.HOME,
            "end": KeyCode.END,
            "enter": KeyCode.ENTER,
            "esc": KeyCode.ESCAPE,
            "escape": KeyCode.ESCAPE,
            "backspace": KeyCode.BACKSPACE,
        }
        return KeyEvent(fallback_mappings.get(name.strip().lower(), KeyCode.UNKNOWN))

    def _read_key_sequence(self) -> str:
        """Read a complete key sequence, gathering escape sequences."""
        key_data = self._getch()

        if key_data == "\x1b" and not self._fallback_mode:
            sequence = key_data
            # With VTIME=1, _getch() returns "" once the sequence is exhausted
            while len(sequence) < MAX_ESCAPE_SEQUENCE:
                next_char = self._getch()
                if not next_char:
                    break
                sequence += next_char
                if len(sequence) > 2 and (next_char.isalpha() or next_char == "~"):
                    break
            logger.debug(f"Escape sequence read: {sequence!r}")
            return sequence

        return key_data

    def _next_events(self, key_data: str) -> list[KeyEvent]:
        """Split raw data into events; fallback lines may hold several keys."""
        if self._fallback_mode and len(key_data) > 1:
            event = self._parse_fallback_name(key_data)
            if event.code is KeyCode.UNKNOWN:
                return [self.parse_key_sequence(char) for char in key_data]
            return [event]
        if self._fallback_mode and key_data == "":
            return [KeyEvent(KeyCode.ENTER)]
        return [self.parse_key_sequence(key_data)]

    async def read_key(self) -> KeyEvent:
        """Wait for the next key press.

        Returns:
            The decoded key event
        """
        while not self._pending:
            if self._kbhit():
                key_data = self._read_key_sequence()
                if key_data or self._fallback_mode:
                    self._pending.extend(self._next_events(key_data))
                    continue
            await asyncio.sleep(POLL_INTERVAL)

        event = self._pending.pop(0)
        logger.debug(f"Key event: {event}")
        return event

    @property
    def is_raw_mode(self) -> bool:
        """Check if the terminal is currently in raw mode."""
        return self._old_settings is not None
