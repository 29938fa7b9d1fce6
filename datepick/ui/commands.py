"""Command vocabulary for the picker and the key bindings that produce it.

Keys are decoded once, at the input boundary, into a closed set of commands.
Each state machine then matches only on :class:`CommandKind`.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .keyboard import KeyCode, KeyEvent


class CommandKind(Enum):
    """Every command the picker understands."""

    # Browsing
    MOVE_DAY_BACK = auto()
    MOVE_DAY_FORWARD = auto()
    MOVE_WEEK_BACK = auto()
    MOVE_WEEK_FORWARD = auto()
    MOVE_MONTH_BACK = auto()
    MOVE_MONTH_FORWARD = auto()
    MOVE_YEAR_BACK = auto()
    MOVE_YEAR_FORWARD = auto()
    START_OF_WEEK = auto()
    END_OF_WEEK = auto()
    START_OF_MONTH = auto()
    END_OF_MONTH = auto()
    TODAY = auto()
    DIGIT = auto()
    EXECUTE_JUMP = auto()
    ENTER_CONFIG = auto()
    CONFIRM = auto()
    QUIT = auto()
    FORCE_REDRAW = auto()

    # Configuring
    CURSOR_UP = auto()
    CURSOR_DOWN = auto()
    ACTIVATE = auto()
    CANCEL = auto()

    # Any mode
    INTERRUPT = auto()
    UNBOUND = auto()


@dataclass(frozen=True)
class Command:
    """A decoded command; ``digit`` is set only for ``CommandKind.DIGIT``."""

    kind: CommandKind
    digit: Optional[str] = None


BROWSE_CHAR_BINDINGS: dict[str, CommandKind] = {
    "q": CommandKind.QUIT,
    "Q": CommandKind.QUIT,
    "c": CommandKind.ENTER_CONFIG,
    "C": CommandKind.ENTER_CONFIG,
    "h": CommandKind.MOVE_DAY_BACK,
    "l": CommandKind.MOVE_DAY_FORWARD,
    "k": CommandKind.MOVE_WEEK_BACK,
    "K": CommandKind.MOVE_WEEK_BACK,
    "b": CommandKind.MOVE_WEEK_BACK,
    "B": CommandKind.MOVE_WEEK_BACK,
    "j": CommandKind.MOVE_WEEK_FORWARD,
    "J": CommandKind.MOVE_WEEK_FORWARD,
    "w": CommandKind.MOVE_WEEK_FORWARD,
    "W": CommandKind.MOVE_WEEK_FORWARD,
    "p": CommandKind.MOVE_MONTH_BACK,
    "n": CommandKind.MOVE_MONTH_FORWARD,
    "P": CommandKind.MOVE_YEAR_BACK,
    "N": CommandKind.MOVE_YEAR_FORWARD,
    "H": CommandKind.START_OF_WEEK,
    "^": CommandKind.START_OF_WEEK,
    "L": CommandKind.END_OF_WEEK,
    "$": CommandKind.END_OF_WEEK,
    "t": CommandKind.TODAY,
    "T": CommandKind.TODAY,
    "g": CommandKind.EXECUTE_JUMP,
    "r": CommandKind.FORCE_REDRAW,
    "R": CommandKind.FORCE_REDRAW,
}

BROWSE_KEY_BINDINGS: dict[KeyCode, CommandKind] = {
    KeyCode.ENTER: CommandKind.CONFIRM,
    KeyCode.LEFT_ARROW: CommandKind.MOVE_DAY_BACK,
    KeyCode.RIGHT_ARROW: CommandKind.MOVE_DAY_FORWARD,
    KeyCode.UP_ARROW: CommandKind.MOVE_WEEK_BACK,
    KeyCode.DOWN_ARROW: CommandKind.MOVE_WEEK_FORWARD,
    KeyCode.HOME: CommandKind.START_OF_MONTH,
    KeyCode.END: CommandKind.END_OF_MONTH,
    KeyCode.INTERRUPT: CommandKind.INTERRUPT,
}

CONFIG_CHAR_BINDINGS: dict[str, CommandKind] = {
    "q": CommandKind.CANCEL,
    "Q": CommandKind.CANCEL,
    "k": CommandKind.CURSOR_UP,
    "K": CommandKind.CURSOR_UP,
    "j": CommandKind.CURSOR_DOWN,
    "J": CommandKind.CURSOR_DOWN,
}

CONFIG_KEY_BINDINGS: dict[KeyCode, CommandKind] = {
    KeyCode.ESCAPE: CommandKind.CANCEL,
    KeyCode.UP_ARROW: CommandKind.CURSOR_UP,
    KeyCode.DOWN_ARROW: CommandKind.CURSOR_DOWN,
    KeyCode.ENTER: CommandKind.ACTIVATE,
    KeyCode.INTERRUPT: CommandKind.INTERRUPT,
}


def decode_browse_key(event: KeyEvent) -> Command:
    """Translate a key event into a browsing command."""
    if event.code is KeyCode.CHAR and event.char is not None:
        if event.char.isdigit() and event.char.isascii():
            return Command(CommandKind.DIGIT, digit=event.char)
        return Command(BROWSE_CHAR_BINDINGS.get(event.char, CommandKind.UNBOUND))
    return Command(BROWSE_KEY_BINDINGS.get(event.code, CommandKind.UNBOUND))


def decode_config_key(event: KeyEvent) -> Command:
    """Translate a key event into a configuration command."""
    if event.code is KeyCode.CHAR and event.char is not None:
        return Command(CONFIG_CHAR_BINDINGS.get(event.char, CommandKind.UNBOUND))
    return Command(CONFIG_KEY_BINDINGS.get(event.code, CommandKind.UNBOUND))
