"""Interactive picker: key input, command decoding and the state machines."""

from .commands import Command, CommandKind, decode_browse_key, decode_config_key
from .configuration import DATE_FORMATS, ConfigField, ConfigOutcome, ConfigurationState
from .interactive import AppMode, InteractiveController, PickResult
from .keyboard import KeyboardHandler, KeyCode, KeyEvent
from .navigation import NavigationOutcome, NavigationState

__all__ = [
    "DATE_FORMATS",
    "AppMode",
    "Command",
    "CommandKind",
    "ConfigField",
    "ConfigOutcome",
    "ConfigurationState",
    "InteractiveController",
    "KeyCode",
    "KeyEvent",
    "KeyboardHandler",
    "NavigationOutcome",
    "NavigationState",
    "PickResult",
    "decode_browse_key",
    "decode_config_key",
]
