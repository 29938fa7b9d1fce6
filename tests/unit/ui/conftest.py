"""Shared fixtures for UI tests."""

from datetime import date
from typing import Iterator
from unittest.mock import AsyncMock, Mock, patch

import pytest

from datepick.display.console_renderer import ConsoleRenderer
from datepick.settings.persistence import SettingsPersistence
from datepick.ui.configuration import ConfigurationState
from datepick.ui.interactive import InteractiveController
from datepick.ui.keyboard import KeyboardHandler, KeyCode, KeyEvent
from datepick.ui.navigation import NavigationState


def _key(key_name: str) -> KeyEvent:
    """Build a key event from a short name or a single character."""
    named = {
        "enter": KeyCode.ENTER,
        "esc": KeyCode.ESCAPE,
        "up": KeyCode.UP_ARROW,
        "down": KeyCode.DOWN_ARROW,
        "left": KeyCode.LEFT_ARROW,
        "right": KeyCode.RIGHT_ARROW,
        "home": KeyCode.HOME,
        "end": KeyCode.END,
        "backspace": KeyCode.BACKSPACE,
        "ctrl-c": KeyCode.INTERRUPT,
        "unknown": KeyCode.UNKNOWN,
    }
    if key_name in named:
        return KeyEvent(named[key_name])
    return KeyEvent.of_char(key_name)


@pytest.fixture
def key():
    """Key event builder: named keys such as 'enter' or 'up', otherwise a character."""
    return _key


@pytest.fixture
def navigation(today_provider) -> NavigationState:
    """Navigation state starting on the fixed today."""
    return NavigationState(today_provider=today_provider)


@pytest.fixture
def configuration(display_config, today_provider) -> ConfigurationState:
    return ConfigurationState(display_config, today_provider)


@pytest.fixture
def mock_persistence() -> Mock:
    persistence = Mock(spec=SettingsPersistence)
    persistence.save_config.return_value = True
    return persistence


@pytest.fixture
def mock_renderer() -> Mock:
    """Renderer mock with a fixed 80x24 geometry and an empty log area."""
    renderer = Mock(spec=ConsoleRenderer)
    renderer.geometry.return_value = (80, 24)
    renderer.log_lines.return_value = []
    renderer.paint.return_value = True
    return renderer


@pytest.fixture
def mock_keyboard() -> Mock:
    keyboard = Mock(spec=KeyboardHandler)
    keyboard.read_key = AsyncMock()
    return keyboard


@pytest.fixture
def controller(display_config, mock_persistence, mock_keyboard, mock_renderer, today_provider):
    return InteractiveController(
        display_config,
        mock_persistence,
        mock_keyboard,
        mock_renderer,
        today_provider=today_provider,
    )


@pytest.fixture
def feed_keys(mock_keyboard):
    """Queue keys, by name, to be returned by the keyboard mock in order."""

    def _feed(*key_names: str) -> None:
        mock_keyboard.read_key.side_effect = [_key(key_name) for key_name in key_names]

    return _feed


@pytest.fixture
def raw_keyboard() -> Iterator[KeyboardHandler]:
    """Keyboard handler built as if stdin were a terminal."""
    with patch("datepick.ui.keyboard.sys.stdin") as mock_stdin:
        mock_stdin.isatty.return_value = True
        handler = KeyboardHandler()
    yield handler


@pytest.fixture
def fallback_keyboard() -> Iterator[KeyboardHandler]:
    """Keyboard handler built as if stdin were a pipe."""
    with patch("datepick.ui.keyboard.sys.stdin") as mock_stdin:
        mock_stdin.isatty.return_value = False
        handler = KeyboardHandler()
    yield handler


@pytest.fixture
def fixed_date() -> date:
    return date(2024, 1, 1)
