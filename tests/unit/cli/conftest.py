"""Fixtures for CLI tests."""

import io
from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from datepick.config.settings import DatePickSettings
from datepick.ui.interactive import PickResult


@pytest.fixture
def cli_settings(tmp_path: Path) -> DatePickSettings:
    """Settings pointing at a temporary display configuration file."""
    return DatePickSettings(
        config_dir=tmp_path / "config",
        data_dir=tmp_path / "data",
        display_config_file=tmp_path / ".datepick",
    )


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def patched_picker() -> Iterator[MagicMock]:
    """Replace the keyboard and controller used by the interactive mode.

    Yields the controller class mock; set ``return_value.run`` to choose the
    session result.
    """
    with patch("datepick.cli.modes.interactive.KeyboardHandler") as keyboard_cls, patch(
        "datepick.cli.modes.interactive.InteractiveController"
    ) as controller_cls:
        keyboard_cls.return_value.__enter__.return_value = MagicMock()
        controller_cls.return_value.run = AsyncMock(return_value=PickResult())
        yield controller_cls
