"""Fixtures for display settings tests."""

from pathlib import Path

import pytest

from datepick.settings.persistence import SettingsPersistence


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Location of the display configuration file inside a temp home."""
    return tmp_path / "home" / ".datepick"


@pytest.fixture
def persistence(config_path: Path) -> SettingsPersistence:
    return SettingsPersistence(config_path)


@pytest.fixture
def write_config(config_path: Path):
    """Write raw text to the configuration file."""

    def _write(text: str) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(text, encoding="utf-8")
        return config_path

    return _write
