"""Unit tests for the display configuration model."""

import pytest
from pydantic import ValidationError

from datepick.settings.exceptions import (
    SettingsError,
    SettingsPersistenceError,
    SettingsValidationError,
)
from datepick.settings.models import DEFAULT_COLORS, DisplayConfig


class TestDisplayConfigDefaults:
    """Test default values."""

    def test_defaults(self) -> None:
        config = DisplayConfig()

        assert config.date_format == "%Y-%m-%d"
        assert config.months_before == 1
        assert config.months_after == 1
        assert config.week_starts_monday is True
        assert config.highlight_weekends is True
        assert config.colors == DEFAULT_COLORS

    def test_default_colors_are_not_shared(self) -> None:
        first = DisplayConfig()
        first.colors["day"] = 1

        assert DisplayConfig().colors["day"] == 15


class TestDisplayConfigColors:
    """Test colour validation and merging."""

    def test_partial_colors_are_filled_from_defaults(self) -> None:
        config = DisplayConfig(colors={"selected": 3})

        assert config.colors["selected"] == 3
        assert config.colors["year"] == 14
        assert set(config.colors) == set(DEFAULT_COLORS)

    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_out_of_range_color_is_rejected(self, value: int) -> None:
        with pytest.raises(SettingsValidationError) as exc_info:
            DisplayConfig(colors={"today": value})

        assert exc_info.value.field_name == "colors.today"
        assert exc_info.value.field_value == value
        assert str(exc_info.value) == f"Color index must be between 0 and 255 (colors.today={value})"

    def test_non_integer_color_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(colors={"today": "purple"})

    def test_color_for_unknown_role_falls_back(self) -> None:
        assert DisplayConfig().color_for("nonexistent") == 15


class TestDisplayConfigSerialization:
    """Test the stored representation."""

    def test_dump_uses_storage_keys(self) -> None:
        data = DisplayConfig(months_after=3).model_dump()

        assert set(data) == {
            "date_format",
            "months_before",
            "months_after",
            "week_starts_monday",
            "highlight_weekends",
            "colors",
        }
        assert data["months_after"] == 3


class TestSettingsExceptions:
    """Test settings exception formatting."""

    def test_base_error_is_message(self) -> None:
        assert str(SettingsError("broken")) == "broken"

    def test_persistence_error_names_file_and_cause(self) -> None:
        error = SettingsPersistenceError(
            "Failed to save settings",
            operation="save",
            file_path="/tmp/.datepick",
            original_error=PermissionError("denied"),
        )

        assert error.operation == "save"
        assert isinstance(error.original_error, PermissionError)
        assert str(error) == "Failed to save settings (/tmp/.datepick): PermissionError: denied"

    def test_persistence_error_without_context_is_message(self) -> None:
        assert str(SettingsPersistenceError("Failed to save settings", operation="save")) == (
            "Failed to save settings"
        )
