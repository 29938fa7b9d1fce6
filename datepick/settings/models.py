"""
Display configuration model using Pydantic for validation and serialization.

The field names match the keys of the JSON file written by earlier datepick
releases, so an existing ``~/.datepick`` keeps loading unchanged.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .exceptions import SettingsValidationError

logger = logging.getLogger(__name__)

COLOR_ROLES = ("year", "month", "day", "selected", "today", "weekend")

DEFAULT_COLORS: dict[str, int] = {
    "year": 14,  # cyan
    "month": 10,  # green
    "day": 15,  # white
    "selected": 11,  # yellow
    "today": 13,  # magenta
    "weekend": 9,  # red
}

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class DisplayConfig(BaseModel):
    """User-editable display and output settings.

    Attributes:
        date_format: strftime pattern used for the status line and the output
        months_before: Months shown before the anchor month
        months_after: Months shown after the anchor month
        week_starts_monday: Monday-first week rows when True, Sunday-first otherwise
        highlight_weekends: Colour Saturdays and Sundays with the weekend colour
        colors: Role name to 256-colour palette index

    Example:
        >>> config = DisplayConfig(months_after=3)
        >>> config.colors["selected"]
        11
    """

    date_format: str = Field(default=DEFAULT_DATE_FORMAT, description="strftime output pattern")
    months_before: int = Field(default=1, description="Months displayed before the anchor")
    months_after: int = Field(default=1, description="Months displayed after the anchor")
    week_starts_monday: bool = Field(default=True, description="Weeks start on Monday")
    highlight_weekends: bool = Field(default=True, description="Colour weekend days")
    colors: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_COLORS), description="Role to colour index"
    )

    @field_validator("colors", mode="before")
    @classmethod
    def fill_missing_colors(cls, v: Any) -> Any:
        """Merge stored colour assignments over the defaults.

        Args:
            v: Raw colour mapping from storage

        Returns:
            Mapping with every known role present
        """
        if not isinstance(v, dict):
            return v
        merged: dict[str, Any] = dict(DEFAULT_COLORS)
        merged.update(v)
        return merged

    @field_validator("colors")
    @classmethod
    def validate_color_range(cls, v: dict[str, int]) -> dict[str, int]:
        """Validate that every colour is a 256-colour palette index.

        Raises:
            SettingsValidationError: If a colour index is out of range
        """
        for role, color in v.items():
            if not 0 <= color <= 255:
                raise SettingsValidationError(
                    "Color index must be between 0 and 255",
                    field_name=f"colors.{role}",
                    field_value=color,
                )
        return v

    def color_for(self, role: str) -> int:
        """Colour index for ``role``, falling back to the default palette."""
        return self.colors.get(role, DEFAULT_COLORS.get(role, 15))
