"""Configuration editing state for the picker's settings screen."""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Callable, Optional

from ..settings.models import DisplayConfig
from ..utils.dates import format_date
from .commands import Command, CommandKind

logger = logging.getLogger(__name__)

# Common date formats for quick selection
DATE_FORMATS: dict[str, str] = {
    "1": "%Y-%m-%d",  # ISO format
    "2": "%d/%m/%Y",  # European
    "3": "%m/%d/%Y",  # US format
    "4": "%B %d, %Y",  # Long format
    "5": "%b %d, %Y",  # Abbreviated
    "6": "%Y%m%d",  # Compact
    "7": "%d-%b-%Y",  # DD-Mon-YYYY
    "8": "%A, %B %d, %Y",  # Full with weekday
}


class ConfigField(IntEnum):
    """Editable rows of the configuration screen, in display order."""

    DATE_FORMAT = 0
    MONTHS_BEFORE = 1
    MONTHS_AFTER = 2
    WEEK_STARTS_MONDAY = 3
    SAVE_AND_EXIT = 4


FIELD_COUNT = len(ConfigField)

FIELD_LABELS = {
    ConfigField.DATE_FORMAT: "Date format",
    ConfigField.MONTHS_BEFORE: "Months before",
    ConfigField.MONTHS_AFTER: "Months after",
    ConfigField.WEEK_STARTS_MONDAY: "Week starts Monday",
    ConfigField.SAVE_AND_EXIT: "Save and exit config",
}


class ConfigOutcome(Enum):
    """What the controller should do after a configuration command."""

    CONTINUE = "continue"
    PROMPT = "prompt"
    EXIT = "exit"
    SAVE_AND_EXIT = "save_and_exit"
    QUIT = "quit"


@dataclass(frozen=True)
class PromptRequest:
    """Text input the controller must collect for a field."""

    field: ConfigField
    label: str
    default: str
    help_text: Optional[str] = None


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


class ConfigurationState:
    """Cursor over the editable settings plus the edits applied to them.

    Edits to the first four fields change ``config`` in place as soon as they
    are confirmed; only ``SAVE_AND_EXIT`` asks for the configuration to be
    written to storage.
    """

    def __init__(
        self, config: DisplayConfig, today_provider: Callable[[], date] = date.today
    ) -> None:
        """Initialize configuration state.

        Args:
            config: Display configuration edited in place
            today_provider: Callable returning the date used for format examples
        """
        self.config = config
        self._today_provider = today_provider
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Index of the highlighted field."""
        return self._cursor

    @property
    def current_field(self) -> ConfigField:
        return ConfigField(self._cursor)

    def reset(self) -> None:
        """Move the cursor back to the first field."""
        self._cursor = 0

    def handle(self, command: Command) -> ConfigOutcome:
        """Apply a configuration command.

        Args:
            command: Decoded command

        Returns:
            What the controller should do next
        """
        kind = command.kind

        if kind is CommandKind.CURSOR_UP:
            self._cursor = (self._cursor - 1) % FIELD_COUNT
        elif kind is CommandKind.CURSOR_DOWN:
            self._cursor = (self._cursor + 1) % FIELD_COUNT
        elif kind is CommandKind.CANCEL:
            return ConfigOutcome.EXIT
        elif kind is CommandKind.INTERRUPT:
            return ConfigOutcome.QUIT
        elif kind is CommandKind.ACTIVATE:
            return self._activate()

        return ConfigOutcome.CONTINUE

    def _activate(self) -> ConfigOutcome:
        field = self.current_field
        if field is ConfigField.WEEK_STARTS_MONDAY:
            self.config.week_starts_monday = not self.config.week_starts_monday
            logger.debug(f"Week starts Monday: {self.config.week_starts_monday}")
            return ConfigOutcome.CONTINUE
        if field is ConfigField.SAVE_AND_EXIT:
            return ConfigOutcome.SAVE_AND_EXIT
        return ConfigOutcome.PROMPT

    def prompt_for(self, field: ConfigField) -> PromptRequest:
        """Describe the text prompt for a field that needs typed input."""
        label = FIELD_LABELS[field]
        if field is ConfigField.DATE_FORMAT:
            return PromptRequest(field, label, self.config.date_format, self.format_catalog_help())
        if field is ConfigField.MONTHS_BEFORE:
            return PromptRequest(field, label, str(self.config.months_before))
        if field is ConfigField.MONTHS_AFTER:
            return PromptRequest(field, label, str(self.config.months_after))
        raise ValueError(f"Field {field.name} does not take text input")

    def format_catalog_help(self) -> str:
        """One-line list of the quick formats rendered with today's date."""
        today = self._today_provider()
        return " | ".join(
            f"{key}: {format_date(today, pattern)}" for key, pattern in DATE_FORMATS.items()
        )

    def apply_text(self, field: ConfigField, text: Optional[str]) -> bool:
        """Apply text typed at a prompt.

        Args:
            field: Field the prompt was shown for
            text: Entered text, None when the prompt was cancelled

        Returns:
            True if the configuration changed
        """
        if text is None:
            return False
        text = text.strip()

        if field is ConfigField.DATE_FORMAT:
            return self._apply_date_format(text)
        if field is ConfigField.MONTHS_BEFORE:
            return self._apply_months_before(text)
        if field is ConfigField.MONTHS_AFTER:
            return self._apply_months_after(text)
        return False

    def _apply_date_format(self, text: str) -> bool:
        if text in DATE_FORMATS:
            self.config.date_format = DATE_FORMATS[text]
        elif text:
            self.config.date_format = text
        else:
            return False
        logger.debug(f"Date format set to {self.config.date_format!r}")
        return True

    def _apply_months_before(self, text: str) -> bool:
        # Negative values are accepted here, unlike months after
        if not text or text == str(self.config.months_before):
            return False
        value = _parse_int(text)
        if value is None:
            logger.debug(f"Ignoring non-numeric months before: {text!r}")
            return False
        self.config.months_before = value
        return True

    def _apply_months_after(self, text: str) -> bool:
        value = _parse_int(text)
        if value is None or value <= 0:
            logger.debug(f"Ignoring months after value: {text!r}")
            return False
        self.config.months_after = value
        return True

    def items(self) -> list[tuple[str, str]]:
        """Label and value text for every row of the configuration screen."""
        return [
            (FIELD_LABELS[ConfigField.DATE_FORMAT], self.config.date_format),
            (FIELD_LABELS[ConfigField.MONTHS_BEFORE], str(self.config.months_before)),
            (FIELD_LABELS[ConfigField.MONTHS_AFTER], str(self.config.months_after)),
            (
                FIELD_LABELS[ConfigField.WEEK_STARTS_MONDAY],
                "Yes" if self.config.week_starts_monday else "No",
            ),
            (FIELD_LABELS[ConfigField.SAVE_AND_EXIT], "Press Enter"),
        ]
