"""Interactive UI controller for date picking."""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional, Tuple

from ..display.console_renderer import ConsoleRenderer
from ..display.layout_tokens import Frame, calendar_frame, config_frame
from ..settings.exceptions import SettingsPersistenceError
from ..settings.models import DisplayConfig
from ..settings.persistence import SettingsPersistence
from .commands import decode_browse_key, decode_config_key
from .configuration import ConfigOutcome, ConfigurationState, PromptRequest
from .keyboard import KeyboardHandler, KeyCode, KeyEvent
from .navigation import NavigationOutcome, NavigationState

logger = logging.getLogger(__name__)


class AppMode(Enum):
    """Which screen currently owns the keyboard."""

    BROWSING = "browsing"
    CONFIGURING = "configuring"


@dataclass
class AppState:
    """Top-level picker state."""

    mode: AppMode
    navigation: NavigationState
    configuration: ConfigurationState
    config: DisplayConfig


@dataclass(frozen=True)
class PickResult:
    """Outcome of a picker session; both fields are None when the user quit."""

    selected: Optional[date] = None
    output: Optional[str] = None

    @property
    def confirmed(self) -> bool:
        return self.selected is not None


QUIT_RESULT = PickResult()


class InteractiveController:
    """Controls the picker: reads keys, drives the state machines, repaints."""

    def __init__(
        self,
        config: DisplayConfig,
        persistence: SettingsPersistence,
        keyboard: KeyboardHandler,
        renderer: ConsoleRenderer,
        initial_date: Optional[date] = None,
        today_provider: Callable[[], date] = date.today,
    ):
        """Initialize interactive controller.

        Args:
            config: Display configuration, edited in place by the config screen
            persistence: Storage used by "save and exit"
            keyboard: Key event source
            renderer: Painter for frames and prompts
            initial_date: Initially selected date, defaults to today
            today_provider: Callable returning the current date
        """
        self.persistence = persistence
        self.keyboard = keyboard
        self.renderer = renderer

        self.state = AppState(
            mode=AppMode.BROWSING,
            navigation=NavigationState(initial_date, today_provider),
            configuration=ConfigurationState(config, today_provider),
            config=config,
        )

        logger.info("Interactive controller initialized")

    @property
    def mode(self) -> AppMode:
        return self.state.mode

    @property
    def navigation(self) -> NavigationState:
        return self.state.navigation

    @property
    def configuration(self) -> ConfigurationState:
        return self.state.configuration

    @property
    def config(self) -> DisplayConfig:
        return self.state.config

    async def run(self) -> PickResult:
        """Run the picker until the user confirms a date or quits.

        Returns:
            The picked date and its formatted text, or an empty result on quit
        """
        logger.info("Starting interactive date picker")
        self.renderer.start()
        try:
            self.repaint(force=True)
            while True:
                key = await self.keyboard.read_key()
                result = await self.dispatch(key)
                if result is not None:
                    return result
        except KeyboardInterrupt:
            logger.debug("Keyboard interrupt, quitting")
            return QUIT_RESULT
        finally:
            self.renderer.stop()
            logger.info("Interactive date picker stopped")

    async def dispatch(self, key: KeyEvent) -> Optional[PickResult]:
        """Route one key to the state machine of the active mode.

        Args:
            key: Key event to handle

        Returns:
            A result when the session is over, otherwise None
        """
        if self.state.mode is AppMode.BROWSING:
            return self._dispatch_browsing(key)
        return await self._dispatch_configuring(key)

    def _dispatch_browsing(self, key: KeyEvent) -> Optional[PickResult]:
        command = decode_browse_key(key)
        outcome = self.navigation.handle(command, self.config.week_starts_monday)

        if outcome is NavigationOutcome.CONFIRM:
            selected = self.navigation.selected_date
            output = self.navigation.formatted(self.config.date_format)
            logger.info(f"Date selected: {selected}")
            return PickResult(selected, output)
        if outcome is NavigationOutcome.QUIT:
            logger.info("User quit without selecting a date")
            return QUIT_RESULT
        if outcome is NavigationOutcome.ENTER_CONFIG:
            self.enter_config()
        else:
            self.repaint(force=outcome is NavigationOutcome.REDRAW)
        return None

    async def _dispatch_configuring(self, key: KeyEvent) -> Optional[PickResult]:
        outcome = self.configuration.handle(decode_config_key(key))

        if outcome is ConfigOutcome.QUIT:
            return QUIT_RESULT
        if outcome is ConfigOutcome.EXIT:
            self.leave_config(save=False)
        elif outcome is ConfigOutcome.SAVE_AND_EXIT:
            self.leave_config(save=True)
        elif outcome is ConfigOutcome.PROMPT:
            request = self.configuration.prompt_for(self.configuration.current_field)
            text, interrupted = await self.read_prompt(request)
            if interrupted:
                return QUIT_RESULT
            self.configuration.apply_text(request.field, text)
            self.repaint(force=True)
        else:
            self.repaint()
        return None

    def enter_config(self) -> None:
        """Switch to the configuration screen with the cursor on the first field."""
        self.configuration.reset()
        self.state.mode = AppMode.CONFIGURING
        logger.debug("Entered configuration mode")
        self.repaint(force=True)

    def leave_config(self, save: bool) -> None:
        """Return to browsing, optionally writing the configuration first.

        Args:
            save: Persist the configuration before leaving
        """
        if save:
            try:
                self.persistence.save_config(self.config)
                logger.info("Configuration saved")
            except SettingsPersistenceError as e:
                logger.error(f"Failed to save configuration: {e}")

        self.state.mode = AppMode.BROWSING
        logger.debug("Left configuration mode")
        self.repaint(force=True)

    async def read_prompt(self, request: PromptRequest) -> Tuple[Optional[str], bool]:
        """Collect a line of text key by key, starting from the field's current value.

        Args:
            request: Prompt to show

        Returns:
            Tuple of (entered text or None when cancelled, interrupted flag)
        """
        label = f"{request.label} [{request.default}]"
        buffer = request.default
        self.renderer.paint_prompt(label, buffer, request.help_text)

        try:
            while True:
                key = await self.keyboard.read_key()
                if key.code is KeyCode.ENTER:
                    return buffer, False
                if key.code is KeyCode.ESCAPE:
                    return None, False
                if key.code is KeyCode.INTERRUPT:
                    return None, True
                if key.code is KeyCode.BACKSPACE:
                    buffer = buffer[:-1]
                elif key.code is KeyCode.CHAR and key.char:
                    buffer += key.char
                else:
                    continue
                self.renderer.paint_prompt(label, buffer, request.help_text)
        finally:
            self.renderer.end_prompt()

    def build_frame(self) -> Frame:
        """Frame for the active mode."""
        log_lines = self.renderer.log_lines()
        if self.state.mode is AppMode.CONFIGURING:
            return config_frame(
                self.configuration.items(),
                self.configuration.cursor,
                self.navigation.selected_date,
                self.config,
                log_lines,
            )

        width, rows = self.renderer.geometry()
        return calendar_frame(
            self.navigation.anchor_month,
            self.navigation.selected_date,
            self.navigation.today,
            self.navigation.numeric_prefix,
            self.config,
            width,
            log_lines,
            height=rows,
        )

    def repaint(self, force: bool = False) -> None:
        self.renderer.paint(self.build_frame(), force=force)
