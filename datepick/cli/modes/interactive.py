"""Interactive picker mode for the datepick CLI."""

import logging
import sys
from typing import Any, Optional, TextIO

from ...config.settings import DatePickSettings
from ...display.console_renderer import ConsoleRenderer
from ...settings.persistence import SettingsPersistence
from ...ui.interactive import InteractiveController, PickResult
from ...ui.keyboard import KeyboardHandler
from ...utils.logging import apply_command_line_overrides, detach_split_display, setup_logging

logger = logging.getLogger(__name__)


async def run_interactive_mode(
    args: Any, settings: Optional[DatePickSettings] = None, output: Optional[TextIO] = None
) -> int:
    """Run the picker and print the chosen date.

    Args:
        args: Parsed command line arguments
        settings: Application settings, loaded from environment and YAML when omitted
        output: Stream receiving the picked date, defaults to stdout

    Returns:
        Exit code; 0 both when a date was picked and when the user quit
    """
    output = output or sys.stdout

    if settings is None:
        settings = DatePickSettings(yaml_file=getattr(args, "config_file", None))
    settings = apply_command_line_overrides(settings, args)

    persistence = SettingsPersistence(settings.display_config_file)
    config = persistence.load_config()

    renderer = ConsoleRenderer(config, max_log_lines=settings.logging.interactive_log_lines)
    setup_logging(settings, interactive_mode=True, renderer=renderer)
    logger.debug(f"Display configuration loaded from {settings.display_config_file}")

    result: PickResult
    try:
        with KeyboardHandler() as keyboard:
            controller = InteractiveController(
                config, persistence, keyboard, renderer, initial_date=getattr(args, "date", None)
            )
            result = await controller.run()
    except KeyboardInterrupt:
        logger.debug("Picker interrupted")
        return 0
    finally:
        detach_split_display()

    if result.output is not None:
        print(result.output, file=output)
        output.flush()
    return 0


__all__ = ["run_interactive_mode"]
