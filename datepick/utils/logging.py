"""Logging configuration and setup utilities."""

import logging
import os
import sys
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Deque, Optional, TextIO, Union

if TYPE_CHECKING:
    from ..config.settings import DatePickSettings
    from ..display.console_renderer import ConsoleRenderer

ROOT_LOGGER_NAME = "datepick"

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the VERBOSE level.

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Loaded configuration from %s", path)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Numeric log level value

    Raises:
        AttributeError: If level name is not recognized
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(
        self,
        *args: Any,
        enable_colors: bool = True,
        stream: Optional[TextIO] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.stream = stream or sys.stderr
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of the output stream."""
        if not hasattr(self.stream, "isatty") or not self.stream.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"
        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"
        if term and "color" in term:
            return "basic"
        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a coloured level name when supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


class TimestampedFileHandler(logging.FileHandler):
    """Handler that creates one timestamped log file per run."""

    def __init__(
        self, log_dir: Union[str, Path], prefix: str = ROOT_LOGGER_NAME, max_files: int = 5
    ) -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.max_files = max_files

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = self.log_dir / f"{prefix}_{timestamp}.log"

        self.log_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(str(log_path), encoding="utf-8")

        self.cleanup_old_files()

    def cleanup_old_files(self) -> None:
        """Remove log files beyond max_files, keeping the most recent."""
        log_files = list(self.log_dir.glob(f"{self.prefix}_*.log"))
        if len(log_files) <= self.max_files:
            return

        log_files.sort(key=lambda f: f.stat().st_mtime, reverse=True)
        for old_file in log_files[self.max_files :]:
            try:
                old_file.unlink()
            except OSError as e:
                logging.getLogger(__name__).debug(f"Could not remove old log file {old_file}: {e}")


class SplitDisplayHandler(logging.Handler):
    """Handler that feeds the picker screen's reserved log area."""

    def __init__(self, renderer: "ConsoleRenderer", max_log_lines: int = 3) -> None:
        super().__init__()
        self.renderer = renderer
        self.max_log_lines = max_log_lines
        self.log_buffer: Deque[str] = deque(maxlen=max_log_lines)

    def emit(self, record: logging.LogRecord) -> None:
        """Add the record to the buffer and hand the buffer to the renderer."""
        try:
            self.log_buffer.append(self.format(record))
            self.renderer.update_log_area(list(self.log_buffer))
        except Exception:
            self.handleError(record)


def setup_logging(
    settings: "DatePickSettings",
    interactive_mode: bool = False,
    renderer: Optional["ConsoleRenderer"] = None,
) -> logging.Logger:
    """Set up the ``datepick`` logger from settings.

    Args:
        settings: Application settings holding the logging section
        interactive_mode: True while the picker owns the terminal
        renderer: Painter whose log area receives console messages in interactive mode

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_settings = settings.logging

    if log_settings.console_enabled:
        console_level = get_log_level(log_settings.console_level)
        console_formatter = AutoColoredFormatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            enable_colors=log_settings.console_colors,
        )

        console_handler: logging.Handler
        if interactive_mode and log_settings.interactive_split_display and renderer is not None:
            console_handler = SplitDisplayHandler(
                renderer, max_log_lines=log_settings.interactive_log_lines
            )
        elif interactive_mode:
            # Console output would corrupt the picker screen
            console_handler = logging.NullHandler()
        else:
            console_handler = logging.StreamHandler(sys.stderr)

        console_handler.setLevel(console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_settings.file_enabled:
        file_handler = TimestampedFileHandler(
            log_dir=settings.log_directory,
            prefix=log_settings.file_prefix,
            max_files=log_settings.max_log_files,
        )
        file_handler.setLevel(get_log_level(log_settings.file_level))

        if log_settings.include_function_names:
            file_format = (
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        else:
            file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))

        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {file_handler.baseFilename}")

    third_party_level = get_log_level(log_settings.third_party_level)
    for lib in ("asyncio", "pydantic"):
        logging.getLogger(lib).setLevel(third_party_level)

    logger.debug(f"Logging initialized (interactive={interactive_mode})")
    return logger


def apply_command_line_overrides(settings: "DatePickSettings", args: Any) -> "DatePickSettings":
    """Apply command-line argument overrides to logging settings.

    Priority is command line, then environment, then YAML, then defaults.
    The settings object is modified in place and returned.

    Args:
        settings: Current settings object to modify
        args: Parsed command-line arguments from argparse

    Returns:
        Settings object with command-line overrides applied
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level
        settings.logging.file_level = args.log_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"
        settings.logging.file_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_directory = str(args.log_dir)
        settings.logging.file_enabled = True

    if getattr(args, "no_log_colors", False):
        settings.logging.console_colors = False

    if getattr(args, "max_log_files", None):
        settings.logging.max_log_files = args.max_log_files

    return settings


def detach_split_display(logger_name: str = ROOT_LOGGER_NAME) -> None:
    """Route console messages back to stderr once the picker screen is gone."""
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if isinstance(handler, SplitDisplayHandler):
            logger.removeHandler(handler)
            stream_handler = logging.StreamHandler(sys.stderr)
            stream_handler.setLevel(handler.level)
            stream_handler.setFormatter(handler.formatter)
            logger.addHandler(stream_handler)
