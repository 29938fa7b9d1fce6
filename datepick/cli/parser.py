"""Command-line argument parsing for datepick."""

import argparse
import logging
from datetime import date, datetime
from pathlib import Path

from .. import __version__

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Parser for the picker and its logging options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--date", "2024-03-15", "--verbose"])
    """
    parser = argparse.ArgumentParser(
        prog="datepick",
        description="Interactive terminal date picker; prints the chosen date to stdout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           # Pick a date starting from today
  %(prog)s --date 2024-03-15         # Start the picker on a given date
  DAY=$(%(prog)s)                    # Capture the picked date in a shell variable
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show version information"
    )

    parser.add_argument(
        "--date",
        type=parse_date,
        default=None,
        metavar="YYYY-MM-DD",
        help="Initially selected date (default: today)",
    )

    parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        help="YAML settings file (default: ~/.config/datepick/config.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    logging_group = parser.add_argument_group("logging", "Logging configuration options")

    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Set both console and file log levels",
    )

    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only show errors (sets console level to ERROR)",
    )

    logging_group.add_argument(
        "--log-dir", type=Path, help="Write log files to this directory"
    )

    logging_group.add_argument(
        "--max-log-files", type=int, help="Maximum number of log files to keep (default: 5)"
    )

    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored console output"
    )

    return parser


def parse_date(date_str: str) -> date:
    """Parse a YYYY-MM-DD date string for command-line arguments.

    Args:
        date_str: Date string in YYYY-MM-DD format

    Returns:
        The parsed date

    Raises:
        argparse.ArgumentTypeError: If the string is not a valid date
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: {date_str}. Use YYYY-MM-DD"
        ) from err


__all__ = [
    "create_parser",
    "parse_date",
]
