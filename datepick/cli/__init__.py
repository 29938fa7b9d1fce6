"""CLI module for datepick.

Provides argument parsing and the entry point that runs the picker.
"""

from typing import Optional, Sequence

from .modes.interactive import run_interactive_mode
from .parser import create_parser, parse_date


async def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    return await run_interactive_mode(args)


__all__ = [
    "create_parser",
    "main_entry",
    "parse_date",
    "run_interactive_mode",
]
