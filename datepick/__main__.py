"""Entry point for `python -m datepick` command."""

import asyncio
import sys

from datepick.cli import main_entry
from datepick.settings.exceptions import SettingsError


def main() -> None:
    """Entry point for python -m datepick and the ``datepick`` console script."""
    try:
        exit_code = asyncio.run(main_entry())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        sys.exit(0)
    except SettingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
