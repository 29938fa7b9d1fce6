"""Unit tests for the picker entry points."""

import io
import json
import logging
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from datepick.__main__ import main
from datepick.cli import main_entry
from datepick.cli.parser import create_parser
from datepick.cli.modes.interactive import run_interactive_mode
from datepick.config.settings import DatePickSettings
from datepick.settings.exceptions import SettingsPersistenceError
from datepick.settings.models import DisplayConfig
from datepick.ui.interactive import PickResult
from datepick.utils.logging import SplitDisplayHandler


class TestRunInteractiveMode:
    """Test the interactive mode runner."""

    @pytest.mark.asyncio
    async def test_confirmed_date_is_printed(
        self, cli_settings: DatePickSettings, output: io.StringIO, patched_picker: MagicMock
    ) -> None:
        patched_picker.return_value.run.return_value = PickResult(date(2024, 3, 15), "2024-03-15")

        exit_code = await run_interactive_mode(
            create_parser().parse_args([]), settings=cli_settings, output=output
        )

        assert exit_code == 0
        assert output.getvalue() == "2024-03-15\n"

    @pytest.mark.asyncio
    async def test_quit_prints_nothing(
        self, cli_settings: DatePickSettings, output: io.StringIO, patched_picker: MagicMock
    ) -> None:
        exit_code = await run_interactive_mode(
            create_parser().parse_args([]), settings=cli_settings, output=output
        )

        assert exit_code == 0
        assert output.getvalue() == ""

    @pytest.mark.asyncio
    async def test_keyboard_interrupt_exits_cleanly(
        self, cli_settings: DatePickSettings, output: io.StringIO, patched_picker: MagicMock
    ) -> None:
        patched_picker.return_value.run.side_effect = KeyboardInterrupt

        exit_code = await run_interactive_mode(
            create_parser().parse_args([]), settings=cli_settings, output=output
        )

        assert exit_code == 0
        assert output.getvalue() == ""

    @pytest.mark.asyncio
    async def test_stored_config_and_initial_date_reach_controller(
        self,
        cli_settings: DatePickSettings,
        output: io.StringIO,
        patched_picker: MagicMock,
        tmp_path: Path,
    ) -> None:
        (tmp_path / ".datepick").write_text(json.dumps({"months_after": 2}), encoding="utf-8")
        args = create_parser().parse_args(["--date", "2023-07-04"])

        await run_interactive_mode(args, settings=cli_settings, output=output)

        config = patched_picker.call_args.args[0]
        assert isinstance(config, DisplayConfig)
        assert config.months_after == 2
        assert patched_picker.call_args.kwargs["initial_date"] == date(2023, 7, 4)

    @pytest.mark.asyncio
    async def test_split_display_detached_afterwards(
        self, cli_settings: DatePickSettings, output: io.StringIO, patched_picker: MagicMock
    ) -> None:
        await run_interactive_mode(
            create_parser().parse_args([]), settings=cli_settings, output=output
        )

        handlers = logging.getLogger("datepick").handlers
        assert not any(isinstance(h, SplitDisplayHandler) for h in handlers)

    @pytest.mark.asyncio
    async def test_command_line_overrides_applied(
        self, cli_settings: DatePickSettings, output: io.StringIO, patched_picker: MagicMock
    ) -> None:
        await run_interactive_mode(
            create_parser().parse_args(["--quiet"]), settings=cli_settings, output=output
        )

        assert cli_settings.logging.console_level == "ERROR"


class TestMainEntry:
    """Test the async entry point and the console script."""

    @pytest.mark.asyncio
    async def test_main_entry_parses_arguments(self) -> None:
        with patch("datepick.cli.run_interactive_mode", new=AsyncMock(return_value=0)) as run:
            exit_code = await main_entry(["--date", "2024-01-01"])

        assert exit_code == 0
        assert run.call_args.args[0].date == date(2024, 1, 1)

    def test_main_exits_with_code(self) -> None:
        with patch("datepick.__main__.main_entry", new=AsyncMock(return_value=0)):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0

    def test_main_keyboard_interrupt(self) -> None:
        with patch("datepick.__main__.main_entry", new=AsyncMock(side_effect=KeyboardInterrupt)):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0

    def test_main_settings_error(self, capsys: pytest.CaptureFixture) -> None:
        error = SettingsPersistenceError("Failed to save settings", operation="save")
        with patch("datepick.__main__.main_entry", new=AsyncMock(side_effect=error)):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Failed to save settings" in capsys.readouterr().err
