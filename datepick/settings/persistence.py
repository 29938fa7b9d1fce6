"""
Display configuration persistence using a JSON file.

Loading never fails: a missing, unreadable or malformed file yields the
default configuration. Saving writes a temporary file and moves it over the
target so a crash cannot leave a half-written configuration behind.
"""

import contextlib
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .exceptions import SettingsError, SettingsPersistenceError
from .models import DisplayConfig

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Handles persistent storage of the display configuration.

    Attributes:
        config_file: Path of the JSON configuration file

    Example:
        >>> persistence = SettingsPersistence(Path.home() / ".datepick")
        >>> config = persistence.load_config()
        >>> config.months_after = 2
        >>> persistence.save_config(config)
    """

    def __init__(self, config_file: Path) -> None:
        """Initialize persistence for a configuration file.

        Args:
            config_file: Path of the JSON file holding the display configuration
        """
        self.config_file = config_file
        logger.debug(f"Settings persistence initialized: {self.config_file}")

    def load_config(self) -> DisplayConfig:
        """Load the display configuration.

        Returns:
            The stored configuration, or the defaults when the file is missing
            or cannot be parsed
        """
        if not self.config_file.exists():
            logger.debug(f"No configuration at {self.config_file}, using defaults")
            return DisplayConfig()

        config = self._load_from_file(self.config_file)
        if config is None:
            logger.info("Using default display configuration")
            return DisplayConfig()

        logger.debug("Display configuration loaded")
        return config

    def save_config(self, config: DisplayConfig) -> bool:
        """Save the display configuration with an atomic write.

        Args:
            config: Configuration to persist

        Returns:
            True if the save succeeded

        Raises:
            SettingsPersistenceError: If the file cannot be written
        """
        logger.debug(f"Saving display configuration to {self.config_file}")

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self._atomic_write(self.config_file, config)
        except OSError as e:
            raise SettingsPersistenceError(
                "Failed to save settings",
                operation="save",
                file_path=str(self.config_file),
                original_error=e,
            ) from e

        logger.info(f"Display configuration saved to {self.config_file}")
        return True

    def _load_from_file(self, file_path: Path) -> Optional[DisplayConfig]:
        """Load configuration data from a specific file.

        Args:
            file_path: Path to configuration file

        Returns:
            DisplayConfig object or None if loading fails
        """
        try:
            with file_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.warning(f"Invalid JSON in settings file {file_path}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read settings file {file_path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Settings file {file_path} does not contain an object")
            return None

        try:
            return DisplayConfig(**data)
        except (ValidationError, SettingsError, TypeError) as e:
            logger.warning(f"Invalid settings in {file_path}: {e}")
            return None

    def _atomic_write(self, file_path: Path, config: DisplayConfig) -> None:
        """Write to a temporary file then move it over ``file_path``.

        Args:
            file_path: Target file path
            config: Configuration to write
        """
        temp_file = file_path.with_name(file_path.name + ".tmp")

        try:
            with temp_file.open("w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
                f.flush()

            temp_file.replace(file_path)

        except Exception:
            if temp_file.exists():
                with contextlib.suppress(OSError):
                    temp_file.unlink()
            raise
