"""Application settings using pydantic-settings with environment and YAML overrides."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "DATEPICK_"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    # Console Logging
    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="datepick", description="Log file prefix")
    max_log_files: int = Field(default=5, description="Maximum number of log files to keep")
    include_function_names: bool = Field(
        default=True, description="Include function names and line numbers in file logs"
    )

    # Interactive Mode
    interactive_split_display: bool = Field(
        default=True, description="Show log messages inside the picker screen"
    )
    interactive_log_lines: int = Field(
        default=3, description="Number of log lines to show in the picker screen"
    )

    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )


_LOGGING_KEYS = tuple(LoggingSettings.model_fields)


class DatePickSettings(BaseSettings):
    """Application settings with environment variable support."""

    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)
    _yaml_file: Optional[Path] = PrivateAttr(default=None)

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "datepick")
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "share" / "datepick")
    display_config_file: Path = Field(
        default_factory=lambda: Path.home() / ".datepick",
        description="JSON file holding the picker's display configuration",
    )

    # Logging Configuration
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    def __init__(self, yaml_file: Optional[Path] = None, **kwargs: Any) -> None:
        """Initialize settings.

        Args:
            yaml_file: YAML file to read instead of ``config_dir/config.yaml``
            **kwargs: Explicit field values, which take precedence over YAML
        """
        env_vars_set = {
            key[len(ENV_PREFIX):].lower() for key in os.environ if key.startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set
        self._yaml_file = Path(yaml_file).expanduser() if yaml_file else None

        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML configuration file, if one exists."""
        if self._yaml_file is not None:
            return self._yaml_file if self._yaml_file.exists() else None

        user_config = self.config_file
        if user_config.exists():
            return user_config
        return None

    def _overridable(self, name: str) -> bool:
        return name not in self._explicit_args and name not in self._env_vars_set

    def _load_basic_settings(self, config_data: dict) -> None:
        """Load path settings from YAML data."""
        for setting in ("data_dir", "display_config_file"):
            if setting in config_data and self._overridable(setting):
                setattr(self, setting, Path(config_data[setting]).expanduser())

    def _load_logging_config(self, config_data: dict) -> None:
        """Load logging configuration from YAML data."""
        logging_config = config_data.get("logging")
        if not isinstance(logging_config, dict):
            return

        for setting in _LOGGING_KEYS:
            if setting in logging_config:
                setattr(self.logging, setting, logging_config[setting])

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open() as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return
            if not isinstance(config_data, dict):
                raise ValueError("top level must be a mapping")

            self._load_basic_settings(config_data)
            self._load_logging_config(config_data)

        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            # Keep defaults and environment values when the YAML file is unusable
            logging.warning(f"Could not load YAML config from {config_file}: {e}")

    @property
    def config_file(self) -> Path:
        """Path to YAML configuration file."""
        return self.config_dir / "config.yaml"

    @property
    def log_directory(self) -> Path:
        """Directory for log files."""
        if self.logging.file_directory:
            return Path(self.logging.file_directory).expanduser()
        return self.data_dir / "logs"

