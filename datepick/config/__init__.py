"""Application configuration."""

from .settings import DatePickSettings, LoggingSettings

__all__ = ["DatePickSettings", "LoggingSettings"]
