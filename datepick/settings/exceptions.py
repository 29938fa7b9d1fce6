"""
Settings-specific exceptions for datepick display configuration.

These cover validation of persisted display settings and failures while
writing them back to storage.
"""

from typing import Any, Optional


class SettingsError(Exception):
    """Base exception for all settings-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class SettingsValidationError(SettingsError):
    """Exception raised when a display setting value is not acceptable.

    Args:
        message: Human-readable validation error description
        field_name: Name of the field that failed validation
        field_value: The invalid value that caused the error

    Example:
        >>> raise SettingsValidationError(
        ...     "Color index out of range",
        ...     field_name="colors.year",
        ...     field_value=300,
        ... )
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
    ) -> None:
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(message)

    def __str__(self) -> str:
        if self.field_name:
            return f"{self.message} ({self.field_name}={self.field_value!r})"
        return self.message


class SettingsPersistenceError(SettingsError):
    """Exception raised when writing settings to storage fails.

    Args:
        message: Human-readable persistence error description
        operation: The operation that failed (save, initialize)
        file_path: Path to the file involved in the operation
        original_error: The underlying exception that caused the failure
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        file_path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        self.operation = operation
        self.file_path = file_path
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        text = self.message
        if self.file_path:
            text = f"{text} ({self.file_path})"
        if self.original_error:
            text = f"{text}: {type(self.original_error).__name__}: {self.original_error}"
        return text
