"""
screensync.exceptions - Custom exception classes.

All ScreenSync-specific exceptions inherit from ScreenSyncError.
"""


class ScreenSyncError(Exception):
    """Base exception for all ScreenSync errors."""

    pass


class ConfigError(ScreenSyncError):
    """Configuration loading or validation error."""

    pass


class ValidationError(ScreenSyncError):
    """A save request is missing required fields or carries invalid ones."""

    def __init__(self, message: str, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__(message)


class ExportError(ScreenSyncError):
    """Screenplay file could not be written."""

    pass


class NotFoundError(ScreenSyncError):
    """Requested screenplay file does not exist in the store."""

    pass
