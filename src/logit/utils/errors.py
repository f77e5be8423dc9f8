"""Shared exception types raised by the logger facade."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class UninitializedLoggerError(RuntimeError):
    """Raised when a log call is made before the logger has been set up."""


class LogSinkError(RuntimeError):
    """Raised when the session log file cannot be created or appended to."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigError(ValueError):
    """Raised when a logger configuration file is malformed."""
