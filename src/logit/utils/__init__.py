"""Utility helpers for LogIt."""

from .errors import ConfigError, LogSinkError, UninitializedLoggerError
from .internal_log import get_logger

__all__ = [
    "ConfigError",
    "LogSinkError",
    "UninitializedLoggerError",
    "get_logger",
]
