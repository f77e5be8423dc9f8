"""LogIt: a leveled, color-tagged console logger with a per-run session file."""

from .config import LoggerConfig, load_config, session_file_name_for
from .console import Console
from .facade import (
    configure,
    default_logger,
    is_initialized,
    log,
    log_at,
    log_debug,
    log_error,
    log_fatal,
    log_info,
    log_trace,
    log_warn,
    setup,
)
from .logger import Logger
from .session_file import SessionFile
from .severity import Severity
from .utils.errors import ConfigError, LogSinkError, UninitializedLoggerError

__all__ = [
    "ConfigError",
    "Console",
    "LogSinkError",
    "Logger",
    "LoggerConfig",
    "SessionFile",
    "Severity",
    "UninitializedLoggerError",
    "configure",
    "default_logger",
    "is_initialized",
    "load_config",
    "log",
    "log_at",
    "log_debug",
    "log_error",
    "log_fatal",
    "log_info",
    "log_trace",
    "log_warn",
    "session_file_name_for",
    "setup",
]
