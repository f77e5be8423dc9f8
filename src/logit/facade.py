"""Process-wide logger shared by module-level entry points.

Usage:
    import logit

    logit.setup(write_to_file=True, include_timestamp=True)
    logit.log_warn("disk nearly full")
    logit.log("uses the default severity")

Libraries that want isolation should hold their own :class:`~logit.logger.Logger`.
"""

from __future__ import annotations

from typing import Any, Optional

from logit.config import DEFAULT_FILE_DIRECTORY, LoggerConfig
from logit.logger import Logger
from logit.severity import Severity

_DEFAULT: Logger = Logger()


def default_logger() -> Logger:
    """Return the process-wide logger behind the module-level functions."""

    return _DEFAULT


def is_initialized() -> bool:
    return _DEFAULT.is_initialized


def setup(
    write_to_file: bool = False,
    include_timestamp: bool = False,
    file_directory: str = DEFAULT_FILE_DIRECTORY,
    default_severity: Severity = Severity.DEBUG,
) -> LoggerConfig:
    return _DEFAULT.setup(
        write_to_file=write_to_file,
        include_timestamp=include_timestamp,
        file_directory=file_directory,
        default_severity=default_severity,
    )


def configure(config: LoggerConfig) -> LoggerConfig:
    return _DEFAULT.configure(config)


def log_at(value: Any, severity: Any) -> str:
    return _DEFAULT.log_at(value, severity)


def log(value: Any, severity: Optional[Any] = None) -> str:
    return _DEFAULT.log(value, severity)


def log_fatal(value: Any) -> str:
    return _DEFAULT.fatal(value)


def log_error(value: Any) -> str:
    return _DEFAULT.error(value)


def log_warn(value: Any) -> str:
    return _DEFAULT.warn(value)


def log_info(value: Any) -> str:
    return _DEFAULT.info(value)


def log_debug(value: Any) -> str:
    return _DEFAULT.debug(value)


def log_trace(value: Any) -> str:
    return _DEFAULT.trace(value)
