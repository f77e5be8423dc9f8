"""Leveled logger: formats a value, colors it on the console, appends it to the session file."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Callable, Optional

from logit.config import DEFAULT_FILE_DIRECTORY, LoggerConfig
from logit.console import Console
from logit.session_file import SessionFile
from logit.severity import Severity, color_for, prefix_for
from logit.utils.errors import UninitializedLoggerError
from logit.utils.internal_log import get_logger

LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]

UNINITIALIZED_MESSAGE = "LogIt is not initialized. Please call setup() before using the logger."


def format_time(moment: datetime) -> str:
    return f"{moment.strftime('%H:%M:%S')}.{moment.microsecond // 1000:03d}"


class Logger:
    """Configure once, then log from anywhere holding this instance.

    Every line is ``"<prefix> <time> <value>"``. With timestamps disabled the time
    slot is empty, which leaves two spaces between prefix and value; existing log
    consumers rely on that exact layout.
    """

    def __init__(self, console: Optional[Console] = None, clock: Optional[Clock] = None) -> None:
        self.console = console or Console()
        self._clock: Clock = clock or datetime.now
        self._config: Optional[LoggerConfig] = None
        # Guards the color swap, the console write and the file append of one call.
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> Optional[LoggerConfig]:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    def setup(
        self,
        write_to_file: bool = False,
        include_timestamp: bool = False,
        file_directory: str = DEFAULT_FILE_DIRECTORY,
        default_severity: Severity = Severity.DEBUG,
    ) -> LoggerConfig:
        """Set the logger options and start a new session file name."""

        return self.configure(
            LoggerConfig(
                write_to_file=write_to_file,
                include_timestamp=include_timestamp,
                file_directory=file_directory,
                default_severity=default_severity,
            )
        )

    def configure(self, config: LoggerConfig) -> LoggerConfig:
        """Apply a prebuilt config. Replaces any earlier setup; nothing touches disk yet."""

        bound = config.for_session(self._clock())
        with self._lock:
            self._config = bound
        LOGGER.debug("Session log will be %s", bound.session_path)
        return bound

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def _require_config(self) -> LoggerConfig:
        config = self._config
        if config is None:
            raise UninitializedLoggerError(UNINITIALIZED_MESSAGE)
        return config

    def _compose(self, config: LoggerConfig, severity: Any, text: str) -> str:
        timestamp = format_time(self._clock()) if config.include_timestamp else ""
        return f"{prefix_for(severity)} {timestamp} {text}"

    def format_line(self, value: Any, severity: Any, config: Optional[LoggerConfig] = None) -> str:
        if config is None:
            config = self._require_config()
        return self._compose(config, severity, str(value))

    def _emit(self, config: LoggerConfig, value: Any, severity: Any) -> str:
        # Rendered before locking: a __str__ that logs must not deadlock.
        text = str(value)

        with self._lock:
            # Clock read under the lock keeps file order and timestamp order in step.
            line = self._compose(config, severity, text)
            previous = self.console.foreground
            self.console.foreground = color_for(severity)
            try:
                self.console.write_line(line)
            finally:
                self.console.foreground = previous

            if config.write_to_file:
                SessionFile(config.session_path).append(line)

        return line

    def log_at(self, value: Any, severity: Any) -> str:
        """Emit ``value`` at ``severity`` and return the formatted line.

        Severities outside :class:`Severity` are written with the INFO prefix and
        the default color rather than rejected.
        """

        return self._emit(self._require_config(), value, severity)

    def log(self, value: Any, severity: Optional[Any] = None) -> str:
        config = self._require_config()
        if severity is None:
            severity = config.default_severity
        return self._emit(config, value, severity)

    def fatal(self, value: Any) -> str:
        return self.log_at(value, Severity.FATAL)

    def error(self, value: Any) -> str:
        return self.log_at(value, Severity.ERROR)

    def warn(self, value: Any) -> str:
        return self.log_at(value, Severity.WARN)

    def info(self, value: Any) -> str:
        return self.log_at(value, Severity.INFO)

    def debug(self, value: Any) -> str:
        return self.log_at(value, Severity.DEBUG)

    def trace(self, value: Any) -> str:
        return self.log_at(value, Severity.TRACE)
