"""Logger configuration model, session file naming and YAML loading."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from logit.severity import Severity
from logit.utils.errors import ConfigError
from logit.utils.internal_log import get_logger

LOGGER = get_logger(__name__)

DEFAULT_FILE_DIRECTORY = "log/"
SESSION_FILE_SUFFIX = ".log"


def session_file_name_for(moment: datetime) -> str:
    """Name of the session log file for a run started at ``moment``.

    Millisecond precision: ``2024-03-01_14-05-09-042.log``.
    """

    millis = moment.microsecond // 1000
    return f"{moment.strftime('%Y-%m-%d_%H-%M-%S')}-{millis:03d}{SESSION_FILE_SUFFIX}"


class LoggerConfig(BaseModel):
    """Process-wide logger settings, fixed for the lifetime of one setup."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    write_to_file: bool = Field(False, description="Append every line to the session log file.")
    include_timestamp: bool = Field(False, description="Insert HH:MM:SS.mmm after the level prefix.")
    file_directory: str = Field(
        DEFAULT_FILE_DIRECTORY,
        description="Directory that holds session log files; created on first write.",
    )
    default_severity: Severity = Field(
        Severity.DEBUG,
        description="Level used when a call does not name one.",
    )
    session_file_name: Optional[str] = Field(
        None,
        description="Derived from the wall clock when the logger is set up.",
    )

    @field_validator("default_severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Severity:
        return Severity.parse(value)

    @property
    def session_path(self) -> Optional[Path]:
        if self.session_file_name is None:
            return None
        return Path(self.file_directory) / self.session_file_name

    def for_session(self, moment: datetime) -> "LoggerConfig":
        """Copy of this config bound to a fresh session file name."""

        return self.model_copy(update={"session_file_name": session_file_name_for(moment)})


def load_config(config_path: Union[str, Path]) -> LoggerConfig:
    """Load logger settings from a YAML mapping.

    A ``session_file_name`` key is ignored: names are only ever derived at setup.
    """

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Logger config not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Logger config {path} is not valid YAML") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Logger config {path} must be a mapping, got {type(data).__name__}")

    data.pop("session_file_name", None)
    try:
        config = LoggerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Logger config {path} failed validation:\n{exc}") from exc

    LOGGER.info("Loaded logger configuration from %s", path)
    return config
