"""Severity levels and their console presentation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

import typer


class Severity(int, Enum):
    """Ordered log levels, most severe first. Levels label lines; they never filter."""

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Coerce a severity, its integer value or its (case-insensitive) name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown severity name: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Cannot interpret {value!r} as a severity")


FALLBACK_SEVERITY = Severity.INFO
FALLBACK_COLOR = typer.colors.WHITE

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.FATAL: typer.colors.BRIGHT_RED,
    Severity.ERROR: typer.colors.RED,
    Severity.WARN: typer.colors.BRIGHT_YELLOW,
    Severity.INFO: typer.colors.WHITE,
    Severity.DEBUG: typer.colors.BRIGHT_BLACK,
    Severity.TRACE: typer.colors.BRIGHT_BLACK,
}


def _recognise(value: Any) -> Optional[Severity]:
    if isinstance(value, Severity):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Severity(value)
        except ValueError:
            return None
    return None


def prefix_for(value: Any) -> str:
    """Bracketed line prefix; unrecognised values are labelled as INFO."""

    severity = _recognise(value)
    if severity is None:
        severity = FALLBACK_SEVERITY
    return f"[{severity.name}]"


def color_for(value: Any) -> str:
    """Console foreground color; unrecognised values get the default white."""

    severity = _recognise(value)
    if severity is None:
        return FALLBACK_COLOR
    return SEVERITY_COLORS[severity]
