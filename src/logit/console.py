"""Console sink with a foreground color that callers can read and restore."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

import typer


class Console:
    """Writes lines to a text stream in the current foreground color.

    ANSI terminals cannot report their active color, so the console keeps it as
    state: ``foreground`` is ``None`` for the terminal default, otherwise one of
    ``typer.colors``. ``color=None`` lets click strip escapes on non-tty streams.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
        self._stream = stream
        self.color = color
        self.foreground: Optional[str] = None

    @property
    def stream(self) -> TextIO:
        # Resolved per write so redirected stdout (pytest capsys, contextlib) is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        typer.secho(text, file=self.stream, fg=self.foreground, color=self.color)
