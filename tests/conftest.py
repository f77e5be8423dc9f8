import io
from datetime import datetime, timedelta

import pytest

from logit.console import Console
from logit.logger import Logger


class TickingClock:
    """Deterministic wall clock that advances one millisecond per reading."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 14, 5, 9, 42000)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(milliseconds=1)
        return current


class RecordingConsole(Console):
    """Console that remembers the foreground color in effect for each written line."""

    def __init__(self) -> None:
        super().__init__(stream=io.StringIO(), color=False)
        self.writes: list[tuple[str, object]] = []

    def write_line(self, text: str) -> None:
        self.writes.append((text, self.foreground))
        super().write_line(text)

    @property
    def text(self) -> str:
        return self.stream.getvalue()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def logger(console, clock):
    return Logger(console=console, clock=clock)
