"""Append-only file sink for the per-run session log."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

from logit.utils.errors import LogSinkError
from logit.utils.internal_log import get_logger

LOGGER = get_logger(__name__)


class SessionFile:
    """One log file per setup. Every append opens, writes, syncs and closes."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def ensure_exists(self) -> None:
        directory = self.path.parent
        try:
            if not directory.is_dir():
                directory.mkdir(parents=True, exist_ok=True)
                LOGGER.info("Created log directory %s", directory)
            if not self.path.exists():
                self.path.touch()
                LOGGER.info("Created session log %s", self.path)
        except OSError as exc:
            raise LogSinkError(f"Cannot create session log {self.path}: {exc}", self.path) from exc

    def append(self, line: str) -> None:
        self.ensure_exists()
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            raise LogSinkError(f"Cannot append to session log {self.path}: {exc}", self.path) from exc

    def read_lines(self) -> List[str]:
        """Lines written so far, without terminators. Empty if nothing was written."""

        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()
