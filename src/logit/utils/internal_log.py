"""Diagnostics for LogIt itself, routed through the host application's logging setup.

The package logger only carries a ``NullHandler``; nothing is printed until the
application configures ``logging`` (for example ``logging.basicConfig(level=logging.INFO)``).
User log lines never pass through here.
"""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "logit"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for a ``logit.*`` module name."""

    if not name or name == PACKAGE_LOGGER_NAME:
        return logging.getLogger(PACKAGE_LOGGER_NAME)
    if not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
