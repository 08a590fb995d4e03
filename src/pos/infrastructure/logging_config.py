"""Logging setup for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here by the process that owns the terminal.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Send log records to stderr at ``level``.

    Calling it again replaces the handler installed by the previous call
    rather than adding a second one.
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level)

    # SQL statements are only interesting when echo is explicitly requested.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
