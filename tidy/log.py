"""Logging setup.

The interactive screen owns stdout, so records go to a file instead of the
terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str, log_path: Path) -> logging.Handler | None:
    """Route ``tidy`` loggers to ``log_path`` at ``level``.

    Returns the installed handler, or ``None`` when the log file cannot be
    opened (logging then stays disabled for the session).
    """
    package_logger = logging.getLogger("tidy")
    package_logger.setLevel(level)
    package_logger.propagate = False
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        package_logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return handler
