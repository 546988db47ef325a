"""File timestamp formatting for the info panel.

Every helper here is total: stat failures and platforms without a creation
time produce ``None`` fields, which render as ``unknown``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

UNKNOWN = "unknown"


@dataclass(frozen=True)
class FileTimes:
    created: str | None
    accessed: str | None
    modified: str | None


def format_timestamp(seconds: float) -> str:
    """Format epoch seconds as ``Tue Mar  5 14:02:11 2024`` in UTC."""
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S %Y}"


def _safe_format(seconds: float | None) -> str | None:
    if seconds is None:
        return None
    try:
        return format_timestamp(seconds)
    except (OverflowError, OSError, ValueError):
        return None


def file_times(path: Path) -> FileTimes:
    """Return formatted created/accessed/modified times for ``path``."""
    try:
        stat = os.stat(path)
    except OSError:
        return FileTimes(created=None, accessed=None, modified=None)
    return FileTimes(
        created=_safe_format(getattr(stat, "st_birthtime", None)),
        accessed=_safe_format(stat.st_atime),
        modified=_safe_format(stat.st_mtime),
    )


def metadata_summary(path: Path) -> str:
    times = file_times(path)
    return (
        f"Created: {times.created or UNKNOWN}, "
        f"Accessed: {times.accessed or UNKNOWN}, "
        f"Modified: {times.modified or UNKNOWN}"
    )


def is_directory(path: Path) -> bool:
    """Return ``path.is_dir()``, treating stat failures as "not a directory"."""
    try:
        return path.is_dir()
    except OSError:
        return False


__all__ = [
    "FileTimes",
    "UNKNOWN",
    "file_times",
    "format_timestamp",
    "is_directory",
    "metadata_summary",
]
