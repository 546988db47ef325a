"""Directory canonicalization and listing for the browser."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import DirectoryError

logger = logging.getLogger(__name__)


def canonicalize_directory(path: Path) -> Path:
    """Resolve ``path`` to an absolute, symlink-free existing directory."""
    try:
        resolved = path.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise DirectoryError(f"cannot resolve {path}: {exc}") from exc
    if not resolved.is_dir():
        raise DirectoryError(f"not a directory: {resolved}")
    return resolved


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def list_directory(directory: Path) -> list[Path]:
    """Return canonicalized entries of ``directory``.

    Directories sort before files, then entries sort by case-folded name, so
    the order is stable between runs.
    """
    rows: list[tuple[bool, str, Path]] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                resolved = Path(entry.path).resolve()
                rows.append((not _is_dir(entry), entry.name.casefold(), resolved))
    except (OSError, RuntimeError) as exc:
        raise DirectoryError(f"cannot list {directory}: {exc}") from exc

    rows.sort(key=lambda row: (row[0], row[1]))
    logger.debug("listed %d entries in %s", len(rows), directory)
    return [row[2] for row in rows]


__all__ = [
    "canonicalize_directory",
    "list_directory",
]
