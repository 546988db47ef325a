"""Immutable per-frame view of the browsed directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .directory import list_directory


@dataclass(frozen=True)
class DirSnapshot:
    """Directory path plus its ordered entries, shared by render and input."""

    path: str
    files: tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.files)


def build_snapshot(directory: Path) -> DirSnapshot:
    """List ``directory`` and freeze the result into a snapshot."""
    return DirSnapshot(path=str(directory), files=tuple(list_directory(directory)))


__all__ = [
    "DirSnapshot",
    "build_snapshot",
]
