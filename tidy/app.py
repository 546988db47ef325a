"""Startup composition: resolve the directory, log the visit, build screens.

Everything here runs before the terminal enters raw mode, so startup errors
are reported on a normal terminal.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_STYLE
from .contexts import ContextRegistry, MainContext, TaggingContext
from .directory import canonicalize_directory
from .driver import Driver
from .history import HistoryStore
from .snapshot import DirSnapshot, build_snapshot
from .terminal import TerminalController
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppOptions:
    """Resolved CLI/config settings for one session."""

    directory: Path
    db_path: Path
    theme_name: str | None = None
    style: str = DEFAULT_STYLE
    no_color: bool = False


def record_visit(db_path: Path, snapshot: DirSnapshot) -> None:
    with HistoryStore.open(db_path) as store:
        store.record_directory(snapshot.path, snapshot.files)


def build_driver(options: AppOptions) -> Driver:
    """Prepare the snapshot, history entry, and screen registry."""
    directory = canonicalize_directory(options.directory)
    snapshot = build_snapshot(directory)
    logger.info("browsing %s (%d entries)", snapshot.path, len(snapshot.files))
    record_visit(options.db_path, snapshot)

    registry = ContextRegistry(
        main=MainContext.for_snapshot(snapshot),
        tagging=TaggingContext(style=options.style, no_color=options.no_color),
    )
    return Driver(
        registry=registry,
        snapshot=snapshot,
        theme=resolve_theme(options.theme_name, no_color=options.no_color),
    )


def run_app(options: AppOptions) -> None:
    driver = build_driver(options)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    driver.run(terminal)
