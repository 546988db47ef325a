"""SQLite log of visited directories and the files seen in them.

Recording is a one-shot startup side effect. Both tables carry uniqueness
constraints, so recording the same directory twice leaves the store as is
apart from any newly appeared files.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from .errors import HistoryStoreError

logger = logging.getLogger(__name__)

_SCHEMA: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS dirs (
        id INTEGER PRIMARY KEY,
        path TEXT NOT NULL UNIQUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS files (
        id INTEGER PRIMARY KEY,
        path TEXT NOT NULL,
        dir_id INTEGER NOT NULL REFERENCES dirs(id),
        UNIQUE (path, dir_id)
    )
    """,
)


class HistoryStore:
    """Thin wrapper over a SQLite connection holding the ``dirs``/``files`` log."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    @classmethod
    def open(cls, db_path: Path | str) -> HistoryStore:
        """Connect to ``db_path`` and apply the schema.

        ``":memory:"`` is accepted for throwaway stores. Parent directories of
        file paths are created on demand.
        """
        if str(db_path) != ":memory:":
            try:
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise HistoryStoreError(f"cannot create history directory for {db_path}: {exc}") from exc
        try:
            conn = sqlite3.connect(str(db_path))
        except sqlite3.Error as exc:
            raise HistoryStoreError(f"cannot open history store {db_path}: {exc}") from exc
        store = cls(conn)
        try:
            store.migrate()
        except HistoryStoreError:
            conn.close()
            raise
        logger.debug("opened history store at %s", db_path)
        return store

    def migrate(self) -> None:
        try:
            with self._conn:
                for statement in _SCHEMA:
                    self._conn.execute(statement)
        except sqlite3.Error as exc:
            raise HistoryStoreError(f"cannot migrate history store: {exc}") from exc

    def record_directory(self, directory: str, files: Iterable[Path]) -> int:
        """Log ``directory`` and its ``files``; return the directory row id."""
        try:
            with self._conn:
                self._conn.execute("INSERT OR IGNORE INTO dirs (path) VALUES (?)", (directory,))
                row = self._conn.execute("SELECT id FROM dirs WHERE path = ?", (directory,)).fetchone()
                dir_id = int(row[0])
                self._conn.executemany(
                    "INSERT OR IGNORE INTO files (path, dir_id) VALUES (?, ?)",
                    [(str(path), dir_id) for path in files],
                )
        except sqlite3.Error as exc:
            raise HistoryStoreError(f"cannot record {directory}: {exc}") from exc
        logger.info("recorded visit to %s", directory)
        return dir_id

    def visited_directories(self) -> list[str]:
        try:
            rows = self._conn.execute("SELECT path FROM dirs ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise HistoryStoreError(f"cannot read history store: {exc}") from exc
        return [row[0] for row in rows]

    def files_for(self, directory: str) -> list[str]:
        """Return recorded file paths for ``directory`` in insertion order."""
        try:
            rows = self._conn.execute(
                "SELECT files.path FROM files JOIN dirs ON dirs.id = files.dir_id "
                "WHERE dirs.path = ? ORDER BY files.id",
                (directory,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise HistoryStoreError(f"cannot read history store: {exc}") from exc
        return [row[0] for row in rows]

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> HistoryStore:
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()


__all__ = [
    "HistoryStore",
]
