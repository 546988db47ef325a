"""Persistent JSON config helpers.

Stores the history database location, UI theme, preview style, and log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir, user_log_dir

APP_NAME = "tidy"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_HISTORY_DB_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / "tidy.db"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "tidy.log"
DEFAULT_STYLE = "monokai"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_history_db_path() -> Path:
    """Return configured history database path, or the per-user default."""
    value = _load_string("history_db")
    if value is None:
        return DEFAULT_HISTORY_DB_PATH
    return Path(value).expanduser()


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def load_style() -> str:
    return _load_string("style") or DEFAULT_STYLE


def load_log_level() -> str:
    """Return configured log level name; unknown names fall back to the default."""
    value = _load_string("log_level")
    if value is None or value.upper() not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return value.upper()
