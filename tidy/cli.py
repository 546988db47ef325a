"""Command-line front door for tidy.

Parses CLI options, merges them with the JSON config, sets up logging, and
starts the interactive browser. Startup failures exit with a message and a
non-zero status; quitting from the browser exits with status 0.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import config
from .app import AppOptions, run_app
from .errors import InputClosed, StartupError
from .log import configure_logging
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tidy",
        description="Browse a directory in the terminal and pick files to tag.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to browse. Defaults to current directory.",
    )
    parser.add_argument("--db", metavar="PATH", default=None, help="History database path.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for file previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write logs to PATH.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=config.LOG_LEVELS,
        default=None,
        help="Log verbosity (default from config, else WARNING).",
    )
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch tidy on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    log_path = Path(args.log_file) if args.log_file else config.DEFAULT_LOG_PATH
    configure_logging(args.log_level or config.load_log_level(), log_path)

    if default_path is None:
        default_path = Path.cwd()
    options = AppOptions(
        directory=Path(args.directory) if args.directory else default_path,
        db_path=Path(args.db).expanduser() if args.db else config.load_history_db_path(),
        theme_name=args.theme or config.load_theme_name(),
        style=args.style or config.load_style(),
        no_color=args.no_color,
    )

    try:
        run_app(options)
    except StartupError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(f"tidy: {exc}") from exc
    except InputClosed as exc:
        logger.error("input closed: %s", exc)
        raise SystemExit(f"tidy: {exc}") from exc


if __name__ == "__main__":
    main()
