"""Short syntax-highlighted head of a file for the tag screen.

Neutralizes terminal control bytes so previews cannot move the cursor or ring
the bell. Binary files, directories, and unreadable paths yield ``None``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE

PREVIEW_READ_BYTES = 16 * 1024
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def decode_text(raw: bytes) -> str:
    """Decode UTF-8 (dropping a BOM); anything else is read as latin-1."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = DEFAULT_STYLE
    return Terminal256Formatter(style=style)


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(source, lexer, _formatter_for_style(style))


def preview_lines(
    path: Path,
    max_lines: int,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> list[str] | None:
    """Return up to ``max_lines`` rendered lines from the top of ``path``."""
    if max_lines <= 0:
        return []
    try:
        if path.is_dir():
            return None
        with path.open("rb") as handle:
            raw = handle.read(PREVIEW_READ_BYTES)
    except OSError:
        return None
    if b"\x00" in raw:
        return None

    head = "\n".join(decode_text(raw).splitlines()[:max_lines])
    head = sanitize_terminal_text(head.expandtabs())
    if not head:
        return []
    if no_color:
        return head.splitlines()
    return colorize_source(head, path, style).splitlines()[:max_lines]
