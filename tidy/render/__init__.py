"""Rendering primitives: ANSI text shaping and the per-frame drawing surface."""

from .ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width, fit_ansi_line, strip_ansi
from .surface import Surface

__all__ = [
    "ANSI_ESCAPE_RE",
    "Surface",
    "clip_ansi_line",
    "display_width",
    "fit_ansi_line",
    "strip_ansi",
]
