"""Signals and messages exchanged between screens and the driver.

A screen's input handler returns an ordered tuple of primitive signals. The
driver applies them left to right, so composing two groups with ``compose``
keeps both their contents and their order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .contexts.base import ContextId


@dataclass(frozen=True)
class FileSelected:
    """The user picked ``path`` for tagging."""

    path: Path


Message = FileSelected


@dataclass(frozen=True)
class Quit:
    """Stop the driver loop."""


@dataclass(frozen=True)
class SwitchTo:
    """Make ``context_id`` the active screen."""

    context_id: ContextId


@dataclass(frozen=True)
class DeliverMessage:
    """Hand ``message`` to the screen registered under ``context_id``."""

    context_id: ContextId
    message: Message


Signal = Union[Quit, SwitchTo, DeliverMessage]
Signals = tuple[Signal, ...]

NO_SIGNALS: Signals = ()


def compose(*parts: Signal | Iterable[Signal]) -> Signals:
    """Flatten signals and signal groups into one ordered tuple."""
    out: list[Signal] = []
    for part in parts:
        if isinstance(part, (Quit, SwitchTo, DeliverMessage)):
            out.append(part)
        else:
            out.extend(part)
    return tuple(out)


__all__ = [
    "DeliverMessage",
    "FileSelected",
    "Message",
    "NO_SIGNALS",
    "Quit",
    "Signal",
    "Signals",
    "SwitchTo",
    "compose",
]
