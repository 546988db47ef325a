"""Screen identities and the capability set every screen implements."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..render import Surface
    from ..signals import Message, Signals
    from ..snapshot import DirSnapshot


class ContextId(Enum):
    """Closed set of screens the driver can switch between."""

    MAIN = "main"
    TAGGING = "tagging"


class Context(Protocol):
    """One UI mode with its own render/input/message logic and state."""

    context_id: ContextId

    def render(self, surface: Surface, snapshot: DirSnapshot) -> None:
        """Draw onto ``surface``; must not change anything but display state."""
        ...

    def handle_input(self, event: str, snapshot: DirSnapshot) -> Signals:
        """Interpret one key token; an empty tuple means nothing to apply."""
        ...

    def receive_message(self, message: Message) -> None:
        """Apply a message sent by another screen."""
        ...
