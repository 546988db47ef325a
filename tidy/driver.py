"""Main interactive loop: render, block for one key, apply signals.

Strictly single-threaded. Each iteration finishes rendering, reading, and
signal application before the next one starts, so a delivered message is
always seen by its target before that target is drawn again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .contexts import ContextRegistry
from .input import is_pointer_event, read_key
from .render import Surface
from .signals import DeliverMessage, Quit, Signal, SwitchTo
from .snapshot import DirSnapshot
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


@dataclass
class Driver:
    """Routes input to the active screen and re-renders it every frame."""

    registry: ContextRegistry
    snapshot: DirSnapshot
    theme: UITheme = DEFAULT_THEME

    def render_frame(self, columns: int, lines: int) -> Surface:
        """Draw the active screen onto a fresh surface of the given size."""
        surface = Surface(columns, lines, theme=self.theme)
        self.registry.get_active().render(surface, self.snapshot)
        return surface

    def apply(self, signals: Iterable[Signal]) -> bool:
        """Apply ``signals`` in order; return ``True`` once a ``Quit`` is reached.

        Signals after a ``Quit`` in the same batch are not applied.
        """
        for signal in signals:
            if isinstance(signal, Quit):
                logger.info("quit requested from %s", self.registry.active_id.value)
                return True
            if isinstance(signal, SwitchTo):
                self.registry.switch_to(signal.context_id)
            elif isinstance(signal, DeliverMessage):
                self.registry.deliver(signal.context_id, signal.message)
            else:
                raise TypeError(f"unknown signal {signal!r}")
        return False

    def dispatch(self, event: str) -> bool:
        """Hand one key to the active screen and apply what it returns."""
        signals = self.registry.get_active().handle_input(event, self.snapshot)
        return self.apply(signals)

    def run(
        self,
        terminal: TerminalController,
        read_event: Callable[[], str] | None = None,
    ) -> None:
        """Run until a screen emits ``Quit``; the terminal is restored on exit."""
        read = read_event if read_event is not None else (lambda: read_key(terminal.stdin_fd))

        with terminal.raw_mode():
            while True:
                columns, lines = terminal.size()
                terminal.write_frame(self.render_frame(columns, lines).compose_frame())

                key = read()
                if is_pointer_event(key):
                    continue
                if self.dispatch(key):
                    return
