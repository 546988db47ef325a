"""Key tables that map key tokens to signal-producing actions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..signals import NO_SIGNALS, Signals


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable from any of ``combos``."""

    combos: tuple[str, ...]
    handler: Callable[[], Signals]


class KeyComboRegistry:
    """Exact-match dispatch table; later bindings replace earlier ones."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], Signals]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register ``bindings`` in order and return ``self`` for chaining."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> Signals:
        """Run the action bound to ``key``; unbound keys produce no signals."""
        handler = self._handlers.get(key)
        if handler is None:
            return NO_SIGNALS
        return handler()
