"""Owner of every screen instance and of the active-screen id."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import ContextNotFound
from ..signals import Message
from .base import Context, ContextId
from .main import MainContext
from .tagging import TaggingContext

logger = logging.getLogger(__name__)


@dataclass
class ContextRegistry:
    """One field per screen; switching only reassigns ``active_id``.

    Screens are created once and reused, so they keep their state (cursor
    position, bound file) across visits.
    """

    main: MainContext
    tagging: TaggingContext
    active_id: ContextId = ContextId.MAIN

    def get(self, context_id: ContextId) -> Context:
        if context_id is ContextId.MAIN:
            return self.main
        if context_id is ContextId.TAGGING:
            return self.tagging
        raise ContextNotFound(f"no screen registered for {context_id!r}")

    def get_active(self) -> Context:
        return self.get(self.active_id)

    def switch_to(self, context_id: ContextId) -> None:
        """Make ``context_id`` active without touching any screen's state."""
        if not isinstance(context_id, ContextId):
            raise ContextNotFound(f"no screen registered for {context_id!r}")
        if context_id is not self.active_id:
            logger.debug("switching screen %s -> %s", self.active_id.value, context_id.value)
        self.active_id = context_id

    def deliver(self, context_id: ContextId, message: Message) -> None:
        logger.debug("delivering %r to %s", message, context_id)
        self.get(context_id).receive_message(message)
