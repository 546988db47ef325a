"""Tag screen bound to one file chosen on the file list."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import DEFAULT_STYLE
from ..errors import UnknownMessage
from ..input import KeyComboBinding, KeyComboRegistry
from ..metadata import metadata_summary
from ..preview import preview_lines
from ..render import Surface
from ..signals import FileSelected, Message, Signals, SwitchTo
from ..snapshot import DirSnapshot
from .base import ContextId

logger = logging.getLogger(__name__)

FILE_BOX_HEIGHT = 3
COMMANDS_HEIGHT = 3
NO_FILE_LABEL = "no file selected"
NO_TAGS_LABEL = "(no tags)"
NO_PREVIEW_LABEL = "(no preview available)"
COMMANDS_LABEL = "(q) back to list"


class TaggingContext:
    """Shows the bound file; ``bound_file`` only changes via ``FileSelected``."""

    context_id = ContextId.TAGGING

    def __init__(self, style: str = DEFAULT_STYLE, no_color: bool = False) -> None:
        self.bound_file: Path | None = None
        self.tag_entries: list[str] = []
        self.style = style
        self.no_color = no_color
        self._preview_key: tuple[Path, int] | None = None
        self._preview: list[str] | None = None

    def handle_input(self, event: str, snapshot: DirSnapshot) -> Signals:
        # Keys other than "q" are reserved for tag editing.
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("q",), lambda: (SwitchTo(ContextId.MAIN),)),
        )
        return registry.dispatch(event)

    def receive_message(self, message: Message) -> None:
        if not isinstance(message, FileSelected):
            raise UnknownMessage(f"{type(self).__name__} cannot handle {message!r}")
        logger.info("tag screen bound to %s", message.path)
        self.bound_file = message.path

    def _preview_for(self, path: Path, max_lines: int) -> list[str] | None:
        key = (path, max_lines)
        if key != self._preview_key:
            self._preview = preview_lines(path, max_lines, style=self.style, no_color=self.no_color)
            self._preview_key = key
        return self._preview

    def render(self, surface: Surface, snapshot: DirSnapshot) -> None:
        theme = surface.theme
        top = 1
        usable = max(0, surface.height - 2)
        body_height = max(3, usable - FILE_BOX_HEIGHT - COMMANDS_HEIGHT)

        path = self.bound_file
        if path is None:
            surface.box(top, FILE_BOX_HEIGHT, "File", [f"{theme.dim}{NO_FILE_LABEL}{theme.reset}"], margin=2)
            body = [f"{theme.dim}{NO_FILE_LABEL}{theme.reset}"]
        else:
            surface.box(top, FILE_BOX_HEIGHT, "File", [str(path)], margin=2)
            tags = ", ".join(self.tag_entries) if self.tag_entries else NO_TAGS_LABEL
            body = [
                f"Tags: {tags}",
                f"{theme.info}{metadata_summary(path)}{theme.reset}",
                "",
            ]
            room = max(0, body_height - 2 - len(body))
            preview = self._preview_for(path, room)
            if preview is None:
                body.append(f"{theme.dim}{NO_PREVIEW_LABEL}{theme.reset}")
            else:
                body.extend(preview)
        surface.box(top + FILE_BOX_HEIGHT, body_height, "Tag Screen", body, margin=2)
        surface.box(
            top + FILE_BOX_HEIGHT + body_height,
            COMMANDS_HEIGHT,
            "Commands",
            [COMMANDS_LABEL],
            margin=2,
        )
