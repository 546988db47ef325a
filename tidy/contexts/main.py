"""File list screen with a wrapping selection cursor."""

from __future__ import annotations

import logging
import textwrap

from ..errors import UnknownMessage
from ..input import KeyComboBinding, KeyComboRegistry
from ..metadata import is_directory, metadata_summary
from ..render import Surface
from ..signals import NO_SIGNALS, DeliverMessage, FileSelected, Message, Quit, Signals, SwitchTo, compose
from ..snapshot import DirSnapshot
from ..ui_theme import UITheme
from .base import ContextId

logger = logging.getLogger(__name__)

COMMANDS_HEIGHT = 3
INFO_HEIGHT = 4
EMPTY_DIRECTORY_LABEL = "(empty directory)"
NO_SELECTION_LABEL = "No entry selected"
COMMANDS_LABEL = "(t)ag  (j/k) move  (q)uit"


class MainContext:
    """Directory listing plus cursor; owns ``selected_index`` exclusively."""

    context_id = ContextId.MAIN

    def __init__(self, selected_index: int | None = None) -> None:
        self.selected_index = selected_index
        # First visible list row; display-only.
        self.list_start = 0

    @classmethod
    def for_snapshot(cls, snapshot: DirSnapshot) -> MainContext:
        """Create a screen with the first entry selected when there is one."""
        return cls(selected_index=0 if snapshot.files else None)

    def cursor_up(self, count: int) -> Signals:
        self._move(-1, count)
        return NO_SIGNALS

    def cursor_down(self, count: int) -> Signals:
        self._move(1, count)
        return NO_SIGNALS

    def _move(self, delta: int, count: int) -> None:
        """Step the cursor by ``delta`` over ``count`` entries, wrapping at both ends."""
        if count <= 0:
            return
        if self.selected_index is None:
            self.selected_index = 0
            return
        index = min(self.selected_index, count - 1)
        if delta < 0:
            self.selected_index = index - 1 if index > 0 else count - 1
        else:
            self.selected_index = index + 1 if index < count - 1 else 0

    def tag_request(self, snapshot: DirSnapshot) -> Signals:
        """Switch to the tag screen and hand it the selected file.

        Without a valid selection the request is dropped.
        """
        index = self.selected_index
        if index is None or not 0 <= index < len(snapshot.files):
            return NO_SIGNALS
        target = ContextId.TAGGING
        return compose(
            SwitchTo(target),
            DeliverMessage(target, FileSelected(snapshot.files[index])),
        )

    def handle_input(self, event: str, snapshot: DirSnapshot) -> Signals:
        count = len(snapshot.files)
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("q",), lambda: (Quit(),)),
            KeyComboBinding(("UP", "k"), lambda: self.cursor_up(count)),
            KeyComboBinding(("DOWN", "j"), lambda: self.cursor_down(count)),
            KeyComboBinding(("t",), lambda: self.tag_request(snapshot)),
        )
        return registry.dispatch(event)

    def receive_message(self, message: Message) -> None:
        if isinstance(message, FileSelected):
            logger.debug("file list ignores %r", message)
            return
        raise UnknownMessage(f"{type(self).__name__} cannot handle {message!r}")

    def _entry_label(self, snapshot: DirSnapshot, index: int, theme: UITheme) -> str:
        path = snapshot.files[index]
        if is_directory(path):
            return f"{theme.dir_icon}📁 {path}/{theme.reset}"
        return f"{theme.file_icon}📄 {path}{theme.reset}"

    def _visible_window(self, rows: int, count: int) -> range:
        """Scroll ``list_start`` so the selected row stays on screen."""
        selected = self.selected_index
        if selected is not None:
            if selected < self.list_start:
                self.list_start = selected
            elif selected >= self.list_start + rows:
                self.list_start = selected - rows + 1
        self.list_start = max(0, min(self.list_start, max(0, count - rows)))
        return range(self.list_start, min(count, self.list_start + rows))

    def render(self, surface: Surface, snapshot: DirSnapshot) -> None:
        theme = surface.theme
        top = 1
        usable = max(0, surface.height - 2)
        list_height = max(3, usable - COMMANDS_HEIGHT - INFO_HEIGHT)
        list_rows = list_height - 2

        count = len(snapshot.files)
        if count == 0:
            lines = [f"{theme.dim}{EMPTY_DIRECTORY_LABEL}{theme.reset}"]
            highlight = None
        else:
            window = self._visible_window(list_rows, count)
            lines = [self._entry_label(snapshot, idx, theme) for idx in window]
            highlight = None
            if self.selected_index is not None and self.selected_index in window:
                highlight = self.selected_index - window.start
        surface.box(top, list_height, snapshot.path, lines, highlight=highlight)

        commands_top = top + list_height
        surface.box(commands_top, COMMANDS_HEIGHT, "Commands", [COMMANDS_LABEL])

        index = self.selected_index
        if index is not None and 0 <= index < count:
            info = metadata_summary(snapshot.files[index])
        else:
            info = NO_SELECTION_LABEL
        inner = max(1, surface.width - 4)
        surface.box(
            commands_top + COMMANDS_HEIGHT,
            INFO_HEIGHT,
            "Info",
            textwrap.wrap(info, inner) or [""],
            style=theme.info,
        )
