"""Tag screen binding, input, and rendering tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from tidy.contexts import ContextId, TaggingContext
from tidy.errors import UnknownMessage
from tidy.render import Surface
from tidy.signals import FileSelected, SwitchTo
from tidy.snapshot import DirSnapshot

EMPTY = DirSnapshot(path="/virtual", files=())


class TaggingContextTests(unittest.TestCase):
    def test_render_before_any_message_shows_no_file_selected(self) -> None:
        ctx = TaggingContext()
        surface = Surface(80, 24)

        ctx.render(surface, EMPTY)

        self.assertIsNone(ctx.bound_file)
        self.assertIn("no file selected", surface.plain_text())
        self.assertIn("Tag Screen", surface.plain_text())

    def test_file_selected_binds_file_and_render_reflects_it(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "notes.py"
            target.write_text("value = 1\nprint(value)\n", encoding="utf-8")
            ctx = TaggingContext(no_color=True)
            surface = Surface(100, 24)

            ctx.receive_message(FileSelected(target))
            ctx.render(surface, EMPTY)

            text = surface.plain_text()
            self.assertEqual(ctx.bound_file, target)
            self.assertIn(str(target), text)
            self.assertNotIn("no file selected", text)
            self.assertIn("(no tags)", text)
            self.assertIn("Modified:", text)
            self.assertIn("value = 1", text)
            self.assertIn("print(value)", text)

    def test_later_message_rebinds(self) -> None:
        ctx = TaggingContext()
        ctx.receive_message(FileSelected(Path("/virtual/a.txt")))
        ctx.receive_message(FileSelected(Path("/virtual/b.txt")))
        self.assertEqual(ctx.bound_file, Path("/virtual/b.txt"))

    def test_unreadable_bound_file_renders_preview_placeholder(self) -> None:
        ctx = TaggingContext()
        surface = Surface(80, 24)

        ctx.receive_message(FileSelected(Path("/virtual/missing.txt")))
        ctx.render(surface, EMPTY)

        text = surface.plain_text()
        self.assertIn("(no preview available)", text)
        self.assertIn("Created: unknown", text)

    def test_q_returns_to_main_only(self) -> None:
        ctx = TaggingContext()
        self.assertEqual(ctx.handle_input("q", EMPTY), (SwitchTo(ContextId.MAIN),))

    def test_other_keys_are_reserved_and_produce_nothing(self) -> None:
        ctx = TaggingContext()
        ctx.receive_message(FileSelected(Path("/virtual/a.txt")))
        for key in ("t", "j", "k", "UP", "ENTER", "x", "ESC"):
            self.assertEqual(ctx.handle_input(key, EMPTY), ())
        self.assertEqual(ctx.bound_file, Path("/virtual/a.txt"))
        self.assertEqual(ctx.tag_entries, [])

    def test_unknown_message_payload_is_a_programming_error(self) -> None:
        ctx = TaggingContext()
        with self.assertRaises(UnknownMessage):
            ctx.receive_message("not-a-message")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
