"""Cursor, tag-request, and rendering behavior of the file list screen.

Covers wrap-around laws, empty-directory edge cases, and the signal batch
emitted when the user asks to tag the selected file.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from tidy.contexts import ContextId, MainContext
from tidy.render import Surface
from tidy.signals import DeliverMessage, FileSelected, Quit, SwitchTo
from tidy.snapshot import DirSnapshot, build_snapshot


def _snapshot(*names: str) -> DirSnapshot:
    return DirSnapshot(path="/virtual", files=tuple(Path("/virtual") / name for name in names))


class MainContextCursorTests(unittest.TestCase):
    def test_cursor_down_cycles_back_to_start_after_n_steps(self) -> None:
        for count in range(1, 7):
            snapshot = _snapshot(*(f"f{idx}" for idx in range(count)))
            for start in range(count):
                ctx = MainContext(selected_index=start)
                for _ in range(count):
                    ctx.handle_input("j", snapshot)
                self.assertEqual(ctx.selected_index, start, (count, start))

    def test_up_then_down_and_down_then_up_are_identity(self) -> None:
        for count in range(1, 6):
            snapshot = _snapshot(*(f"f{idx}" for idx in range(count)))
            for start in range(count):
                ctx = MainContext(selected_index=start)
                ctx.handle_input("UP", snapshot)
                ctx.handle_input("DOWN", snapshot)
                self.assertEqual(ctx.selected_index, start)

                ctx.handle_input("j", snapshot)
                ctx.handle_input("k", snapshot)
                self.assertEqual(ctx.selected_index, start)

    def test_cursor_wraps_at_both_ends(self) -> None:
        snapshot = _snapshot("a", "b", "c")
        ctx = MainContext(selected_index=0)

        self.assertEqual(ctx.handle_input("k", snapshot), ())
        self.assertEqual(ctx.selected_index, 2)

        self.assertEqual(ctx.handle_input("j", snapshot), ())
        self.assertEqual(ctx.selected_index, 0)

    def test_empty_directory_ignores_moves_and_tag_request(self) -> None:
        snapshot = _snapshot()
        ctx = MainContext.for_snapshot(snapshot)
        self.assertIsNone(ctx.selected_index)

        for key in ("UP", "k", "DOWN", "j", "t"):
            self.assertEqual(ctx.handle_input(key, snapshot), ())
            self.assertIsNone(ctx.selected_index)

    def test_for_snapshot_selects_first_entry_when_present(self) -> None:
        self.assertEqual(MainContext.for_snapshot(_snapshot("a")).selected_index, 0)

    def test_move_without_selection_selects_first_entry(self) -> None:
        ctx = MainContext(selected_index=None)
        ctx.handle_input("j", _snapshot("a", "b"))
        self.assertEqual(ctx.selected_index, 0)

    def test_stale_index_is_clamped_before_moving(self) -> None:
        ctx = MainContext(selected_index=9)
        ctx.handle_input("k", _snapshot("a", "b", "c"))
        self.assertEqual(ctx.selected_index, 1)


class MainContextSignalTests(unittest.TestCase):
    def test_tag_request_emits_switch_and_single_delivery(self) -> None:
        snapshot = _snapshot("a.txt", "b.txt", "c.txt")
        for index in range(3):
            ctx = MainContext(selected_index=index)
            signals = ctx.handle_input("t", snapshot)

            switches = [signal for signal in signals if isinstance(signal, SwitchTo)]
            deliveries = [signal for signal in signals if isinstance(signal, DeliverMessage)]
            self.assertEqual(switches, [SwitchTo(ContextId.TAGGING)])
            self.assertEqual(
                deliveries,
                [DeliverMessage(ContextId.TAGGING, FileSelected(snapshot.files[index]))],
            )
            self.assertEqual(len(signals), 2)
            self.assertEqual(ctx.selected_index, index)

    def test_tag_request_without_selection_is_dropped(self) -> None:
        ctx = MainContext(selected_index=None)
        self.assertEqual(ctx.handle_input("t", _snapshot("a")), ())

    def test_quit_yields_only_quit(self) -> None:
        for index in (None, 0, 1):
            ctx = MainContext(selected_index=index)
            self.assertEqual(ctx.handle_input("q", _snapshot("a", "b")), (Quit(),))

    def test_unrecognized_keys_change_nothing(self) -> None:
        ctx = MainContext(selected_index=1)
        for key in ("x", "ESC", "ENTER", "Q", "T", "LEFT", "CTRL_C"):
            self.assertEqual(ctx.handle_input(key, _snapshot("a", "b")), ())
            self.assertEqual(ctx.selected_index, 1)


class MainContextRenderTests(unittest.TestCase):
    def test_render_lists_entries_with_highlighted_selection_and_info(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            snapshot = build_snapshot(root)
            ctx = MainContext(selected_index=1)
            surface = Surface(100, 24)

            ctx.render(surface, snapshot)

            text = surface.plain_text()
            self.assertIn(str(root), text)
            self.assertIn(f"📁 {root / 'docs'}/", text)
            self.assertIn(f"📄 {root / 'a.txt'}", text)
            self.assertIn("Commands", text)
            self.assertIn("(t)ag", text)
            self.assertIn("Created:", text)
            self.assertIn("Modified:", text)

            highlighted = [idx for idx, row in enumerate(surface.plain_rows()) if "a.txt" in row]
            self.assertEqual(len(highlighted), 1)
            self.assertIn(surface.theme.selected, surface.row(highlighted[0]))

    def test_render_empty_directory_shows_placeholders(self) -> None:
        ctx = MainContext(selected_index=None)
        surface = Surface(80, 24)

        ctx.render(surface, _snapshot())

        text = surface.plain_text()
        self.assertIn("(empty directory)", text)
        self.assertIn("No entry selected", text)

    def test_render_scrolls_to_keep_selection_visible(self) -> None:
        snapshot = _snapshot(*(f"file{idx:02d}" for idx in range(40)))
        ctx = MainContext(selected_index=35)
        surface = Surface(80, 20)

        ctx.render(surface, snapshot)

        self.assertIn("file35", surface.plain_text())
        self.assertNotIn("file00", surface.plain_text())
        self.assertEqual(ctx.selected_index, 35)


if __name__ == "__main__":
    unittest.main()
