"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

from .errors import TerminalError


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"standard input is not a terminal: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"cannot switch terminal to raw mode: {exc}") from exc
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l\x1b[2J")

    def disable_tui_mode(self) -> None:
        """Clear the screen, show the cursor, and restore the main buffer."""
        os.write(self.stdout_fd, b"\x1b[2J\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` with an 80x24 fallback."""
        term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    def write_frame(self, frame: str) -> None:
        os.write(self.stdout_fd, frame.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
