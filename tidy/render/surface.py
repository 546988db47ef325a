"""Row-based drawing surface handed to screens each frame.

Screens draw full-width rows and bordered boxes; the driver turns the surface
into one ANSI frame and writes it in a single call.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import fit_ansi_line, strip_ansi


class Surface:
    """Fixed-size grid of styled text rows."""

    def __init__(self, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> None:
        self.width = max(1, width)
        self.height = max(1, height)
        self.theme = theme
        self._rows: list[str] = [""] * self.height

    def put(self, row: int, text: str, *, indent: int = 0) -> None:
        """Replace ``row`` with ``text`` clipped to the surface width.

        Rows outside the surface are ignored.
        """
        if not 0 <= row < self.height:
            return
        self._rows[row] = " " * indent + fit_ansi_line(text, self.width - indent)

    def box(
        self,
        top: int,
        height: int,
        title: str,
        lines: Sequence[str],
        *,
        margin: int = 1,
        highlight: int | None = None,
        style: str = "",
    ) -> None:
        """Draw a bordered box of ``height`` rows starting at ``top``.

        ``lines`` fill the interior from the top and are clipped to fit.
        ``highlight`` indexes into ``lines`` and paints that row with the
        theme's selection style across the whole interior width.
        """
        if height < 2:
            return
        theme = self.theme
        outer = max(2, self.width - 2 * margin)
        inner = outer - 2
        label = f" {title} " if title else ""
        label = label[:inner]
        border_top = (
            f"{theme.border}┌{theme.reset}{theme.title}{label}{theme.reset}"
            f"{theme.border}{'─' * (inner - len(label))}┐{theme.reset}"
        )
        self.put(top, border_top, indent=margin)
        for offset in range(height - 2):
            text = lines[offset] if offset < len(lines) else ""
            body = fit_ansi_line(text, inner)
            if highlight is not None and offset == highlight:
                body = f"{theme.selected}{fit_ansi_line(strip_ansi(text), inner)}{theme.reset}"
            elif style:
                body = f"{style}{body}{theme.reset}"
            self.put(
                top + 1 + offset,
                f"{theme.border}│{theme.reset}{body}{theme.border}│{theme.reset}",
                indent=margin,
            )
        self.put(
            top + height - 1,
            f"{theme.border}└{'─' * inner}┘{theme.reset}",
            indent=margin,
        )

    def row(self, index: int) -> str:
        return self._rows[index]

    def plain_rows(self) -> list[str]:
        """Return rows with escape sequences removed and trailing blanks trimmed."""
        return [strip_ansi(row).rstrip() for row in self._rows]

    def plain_text(self) -> str:
        return "\n".join(self.plain_rows())

    def compose_frame(self) -> str:
        """Return an ANSI frame that repaints every row of the terminal."""
        out: list[str] = ["\033[H"]
        for idx, row in enumerate(self._rows):
            out.append(f"\033[{idx + 1};1H{row}\033[0m\033[K")
        return "".join(out)
