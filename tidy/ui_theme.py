"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (borders, list, info panel). Syntax
highlighting style for file previews remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by screens."""

    name: str
    border: str
    title: str
    selected: str
    info: str
    dim: str
    dir_icon: str
    file_icon: str
    reset: str


DEFAULT_THEME = UITheme(
    name="default",
    border="\033[37m",
    title="\033[1;37m",
    selected="\033[1;30;43m",
    info="\033[96m",
    dim="\033[2;38;5;250m",
    dir_icon="\033[1;34m",
    file_icon="\033[38;5;252m",
    reset="\033[0m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    selected="\033[1;30;48;5;45m",
    info="\033[38;5;153m",
    dim="\033[2;38;5;110m",
    dir_icon="\033[1;38;5;45m",
    file_icon="\033[38;5;117m",
    reset="\033[0m",
)

PLAIN_THEME = UITheme(
    name="plain",
    border="",
    title="",
    selected="\033[7m",
    info="",
    dim="",
    dir_icon="",
    file_icon="",
    reset="\033[0m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme; unknown names fall back to the default.

    ``no_color`` wins over ``name`` and keeps only reverse-video selection.
    """
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
