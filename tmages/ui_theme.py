"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the frame chrome, the entry list, and the
key-hint line. ``--no-color`` selects the plain palette.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    app_title: str
    pane_title: str
    preview_title: str
    border: str
    entry_dir: str
    entry_image: str
    entry_file: str
    entry_parent: str
    selected: str
    hint_text: str
    hint_key: str
    hint_quit: str


DEFAULT_THEME = UITheme(
    name="default",
    app_title="\033[1;32m",
    pane_title="\033[34m",
    preview_title="\033[1;34m",
    border="\033[2m",
    entry_dir="\033[1;34m",
    entry_image="\033[38;5;179m",
    entry_file="\033[38;5;252m",
    entry_parent="\033[38;5;44m",
    selected="\033[1;37;44m",
    hint_text="\033[38;5;250m",
    hint_key="\033[1;34m",
    hint_quit="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    app_title="\033[1;38;5;45m",
    pane_title="\033[38;5;39m",
    preview_title="\033[1;38;5;39m",
    border="\033[2;38;5;31m",
    entry_dir="\033[1;38;5;45m",
    entry_image="\033[38;5;153m",
    entry_file="\033[38;5;252m",
    entry_parent="\033[38;5;39m",
    selected="\033[1;38;5;231;48;5;24m",
    hint_text="\033[2;38;5;110m",
    hint_key="\033[1;38;5;45m",
    hint_quit="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    app_title="",
    pane_title="",
    preview_title="",
    border="",
    entry_dir="",
    entry_image="",
    entry_file="",
    entry_parent="",
    selected="\033[7m",
    hint_text="",
    hint_key="",
    hint_quit="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
