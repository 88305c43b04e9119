"""Rendering engine for the two-pane browser frame.

Builds one fully composed ANSI frame from a ``BrowserView`` and the frame
layout. Image previews are not drawn here; the runtime hands the preview
pane rect to ``ImagePreviewRenderer`` after the text frame is written.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width, fit_ansi_line
from ..listing import is_directory_entry, is_parent_marker
from ..preview import IMAGE_EXTENSIONS, is_image_name
from ..state import BrowserView
from ..ui_theme import UITheme
from .layout import FrameLayout, Rect

APP_TITLE = "< Tmages - image converter TUI >"
PREVIEW_TITLE = " Preview "
RESET = "\033[0m"
KEY_HINTS: tuple[tuple[str, str], ...] = (
    (" Up/Down ", "<↑/↓>"),
    (" Enter ", "<↵>"),
    (" Quit ", "<Q>"),
)


@dataclass
class RenderContext:
    view: BrowserView
    layout: FrameLayout
    theme: UITheme
    image_extensions: Iterable[str] = IMAGE_EXTENSIONS


def _styled(text: str, style: str) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{RESET}"


def _centered(text: str, width: int) -> str:
    """Center plain ``text`` in ``width`` cells, clipping when it does not fit."""
    text = clip_ansi_line(text, width)
    pad = max(0, width - display_width(text))
    left = pad // 2
    return " " * left + text + " " * (pad - left)


def entry_style(entry: str, theme: UITheme, image_extensions: Iterable[str] = IMAGE_EXTENSIONS) -> str:
    """Return the palette slot used to draw ``entry``."""
    if is_parent_marker(entry):
        return theme.entry_parent
    if is_directory_entry(entry):
        return theme.entry_dir
    if is_image_name(entry, image_extensions):
        return theme.entry_image
    return theme.entry_file


def format_entry_row(
    entry: str,
    width: int,
    theme: UITheme,
    *,
    selected: bool,
    image_extensions: Iterable[str] = IMAGE_EXTENSIONS,
) -> str:
    """Format one list row padded to ``width`` cells."""
    text = fit_ansi_line(entry, width)
    if selected:
        return _styled(text, theme.selected or "\033[7m")
    return _styled(text, entry_style(entry, theme, image_extensions))


def _border_top(width: int, title: str, title_style: str, theme: UITheme, *, align_right: bool = False) -> str:
    if width <= 0:
        return ""
    if width == 1:
        return _styled("┌", theme.border)
    inner = width - 2
    title = clip_ansi_line(title, inner)
    fill = "─" * (inner - display_width(title))
    if align_right:
        middle = _styled(fill, theme.border) + _styled(title, title_style)
    else:
        middle = _styled(title, title_style) + _styled(fill, theme.border)
    return _styled("┌", theme.border) + middle + _styled("┐", theme.border)


def _border_bottom(width: int, theme: UITheme) -> str:
    if width <= 0:
        return ""
    if width == 1:
        return _styled("└", theme.border)
    return _styled("└" + "─" * (width - 2) + "┘", theme.border)


def _border_row(width: int, content: str, theme: UITheme) -> str:
    if width <= 0:
        return ""
    if width == 1:
        return _styled("│", theme.border)
    edge = _styled("│", theme.border)
    return edge + content + edge


def _pane_rows(
    rect: Rect,
    title: str,
    title_style: str,
    body: list[str],
    theme: UITheme,
    *,
    align_title_right: bool = False,
) -> list[str]:
    """Return ``rect.height`` rows drawing a bordered pane around ``body``."""
    if rect.height <= 0:
        return []
    rows = [_border_top(rect.width, title, title_style, theme, align_right=align_title_right)]
    inner_width = max(0, rect.width - 2)
    for idx in range(max(0, rect.height - 2)):
        content = body[idx] if idx < len(body) else " " * inner_width
        rows.append(_border_row(rect.width, content, theme))
    if rect.height >= 2:
        rows.append(_border_bottom(rect.width, theme))
    return rows


def list_pane_lines(context: RenderContext) -> list[str]:
    """Return the bordered list pane rows, title line first."""
    rect = context.layout.list_pane
    inner_width = max(0, rect.width - 2)
    view = context.view
    body = [
        format_entry_row(
            entry,
            inner_width,
            context.theme,
            selected=view.absolute_index(row) == view.selected,
            image_extensions=context.image_extensions,
        )
        for row, entry in enumerate(view.entries)
    ]
    return _pane_rows(rect, f" Directory: {view.current_dir}", context.theme.pane_title, body, context.theme)


def preview_pane_lines(context: RenderContext) -> list[str]:
    """Return the empty bordered preview pane rows; images are drawn over it."""
    return _pane_rows(
        context.layout.preview_pane,
        PREVIEW_TITLE,
        context.theme.preview_title,
        [],
        context.theme,
        align_title_right=True,
    )


def key_hint_line(width: int, theme: UITheme) -> str:
    """Return the centered key-hint row."""
    plain = "".join(label + key for label, key in KEY_HINTS)
    if display_width(plain) > width:
        return _centered(plain, width)
    pad = width - display_width(plain)
    parts = [" " * (pad // 2)]
    for idx, (label, key) in enumerate(KEY_HINTS):
        key_style = theme.hint_quit if idx == len(KEY_HINTS) - 1 else theme.hint_key
        parts.append(_styled(label, theme.hint_text))
        parts.append(_styled(key, key_style))
    parts.append(" " * (pad - pad // 2))
    return "".join(parts)


def build_frame_lines(context: RenderContext) -> list[str]:
    """Compose every screen row of one frame."""
    layout = context.layout
    screen = layout.screen
    if screen.width <= 0 or screen.height <= 0:
        return []
    theme = context.theme

    rows: list[str] = []
    rows.append(_styled(_centered(APP_TITLE, screen.width), theme.app_title))

    list_rows = list_pane_lines(context)
    preview_rows = preview_pane_lines(context)
    left_margin = " " * layout.list_pane.x
    right_margin = " " * max(0, screen.width - layout.preview_pane.right)
    for idx in range(layout.list_pane.height):
        left = list_rows[idx] if idx < len(list_rows) else " " * layout.list_pane.width
        right = preview_rows[idx] if idx < len(preview_rows) else " " * layout.preview_pane.width
        rows.append(left_margin + left + right + right_margin)

    while len(rows) < screen.height - 1:
        rows.append(" " * screen.width)
    if screen.height >= 2:
        rows.append(key_hint_line(screen.width, theme))
    return rows[: screen.height]


def render_frame(context: RenderContext) -> str:
    """Return the frame as one string that repaints the screen from the home position."""
    return "\033[H" + "\r\n".join(build_frame_lines(context))


__all__ = [
    "APP_TITLE",
    "PREVIEW_TITLE",
    "KEY_HINTS",
    "RenderContext",
    "build_frame_lines",
    "entry_style",
    "format_entry_row",
    "key_hint_line",
    "list_pane_lines",
    "preview_pane_lines",
    "render_frame",
]
