"""Main interactive event loop for the terminal UI.

One iteration: reconcile terminal size, redraw when something changed, then
read and apply one key. Every redraw writes the text frame first and the
image preview second, so the image lands on top of the freshly drawn pane.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import ImageReadError
from ..input import BrowserKeyHandler, read_key
from ..preview import IMAGE_EXTENSIONS, ImagePreviewRenderer
from ..render import RenderContext, render_frame
from ..render.layout import FrameLayout, split_frame
from ..state import BrowserState
from ..ui_theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)

# Input poll interval; only used to notice terminal resizes between keys.
KEY_POLL_TIMEOUT_MS = 200


@dataclass(frozen=True)
class RuntimeLoopOptions:
    theme: UITheme = DEFAULT_THEME
    left_pane_percent: float | None = None
    image_extensions: tuple[str, ...] = IMAGE_EXTENSIONS


def draw_frame(
    state: BrowserState,
    layout: FrameLayout,
    terminal: TerminalController,
    previewer: ImagePreviewRenderer,
    options: RuntimeLoopOptions,
    *,
    image_shown: bool = False,
) -> bool:
    """Write one text frame plus the preview image; returns whether an image is on screen."""
    view = state.current_view(layout.list_rows)
    terminal.write_text(render_frame(RenderContext(view, layout, options.theme, options.image_extensions)))

    image_path = state.selected_image_path(options.image_extensions)
    if image_path is None:
        if image_shown:
            previewer.clear()
        return False

    pane = layout.preview_pane
    try:
        previewer.render(image_path, pane.x, pane.y, pane.width, pane.height)
    except ImageReadError as exc:
        LOGGER.debug("no preview this frame: %s", exc)
        if image_shown:
            previewer.clear()
        return False
    return True


def run_main_loop(
    state: BrowserState,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions,
    *,
    previewer: ImagePreviewRenderer | None = None,
    key_reader: Callable[..., str] = read_key,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the browser until a quit key sets ``state.exit``."""
    if previewer is None:
        previewer = ImagePreviewRenderer(terminal.write_raw)
    key_handler = BrowserKeyHandler(state)
    image_shown = False
    last_size: tuple[int, int] | None = None
    dirty = True

    with terminal.session():
        while not state.exit:
            term = get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                if last_size is not None:
                    terminal.write_raw(b"\x1b[2J")
                last_size = size
                dirty = True
            layout = split_frame(term.columns, term.lines, options.left_pane_percent)
            state.resize(layout.list_rows)

            if dirty:
                image_shown = draw_frame(
                    state,
                    layout,
                    terminal,
                    previewer,
                    options,
                    image_shown=image_shown,
                )
                dirty = False

            try:
                key = key_reader(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if key_handler.handle_key(key):
                dirty = True

        if image_shown:
            previewer.clear()
