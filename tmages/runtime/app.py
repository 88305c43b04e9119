"""Runtime bootstrap: build state and terminal, then enter the event loop."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..state import BrowserState
from ..ui_theme import resolve_theme
from .config import BrowserConfig, load_browser_config
from .loop import RuntimeLoopOptions, run_main_loop
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)


def run_browser(
    start_dir: Path | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    config: BrowserConfig | None = None,
) -> None:
    """Browse from ``start_dir`` (config ``start_dir``, then home, when omitted).

    ``ListingError`` for the start directory and ``TerminalError`` propagate.
    """
    if config is None:
        config = load_browser_config()
    if start_dir is None:
        start_dir = config.start_dir

    state = BrowserState.open(start_dir)
    options = RuntimeLoopOptions(
        theme=resolve_theme(theme_name or config.theme, no_color=no_color),
        left_pane_percent=config.left_pane_percent,
        image_extensions=config.image_extensions,
    )
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    LOGGER.debug("starting browser in %s (theme=%s)", state.current_dir, options.theme.name)
    run_main_loop(state, terminal, stdin_fd, options)


def stdin_is_terminal() -> bool:
    try:
        return os.isatty(sys.stdin.fileno())
    except (AttributeError, OSError, ValueError):
        return False
