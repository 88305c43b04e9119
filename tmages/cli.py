"""Command-line front door for tmages.

Parses CLI options, resolves the start directory, configures debug logging,
and dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from .errors import ListingError, TerminalError
from .runtime import run_browser
from .runtime.app import stdin_is_terminal
from .runtime.config import DEFAULT_LOG_PATH
from .ui_theme import available_theme_names

DEBUG_ENV_VAR = "TMAGES_DEBUG"


def configure_logging(log_file: str | None) -> Path | None:
    """Send debug records to a file when requested; the TUI owns stdout/stderr.

    Returns the log path in use, or ``None`` when logging stays disabled.
    """
    if log_file is None and not os.environ.get(DEBUG_ENV_VAR):
        return None
    log_path = Path(log_file) if log_file is not None else DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return log_path


def resolve_start_dir(path_arg: str | None) -> Path | None:
    """Return the directory to browse for ``path_arg``; files map to their parent."""
    if path_arg is None:
        return None
    path = Path(path_arg).expanduser()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        return path.resolve().parent
    return path


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser."""
    parser = argparse.ArgumentParser(
        description="Browse directories and preview images inline with the Kitty graphics protocol."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to the home directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors; keep the selection highlight.")
    parser.add_argument(
        "--log-file",
        default=None,
        help=f"Write debug logs to this file (also enabled by {DEBUG_ENV_VAR}=1).",
    )
    args = parser.parse_args(argv)

    start_dir = resolve_start_dir(args.path)
    configure_logging(args.log_file)

    if not stdin_is_terminal():
        raise SystemExit("tmages needs an interactive terminal on stdin.")

    try:
        run_browser(start_dir, args.theme, args.no_color)
    except ListingError as exc:
        raise SystemExit(str(exc)) from exc
    except TerminalError as exc:
        raise SystemExit(f"terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
