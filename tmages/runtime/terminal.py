"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching, and is the single
place that writes bytes to the terminal: text frames and the raw graphics
payloads produced by the image preview renderer.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from ..errors import TerminalError

LOGGER = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[2J"
EXIT_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions and raw output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"cannot read terminal attributes: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"cannot enter raw mode: {exc}") from exc
        self.write_raw(ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Restore the main screen, the cursor, and the saved tty attributes."""
        try:
            self.write_raw(EXIT_TUI_SEQUENCE)
        finally:
            try:
                termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            except termios.error as exc:
                raise TerminalError(f"cannot restore terminal mode: {exc}") from exc

    def write_raw(self, payload: bytes) -> None:
        """Write ``payload`` unbuffered, retrying short writes until all bytes land."""
        view = memoryview(payload)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def write_text(self, text: str) -> None:
        """Encode and write a rendered text frame."""
        self.write_raw(text.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def session(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            LOGGER.debug("entering terminal session")
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()
            LOGGER.debug("terminal session restored")
