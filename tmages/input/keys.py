"""Key bindings for the browser.

Translates key tokens from ``read_key`` into ``BrowserState`` commands. Each
handled key applies at most one mutation.
"""

from __future__ import annotations

from ..state import BrowserState
from .key_registry import KeyComboBinding, KeyComboRegistry

QUIT_KEYS = ("q", "Q", "ESC", "CTRL_C")
UP_KEYS = ("UP", "k")
DOWN_KEYS = ("DOWN", "j")
ACTIVATE_KEYS = ("ENTER", "RIGHT", "l")
PARENT_KEYS = ("LEFT", "h", "BACKSPACE")
PAGE_UP_KEYS = ("PAGE_UP",)
PAGE_DOWN_KEYS = ("PAGE_DOWN",)
HOME_KEYS = ("HOME", "g")
END_KEYS = ("END", "G")


class BrowserKeyHandler:
    """Dispatch normalized key tokens onto one ``BrowserState``."""

    def __init__(self, state: BrowserState) -> None:
        self.state = state
        self.skip_next_lf = False
        self.registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(QUIT_KEYS, self._quit),
            KeyComboBinding(UP_KEYS, lambda: state.move_selection(-1)),
            KeyComboBinding(DOWN_KEYS, lambda: state.move_selection(1)),
            KeyComboBinding(ACTIVATE_KEYS, state.activate),
            KeyComboBinding(PARENT_KEYS, state.ascend),
            KeyComboBinding(PAGE_UP_KEYS, lambda: state.move_selection(-state.viewport_height)),
            KeyComboBinding(PAGE_DOWN_KEYS, lambda: state.move_selection(state.viewport_height)),
            KeyComboBinding(HOME_KEYS, lambda: state.move_selection(-len(state.entries))),
            KeyComboBinding(END_KEYS, lambda: state.move_selection(len(state.entries))),
        )

    def _quit(self) -> bool:
        self.state.request_exit()
        return True

    def normalize(self, key: str) -> str | None:
        """Fold CR/LF variants into ``ENTER``; returns ``None`` for a swallowed LF.

        Terminals that send CR LF for Enter would otherwise activate twice.
        """
        if self.skip_next_lf and key == "ENTER_LF":
            self.skip_next_lf = False
            return None
        self.skip_next_lf = key == "ENTER_CR"
        if key in {"ENTER_CR", "ENTER_LF"}:
            return "ENTER"
        return key

    def handle_key(self, key: str) -> bool:
        """Apply ``key`` to the state; returns whether the screen needs a redraw."""
        if self.state.exit:
            return False
        normalized = self.normalize(key)
        if normalized is None:
            return False
        return bool(self.registry.dispatch(normalized))
