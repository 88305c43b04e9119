"""Navigation state for the directory browser.

``BrowserState`` owns the current directory, its entry list, the selection
and the scroll offset. Commands mutate it in place; ``current_view`` is the
read-only query the renderer uses every frame.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ListingError
from .listing import entry_name, is_directory_entry, is_parent_marker, list_directory
from .preview import IMAGE_EXTENSIONS, is_image_name

LOGGER = logging.getLogger(__name__)


def clamp_scroll(selected: int, scroll: int, viewport_height: int) -> int:
    """Return the smallest scroll offset change that keeps ``selected`` visible.

    Moving above the window snaps the window top to ``selected``; moving past
    the bottom makes ``selected`` the last visible row. Otherwise the window
    stays where it is.
    """
    rows = max(1, viewport_height)
    if selected < scroll:
        scroll = selected
    elif selected >= scroll + rows:
        scroll = selected - rows + 1
    return max(0, scroll)


def default_start_dir() -> Path:
    """Return the user's home directory, or ``.`` when it cannot be resolved."""
    try:
        return Path.home()
    except (KeyError, RuntimeError):
        return Path(".")


@dataclass(frozen=True)
class BrowserView:
    """Snapshot of the visible part of the listing for one frame."""

    current_dir: Path
    entries: tuple[str, ...]
    start: int
    selected: int

    @property
    def selected_row(self) -> int | None:
        """Row of the selection inside ``entries``, if visible."""
        return self.relative_index(self.selected)

    def relative_index(self, absolute_index: int) -> int | None:
        """Map an index into the full listing to a row in this view."""
        row = absolute_index - self.start
        if 0 <= row < len(self.entries):
            return row
        return None

    def absolute_index(self, row: int) -> int:
        """Map a visible row back to its index in the full listing."""
        return self.start + row


@dataclass
class BrowserState:
    current_dir: Path
    entries: list[str]
    selected: int = 0
    scroll: int = 0
    exit: bool = False
    viewport_height: int = 1
    lister: Callable[[Path], list[str]] = field(default=list_directory, repr=False, compare=False)

    @classmethod
    def open(
        cls,
        start_dir: Path | None = None,
        lister: Callable[[Path], list[str]] = list_directory,
    ) -> "BrowserState":
        """Create state rooted at ``start_dir`` (home by default).

        A failed initial listing propagates: there is nothing to browse.
        """
        directory = default_start_dir() if start_dir is None else start_dir
        directory = directory.expanduser().resolve()
        entries = lister(directory)
        LOGGER.debug("opened %s with %d entries", directory, len(entries))
        return cls(current_dir=directory, entries=entries, lister=lister)

    def move_selection(self, delta: int) -> bool:
        """Move the selection by ``delta`` rows without wrapping.

        Returns whether the selection changed.
        """
        if self.exit or not self.entries:
            return False
        target = max(0, min(self.selected + delta, len(self.entries) - 1))
        if target == self.selected:
            return False
        self.selected = target
        self.scroll = clamp_scroll(self.selected, self.scroll, self.viewport_height)
        return True

    def resize(self, viewport_height: int) -> None:
        """Record the number of list rows the caller draws and re-clamp scroll."""
        self.viewport_height = max(1, viewport_height)
        self.scroll = clamp_scroll(self.selected, self.scroll, self.viewport_height)

    def activate(self) -> bool:
        """Act on the selected entry; returns whether the directory changed.

        The parent marker ascends (a no-op at the filesystem root), directory
        entries descend when the child is still a directory, and file entries
        do nothing. A listing failure rejects the move and keeps every field.
        """
        if self.exit:
            return False
        entry = self.selected_entry()
        if entry is None:
            return False

        if is_parent_marker(entry):
            return self.ascend()
        if not is_directory_entry(entry):
            return False
        target = self.current_dir / entry_name(entry)
        if not target.is_dir():
            LOGGER.debug("skipping %s: no longer a directory", target)
            return False
        return self.navigate_to(target)

    def ascend(self) -> bool:
        """Go to the parent directory regardless of the selection."""
        if self.exit:
            return False
        parent = self.current_dir.parent
        if parent == self.current_dir:
            return False
        return self.navigate_to(parent)

    def navigate_to(self, directory: Path) -> bool:
        """Re-list ``directory`` and make it current; keep state on failure."""
        try:
            entries = self.lister(directory)
        except ListingError as exc:
            LOGGER.debug("navigation to %s rejected: %s", directory, exc)
            return False
        self.current_dir = directory
        self.entries = entries
        self.selected = 0
        self.scroll = 0
        return True

    def request_exit(self) -> None:
        self.exit = True

    def current_view(self, viewport_height: int) -> BrowserView:
        """Return the visible window for ``viewport_height`` rows.

        Scroll is recomputed for the given height without touching stored state.
        """
        rows = max(1, viewport_height)
        start = clamp_scroll(self.selected, self.scroll, rows)
        return BrowserView(
            current_dir=self.current_dir,
            entries=tuple(self.entries[start : start + rows]),
            start=start,
            selected=self.selected,
        )

    def selected_entry(self) -> str | None:
        if 0 <= self.selected < len(self.entries):
            return self.entries[self.selected]
        return None

    def selected_image_path(self, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> Path | None:
        """Return the selected path when it is a regular file with an image extension."""
        entry = self.selected_entry()
        if entry is None or is_parent_marker(entry) or is_directory_entry(entry):
            return None
        if not is_image_name(entry, extensions):
            return None
        path = self.current_dir / entry
        if not path.is_file():
            return None
        return path


__all__ = [
    "BrowserState",
    "BrowserView",
    "clamp_scroll",
    "default_start_dir",
]
