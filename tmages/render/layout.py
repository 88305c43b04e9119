"""Frame geometry for the two-pane browser screen.

All rects are 0-based cell coordinates. The outer frame keeps one blank cell
on each side (title on the top row, key hints on the bottom row) and the
remaining area is split into the list pane and the preview pane.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LEFT_PANE_PERCENT = 50.0


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    def inner(self, margin: int = 1) -> "Rect":
        """Return this rect shrunk by ``margin`` cells on every side."""
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Rect(self.x + margin, self.y + margin, width, height)


@dataclass(frozen=True)
class FrameLayout:
    screen: Rect
    list_pane: Rect
    preview_pane: Rect

    @property
    def list_rows(self) -> int:
        """Number of entry rows inside the bordered list pane."""
        return max(1, self.list_pane.height - 2)


def split_frame(columns: int, lines: int, left_pane_percent: float | None = None) -> FrameLayout:
    """Partition a ``columns`` x ``lines`` screen into list and preview panes."""
    screen = Rect(0, 0, max(0, columns), max(0, lines))
    body = screen.inner()
    percent = DEFAULT_LEFT_PANE_PERCENT if left_pane_percent is None else left_pane_percent
    percent = max(1.0, min(99.0, percent))
    left_width = int(round(body.width * percent / 100.0))
    left_width = max(0, min(body.width, left_width))
    list_pane = Rect(body.x, body.y, left_width, body.height)
    preview_pane = Rect(body.x + left_width, body.y, body.width - left_width, body.height)
    return FrameLayout(screen=screen, list_pane=list_pane, preview_pane=preview_pane)


__all__ = [
    "DEFAULT_LEFT_PANE_PERCENT",
    "FrameLayout",
    "Rect",
    "split_frame",
]
