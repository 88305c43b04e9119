"""Inline image previews via the Kitty graphics protocol.

The renderer reads raw image bytes, base64-encodes them, and hands one
escape-sequence payload to a ``write`` capability. Nothing else in the
runtime writes graphics commands, so the text renderer stays unaware of them.
"""

from __future__ import annotations

import base64
import logging
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from .errors import ImageReadError

LOGGER = logging.getLogger(__name__)

IMAGE_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "gif", "bmp", "webp")

# Columns/rows consumed by the 1-based origin plus the pane border.
BORDER_INSET = 2

_APC_START = b"\x1b_G"
_STRING_TERMINATOR = b"\x1b\\"


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """Lower-case extensions and drop leading dots and blanks."""
    out: list[str] = []
    for ext in extensions:
        candidate = str(ext).strip().lstrip(".").lower()
        if candidate and candidate not in out:
            out.append(candidate)
    return tuple(out)


def is_image_name(name: str, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> bool:
    """Return whether ``name`` has an extension from the preview allow-list."""
    suffix = Path(name).suffix
    if not suffix:
        return False
    return suffix[1:].lower() in normalize_extensions(extensions)


def clear_images_command() -> bytes:
    """Return the command deleting every image placement on screen."""
    return _APC_START + b"a=d,d=A,q=2;" + _STRING_TERMINATOR


def image_placement(x: int, y: int, width: int, height: int) -> tuple[int, int, int, int]:
    """Map a 0-based bordered pane rect to ``(col, row, cols, rows)`` inside the border."""
    return (
        x + BORDER_INSET,
        y + BORDER_INSET,
        max(0, width - BORDER_INSET),
        max(0, height - BORDER_INSET),
    )


def encode_image_preview(data: bytes, x: int, y: int, width: int, height: int) -> bytes:
    """Build the clear + transmit-and-display payload for ``data``.

    The cursor is parked on the target cell for the placement and restored
    afterwards, so the next text frame is unaffected.
    """
    col, row, cols, rows = image_placement(x, y, width, height)
    encoded = base64.b64encode(data)
    control = f"f=100,a=T,C=1,q=2,X={col},Y={row},c={cols},r={rows};".encode("ascii")
    return b"".join(
        (
            clear_images_command(),
            f"\x1b7\x1b[{row};{col}H".encode("ascii"),
            _APC_START,
            control,
            encoded,
            _STRING_TERMINATOR,
            b"\x1b8",
        )
    )


def write_stdout(payload: bytes) -> None:
    """Write ``payload`` to standard output and flush it immediately."""
    stream = sys.stdout.buffer
    stream.write(payload)
    stream.flush()


class ImagePreviewRenderer:
    """Render image files into a pane region through a raw-bytes writer."""

    def __init__(self, write: Callable[[bytes], None] | None = None) -> None:
        self._write = write_stdout if write is None else write

    def render(self, path: Path | str, x: int, y: int, width: int, height: int) -> bytes:
        """Display ``path`` in the pane at ``(x, y)`` sized ``width`` x ``height`` cells.

        Raises ``ImageReadError`` before anything is written when the file
        cannot be read. Returns the payload that was written.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            LOGGER.debug("preview of %s skipped: %s", path, exc)
            raise ImageReadError(f"cannot read image {path}: {exc.strerror or exc}") from exc
        payload = encode_image_preview(data, x, y, width, height)
        self._write(payload)
        return payload

    def clear(self) -> None:
        """Remove any image left on screen by a previous render."""
        self._write(clear_images_command())


__all__ = [
    "IMAGE_EXTENSIONS",
    "BORDER_INSET",
    "ImagePreviewRenderer",
    "clear_images_command",
    "encode_image_preview",
    "image_placement",
    "is_image_name",
    "normalize_extensions",
    "write_stdout",
]
