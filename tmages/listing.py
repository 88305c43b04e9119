"""Directory listing for the browser pane.

Produces the flat, sorted entry list the browser navigates. Directory names
carry a trailing ``/`` and the synthetic ``..`` entry is always present.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import ListingError

LOGGER = logging.getLogger(__name__)

PARENT_MARKER = ".."
DIRECTORY_SUFFIX = "/"


def is_parent_marker(entry: str) -> bool:
    """Return whether ``entry`` is the synthetic parent-navigation entry."""
    return entry == PARENT_MARKER


def is_directory_entry(entry: str) -> bool:
    """Return whether ``entry`` names a directory child."""
    return not is_parent_marker(entry) and entry.endswith(DIRECTORY_SUFFIX)


def entry_name(entry: str) -> str:
    """Return the on-disk child name for ``entry`` with the directory suffix stripped."""
    if is_directory_entry(entry):
        return entry[: -len(DIRECTORY_SUFFIX)]
    return entry


def list_directory(path: Path) -> list[str]:
    """List ``path`` as display entries sorted by code point order.

    The parent marker takes part in the sort instead of being pinned first, so
    a child such as ``"-notes"`` lands ahead of it. Symlinks are classified by
    the link itself; a child whose type cannot be read is listed as a file.
    """
    entries = [PARENT_MARKER]
    try:
        with os.scandir(path) as children:
            for child in children:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(child.name + DIRECTORY_SUFFIX if is_dir else child.name)
    except OSError as exc:
        LOGGER.debug("listing %s failed: %s", path, exc)
        raise ListingError(f"cannot list {path}: {exc.strerror or exc}") from exc
    entries.sort()
    return entries


__all__ = [
    "PARENT_MARKER",
    "DIRECTORY_SUFFIX",
    "is_parent_marker",
    "is_directory_entry",
    "entry_name",
    "list_directory",
]
