"""Error taxonomy for the browser runtime.

Concrete errors subclass ``OSError`` so callers that only care about I/O
failures can catch them without importing this module.
"""

from __future__ import annotations


class TmagesError(Exception):
    """Base class for all tmages errors."""


class ListingError(TmagesError, OSError):
    """Raised when a directory cannot be listed."""


class ImageReadError(TmagesError, OSError):
    """Raised when a preview image cannot be read."""


class TerminalError(TmagesError, OSError):
    """Raised when terminal mode setup or teardown fails."""


__all__ = [
    "TmagesError",
    "ListingError",
    "ImageReadError",
    "TerminalError",
]
