"""Input-layer public API for key decoding and browser key handling."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import BrowserKeyHandler

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "BrowserKeyHandler",
]
