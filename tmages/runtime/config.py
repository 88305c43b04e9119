"""Read-only JSON config helpers.

Supplies the pane split, theme name, start directory, and preview extension
list. The file is never written; a missing or malformed config, or a bad
value for one key, falls back to the built-in default for that key.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

from ..preview import IMAGE_EXTENSIONS, normalize_extensions

LOGGER = logging.getLogger(__name__)

APP_NAME = "tmages"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "tmages.log"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


@dataclass(frozen=True)
class BrowserConfig:
    left_pane_percent: float | None = None
    theme: str | None = None
    start_dir: Path | None = None
    image_extensions: tuple[str, ...] = IMAGE_EXTENSIONS


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        LOGGER.debug("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_percent(data: dict[str, object], key: str) -> float | None:
    """Read a percentage constrained to the open interval (0, 100)."""
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def _load_string(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _load_extensions(data: dict[str, object]) -> tuple[str, ...]:
    """Return the configured preview extensions, or the defaults when invalid."""
    value = data.get("image_extensions")
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return IMAGE_EXTENSIONS
    extensions = normalize_extensions(value)
    return extensions or IMAGE_EXTENSIONS


def load_browser_config() -> BrowserConfig:
    """Load and validate every supported config key."""
    data = load_config()
    start_dir = _load_string(data, "start_dir")
    return BrowserConfig(
        left_pane_percent=_load_percent(data, "left_pane_percent"),
        theme=_load_string(data, "theme"),
        start_dir=Path(start_dir).expanduser() if start_dir is not None else None,
        image_extensions=_load_extensions(data),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_LOG_PATH",
    "BrowserConfig",
    "load_browser_config",
    "load_config",
]
