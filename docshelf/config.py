"""Read-only JSON config helpers.

Holds the highlight style, content folder name, watch interval and console
theme. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .highlight import DEFAULT_STYLE
from .watch import DEFAULT_WATCH_INTERVAL_SECONDS

APP_NAME = "docshelf"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_CONTENT_DIR = "content"


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_style_name() -> str:
    """Pygments style used for code blocks and console source views."""
    return _load_name("style") or DEFAULT_STYLE


def load_theme_name() -> str | None:
    """Console palette name, ``None`` when unset/invalid."""
    return _load_name("theme")


def load_content_dir_name() -> str:
    """Content folder name below the site root.

    Names containing path separators or starting with ``.`` are rejected.
    """
    value = _load_name("content_dir")
    if value is None or "/" in value or "\\" in value or value.startswith("."):
        return DEFAULT_CONTENT_DIR
    return value


def load_watch_interval() -> float:
    """Watch poll interval in seconds; booleans and non-positive values are ignored."""
    value = load_config().get("watch_interval")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_WATCH_INTERVAL_SECONDS
    return float(value)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_STYLE",
    "DEFAULT_CONTENT_DIR",
    "load_config",
    "load_style_name",
    "load_theme_name",
    "load_content_dir_name",
    "load_watch_interval",
]
