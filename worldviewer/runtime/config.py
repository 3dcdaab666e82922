"""Persistent JSON config helpers.

Stores tree-view preferences: child-window threshold and padding, size-label
visibility, and the UI theme name. All access is defensive: malformed or
missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..tree_model import DEFAULT_WINDOW_PADDING, DEFAULT_WINDOW_THRESHOLD

logger = logging.getLogger(__name__)

APP_NAME = "worldviewer"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks browsing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def _load_int(key: str, default: int, minimum: int) -> int:
    """Read an integer config value, rejecting booleans and values below ``minimum``."""
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        return default
    return value


def load_window_threshold() -> int:
    """Child count above which ordinary directories render through a window."""
    return _load_int("window_threshold", DEFAULT_WINDOW_THRESHOLD, 1)


def save_window_threshold(threshold: int) -> None:
    if threshold < 1:
        return
    config = load_config()
    config["window_threshold"] = int(threshold)
    save_config(config)


def load_window_padding() -> int:
    return _load_int("window_padding", DEFAULT_WINDOW_PADDING, 0)


def load_show_size_labels() -> bool:
    """Return persisted size-label preference; only explicit booleans count."""
    value = load_config().get("show_size_labels")
    return value if isinstance(value, bool) else True


def save_show_size_labels(show_size_labels: bool) -> None:
    config = load_config()
    config["show_size_labels"] = bool(show_size_labels)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_window_threshold",
    "save_window_threshold",
    "load_window_padding",
    "load_show_size_labels",
    "save_show_size_labels",
    "load_theme_name",
    "save_theme_name",
]
