"""Persistent JSON config helpers.

Stores default listing options (hidden entries, link following) and the
theme name. All access is defensive: malformed or missing config falls back
safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON.

    Returns ``False`` when the file cannot be written so callers can report it.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        return False
    return True


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def _save_value(key: str, value: object) -> bool:
    config = load_config()
    config[key] = value
    return save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    return _load_bool("show_hidden")


def save_show_hidden(show_hidden: bool) -> bool:
    return _save_value("show_hidden", bool(show_hidden))


def load_follow_symlinks() -> bool:
    """Return persisted symlink-following preference (default ``False``)."""
    return _load_bool("follow_symlinks")


def save_follow_symlinks(follow_symlinks: bool) -> bool:
    return _save_value("follow_symlinks", bool(follow_symlinks))


def load_theme_name() -> str | None:
    """Load persisted theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> bool:
    """Persist selected theme name; blank names are ignored."""
    stripped = str(theme_name).strip()
    if not stripped:
        return False
    return _save_value("theme", stripped)
