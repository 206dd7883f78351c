"""Persistent JSON config helpers.

Stores scanned file suffixes, UI theme, Pygments style, the source-context
strip height and the hidden-file preference. Malformed or missing config
falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..scan import normalize_suffixes
from ..source_context import MAX_CONTEXT_LINES

logger = logging.getLogger(__name__)

APP_NAME = "tuido"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_CONTEXT_LINES = 4


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
        logger.debug("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so an unwritable config
    directory never breaks a session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def load_extensions() -> tuple[str, ...] | None:
    """Return configured file suffixes, or ``None`` to use the defaults.

    Entries that are not strings are dropped; suffixes are lowercased.
    """
    value = load_config().get("extensions")
    if not isinstance(value, list):
        return None
    suffixes = normalize_suffixes(entry for entry in value if isinstance(entry, str))
    return suffixes or None


def load_show_hidden() -> bool:
    """Return persisted hidden-file scanning preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


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


def load_style_name() -> str | None:
    """Load the persisted Pygments style name for the context strip."""
    value = load_config().get("style")
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def load_context_lines() -> int:
    """Return the context strip height, clamped to ``[0, MAX_CONTEXT_LINES]``.

    Booleans and non-integers fall back to ``DEFAULT_CONTEXT_LINES``.
    """
    value = load_config().get("context_lines")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_CONTEXT_LINES
    return max(0, min(MAX_CONTEXT_LINES, value))
