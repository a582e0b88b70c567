"""Persistent JSON config helpers.

Stores listing defaults: hidden-entry visibility, tree depth, theme, and
color preference. All access is defensive: malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .listing.types import DEFAULT_TREE_MAX_DEPTH

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


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
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    return _load_bool("show_hidden")


def load_no_color() -> bool:
    """Return persisted preference for uncolored output."""
    return _load_bool("no_color")


def load_tree_max_depth() -> int:
    """Return persisted tree depth bound.

    Booleans, negatives, and non-integers fall back to the default.
    """
    value = load_config().get("tree_max_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_TREE_MAX_DEPTH
    return value


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_listing_defaults(
    show_hidden: bool,
    tree_max_depth: int,
    theme_name: str | None,
    no_color: bool,
) -> None:
    """Persist the listing defaults in one write, keeping unrelated keys."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    config["tree_max_depth"] = max(0, int(tree_max_depth))
    config["no_color"] = bool(no_color)
    if theme_name and theme_name.strip():
        config["theme"] = theme_name.strip()
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "save_config",
    "load_show_hidden",
    "load_no_color",
    "load_tree_max_depth",
    "load_theme_name",
    "save_listing_defaults",
]
