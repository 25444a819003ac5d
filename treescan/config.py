"""Persistent JSON config helpers.

Reads default output flags, the unencodable-name placeholder, and the log
level. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "treescan"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_LOG_LEVEL = "WARNING"


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


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_show_output() -> bool:
    """Return the persisted default for tree output.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    return _load_bool("show_output")


def load_verbose() -> bool:
    """Return the persisted default for the full-path column."""
    return _load_bool("verbose")


def load_name_placeholder() -> str | None:
    """Return the text substituted for undisplayable names, if configured."""
    value = load_config().get("name_placeholder")
    if not isinstance(value, str) or not value:
        return None
    return value


def load_log_level() -> int:
    """Return the configured logging level, defaulting to ``WARNING``."""
    value = load_config().get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(value, str):
        value = DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.WARNING
