"""JSON config helpers for default tree options.

The config file is optional and read-only: it supplies defaults that explicit
command-line flags override. Missing or malformed config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "repotree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def parse_skip_list(value: str) -> list[str]:
    """Split a comma-separated directory list, trimming blanks."""
    return [part.strip() for part in value.split(",") if part.strip()]


def load_skip_directories() -> list[str] | None:
    """Load skipped directory names from a list of strings or a comma string."""
    value = load_config().get("skip")
    if isinstance(value, str):
        return parse_skip_list(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return [item.strip() for item in value if item.strip()]
    return None


def load_max_depth() -> int | None:
    """Load the default maximum depth; booleans and non-positive values are rejected."""
    value = load_config().get("depth")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_include_hidden() -> bool | None:
    value = load_config().get("include_hidden")
    return value if isinstance(value, bool) else None


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
