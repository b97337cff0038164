"""Static configuration for silencecrew.

All user-editable settings (filter switches, logging, replay output) live in
a single JSON file for quick edits without touching Python. The filter
switches are re-read live by the JSON config adapter; everything here is
read once at startup.
"""

import json
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# SILENCECREW_CONFIG (environment or .env) points at an alternative file.
CONFIG_PATH = os.getenv("SILENCECREW_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")
if not os.path.isabs(CONFIG_PATH):
    CONFIG_PATH = os.path.join(PROJECT_ROOT, CONFIG_PATH)


def _load_json_config() -> tuple[dict, Optional[str]]:
    """Load config.json with a flat, user-friendly schema.

    Returns the parsed object and an error message. A missing or broken file
    yields an empty object so every command still starts on defaults; the
    caller decides how to report the error once logging is configured.
    """

    if not os.path.exists(CONFIG_PATH):
        return {}, None

    try:
        with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        return {}, f"{CONFIG_PATH} could not be read: {exc}"
    if not isinstance(data, dict):
        return {}, f"Config root must be an object: {CONFIG_PATH}"
    return data, None


def _section(name: str) -> dict:
    value = _CONFIG.get(name)
    return value if isinstance(value, dict) else {}


_CONFIG, CONFIG_ERROR = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Replay output: print hidden messages dimmed instead of dropping them.
REPLAY_SHOW_HIDDEN = bool(_section("replay").get("show_hidden", False))

# Logging configuration (optional).
LOGGING = _section("logging")
