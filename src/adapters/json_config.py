"""JSON config adapter.

Implements the core ConfigProvider by reading the ``filters`` section of
config.json. The file is re-read whenever it changes on disk so edits from
the config panel apply without a restart.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from typing import Any, Optional

from core.config import CONFIG_KEYS, FilterConfiguration

LOGGER = logging.getLogger(__name__)

FILTERS_SECTION = "filters"


def filter_config_from_dict(raw: dict[str, Any]) -> FilterConfiguration:
    """Build a FilterConfiguration from the ``filters`` section.

    Missing keys keep their defaults. Unknown keys are ignored so that older
    or newer config files still load.
    """

    values: dict[str, bool] = {}
    for key, field_name in CONFIG_KEYS.items():
        if key not in raw:
            continue
        value = raw[key]
        if not isinstance(value, bool):
            raise ValueError(f"filters.{key} must be true or false, got {value!r}")
        values[field_name] = value
    return FilterConfiguration(**values)


def filter_config_to_dict(config: FilterConfiguration) -> dict[str, bool]:
    """Return the ``filters`` section for a configuration, in key order."""

    data = asdict(config)
    return {key: data[field_name] for key, field_name in CONFIG_KEYS.items()}


def default_filters() -> dict[str, bool]:
    return filter_config_to_dict(FilterConfiguration())


class JsonConfigSource:
    """Live ConfigProvider backed by config.json."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._stamp: Optional[tuple[int, int]] = None
        self._config = FilterConfiguration()

    def current(self) -> FilterConfiguration:
        """Return the latest configuration, reloading if the file changed."""

        try:
            stat = os.stat(self._path)
        except FileNotFoundError:
            if self._stamp is not None:
                LOGGER.warning("Config file disappeared, using defaults: %s", self._path)
            self._stamp = None
            self._config = FilterConfiguration()
            return self._config

        # Size catches rewrites that land within one timestamp tick.
        stamp = (stat.st_mtime_ns, stat.st_size)
        if stamp != self._stamp:
            self._stamp = stamp
            self._reload()
        return self._config

    def _reload(self) -> None:
        # A broken edit keeps the last good snapshot instead of failing every event.
        try:
            with open(self._path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
            section = data.get(FILTERS_SECTION, {})
            if not isinstance(section, dict):
                raise ValueError("filters must be an object")
            self._config = filter_config_from_dict(section)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Keeping previous filter config, %s is invalid: %s", self._path, exc)
            return
        LOGGER.info("Loaded filter config from %s", self._path)
