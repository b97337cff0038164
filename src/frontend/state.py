"""Config panel state: the in-memory copy of config.json and its lifecycle.

No Textual imports here so load/edit/save rules can be tested directly.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from adapters.json_config import FILTERS_SECTION, filter_config_from_dict


@dataclass
class ConfigState:
    """Shared by every tab.

    ``error`` is a load failure and locks editing until the file is fixed
    and reloaded, so a half-known document is never written back.
    ``save_error`` is a rejected or failed save and leaves edits in place.
    """

    path: Path
    data: dict[str, Any] | None = None
    dirty: bool = False
    error: str | None = None
    save_error: str | None = None

    @property
    def editable(self) -> bool:
        return self.data is not None and self.error is None

    def section(self, key: str) -> dict[str, Any]:
        """Return a copy of a top-level object section, or an empty dict."""

        value = (self.data or {}).get(key)
        if isinstance(value, dict):
            return dict(value)
        return {}

    def load(self) -> None:
        self.dirty = False
        self.save_error = None
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            # Every switch has a default; Save creates the file.
            loaded = {}
        except (OSError, ValueError) as exc:
            self.data, self.error = None, f"{self.path.name}: {exc}"
            return
        if not isinstance(loaded, dict):
            self.data, self.error = None, f"{self.path.name}: root must be an object"
            return
        self.data, self.error = loaded, None

    def update(self, key: str, value: Any) -> bool:
        """Replace one section; returns False while editing is locked."""

        if not self.editable:
            return False
        self.data[key] = value
        self.dirty = True
        self.save_error = None
        return True

    def validate(self) -> None:
        """Raise ValueError if the document would not load as filter settings."""

        raw = (self.data or {}).get(FILTERS_SECTION, {})
        if not isinstance(raw, dict):
            raise ValueError(f"{FILTERS_SECTION} must be an object")
        filter_config_from_dict(raw)

    def save(self) -> bool:
        if not self.editable:
            return False
        try:
            self.validate()
        except ValueError as exc:
            self.save_error = str(exc)
            return False
        try:
            self.path.write_text(json.dumps(self.data, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            self.save_error = f"save failed: {exc.strerror or exc}"
            return False
        self.dirty = False
        self.save_error = None
        return True
