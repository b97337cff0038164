"""Settings tab: logging and replay options, built from a field table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from textual import on
from textual.containers import Container, Horizontal, ScrollableContainer, Vertical
from textual.widgets import ContentSwitcher, DataTable, Input, Select, Static, Switch

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass(frozen=True)
class SettingField:
    """One editable value at ``section.path`` in config.json."""

    section: str
    path: tuple[str, ...]
    kind: str  # switch, level, text or count
    default: Any
    hint: str = ""

    @property
    def widget_id(self) -> str:
        return "-".join((self.section, *self.path)).replace("_", "-")

    @property
    def label(self) -> str:
        return ".".join(self.path)


SECTIONS = [
    ("logging", "Logging", "Console/file logging"),
    ("replay", "Replay", "Output of `silencecrew run`"),
]

FIELDS = [
    SettingField("logging", ("enabled",), "switch", False),
    SettingField("logging", ("level",), "level", "INFO"),
    SettingField("logging", ("console",), "switch", True),
    SettingField("logging", ("file", "enabled"), "switch", False),
    SettingField("logging", ("file", "path"), "text", "logs/silencecrew.log", "Relative to the project root."),
    SettingField("logging", ("file", "max_bytes"), "count", 5 * 1024 * 1024),
    SettingField("logging", ("file", "backup_count"), "count", 5),
    SettingField(
        "replay",
        ("show_hidden",),
        "switch",
        False,
        "Print hidden messages dimmed instead of dropping them.",
    ),
]

FIELDS_BY_ID = {field.widget_id: field for field in FIELDS}

# Inputs that only matter while file logging is on.
FILE_FIELD_IDS = [field.widget_id for field in FIELDS if field.path[0] == "file" and field.kind != "switch"]
FILE_SWITCH_ID = "logging-file-enabled"


class SettingsTab(Container):
    """Logging and replay options; the filter switches have their own tab."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._loading_form = False
        self._table_ready = False

    def compose(self):
        with Vertical(id="settings-panel"):
            with Horizontal(id="settings-body"):
                with Container(id="settings-left"):
                    yield DataTable(id="settings-table", cursor_type="row")
                with Container(id="settings-right"):
                    with ContentSwitcher(id="settings-forms"):
                        for section, label, _description in SECTIONS:
                            with ScrollableContainer(id=f"settings-{section}"):
                                yield Static(label, classes="settings-title")
                                for field in FIELDS:
                                    if field.section != section:
                                        continue
                                    yield Static(field.label, classes="form-label")
                                    yield self._make_widget(field)
                                    if field.hint:
                                        yield Static(field.hint, classes="form-hint")
                                yield Static("", id=f"{section}-error", classes="settings-error")

    @staticmethod
    def _make_widget(field: SettingField):
        if field.kind == "switch":
            return Switch(id=field.widget_id)
        if field.kind == "level":
            return Select([(level, level) for level in LOG_LEVELS], id=field.widget_id, allow_blank=False)
        return Input(placeholder=str(field.default), id=field.widget_id)

    def on_mount(self) -> None:
        table = self.query_one("#settings-table", DataTable)
        table.add_column("section", key="section", width=18)
        table.add_column("description", key="description", width=34)
        for section, label, description in SECTIONS:
            table.add_row(label, description, key=section)
        table.zebra_stripes = True
        self._table_ready = True
        self._select_section(SECTIONS[0][0])
        self.reload_from_config()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        key = event.row_key
        self._select_section(str(getattr(key, "value", key)))

    def _select_section(self, section: str) -> None:
        self.query_one("#settings-forms", ContentSwitcher).current = f"settings-{section}"

    def reload_from_config(self) -> None:
        if not self._table_ready:
            return
        editable = self.app.config_state.editable
        for section, _label, _description in SECTIONS:
            self._set_error(section, "" if editable else "Fix config.json and press Reload to edit.")

        self._loading_form = True
        for field in FIELDS:
            value = self._read(field)
            widget = self.query_one(f"#{field.widget_id}")
            if field.kind == "switch":
                widget.value = bool(value)
            elif field.kind == "level":
                level = str(value).upper()
                if level not in LOG_LEVELS:
                    self._set_error(field.section, f"Invalid level: {level}")
                    level = "INFO"
                widget.value = level
            else:
                widget.value = str(value)
            widget.disabled = not editable
        self._loading_form = False
        self._apply_file_state()

    def _read(self, field: SettingField) -> Any:
        node: Any = self.app.config_state.section(field.section)
        for key in field.path[:-1]:
            node = node.get(key)
            if not isinstance(node, dict):
                return field.default
        return node.get(field.path[-1], field.default)

    def _write(self, field: SettingField, value: Any) -> None:
        section = self.app.config_state.section(field.section)
        if self._read(field) == value:
            return
        node = section
        for key in field.path[:-1]:
            child = node.get(key)
            node[key] = dict(child) if isinstance(child, dict) else {}
            node = node[key]
        node[field.path[-1]] = value
        if not self.app.update_config_section(field.section, section):
            self.reload_from_config()

    def _apply_file_state(self) -> None:
        enabled = self.app.config_state.editable and self.query_one(f"#{FILE_SWITCH_ID}", Switch).value
        for widget_id in FILE_FIELD_IDS:
            self.query_one(f"#{widget_id}", Input).disabled = not enabled

    @on(Switch.Changed)
    def _on_switch(self, event: Switch.Changed) -> None:
        self._field_changed(event.switch.id, bool(event.value))

    @on(Select.Changed)
    def _on_select(self, event: Select.Changed) -> None:
        if event.value is not Select.BLANK:
            self._field_changed(event.select.id, event.value)

    @on(Input.Changed)
    def _on_input(self, event: Input.Changed) -> None:
        self._field_changed(event.input.id, event.value)

    def _field_changed(self, widget_id: Optional[str], value: Any) -> None:
        field = FIELDS_BY_ID.get(widget_id or "")
        if field is None or self._loading_form:
            return
        if field.kind == "count":
            value = self._parse_count(field, value)
            if value is None:
                return
        self._write(field, value)
        if field.widget_id == FILE_SWITCH_ID:
            self._apply_file_state()

    def _parse_count(self, field: SettingField, value: str) -> Optional[int]:
        stripped = value.strip()
        if stripped and not stripped.isdigit():
            self._set_error(field.section, f"{field.label}: enter a non-negative integer")
            return None
        self._set_error(field.section, "")
        return int(stripped) if stripped else None

    def _set_error(self, section: str, message: str) -> None:
        self.query_one(f"#{section}-error", Static).update(message)
