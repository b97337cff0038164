"""Filters tab implementation."""

from __future__ import annotations

from typing import Any, Optional

from textual import on
from textual.containers import Container, Horizontal, ScrollableContainer, Vertical
from textual.widgets import Button, ContentSwitcher, DataTable, Static, Switch

from adapters.json_config import default_filters, filter_config_from_dict, filter_config_to_dict
from core.config import CONFIG_SECTIONS
from ..constants import FILTER_LABELS
from ..modals import ResetDefaultsScreen

SWITCH_PREFIX = "switch-"


class FiltersTab(Container):
    """Filters tab for editing the per-category, per-crew switches."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._loading_form = False
        self._current_section: Optional[str] = None
        self._table_ready = False

    def compose(self):
        with Vertical(id="filters-panel"):
            with Horizontal(id="filters-body"):
                with Container(id="filters-left"):
                    yield DataTable(id="filters-table", cursor_type="row")
                with Container(id="filters-right"):
                    with ContentSwitcher(id="filters-forms"):
                        for section_id, label, description, keys in CONFIG_SECTIONS:
                            with ScrollableContainer(id=f"filters-{section_id.replace('_', '-')}"):
                                yield Static(label, classes="filters-title")
                                yield Static(description, classes="subtle")
                                for key in keys:
                                    name, help_text = FILTER_LABELS[key]
                                    with Horizontal(classes="switch-row"):
                                        yield Switch(id=f"{SWITCH_PREFIX}{key}")
                                        yield Static(name, classes="form-label")
                                    yield Static(help_text, classes="form-hint")
                    yield Static("", id="filters-error", classes="settings-error")
            with Horizontal(id="filters-actions"):
                yield Button("Reset to defaults", id="reset-filters", variant="error")

    def on_mount(self) -> None:
        table = self.query_one("#filters-table", DataTable)
        table.add_column("section", key="section", width=20)
        table.add_column("hidden", key="hidden", width=10)
        for section_id, label, _description, _keys in CONFIG_SECTIONS:
            table.add_row(label, "", key=section_id)
        table.zebra_stripes = True
        self.query_one("#filters-actions").styles.height = 3
        self._table_ready = True
        self._select_section(CONFIG_SECTIONS[0][0])
        self.reload_from_config()

    def reload_from_config(self) -> None:
        if not self._table_ready:
            return
        editable = self.app.config_state.editable
        self._loading_form = True
        filters = self._current_filters()
        for key, value in filters.items():
            switch = self.query_one(f"#{SWITCH_PREFIX}{key}", Switch)
            switch.value = value
            switch.disabled = not editable
        self._loading_form = False
        self.query_one("#reset-filters", Button).disabled = not editable
        if not editable:
            self._set_error("config.json could not be loaded. Fix it and press Reload to edit.")
        self._refresh_counts(filters)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        section_id = self._coerce_row_key(event.row_key)
        self._select_section(section_id)

    def _select_section(self, section_id: str) -> None:
        self._current_section = section_id
        switcher = self.query_one("#filters-forms", ContentSwitcher)
        switcher.current = f"filters-{section_id.replace('_', '-')}"

    def _current_filters(self) -> dict[str, bool]:
        """Return the saved switches merged over the defaults."""

        raw = self.app.config_state.section("filters")
        try:
            merged = filter_config_to_dict(filter_config_from_dict(raw))
        except ValueError as exc:
            self._set_error(str(exc))
            return default_filters()
        self._set_error("")
        return merged

    @on(Switch.Changed)
    def _on_switch_changed(self, event: Switch.Changed) -> None:
        switch_id = event.switch.id or ""
        if self._loading_form or not switch_id.startswith(SWITCH_PREFIX):
            return
        key = switch_id[len(SWITCH_PREFIX) :]
        filters = self._current_filters()
        # Programmatic reloads also post Changed; only real edits get through.
        if filters.get(key) == bool(event.value):
            return
        filters[key] = bool(event.value)
        if not self.app.update_config_section("filters", filters):
            self.reload_from_config()
            return
        self._refresh_counts(filters)

    @on(Button.Pressed, "#reset-filters")
    def _on_reset(self) -> None:
        self.app.push_screen(ResetDefaultsScreen(), self._handle_reset_choice)

    def _handle_reset_choice(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self.app.update_config_section("filters", default_filters())
        self.reload_from_config()

    def _refresh_counts(self, filters: dict[str, bool]) -> None:
        # Only the crew sections hide messages; the other two are overrides.
        table = self.query_one("#filters-table", DataTable)
        for section_id, _label, _description, keys in CONFIG_SECTIONS:
            if not keys[0].startswith("filter"):
                value = "on" if filters[keys[0]] else "off"
            else:
                value = f"{sum(filters[key] for key in keys)}/{len(keys)}"
            table.update_cell(section_id, "hidden", value)

    def _set_error(self, message: str) -> None:
        self.query_one("#filters-error", Static).update(message)

    @staticmethod
    def _coerce_row_key(value: Any) -> str:
        if hasattr(value, "value"):
            return str(value.value)
        return str(value)
