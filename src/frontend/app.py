"""Textual config panel for the filter switches, logging and replay output."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import Button, ContentSwitcher, Footer, Static, Tab, Tabs

from .constants import CONFIG_PATH, SEA_BLUE
from .modals import ReloadConfirmScreen, UnsavedChangesScreen
from .state import ConfigState
from .tabs.filters import FiltersTab
from .tabs.guide import GuideTab
from .tabs.settings import SettingsTab
from .tabs.tester import TesterTab

TAB_PREFIX = "tab-"

# (pane id, tab label, pane widget)
PANES = (
    ("filters", "Filters", FiltersTab),
    ("tester", "Tester", TesterTab),
    ("settings", "Settings", SettingsTab),
    ("guide", "Guide", GuideTab),
)

STATUS_CLASSES = ("status-loaded", "status-modified", "status-error")


class ConfigPanelApp(App):
    """Edits one config.json; the replay picks up saved filter changes live."""

    CSS_PATH = "app.tcss"

    BINDINGS = [
        ("ctrl+s", "save_config", "Save"),
        ("ctrl+r", "reload_config", "Reload"),
        ("q", "request_quit", "Quit"),
        ("ctrl+c", "request_quit", "Quit"),
    ]

    def __init__(self, config_path: Path = CONFIG_PATH, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.config_state = ConfigState(Path(config_path))

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(
                        Text.assemble(("SILENCE", SEA_BLUE), (" CREW > Config Panel", "bold")),
                        id="title",
                    )
                    yield Static(f"crewmate filter | {self.config_state.path.name}", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-status")
                    with Horizontal(id="header-actions"):
                        yield Button("Save", id="save-btn")
                        yield Button("Reload", id="reload-btn")

        with Container(id="tabs-bar"):
            with Center(id="tabs-center"):
                yield Tabs(*(Tab(label, id=f"{TAB_PREFIX}{pane}") for pane, label, _ in PANES), id="tabs")

        with ContentSwitcher(id="content", initial=PANES[0][0]):
            for pane, _label, widget in PANES:
                yield widget(id=pane)
        yield Footer()

    def on_mount(self) -> None:
        self._reload()

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        pane = (event.tab.id or "").removeprefix(TAB_PREFIX)
        if pane:
            self.query_one("#content", ContentSwitcher).current = pane

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            self.action_save_config()
        elif event.button.id == "reload-btn":
            self.action_reload_config()

    def action_save_config(self) -> None:
        self._save()

    def action_reload_config(self) -> None:
        if self.config_state.dirty:
            self.push_screen(ReloadConfirmScreen(), self._after_reload_prompt)
        else:
            self._reload()

    def action_request_quit(self) -> None:
        if self.config_state.dirty:
            self.push_screen(UnsavedChangesScreen(), self._after_quit_prompt)
        else:
            self.exit()

    def _after_quit_prompt(self, choice: str | None) -> None:
        if choice == "discard" or (choice == "save" and self._save()):
            self.exit()

    def _after_reload_prompt(self, choice: str | None) -> None:
        if choice == "reload" or (choice == "save" and self._save()):
            self._reload()

    def _reload(self) -> None:
        self.config_state.load()
        self._refresh_header()
        self.query_one(FiltersTab).reload_from_config()
        self.query_one(SettingsTab).reload_from_config()

    def _save(self) -> bool:
        saved = self.config_state.save()
        self._refresh_header()
        return saved

    def update_config_section(self, section: str, value: Any) -> bool:
        """Store an edited section; refused while the file failed to load."""

        changed = self.config_state.update(section, value)
        self._refresh_header()
        return changed

    def _refresh_header(self) -> None:
        state = self.config_state
        if state.error:
            text, css = f"config error: {state.error}", "status-error"
        elif state.save_error:
            text, css = f"not saved: {state.save_error}", "status-error"
        elif state.dirty:
            text, css = "config: modified *", "status-modified"
        else:
            text, css = "config: loaded", "status-loaded"

        status = self.query_one("#header-status", Static)
        status.remove_class(*STATUS_CLASSES)
        status.add_class(css)
        status.update(text)
        self.query_one("#save-btn", Button).disabled = not (state.editable and state.dirty)
