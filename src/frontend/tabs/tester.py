"""Tester tab: try a message against the unsaved filter switches."""

from __future__ import annotations

from textual import on
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Input, Static, Switch, TextArea

from adapters.decision_formatting import format_decision
from adapters.json_config import filter_config_from_dict
from core.classifier import is_known_actor
from core.models import Ownership
from core.policy import evaluate
from core.text import normalize_text


class TesterTab(Container):
    """Classify a message with the in-memory config, before saving it."""

    def compose(self):
        with Vertical(id="tester-panel"):
            yield Static("Message tester", id="tester-title")
            yield Static("speaker (optional)", classes="form-label")
            yield Input(placeholder="Jobless Jim", id="tester-speaker")
            yield Static("message", classes="form-label")
            yield TextArea(id="tester-message")
            with Horizontal(classes="switch-row"):
                yield Switch(value=False, id="tester-others")
                yield Static("other player's crewmate", classes="form-label")
            with Horizontal(id="tester-actions"):
                yield Button("Test", id="tester-run", variant="primary")
            yield Static("", id="tester-result")

    def on_mount(self) -> None:
        self.query_one("#tester-actions").styles.height = 3

    @on(Button.Pressed, "#tester-run")
    def _on_test(self) -> None:
        result = self.query_one("#tester-result", Static)
        message = self.query_one("#tester-message", TextArea).text
        speaker = self.query_one("#tester-speaker", Input).value
        if not message.strip():
            result.update("Add a message to test.")
            return

        speaker_name = normalize_text(speaker.strip())
        if speaker_name and not is_known_actor(speaker_name):
            result.update(f"'{speaker.strip()}' is not a crewmate; the message is never filtered.")
            return

        try:
            config = filter_config_from_dict(self.app.config_state.section("filters"))
        except ValueError as exc:
            result.update(f"config error: {exc}")
            return

        others = self.query_one("#tester-others", Switch).value
        ownership = Ownership.OTHERS_CREW if others else Ownership.OWN_CREW
        decision = evaluate(normalize_text(message), ownership, config)
        result.update(format_decision(decision, mode="rich"))
