from __future__ import annotations

import io
import json
import logging

from rich.console import Console

from adapters.replay_display import ReplayDisplay
from app import replay_events
from core.config import FilterConfiguration
from core.ownership import AlwaysOwnCrewResolver
from core.processor import CrewFilterProcessor


class StaticConfigProvider:
    def current(self) -> FilterConfiguration:
        return FilterConfiguration()


def _lines() -> list[str]:
    records = [
        {"event": "overhead", "actor": {"name": "Jobless Jim", "npc": True}, "text": "C for miles."},
        {"event": "overhead", "actor": {"name": "Jobless Jim", "npc": True}, "text": "The cargo hold is full."},
        {"event": "chat", "type": "PUBLICCHAT", "name": "Zezima", "message": "selling lobbies"},
        {"event": "chat", "type": "DIALOG", "name": "Bosun Zarah", "message": "I can't find any ammo"},
    ]
    lines = [json.dumps(record) for record in records]
    lines.insert(1, "# comment")
    lines.insert(2, "{broken")
    lines.append(json.dumps({"event": "unknown"}))
    return lines


def test_replay_events_hides_and_skips(caplog) -> None:
    buffer = io.StringIO()
    display = ReplayDisplay(console=Console(file=buffer, width=200, color_system=None))
    processor = CrewFilterProcessor(
        config_provider=StaticConfigProvider(),
        display=display,
        ownership_resolver=AlwaysOwnCrewResolver(),
    )

    with caplog.at_level(logging.WARNING):
        events = replay_events(_lines(), processor, display)

    assert events == 4
    assert len(display.hidden) == 1
    assert display.shown == 3
    output = buffer.getvalue()
    assert "C for miles." not in output
    assert "The cargo hold is full." in output
    assert "selling lobbies" in output
    assert "Skipping line 3" in caplog.text
    assert "Skipping line 7" in caplog.text
