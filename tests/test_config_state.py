from __future__ import annotations

import json
from pathlib import Path

from frontend.state import ConfigState


def _state(tmp_path: Path, content: str | None) -> ConfigState:
    path = tmp_path / "config.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")
    state = ConfigState(path)
    state.load()
    return state


def test_missing_file_loads_as_empty_and_save_creates_it(tmp_path: Path) -> None:
    state = _state(tmp_path, None)
    assert state.data == {}
    assert state.editable

    assert state.update("filters", {"filterOwnWarnings": True})
    assert state.save()
    saved = json.loads(state.path.read_text(encoding="utf-8"))
    assert saved == {"filters": {"filterOwnWarnings": True}}
    assert state.dirty is False


def test_broken_file_locks_edits_and_save(tmp_path: Path) -> None:
    original = '{"filters": {"filterOwnWarnings": true}, "logging": {"enabled": true'
    state = _state(tmp_path, original)

    assert state.data is None
    assert "config.json" in state.error
    assert not state.editable
    assert state.update("filters", {"filterOwnWarnings": False}) is False
    assert state.dirty is False
    assert state.save() is False
    assert state.path.read_text(encoding="utf-8") == original


def test_non_object_root_is_a_load_error(tmp_path: Path) -> None:
    state = _state(tmp_path, "[]")
    assert state.error is not None
    assert not state.editable


def test_save_keeps_other_sections(tmp_path: Path) -> None:
    state = _state(
        tmp_path,
        json.dumps({"filters": {}, "logging": {"enabled": True}, "replay": {"show_hidden": True}}),
    )

    state.update("filters", {"filterOthersWarnings": False})
    assert state.save()

    saved = json.loads(state.path.read_text(encoding="utf-8"))
    assert saved["logging"] == {"enabled": True}
    assert saved["replay"] == {"show_hidden": True}
    assert saved["filters"] == {"filterOthersWarnings": False}


def test_invalid_filters_are_not_written(tmp_path: Path) -> None:
    original = json.dumps({"filters": {}})
    state = _state(tmp_path, original)

    state.update("filters", {"filterOwnWarnings": "yes"})
    assert state.save() is False
    assert "filterOwnWarnings" in state.save_error
    assert state.dirty is True
    assert state.path.read_text(encoding="utf-8") == original


def test_non_object_filters_section_is_not_written(tmp_path: Path) -> None:
    state = _state(tmp_path, json.dumps({"filters": []}))
    state.update("logging", {"enabled": True})
    assert state.save() is False
    assert "filters must be an object" in state.save_error


def test_reload_after_fix_unlocks_editing(tmp_path: Path) -> None:
    state = _state(tmp_path, "{oops")
    assert not state.editable

    state.path.write_text(json.dumps({"replay": {"show_hidden": True}}), encoding="utf-8")
    state.load()

    assert state.editable
    assert state.error is None
    assert state.section("replay") == {"show_hidden": True}
    assert state.section("filters") == {}
