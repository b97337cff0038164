from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from adapters.json_config import (
    JsonConfigSource,
    default_filters,
    filter_config_from_dict,
    filter_config_to_dict,
)
from core.config import CONFIG_KEYS, CONFIG_SECTIONS, FilterConfiguration


def _write(path: Path, filters: dict, bump: int = 0) -> None:
    path.write_text(json.dumps({"filters": filters}), encoding="utf-8")
    # Guarantee a new mtime even on coarse filesystem clocks.
    stat = path.stat()
    os.utime(path, (stat.st_atime + bump, stat.st_mtime + bump))


def test_empty_section_gives_defaults() -> None:
    assert filter_config_from_dict({}) == FilterConfiguration()


def test_partial_section_overrides_defaults() -> None:
    config = filter_config_from_dict({"filterOwnWarnings": True, "alwaysShowCargoFull": False, "extra": 1})
    assert config.filter_own_warnings is True
    assert config.always_show_cargo_full is False
    assert config.filter_own_idle_chatter is True


def test_non_bool_value_is_rejected() -> None:
    with pytest.raises(ValueError, match="filterOwnWarnings"):
        filter_config_from_dict({"filterOwnWarnings": "yes"})


def test_to_dict_uses_config_keys() -> None:
    data = filter_config_to_dict(FilterConfiguration())
    assert list(data) == list(CONFIG_KEYS)
    assert data["filterOwnWarnings"] is False
    assert default_filters() == data


def test_sections_cover_every_key_once() -> None:
    keys = [key for _, _, _, section_keys in CONFIG_SECTIONS for key in section_keys]
    assert sorted(keys) == sorted(CONFIG_KEYS)
    assert [label for _, label, _, _ in CONFIG_SECTIONS] == [
        "Your Crew",
        "Others' Crew",
        "Important Messages",
        "Advanced",
    ]


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    source = JsonConfigSource(str(tmp_path / "missing.json"))
    assert source.current() == FilterConfiguration()


def test_source_reloads_when_file_changes(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    _write(path, {"filterOwnIdleChatter": True})
    source = JsonConfigSource(str(path))
    assert source.current().filter_own_idle_chatter is True

    _write(path, {"filterOwnIdleChatter": False}, bump=10)
    assert source.current().filter_own_idle_chatter is False


def test_source_keeps_last_good_config_on_bad_edit(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    _write(path, {"filterOthersWarnings": False})
    source = JsonConfigSource(str(path))
    assert source.current().filter_others_warnings is False

    path.write_text("{not json", encoding="utf-8")
    stat = path.stat()
    os.utime(path, (stat.st_atime + 10, stat.st_mtime + 10))
    assert source.current().filter_others_warnings is False

    _write(path, {"filterOthersWarnings": "off"}, bump=20)
    assert source.current().filter_others_warnings is False


def test_source_reloads_edit_within_same_timestamp(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"filters": {"filterOwnCrewGeneral": False}}), encoding="utf-8")
    stamp = path.stat().st_mtime_ns
    source = JsonConfigSource(str(path))
    assert source.current().filter_own_crew_general is False

    path.write_text(json.dumps({"filters": {"filterOwnCrewGeneral": True}}), encoding="utf-8")
    os.utime(path, ns=(stamp, stamp))
    assert path.stat().st_mtime_ns == stamp
    assert source.current().filter_own_crew_general is True
