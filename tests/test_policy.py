from __future__ import annotations

from dataclasses import fields, replace

import pytest

from core.config import FilterConfiguration
from core.models import Actor, MessageCategory, Ownership
from core.ownership import AlwaysOwnCrewResolver, apply_ambiguity_fallback
from core.policy import evaluate, policy_setting, should_suppress

DEFAULTS = FilterConfiguration()
CARGO_FULL = "the cargo hold is full. i can't salvage anything."


def _all_switches(value: bool) -> FilterConfiguration:
    return FilterConfiguration(**{field.name: value for field in fields(FilterConfiguration)})


def test_cargo_full_is_shown_by_default() -> None:
    assert should_suppress("the cargo hold is full", Ownership.OWN_CREW, DEFAULTS) is False


@pytest.mark.parametrize("ownership", list(Ownership))
def test_cargo_full_override_ignores_category_switches(ownership: Ownership) -> None:
    config = replace(_all_switches(True), always_show_cargo_full=True)
    # Also a salvage pattern, which would otherwise be hidden.
    message = "cargo hold is full, i'll put it in the cargo hold"
    decision = evaluate(message, ownership, config)
    assert decision.suppressed is False
    assert decision.category is MessageCategory.CARGO_FULL
    assert decision.cargo_full is True


def test_cargo_full_falls_through_when_override_off() -> None:
    config = replace(DEFAULTS, always_show_cargo_full=False)
    decision = evaluate(CARGO_FULL, Ownership.OWN_CREW, config)
    assert decision.category is MessageCategory.GENERAL
    assert decision.cargo_full is True
    assert decision.suppressed is True

    config = replace(config, filter_own_crew_general=False)
    assert should_suppress(CARGO_FULL, Ownership.OWN_CREW, config) is False


def test_cargo_full_with_salvage_uses_salvage_switch_when_override_off() -> None:
    config = replace(DEFAULTS, always_show_cargo_full=False, filter_own_salvage_found=False)
    message = "cargo hold is full, i'll put it in the cargo hold"
    assert evaluate(message, Ownership.OWN_CREW, config).category is MessageCategory.SALVAGE_FOUND
    assert should_suppress(message, Ownership.OWN_CREW, config) is False


def test_idle_chatter_own_crew_hidden_by_default() -> None:
    decision = evaluate("life is easier on the sea", Ownership.OWN_CREW, DEFAULTS)
    assert decision.category is MessageCategory.IDLE_CHATTER
    assert decision.suppressed is True


def test_warnings_shown_for_own_crew_by_default() -> None:
    decision = evaluate("i can't find any ammo in the cargo hold", Ownership.OWN_CREW, DEFAULTS)
    assert decision.category is MessageCategory.WARNING
    assert decision.suppressed is False


def test_warnings_hidden_for_others_crew_by_default() -> None:
    assert should_suppress("i can't find any ammo in the cargo hold", Ownership.OTHERS_CREW, DEFAULTS)


def test_unrecognised_text_uses_general_switch() -> None:
    decision = evaluate("arrrr matey", Ownership.OWN_CREW, DEFAULTS)
    assert decision.category is MessageCategory.GENERAL
    assert decision.suppressed is True


def test_empty_message_resolves_through_general() -> None:
    config = replace(DEFAULTS, filter_others_crew_general=False)
    assert should_suppress("", Ownership.OTHERS_CREW, config) is False


@pytest.mark.parametrize(
    "category, ownership, field_name",
    [
        (MessageCategory.GENERAL, Ownership.OWN_CREW, "filter_own_crew_general"),
        (MessageCategory.IDLE_CHATTER, Ownership.OWN_CREW, "filter_own_idle_chatter"),
        (MessageCategory.SALVAGE_FOUND, Ownership.OWN_CREW, "filter_own_salvage_found"),
        (MessageCategory.SAILING_STATUS, Ownership.OWN_CREW, "filter_own_sailing_status"),
        (MessageCategory.WARNING, Ownership.OWN_CREW, "filter_own_warnings"),
        (MessageCategory.GENERAL, Ownership.OTHERS_CREW, "filter_others_crew_general"),
        (MessageCategory.IDLE_CHATTER, Ownership.OTHERS_CREW, "filter_others_idle_chatter"),
        (MessageCategory.SALVAGE_FOUND, Ownership.OTHERS_CREW, "filter_others_salvage_found"),
        (MessageCategory.SAILING_STATUS, Ownership.OTHERS_CREW, "filter_others_sailing_status"),
        (MessageCategory.WARNING, Ownership.OTHERS_CREW, "filter_others_warnings"),
        (MessageCategory.CARGO_FULL, Ownership.OTHERS_CREW, "filter_others_crew_general"),
    ],
)
def test_policy_setting_reads_only_its_switch(
    category: MessageCategory, ownership: Ownership, field_name: str
) -> None:
    only_this = replace(_all_switches(False), **{field_name: True})
    assert policy_setting(category, ownership, only_this) is True
    all_but_this = replace(_all_switches(True), **{field_name: False})
    assert policy_setting(category, ownership, all_but_this) is False


def test_evaluate_is_repeatable() -> None:
    message = "trimmed those sails good and proper, captain!"
    first = evaluate(message, Ownership.OTHERS_CREW, DEFAULTS)
    second = evaluate(message, Ownership.OTHERS_CREW, DEFAULTS)
    assert first == second


def test_default_table() -> None:
    assert DEFAULTS.always_show_cargo_full is True
    assert DEFAULTS.treat_ambiguous_as_own is True
    assert DEFAULTS.filter_own_warnings is False
    off = [field.name for field in fields(FilterConfiguration) if not getattr(DEFAULTS, field.name)]
    assert off == ["filter_own_warnings"]


def test_ambiguity_fallback() -> None:
    assert apply_ambiguity_fallback(None, DEFAULTS) is Ownership.OWN_CREW
    config = replace(DEFAULTS, treat_ambiguous_as_own=False)
    assert apply_ambiguity_fallback(None, config) is Ownership.OTHERS_CREW
    assert apply_ambiguity_fallback(Ownership.OWN_CREW, config) is Ownership.OWN_CREW


def test_stub_resolver_always_own_crew() -> None:
    resolver = AlwaysOwnCrewResolver()
    assert resolver.resolve(Actor(name="Bosun Zarah", is_npc=True, actor_id=7)) is Ownership.OWN_CREW
    assert resolver.resolve(Actor(name=None, is_npc=True)) is Ownership.OWN_CREW
