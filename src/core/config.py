"""Core configuration dataclasses.

We keep config parsing outside the core, but this dataclass defines the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterConfiguration:
    """Snapshot of the user's filter switches.

    Each category has one switch for the user's own crew and one for other
    players' crew. ``always_show_cargo_full`` is a global override and
    ``treat_ambiguous_as_own`` only applies when ownership is unknown.
    """

    always_show_cargo_full: bool = True
    treat_ambiguous_as_own: bool = True

    filter_own_crew_general: bool = True
    filter_own_idle_chatter: bool = True
    filter_own_salvage_found: bool = True
    filter_own_sailing_status: bool = True
    filter_own_warnings: bool = False

    filter_others_crew_general: bool = True
    filter_others_idle_chatter: bool = True
    filter_others_salvage_found: bool = True
    filter_others_sailing_status: bool = True
    filter_others_warnings: bool = True


# config.json key -> FilterConfiguration field
CONFIG_KEYS: dict[str, str] = {
    "alwaysShowCargoFull": "always_show_cargo_full",
    "treatAmbiguousAsOwn": "treat_ambiguous_as_own",
    "filterOwnCrewGeneral": "filter_own_crew_general",
    "filterOwnIdleChatter": "filter_own_idle_chatter",
    "filterOwnSalvageFound": "filter_own_salvage_found",
    "filterOwnSailingStatus": "filter_own_sailing_status",
    "filterOwnWarnings": "filter_own_warnings",
    "filterOthersCrewGeneral": "filter_others_crew_general",
    "filterOthersIdleChatter": "filter_others_idle_chatter",
    "filterOthersSalvageFound": "filter_others_salvage_found",
    "filterOthersSailingStatus": "filter_others_sailing_status",
    "filterOthersWarnings": "filter_others_warnings",
}

# Presentation groups: (section id, label, description, keys in display order).
CONFIG_SECTIONS: list[tuple[str, str, str, list[str]]] = [
    (
        "own_crew",
        "Your Crew",
        "Filter settings for your own crewmates",
        [
            "filterOwnCrewGeneral",
            "filterOwnIdleChatter",
            "filterOwnSalvageFound",
            "filterOwnSailingStatus",
            "filterOwnWarnings",
        ],
    ),
    (
        "others_crew",
        "Others' Crew",
        "Filter settings for other players' crewmates",
        [
            "filterOthersCrewGeneral",
            "filterOthersIdleChatter",
            "filterOthersSalvageFound",
            "filterOthersSailingStatus",
            "filterOthersWarnings",
        ],
    ),
    (
        "important",
        "Important Messages",
        "Messages that should always be shown",
        ["alwaysShowCargoFull"],
    ),
    (
        "advanced",
        "Advanced",
        "Advanced settings",
        ["treatAmbiguousAsOwn"],
    ),
]
