"""Shared constants for the Textual UI."""

from __future__ import annotations

from pathlib import Path

import settings

SEA_BLUE = "#2A9DD8"
CONFIG_PATH = Path(settings.CONFIG_PATH)

# config.json filter key -> (switch label, help text)
FILTER_LABELS: dict[str, tuple[str, str]] = {
    "alwaysShowCargoFull": (
        "Always Show Cargo Full",
        "Never hide 'cargo full' messages so you know when to return to port.",
    ),
    "treatAmbiguousAsOwn": (
        "Treat Unknown as Own Crew",
        "ON: unknown crewmates use 'Your Crew' switches. OFF: 'Others' Crew'.",
    ),
    "filterOwnCrewGeneral": (
        "Filter All (General)",
        "Hide any crewmate message that doesn't fit other categories.",
    ),
    "filterOwnIdleChatter": (
        "Filter Idle Chatter",
        "Life is easier on the sea / I'm just happy to be here / C for miles.",
    ),
    "filterOwnSalvageFound": (
        "Filter Salvage Found",
        "Managed to hook some salvage! / I've caught a wind mote!",
    ),
    "filterOwnSailingStatus": (
        "Filter Sailing Status",
        "Trimmed those sails good and proper, Captain! / Enabling the wind catcher!",
    ),
    "filterOwnWarnings": (
        "Filter Warnings",
        "I can't find any repair kits in the cargo hold. Default OFF, these may be important!",
    ),
    "filterOthersCrewGeneral": (
        "Filter All (General)",
        "Hide any message from other players' crewmates that doesn't fit other categories.",
    ),
    "filterOthersIdleChatter": (
        "Filter Idle Chatter",
        "Hide ambient dialogue from other players' crewmates.",
    ),
    "filterOthersSalvageFound": (
        "Filter Salvage Found",
        "Hide salvage notifications from other players' crewmates.",
    ),
    "filterOthersSailingStatus": (
        "Filter Sailing Status",
        "Hide sailing operation messages from other players' crewmates.",
    ),
    "filterOthersWarnings": (
        "Filter Warnings",
        "Hide warnings from other players' crewmates. These are usually not relevant to you.",
    ),
}
