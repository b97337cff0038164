"""Crewmate and message classification (core domain)."""

from __future__ import annotations

from typing import Iterable

from core.models import MessageCategory
from core.patterns import CARGO_FULL_PATTERNS, CATEGORY_PRECEDENCE, CREWMATE_NAMES


def matches_any_pattern(message: str, patterns: Iterable[str]) -> bool:
    """Return True if the message contains any of the patterns."""

    return any(pattern in message for pattern in patterns)


def is_known_actor(name: str) -> bool:
    """Return True if the name matches a known crewmate.

    The name must already be lowercase. Matching works in both directions so
    that truncated names ("bosun") and decorated ones ("bosun zarah the
    brave") are still recognised.
    """

    if not name:
        return False

    for crewmate in CREWMATE_NAMES:
        if crewmate in name or name in crewmate:
            return True
    return False


def is_cargo_full(message: str) -> bool:
    return matches_any_pattern(message, CARGO_FULL_PATTERNS)


def classify(message: str) -> MessageCategory:
    """Return the category for a lowercase, tag-stripped message.

    Categories are tried in precedence order (salvage, sailing status,
    warning, idle chatter); unmatched text falls through to GENERAL, so
    this never fails. Cargo-full text is not assigned its own category here.
    """

    for category, patterns in CATEGORY_PRECEDENCE:
        if matches_any_pattern(message, patterns):
            return category
    return MessageCategory.GENERAL
