"""Ownership resolution (core domain)."""

from __future__ import annotations

from typing import Optional

from core.config import FilterConfiguration
from core.models import Actor, Ownership


class AlwaysOwnCrewResolver:
    """Resolver that treats every crewmate as the user's own.

    The host events carry no reliable ownership signal yet.
    TODO: resolve from the distance to the player's boat once the host
    exposes boat positions.
    """

    def resolve(self, actor: Actor) -> Optional[Ownership]:
        return Ownership.OWN_CREW


def apply_ambiguity_fallback(resolved: Optional[Ownership], config: FilterConfiguration) -> Ownership:
    """Return the resolved ownership, or the configured fallback when unknown."""

    if resolved is not None:
        return resolved
    return Ownership.OWN_CREW if config.treat_ambiguous_as_own else Ownership.OTHERS_CREW
