"""Ports (interfaces) used by the core processor.

Ports define the minimal contracts for configuration, ownership and display
adapters so that the core can be reused with different hosts.
"""

from __future__ import annotations

from typing import Optional, Protocol

from core.config import FilterConfiguration
from core.models import Actor, ChatMessageEvent, Ownership, OverheadTextEvent


class ConfigProvider(Protocol):
    """Source of the live filter configuration."""

    def current(self) -> FilterConfiguration:
        ...


class OwnershipResolver(Protocol):
    """Decides whose crew an actor belongs to.

    Returning None marks the actor as ambiguous; the processor then applies
    the ``treat_ambiguous_as_own`` switch.
    """

    def resolve(self, actor: Actor) -> Optional[Ownership]:
        ...


class DisplayPort(Protocol):
    """Host operations that blank displayed text."""

    def hide_overhead(self, event: OverheadTextEvent) -> None:
        ...

    def hide_chat(self, event: ChatMessageEvent) -> None:
        ...
