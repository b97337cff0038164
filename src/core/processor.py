"""Core crewmate message processor.

This module is host-agnostic. It only relies on ports for configuration,
ownership and display, so a different game client can drive it unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.classifier import is_known_actor
from core.models import (
    CREW_CHAT_TYPES,
    ChatMessageEvent,
    CrewEvent,
    FilterDecision,
    Ownership,
    OverheadTextEvent,
)
from core.ownership import apply_ambiguity_fallback
from core.policy import evaluate
from core.ports import ConfigProvider, DisplayPort, OwnershipResolver
from core.text import normalize_text

LOGGER = logging.getLogger(__name__)


class CrewFilterProcessor:
    """Orchestrates crewmate detection, classification and hiding."""

    def __init__(
        self,
        config_provider: ConfigProvider,
        display: DisplayPort,
        ownership_resolver: OwnershipResolver,
        chat_ownership: Ownership = Ownership.OWN_CREW,
    ) -> None:
        self._config_provider = config_provider
        self._display = display
        self._ownership_resolver = ownership_resolver
        self._chat_ownership = chat_ownership

    def handle(self, event: CrewEvent) -> Optional[FilterDecision]:
        """Process one host event; returns None when the event is ignored."""

        if isinstance(event, OverheadTextEvent):
            return self.handle_overhead(event)
        if isinstance(event, ChatMessageEvent):
            return self.handle_chat(event)
        raise TypeError(f"Unsupported event type: {type(event).__name__}")

    def handle_overhead(self, event: OverheadTextEvent) -> Optional[FilterDecision]:
        """Process overhead text above an actor."""

        actor = event.actor
        if not actor.is_npc or actor.name is None or event.text is None:
            return None

        name = actor.name.lower()
        if not is_known_actor(name):
            LOGGER.debug("Not a crewmate: %s", name)
            return None

        message = normalize_text(event.text)
        LOGGER.debug("Crewmate overhead: %s says '%s'", name, message)

        # Read the config once per event so live edits apply to the next message.
        config = self._config_provider.current()
        ownership = apply_ambiguity_fallback(self._ownership_resolver.resolve(actor), config)
        decision = evaluate(message, ownership, config)
        if decision.suppressed:
            self._display.hide_overhead(event)
        LOGGER.debug("Overhead from %s: %s", name, decision.reason)
        return decision

    def handle_chat(self, event: ChatMessageEvent) -> Optional[FilterDecision]:
        """Process a chat-log message."""

        if event.type not in CREW_CHAT_TYPES or event.message is None:
            return None

        # Crewmates are identified by speaker name only; matching on text
        # would also catch unrelated game messages.
        name = normalize_text(event.name) if event.name is not None else ""
        if not is_known_actor(name):
            return None

        message = normalize_text(event.message)
        config = self._config_provider.current()
        decision = evaluate(message, self._chat_ownership, config)
        if decision.suppressed:
            self._display.hide_chat(event)
        LOGGER.debug("Chat from %s: %s", name, decision.reason)
        return decision
