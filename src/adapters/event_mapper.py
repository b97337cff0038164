"""Replay-record-to-core event mapping adapter.

This keeps the JSON event log format out of the core processor. Each record
is one host event, for example::

    {"event": "overhead", "actor": {"name": "Jobless Jim", "npc": true}, "text": "C for miles."}
    {"event": "chat", "type": "PUBLICCHAT", "name": "Bosun Zarah", "message": "Woo!"}
"""

from __future__ import annotations

import json
from typing import Any, Optional

from core.models import Actor, ChatMessageEvent, ChatMessageType, CrewEvent, OverheadTextEvent


def _optional_str(record: dict[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _build_actor(raw_actor: Any) -> Actor:
    if isinstance(raw_actor, str):
        # Shorthand: a bare name is an NPC.
        return Actor(name=raw_actor, is_npc=True)
    if not isinstance(raw_actor, dict):
        raise ValueError("actor must be an object or a name")
    actor_id = raw_actor.get("id")
    if actor_id is not None and (isinstance(actor_id, bool) or not isinstance(actor_id, int)):
        raise ValueError("actor.id must be an integer")
    is_npc = raw_actor.get("npc", True)
    if not isinstance(is_npc, bool):
        raise ValueError("actor.npc must be true or false")
    return Actor(
        name=_optional_str(raw_actor, "name"),
        is_npc=is_npc,
        actor_id=actor_id,
    )


def _chat_type(raw_type: Any) -> ChatMessageType:
    if not isinstance(raw_type, str):
        raise ValueError("chat type must be a string")
    try:
        return ChatMessageType(raw_type.upper())
    except ValueError:
        raise ValueError(f"Unknown chat type: {raw_type}") from None


def build_event(record: dict[str, Any]) -> CrewEvent:
    """Build a core event from one decoded replay record."""

    if not isinstance(record, dict):
        raise ValueError("event record must be an object")

    kind = record.get("event")
    if kind == "overhead":
        return OverheadTextEvent(
            actor=_build_actor(record.get("actor")),
            text=_optional_str(record, "text"),
        )
    if kind == "chat":
        return ChatMessageEvent(
            type=_chat_type(record.get("type", ChatMessageType.PUBLICCHAT.value)),
            name=_optional_str(record, "name"),
            message=_optional_str(record, "message"),
        )
    raise ValueError(f"Unsupported event kind: {kind!r}")


def parse_event_line(line: str) -> Optional[CrewEvent]:
    """Decode one JSONL line; blank lines and ``#`` comments yield None."""

    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    return build_event(json.loads(stripped))
