"""Core domain models.

These types are shared across the core and adapters to avoid tight coupling
to any host-specific event objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MessageCategory(str, Enum):
    """Semantic category assigned to a crewmate message."""

    CARGO_FULL = "cargo_full"
    SALVAGE_FOUND = "salvage_found"
    SAILING_STATUS = "sailing_status"
    WARNING = "warning"
    IDLE_CHATTER = "idle_chatter"
    GENERAL = "general"


class Ownership(str, Enum):
    """Whether a crewmate belongs to the user or to another player."""

    OWN_CREW = "own"
    OTHERS_CREW = "others"


class ChatMessageType(str, Enum):
    """Chat message types delivered by the host."""

    PUBLICCHAT = "PUBLICCHAT"
    PRIVATECHAT = "PRIVATECHAT"
    GAMEMESSAGE = "GAMEMESSAGE"
    DIALOG = "DIALOG"
    NPC_EXAMINE = "NPC_EXAMINE"
    SPAM = "SPAM"
    CLAN_CHAT = "CLAN_CHAT"
    FRIENDSCHAT = "FRIENDSCHAT"
    TRADE = "TRADE"
    BROADCAST = "BROADCAST"


# Only these chat types can carry crewmate dialogue.
CREW_CHAT_TYPES = frozenset(
    {
        ChatMessageType.PUBLICCHAT,
        ChatMessageType.GAMEMESSAGE,
        ChatMessageType.DIALOG,
        ChatMessageType.NPC_EXAMINE,
        ChatMessageType.SPAM,
    }
)


@dataclass(frozen=True)
class Actor:
    """Minimal actor identity attached to overhead text."""

    name: Optional[str]
    is_npc: bool
    actor_id: Optional[int] = None


@dataclass(frozen=True)
class OverheadTextEvent:
    """Text shown above an actor changed."""

    actor: Actor
    text: Optional[str]


@dataclass(frozen=True)
class ChatMessageEvent:
    """A message was added to the chat log."""

    type: ChatMessageType
    name: Optional[str]
    message: Optional[str]


CrewEvent = Union[OverheadTextEvent, ChatMessageEvent]


@dataclass(frozen=True)
class FilterDecision:
    """Outcome of the suppression policy with a human-readable reason."""

    category: MessageCategory
    ownership: Ownership
    cargo_full: bool
    suppressed: bool
    reason: str
