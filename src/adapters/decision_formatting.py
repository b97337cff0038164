"""Shared decision formatting helpers.

Keeping formatting here prevents drift between the replay output, the
classify command and the config panel tester.
"""

from __future__ import annotations

from rich.text import Text

from core.models import ChatMessageEvent, CrewEvent, FilterDecision, MessageCategory
from core.text import remove_tags

CATEGORY_LABELS: dict[MessageCategory, str] = {
    MessageCategory.CARGO_FULL: "Cargo full",
    MessageCategory.SALVAGE_FOUND: "Salvage found",
    MessageCategory.SAILING_STATUS: "Sailing status",
    MessageCategory.WARNING: "Warning",
    MessageCategory.IDLE_CHATTER: "Idle chatter",
    MessageCategory.GENERAL: "General",
}

CATEGORY_STYLES: dict[MessageCategory, str] = {
    MessageCategory.CARGO_FULL: "bold yellow",
    MessageCategory.SALVAGE_FOUND: "green",
    MessageCategory.SAILING_STATUS: "cyan",
    MessageCategory.WARNING: "bold red",
    MessageCategory.IDLE_CHATTER: "magenta",
    MessageCategory.GENERAL: "white",
}


def format_event_line(event: CrewEvent) -> str:
    """Return ``speaker: text`` for an event, without host markup."""

    if isinstance(event, ChatMessageEvent):
        speaker = event.name or "?"
        text = event.message or ""
        channel = event.type.value.lower()
    else:
        speaker = event.actor.name or "?"
        text = event.text or ""
        channel = "overhead"
    return f"[{channel}] {remove_tags(speaker)}: {remove_tags(text)}"


def _format_plain(decision: FilterDecision) -> str:
    action = "HIDE" if decision.suppressed else "SHOW"
    label = CATEGORY_LABELS[decision.category]
    lines = [
        f"{action} {label} ({decision.ownership.value} crew)",
        f"Why: {decision.reason}",
    ]
    if decision.cargo_full and decision.category is not MessageCategory.CARGO_FULL:
        lines.append("Note: cargo-full text, override is off")
    return "\n".join(lines)


def _format_rich(decision: FilterDecision) -> Text:
    action = ("HIDE", "bold red") if decision.suppressed else ("SHOW", "bold green")
    text = Text.assemble(
        action,
        " ",
        (CATEGORY_LABELS[decision.category], CATEGORY_STYLES[decision.category]),
        f" ({decision.ownership.value} crew)\n",
        ("Why: ", "bold"),
        decision.reason,
    )
    if decision.cargo_full and decision.category is not MessageCategory.CARGO_FULL:
        text.append("\nNote: cargo-full text, override is off", style="dim")
    return text


def format_decision(decision: FilterDecision, mode: str = "plain"):
    """Return the decision formatted for the requested mode."""

    if mode == "plain":
        return _format_plain(decision)
    if mode == "rich":
        return _format_rich(decision)
    raise ValueError(f"Unsupported decision format: {mode}")
