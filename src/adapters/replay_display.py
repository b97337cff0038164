"""Console display adapter for event replays.

Implements the core DisplayPort by recording which events were blanked and
rendering the surviving chat lines with rich.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

from adapters.decision_formatting import CATEGORY_LABELS, CATEGORY_STYLES, format_event_line
from core.models import ChatMessageEvent, CrewEvent, FilterDecision, OverheadTextEvent


class ReplayDisplay:
    """DisplayPort that prints what a player would still see."""

    def __init__(self, console: Optional[Console] = None, show_hidden: bool = False) -> None:
        self._console = console or Console(highlight=False)
        self._show_hidden = show_hidden
        self.hidden: list[CrewEvent] = []
        self.shown = 0

    def hide_overhead(self, event: OverheadTextEvent) -> None:
        self.hidden.append(event)

    def hide_chat(self, event: ChatMessageEvent) -> None:
        self.hidden.append(event)

    def render(self, event: CrewEvent, decision: Optional[FilterDecision]) -> None:
        """Print one replayed event according to its decision."""

        line = format_event_line(event)
        if decision is not None and decision.suppressed:
            if self._show_hidden:
                label = CATEGORY_LABELS[decision.category].lower()
                self._console.print(Text(f"  (hidden: {label}) {line}", style="dim"))
            return

        self.shown += 1
        if decision is None:
            self._console.print(Text(line))
            return
        self._console.print(
            Text.assemble(
                (f"{CATEGORY_LABELS[decision.category]:>14} ", CATEGORY_STYLES[decision.category]),
                line,
            )
        )
