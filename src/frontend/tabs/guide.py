"""Guide tab: what each message category covers."""

from __future__ import annotations

from rich.text import Text
from textual.containers import ScrollableContainer
from textual.widgets import Static

from adapters.decision_formatting import CATEGORY_LABELS, CATEGORY_STYLES
from core.models import MessageCategory
from core.patterns import CREWMATE_NAMES

EXAMPLES: dict[MessageCategory, list[str]] = {
    MessageCategory.CARGO_FULL: ["The cargo hold is full. I can't salvage anything."],
    MessageCategory.SALVAGE_FOUND: [
        "Managed to hook some salvage!",
        "I've caught a wind mote!",
        "There's somethin' in the drink to the north!",
    ],
    MessageCategory.SAILING_STATUS: [
        "Trimmed those sails good and proper, Captain!",
        "Enabling the wind catcher!",
    ],
    MessageCategory.WARNING: [
        "I can't find any repair kits in the cargo hold",
        "I can't find any ammo in the cargo hold",
    ],
    MessageCategory.IDLE_CHATTER: [
        "Life is easier on the sea",
        "I'm just happy to be here",
        "C for miles. C for fish.",
    ],
    MessageCategory.GENERAL: ["Anything else a crewmate says."],
}


class GuideTab(ScrollableContainer):
    def compose(self):
        yield Static(self._guide_text(), id="guide-text")

    @staticmethod
    def _guide_text() -> Text:
        text = Text()
        text.append("Categories are checked top to bottom; the first match wins.\n", style="bold")
        text.append("Cargo full is an override: while it is on, those messages always show.\n\n")
        for category, examples in EXAMPLES.items():
            text.append(CATEGORY_LABELS[category], style=CATEGORY_STYLES[category])
            text.append("\n")
            for example in examples:
                text.append(f"  - {example}\n", style="dim")
        text.append("\nCrewmates: ", style="bold")
        text.append(", ".join(sorted(name.title() for name in CREWMATE_NAMES)))
        return text
