"""Suppression policy (core domain).

Maps (category, ownership, configuration) to a show/hide decision. The
configuration snapshot is passed on every call and never cached here.
"""

from __future__ import annotations

from core.classifier import classify, is_cargo_full
from core.config import FilterConfiguration
from core.models import FilterDecision, MessageCategory, Ownership


def policy_setting(category: MessageCategory, ownership: Ownership, config: FilterConfiguration) -> bool:
    """Return the configured suppression switch for a category and ownership."""

    own = ownership is Ownership.OWN_CREW

    if category is MessageCategory.SALVAGE_FOUND:
        return config.filter_own_salvage_found if own else config.filter_others_salvage_found
    if category is MessageCategory.SAILING_STATUS:
        return config.filter_own_sailing_status if own else config.filter_others_sailing_status
    if category is MessageCategory.WARNING:
        return config.filter_own_warnings if own else config.filter_others_warnings
    if category is MessageCategory.IDLE_CHATTER:
        return config.filter_own_idle_chatter if own else config.filter_others_idle_chatter

    # GENERAL, and CARGO_FULL once the override is off, use the catch-all switch.
    return config.filter_own_crew_general if own else config.filter_others_crew_general


def evaluate(message: str, ownership: Ownership, config: FilterConfiguration) -> FilterDecision:
    """Classify a normalized message and decide whether to hide it.

    Decision order:
    - Cargo-full text is always shown while ``always_show_cargo_full`` is on.
    - Otherwise the message is classified and the matching switch decides.
    """

    cargo_full = is_cargo_full(message)
    if config.always_show_cargo_full and cargo_full:
        return FilterDecision(
            category=MessageCategory.CARGO_FULL,
            ownership=ownership,
            cargo_full=True,
            suppressed=False,
            reason="cargo full (always shown)",
        )

    category = classify(message)
    suppressed = policy_setting(category, ownership, config)
    action = "hidden" if suppressed else "shown"
    return FilterDecision(
        category=category,
        ownership=ownership,
        cargo_full=cargo_full,
        suppressed=suppressed,
        reason=f"{category.value} / {ownership.value} crew: {action}",
    )


def should_suppress(message: str, ownership: Ownership, config: FilterConfiguration) -> bool:
    """Return True if the message should be blanked before display."""

    return evaluate(message, ownership, config).suppressed
