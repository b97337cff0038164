"""Static crewmate names and message pattern tables.

All entries are lowercase; matching is a plain substring test against
normalized (lowercased, tag-stripped) text.
"""

from __future__ import annotations

from core.models import MessageCategory

# Known crewmate NPC names.
CREWMATE_NAMES = frozenset(
    {
        "jobless jim",
        "ex-captain siad",
        "adventurer ada",
        "cabin boy jenkins",
        "oarswoman olga",
        "jittery jim",
        "bosun zarah",
        "jolly jim",
        "spotter virginia",
        "sailor jakob",
    }
)

CARGO_FULL_PATTERNS = (
    "the cargo hold is full",
    "cargo hold is full",
    "can't salvage anything",
)

SALVAGE_PATTERNS = (
    "managed to hook some salvage",
    "i'll put it in the cargo hold",
    "there's somethin' in the drink",
    "i can see something to the",
    "one man's rubbish",
    "havin a butchers at the hook",
    "i've caught a wind mote",
)

SAILING_STATUS_PATTERNS = (
    "trimmed those sails",
    "enabling the wind catcher",
    "disabling the wind catcher",
    "aye, that's better",
    "me mince pies are on the sails",
    "all looking good on the sails",
)

WARNING_PATTERNS = (
    "can't find any repair kits",
    "can't find any ammo",
    "sailing was supposed to be peaceful",
)

# Jobless Jim (cockney slang)
IDLE_JOBLESS_JIM = (
    "c for miles",
    "c for fish",
    "i'm a bit taters",
    "been on me pins all day",
    "wish i had a boat",
)

IDLE_SIAD = (
    "this really is my passion",
    "life is easier on the sea",
    "this is so much better than being cooped up",
    "i'm just happy to be here",
    "this reminds me of my last holiday",
)

# Cabin Boy Jenkins is a ghost.
IDLE_JENKINS = ("woo",)

IDLE_GENERIC = (
    "ello, cap'n",
    "hello, captain",
    "captain!",
    "nice to see you",
    "how d'ye think i'm doin'",
    "i'm so relaxed",
)

IDLE_CHATTER_PATTERNS = IDLE_JOBLESS_JIM + IDLE_SIAD + IDLE_JENKINS + IDLE_GENERIC

# Evaluated top to bottom; the first category with a hit wins. Anything
# left over is GENERAL. Cargo-full is not ranked here; the policy checks it
# first as an override.
CATEGORY_PRECEDENCE: tuple[tuple[MessageCategory, tuple[str, ...]], ...] = (
    (MessageCategory.SALVAGE_FOUND, SALVAGE_PATTERNS),
    (MessageCategory.SAILING_STATUS, SAILING_STATUS_PATTERNS),
    (MessageCategory.WARNING, WARNING_PATTERNS),
    (MessageCategory.IDLE_CHATTER, IDLE_CHATTER_PATTERNS),
)
