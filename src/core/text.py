"""Text normalization helpers (core domain)."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]*>")


def remove_tags(text: str) -> str:
    """Strip host markup such as ``<col=ff0000>`` and ``<img=1>``."""

    return _TAG_RE.sub("", text)


def normalize_text(text: str) -> str:
    """Normalize text for classification: no tags, lowercase."""

    return remove_tags(text).lower()
