"""Slug helpers for heading anchors."""

from __future__ import annotations

import re
import unicodedata

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
DEFAULT_FALLBACK = "section"


def slugify(value: str, fallback: str = DEFAULT_FALLBACK) -> str:
    """Convert arbitrary text into a lower-case, hyphenated, ASCII-only slug."""
    normalized = unicodedata.normalize("NFKD", value)
    normalized = normalized.encode("ascii", "ignore").decode("ascii").lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def heading_id(text: str, prefix: str) -> str:
    return f"{prefix}{slugify(text.lower())}"
