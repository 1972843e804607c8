"""Heading anchors: stable ids plus a hover-revealed permalink."""

from __future__ import annotations

from typing import Iterable

from bs4.element import Tag

from ..config import Config
from ..dom import Document, append_all
from ..markup import PERMALINK_CONTENT
from ..models import TransformStats
from ..slugs import heading_id

PERMALINK_CLASS = "heading-permalink"


def anchor_headings(
    document: Document,
    headings: Iterable[Tag],
    config: Config,
    stats: TransformStats,
) -> None:
    # Identical heading text yields identical ids; they are not deduplicated.
    for heading in headings:
        if has_permalink(heading):
            continue
        anchor_heading(document, heading, config.heading_id_prefix)
        stats.headings += 1


def has_permalink(heading: Tag) -> bool:
    """Whether an earlier run already anchored ``heading``."""
    if not heading.has_attr("id"):
        return False
    return heading.find("a", class_=PERMALINK_CLASS, recursive=False) is not None


def anchor_heading(document: Document, heading: Tag, prefix: str) -> Tag:
    identifier = heading_id(heading.get_text(), prefix)

    anchor = document.create("a", {"href": f"#{identifier}"}, classes=(PERMALINK_CLASS,))
    append_all(anchor, document.fragment(PERMALINK_CONTENT))

    heading["id"] = identifier
    heading.append(anchor)
    return heading
