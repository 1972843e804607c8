"""Narrow document interface the rewrite rules depend on.

Parsing goes through BeautifulSoup's html5lib tree builder so every page gets an
``<html>`` root with ``<head>`` and ``<body>``, matching what a browser DOM
produces for the same input.
"""

from __future__ import annotations

import copy
from typing import Mapping

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement, Tag
from bs4.formatter import HTMLFormatter

PARSER = "html5lib"
DOCTYPE = "<!DOCTYPE html>\r\n"


class OuterHTMLFormatter(HTMLFormatter):
    """Serialize like a browser's ``outerHTML``.

    Attributes keep their source order, void elements are written without a
    closing slash, and only ``&``, ``<`` and ``>`` are escaped.
    """

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
        )

    def attributes(self, tag: Tag):  # type: ignore[override]
        return list(tag.attrs.items())


OUTER_HTML = OuterHTMLFormatter()


class Document:
    """A parsed page owned by a single transform call."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def parse(cls, markup: str) -> "Document":
        return cls(BeautifulSoup(markup, PARSER))

    @property
    def root(self) -> Tag:
        # html5lib always synthesizes the <html> element
        return self._soup.html  # type: ignore[return-value]

    def select(self, selector: str) -> list[Tag]:
        """Return matching elements in document order."""
        return list(self._soup.select(selector))

    def create(
        self,
        name: str,
        attrs: Mapping[str, str] | None = None,
        *,
        classes: tuple[str, ...] = (),
        text: str | None = None,
    ) -> Tag:
        tag = self._soup.new_tag(name, attrs=dict(attrs or {}))
        if classes:
            tag["class"] = list(classes)
        if text is not None:
            tag.string = text
        return tag

    def fragment(self, markup: str) -> list[PageElement]:
        """Parse ``markup`` as body content and return its detached top-level nodes.

        Foreign content such as inline SVG keeps its attribute casing
        (``viewBox``), which the plain ``html.parser`` builder would lowercase.
        """
        body = BeautifulSoup(markup, PARSER).body
        if body is None:
            return []
        return [node.extract() for node in list(body.contents)]

    def serialize(self) -> str:
        return DOCTYPE + self.root.decode(formatter=OUTER_HTML)


def clone(node: Tag) -> Tag:
    """Deep copy of ``node`` and its subtree, detached from any tree."""
    return copy.copy(node)


def replace(node: Tag, replacement: Tag) -> Tag:
    """Splice ``replacement`` in at ``node``'s position and detach ``node``."""
    node.replace_with(replacement)
    return replacement


def append_all(parent: Tag, nodes: list[PageElement]) -> Tag:
    for node in nodes:
        parent.append(node)
    return parent
