"""Responsive player containers for fullscreen-capable embeds."""

from __future__ import annotations

from typing import Iterable

from bs4.element import Tag

from ..config import Config
from ..dom import Document, clone, replace
from ..models import TransformStats

FULLSCREEN_ATTRIBUTE = "allowfullscreen"


def wrap_embeds(
    document: Document,
    embeds: Iterable[Tag],
    config: Config,
    stats: TransformStats,
) -> None:
    for embed in embeds:
        if not embed.has_attr(FULLSCREEN_ATTRIBUTE) or in_player(embed, config.player_class):
            continue
        wrap_embed(document, embed, config.player_class)
        stats.embeds_wrapped += 1


def in_player(embed: Tag, player_class: str) -> bool:
    parent = embed.parent
    return (
        isinstance(parent, Tag)
        and parent.name == "div"
        and player_class in parent.get_attribute_list("class")
    )


def wrap_embed(document: Document, embed: Tag, player_class: str) -> Tag:
    player = document.create("div", classes=(player_class,))
    player.append(clone(embed))
    return replace(embed, player)
