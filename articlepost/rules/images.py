"""Image enrichment: lazy loading, intrinsic sizing, GIF toggles and captions."""

from __future__ import annotations

import logging
from typing import Iterable

from bs4.element import Tag

from ..config import Config
from ..dimensions import is_local_source, probe_dimensions, resolve_local_asset, source_path
from ..dom import Document, append_all, clone, replace
from ..markup import GIF_PLAY_ICON
from ..models import TransformStats

logger = logging.getLogger(__name__)

GIF_TOGGLE_CLASS = "click-to-gif"
GIF_TOGGLE_TITLE = "click/hit space to show gif"
VISUALLY_HIDDEN_CLASS = "visually-hidden"


def enrich_images(
    document: Document,
    images: Iterable[Tag],
    config: Config,
    stats: TransformStats,
) -> None:
    for image in images:
        enrich_image(document, image, config, stats)


def enrich_image(document: Document, image: Tag, config: Config, stats: TransformStats) -> Tag:
    """Enrich a single image and return the node that now occupies its place.

    The GIF toggle and the caption figure are chained: when both apply the
    figure wraps the toggle label rather than the bare image.
    """
    stats.images += 1
    image["loading"] = config.lazy_loading

    src = image.get("src")
    if not isinstance(src, str) or not src.strip():
        logger.warning("Article image has no src; skipping size probe.")
        src = ""

    if src and is_local_source(src):
        width, height = probe_dimensions(resolve_local_asset(src, config.assets_dir))
        image["width"] = str(width)
        image["height"] = str(height)
        stats.images_sized += 1

    node = image
    if src and _is_animated(src, config) and not in_gif_toggle(image):
        node = wrap_gif_toggle(document, node)
        stats.gif_toggles += 1

    if image.has_attr("title"):
        node = wrap_caption(document, node)
        stats.figures += 1

    return node


def wrap_gif_toggle(document: Document, node: Tag) -> Tag:
    """Replace ``node`` with a checkbox label that pauses the animation via CSS."""
    label = document.create("label", classes=(GIF_TOGGLE_CLASS,))
    label["title"] = GIF_TOGGLE_TITLE

    checkbox = document.create(
        "input",
        {"type": "checkbox", "checked": "true"},
        classes=(VISUALLY_HIDDEN_CLASS,),
    )
    label.append(checkbox)
    append_all(label, document.fragment(GIF_PLAY_ICON))
    label.append(clone(node))

    return replace(node, label)


def wrap_caption(document: Document, node: Tag) -> Tag:
    """Replace ``node`` with a figure captioned by its image's ``title``."""
    image = node if node.name == "img" else node.find("img")
    if not isinstance(image, Tag) or not image.has_attr("title"):
        return node

    caption = image["title"]
    if isinstance(caption, list):
        caption = " ".join(caption)
    del image["title"]

    figure = document.create("figure")
    figure.append(clone(node))
    figure.append(document.create("figcaption", text=caption))

    return replace(node, figure)


def in_gif_toggle(image: Tag) -> bool:
    """Whether ``image`` already sits inside a toggle label from an earlier run."""
    parent = image.parent
    return (
        isinstance(parent, Tag)
        and parent.name == "label"
        and GIF_TOGGLE_CLASS in parent.get_attribute_list("class")
    )


def _is_animated(src: str, config: Config) -> bool:
    path = source_path(src).lower()
    return any(path.endswith(extension) for extension in config.gif_extensions)
