"""Rewrite rules applied to the article region of a page."""

from .embeds import in_player, wrap_embed, wrap_embeds
from .headings import anchor_heading, anchor_headings, has_permalink
from .images import enrich_image, enrich_images, in_gif_toggle, wrap_caption, wrap_gif_toggle

__all__ = [
    "anchor_heading",
    "anchor_headings",
    "enrich_image",
    "enrich_images",
    "has_permalink",
    "in_gif_toggle",
    "in_player",
    "wrap_caption",
    "wrap_embed",
    "wrap_embeds",
    "wrap_gif_toggle",
]
