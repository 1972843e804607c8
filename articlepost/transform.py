"""Article post-processing entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import Config
from .dom import Document
from .models import TransformResult, TransformStats
from .rules import anchor_headings, enrich_images, wrap_embeds

logger = logging.getLogger(__name__)


def transform(html: str, output_path: str | Path, config: Config | None = None) -> str:
    """Post-process a rendered page destined for ``output_path``.

    Pages whose output path does not end with the HTML extension are returned
    unchanged without being parsed. Missing local images raise
    ``FileNotFoundError``; no partial output is produced.
    """
    config = config or Config()
    if not str(output_path).endswith(config.html_extension):
        return html

    result = transform_page(html, config)
    logger.debug("Post-processed %s: %s", output_path, result.stats)
    return result.html


def transform_page(html: str, config: Config | None = None) -> TransformResult:
    """Run the article rewrite rules on ``html`` regardless of its destination."""
    config = config or Config()
    document = Document.parse(html)
    stats = TransformStats()

    region = config.article_selector
    images = document.select(f"{region} img")
    headings = document.select(config.heading_selector)
    embeds = document.select(f"{region} iframe")

    enrich_images(document, images, config, stats)
    anchor_headings(document, headings, config, stats)
    wrap_embeds(document, embeds, config, stats)

    return TransformResult(html=document.serialize(), stats=stats)
