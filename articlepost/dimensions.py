"""Local image lookup and pixel dimension probing."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import unquote, urlsplit

from bs4 import BeautifulSoup
from PIL import Image

SVG_SUFFIXES = {".svg"}
SVG_LENGTH = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$", re.IGNORECASE)
VIEWBOX_SEPARATOR = re.compile(r"[\s,]+")


class ImageDimensionError(ValueError):
    """Raised when a local image exists but its size cannot be determined."""


def is_local_source(src: str) -> bool:
    """Whether ``src`` names a file in the local asset store.

    Anything mentioning ``http`` is remote, as are ``data:`` URIs and
    protocol-relative references.
    """
    stripped = src.strip()
    if not stripped or "http" in stripped:
        return False
    if stripped.startswith("//"):
        return False
    return urlsplit(stripped).scheme != "data"


def source_path(src: str) -> str:
    """URL path of ``src`` with query and fragment removed."""
    return unquote(urlsplit(src.strip()).path)


def resolve_local_asset(src: str, assets_dir: Path) -> Path:
    return assets_dir / source_path(src).lstrip("/")


def probe_dimensions(path: Path) -> tuple[int, int]:
    """Return ``(width, height)`` in pixels; missing files raise ``FileNotFoundError``."""
    if path.suffix.lower() in SVG_SUFFIXES:
        return _svg_dimensions(path)
    with Image.open(path) as image:
        width, height = image.size
    return int(width), int(height)


def _svg_dimensions(path: Path) -> tuple[int, int]:
    markup = path.read_text(encoding="utf-8")
    svg = BeautifulSoup(markup, "html.parser").find("svg")
    if svg is None:
        raise ImageDimensionError(f"No <svg> root element in {path}")

    width = _svg_length(svg.get("width"))
    height = _svg_length(svg.get("height"))
    if width is not None and height is not None:
        return round(width), round(height)

    # html.parser lowercases attribute names
    viewbox = _viewbox_size(svg.get("viewbox"))
    if viewbox is None:
        raise ImageDimensionError(f"Unable to determine SVG dimensions for {path}")

    view_width, view_height = viewbox
    if width is not None:
        return round(width), round(width * view_height / view_width)
    if height is not None:
        return round(height * view_width / view_height), round(height)
    return round(view_width), round(view_height)


def _svg_length(value: object) -> float | None:
    if not isinstance(value, str):
        return None
    match = SVG_LENGTH.match(value)
    if match is None:
        return None
    return float(match.group(1))


def _viewbox_size(value: object) -> tuple[float, float] | None:
    if not isinstance(value, str):
        return None
    parts = [part for part in VIEWBOX_SEPARATOR.split(value.strip()) if part]
    if len(parts) != 4:
        return None
    try:
        width, height = float(parts[2]), float(parts[3])
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height
