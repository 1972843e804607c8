from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from articlepost.dimensions import (
    ImageDimensionError,
    is_local_source,
    probe_dimensions,
    resolve_local_asset,
)


def _svg(path: Path, attributes: str) -> Path:
    path.write_text(
        f'<?xml version="1.0"?>\n<svg xmlns="http://www.w3.org/2000/svg" {attributes}><rect/></svg>',
        encoding="utf-8",
    )
    return path


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("/images/foo.png", True),
        ("images/foo.png", True),
        ("../media/clip.gif", True),
        ("https://cdn.example.com/foo.png", False),
        ("http://example.com/foo.png", False),
        ("//cdn.example.com/foo.png", False),
        ("data:image/gif;base64,R0lGODlhAQABAAAAACw=", False),
        ("   ", False),
    ],
)
def test_is_local_source(src: str, expected: bool) -> None:
    assert is_local_source(src) is expected


def test_resolve_local_asset_strips_query_and_decodes(tmp_path: Path) -> None:
    resolved = resolve_local_asset("/images/my%20photo.png?v=2#top", tmp_path)

    assert resolved == tmp_path / "images" / "my photo.png"


def test_probe_dimensions_reads_raster_images(tmp_path: Path) -> None:
    target = tmp_path / "photo.png"
    Image.new("RGB", (64, 48), color="white").save(target)

    assert probe_dimensions(target) == (64, 48)


def test_probe_dimensions_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        probe_dimensions(tmp_path / "missing.png")


def test_probe_dimensions_rejects_non_images(tmp_path: Path) -> None:
    target = tmp_path / "notes.png"
    target.write_text("not an image", encoding="utf-8")

    with pytest.raises(OSError):
        probe_dimensions(target)


def test_svg_dimensions_from_width_and_height(tmp_path: Path) -> None:
    target = _svg(tmp_path / "logo.svg", 'width="120px" height="80"')

    assert probe_dimensions(target) == (120, 80)


def test_svg_dimensions_from_viewbox(tmp_path: Path) -> None:
    target = _svg(tmp_path / "icon.svg", 'viewBox="0 0 24 16"')

    assert probe_dimensions(target) == (24, 16)


def test_svg_dimensions_scale_viewbox_by_single_length(tmp_path: Path) -> None:
    target = _svg(tmp_path / "wide.svg", 'width="200" viewBox="0,0,100,50"')

    assert probe_dimensions(target) == (200, 100)


def test_svg_dimensions_relative_lengths_fall_back_to_viewbox(tmp_path: Path) -> None:
    target = _svg(tmp_path / "fluid.svg", 'width="100%" height="100%" viewBox="0 0 30 10"')

    assert probe_dimensions(target) == (30, 10)


def test_svg_without_size_information_raises(tmp_path: Path) -> None:
    target = _svg(tmp_path / "bare.svg", 'width="50%"')

    with pytest.raises(ImageDimensionError):
        probe_dimensions(target)
