from __future__ import annotations

from pathlib import Path

import pytest

from articlepost.config import Config, load_config


def _write_project_config(root: Path, extra: str = "") -> Path:
    config_text = (
        "assets_dir: src\n"
        "output_dir: _site\n"
        "heading_id_prefix: anchor-\n"
        "gif_extensions: [GIF, webp]\n"
        "html_extension: htm\n"
    ) + extra
    cfg_path = root / "articlepost.yml"
    cfg_path.write_text(config_text, encoding="utf-8")
    return cfg_path


def test_load_config_resolves_paths_relative_to_config_directory(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    _write_project_config(project)

    # Pass a directory path; loader should find articlepost.yml inside it.
    cfg = load_config(project)

    assert cfg.assets_dir == (project / "src").resolve()
    assert cfg.output_dir == (project / "_site").resolve()
    assert cfg.heading_id_prefix == "anchor-"
    assert cfg.gif_extensions == [".gif", ".webp"]
    assert cfg.html_extension == ".htm"


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    cfg_path = _write_project_config(tmp_path)

    cfg = load_config(cfg_path)

    assert cfg.assets_dir == (tmp_path / "src").resolve()


def test_load_config_directory_without_file_uses_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)

    assert cfg.assets_dir == (tmp_path / "src").resolve()
    assert cfg.output_dir == (tmp_path / "dist").resolve()
    assert cfg.article_selector == "main article"
    assert cfg.heading_selector == "main article h2, main article h3"


def test_load_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_load_config_rejects_invalid_heading_levels(tmp_path: Path) -> None:
    cfg_path = _write_project_config(tmp_path, "heading_levels: [h2, p]\n")

    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_config_defaults_match_site_conventions() -> None:
    cfg = Config()

    assert cfg.assets_dir == Path("src")
    assert cfg.html_extension == ".html"
    assert cfg.lazy_loading == "lazy"
    assert cfg.gif_extensions == [".gif"]
    assert cfg.player_class == "video-player"
