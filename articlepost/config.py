from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "articlepost.yml"


class Config(BaseModel):
    assets_dir: Path = Field(
        default=Path("src"),
        description="Directory that site-relative image paths resolve against.",
    )
    output_dir: Path = Field(
        default=Path("dist"),
        description="Generated site directory rewritten by the process command.",
    )
    html_extension: str = Field(
        default=".html",
        description="Output paths ending with this suffix are post-processed.",
    )
    article_selector: str = Field(
        default="main article",
        description="CSS selector for the article region; rules never touch markup outside it.",
    )
    heading_levels: list[str] = Field(default_factory=lambda: ["h2", "h3"])
    heading_id_prefix: str = Field(
        default="heading-",
        description="Prefix separating generated heading ids from other ids on the page.",
    )
    lazy_loading: str = Field(default="lazy")
    gif_extensions: list[str] = Field(default_factory=lambda: [".gif"])
    player_class: str = Field(default="video-player")

    @field_validator("assets_dir", "output_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("html_extension")
    def _ensure_leading_dot(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("html_extension must not be empty")
        return value if value.startswith(".") else f".{value}"

    @field_validator("gif_extensions", mode="before")
    def _normalize_extensions(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            value = [value]
        normalized = []
        for item in value:
            item = str(item).strip().lower()
            normalized.append(item if item.startswith(".") else f".{item}")
        return normalized

    @field_validator("heading_levels", mode="before")
    def _normalize_levels(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            value = [value]
        levels = [str(item).strip().lower() for item in value]
        for level in levels:
            if level not in {"h1", "h2", "h3", "h4", "h5", "h6"}:
                raise ValueError(f"Unsupported heading level '{level}'")
        return levels

    @property
    def heading_selector(self) -> str:
        return ", ".join(f"{self.article_selector} {level}" for level in self.heading_levels)


def load_config(path: str | Path) -> Config:
    """Load configuration and resolve relative paths based on the config location.

    ``path`` may point to a file (e.g. ``/site/articlepost.yml``) or to a
    directory containing that file. A directory without a config file yields the
    defaults anchored to that directory.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    if candidate.is_dir():
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {candidate} must be a mapping.")

    cfg = Config(**data)

    def _abs(value: Path) -> Path:
        return value if value.is_absolute() else (base_dir / value).resolve()

    cfg.assets_dir = _abs(cfg.assets_dir)
    cfg.output_dir = _abs(cfg.output_dir)
    return cfg
