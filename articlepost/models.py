"""Result models shared by the transform and the site runner."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path


@dataclass(slots=True)
class TransformStats:
    """Counters describing what the rewrite rules did to one page."""

    images: int = 0
    images_sized: int = 0
    gif_toggles: int = 0
    figures: int = 0
    headings: int = 0
    embeds_wrapped: int = 0

    def merge(self, other: "TransformStats") -> None:
        for item in fields(self):
            setattr(self, item.name, getattr(self, item.name) + getattr(other, item.name))


@dataclass(slots=True)
class TransformResult:
    html: str
    stats: TransformStats


@dataclass(slots=True)
class PageFailure:
    """A page that could not be transformed; the file is left untouched."""

    path: Path
    message: str


@dataclass(slots=True)
class SiteReport:
    """Aggregate results of post-processing a generated site."""

    scanned_files: int = 0
    rewritten: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    failures: list[PageFailure] = field(default_factory=list)
    stats: TransformStats = field(default_factory=TransformStats)

    @property
    def failure_count(self) -> int:
        return len(self.failures)
