"""Apply the article post-processor to every page of a generated site."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import Config
from .models import PageFailure, SiteReport
from .transform import transform_page

logger = logging.getLogger(__name__)


def process_site(config: Config, site_dir: Path | None = None, *, check: bool = False) -> SiteReport:
    """Rewrite HTML pages below ``site_dir`` (default ``config.output_dir``) in place.

    Pages are processed one at a time in sorted order. A page that fails is
    recorded in the report and left untouched. With ``check`` enabled nothing is
    written; pages that would change are reported as rewritten.
    """
    site_dir = (site_dir or config.output_dir).resolve()
    if not site_dir.is_dir():
        raise FileNotFoundError(site_dir)

    html_files = sorted(site_dir.rglob(f"*{config.html_extension}"))
    report = SiteReport(scanned_files=len(html_files))

    for html_file in html_files:
        try:
            original = html_file.read_bytes().decode("utf-8")
            result = transform_page(original, config)
        except (OSError, ValueError) as exc:
            logger.error("Failed to post-process %s: %s", html_file, exc)
            report.failures.append(PageFailure(path=html_file, message=_describe(exc)))
            continue

        report.stats.merge(result.stats)
        if result.html == original:
            report.unchanged.append(html_file)
            continue

        if not check:
            html_file.write_bytes(result.html.encode("utf-8"))
        report.rewritten.append(html_file)
        logger.debug("Post-processed %s: %s", html_file, result.stats)

    return report


def _describe(exc: Exception) -> str:
    if isinstance(exc, FileNotFoundError) and exc.filename:
        return f"Missing local asset: {exc.filename}"
    return str(exc)
