"""Scan orchestration — from a built site directory to per-page results.

``scan_site`` runs the full pipeline for every article page:

    discover → filter → read → extract → mtime fallback → classify
    → mutate → write back (if changed) → PageResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable

from freshness.classifier import classify
from freshness.config import FreshnessConfig
from freshness.extractor import extract_dates, extract_metadata
from freshness.markup import mutate
from freshness.models import PageResult
from freshness.scanner.walker import is_content_path, is_ignored_path, iter_html_files, url_path_for

logger = logging.getLogger(__name__)

Walker = Callable[[Path], Iterable[Path]]

# Titles are cut to this length in results to keep the report readable.
_TITLE_LIMIT = 50


@dataclass
class ScanOutcome:
    """Raw, unsorted output of a scan."""

    results: list[PageResult] = field(default_factory=list)
    injected_count: int = 0
    content_pages: int = 0


def _file_mtime(path: Path) -> datetime:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)


def find_content_pages(root: Path, config: FreshnessConfig, walker: Walker = iter_html_files) -> list[tuple[Path, str]]:
    """Return ``(file, url_path)`` for every page under a content prefix."""
    pages = []
    for file in walker(root):
        url_path = url_path_for(root, file)
        if is_content_path(url_path, config.content_paths):
            pages.append((Path(file), url_path))
    return pages


def process_page(file: Path, url_path: str, config: FreshnessConfig, now: datetime) -> tuple[PageResult, bool]:
    """Process one page, rewriting it in place when a mutation applies.

    Returns:
        The page's :class:`PageResult` and whether JSON-LD was injected.

    Raises:
        OSError: If the file cannot be read or written.
    """
    html = file.read_text(encoding="utf-8")

    dates = extract_dates(html)
    metadata = extract_metadata(html)
    title = metadata.title or url_path

    if dates.published is None:
        dates = replace(dates, published=_file_mtime(file))
        logger.debug("%s: no date in markup, using file mtime", url_path)

    effective = dates.effective
    freshness = classify(effective, now, config.freshness_months)

    mutation = mutate(html, url_path, metadata, dates, config, is_fresh=freshness.is_fresh)
    if mutation.changed:
        file.write_text(mutation.html, encoding="utf-8")
        logger.debug(
            "%s: rewritten (json-ld=%s, badge=%s)",
            url_path,
            mutation.json_ld_injected,
            mutation.badge_injected,
        )

    result = PageResult(
        url_path=url_path,
        title=title[:_TITLE_LIMIT],
        published=dates.published,
        updated=dates.updated,
        effective=effective,
        is_fresh=freshness.is_fresh,
        age_in_days=freshness.age_in_days,
    )
    return result, mutation.json_ld_injected


def scan_site(
    root: str | Path,
    config: FreshnessConfig,
    *,
    now: datetime | None = None,
    walker: Walker = iter_html_files,
) -> ScanOutcome:
    """Scan every article page under *root* and return the unsorted results.

    Args:
        root: Directory holding the built site.
        config: Run configuration.
        now: Reference time for classification (defaults to current UTC time).
        walker: Callable yielding candidate ``.html`` paths under *root*.

    Raises:
        OSError: On any unreadable or unwritable page; the scan is aborted.
    """
    root = Path(root)
    now = now or datetime.now(timezone.utc)

    pages = find_content_pages(root, config, walker)
    outcome = ScanOutcome(content_pages=len(pages))
    logger.debug("Found %d content pages under %s", len(pages), root)

    for file, url_path in pages:
        if is_ignored_path(url_path, config.ignore_paths):
            logger.debug("%s: ignored", url_path)
            continue
        result, json_ld_injected = process_page(file, url_path, config, now)
        outcome.results.append(result)
        if json_ld_injected:
            outcome.injected_count += 1

    return outcome
