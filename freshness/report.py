"""Freshness report: ordering, rendering and the stale-content build policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from freshness.classifier import stale_threshold
from freshness.config import FreshnessConfig
from freshness.exceptions import StaleContentError
from freshness.models import PageResult
from freshness.scanner import ScanOutcome

logger = logging.getLogger(__name__)

_RULE = "═" * 43
_THIN_RULE = "─" * 43


@dataclass(frozen=True)
class FreshnessReport:
    results: list[PageResult]
    injected_count: int
    threshold: datetime
    freshness_months: int
    content_pages: int = 0

    @property
    def stale(self) -> list[PageResult]:
        return [r for r in self.results if not r.is_fresh]

    @property
    def stale_count(self) -> int:
        return len(self.stale)

    @property
    def fresh_count(self) -> int:
        return len(self.results) - self.stale_count


def sort_results(results: list[PageResult]) -> list[PageResult]:
    """Stale pages first, then fresh; oldest first within each group."""
    return sorted(results, key=lambda r: (r.is_fresh, -r.age_in_days))


def build_report(outcome: ScanOutcome, config: FreshnessConfig, now: datetime) -> FreshnessReport:
    return FreshnessReport(
        results=sort_results(outcome.results),
        injected_count=outcome.injected_count,
        threshold=stale_threshold(now, config.freshness_months),
        freshness_months=config.freshness_months,
        content_pages=outcome.content_pages,
    )


def _age_label(days: int) -> str:
    if days == 0:
        return "today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def render_report(report: FreshnessReport) -> list[str]:
    """Render *report* as human-readable lines."""
    lines = [
        "Content Freshness Tracker — scanning articles...",
        f"   Freshness threshold: {report.freshness_months} months "
        f"(before {report.threshold.date().isoformat()})",
    ]
    if not report.content_pages:
        lines.append("   No content pages found.")
        return lines

    lines += [
        f"   Found {report.content_pages} content pages",
        _RULE,
        "   CONTENT FRESHNESS REPORT",
        _RULE,
        f"   Articles scanned:  {len(report.results)}",
        f"   JSON-LD injected:  {report.injected_count}",
        f"   Fresh articles:    {report.fresh_count}",
        f"   Stale articles:    {report.stale_count}",
        _THIN_RULE,
        "   ARTICLE FRESHNESS",
        _THIN_RULE,
    ]
    for r in report.results:
        icon = "✅" if r.is_fresh else "⚠️"
        lines.append(
            f"   {icon} {r.url_path:<50} {r.effective.date().isoformat()}  ({_age_label(r.age_in_days)})"
        )
    return lines


def log_report(report: FreshnessReport) -> None:
    for line in render_report(report):
        logger.info(line)

    if not report.content_pages:
        return
    if report.stale_count:
        logger.warning(
            "ACTION NEEDED: %d article(s) haven't been reviewed in %d+ months. "
            "Update the content and set a new updatedDate in frontmatter.",
            report.stale_count,
            report.freshness_months,
        )
    else:
        logger.info("All content is fresh!")


def enforce_policy(report: FreshnessReport, config: FreshnessConfig) -> None:
    """Raise :class:`StaleContentError` when stale pages exist and ``failOnStale`` is set."""
    if config.fail_on_stale and report.stale_count:
        raise StaleContentError(
            report.stale_count,
            [(r.url_path, r.effective) for r in report.stale],
        )
