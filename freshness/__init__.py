"""Content freshness tracker for statically built sites.

Scans built article pages, injects JSON-LD ``Article`` data and a visible
freshness badge, and reports articles that have gone stale.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from freshness.config import FreshnessConfig
from freshness.report import FreshnessReport, build_report, enforce_policy, log_report
from freshness.scanner import scan_site

__version__ = "0.1.0"


def run(root: str | Path, config: FreshnessConfig, *, now: datetime | None = None) -> FreshnessReport:
    """Scan *root*, log the report and apply the ``failOnStale`` policy.

    Raises:
        StaleContentError: If stale articles exist and ``failOnStale`` is set.
        OSError: If a page cannot be read or written.
    """
    now = now or datetime.now(timezone.utc)
    outcome = scan_site(root, config, now=now)
    report = build_report(outcome, config, now)
    log_report(report)
    enforce_policy(report, config)
    return report


__all__ = ["FreshnessConfig", "FreshnessReport", "run", "__version__"]
