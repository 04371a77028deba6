"""Publication / update date extraction from raw article markup.

Heuristics run in priority order, each only filling what is still missing:

    1. ``<time datetime="...">`` elements — first is published, second updated.
    2. Visible long-form date text ("February 8, 2026") — published only.
    3. ``article:published_time`` meta — overrides published.
    4. ``article:modified_time`` meta — overrides updated.

The meta tags run last on purpose: they are explicit author intent and win
over anything scraped from the page body.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from dateutil import parser as date_parser

from freshness.models import ExtractedDates

_TIME_RE = re.compile(r"<time[^>]*datetime=[\"']([^\"']+)[\"'][^>]*>", re.IGNORECASE)

_DATE_TEXT_RE = re.compile(
    r"(?:January|February|March|April|May|June|July|August|September|October|November|December)"
    r"\s+\d{1,2},\s+\d{4}",
    re.IGNORECASE,
)


def _meta_patterns(prop: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    name = re.escape(prop)
    return (
        re.compile(rf"property=[\"']{name}[\"'][^>]*content=[\"']([^\"']+)[\"']", re.IGNORECASE),
        re.compile(rf"content=[\"']([^\"'>]+)[\"'][^>]*property=[\"']{name}[\"']", re.IGNORECASE),
    )


_PUBLISHED_META = _meta_patterns("article:published_time")
_MODIFIED_META = _meta_patterns("article:modified_time")


# Missing fields come from here, never from today's date.
_TEXT_DEFAULT = datetime(2000, 1, 1)


def _as_utc(parsed: datetime) -> datetime:
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_date(value: str | None) -> datetime | None:
    """Parse a machine-readable ISO 8601 *value* into a UTC datetime.

    Partial dates resolve to the start of the period (``2024`` → 1 January,
    ``2026-02`` → 1 February).  Time-only or otherwise invalid values give
    ``None``.  Values without an explicit offset are taken as UTC.
    """
    if not value or not value.strip():
        return None
    try:
        return _as_utc(date_parser.isoparse(value.strip()))
    except (ValueError, OverflowError):
        return None


def parse_date_text(value: str | None) -> datetime | None:
    """Parse long-form date text such as ``February 8, 2026``, or ``None``."""
    if not value or not value.strip():
        return None
    try:
        return _as_utc(date_parser.parse(value.strip(), default=_TEXT_DEFAULT))
    except (ValueError, OverflowError):
        return None


def _meta_date(html: str, patterns: tuple[re.Pattern[str], ...]) -> datetime | None:
    for pattern in patterns:
        match = pattern.search(html)
        if match:
            return parse_date(match.group(1))
    return None


def extract_dates(html: str) -> ExtractedDates:
    """Derive ``(published, updated)`` from *html*.  Never raises on bad data."""
    published: datetime | None = None
    updated: datetime | None = None

    # 1 — machine-readable <time> markers, document order, invalid ones dropped
    times = [d for d in (parse_date(m.group(1)) for m in _TIME_RE.finditer(html)) if d]
    if len(times) >= 2:
        published, updated = times[0], times[1]
    elif times:
        published = times[0]

    # 2 — visible date text, first occurrence only
    if published is None:
        match = _DATE_TEXT_RE.search(html)
        if match:
            published = parse_date_text(match.group(0))

    # 3 & 4 — meta markers override
    published = _meta_date(html, _PUBLISHED_META) or published
    updated = _meta_date(html, _MODIFIED_META) or updated

    return ExtractedDates(published=published, updated=updated)
