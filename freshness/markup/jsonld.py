"""JSON-LD ``Article`` structured data."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

# Both common serialisations of the type marker count as "already present".
ARTICLE_MARKERS = ('"@type":"Article"', '"@type": "Article"')


def iso_timestamp(value: datetime) -> str:
    """UTC timestamp with millisecond precision, e.g. ``2026-02-08T00:00:00.000Z``."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def has_article_json_ld(html: str) -> bool:
    return any(marker in html for marker in ARTICLE_MARKERS)


def article_json_ld(
    *,
    title: str,
    description: str | None,
    published: datetime,
    updated: datetime | None,
    url_path: str,
    site_url: str,
    site_name: str,
    hero_image: str | None = None,
) -> str:
    """Return a ``<script type="application/ld+json">`` block for an article."""
    data: dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": title,
        "description": description or "",
        "datePublished": iso_timestamp(published),
        "dateModified": iso_timestamp(updated or published),
        "publisher": {
            "@type": "Organization",
            "name": site_name,
        },
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": f"{site_url}{url_path}" if site_url else url_path,
        },
    }
    if hero_image:
        data["image"] = hero_image

    payload = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return f'<script type="application/ld+json">{payload}</script>'
