"""Auxiliary article metadata used to build structured data."""

from __future__ import annotations

import re

from freshness.models import PageMetadata

_H1_RE = re.compile(r"<h1[^>]*>([\s\S]*?)</h1>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_DESCRIPTION_RE = re.compile(
    r"<meta\s+[^>]*name=[\"']description[\"'][^>]*content=[\"']([^\"']*)[\"']",
    re.IGNORECASE,
)
# An <img> with an object-fit style is almost always the article's lead image.
_HERO_IMAGE_RE = re.compile(
    r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*style=[\"'][^\"']*object-fit",
    re.IGNORECASE,
)


def _extract_title(html: str) -> str | None:
    """Return the text of the first ``<h1>``, tags stripped, or ``None``."""
    match = _H1_RE.search(html)
    if not match:
        return None
    return _TAG_RE.sub("", match.group(1)).strip() or None


def _extract_description(html: str) -> str | None:
    match = _DESCRIPTION_RE.search(html)
    return match.group(1).strip() if match else None


def _extract_hero_image(html: str) -> str | None:
    match = _HERO_IMAGE_RE.search(html)
    return match.group(1) if match else None


def extract_metadata(html: str) -> PageMetadata:
    """Extract title, description and hero image URL; any may be ``None``.

    The caller supplies its own fallback title (the URL path) when no
    ``<h1>`` is present.
    """
    return PageMetadata(
        title=_extract_title(html),
        description=_extract_description(html),
        hero_image_url=_extract_hero_image(html),
    )
