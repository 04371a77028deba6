"""Data models shared across the freshness pipeline.

Plain dataclasses, immutable once built.  All timestamps are timezone-aware
UTC ``datetime`` objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ExtractedDates:
    published: datetime | None = None
    updated: datetime | None = None

    @property
    def effective(self) -> datetime | None:
        """The updated date if known, else the published date."""
        return self.updated or self.published


@dataclass(frozen=True)
class PageMetadata:
    title: str | None = None
    description: str | None = None
    hero_image_url: str | None = None


@dataclass(frozen=True)
class Freshness:
    is_fresh: bool
    age_in_days: int


@dataclass(frozen=True)
class PageResult:
    """Outcome of processing one article page."""

    url_path: str
    title: str
    published: datetime
    updated: datetime | None
    effective: datetime
    is_fresh: bool
    age_in_days: int
