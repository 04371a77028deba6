"""Exceptions raised by the freshness tracker."""

from __future__ import annotations

from datetime import datetime

# Cap on the number of stale pages listed in a build failure message.
MAX_LISTED_STALE = 10


class FreshnessError(Exception):
    """Base class for all freshness tracker errors."""


class ConfigError(FreshnessError, ValueError):
    """Invalid run configuration."""


class StaleContentError(FreshnessError):
    """Stale articles were found while ``failOnStale`` is enabled.

    This is a policy signal for the host build, not a bug: the message lists
    up to :data:`MAX_LISTED_STALE` affected pages so someone can act on it.
    """

    def __init__(self, stale_count: int, entries: list[tuple[str, datetime]]) -> None:
        self.stale_count = stale_count
        self.entries = entries[:MAX_LISTED_STALE]
        listed = "\n  • ".join(
            f"{url_path} (last updated: {effective.date().isoformat()})"
            for url_path, effective in self.entries
        )
        super().__init__(
            f"Content Freshness: {stale_count} stale article(s) need review:\n  • {listed}"
            "\n\nUpdate content and set updatedDate, or set failOnStale: false."
        )
