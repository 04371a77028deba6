"""Idempotent injection of structured data and the freshness badge.

Both injections probe for their own marker first, so re-running over pages
that were already processed is a no-op.  A missing insertion anchor leaves the
page untouched for that injection.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from freshness.config import AFTER_TITLE, FreshnessConfig
from freshness.markup.badge import BADGE_MARKER, fresh_badge_html, stale_badge_html
from freshness.markup.jsonld import article_json_ld, has_article_json_ld
from freshness.models import ExtractedDates, PageMetadata

logger = logging.getLogger(__name__)

_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)
_H1_CLOSE_RE = re.compile(r"</h1>")
_DISCLOSURE_RE = re.compile(r'<div class="affiliate-disclosure"')


@dataclass(frozen=True)
class Mutation:
    html: str
    json_ld_injected: bool = False
    badge_injected: bool = False

    @property
    def changed(self) -> bool:
        return self.json_ld_injected or self.badge_injected


def inject_json_ld(
    html: str,
    url_path: str,
    metadata: PageMetadata,
    dates: ExtractedDates,
    config: FreshnessConfig,
) -> tuple[str, bool]:
    """Insert an Article JSON-LD block before ``</head>``."""
    if not config.inject_json_ld or dates.published is None or has_article_json_ld(html):
        return html, False

    block = article_json_ld(
        title=metadata.title or url_path,
        description=metadata.description,
        published=dates.published,
        updated=dates.updated,
        url_path=url_path,
        site_url=config.site_url,
        site_name=config.site_name,
        hero_image=metadata.hero_image_url,
    )
    html, count = _HEAD_CLOSE_RE.subn(lambda m: f"  {block}\n{m.group(0)}", html, count=1)
    if not count:
        logger.debug("No </head> in %s, skipping JSON-LD", url_path)
    return html, bool(count)


def inject_badge(
    html: str,
    url_path: str,
    dates: ExtractedDates,
    config: FreshnessConfig,
    *,
    is_fresh: bool,
) -> tuple[str, bool]:
    """Insert the fresh/stale badge at the configured position.

    A stale badge shows the original publish date, not the effective date.
    """
    if not config.inject_badge or dates.published is None or BADGE_MARKER in html:
        return html, False

    if is_fresh:
        badge = fresh_badge_html(dates.effective)
    else:
        badge = stale_badge_html(dates.published)

    if config.badge_position == AFTER_TITLE:
        html, count = _H1_CLOSE_RE.subn(lambda m: f"{m.group(0)}\n      {badge}", html, count=1)
    else:
        html, count = _DISCLOSURE_RE.subn(lambda m: f"{badge}\n    {m.group(0)}", html, count=1)
    if not count:
        logger.debug("No %s anchor in %s, skipping badge", config.badge_position, url_path)
    return html, bool(count)


def mutate(
    html: str,
    url_path: str,
    metadata: PageMetadata,
    dates: ExtractedDates,
    config: FreshnessConfig,
    *,
    is_fresh: bool,
) -> Mutation:
    """Apply both injections to *html* and report what happened."""
    html, json_ld_injected = inject_json_ld(html, url_path, metadata, dates, config)
    html, badge_injected = inject_badge(html, url_path, dates, config, is_fresh=is_fresh)
    return Mutation(html=html, json_ld_injected=json_ld_injected, badge_injected=badge_injected)
