"""Tests for site discovery, filtering and per-page processing.

Every test builds a throw-away site under ``tmp_path`` and scans it with a
fixed ``now`` so freshness is deterministic.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest
from dateutil.relativedelta import relativedelta

from freshness.config import FreshnessConfig
from freshness.scanner import iter_html_files, scan_site, url_path_for
from freshness.scanner.walker import is_content_path, is_ignored_path

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _article(title: str = "My Article", date: str | None = None) -> str:
    time_tag = f'<time datetime="{date}">{date}</time>' if date else ""
    return f"""\
<!DOCTYPE html>
<html>
<head>
  <title>{title}</title>
</head>
<body>
  <h1>{title}</h1>
  {time_tag}
  <div class="affiliate-disclosure">Disclosure</div>
</body>
</html>
"""


def _write(root: Path, rel: str, html: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path


@pytest.fixture()
def site(tmp_path: Path) -> Path:
    root = tmp_path / "dist"
    _write(root, "index.html", _article("Home", "2020-01-01"))
    _write(root, "blog/index.html", _article("Blog", "2020-01-01"))
    _write(root, "blog/fresh-post/index.html", _article("Fresh Post", "2026-09-01"))
    _write(root, "blog/old-post.html", _article("Old Post", "2025-01-01"))
    _write(root, "blog/drafts/wip/index.html", _article("WIP", "2025-01-01"))
    _write(root, "about/index.html", _article("About", "2020-01-01"))
    (root / "blog" / "notes.txt").write_text("not html", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Walker / path helpers
# ---------------------------------------------------------------------------

class TestWalker:
    def test_finds_only_html_recursively(self, site: Path) -> None:
        found = [p.relative_to(site).as_posix() for p in iter_html_files(site)]
        assert "blog/old-post.html" in found
        assert "blog/drafts/wip/index.html" in found
        assert all(p.endswith(".html") for p in found)
        assert len(found) == 6

    def test_url_path_for_index_and_plain_files(self, site: Path) -> None:
        assert url_path_for(site, site / "index.html") == "/"
        assert url_path_for(site, site / "blog" / "index.html") == "/blog/"
        assert url_path_for(site, site / "blog" / "fresh-post" / "index.html") == "/blog/fresh-post/"
        assert url_path_for(site, site / "blog" / "old-post.html") == "/blog/old-post"


class TestPathFiltering:
    def test_section_index_excluded(self) -> None:
        assert is_content_path("/blog/", ("/blog/",)) is False

    def test_article_included(self) -> None:
        assert is_content_path("/blog/x", ("/blog/",)) is True

    def test_other_section_excluded(self) -> None:
        assert is_content_path("/about/", ("/blog/",)) is False

    def test_ignored_prefix(self) -> None:
        assert is_ignored_path("/blog/drafts/wip/", ("/blog/drafts/",)) is True
        assert is_ignored_path("/blog/x", ("/blog/drafts/",)) is False


# ---------------------------------------------------------------------------
# scan_site
# ---------------------------------------------------------------------------

class TestScanSite:
    def test_scans_only_content_pages(self, site: Path) -> None:
        outcome = scan_site(site, FreshnessConfig(), now=NOW)
        paths = sorted(r.url_path for r in outcome.results)
        assert paths == ["/blog/drafts/wip/", "/blog/fresh-post/", "/blog/old-post"]
        assert outcome.content_pages == 3

    def test_ignored_pages_are_skipped_and_untouched(self, site: Path) -> None:
        wip = site / "blog" / "drafts" / "wip" / "index.html"
        before = wip.read_text(encoding="utf-8")

        outcome = scan_site(site, FreshnessConfig(ignore_paths=("/blog/drafts/",)), now=NOW)

        assert "/blog/drafts/wip/" not in {r.url_path for r in outcome.results}
        assert wip.read_text(encoding="utf-8") == before

    def test_unmatched_pages_untouched(self, site: Path) -> None:
        home_before = (site / "index.html").read_text(encoding="utf-8")
        scan_site(site, FreshnessConfig(), now=NOW)
        assert (site / "index.html").read_text(encoding="utf-8") == home_before

    def test_injected_count_and_classification(self, site: Path) -> None:
        outcome = scan_site(site, FreshnessConfig(), now=NOW)
        by_path = {r.url_path: r for r in outcome.results}

        assert outcome.injected_count == 3
        assert by_path["/blog/fresh-post/"].is_fresh is True
        assert by_path["/blog/old-post"].is_fresh is False
        assert by_path["/blog/old-post"].title == "Old Post"
        assert by_path["/blog/old-post"].effective == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_second_run_is_a_no_op(self, site: Path) -> None:
        scan_site(site, FreshnessConfig(), now=NOW)
        snapshot = {p: p.read_text(encoding="utf-8") for p in iter_html_files(site)}

        outcome = scan_site(site, FreshnessConfig(), now=NOW)

        assert outcome.injected_count == 0
        assert {p: p.read_text(encoding="utf-8") for p in iter_html_files(site)} == snapshot

    def test_unchanged_file_not_rewritten(self, site: Path) -> None:
        page = site / "blog" / "old-post.html"
        os.utime(page, (1_000_000_000, 1_000_000_000))
        config = FreshnessConfig(inject_json_ld=False, inject_badge=False)

        scan_site(site, config, now=NOW)

        assert page.stat().st_mtime == 1_000_000_000

    def test_mtime_fallback_when_no_date(self, tmp_path: Path) -> None:
        page = _write(tmp_path, "blog/undated/index.html", _article("Undated"))
        mtime = datetime(2026, 3, 2, 8, 30, tzinfo=timezone.utc).timestamp()
        os.utime(page, (mtime, mtime))

        outcome = scan_site(tmp_path, FreshnessConfig(), now=NOW)

        (result,) = outcome.results
        assert result.published == datetime(2026, 3, 2, 8, 30, tzinfo=timezone.utc)
        assert result.updated is None
        assert result.effective == result.published
        assert '"datePublished":"2026-03-02T08:30:00.000Z"' in page.read_text(encoding="utf-8")

    def test_title_falls_back_to_url_path_and_is_truncated(self, tmp_path: Path) -> None:
        _write(tmp_path, "blog/no-heading.html", "<html><head></head><body>March 1, 2026</body></html>")
        _write(tmp_path, "blog/long.html", _article("x" * 80, "2026-09-01"))

        results = {r.url_path: r for r in scan_site(tmp_path, FreshnessConfig(), now=NOW).results}

        assert results["/blog/no-heading"].title == "/blog/no-heading"
        assert results["/blog/long"].title == "x" * 50

    def test_custom_walker(self, site: Path) -> None:
        only = [site / "blog" / "old-post.html"]
        outcome = scan_site(site, FreshnessConfig(), now=NOW, walker=lambda root: only)
        assert [r.url_path for r in outcome.results] == ["/blog/old-post"]

    def test_unreadable_page_aborts(self, tmp_path: Path) -> None:
        missing = tmp_path / "blog" / "gone.html"
        with pytest.raises(OSError):
            scan_site(tmp_path, FreshnessConfig(), now=NOW, walker=lambda root: [missing])


class TestEndToEnd:
    def test_stale_badge_after_title(self, tmp_path: Path) -> None:
        ten_months_ago = NOW - relativedelta(months=10)
        page = _write(
            tmp_path,
            "blog/my-article/index.html",
            _article("My Article", ten_months_ago.date().isoformat()),
        )

        outcome = scan_site(tmp_path, FreshnessConfig(freshness_months=6), now=NOW)

        html = page.read_text(encoding="utf-8")
        assert '</h1>\n      <div class="freshness-badge freshness-stale"' in html
        assert "Originally published December 19, 2025" in html
        (result,) = outcome.results
        assert result.is_fresh is False
