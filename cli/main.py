"""Content freshness CLI — entry-point for post-build runs.

Usage:
    python cli/main.py --help

Commands:
    scan      → scan a built site, inject metadata/badges, log the report
    inspect   → show what would be extracted from a single HTML file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from freshness.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Any, List, Optional

import typer

from freshness import run
from freshness.config import BADGE_POSITIONS, FreshnessConfig, load_inputs, settings
from freshness.exceptions import ConfigError, StaleContentError
from freshness.extractor import extract_dates, extract_metadata
from freshness.markup.jsonld import iso_timestamp

app = typer.Typer(
    name="freshness",
    help="Content freshness tracker for statically built sites.",
    no_args_is_help=True,
)


class _EchoHandler(logging.Handler):
    """Route ``freshness`` log records through ``typer.echo``."""

    def emit(self, record: logging.LogRecord) -> None:
        typer.echo(self.format(record), err=record.levelno >= logging.ERROR)


def _configure_logging() -> None:
    package_logger = logging.getLogger("freshness")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    if not any(isinstance(h, _EchoHandler) for h in package_logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


@app.command("scan")
def scan(
    site_dir: Path = typer.Argument(..., exists=True, file_okay=False, help="Directory holding the built site."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="JSON file of inputs (camelCase keys)."),
    freshness_months: Optional[int] = typer.Option(None, "--freshness-months", help="Months before an article is stale."),
    site_name: Optional[str] = typer.Option(None, "--site-name", help="Publisher name for JSON-LD."),
    site_url: Optional[str] = typer.Option(None, "--site-url", help="Canonical site URL (defaults to $URL)."),
    content_paths: Optional[List[str]] = typer.Option(None, "--content-path", help="URL prefix to scan (repeatable)."),
    ignore_paths: Optional[List[str]] = typer.Option(None, "--ignore-path", help="URL prefix to skip (repeatable)."),
    json_ld: Optional[bool] = typer.Option(None, "--json-ld/--no-json-ld", help="Inject Article JSON-LD."),
    badge: Optional[bool] = typer.Option(None, "--badge/--no-badge", help="Inject the freshness badge."),
    badge_position: Optional[str] = typer.Option(
        None, "--badge-position", help=f"Badge position: {' | '.join(BADGE_POSITIONS)}."
    ),
    fail_on_stale: Optional[bool] = typer.Option(
        None, "--fail-on-stale/--no-fail-on-stale", help="Exit non-zero when stale articles exist."
    ),
) -> None:
    """Scan SITE_DIR, inject structured data and badges, and report stale articles."""
    _configure_logging()

    try:
        inputs: dict[str, Any] = load_inputs(config_file) if config_file else {}
        overrides = {
            "freshnessMonths": freshness_months,
            "siteName": site_name,
            "siteUrl": site_url,
            "contentPaths": content_paths or None,
            "ignorePaths": ignore_paths or None,
            "injectJsonLd": json_ld,
            "injectBadge": badge,
            "badgePosition": badge_position,
            "failOnStale": fail_on_stale,
        }
        inputs.update({k: v for k, v in overrides.items() if v is not None})
        config = FreshnessConfig.from_inputs(inputs, env_site_url=settings.site_base_url)
    except ConfigError as exc:
        typer.echo(f"[scan] Invalid configuration: {exc}")
        raise typer.Exit(2)

    try:
        run(site_dir, config)
    except StaleContentError as exc:
        typer.echo(str(exc))
        raise typer.Exit(1)


@app.command("inspect")
def inspect(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="HTML file to inspect."),
) -> None:
    """Print the dates and metadata extracted from FILE without modifying it."""
    html = file.read_text(encoding="utf-8")
    dates = extract_dates(html)
    metadata = extract_metadata(html)

    def _fmt(value) -> str:
        return iso_timestamp(value) if value else "(none)"

    typer.echo(f"[inspect] Title       : {metadata.title or '(none)'}")
    typer.echo(f"[inspect] Description : {metadata.description or '(none)'}")
    typer.echo(f"[inspect] Hero image  : {metadata.hero_image_url or '(none)'}")
    typer.echo(f"[inspect] Published   : {_fmt(dates.published)}")
    typer.echo(f"[inspect] Updated     : {_fmt(dates.updated)}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
