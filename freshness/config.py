"""Centralised settings for the content freshness tracker.

Two kinds of configuration live here:

* :class:`Settings` — values taken from the process environment (or a `.env`
  file in the project root, loaded automatically when this module is
  imported).  Resolved once per process.
* :class:`FreshnessConfig` — the immutable run configuration, built once per
  scan from :data:`DEFAULTS` merged with caller-supplied inputs and passed
  explicitly to every component.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from freshness.exceptions import ConfigError

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Site
    # ------------------------------------------------------------------
    site_base_url: str = field(
        default_factory=lambda: os.environ.get("URL", "")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("FRESHNESS_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton — import this everywhere:
#   from freshness.config import settings
settings = Settings()


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

AFTER_TITLE = "after-title"
BEFORE_CONTENT = "before-content"
BADGE_POSITIONS = (AFTER_TITLE, BEFORE_CONTENT)

DEFAULTS: dict[str, Any] = {
    "freshnessMonths": 6,
    "siteName": "Pro Trainer Prep",
    "siteUrl": "",
    "contentPaths": ["/blog/"],
    "ignorePaths": [],
    "injectJsonLd": True,
    "injectBadge": True,
    "badgePosition": AFTER_TITLE,
    "failOnStale": False,
}


def _require_bool(inputs: Mapping[str, Any], key: str) -> bool:
    value = inputs[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def _require_str(inputs: Mapping[str, Any], key: str) -> str:
    value = inputs[key]
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {value!r}")
    return value


def _require_paths(inputs: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = inputs[key]
    if not isinstance(value, (list, tuple)) or not all(isinstance(p, str) for p in value):
        raise ConfigError(f"{key} must be a list of path prefixes, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class FreshnessConfig:
    freshness_months: int = 6
    site_name: str = "Pro Trainer Prep"
    site_url: str = ""
    content_paths: tuple[str, ...] = ("/blog/",)
    ignore_paths: tuple[str, ...] = ()
    inject_json_ld: bool = True
    inject_badge: bool = True
    badge_position: str = AFTER_TITLE
    fail_on_stale: bool = False

    @classmethod
    def from_inputs(
        cls,
        inputs: Mapping[str, Any] | None = None,
        *,
        env_site_url: str | None = None,
    ) -> FreshnessConfig:
        """Merge camelCase *inputs* over :data:`DEFAULTS` and validate the result.

        ``siteUrl`` falls back to *env_site_url* when empty; either way a
        trailing slash is stripped so URL paths can be appended directly.

        Raises:
            ConfigError: On unknown keys or values of the wrong type/range.
        """
        inputs = dict(inputs or {})
        unknown = sorted(set(inputs) - set(DEFAULTS))
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        merged = {**DEFAULTS, **inputs}

        months = merged["freshnessMonths"]
        if isinstance(months, bool) or not isinstance(months, int) or months <= 0:
            raise ConfigError(f"freshnessMonths must be a positive integer, got {months!r}")

        position = merged["badgePosition"]
        if position not in BADGE_POSITIONS:
            raise ConfigError(
                f"badgePosition must be one of {', '.join(BADGE_POSITIONS)}, got {position!r}"
            )

        site_url = _require_str(merged, "siteUrl") or env_site_url or ""

        return cls(
            freshness_months=months,
            site_name=_require_str(merged, "siteName"),
            site_url=site_url.rstrip("/"),
            content_paths=_require_paths(merged, "contentPaths"),
            ignore_paths=_require_paths(merged, "ignorePaths"),
            inject_json_ld=_require_bool(merged, "injectJsonLd"),
            inject_badge=_require_bool(merged, "injectBadge"),
            badge_position=position,
            fail_on_stale=_require_bool(merged, "failOnStale"),
        )


def load_inputs(path: str | Path) -> dict[str, Any]:
    """Read a JSON object of configuration inputs from *path*.

    Raises:
        ConfigError: If the file is not valid JSON or not a JSON object.
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object of inputs")
    return data
