"""Visible freshness badge markup."""

from __future__ import annotations

from datetime import datetime

# Literal class probed to detect an already-injected badge.
BADGE_MARKER = "freshness-badge"

_BASE_STYLE = (
    "display:inline-flex;align-items:center;gap:0.4rem;background:{bg};"
    "border:1px solid {accent};border-radius:6px;padding:0.35rem 0.75rem;"
    "font-size:0.82rem;color:#1c1c20;margin-bottom:1rem;font-weight:600;"
)


def format_long_date(value: datetime) -> str:
    """Format *value* as ``February 8, 2026``."""
    return f"{value:%B} {value.day}, {value.year}"


def _badge(kind: str, bg: str, accent: str, icon: str, text: str) -> str:
    style = _BASE_STYLE.format(bg=bg, accent=accent)
    return (
        f'<div class="{BADGE_MARKER} freshness-{kind}" style="{style}">\n'
        f'  <span style="color:{accent};">{icon}</span> {text}\n'
        "</div>"
    )


def fresh_badge_html(reviewed: datetime) -> str:
    return _badge("fresh", "#e6faf0", "#00C878", "✓", f"Last reviewed {format_long_date(reviewed)}")


def stale_badge_html(published: datetime) -> str:
    return _badge(
        "stale",
        "#fff8e1",
        "#f9a825",
        "⏱",
        f"Originally published {format_long_date(published)} — review pending",
    )
