"""Fresh vs. stale classification."""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from freshness.models import Freshness

_ONE_DAY = timedelta(days=1)


def stale_threshold(now: datetime, freshness_months: int) -> datetime:
    """Return *now* moved back by *freshness_months* calendar months.

    Month-end dates clamp to the last day of the target month
    (e.g. 31 August minus 6 months is 28/29 February).
    """
    return now - relativedelta(months=freshness_months)


def classify(effective: datetime, now: datetime, freshness_months: int) -> Freshness:
    """Classify a page whose effective date is *effective*.

    The threshold is inclusive: a page dated exactly on it is still fresh.
    ``age_in_days`` is floored, never rounded.
    """
    return Freshness(
        is_fresh=effective >= stale_threshold(now, freshness_months),
        age_in_days=(now - effective) // _ONE_DAY,
    )
