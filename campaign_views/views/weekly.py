"""Weekly view — campaign time series bucketed by ISO week."""

import logging
import math
from collections.abc import Iterable

from campaign_views.isoweek import iso_week_key
from campaign_views.models import Campaign, SeriesPoint, WeeklyRow, WeeklyTotals
from campaign_views.utils.numeric import safe_percent

logger = logging.getLogger(__name__)

UNKNOWN_WEEK = "Unknown"

_METRICS = ("impressions", "clicks", "conversions", "spend", "revenue")


def aggregate_weekly(campaigns: Iterable[Campaign]) -> list[WeeklyRow]:
    """Sum every campaign's time series per ISO week.

    Points without a week label are keyed by the ISO week of their date, and
    points with neither land in the ``"Unknown"`` bucket. Rows come back in
    week-key order; ISO keys are fixed width so string order is calendar order.
    """
    buckets: dict[str, dict[str, float]] = {}
    labels: dict[str, str] = {}
    skipped = 0

    for campaign in campaigns:
        if not campaign.time_series:
            skipped += 1
            continue

        for point in campaign.time_series:
            week = point.week or iso_week_key(point.date) or UNKNOWN_WEEK
            labels.setdefault(week, week)
            bucket = buckets.setdefault(week, dict.fromkeys(_METRICS, 0.0))
            for metric in _METRICS:
                bucket[metric] += getattr(point, metric)

    if skipped:
        logger.debug("Skipped %d campaigns without a time series", skipped)

    rows = [
        WeeklyRow(
            week=week,
            label=labels[week],
            impressions=bucket["impressions"],
            clicks=bucket["clicks"],
            conversions=bucket["conversions"],
            ctr=safe_percent(bucket["clicks"], bucket["impressions"]),
            conv_rate=safe_percent(bucket["conversions"], bucket["clicks"]),
            spend=bucket["spend"],
            revenue=bucket["revenue"],
        )
        for week, bucket in buckets.items()
    ]
    rows.sort(key=lambda row: row.week)

    logger.info("Aggregated %d weeks", len(rows))
    return rows


def weekly_totals(rows: Iterable[WeeklyRow]) -> WeeklyTotals:
    totals = dict.fromkeys(_METRICS, 0.0)
    for row in rows:
        for metric in _METRICS:
            totals[metric] += getattr(row, metric)
    return WeeklyTotals(**totals)


def weekly_series(rows: Iterable[WeeklyRow], metric: str) -> list[SeriesPoint]:
    """Chart series of weekly spend or revenue, rounded half up."""
    match metric:
        case "spend" | "revenue":
            return [
                SeriesPoint(label=row.label, value=math.floor(getattr(row, metric) + 0.5))
                for row in rows
            ]
        case other:
            raise ValueError(f"Unsupported weekly series metric: {other}")
