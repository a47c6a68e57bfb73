"""Demographic view — gender totals and age-group rollups.

Breakdown rows carry impressions, clicks and conversions but no spend or
revenue of their own, so those two are allocated from the campaign totals
by click share.
"""

import logging
import re
from collections.abc import Iterable

from campaign_views.models import (
    AgeCampaignRow,
    AgeSpendRevenue,
    Campaign,
    GenderTotals,
    SeriesPoint,
)
from campaign_views.utils.numeric import safe_percent, safe_ratio

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def age_sort_key(label: str) -> int:
    """Numeric lower bound of an age-group label ("18-24" -> 18, "65+" -> 65, else 0)."""
    match = _LEADING_DIGITS.match(label.split("-")[0])
    return int(match.group(1)) if match else 0


def _click_denominator(campaign: Campaign) -> float:
    """Total breakdown clicks, or the campaign's own clicks when those sum to zero."""
    breakdown_clicks = sum(row.clicks for row in campaign.demographics)
    return breakdown_clicks or campaign.clicks


def gender_totals(campaigns: Iterable[Campaign], gender: str) -> GenderTotals:
    impressions = clicks = conversions = spend = revenue = 0.0

    for campaign in campaigns:
        rows = [row for row in campaign.demographics if row.gender == gender]
        gender_clicks = sum(row.clicks for row in rows)

        impressions += sum(row.impressions for row in rows)
        clicks += gender_clicks
        conversions += sum(row.conversions for row in rows)

        share = safe_ratio(gender_clicks, _click_denominator(campaign))
        spend += campaign.spend * share
        revenue += campaign.revenue * share

    return GenderTotals(
        impressions=impressions,
        clicks=clicks,
        conversions=conversions,
        spend=spend,
        revenue=revenue,
    )


def age_spend_revenue(campaigns: Iterable[Campaign]) -> AgeSpendRevenue:
    """Allocate spend and revenue to age groups across all genders and campaigns."""
    spend_by_age: dict[str, float] = {}
    revenue_by_age: dict[str, float] = {}

    for campaign in campaigns:
        denominator = _click_denominator(campaign)
        for row in campaign.demographics:
            share = safe_ratio(row.clicks, denominator)
            spend_by_age[row.age_group] = spend_by_age.get(row.age_group, 0.0) + campaign.spend * share
            revenue_by_age[row.age_group] = revenue_by_age.get(row.age_group, 0.0) + campaign.revenue * share

    def _series(values: dict[str, float]) -> list[SeriesPoint]:
        points = [SeriesPoint(label=age, value=value) for age, value in values.items()]
        return sorted(points, key=lambda point: age_sort_key(point.label))

    return AgeSpendRevenue(
        spend_series=_series(spend_by_age),
        revenue_series=_series(revenue_by_age),
    )


def age_campaign_rows(campaigns: Iterable[Campaign], gender: str) -> list[AgeCampaignRow]:
    """One row per (campaign, age group) for a gender.

    Ordered by age group, then by revenue, highest first.
    """
    rows: list[AgeCampaignRow] = []

    for campaign in campaigns:
        denominator = _click_denominator(campaign)
        by_age: dict[str, dict[str, float]] = {}

        for row in campaign.demographics:
            if row.gender != gender:
                continue
            bucket = by_age.setdefault(
                row.age_group,
                {"impressions": 0.0, "clicks": 0.0, "conversions": 0.0, "spend": 0.0, "revenue": 0.0},
            )
            share = safe_ratio(row.clicks, denominator)
            bucket["impressions"] += row.impressions
            bucket["clicks"] += row.clicks
            bucket["conversions"] += row.conversions
            bucket["spend"] += campaign.spend * share
            bucket["revenue"] += campaign.revenue * share

        for age, agg in by_age.items():
            rows.append(
                AgeCampaignRow(
                    age=age,
                    campaign=campaign.name,
                    impressions=agg["impressions"],
                    clicks=agg["clicks"],
                    conversions=agg["conversions"],
                    ctr=safe_percent(agg["clicks"], agg["impressions"]),
                    conv_rate=safe_percent(agg["conversions"], agg["clicks"]),
                    spend=agg["spend"],
                    revenue=agg["revenue"],
                )
            )

    rows.sort(key=lambda r: (age_sort_key(r.age), -r.revenue))
    logger.debug("Built %d age rows for %s", len(rows), gender)
    return rows
