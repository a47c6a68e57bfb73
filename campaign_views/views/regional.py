"""Regional view — spend and revenue bubbles by city."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from campaign_views.geo import DEFAULT_GEO_LOOKUP, GeoLookup
from campaign_views.models import Campaign, GeoPoint, RegionalSummary

logger = logging.getLogger(__name__)


@dataclass
class _CityTotals:
    city: str
    country: str
    spend: float = 0.0
    revenue: float = 0.0


def _to_point(totals: _CityTotals, value: float, geo: GeoLookup) -> GeoPoint | None:
    coordinate = geo.resolve(totals.city, totals.country)
    if coordinate is None:
        return None

    lng, lat = coordinate
    return GeoPoint(
        city=totals.city,
        country=totals.country or None,
        lat=lat,
        lng=lng,
        value=value,
        group=geo.region_group(totals.country),
    )


def aggregate_regions(
    campaigns: Iterable[Campaign],
    geo: GeoLookup = DEFAULT_GEO_LOOKUP,
) -> RegionalSummary:
    """Aggregate regional entries by (city, country) and place them on the map.

    A city missing from the exact lookup falls back to its country's centroid,
    offset by a jitter derived from the name; anything still unresolved is
    left off the map. Totals only count points that made it onto the map.
    """
    by_city: dict[tuple[str, str], _CityTotals] = {}
    unresolved: dict[str, None] = {}

    for campaign in campaigns:
        for entry in campaign.regions:
            if not entry.city and not entry.country:
                continue

            item = by_city.setdefault((entry.city, entry.country), _CityTotals(entry.city, entry.country))
            item.spend += entry.spend
            item.revenue += entry.revenue

            if entry.city not in geo.city_coords and entry.country:
                unresolved[f"{entry.city} ({entry.country})"] = None

    spend_points: list[GeoPoint] = []
    revenue_points: list[GeoPoint] = []

    for item in by_city.values():
        if item.spend > 0 and (point := _to_point(item, item.spend, geo)):
            spend_points.append(point)
        if item.revenue > 0 and (point := _to_point(item, item.revenue, geo)):
            revenue_points.append(point)

    if unresolved:
        logger.info("Cities without exact coordinates: %s", list(unresolved))

    global_max = max([1.0, *(p.value for p in spend_points), *(p.value for p in revenue_points)])

    return RegionalSummary(
        spend_points=spend_points,
        revenue_points=revenue_points,
        total_spend=sum(p.value for p in spend_points),
        total_revenue=sum(p.value for p in revenue_points),
        global_max=global_max,
        unresolved=tuple(unresolved),
    )
