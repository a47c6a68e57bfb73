import math

import pytest

from campaign_views.geo import COUNTRY_CENTROIDS, JITTER_RADIUS, GeoLookup
from campaign_views.transform import normalize_campaigns
from campaign_views.utils.types import RegionGroup
from campaign_views.views.regional import aggregate_regions


def test_single_city_resolves_exactly():
    campaigns = normalize_campaigns([
        {"regional_performance": [{"region": "Dubai", "country": "UAE", "spend": 100, "revenue": 50}]},
    ])

    summary = aggregate_regions(campaigns)

    assert len(summary.spend_points) == 1
    assert len(summary.revenue_points) == 1
    spend_point = summary.spend_points[0]
    assert (spend_point.lng, spend_point.lat) == (55.27, 25.2)
    assert spend_point.group == RegionGroup.MENA
    assert spend_point.value == 100
    assert summary.revenue_points[0].value == 50
    assert summary.unresolved == ()


def test_aggregate_regions(campaigns):
    summary = aggregate_regions(campaigns)

    assert [p.city for p in summary.spend_points] == ["Dubai", "Al Ain", "Paris"]
    assert [p.city for p in summary.revenue_points] == ["Dubai", "Paris"]
    assert summary.total_spend == 440
    assert summary.total_revenue == 950
    assert summary.global_max == 900
    assert summary.unresolved == ("Al Ain (United Arab Emirates)",)

    al_ain = summary.spend_points[1]
    lng, lat = COUNTRY_CENTROIDS["United Arab Emirates"]
    assert math.hypot(al_ain.lng - lng, al_ain.lat - lat) == pytest.approx(JITTER_RADIUS)
    assert al_ain.group == RegionGroup.MENA
    assert summary.spend_points[2].group == RegionGroup.EUROPE


def test_same_city_is_summed_across_campaigns():
    campaigns = normalize_campaigns([
        {"regional_performance": [{"region": "Paris", "country": "France", "spend": 10, "revenue": "5"}]},
        {"regional_performance": [{"region": " Paris ", "country": "France", "spend": 15, "revenue": None}]},
    ])

    summary = aggregate_regions(campaigns)

    assert [(p.city, p.value) for p in summary.spend_points] == [("Paris", 25)]
    assert [(p.city, p.value) for p in summary.revenue_points] == [("Paris", 5)]


def test_unresolvable_points_are_dropped():
    campaigns = normalize_campaigns([
        {"regional_performance": [
            {"region": "Atlantis", "country": "Atlantis", "spend": 10, "revenue": 10},
            {"region": "Nowhere", "spend": 10, "revenue": 10},
            {"region": "", "country": "", "spend": 99, "revenue": 99},
        ]},
    ])

    summary = aggregate_regions(campaigns)

    assert summary.spend_points == []
    assert summary.revenue_points == []
    assert summary.total_spend == 0
    assert summary.global_max == 1
    assert summary.unresolved == ("Atlantis (Atlantis)",)


def test_country_only_entry_uses_country_for_jitter():
    campaigns = normalize_campaigns([
        {"regional_performance": [{"region": "", "country": "Japan", "spend": 5}]},
    ])

    (point,) = aggregate_regions(campaigns).spend_points

    assert point.city == ""
    assert point.country == "Japan"
    assert point.group == RegionGroup.ASIA


def test_injected_geo_lookup():
    geo = GeoLookup(city_coords={"Springfield": (-89.65, 39.78)}, country_centroids={})
    campaigns = normalize_campaigns([
        {"regional_performance": [
            {"region": "Springfield", "spend": 12, "revenue": 0},
            {"region": "Dubai", "country": "UAE", "spend": 12},
        ]},
    ])

    summary = aggregate_regions(campaigns, geo=geo)

    (point,) = summary.spend_points
    assert (point.lng, point.lat) == (-89.65, 39.78)
    assert point.country is None
    assert point.group == RegionGroup.OTHER
    assert summary.global_max == 12


def test_no_campaigns():
    summary = aggregate_regions([])

    assert summary.spend_points == []
    assert summary.global_max == 1
