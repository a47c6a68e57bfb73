import pytest

from campaign_views.transform import normalize_campaigns
from campaign_views.views.device import device_totals, summarize_devices


def test_summarize_devices_groups_by_name(campaigns):
    summaries = summarize_devices(campaigns)

    assert [s.device for s in summaries] == ["Mobile", "Desktop"]
    mobile = summaries[0]
    assert (mobile.impressions, mobile.clicks, mobile.conversions) == (3000, 230, 17)
    assert (mobile.spend, mobile.revenue) == (2100, 4500)


def test_device_revenue_is_conserved(raw_dataset, campaigns):
    flat_revenue = sum(
        entry.get("revenue", 0)
        for campaign in raw_dataset["campaigns"]
        for entry in campaign.get("device_performance", [])
    )

    assert sum(s.revenue for s in summarize_devices(campaigns)) == pytest.approx(flat_revenue)


def test_device_totals(campaigns):
    totals = device_totals(summarize_devices(campaigns))

    assert totals.impressions == 4000
    assert totals.clicks == 280
    assert totals.conversions == 25
    assert totals.spend == 2500
    assert totals.revenue == 6000


def test_devices_with_bad_numbers():
    campaigns = normalize_campaigns([
        {"device_performance": [{"device": "Tablet", "clicks": "abc", "spend": None, "revenue": "12"}]},
        {"device_performance": None},
    ])

    (tablet,) = summarize_devices(campaigns)

    assert (tablet.clicks, tablet.spend, tablet.revenue) == (0, 0, 12)


def test_no_devices():
    assert summarize_devices([]) == []
    assert device_totals([]).revenue == 0
