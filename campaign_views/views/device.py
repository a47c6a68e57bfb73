"""Device view — flat rollup of device-level metrics."""

import logging
from collections.abc import Iterable

from campaign_views.models import Campaign, DeviceSummary, DeviceTotals

logger = logging.getLogger(__name__)

_METRICS = ("impressions", "clicks", "conversions", "spend", "revenue")


def summarize_devices(campaigns: Iterable[Campaign]) -> list[DeviceSummary]:
    """Sum every campaign's device entries by device name, in first-seen order."""
    by_device: dict[str, dict[str, float]] = {}

    for campaign in campaigns:
        for entry in campaign.devices:
            bucket = by_device.setdefault(entry.device, dict.fromkeys(_METRICS, 0.0))
            for metric in _METRICS:
                bucket[metric] += getattr(entry, metric)

    summaries = [DeviceSummary(device=device, **metrics) for device, metrics in by_device.items()]
    logger.info("Summarized %d devices", len(summaries))
    return summaries


def device_totals(summaries: Iterable[DeviceSummary]) -> DeviceTotals:
    totals = dict.fromkeys(_METRICS, 0.0)
    for summary in summaries:
        for metric in _METRICS:
            totals[metric] += getattr(summary, metric)
    return DeviceTotals(**totals)
