"""Normalize raw campaign JSON into strict campaign records.

All of the field-name guessing for the loosely shaped upstream payload lives
here. The views only ever receive :class:`~campaign_views.models.Campaign`
instances, whose numbers are finite floats and whose nested collections are
always present (possibly empty).
"""

import logging
from collections.abc import Iterable, Mapping

from campaign_views.isoweek import iso_week_key
from campaign_views.models import (
    Campaign,
    DemographicRow,
    DeviceEntry,
    RegionEntry,
    TimePoint,
)
from campaign_views.utils.numeric import to_number
from campaign_views.utils.types import RawRecord

logger = logging.getLogger(__name__)

TIME_SERIES_FIELD = "weekly_performance"

# tried in this order when the canonical field is absent
FALLBACK_TIME_SERIES_FIELDS = (
    "weekly_breakdown",
    "performance_over_time",
    "time_series",
    "timeseries",
)

UNKNOWN_LABEL = "Unknown"


def _coalesce(*values: object) -> object:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def _text(value: object) -> str:
    return "" if value is None else str(value).strip()


def _optional_text(value: object) -> str | None:
    return _text(value) or None


def _entries(value: object, field: str) -> list[RawRecord]:
    """Return the object entries of a nested list field; [] when absent."""
    match value:
        case None:
            return []
        case list() | tuple():
            entries = [entry for entry in value if isinstance(entry, Mapping)]
            if len(entries) != len(value):
                logger.debug("Skipped %d non-object entries in %s", len(value) - len(entries), field)
            return entries
        case other:
            logger.debug("Ignoring %s field of type %s", field, type(other).__name__)
            return []


def _performance(row: RawRecord) -> RawRecord:
    nested = row.get("performance")
    return nested if isinstance(nested, Mapping) else {}


def _canonical_point(row: RawRecord) -> TimePoint:
    return TimePoint(
        week=iso_week_key(row.get("week_start")) or _optional_text(row.get("week")),
        date=_optional_text(row.get("week_start")) or _optional_text(row.get("date")),
        impressions=to_number(row.get("impressions")),
        clicks=to_number(row.get("clicks")),
        conversions=to_number(row.get("conversions")),
        spend=to_number(row.get("spend")),
        revenue=to_number(row.get("revenue")),
    )


def _fallback_point(row: RawRecord) -> TimePoint:
    performance = _performance(row)
    return TimePoint(
        week=_optional_text(row.get("week")) or iso_week_key(row.get("date")),
        date=_optional_text(row.get("date")),
        impressions=to_number(_coalesce(row.get("impressions"), performance.get("impressions"))),
        clicks=to_number(_coalesce(row.get("clicks"), performance.get("clicks"))),
        conversions=to_number(_coalesce(row.get("conversions"), performance.get("conversions"))),
        spend=to_number(_coalesce(row.get("spend"), row.get("cost"))),
        revenue=to_number(_coalesce(row.get("revenue"), row.get("rev"))),
    )


def extract_time_series(raw: RawRecord) -> list[TimePoint]:
    """Pull a campaign's time series into a uniform list of points.

    ``weekly_performance`` wins whenever it is a list, even an empty one.
    Otherwise the first list among the fallback fields is used with looser
    field names (``week``/``date``, ``cost`` for spend, ``rev`` for revenue,
    counts nested under ``performance``). A campaign with none of these
    yields no points.
    """
    canonical = raw.get(TIME_SERIES_FIELD)
    if isinstance(canonical, list | tuple):
        return [_canonical_point(row) for row in _entries(canonical, TIME_SERIES_FIELD)]

    for field in FALLBACK_TIME_SERIES_FIELDS:
        candidate = raw.get(field)
        if isinstance(candidate, list | tuple):
            return [_fallback_point(row) for row in _entries(candidate, field)]

    return []


def _demographic_row(row: RawRecord) -> DemographicRow:
    performance = _performance(row)
    return DemographicRow(
        gender=_text(row.get("gender")),
        age_group=_text(row.get("age_group")) or UNKNOWN_LABEL,
        impressions=to_number(performance.get("impressions")),
        clicks=to_number(performance.get("clicks")),
        conversions=to_number(performance.get("conversions")),
    )


def _device_entry(row: RawRecord) -> DeviceEntry:
    return DeviceEntry(
        device=_text(row.get("device")) or UNKNOWN_LABEL,
        impressions=to_number(row.get("impressions")),
        clicks=to_number(row.get("clicks")),
        conversions=to_number(row.get("conversions")),
        spend=to_number(row.get("spend")),
        revenue=to_number(row.get("revenue")),
    )


def _region_entry(row: RawRecord) -> RegionEntry:
    return RegionEntry(
        city=_text(row.get("region")),
        country=_text(row.get("country")),
        spend=to_number(row.get("spend")),
        revenue=to_number(row.get("revenue")),
    )


def normalize_campaign(raw: RawRecord) -> Campaign:
    """Map one raw campaign object onto the strict :class:`Campaign` type."""
    return Campaign(
        name=_text(raw.get("name")),
        spend=to_number(raw.get("spend")),
        revenue=to_number(raw.get("revenue")),
        clicks=to_number(raw.get("clicks")),
        demographics=tuple(
            _demographic_row(row)
            for row in _entries(raw.get("demographic_breakdown"), "demographic_breakdown")
        ),
        devices=tuple(
            _device_entry(row)
            for row in _entries(raw.get("device_performance"), "device_performance")
        ),
        regions=tuple(
            _region_entry(row)
            for row in _entries(raw.get("regional_performance"), "regional_performance")
        ),
        time_series=tuple(extract_time_series(raw)),
    )


def normalize_campaigns(raw_campaigns: Iterable[object]) -> list[Campaign]:
    """Normalize every campaign object, skipping entries that are not objects."""
    campaigns = []
    skipped = 0

    for raw in raw_campaigns:
        if not isinstance(raw, Mapping):
            skipped += 1
            continue
        campaigns.append(normalize_campaign(raw))

    if skipped:
        logger.debug("Skipped %d non-object campaign entries", skipped)
    logger.info("Normalized %d campaigns", len(campaigns))
    return campaigns
