"""Record types for the dashboard views and pandera schemas for their frames."""

from dataclasses import dataclass

import pandera as pa
from pandera import Column, Check

from campaign_views.utils.types import RegionGroup


# --- strict input records (built by campaign_views.transform) ---------------

@dataclass(frozen=True)
class DemographicRow:
    gender: str
    age_group: str
    impressions: float
    clicks: float
    conversions: float


@dataclass(frozen=True)
class DeviceEntry:
    device: str
    impressions: float
    clicks: float
    conversions: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class RegionEntry:
    city: str
    country: str
    spend: float
    revenue: float


@dataclass(frozen=True)
class TimePoint:
    week: str | None
    date: str | None
    impressions: float
    clicks: float
    conversions: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class Campaign:
    name: str
    spend: float
    revenue: float
    clicks: float
    demographics: tuple[DemographicRow, ...] = ()
    devices: tuple[DeviceEntry, ...] = ()
    regions: tuple[RegionEntry, ...] = ()
    time_series: tuple[TimePoint, ...] = ()


# --- derived records ---------------------------------------------------------

@dataclass(frozen=True)
class GenderTotals:
    impressions: float
    clicks: float
    conversions: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class SeriesPoint:
    label: str
    value: float


@dataclass(frozen=True)
class AgeSpendRevenue:
    spend_series: list[SeriesPoint]
    revenue_series: list[SeriesPoint]


@dataclass(frozen=True)
class AgeCampaignRow:
    age: str
    campaign: str
    impressions: float
    clicks: float
    conversions: float
    ctr: float
    conv_rate: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class DeviceSummary:
    device: str
    impressions: float
    clicks: float
    conversions: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class DeviceTotals:
    impressions: float
    clicks: float
    conversions: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class GeoPoint:
    city: str
    country: str | None
    lat: float
    lng: float
    value: float
    group: RegionGroup


@dataclass(frozen=True)
class RegionalSummary:
    spend_points: list[GeoPoint]
    revenue_points: list[GeoPoint]
    total_spend: float
    total_revenue: float
    global_max: float
    unresolved: tuple[str, ...]


@dataclass(frozen=True)
class WeeklyRow:
    week: str
    label: str
    impressions: float
    clicks: float
    conversions: float
    ctr: float
    conv_rate: float
    spend: float
    revenue: float


@dataclass(frozen=True)
class WeeklyTotals:
    impressions: float
    clicks: float
    conversions: float
    spend: float
    revenue: float


# --- pandera schemas for exported frames -------------------------------------
# Input numbers are only coerced to finite floats, so metrics can be negative
# (refunds) and clicks can exceed impressions; the schemas check types only.

_METRIC_COLUMNS = {
    name: Column(float, nullable=False)
    for name in ("impressions", "clicks", "conversions", "spend", "revenue")
}


WeeklySchema = pa.DataFrameSchema(
    columns={
        "week": Column(str, Check.str_length(min_value=1), nullable=False, unique=True),
        "label": Column(str, nullable=False),
        **_METRIC_COLUMNS,
        "ctr": Column(float, nullable=False),
        "conv_rate": Column(float, nullable=False),
        "roas": Column(float, nullable=False, required=False),
    },
    coerce=True,
    strict=False,
)


DeviceSchema = pa.DataFrameSchema(
    columns={
        "device": Column(str, nullable=False, unique=True),
        **_METRIC_COLUMNS,
        "roas": Column(float, nullable=False, required=False),
    },
    coerce=True,
    strict=False,
)


AgeCampaignSchema = pa.DataFrameSchema(
    columns={
        "age": Column(str, nullable=False),
        "campaign": Column(str, nullable=False),
        **_METRIC_COLUMNS,
        "ctr": Column(float, nullable=False),
        "conv_rate": Column(float, nullable=False),
    },
    coerce=True,
    strict=False,
)


GeoSchema = pa.DataFrameSchema(
    columns={
        "city": Column(str, nullable=False),
        "country": Column(str, nullable=True),
        "lat": Column(float, Check.in_range(-90, 90)),
        "lng": Column(float, Check.in_range(-180, 180)),
        "value": Column(float, Check.greater_than(0)),
        "group": Column(str, Check.isin([g.value for g in RegionGroup])),
    },
    coerce=True,
    strict=False,
)
