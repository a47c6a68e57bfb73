"""Assemble the dashboard views into pandas frames and validate them."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import asdict, fields
from pathlib import Path

import numpy as np
import pandas as pd

from campaign_views.geo import DEFAULT_GEO_LOOKUP, GeoLookup
from campaign_views.ingest import load_dataset
from campaign_views.models import (
    AgeCampaignRow,
    AgeCampaignSchema,
    Campaign,
    DeviceSchema,
    DeviceSummary,
    GeoPoint,
    GeoSchema,
    SeriesPoint,
    WeeklyRow,
    WeeklySchema,
)
from campaign_views.transform import normalize_campaigns
from campaign_views.utils.types import Gender, ValidationResult, ViewName
from campaign_views.utils.validators import check_frame
from campaign_views.views import (
    age_campaign_rows,
    age_spend_revenue,
    aggregate_regions,
    aggregate_weekly,
    gender_totals,
    summarize_devices,
)

logger = logging.getLogger(__name__)

SCHEMAS = {
    "weekly": WeeklySchema,
    "device": DeviceSchema,
    "age_campaign": AgeCampaignSchema,
    "geo": GeoSchema,
}

# report frame -> schema it is checked against
FRAME_SCHEMAS = {
    "age_campaign_male": "age_campaign",
    "age_campaign_female": "age_campaign",
    "devices": "device",
    "regional_spend": "geo",
    "regional_revenue": "geo",
    "weekly": "weekly",
}

VIEW_FRAMES: dict[ViewName, tuple[str, ...]] = {
    ViewName.DEMOGRAPHIC: (
        "gender_totals", "age_spend", "age_revenue",
        "age_campaign_male", "age_campaign_female",
    ),
    ViewName.DEVICE: ("devices",),
    ViewName.REGIONAL: ("regional_spend", "regional_revenue"),
    ViewName.WEEKLY: ("weekly",),
}


def to_frame(records: Iterable[object], record_type: type) -> pd.DataFrame:
    """Build a frame from dataclass records, keeping the columns when empty."""
    columns = [f.name for f in fields(record_type)]
    return pd.DataFrame([asdict(r) for r in records], columns=columns)


def _with_roas(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    spend = df["spend"].astype(float)
    revenue = df["revenue"].astype(float)
    df["roas"] = np.where(spend > 0, revenue / spend.where(spend > 0, 1.0), 0.0)
    return df


def _geo_frame(points: Sequence[GeoPoint]) -> pd.DataFrame:
    df = to_frame(points, GeoPoint)
    df["country"] = df["country"].fillna("")
    df["group"] = df["group"].astype(str)
    return df


def build_report(
    campaigns: Sequence[Campaign],
    geo: GeoLookup = DEFAULT_GEO_LOOKUP,
) -> dict[str, pd.DataFrame]:
    """Run every view over the campaigns and return one frame per table/chart."""
    ages = age_spend_revenue(campaigns)
    regions = aggregate_regions(campaigns, geo=geo)

    gender_frame = pd.DataFrame(
        [{"gender": gender.value, **asdict(gender_totals(campaigns, gender))} for gender in Gender]
    )

    frames = {
        "gender_totals": gender_frame,
        "age_spend": to_frame(ages.spend_series, SeriesPoint),
        "age_revenue": to_frame(ages.revenue_series, SeriesPoint),
        "age_campaign_male": to_frame(age_campaign_rows(campaigns, Gender.MALE), AgeCampaignRow),
        "age_campaign_female": to_frame(age_campaign_rows(campaigns, Gender.FEMALE), AgeCampaignRow),
        "devices": _with_roas(to_frame(summarize_devices(campaigns), DeviceSummary)),
        "regional_spend": _geo_frame(regions.spend_points),
        "regional_revenue": _geo_frame(regions.revenue_points),
        "weekly": _with_roas(to_frame(aggregate_weekly(campaigns), WeeklyRow)),
    }

    logger.info(
        "Built report for %d campaigns: %s",
        len(campaigns),
        {name: len(df) for name, df in frames.items()},
    )
    return frames


def validate(df: pd.DataFrame, schema_name: str) -> bool:
    """Validate a report frame against the appropriate pandera schema."""
    match schema_name:
        case "weekly" | "device" | "age_campaign" | "geo":
            SCHEMAS[schema_name].validate(df)
        case other:
            raise ValueError(f"No schema registered for: {other}")
    return True


def validate_report(frames: dict[str, pd.DataFrame]) -> dict[str, ValidationResult]:
    """Collect pandera results for every frame that has a schema."""
    return {
        name: check_frame(name, df, SCHEMAS[FRAME_SCHEMAS[name]])
        for name, df in frames.items()
        if name in FRAME_SCHEMAS
    }


def run(source: str | Path, geo: GeoLookup = DEFAULT_GEO_LOOKUP) -> dict[str, pd.DataFrame]:
    """Load a dataset file and build every dashboard view from it."""
    dataset = load_dataset(source)
    campaigns = normalize_campaigns(dataset["campaigns"])
    frames = build_report(campaigns, geo=geo)

    for name, schema_name in FRAME_SCHEMAS.items():
        validate(frames[name], schema_name)

    return frames
