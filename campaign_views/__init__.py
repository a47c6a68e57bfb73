"""Campaign views — aggregation core for the marketing-analytics dashboard."""

from campaign_views.geo import DEFAULT_GEO_LOOKUP, GeoLookup
from campaign_views.isoweek import iso_week_key
from campaign_views.transform import extract_time_series, normalize_campaign, normalize_campaigns
from campaign_views.views import (
    age_campaign_rows,
    age_spend_revenue,
    aggregate_regions,
    aggregate_weekly,
    device_totals,
    gender_totals,
    summarize_devices,
    weekly_series,
    weekly_totals,
)

__version__ = "0.1.0"
