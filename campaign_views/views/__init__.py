"""Dashboard views — demographic, device, regional and weekly rollups."""

from campaign_views.views.demographic import age_campaign_rows, age_spend_revenue, gender_totals
from campaign_views.views.device import device_totals, summarize_devices
from campaign_views.views.regional import aggregate_regions
from campaign_views.views.weekly import aggregate_weekly, weekly_series, weekly_totals
