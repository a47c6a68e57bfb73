"""Shared utilities for the dashboard views."""

from campaign_views.utils.numeric import safe_percent, safe_ratio, to_number, total
from campaign_views.utils.types import Gender, RegionGroup, ViewName
