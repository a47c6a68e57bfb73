"""Load the campaign-performance dataset handed over by the data fetch."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from campaign_views.utils.types import RawDataset, RawRecord

logger = logging.getLogger(__name__)


def campaigns_from_payload(payload: object) -> list[RawRecord]:
    """Return the raw ``campaigns`` list of a fully resolved dataset payload."""
    if not isinstance(payload, Mapping):
        raise ValueError(f"Dataset payload must be a JSON object, got {type(payload).__name__}")

    campaigns = payload.get("campaigns")
    if not isinstance(campaigns, list):
        logger.warning("Dataset has no campaigns list; views will be empty")
        return []
    return campaigns


def load_dataset(path: str | Path) -> RawDataset:
    """Read a dataset JSON file. Missing or malformed files raise."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    campaigns = campaigns_from_payload(payload)
    logger.info("Loaded %d campaigns from %s", len(campaigns), path)
    return {**payload, "campaigns": campaigns}
