"""Pandera checks for exported view frames, collected into result dicts."""

import logging

import pandas as pd
import pandera as pa
from pandera import DataFrameSchema

from campaign_views.utils.types import ValidationResult

logger = logging.getLogger(__name__)


def _describe(failure: dict) -> str:
    match failure:
        case {"column": None, "check": check}:
            return f"frame check '{check}' failed"
        case {"column": col, "check": check, "failure_case": val, "index": idx}:
            return f"{col}[{idx}] = {val!r} failed '{check}'"
        case _:
            return f"validation failure: {failure}"


def check_frame(name: str, df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Run every schema check on a report frame and summarise the failures."""
    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as e:
        errors = [_describe(failure) for failure in e.failure_cases.to_dict("records")]
        logger.warning("Frame %s failed %d schema checks", name, len(errors))
        return {"frame": name, "valid": False, "status": "error", "errors": errors}

    return {"frame": name, "valid": True, "status": "ok", "errors": []}
