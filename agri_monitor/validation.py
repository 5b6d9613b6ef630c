"""
Field validation for record create/update requests.

The analytics core never validates; callers (forms, loaders) run this first
and reject the write when any errors come back.
"""

import math
from typing import Any, Mapping

from .config import COMMODITIES, REGIONS, STATUSES, WRITE_YEAR_RANGE
from .loaders.utils import safe_float


def validate_record_data(
    data: Mapping[str, Any],
    partial: bool = False,
) -> dict[str, str]:
    """Return a dict of field -> error message; empty if ``data`` is valid.

    Rules
    -----
    - commodity_name, region: required, must be in the catalog
    - productivity, land_area: required, numeric, > 0
    - year: required, integer within WRITE_YEAR_RANGE
    - status: one of STATUSES (defaults are the caller's concern)

    With partial=True only the fields present are checked (update requests).
    """
    errors: dict[str, str] = {}

    def wanted(field: str) -> bool:
        return not partial or field in data

    if wanted("commodity_name"):
        commodity = data.get("commodity_name")
        if not commodity:
            errors["commodity_name"] = "Commodity is required"
        elif commodity not in COMMODITIES:
            errors["commodity_name"] = f"Unknown commodity '{commodity}'"

    if wanted("region"):
        region = data.get("region")
        if not region:
            errors["region"] = "Region is required"
        elif region not in REGIONS:
            errors["region"] = f"Unknown region '{region}'"

    for field, label in (("productivity", "Productivity"), ("land_area", "Land area")):
        if not wanted(field):
            continue
        raw = data.get(field)
        if raw is None or raw == "":
            errors[field] = f"{label} is required"
            continue
        value = safe_float(raw)
        if value is None or not math.isfinite(value):
            errors[field] = f"{label} must be a number"
        elif value <= 0:
            errors[field] = f"{label} must be greater than 0"

    if wanted("year"):
        raw_year = data.get("year")
        low, high = WRITE_YEAR_RANGE
        year = safe_float(raw_year)
        if raw_year is None or raw_year == "":
            errors["year"] = "Year is required"
        elif year is None or not math.isfinite(year) or year != int(year):
            errors["year"] = "Year must be a whole number"
        elif not low <= year <= high:
            errors["year"] = f"Year must be between {low}-{high}"

    if wanted("status") and data.get("status") not in STATUSES:
        errors["status"] = f"Status must be one of: {', '.join(STATUSES)}"

    return errors
