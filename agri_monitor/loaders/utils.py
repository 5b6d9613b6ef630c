"""
Shared utilities for data ingestion: header detection, column renaming,
numeric coercion, status normalisation.
"""

import logging
import math
import re
from typing import Any

from ..config import COLUMN_ALIASES, STATUS_ACTIVE, STATUS_ALIASES
from ..records import CommodityRecord

logger = logging.getLogger(__name__)


def to_snake_case(name: str) -> str:
    """Convert a column name to snake_case.

    Handles spaces, parentheses, slashes, and percent signs.
    """
    s = str(name).strip()
    # Replace common symbols
    s = s.replace("%", "pct").replace("/", "_per_").replace("(", "").replace(")", "")
    s = s.replace("-", "_").replace(".", "_")
    # Collapse whitespace and special chars to underscores
    s = re.sub(r"[^a-zA-Z0-9]+", "_", s)
    # CamelCase to snake_case
    s = re.sub(r"([a-z])([A-Z])", r"\1_\2", s)
    s = s.lower().strip("_")
    # Collapse multiple underscores
    s = re.sub(r"_+", "_", s)
    return s


def canonical_column(name: Any) -> str | None:
    """Map a raw header to a record field name, or None if unrecognised."""
    if name is None:
        return None
    return COLUMN_ALIASES.get(to_snake_case(name))


def find_header_row(
    sheet,
    signature: set[str],
    max_rows: int = 20,
) -> int | None:
    """Scan an openpyxl sheet for the row containing signature fields.

    Returns the 1-based row index where at least two cells map to field
    names in `signature`, or None if not found within `max_rows`.
    """
    for row_idx in range(1, max_rows + 1):
        matches = 0
        for cell in sheet[row_idx]:
            if canonical_column(cell.value) in signature:
                matches += 1
        if matches >= 2:
            return row_idx
    return None


def safe_float(val: Any) -> float | None:
    """Coerce a value to float, returning None for non-numeric values."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        # Skip formula strings and text labels
        val = val.strip()
        if val.startswith("=") or not val:
            return None
        # Thousands separators, e.g. "5,500"
        val = val.replace(",", "")
        try:
            result = float(val)
        except ValueError:
            return None
        return None if math.isnan(result) else result
    try:
        result = float(val)
    except (ValueError, TypeError):
        return None
    return None if math.isnan(result) else result


def normalise_status(val: Any) -> str | None:
    """Map a raw status label (e.g. 'aktif', 'Tidak Aktif') to a canonical status."""
    if val is None:
        return None
    key = str(val).strip().lower()
    status = STATUS_ALIASES.get(key)
    if status is None:
        logger.warning("Unrecognised status value: %s", val)
    return status


def build_record(row: dict[str, Any], fallback_id: str) -> CommodityRecord | None:
    """Coerce a row of canonical fields into a CommodityRecord.

    Rows missing a commodity, region or year, or with non-numeric
    productivity/land area, are skipped (None) with a warning. Catalog
    membership is not checked here; see validation.validate_record_data.
    """
    commodity = row.get("commodity_name")
    region = row.get("region")
    year = safe_float(row.get("year"))
    productivity = safe_float(row.get("productivity"))
    land_area = safe_float(row.get("land_area"))

    if not commodity or not region or year is None:
        logger.warning("Skipping row %s: missing commodity, region or year", fallback_id)
        return None
    if productivity is None or land_area is None:
        logger.warning("Skipping row %s: non-numeric productivity or land area", fallback_id)
        return None

    raw_id = row.get("id")
    record_id = fallback_id
    if raw_id is not None and str(raw_id).strip() and str(raw_id).lower() != "nan":
        record_id = str(raw_id).strip()
        # Excel hands back numeric ids as floats
        if record_id.endswith(".0") and record_id[:-2].isdigit():
            record_id = record_id[:-2]

    return CommodityRecord(
        id=record_id,
        commodity_name=str(commodity).strip(),
        productivity=productivity,
        year=int(year),
        region=str(region).strip(),
        land_area=land_area,
        status=normalise_status(row.get("status")) or STATUS_ACTIVE,
    )
