"""
Loader for the commodity productivity CSV export.

The agency export has one row per (commodity, region, year) with Indonesian
headers: id, komoditi, produktivitas, tahun, wilayah, luas_lahan, status.
English headers are accepted too; see config.COLUMN_ALIASES.
"""

import logging

import pandas as pd

from ..records import CommodityRecord
from .utils import build_record, canonical_column

logger = logging.getLogger(__name__)

_REQUIRED = {"commodity_name", "productivity", "year", "region", "land_area"}


def load_records_csv(path: str) -> list[CommodityRecord]:
    """Load commodity records from a CSV export.

    Assumptions
    -----------
    - First row is the header.
    - Numbers may carry thousands separators ("5,500").
    - Status is 'aktif' / 'tidak_aktif' (or English); blank means active.
    - Rows with an empty id get a positional id ("row-<n>").

    Returns
    -------
    List of CommodityRecord in file order. Unparseable rows are skipped.
    """
    try:
        df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    except Exception:
        logger.exception("Failed to read records CSV: %s", path)
        raise

    return records_from_frame(df, source=path)


def records_from_frame(df: pd.DataFrame, source: str = "<frame>") -> list[CommodityRecord]:
    """Convert a raw DataFrame (any supported headers) into records."""
    rename = {}
    for col in df.columns:
        field = canonical_column(col)
        if field is not None and field not in rename.values():
            rename[col] = field

    missing = _REQUIRED - set(rename.values())
    if missing:
        raise ValueError(
            f"{source}: missing required column(s): {', '.join(sorted(missing))}"
        )

    df = df[list(rename)].rename(columns=rename)
    df = df.astype(object).where(df.notna(), None)

    records = []
    for pos, row in enumerate(df.to_dict(orient="records"), start=1):
        record = build_record(row, fallback_id=f"row-{pos}")
        if record is not None:
            records.append(record)

    skipped = len(df) - len(records)
    if skipped:
        logger.warning("Skipped %d unparseable rows from %s", skipped, source)
    logger.info("Loaded %d records from %s", len(records), source)
    return records
