"""
Loader for commodity productivity workbooks.

Regency offices send the same table as the CSV export but inside an Excel
sheet, usually with a title block above the header row. The header row is
detected by scanning for recognised column labels.
"""

import logging

import openpyxl

from ..records import CommodityRecord
from .utils import build_record, canonical_column, find_header_row

logger = logging.getLogger(__name__)

_HEADER_SIGNATURE = {"commodity_name", "productivity", "year", "region", "land_area"}


def load_records_workbook(path: str, sheet_name: str | None = None) -> list[CommodityRecord]:
    """Load commodity records from an Excel workbook.

    Assumptions
    -----------
    - The header row sits within the first 20 rows and carries at least two
      recognised labels (e.g. 'Komoditi', 'Tahun').
    - Data runs contiguously below the header; fully blank rows are ignored.
    - If ``sheet_name`` is missing from the workbook the first sheet is used.

    Returns
    -------
    List of CommodityRecord in sheet order. Unparseable rows are skipped.
    """
    try:
        wb = openpyxl.load_workbook(path, data_only=True)
    except Exception:
        logger.exception("Failed to open records workbook: %s", path)
        raise

    try:
        if sheet_name is None or sheet_name not in wb.sheetnames:
            if sheet_name is not None:
                logger.warning("Sheet '%s' not found, using '%s'", sheet_name, wb.sheetnames[0])
            sheet_name = wb.sheetnames[0]
        ws = wb[sheet_name]

        header_row = find_header_row(ws, _HEADER_SIGNATURE)
        if header_row is None:
            logger.warning("No header row found in %s [%s]", path, sheet_name)
            return []

        header = [cell.value for cell in ws[header_row]]
        # Map: column index (0-based) -> field name
        col_map: dict[int, str] = {}
        for idx, label in enumerate(header):
            field = canonical_column(label)
            if field is not None and field not in col_map.values():
                col_map[idx] = field

        records = []
        skipped = 0
        for row_idx, values in enumerate(
            ws.iter_rows(min_row=header_row + 1, values_only=True),
            start=header_row + 1,
        ):
            if all(v is None or str(v).strip() == "" for v in values):
                continue
            row = {field: values[idx] for idx, field in col_map.items() if idx < len(values)}
            record = build_record(row, fallback_id=f"row-{row_idx}")
            if record is None:
                skipped += 1
                continue
            records.append(record)
    finally:
        wb.close()

    if skipped:
        logger.warning("Skipped %d unparseable rows from %s", skipped, path)
    logger.info("Loaded %d records from %s [%s]", len(records), path, sheet_name)
    return records
