"""Data ingestion loaders for commodity productivity source files."""

from .csv_records import load_records_csv, records_from_frame
from .workbook import load_records_workbook

__all__ = [
    "load_records_csv",
    "records_from_frame",
    "load_records_workbook",
]
