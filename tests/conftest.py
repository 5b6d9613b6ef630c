"""Shared fixtures for the commodity monitor tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from agri_monitor.records import CommodityRecord, RecordStore


def make_record(record_id, commodity, productivity, year, region, land_area=100.0, status="active"):
    return CommodityRecord(
        id=str(record_id),
        commodity_name=commodity,
        productivity=float(productivity),
        year=year,
        region=region,
        land_area=float(land_area),
        status=status,
    )


@pytest.fixture
def sample_records():
    """Three regions, three commodities, 2022-2024."""
    return [
        make_record(1, "Padi", 5000, 2022, "Garut", 800),
        make_record(2, "Jagung", 6000, 2022, "Garut", 500),
        make_record(3, "Padi", 5200, 2022, "Bandung", 700),
        make_record(4, "Padi", 5300, 2023, "Garut", 820),
        make_record(5, "Jagung", 6100, 2023, "Bandung", 450),
        make_record(6, "Kedelai", 1400, 2023, "Bandung", 300),
        make_record(7, "Padi", 5600, 2024, "Garut", 830),
        make_record(8, "Jagung", 6500, 2024, "Garut", 520),
        make_record(9, "Padi", 5500, 2024, "Bandung", 710),
        make_record(10, "Kedelai", 1500, 2024, "Sukabumi", 900),
        make_record(11, "Jagung", 6300, 2024, "Bandung", 460),
    ]


@pytest.fixture
def store(sample_records):
    return RecordStore(sample_records)
