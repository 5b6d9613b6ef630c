"""
Simulated data generator for the commodity monitor.

Generates a plausible 2013-2024 productivity history for every catalog
region based on typical West Java yields and land areas.
All values are synthetic; no real agency data is used.
"""

import numpy as np

from .config import (
    BASE_LAND_AREA,
    BASE_PRODUCTIVITY,
    COMMODITIES,
    HISTORY_YEAR_RANGE,
    REGIONS,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
)
from .kpis import round_int
from .records import CommodityRecord

# Yield drift per year since the first year (2% a year)
_YEARLY_GROWTH = 0.02
# Share of records flagged inactive
_INACTIVE_SHARE = 0.1


def generate_records(
    seed: int = 42,
    years: tuple[int, int] = HISTORY_YEAR_RANGE,
    min_commodities: int = 4,
    max_commodities: int = 6,
) -> list[CommodityRecord]:
    """Generate simulated commodity records.

    For each year and region, the first 4-6 catalog commodities are
    recorded (the leading staples every regency grows). Productivity
    follows the commodity's base yield with a small upward drift and
    +/-15% noise; land area is a tenth of the regency's cultivated land
    with the same noise band.

    The same seed always produces the same records, ids included.
    """
    rng = np.random.default_rng(seed)
    first_year, last_year = years

    records = []
    next_id = 1
    for year in range(first_year, last_year + 1):
        year_factor = 1 + (year - first_year) * _YEARLY_GROWTH

        for region in REGIONS:
            n_commodities = int(rng.integers(min_commodities, max_commodities + 1))

            for commodity in COMMODITIES[:n_commodities]:
                variation = rng.uniform(0.85, 1.15)
                productivity = round_int(
                    BASE_PRODUCTIVITY.get(commodity, 5000) * year_factor * variation
                )
                land_area = round_int(
                    BASE_LAND_AREA.get(region, 50000) / 10 * rng.uniform(0.8, 1.2)
                )
                status = STATUS_INACTIVE if rng.random() < _INACTIVE_SHARE else STATUS_ACTIVE

                records.append(CommodityRecord(
                    id=str(next_id),
                    commodity_name=commodity,
                    productivity=float(productivity),
                    year=year,
                    region=region,
                    land_area=float(land_area),
                    status=status,
                ))
                next_id += 1

    return records
