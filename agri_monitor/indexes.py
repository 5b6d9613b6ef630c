"""
Index builder: lookup tables over a record collection.

build_indexes() makes a single pass over the records and returns an
immutable Indexes snapshot. Records are referenced, not copied. Composite
keys are (value, year) tuples so no separator can collide with a region or
commodity name.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .records import CommodityRecord

logger = logging.getLogger(__name__)

Bucket = tuple[CommodityRecord, ...]


@dataclass(frozen=True)
class Indexes:
    """Immutable index snapshot for one version of the record collection."""

    records: Bucket
    by_region: Mapping[str, Bucket]
    by_year: Mapping[int, Bucket]
    by_commodity: Mapping[str, Bucket]
    by_region_year: Mapping[tuple[str, int], Bucket]
    by_commodity_year: Mapping[tuple[str, int], Bucket]
    years: tuple[int, ...] = field(default=())
    regions: tuple[str, ...] = field(default=())
    commodities: tuple[str, ...] = field(default=())

    @property
    def latest_year(self) -> int | None:
        return self.years[-1] if self.years else None

    @property
    def previous_year(self) -> int | None:
        """Second-latest year present in the data."""
        return self.years[-2] if len(self.years) >= 2 else None


def _freeze(buckets: dict) -> Mapping:
    return MappingProxyType({key: tuple(bucket) for key, bucket in buckets.items()})


def build_indexes(records: Iterable[CommodityRecord]) -> Indexes:
    """Build all single and composite indexes in one O(n) pass.

    Pure function of ``records``: calling it twice on the same collection
    yields identical bucket contents (same records, same order).
    """
    records = tuple(records)

    by_region: dict[str, list] = {}
    by_year: dict[int, list] = {}
    by_commodity: dict[str, list] = {}
    by_region_year: dict[tuple[str, int], list] = {}
    by_commodity_year: dict[tuple[str, int], list] = {}

    for rec in records:
        by_region.setdefault(rec.region, []).append(rec)
        by_year.setdefault(rec.year, []).append(rec)
        by_commodity.setdefault(rec.commodity_name, []).append(rec)
        by_region_year.setdefault((rec.region, rec.year), []).append(rec)
        by_commodity_year.setdefault((rec.commodity_name, rec.year), []).append(rec)

    indexes = Indexes(
        records=records,
        by_region=_freeze(by_region),
        by_year=_freeze(by_year),
        by_commodity=_freeze(by_commodity),
        by_region_year=_freeze(by_region_year),
        by_commodity_year=_freeze(by_commodity_year),
        years=tuple(sorted(by_year)),
        regions=tuple(sorted(by_region, key=str)),
        commodities=tuple(sorted(by_commodity, key=str)),
    )

    logger.info(
        "Built indexes over %d records (%d years, %d regions, %d commodities)",
        len(records), len(indexes.years), len(indexes.regions), len(indexes.commodities),
    )
    return indexes
