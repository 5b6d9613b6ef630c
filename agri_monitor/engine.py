"""
Engine boundary: ingest, query, aggregate.

ingest() builds an index snapshot for a record collection, query() applies
a filter through those indexes, aggregate() derives the four dashboard
aggregates. CommodityMonitor ties these to a RecordStore, rebuilding the
snapshot only after the store has changed.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence

from .analytics import (
    compute_commodity_trends,
    compute_overall_stats,
    compute_yoy_series,
    rank_regions,
)
from .filters import FilterSpec, resolve_filter
from .indexes import Indexes, build_indexes
from .records import CommodityRecord, RecordStore

logger = logging.getLogger(__name__)


def ingest(records: Iterable[CommodityRecord]) -> Indexes:
    """Build the index snapshot for a record collection."""
    return build_indexes(records)


def query(
    indexes: Indexes,
    filter_spec: FilterSpec | Mapping[str, Any] | None = None,
) -> Sequence[CommodityRecord]:
    """Return the records of the indexed collection matching the filter."""
    if not isinstance(filter_spec, FilterSpec):
        filter_spec = FilterSpec.from_mapping(filter_spec)
    return resolve_filter(indexes, indexes.records, filter_spec)


def aggregate(subset: Sequence[CommodityRecord], indexes: Indexes) -> dict:
    """Derive all dashboard aggregates.

    Returns
    -------
    Dict with keys:
        stats            - compute_overall_stats(subset)
        yoy              - compute_yoy_series(subset)
        region_ranking   - rank_regions(indexes)
        commodity_trends - compute_commodity_trends(indexes)
    """
    return {
        "stats": compute_overall_stats(subset),
        "yoy": compute_yoy_series(subset),
        "region_ranking": rank_regions(indexes),
        "commodity_trends": compute_commodity_trends(indexes),
    }


class CommodityMonitor:
    """Read side of the dashboard over a RecordStore.

    The index snapshot is rebuilt lazily on the first read after a store
    mutation and swapped in by reference; callers holding an older snapshot
    keep a consistent view.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self._indexes: Indexes | None = None
        self._indexed_version: int | None = None

    @property
    def indexes(self) -> Indexes:
        if self._indexes is None or self._indexed_version != self.store.version:
            version = self.store.version
            snapshot = ingest(self.store.list_all())
            self._indexes, self._indexed_version = snapshot, version
            logger.debug("Index snapshot refreshed for store version %d", version)
        return self._indexes

    def query(
        self,
        filter_spec: FilterSpec | Mapping[str, Any] | None = None,
    ) -> Sequence[CommodityRecord]:
        return query(self.indexes, filter_spec)

    def aggregate(
        self,
        filter_spec: FilterSpec | Mapping[str, Any] | None = None,
    ) -> dict:
        """Filter, then aggregate against the same snapshot."""
        indexes = self.indexes
        return aggregate(query(indexes, filter_spec), indexes)

    def filter_options(self) -> dict[str, list]:
        """Values for UI dropdowns; years newest first."""
        indexes = self.indexes
        return {
            "years": list(reversed(indexes.years)),
            "regions": list(indexes.regions),
            "commodities": list(indexes.commodities),
        }

    def lookup_by_region(self, region: str) -> Sequence[CommodityRecord]:
        return self.indexes.by_region.get(region, ())

    def lookup_by_year(self, year: int) -> Sequence[CommodityRecord]:
        return self.indexes.by_year.get(year, ())

    def lookup_by_commodity(self, commodity: str) -> Sequence[CommodityRecord]:
        return self.indexes.by_commodity.get(commodity, ())
