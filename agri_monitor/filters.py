"""
Filter resolver: pick the cheapest index path for a region/year/commodity
filter.

Every path touches only an already-narrowed bucket; the full collection is
returned as-is only when no filter field is set.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .indexes import Indexes
from .records import CommodityRecord

logger = logging.getLogger(__name__)

_EMPTY: tuple[CommodityRecord, ...] = ()


@dataclass(frozen=True)
class FilterSpec:
    """Optional filter fields; None means 'not set'."""

    region: str | None = None
    year: int | None = None
    commodity: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "FilterSpec":
        """Build from a UI-style dict where '' / 'all' / None mean unset.

        Accepts 'commodity' or 'commodity_name'; year may be a string
        ("2024" or "2024.0"). A year that does not parse is kept as text,
        so the filter matches nothing instead of raising.
        """
        if not data:
            return cls()

        def clean(val: Any) -> Any:
            if val is None:
                return None
            if isinstance(val, str) and val.strip().lower() in ("", "all"):
                return None
            return val

        year = clean(data.get("year"))
        if year is not None:
            try:
                number = float(year)
            except (TypeError, ValueError):
                number = None
            if number is not None and number.is_integer():
                year = int(number)
            else:
                # Year keys are ints, so a text key matches no bucket
                logger.warning("Unrecognised year filter %r matches no records", year)
                year = str(year)

        return cls(
            region=clean(data.get("region")),
            year=year,
            commodity=clean(data.get("commodity", data.get("commodity_name"))),
        )

    @property
    def is_empty(self) -> bool:
        return self.region is None and self.year is None and self.commodity is None


def resolve_filter(
    indexes: Indexes,
    full_collection: Sequence[CommodityRecord],
    spec: FilterSpec,
) -> Sequence[CommodityRecord]:
    """Return the records matching ``spec``.

    Dispatch
    --------
    - nothing set               -> full_collection
    - one field                 -> single-dimension index
    - region + year             -> (region, year) index
    - commodity + year          -> (commodity, year) index
    - region + commodity        -> region index, then filter by commodity
    - region + year + commodity -> (region, year) index, then filter by commodity

    Absent keys yield an empty tuple, never an error.
    """
    region, year, commodity = spec.region, spec.year, spec.commodity
    has_region = region is not None
    has_year = year is not None
    has_commodity = commodity is not None

    if not (has_region or has_year or has_commodity):
        return full_collection

    if has_region and not has_year and not has_commodity:
        return indexes.by_region.get(region, _EMPTY)
    if has_year and not has_region and not has_commodity:
        return indexes.by_year.get(year, _EMPTY)
    if has_commodity and not has_region and not has_year:
        return indexes.by_commodity.get(commodity, _EMPTY)

    if has_region and has_year and not has_commodity:
        return indexes.by_region_year.get((region, year), _EMPTY)
    if has_commodity and has_year and not has_region:
        return indexes.by_commodity_year.get((commodity, year), _EMPTY)

    # Region + commodity has no composite index; the region bucket is small
    if has_region and has_commodity and not has_year:
        candidates = indexes.by_region.get(region, _EMPTY)
    else:
        candidates = indexes.by_region_year.get((region, year), _EMPTY)
    return tuple(r for r in candidates if r.commodity_name == commodity)
