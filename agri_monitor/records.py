"""
Record store: the authoritative in-memory collection of commodity records.

The store owns an immutable tuple of records and replaces it on every
mutation, bumping ``version`` so downstream index snapshots know when to
rebuild. No concurrency control: a single writer is assumed.
"""

import dataclasses
import itertools
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

# Fields a caller supplies when creating a record (id is assigned)
DATA_FIELDS = (
    "commodity_name",
    "productivity",
    "year",
    "region",
    "land_area",
    "status",
)


def _coerce_fields(values: dict[str, Any]) -> dict[str, Any]:
    """Convert form-style numeric values ("6100", "2025") to numbers.

    year becomes an int, productivity and land_area floats. Values that
    do not parse are kept as given and logged.
    """
    for name in ("productivity", "land_area", "year"):
        if name not in values:
            continue
        raw = values[name]
        if isinstance(raw, bool):
            logger.warning("Non-numeric %s kept as given: %r", name, raw)
            continue
        try:
            number = float(raw.replace(",", "") if isinstance(raw, str) else raw)
        except (TypeError, ValueError):
            logger.warning("Non-numeric %s kept as given: %r", name, raw)
            continue
        if name != "year":
            values[name] = number
        elif number.is_integer():
            values[name] = int(number)
        else:
            logger.warning("Fractional year kept as given: %r", raw)
    return values


@dataclass(frozen=True)
class CommodityRecord:
    """One yearly productivity observation for a crop in a region.

    productivity is in kg/ha, land_area in ha.
    """

    id: str
    commodity_name: str
    productivity: float
    year: int
    region: str
    land_area: float
    status: str

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


class RecordStore:
    """Owns the record collection and its create/update/delete interface."""

    def __init__(self, records: Iterable[CommodityRecord] = ()) -> None:
        self._records: tuple[CommodityRecord, ...] = ()
        self._version = 0
        self._id_counter = itertools.count(1)
        self.replace_all(records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def version(self) -> int:
        """Incremented whenever the collection reference changes."""
        return self._version

    def list_all(self) -> tuple[CommodityRecord, ...]:
        return self._records

    def get(self, record_id: str) -> CommodityRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def replace_all(self, records: Iterable[CommodityRecord]) -> None:
        """Swap in a whole new collection (bulk load or reset)."""
        records = tuple(records)
        ids = {r.id for r in records}
        if len(ids) != len(records):
            raise ValueError("Record ids must be unique")

        self._records = records
        self._bump()
        # Keep generated ids clear of any numeric ids already loaded
        numeric_ids = [int(i) for i in ids if str(i).isdigit()]
        self._id_counter = itertools.count(max(numeric_ids, default=0) + 1)
        logger.info("Loaded %d records into store", len(records))

    def create(self, data: Mapping[str, Any]) -> CommodityRecord:
        """Assign a new id, append the record and return it.

        Raises KeyError if any of DATA_FIELDS is missing from ``data``.
        """
        missing = [f for f in DATA_FIELDS if f not in data]
        if missing:
            raise KeyError(f"Missing record field(s): {', '.join(missing)}")
        self._warn_unknown(data)

        record = CommodityRecord(
            id=self._next_id(),
            **_coerce_fields({f: data[f] for f in DATA_FIELDS}),
        )
        self._records = self._records + (record,)
        self._bump()
        logger.debug("Created record %s", record.id)
        return record

    def update(
        self,
        record_id: str,
        partial_data: Mapping[str, Any],
    ) -> CommodityRecord | None:
        """Merge ``partial_data`` into the record; None if the id is unknown.

        The id itself is never overwritten.
        """
        self._warn_unknown(partial_data)
        changes = _coerce_fields(
            {f: partial_data[f] for f in DATA_FIELDS if f in partial_data}
        )

        for idx, record in enumerate(self._records):
            if record.id != record_id:
                continue
            updated = dataclasses.replace(record, **changes)
            self._records = self._records[:idx] + (updated,) + self._records[idx + 1:]
            self._bump()
            logger.debug("Updated record %s (%s)", record_id, ", ".join(changes))
            return updated

        logger.info("Update skipped: record %s not found", record_id)
        return None

    def delete(self, record_id: str) -> bool:
        """Remove a record; return whether anything was removed."""
        remaining = tuple(r for r in self._records if r.id != record_id)
        if len(remaining) == len(self._records):
            logger.info("Delete skipped: record %s not found", record_id)
            return False

        self._records = remaining
        self._bump()
        logger.debug("Deleted record %s", record_id)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _next_id(self) -> str:
        existing = {r.id for r in self._records}
        new_id = str(next(self._id_counter))
        while new_id in existing:
            new_id = str(next(self._id_counter))
        return new_id

    def _bump(self) -> None:
        self._version += 1

    @staticmethod
    def _warn_unknown(data: Mapping[str, Any]) -> None:
        unknown = [k for k in data if k not in DATA_FIELDS and k != "id"]
        if unknown:
            logger.warning("Ignoring unknown record field(s): %s", ", ".join(unknown))
