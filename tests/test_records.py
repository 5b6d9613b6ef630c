"""
Tests for the record store.

Run with:
    pytest tests/test_records.py -v
"""

import dataclasses

import pytest

from agri_monitor.records import CommodityRecord, RecordStore

from conftest import make_record

NEW_DATA = {
    "commodity_name": "Padi",
    "productivity": 6100,
    "year": 2025,
    "region": "Garut",
    "land_area": 800,
    "status": "active",
}


class TestRecordStore:
    """CRUD behaviour and versioning."""

    def test_create_assigns_unique_id(self, store):
        existing = {r.id for r in store.list_all()}
        created = store.create(NEW_DATA)

        assert created.id not in existing
        assert created in store.list_all()
        assert store.get(created.id) == created

    def test_create_twice_gives_distinct_ids(self):
        store = RecordStore()
        a = store.create(NEW_DATA)
        b = store.create(NEW_DATA)
        assert a.id != b.id
        assert len(store) == 2

    def test_create_missing_field_raises(self, store):
        data = dict(NEW_DATA)
        del data["year"]
        with pytest.raises(KeyError, match="year"):
            store.create(data)

    def test_create_changes_collection_reference(self, store):
        before = store.list_all()
        version = store.version
        store.create(NEW_DATA)

        assert store.list_all() is not before
        assert store.version > version

    def test_update_merges_fields(self, store):
        updated = store.update("4", {"productivity": 5400, "status": "inactive"})

        assert updated.productivity == 5400
        assert updated.status == "inactive"
        assert updated.region == "Garut"
        assert store.get("4") == updated

    def test_update_never_changes_id(self, store):
        updated = store.update("4", {"id": "999", "year": 2025})
        assert updated.id == "4"
        assert store.get("999") is None

    def test_update_unknown_id_returns_none(self, store):
        version = store.version
        assert store.update("nope", {"productivity": 1}) is None
        assert store.version == version

    def test_delete(self, store):
        count = len(store)
        assert store.delete("1") is True
        assert len(store) == count - 1
        assert store.get("1") is None

    def test_delete_unknown_id_returns_false(self, store):
        version = store.version
        assert store.delete("nope") is False
        assert store.version == version

    def test_lifecycle_leaves_count_unchanged(self, store):
        count = len(store)
        created = store.create(NEW_DATA)
        store.update(created.id, {"productivity": 6400})

        assert store.delete(created.id) is True
        assert len(store) == count
        assert store.delete(created.id) is False
        assert len(store) == count

    def test_create_converts_form_strings(self):
        store = RecordStore()
        form = dict(NEW_DATA, productivity="6,100", year="2025", land_area="800.5")
        created = store.create(form)

        assert created.year == 2025
        assert isinstance(created.year, int)
        assert created.productivity == 6100.0
        assert created.land_area == 800.5

    def test_update_converts_form_strings(self, store):
        updated = store.update("4", {"year": "2021.0", "productivity": "5400"})
        assert updated.year == 2021
        assert updated.productivity == 5400.0

    def test_unparseable_number_kept_as_given(self):
        store = RecordStore()
        created = store.create(dict(NEW_DATA, productivity="n/a"))
        assert created.productivity == "n/a"

    def test_replace_all_rejects_duplicate_ids(self):
        dup = [make_record(1, "Padi", 1, 2020, "Garut"), make_record(1, "Teh", 1, 2020, "Bogor")]
        with pytest.raises(ValueError):
            RecordStore(dup)

    def test_generated_ids_skip_loaded_ids(self, sample_records):
        store = RecordStore(sample_records)
        created = store.create(NEW_DATA)
        assert created.id == "12"


class TestCommodityRecord:

    def test_records_are_immutable(self):
        rec = make_record(1, "Padi", 5000, 2022, "Garut")
        with pytest.raises(dataclasses.FrozenInstanceError):
            rec.productivity = 1.0

    def test_to_dict(self):
        rec = make_record(1, "Padi", 5000, 2022, "Garut", 800)
        assert rec.to_dict() == {
            "id": "1",
            "commodity_name": "Padi",
            "productivity": 5000.0,
            "year": 2022,
            "region": "Garut",
            "land_area": 800.0,
            "status": "active",
        }
        assert isinstance(rec, CommodityRecord)
