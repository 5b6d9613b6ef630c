"""
Tests for the index builder.
"""

from agri_monitor.indexes import build_indexes

from conftest import make_record


def _id_sets(mapping):
    return {key: {r.id for r in bucket} for key, bucket in mapping.items()}


class TestBuildIndexes:

    def test_single_dimension_buckets(self, sample_records):
        idx = build_indexes(sample_records)

        assert {r.id for r in idx.by_region["Garut"]} == {"1", "2", "4", "7", "8"}
        assert {r.id for r in idx.by_year[2023]} == {"4", "5", "6"}
        assert {r.id for r in idx.by_commodity["Kedelai"]} == {"6", "10"}

    def test_composite_buckets_use_tuple_keys(self, sample_records):
        idx = build_indexes(sample_records)

        assert {r.id for r in idx.by_region_year[("Garut", 2024)]} == {"7", "8"}
        assert {r.id for r in idx.by_commodity_year[("Padi", 2022)]} == {"1", "3"}

    def test_separator_in_names_does_not_collide(self):
        # "A_1" + 2020 vs "A" + "1_2020" would collide with string keys
        records = [
            make_record(1, "X", 10, 2020, "A_1"),
            make_record(2, "X", 20, 2020, "A"),
        ]
        idx = build_indexes(records)
        assert [r.id for r in idx.by_region_year[("A_1", 2020)]] == ["1"]
        assert [r.id for r in idx.by_region_year[("A", 2020)]] == ["2"]

    def test_catalogs_sorted(self, sample_records):
        idx = build_indexes(sample_records)

        assert idx.years == (2022, 2023, 2024)
        assert idx.regions == ("Bandung", "Garut", "Sukabumi")
        assert idx.commodities == ("Jagung", "Kedelai", "Padi")
        assert idx.latest_year == 2024
        assert idx.previous_year == 2023

    def test_records_are_shared_not_copied(self, sample_records):
        idx = build_indexes(sample_records)
        assert idx.by_region["Garut"][0] is sample_records[0]
        assert idx.by_region_year[("Garut", 2022)][0] is sample_records[0]

    def test_rebuild_is_pure(self, sample_records):
        first = build_indexes(sample_records)
        second = build_indexes(sample_records)

        for attr in ("by_region", "by_year", "by_commodity", "by_region_year", "by_commodity_year"):
            assert _id_sets(getattr(first, attr)) == _id_sets(getattr(second, attr))
        assert first.years == second.years

    def test_empty_collection(self):
        idx = build_indexes([])
        assert idx.records == ()
        assert idx.years == ()
        assert idx.latest_year is None
        assert idx.previous_year is None
        assert dict(idx.by_region) == {}
