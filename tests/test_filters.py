"""
Tests for the filter resolver: every index path must match a naive scan.
"""

import itertools

import pytest

from agri_monitor.filters import FilterSpec, resolve_filter
from agri_monitor.indexes import build_indexes
from agri_monitor.simulator import generate_records


def _naive(records, spec):
    return [
        r for r in records
        if (spec.region is None or r.region == spec.region)
        and (spec.year is None or r.year == spec.year)
        and (spec.commodity is None or r.commodity_name == spec.commodity)
    ]


@pytest.fixture(scope="module")
def simulated():
    records = generate_records(seed=7)
    return records, build_indexes(records)


class TestResolveFilter:

    def test_no_filter_returns_full_collection(self, sample_records):
        idx = build_indexes(sample_records)
        result = resolve_filter(idx, sample_records, FilterSpec())

        assert result is sample_records
        assert {r.id for r in result} == {r.id for r in sample_records}

    @pytest.mark.parametrize("fields", [
        fields
        for n in range(1, 4)
        for fields in itertools.combinations(("region", "year", "commodity"), n)
    ])
    def test_matches_naive_scan(self, simulated, fields):
        records, idx = simulated
        values = {
            "region": ["Garut", "Bekasi", "Nowhere"],
            "year": [2013, 2024, 1999],
            "commodity": ["Padi", "Ubi Jalar", "Kopi"],
        }
        for combo in itertools.product(*(values[f] for f in fields)):
            spec = FilterSpec(**dict(zip(fields, combo)))
            result = resolve_filter(idx, records, spec)
            expected = _naive(records, spec)
            assert sorted(r.id for r in result) == sorted(r.id for r in expected), spec

    def test_absent_key_is_empty_not_error(self, sample_records):
        idx = build_indexes(sample_records)
        assert resolve_filter(idx, sample_records, FilterSpec(region="Atlantis")) == ()
        assert resolve_filter(idx, sample_records, FilterSpec(region="Garut", year=1990)) == ()
        assert list(resolve_filter(
            idx, sample_records, FilterSpec(region="Garut", commodity="Teh"),
        )) == []

    def test_three_field_filter(self, sample_records):
        idx = build_indexes(sample_records)
        result = resolve_filter(
            idx, sample_records, FilterSpec(region="Garut", year=2024, commodity="Jagung"),
        )
        assert [r.id for r in result] == ["8"]


class TestFilterSpec:

    def test_from_mapping_treats_blank_and_all_as_unset(self):
        spec = FilterSpec.from_mapping({"region": "", "year": "2024", "commodity": "all"})
        assert spec == FilterSpec(year=2024)

    def test_from_mapping_accepts_commodity_name(self):
        spec = FilterSpec.from_mapping({"commodity_name": "Padi"})
        assert spec.commodity == "Padi"

    def test_from_mapping_none(self):
        assert FilterSpec.from_mapping(None).is_empty

    def test_from_mapping_accepts_float_year_text(self):
        assert FilterSpec.from_mapping({"year": "2024.0"}).year == 2024

    @pytest.mark.parametrize("raw", ["abc", "2024.5", "nan"])
    def test_unparseable_year_matches_nothing(self, sample_records, raw):
        spec = FilterSpec.from_mapping({"year": raw})
        assert not spec.is_empty
        assert resolve_filter(build_indexes(sample_records), sample_records, spec) == ()
