"""
Tests for dashboard-ready outputs.
"""

from agri_monitor.dashboard import (
    RECORD_COLUMNS,
    get_analysis_summary,
    get_available_filters,
    get_commodity_trend_frame,
    get_dashboard_overview,
    get_productivity_trend_frame,
    get_region_ranking_frame,
    get_regional_summary_frame,
    get_yoy_frame,
    records_to_frame,
)
from agri_monitor.engine import CommodityMonitor
from agri_monitor.records import RecordStore


class TestDashboardOutputs:

    def test_overview(self, store):
        overview = get_dashboard_overview(CommodityMonitor(store), {"region": "Garut"})

        assert overview["filters"] == {"region": "Garut", "year": None, "commodity": None}
        assert overview["total_records"] == 11
        assert overview["filtered_count"] == 5
        assert overview["stats"]["region_with_most_land"] == "Garut"
        assert overview["region_ranking"][0]["region"] == "Garut"

    def test_overview_with_no_match(self, store):
        overview = get_dashboard_overview(CommodityMonitor(store), {"region": "Atlantis"})
        assert overview["filtered_count"] == 0
        assert overview["yoy"] == []
        assert overview["stats"]["region_with_most_land"] == "-"

    def test_records_frame_schema(self, sample_records):
        df = records_to_frame(sample_records)
        assert list(df.columns) == RECORD_COLUMNS
        assert len(df) == 11
        assert records_to_frame([]).empty
        assert list(records_to_frame([]).columns) == RECORD_COLUMNS

    def test_frames(self, store):
        monitor = CommodityMonitor(store)

        yoy = get_yoy_frame(monitor, {"commodity": "Padi"})
        assert yoy["year"].tolist() == [2022, 2023, 2024]

        ranking = get_region_ranking_frame(monitor)
        assert ranking["rank"].tolist() == [1, 2, 3]

        trends = get_commodity_trend_frame(monitor)
        assert trends["commodity"].tolist() == ["Jagung", "Padi", "Kedelai"]

        trend = get_productivity_trend_frame(monitor, "Padi", "Garut")
        assert trend["average_productivity"].tolist() == [5000, 5300, 5600]

        summary = get_regional_summary_frame(monitor)
        assert len(summary) == 15

    def test_empty_store_frames(self):
        monitor = CommodityMonitor(RecordStore())
        assert get_yoy_frame(monitor).empty
        assert get_region_ranking_frame(monitor).empty
        assert get_commodity_trend_frame(monitor).empty
        assert get_regional_summary_frame(monitor).empty

    def test_analysis_summary(self, store):
        summary = get_analysis_summary(CommodityMonitor(store), region="Garut")
        assert summary["growth_rate"] == 10.0
        assert [c["commodity"] for c in summary["commodities"]] == ["Padi", "Jagung"]

    def test_available_filters(self, store):
        filters = get_available_filters(CommodityMonitor(store))
        assert filters["years"][0] == 2024
