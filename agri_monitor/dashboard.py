"""
Dashboard-ready output functions.

These are the primary entry points for a Streamlit/Dash front end.
Each function returns plain dicts or DataFrames suitable for rendering
stat cards, YoY charts, ranking tables and the record table.
"""

import logging
from typing import Any, Iterable, Mapping

import pandas as pd

from .analytics import (
    analyze_productivity,
    compute_commodity_growth,
    productivity_trend,
    regional_summary,
)
from .engine import CommodityMonitor, aggregate, query
from .filters import FilterSpec
from .records import DATA_FIELDS, CommodityRecord

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["id", *DATA_FIELDS]
YOY_COLUMNS = [
    "year", "average_productivity", "prior_year_average",
    "absolute_change", "percent_change", "trend",
]
RANKING_COLUMNS = [
    "rank", "region", "average_productivity", "total_land_area",
    "record_count", "growth_rate",
]
TREND_COLUMNS = [
    "commodity", "current_year_average", "prior_year_average",
    "growth_percent", "trend",
]


def get_dashboard_overview(
    monitor: CommodityMonitor,
    filters: FilterSpec | Mapping[str, Any] | None = None,
) -> dict:
    """Single entry point a Streamlit app would call to populate the page.

    Returns
    -------
    Dict with structure:
    {
        "filters": {"region": ..., "year": ..., "commodity": ...},
        "total_records": 540,
        "filtered_count": 36,
        "stats": {...},
        "yoy": [...],
        "region_ranking": [...],
        "commodity_trends": [...],
    }
    """
    spec = filters if isinstance(filters, FilterSpec) else FilterSpec.from_mapping(filters)
    indexes = monitor.indexes
    subset = query(indexes, spec)
    result = aggregate(subset, indexes)

    if not subset:
        logger.warning("No records match filters %s", spec)

    return {
        "filters": {"region": spec.region, "year": spec.year, "commodity": spec.commodity},
        "total_records": len(indexes.records),
        "filtered_count": len(subset),
        **result,
    }


def get_analysis_summary(
    monitor: CommodityMonitor,
    region: str | None = None,
    commodity: str | None = None,
) -> dict:
    """Long-run analysis card: growth since the first year, best/worst year,
    and per-commodity growth over the same span.
    """
    subset = monitor.query(FilterSpec(region=region, commodity=commodity))
    summary = analyze_productivity(subset)
    summary["commodities"] = compute_commodity_growth(subset)
    return summary


def records_to_frame(records: Iterable[CommodityRecord]) -> pd.DataFrame:
    """Record table for display; always carries the full column schema."""
    rows = [r.to_dict() for r in records]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def get_yoy_frame(monitor: CommodityMonitor, filters=None) -> pd.DataFrame:
    """YoY series as a DataFrame for line/bar charts."""
    yoy = monitor.aggregate(filters)["yoy"]
    if not yoy:
        return pd.DataFrame(columns=YOY_COLUMNS)
    return pd.DataFrame(yoy, columns=YOY_COLUMNS)


def get_region_ranking_frame(monitor: CommodityMonitor) -> pd.DataFrame:
    ranking = monitor.aggregate()["region_ranking"]
    if not ranking:
        return pd.DataFrame(columns=RANKING_COLUMNS)
    return pd.DataFrame(ranking, columns=RANKING_COLUMNS)


def get_commodity_trend_frame(monitor: CommodityMonitor) -> pd.DataFrame:
    trends = monitor.aggregate()["commodity_trends"]
    if not trends:
        return pd.DataFrame(columns=TREND_COLUMNS)
    return pd.DataFrame(trends, columns=TREND_COLUMNS)


def get_productivity_trend_frame(
    monitor: CommodityMonitor,
    commodity: str,
    region: str | None = None,
) -> pd.DataFrame:
    """Per-year mean productivity for one commodity, for a trend chart."""
    trend = productivity_trend(monitor.indexes, commodity, region)
    return pd.DataFrame(trend, columns=["year", "average_productivity"])


def get_available_filters(monitor: CommodityMonitor) -> dict[str, list]:
    """Sorted filter options for UI dropdowns (years newest first)."""
    return monitor.filter_options()


def get_regional_summary_frame(
    monitor: CommodityMonitor,
    year: int | None = None,
) -> pd.DataFrame:
    """All regions for one year vs the year before, with top commodity."""
    summary = regional_summary(monitor.indexes, year)
    return pd.DataFrame(summary, columns=[
        "region", "year", "average_productivity", "prior_year_average",
        "total_land_area", "growth_rate", "top_commodity",
    ])
