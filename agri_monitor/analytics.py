"""
Aggregation engine: derived statistics over a record subset.

All functions are pure. Subset-based aggregates (overall stats, YoY
series, productivity analysis) take whatever the filter produced; the
ranking and trend views read the indexes directly so they always compare
the two most recent years in the data, whatever the active filter is.

Empty inputs degrade to empty lists, zeros and the '-' placeholder; ratios
against a zero baseline resolve to 0 and 'stable'.
"""

import logging
from typing import Iterable, Sequence

from .config import (
    COMMODITIES,
    GROWTH_TREND_THRESHOLD,
    PLACEHOLDER,
    REGIONS,
    TREND_STABLE,
    YOY_TREND_THRESHOLD,
)
from .indexes import Indexes
from .kpis import (
    calc_growth_rate,
    classify_trend,
    mean,
    percent_change,
    round_half_up,
    round_int,
)
from .records import CommodityRecord

logger = logging.getLogger(__name__)


def _group_by_year(records: Iterable[CommodityRecord]) -> dict[int, list[float]]:
    grouped: dict[int, list[float]] = {}
    for rec in records:
        grouped.setdefault(rec.year, []).append(rec.productivity)
    return grouped


def compute_yoy_series(
    subset: Iterable[CommodityRecord],
    threshold: float = YOY_TREND_THRESHOLD,
) -> list[dict]:
    """Year-over-year productivity series, ascending by year.

    Each year's mean productivity is rounded to the nearest integer and
    compared with the previous year present in the subset.

    Returns
    -------
    List of dicts:
        year, average_productivity, prior_year_average (None for the first
        year), absolute_change, percent_change, trend
    """
    grouped = _group_by_year(subset)
    series = []
    previous: int | None = None

    for year in sorted(grouped):
        avg = round_int(mean(grouped[year]))

        change = 0
        pct = 0.0
        trend = TREND_STABLE
        if previous is not None:
            change = avg - previous
            pct = percent_change(avg, previous)
            trend = classify_trend(pct, threshold)

        series.append({
            "year": year,
            "average_productivity": avg,
            "prior_year_average": previous,
            "absolute_change": change,
            "percent_change": pct,
            "trend": trend,
        })
        previous = avg

    return series


def compute_overall_stats(subset: Sequence[CommodityRecord]) -> dict:
    """Headline statistics for a subset in a single pass.

    Returns
    -------
    Dict with keys:
        record_count, total_land_area, distinct_commodity_count,
        average_productivity, max_productivity, min_productivity,
        region_with_most_land, commodity_with_highest_average
    """
    if not subset:
        return {
            "record_count": 0,
            "total_land_area": 0,
            "distinct_commodity_count": 0,
            "average_productivity": 0,
            "max_productivity": 0,
            "min_productivity": 0,
            "region_with_most_land": PLACEHOLDER,
            "commodity_with_highest_average": PLACEHOLDER,
        }

    total_land = 0.0
    total_productivity = 0.0
    max_productivity = float("-inf")
    min_productivity = float("inf")
    region_land: dict[str, float] = {}
    commodity_values: dict[str, list[float]] = {}

    for rec in subset:
        total_land += rec.land_area
        total_productivity += rec.productivity
        max_productivity = max(max_productivity, rec.productivity)
        min_productivity = min(min_productivity, rec.productivity)
        region_land[rec.region] = region_land.get(rec.region, 0.0) + rec.land_area
        commodity_values.setdefault(rec.commodity_name, []).append(rec.productivity)

    # First strictly-greater value wins; non-positive totals never qualify
    region_with_most_land = PLACEHOLDER
    best_land = 0.0
    for region, land in region_land.items():
        if land > best_land:
            best_land = land
            region_with_most_land = region

    commodity_with_highest_average = PLACEHOLDER
    best_avg = 0.0
    for commodity, values in commodity_values.items():
        avg = mean(values)
        if avg > best_avg:
            best_avg = avg
            commodity_with_highest_average = commodity

    return {
        "record_count": len(subset),
        "total_land_area": total_land,
        "distinct_commodity_count": len(commodity_values),
        "average_productivity": round_int(total_productivity / len(subset)),
        "max_productivity": max_productivity,
        "min_productivity": min_productivity,
        "region_with_most_land": region_with_most_land,
        "commodity_with_highest_average": commodity_with_highest_average,
    }


def rank_regions(
    indexes: Indexes,
    regions: Sequence[str] = REGIONS,
) -> list[dict]:
    """Rank catalog regions by latest-year mean productivity.

    Regions without latest-year records are left out. Growth is measured
    against the region's second-latest-year mean (0 when it has none).
    Ties keep catalog order and still get distinct sequential ranks.

    Returns
    -------
    List of dicts sorted by rank:
        region, average_productivity, total_land_area, record_count,
        growth_rate, rank
    """
    current_year = indexes.latest_year
    prior_year = indexes.previous_year
    if current_year is None:
        return []

    performance = []
    for region in regions:
        current = indexes.by_region_year.get((region, current_year), ())
        if not current:
            continue
        prior = indexes.by_region_year.get((region, prior_year), ())

        avg = round_int(mean(r.productivity for r in current))
        prior_avg = mean(r.productivity for r in prior) if prior else None

        performance.append({
            "region": region,
            "average_productivity": avg,
            "total_land_area": sum(r.land_area for r in current),
            "record_count": len(current),
            "growth_rate": percent_change(avg, prior_avg),
            "rank": 0,
        })

    # sorted() is stable, so equal averages stay in catalog order
    performance = sorted(performance, key=lambda p: p["average_productivity"], reverse=True)
    for position, entry in enumerate(performance, start=1):
        entry["rank"] = position

    return performance


def compute_commodity_trends(
    indexes: Indexes,
    commodities: Sequence[str] = COMMODITIES,
    threshold: float = GROWTH_TREND_THRESHOLD,
) -> list[dict]:
    """Latest-year vs second-latest-year productivity per catalog commodity.

    Commodities without latest-year records are left out. A commodity with
    no prior-year data is compared against itself (0%, stable).

    Returns
    -------
    List of dicts sorted by current_year_average descending:
        commodity, current_year_average, prior_year_average,
        growth_percent, trend
    """
    current_year = indexes.latest_year
    prior_year = indexes.previous_year
    if current_year is None:
        return []

    trends = []
    for commodity in commodities:
        current = indexes.by_commodity_year.get((commodity, current_year), ())
        if not current:
            continue
        prior = indexes.by_commodity_year.get((commodity, prior_year), ())

        current_avg = round_int(mean(r.productivity for r in current))
        prior_avg = round_int(mean(r.productivity for r in prior)) if prior else current_avg
        growth, trend = calc_growth_rate(current_avg, prior_avg, threshold)

        trends.append({
            "commodity": commodity,
            "current_year_average": current_avg,
            "prior_year_average": prior_avg,
            "growth_percent": growth,
            "trend": trend,
        })

    return sorted(trends, key=lambda t: t["current_year_average"], reverse=True)


def analyze_productivity(
    subset: Iterable[CommodityRecord],
    threshold: float = GROWTH_TREND_THRESHOLD,
) -> dict:
    """Long-run productivity analysis over the years in a subset.

    growth_rate compares the last year's mean with the first year's;
    average_growth is the mean of the non-zero year-over-year changes;
    best_year / worst_year are the YoY entries with the largest and
    smallest non-zero percent change.

    Returns
    -------
    Dict with keys:
        growth_rate, trend, average_growth, best_year, worst_year, yearly
    """
    yearly = compute_yoy_series(subset)
    if len(yearly) < 2:
        return {
            "growth_rate": 0.0,
            "trend": TREND_STABLE,
            "average_growth": 0.0,
            "best_year": None,
            "worst_year": None,
            "yearly": yearly,
        }

    first, last = yearly[0], yearly[-1]
    growth = percent_change(last["average_productivity"], first["average_productivity"])

    changes = [y["percent_change"] for y in yearly[1:] if y["percent_change"] != 0]
    average_growth = round_half_up(mean(changes), 1) if changes else 0.0

    with_changes = [y for y in yearly if y["percent_change"] != 0]
    best_year = max(with_changes, key=lambda y: y["percent_change"]) if with_changes else None
    worst_year = min(with_changes, key=lambda y: y["percent_change"]) if with_changes else None

    return {
        "growth_rate": growth,
        "trend": classify_trend(growth, threshold),
        "average_growth": average_growth,
        "best_year": best_year,
        "worst_year": worst_year,
        "yearly": yearly,
    }


def compute_commodity_growth(
    subset: Iterable[CommodityRecord],
    commodities: Sequence[str] | None = None,
    threshold: float = GROWTH_TREND_THRESHOLD,
) -> list[dict]:
    """First-year vs last-year mean productivity per commodity in a subset.

    Commodities default to those present in the subset, in catalog order
    (unknown names after catalog ones). Commodities with no records are
    left out.

    Returns
    -------
    List of dicts sorted by growth_rate descending:
        commodity, first_year, last_year, first_average, last_average,
        growth_rate, trend
    """
    by_commodity: dict[str, list[CommodityRecord]] = {}
    for rec in subset:
        by_commodity.setdefault(rec.commodity_name, []).append(rec)

    if commodities is None:
        known = [c for c in COMMODITIES if c in by_commodity]
        commodities = known + [c for c in by_commodity if c not in COMMODITIES]

    results = []
    for commodity in commodities:
        records = by_commodity.get(commodity)
        if not records:
            continue
        grouped = _group_by_year(records)
        first_year, last_year = min(grouped), max(grouped)
        first_avg = round_int(mean(grouped[first_year]))
        last_avg = round_int(mean(grouped[last_year]))
        growth, trend = calc_growth_rate(last_avg, first_avg, threshold)

        results.append({
            "commodity": commodity,
            "first_year": first_year,
            "last_year": last_year,
            "first_average": first_avg,
            "last_average": last_avg,
            "growth_rate": growth,
            "trend": trend,
        })

    return sorted(results, key=lambda r: r["growth_rate"], reverse=True)


def productivity_trend(
    indexes: Indexes,
    commodity: str,
    region: str | None = None,
) -> list[dict]:
    """Mean productivity per year for one commodity, optionally one region.

    Returns
    -------
    List of {"year", "average_productivity"} ascending by year.
    """
    records = indexes.by_commodity.get(commodity, ())
    if region is not None:
        records = [r for r in records if r.region == region]

    grouped = _group_by_year(records)
    return [
        {"year": year, "average_productivity": round_int(mean(grouped[year]))}
        for year in sorted(grouped)
    ]


def regional_summary(
    indexes: Indexes,
    year: int | None = None,
    regions: Sequence[str] = REGIONS,
) -> list[dict]:
    """Compare every catalog region for a target year against the year before.

    Unlike rank_regions, regions without data are kept (zeros and '-') and
    the comparison year is always ``year - 1``. The target defaults to the
    latest year in the data.

    Returns
    -------
    List of dicts sorted by average_productivity descending:
        region, year, average_productivity, prior_year_average,
        total_land_area, growth_rate, top_commodity
    """
    target = year if year is not None else indexes.latest_year
    if target is None:
        logger.warning("No records indexed, regional summary is empty")
        return []

    summary = []
    for region in regions:
        current = indexes.by_region_year.get((region, target), ())
        prior = indexes.by_region_year.get((region, target - 1), ())

        avg = round_int(mean(r.productivity for r in current))
        prior_avg = round_int(mean(r.productivity for r in prior))

        # Commodity with the single highest productivity value this year
        top_commodity = PLACEHOLDER
        top_value = None
        for rec in current:
            if top_value is None or rec.productivity > top_value:
                top_value = rec.productivity
                top_commodity = rec.commodity_name

        summary.append({
            "region": region,
            "year": target,
            "average_productivity": avg,
            "prior_year_average": prior_avg,
            "total_land_area": sum(r.land_area for r in current),
            "growth_rate": percent_change(avg, prior_avg),
            "top_commodity": top_commodity,
        })

    return sorted(summary, key=lambda s: s["average_productivity"], reverse=True)
