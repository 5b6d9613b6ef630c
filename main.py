"""
West Java Commodity Monitor: end-to-end analytics run.

Loads the record collection (CSV export, then Excel workbook, then
synthetic data), builds the indexes, and prints dashboard outputs plus
smoke-test checks.

Usage:
    python main.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from agri_monitor.config import (
    PROVINCE_NAME,
    RECORDS_CSV_FILE,
    RECORDS_WORKBOOK_FILE,
    REGIONS,
)
from agri_monitor.dashboard import (
    get_analysis_summary,
    get_dashboard_overview,
    get_region_ranking_frame,
    get_commodity_trend_frame,
    get_yoy_frame,
    records_to_frame,
)
from agri_monitor.engine import CommodityMonitor
from agri_monitor.loaders import load_records_csv, load_records_workbook
from agri_monitor.records import CommodityRecord, RecordStore
from agri_monitor.simulator import generate_records
from agri_monitor.validation import validate_record_data

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def load_records(
    csv_file: Path = RECORDS_CSV_FILE,
    workbook_file: Path = RECORDS_WORKBOOK_FILE,
) -> tuple[list[CommodityRecord], str]:
    """Load the CSV export, else the workbook, else synthetic data.

    Returns
    -------
    (records, source label)
    """
    if csv_file.exists():
        return load_records_csv(str(csv_file)), csv_file.name
    if workbook_file.exists():
        return load_records_workbook(str(workbook_file)), workbook_file.name
    logger.warning("No CSV or workbook export found, using synthetic records")
    return generate_records(), "simulator"


def main() -> None:
    """Run the analytics pipeline and print smoke-test outputs."""

    print("=" * 70)
    print(f"  {PROVINCE_NAME.upper()} | Commodity Productivity Monitor")
    print("  Analytics Smoke Test")
    print("=" * 70)
    print()

    # ------------------------------------------------------------------
    # 1. Load records
    # ------------------------------------------------------------------
    print("[ 1 ] LOADING RECORDS")
    print("-" * 40)

    records, source = load_records()
    print(f"\nLoaded {len(records)} records from {source}")

    store = RecordStore(records)
    monitor = CommodityMonitor(store)
    print(records_to_frame(store.list_all()).head(10).to_string(index=False))

    # ------------------------------------------------------------------
    # 2. Dashboard outputs
    # ------------------------------------------------------------------
    print("\n")
    print("[ 2 ] DASHBOARD OUTPUTS")
    print("-" * 40)

    options = monitor.filter_options()
    print(f"\nYears: {options['years']}")

    overview = get_dashboard_overview(monitor)
    print("\nOverall stats:")
    for key, value in overview["stats"].items():
        print(f"  {key:32s} | {value}")

    print("\nYear-over-year (all records):")
    print(get_yoy_frame(monitor).to_string(index=False))

    print("\nRegional ranking:")
    print(get_region_ranking_frame(monitor).to_string(index=False))

    print("\nCommodity trends:")
    print(get_commodity_trend_frame(monitor).to_string(index=False))

    region = REGIONS[0]
    analysis = get_analysis_summary(monitor, region=region, commodity="Padi")
    print(f"\nPadi in {region}: growth {analysis['growth_rate']}% ({analysis['trend']}), "
          f"avg YoY {analysis['average_growth']}%")

    # ------------------------------------------------------------------
    # 3. Record lifecycle
    # ------------------------------------------------------------------
    print("\n")
    print("[ 3 ] RECORD LIFECYCLE")
    print("-" * 40)

    new_data = {
        "commodity_name": "Padi",
        "productivity": 6100,
        "year": 2025,
        "region": region,
        "land_area": 8200,
        "status": "active",
    }
    errors = validate_record_data(new_data)
    print(f"\nValidation errors: {errors or 'none'}")

    before = len(store)
    created = store.create(new_data)
    updated = store.update(created.id, {"productivity": 6350})
    print(f"Created {created.id}, updated productivity -> {updated.productivity}")
    print(f"Latest year after create: {monitor.indexes.latest_year}")
    removed = store.delete(created.id)
    removed_again = store.delete(created.id)

    # ------------------------------------------------------------------
    # 4. Acceptance checks
    # ------------------------------------------------------------------
    print("\n")
    print("[ 4 ] ACCEPTANCE CRITERIA CHECKS")
    print("-" * 40)

    check1 = len(monitor.query({})) == len(store)
    print(f"\n  [{'PASS' if check1 else 'FAIL'}] Empty filter returns all {len(store)} records")

    check2 = removed and not removed_again and len(store) == before
    print(f"  [{'PASS' if check2 else 'FAIL'}] Create/update/delete leaves {len(store)} records")

    ranks = [r["rank"] for r in overview["region_ranking"]]
    check3 = ranks == list(range(1, len(ranks) + 1))
    print(f"  [{'PASS' if check3 else 'FAIL'}] Region ranks are sequential (1..{len(ranks)})")

    check4 = get_dashboard_overview(monitor) == get_dashboard_overview(monitor)
    print(f"  [{'PASS' if check4 else 'FAIL'}] Aggregates are repeatable")

    print("\n" + "=" * 70)
    print("  Run complete.")
    print("=" * 70)


if __name__ == "__main__":
    main()
