"""
Configuration: region and commodity catalogs, year policy, trend
thresholds, file paths.

REGIONS and COMMODITIES are the fixed enumerated catalogs the analytics are
parameterised by. Their order is significant: rankings break ties in
catalog order.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths (adjust these if source files move)
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent.parent / "data"

RECORDS_CSV_FILE = DATA_DIR / "komoditas_jabar.csv"
RECORDS_WORKBOOK_FILE = DATA_DIR / "komoditas_jabar.xlsx"

# ---------------------------------------------------------------------------
# Agency identity
# ---------------------------------------------------------------------------
PROVINCE_NAME = "Jawa Barat"

# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------
# Regencies (kabupaten) of West Java covered by the dashboard.
REGIONS: tuple[str, ...] = (
    "Garut",
    "Bandung",
    "Sukabumi",
    "Cianjur",
    "Tasikmalaya",
    "Ciamis",
    "Kuningan",
    "Majalengka",
    "Sumedang",
    "Subang",
    "Purwakarta",
    "Karawang",
    "Bekasi",
    "Bogor",
    "Cirebon",
)

COMMODITIES: tuple[str, ...] = (
    "Padi",
    "Jagung",
    "Kedelai",
    "Kacang Tanah",
    "Ubi Kayu",
    "Ubi Jalar",
    "Sayuran",
    "Buah-buahan",
    "Kopi",
    "Teh",
    "Kelapa",
    "Cengkeh",
)

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"
STATUSES: tuple[str, ...] = (STATUS_ACTIVE, STATUS_INACTIVE)

# ---------------------------------------------------------------------------
# Year policy
# ---------------------------------------------------------------------------
# Historical data covers 2013-2024; new entries may be recorded for 2025.
HISTORY_YEAR_RANGE: tuple[int, int] = (2013, 2024)
WRITE_YEAR_RANGE: tuple[int, int] = (2013, 2025)

# ---------------------------------------------------------------------------
# Trend thresholds (percentage points)
# ---------------------------------------------------------------------------
# The YoY series and the region/commodity growth views classify trends
# against different bands; keep them separate.
YOY_TREND_THRESHOLD = 1.0
GROWTH_TREND_THRESHOLD = 2.0

TREND_UP = "up"
TREND_DOWN = "down"
TREND_STABLE = "stable"

# Placeholder for string statistics over an empty subset
PLACEHOLDER = "-"

# ---------------------------------------------------------------------------
# Synthetic dataset parameters
# ---------------------------------------------------------------------------
# Typical productivity per commodity (kg/ha)
BASE_PRODUCTIVITY: dict[str, float] = {
    "Padi": 5500,
    "Jagung": 6200,
    "Kedelai": 1400,
    "Kacang Tanah": 1800,
    "Ubi Kayu": 22000,
    "Ubi Jalar": 18000,
    "Sayuran": 12000,
    "Buah-buahan": 15000,
    "Kopi": 850,
    "Teh": 1200,
    "Kelapa": 1100,
    "Cengkeh": 350,
}

# Typical cultivated land per region (ha)
BASE_LAND_AREA: dict[str, float] = {
    "Garut": 85000,
    "Bandung": 72000,
    "Sukabumi": 95000,
    "Cianjur": 78000,
    "Tasikmalaya": 68000,
    "Ciamis": 55000,
    "Kuningan": 45000,
    "Majalengka": 52000,
    "Sumedang": 48000,
    "Subang": 82000,
    "Purwakarta": 35000,
    "Karawang": 92000,
    "Bekasi": 28000,
    "Bogor": 65000,
    "Cirebon": 42000,
}

# ---------------------------------------------------------------------------
# Source column mapping
# ---------------------------------------------------------------------------
# Maps raw column headers (after snake_case normalisation) to record fields.
# The agency's CSV export uses Indonesian headers.
COLUMN_ALIASES: dict[str, str] = {
    "id": "id",
    "komoditi": "commodity_name",
    "komoditas": "commodity_name",
    "commodity": "commodity_name",
    "commodity_name": "commodity_name",
    "produktivitas": "productivity",
    "productivity": "productivity",
    "productivity_kg_per_ha": "productivity",
    "produktivitas_kg_per_ha": "productivity",
    "tahun": "year",
    "year": "year",
    "wilayah": "region",
    "kabupaten_per_kota": "region",
    "region": "region",
    "luas_lahan": "land_area",
    "land_area": "land_area",
    "land_area_ha": "land_area",
    "luas_lahan_ha": "land_area",
    "status": "status",
}

# Maps raw status values to canonical statuses
STATUS_ALIASES: dict[str, str] = {
    "aktif": STATUS_ACTIVE,
    "tidak_aktif": STATUS_INACTIVE,
    "tidak aktif": STATUS_INACTIVE,
    "active": STATUS_ACTIVE,
    "inactive": STATUS_INACTIVE,
}
