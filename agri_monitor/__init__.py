"""
West Java Commodity Monitor: analytics backend

In-memory indexed analytics engine behind the commodity productivity
dashboard. Yearly productivity records are held in a RecordStore, indexed
by region, year and commodity, and summarised into year-over-year,
regional and commodity-trend aggregates.

To swap the synthetic dataset for real data:
    Load records with the loaders in agri_monitor.loaders
    (CSV export or Excel workbook) and pass them to RecordStore.replace_all.
    The record schema and analytics remain unchanged.

To connect to Streamlit/Dash:
    Call dashboard.get_dashboard_overview(monitor, filters) to get a plain
    dict suitable for rendering stat cards, YoY charts and ranking tables.

To add a region or commodity:
    Append it to config.REGIONS or config.COMMODITIES. Catalog order is the
    tie-break order for rankings.
"""
