"""
Cooperative Explorer: public API.

This package provides a clean, business-oriented interface to:
- load the cooperative catalog
- filter and search it
- compute snapshot numbers and chart data
- track the selected cooperative and category focus
- export the current view as CSV

Only stable, high-level functions are exposed here. Streamlit helpers live
in `coop_explorer.ui` and are imported by the pages only.
"""

# -----------------------
# Catalog & schema
# -----------------------
from .catalog import CatalogStore
from .schema import (
    Cooperative,
    CatalogError,
    InvalidFieldKind,
    EXPORT_COLUMNS,
)

# -----------------------
# Data loading & export
# -----------------------
from .data_io import (
    EXPORT_FILENAME,
    load_records,
    records_to_frame,
    to_csv_bytes,
    to_csv_text,
)

# -----------------------
# Filtering & analytics
# -----------------------
from .filters import FilterSpec, default_filters
from .analytics import (
    Summary,
    apply_filters,
    compute_summary,
    matches_query,
)
from .buyers import BuyerDirectory, UnresolvedBuyerCountry

# -----------------------
# Selection & events
# -----------------------
from .events import (
    BuyerActivated,
    CoopActivated,
    CountryActivated,
    DistrictActivated,
    FdiActivated,
    SectorActivated,
)
from .state import ExplorerState, explorer_state
from .graph import build_ecosystem_graph, event_for_node

__all__ = [
    # Catalog
    "CatalogStore",
    "Cooperative",
    "CatalogError",
    "InvalidFieldKind",
    "EXPORT_COLUMNS",

    # IO
    "EXPORT_FILENAME",
    "load_records",
    "records_to_frame",
    "to_csv_bytes",
    "to_csv_text",

    # Filtering & analytics
    "FilterSpec",
    "default_filters",
    "Summary",
    "apply_filters",
    "compute_summary",
    "matches_query",
    "BuyerDirectory",
    "UnresolvedBuyerCountry",

    # Selection
    "BuyerActivated",
    "CoopActivated",
    "CountryActivated",
    "DistrictActivated",
    "FdiActivated",
    "SectorActivated",
    "ExplorerState",
    "explorer_state",
    "build_ecosystem_graph",
    "event_for_node",
]
