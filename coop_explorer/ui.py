from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import streamlit as st

from .analytics import Summary
from .buyers import BuyerDirectory
from .catalog import CatalogStore
from .charts import C_BG, C_GOLD, C_PANEL
from .config import Settings, configure_logging, load_buyer_directory, load_settings
from .labels import coop_label, display_value, fmt_capacity, fmt_number, join_list
from .schema import Cooperative

logger = logging.getLogger(__name__)


# -----------------------
# Bootstrap (shared by pages)
# -----------------------
@st.cache_resource(show_spinner=False)
def _load_catalog(data_path: str) -> CatalogStore:
    return CatalogStore.from_path(Path(data_path))


@st.cache_resource(show_spinner=False)
def _load_buyers(buyers_path: Optional[str]) -> BuyerDirectory:
    return load_buyer_directory(Settings(buyer_countries_path=Path(buyers_path) if buyers_path else None))


def bootstrap() -> Tuple[Settings, CatalogStore, BuyerDirectory]:
    """Settings, catalog and buyer lookup for a page. Stops the page on bad data."""
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        catalog = _load_catalog(str(settings.data_path))
    except (OSError, ValueError) as exc:
        _stop_on_load_error("cooperative catalog", settings.data_path, exc)

    buyers_path = settings.buyer_countries_path
    try:
        buyers = _load_buyers(str(buyers_path) if buyers_path else None)
    except (OSError, ValueError) as exc:
        _stop_on_load_error("buyer countries file", buyers_path, exc)

    return settings, catalog, buyers


def _stop_on_load_error(source: str, path: Optional[Path], exc: Exception) -> None:
    logger.exception("Could not load the %s", source)
    st.error(f"Could not load the {source} ({path}): {exc}")
    st.stop()


def apply_theme(*, max_width_px: int = 1400) -> None:
    st.markdown(
        f"""
        <style>
        .stApp {{ background-color: {C_BG}; color: #FFFFFF; }}
        .block-container {{ padding-top: 2rem; max-width: {max_width_px}px; }}
        h1, h2, h3, h4 {{ color: #FFFFFF; }}
        .coop-card {{
            background-color: {C_PANEL};
            border: 1px solid #262626;
            border-left: 5px solid {C_GOLD};
            border-radius: 12px;
            padding: 14px 18px;
            margin: 8px 0 14px 0;
        }}
        .coop-muted {{ color: #A3A3A3; font-size: 12px; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _info(label: str, value: object) -> None:
    st.markdown(
        f"<div class='coop-muted'>{label}</div><div>{display_value(value)}</div>",
        unsafe_allow_html=True,
    )


def render_details(coop: Cooperative) -> bool:
    """Detail panel for one cooperative. Returns True when Close was clicked."""
    with st.container(border=True):
        head, close = st.columns([5, 1])
        head.subheader(coop_label(coop))
        closed = close.button("Close", key=f"close_{coop.id}", use_container_width=True)

        c1, c2 = st.columns(2)
        with c1:
            _info("Official Name", coop.official_name)
            _info("Sector", coop.sector)
            _info("Buyer", coop.buyer)
            _info("Capacity", fmt_capacity(coop))
        with c2:
            _info("District", coop.district)
            _info("Value Chain", coop.value_chain)
            _info("Members", coop.members)
            _info("Product", coop.product)

        st.divider()

        c3, c4 = st.columns(2)
        with c3:
            _info("Certifications", join_list(coop.certifications))
            _info("FDI Priority", coop.fdi_priority)
        with c4:
            _info("Export History", join_list(coop.export_history))
            _info("ESG/SDG", join_list(coop.esg))

        st.divider()
        _info("Partners", join_list(coop.partners))
        _info("Contact", coop.contact)
        _info("GPS", coop.gps)
    return closed


def render_snapshot(summary: Summary) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Co-ops", f"{summary.coop_count}")
    c2.metric("Members", fmt_number(summary.total_members))
    c3.metric("Capacity", fmt_number(summary.total_capacity))
    c4.metric("Buyers", f"{summary.distinct_buyers}")
