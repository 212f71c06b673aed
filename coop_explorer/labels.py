"""
Label & formatting helpers.

This module contains ONLY presentation logic:
- turning record values into display strings
- mapping selector names to UI-friendly labels

No business logic here.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .filters import FilterSpec
from .schema import Cooperative

EMPTY = "—"

SELECTOR_LABELS = {
    "sector": "Sector",
    "value_chain": "Value Chain",
    "district": "District",
    "buyer": "Buyer",
    "fdi_priority": "FDI Priority",
    "certification": "Certification",
    "esg_tag": "ESG Tag",
    "export_market": "Export History",
    "buyer_country": "Buyer Country",
}


def titleize_slug(value: Optional[str]) -> str:
    if not value:
        return ""
    value = str(value).strip().replace("_", " ").replace("-", " ")
    return " ".join(word.capitalize() for word in value.split())


def selector_label(kind: str) -> str:
    return SELECTOR_LABELS.get(kind, titleize_slug(kind))


def display_value(value: object) -> str:
    text = "" if value is None else str(value).strip()
    return text or EMPTY


def join_list(values: Iterable[str], sep: str = ", ") -> str:
    return display_value(sep.join(values))


def fmt_number(value: float) -> str:
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.1f}"
    return f"{int(value):,}"


def fmt_capacity(c: Cooperative) -> str:
    return f"{fmt_number(c.capacity)} {c.capacity_unit}".strip()


def coop_label(c: Cooperative) -> str:
    return f"{c.name} ({c.district})" if c.district else c.name


def node_label(node_id: str) -> str:
    """'Sector: Seaweed' -> 'Seaweed'. Cooperative ids pass through."""
    for prefix in ("Sector: ", "FDI: ", "District: ", "Buyer: ", "Country: "):
        if node_id.startswith(prefix):
            return node_id[len(prefix):]
    return node_id


def active_filters_caption(spec: FilterSpec) -> str:
    parts = [f"{selector_label(k)}: {v}" for k, v in spec.active_selectors().items()]
    if spec.query:
        parts.insert(0, f'Search: "{spec.query}"')
    return " · ".join(parts) if parts else "No filters applied"
