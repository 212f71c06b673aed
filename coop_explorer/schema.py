"""
Cooperative schema.

Defines the record type, the known vocabularies and the export columns,
and ensures every record loaded into the catalog has the same shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Tuple


class InvalidFieldKind(KeyError):
    """A field or selector name outside the cooperative schema."""


class CatalogError(ValueError):
    """Malformed catalog data."""


# -----------------------
# Vocabularies
# -----------------------
SECTORS = ["Seaweed", "Aquaculture", "Eco-tourism", "Fisheries"]
DISTRICTS = ["Belize", "Cayo", "Corozal", "Orange Walk", "Stann Creek", "Toledo"]
VALUE_CHAIN = ["Producer", "Processor", "Exporter"]
EXPORT_MARKETS = ["Local", "Regional", "International"]
FDI_PRIORITIES = [
    "Blue Economy",
    "Sustainable Tourism",
    "Agribusiness & Fisheries",
    "BPO/ICT",
    "Renewable Energy",
]
CERTIFICATIONS = ["Organic", "Fair Trade", "HACCP", "ISO 22000", "MSC"]
ESG_TAGS = ["Climate", "Biodiversity", "Community", "Youth", "Gender"]


EXPORT_COLUMNS = [
    "Cooperative Name",
    "Official Name",
    "District",
    "GPS",
    "Sector",
    "Value Chain",
    "Linked Buyer",
    "Membership Size",
    "Production Capacity",
    "Capacity Unit",
    "Product Focus",
    "Certifications",
    "Export History",
    "FDI Priority",
    "ESG/SDG",
    "Partners",
    "Contact",
]


@dataclass(frozen=True)
class Cooperative:
    id: str
    name: str
    official_name: str
    district: str
    gps: str
    sector: str
    value_chain: str
    buyer: str
    members: int
    capacity: float
    capacity_unit: str
    product: str
    certifications: Tuple[str, ...]
    export_history: Tuple[str, ...]
    fdi_priority: str
    esg: Tuple[str, ...]
    partners: Tuple[str, ...]
    contact: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Cooperative":
        data = enforce_schema(raw)
        return cls(**{f.name: data[f.name] for f in fields(cls)})

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[f.name] = list(value) if f.name in LIST_FIELDS else value
        return out


# Categorical fields, as record attributes
SCALAR_FIELDS = ("sector", "value_chain", "district", "buyer", "fdi_priority", "capacity_unit")
LIST_FIELDS = ("certifications", "export_history", "esg", "partners")

TEXT_FIELDS = ("name", "official_name", "gps", "product", "contact")

# Selector kind -> record attribute
SELECTOR_FIELDS = {
    "sector": "sector",
    "value_chain": "value_chain",
    "district": "district",
    "buyer": "buyer",
    "fdi_priority": "fdi_priority",
    "certification": "certifications",
    "esg_tag": "esg",
    "export_market": "export_history",
}


def field_kind(name: str) -> Tuple[str, bool]:
    """
    Resolve a categorical field or selector name.

    Returns (record attribute, is_list). Raises InvalidFieldKind for
    anything outside the schema.
    """
    attr = SELECTOR_FIELDS.get(name, name)
    if attr in SCALAR_FIELDS:
        return attr, False
    if attr in LIST_FIELDS:
        return attr, True
    raise InvalidFieldKind(f"Unknown categorical field '{name}'")


def enforce_schema(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Ensure that a raw record has every expected field.

    Missing list fields become empty lists, missing text fields become "".
    Identity, value chain and export markets are checked against the schema.
    """
    data = dict(raw)

    coop_id = str(data.get("id") or "").strip()
    if not coop_id:
        raise CatalogError(f"Record without id: {data.get('name', '?')!r}")
    data["id"] = coop_id

    for col in TEXT_FIELDS + SCALAR_FIELDS:
        value = data.get(col)
        data[col] = "" if value is None else str(value)

    for col in LIST_FIELDS:
        value = data.get(col) or []
        if isinstance(value, str):
            value = [value]
        data[col] = tuple(str(v) for v in value)

    try:
        members = float(data.get("members") or 0)
        capacity = float(data.get("capacity") or 0)
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Record {coop_id}: non-numeric members/capacity") from exc

    if not (math.isfinite(members) and math.isfinite(capacity)):
        raise CatalogError(f"Record {coop_id}: non-finite members/capacity")
    if not members.is_integer():
        raise CatalogError(f"Record {coop_id}: fractional members {members}")
    data["members"] = int(members)
    data["capacity"] = int(capacity) if capacity.is_integer() else capacity

    if data["members"] < 0 or data["capacity"] < 0:
        raise CatalogError(f"Record {coop_id}: negative members/capacity")

    if data["value_chain"] not in VALUE_CHAIN:
        raise CatalogError(f"Record {coop_id}: unknown value chain {data['value_chain']!r}")

    unknown = [m for m in data["export_history"] if m not in EXPORT_MARKETS]
    if unknown:
        raise CatalogError(f"Record {coop_id}: unknown export markets {unknown}")

    return data
