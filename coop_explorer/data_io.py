"""
Data loading & export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from .schema import EXPORT_COLUMNS, CatalogError, Cooperative

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "cooperatives.json"
EXPORT_FILENAME = "beltraide_cooperatives.csv"

TABLE_COLUMNS = [
    "ID",
    "Cooperative",
    "District",
    "Sector",
    "Value Chain",
    "Buyer",
    "Members",
    "Capacity",
    "Unit",
    "Product",
    "Certs",
    "Export",
]


def load_records(path: Path) -> List[Cooperative]:
    """
    Load a JSON catalog (a list of record objects) and enforce schema.
    """
    path = Path(path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise CatalogError(f"{path.name}: expected a list of cooperatives")

    records = [Cooperative.from_dict(item) for item in raw]

    seen = set()
    for rec in records:
        if rec.id in seen:
            raise CatalogError(f"{path.name}: duplicate cooperative id '{rec.id}'")
        seen.add(rec.id)

    logger.info("Loaded %d cooperatives from %s", len(records), path)
    return records


def records_to_frame(records: Iterable[Cooperative]) -> pd.DataFrame:
    """One display row per cooperative. Always carries every table column."""
    rows = [
        {
            "ID": c.id,
            "Cooperative": c.name,
            "District": c.district,
            "Sector": c.sector,
            "Value Chain": c.value_chain,
            "Buyer": c.buyer,
            "Members": c.members,
            "Capacity": c.capacity,
            "Unit": c.capacity_unit,
            "Product": c.product,
            "Certs": ", ".join(c.certifications),
            "Export": ", ".join(c.export_history),
        }
        for c in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def _fmt_number(value) -> str:
    # 12.0 prints as "12", like the dashboard always showed it
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _csv_row(c: Cooperative) -> str:
    # No quoting: embedded commas are a known limitation of the export format.
    return ",".join(
        [
            c.name,
            c.official_name,
            c.district,
            c.gps,
            c.sector,
            c.value_chain,
            c.buyer,
            _fmt_number(c.members),
            _fmt_number(c.capacity),
            c.capacity_unit,
            c.product,
            "|".join(c.certifications),
            "|".join(c.export_history),
            c.fdi_priority,
            "|".join(c.esg),
            "|".join(c.partners),
            c.contact,
        ]
    )


def to_csv_text(records: Iterable[Cooperative]) -> str:
    lines = [",".join(EXPORT_COLUMNS)]
    lines.extend(_csv_row(c) for c in records)
    return "\n".join(lines)


def to_csv_bytes(records: Iterable[Cooperative]) -> bytes:
    return to_csv_text(records).encode("utf-8")
