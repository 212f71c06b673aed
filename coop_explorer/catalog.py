"""
Cooperative catalog.

The catalog is loaded once per session and never mutated afterwards.
Filtering and aggregation read from it; they never write back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from .data_io import DEFAULT_DATA_PATH, load_records
from .buyers import BuyerDirectory
from .schema import (
    CERTIFICATIONS,
    DISTRICTS,
    ESG_TAGS,
    EXPORT_MARKETS,
    FDI_PRIORITIES,
    SECTORS,
    VALUE_CHAIN,
    CatalogError,
    Cooperative,
    field_kind,
)


class CatalogStore:
    def __init__(self, records: Iterable[Cooperative]):
        self._records: Tuple[Cooperative, ...] = tuple(records)
        self._by_id = {}
        for rec in self._records:
            if rec.id in self._by_id:
                raise CatalogError(f"Duplicate cooperative id '{rec.id}'")
            self._by_id[rec.id] = rec

    @classmethod
    def from_path(cls, path: Path) -> "CatalogStore":
        return cls(load_records(path))

    @classmethod
    def default(cls) -> "CatalogStore":
        return cls.from_path(DEFAULT_DATA_PATH)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, coop_id: object) -> bool:
        return coop_id in self._by_id

    def all_records(self) -> Tuple[Cooperative, ...]:
        """Every cooperative, in insertion order."""
        return self._records

    def ids(self) -> List[str]:
        return [r.id for r in self._records]

    def get(self, coop_id: Optional[str]) -> Optional[Cooperative]:
        if coop_id is None:
            return None
        return self._by_id.get(coop_id)

    def distinct_values(self, field: str) -> Set[str]:
        """
        Distinct values of a categorical field across the whole catalog.

        List fields are flattened: distinct certifications is the union of
        every record's certification list.
        """
        attr, is_list = field_kind(field)
        if is_list:
            return {v for rec in self._records for v in getattr(rec, attr)}
        return {getattr(rec, attr) for rec in self._records}

    def sorted_values(self, field: str) -> List[str]:
        return sorted(v for v in self.distinct_values(field) if str(v).strip())


# Documented vocabularies offered even when the catalog has no record for them
_VOCABULARIES = {
    "sector": SECTORS,
    "value_chain": VALUE_CHAIN,
    "district": DISTRICTS,
    "fdi_priority": FDI_PRIORITIES,
    "certification": CERTIFICATIONS,
    "esg_tag": ESG_TAGS,
    "export_market": EXPORT_MARKETS,
}


def selector_choices(
    catalog: CatalogStore,
    kind: str,
    buyers: Optional[BuyerDirectory] = None,
    current: Optional[str] = None,
) -> List[str]:
    """
    Choices for one selector: the documented vocabulary followed by any
    other value present in the catalog. The current value is always offered.
    """
    if kind == "buyer_country":
        values = sorted((buyers or BuyerDirectory()).countries())
    else:
        values = list(_VOCABULARIES.get(kind, []))
        values += [v for v in catalog.sorted_values(kind) if v not in values]
    if current and current not in values:
        values.append(current)
    return values
