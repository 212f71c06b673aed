"""
Analytics & business logic.

No UI. No labels. Only numbers and facts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .buyers import BuyerDirectory
from .filters import FilterSpec
from .schema import Cooperative

logger = logging.getLogger(__name__)

# (selector, record attribute), exact equality
_SCALAR_SELECTORS = (
    ("sector", "sector"),
    ("value_chain", "value_chain"),
    ("district", "district"),
    ("buyer", "buyer"),
    ("fdi_priority", "fdi_priority"),
)

# (selector, record attribute), list membership
_LIST_SELECTORS = (
    ("certification", "certifications"),
    ("esg_tag", "esg"),
    ("export_market", "export_history"),
)

_default_buyers = BuyerDirectory()


def search_text(c: Cooperative) -> str:
    return " ".join(
        [
            c.name,
            c.official_name,
            c.sector,
            c.value_chain,
            c.district,
            c.buyer,
            c.product,
            c.fdi_priority,
            c.contact,
            " ".join(c.partners),
            " ".join(c.certifications),
        ]
    ).lower()


def matches_query(c: Cooperative, query: str) -> bool:
    """Case-insensitive substring match. An empty query matches everything."""
    if not query:
        return True
    return query.lower() in search_text(c)


def _passes(c: Cooperative, spec: FilterSpec, buyers: BuyerDirectory) -> bool:
    if spec.query and not matches_query(c, spec.query):
        return False

    for selector, attr in _SCALAR_SELECTORS:
        wanted = getattr(spec, selector)
        if wanted and getattr(c, attr) != wanted:
            return False

    for selector, attr in _LIST_SELECTORS:
        wanted = getattr(spec, selector)
        if wanted and wanted not in getattr(c, attr):
            return False

    if spec.buyer_country and not buyers.matches(c.buyer, spec.buyer_country):
        return False

    if not (spec.min_members <= c.members <= spec.max_members):
        return False
    if not (spec.min_capacity <= c.capacity <= spec.max_capacity):
        return False
    return True


def apply_filters(
    records: Iterable[Cooperative],
    spec: FilterSpec,
    buyers: Optional[BuyerDirectory] = None,
) -> List[Cooperative]:
    """
    Keep the cooperatives that satisfy every active predicate.

    Order is preserved. Unset selectors are skipped; an inverted range
    simply yields nothing.
    """
    buyers = buyers or _default_buyers
    out = [c for c in records if _passes(c, spec, buyers)]
    logger.debug("Filters %s -> %d cooperatives", spec.active_selectors() or "{}", len(out))
    return out


@dataclass(frozen=True)
class Summary:
    coop_count: int = 0
    total_members: int = 0
    total_capacity: float = 0
    distinct_buyers: int = 0
    by_sector: Dict[str, int] = field(default_factory=dict)
    by_value_chain: Dict[str, int] = field(default_factory=dict)
    by_district: Dict[str, int] = field(default_factory=dict)
    capacity_by_district: Dict[str, float] = field(default_factory=dict)


def _py(value):
    # numpy scalars -> plain python numbers
    value = value.item() if hasattr(value, "item") else value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _counts(df: pd.DataFrame, col: str) -> Dict[str, int]:
    return {str(k): int(v) for k, v in df.groupby(col, sort=False).size().items()}


def compute_summary(records: Sequence[Cooperative]) -> Summary:
    """
    Snapshot numbers and chart group-bys for the given (filtered) cooperatives.

    Group-bys keep first-appearance order. Recomputed from scratch each call.
    """
    records = list(records)
    if not records:
        return Summary()

    df = pd.DataFrame(
        [
            {
                "sector": c.sector,
                "value_chain": c.value_chain,
                "district": c.district,
                "buyer": c.buyer,
                "members": c.members,
                "capacity": c.capacity,
            }
            for c in records
        ]
    )

    capacity_by_district = df.groupby("district", sort=False)["capacity"].sum()

    return Summary(
        coop_count=int(len(df)),
        total_members=int(df["members"].sum()),
        total_capacity=_py(df["capacity"].sum()),
        distinct_buyers=int(df.loc[df["buyer"].str.strip() != "", "buyer"].nunique()),
        by_sector=_counts(df, "sector"),
        by_value_chain=_counts(df, "value_chain"),
        by_district=_counts(df, "district"),
        capacity_by_district={str(k): _py(v) for k, v in capacity_by_district.items()},
    )
