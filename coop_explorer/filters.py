"""
Filter settings.

A plain value: the UI builds a new one on every interaction and the
filter engine evaluates it in one go.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Dict, Optional

from .schema import SELECTOR_FIELDS, InvalidFieldKind

DEFAULT_MIN_MEMBERS = 0
DEFAULT_MAX_MEMBERS = 1000
DEFAULT_MIN_CAPACITY = 0
DEFAULT_MAX_CAPACITY = 20000

# Single-choice selectors, in display order
SELECTORS = tuple(SELECTOR_FIELDS) + ("buyer_country",)


@dataclass(frozen=True)
class FilterSpec:
    query: str = ""

    sector: Optional[str] = None
    value_chain: Optional[str] = None
    district: Optional[str] = None
    buyer: Optional[str] = None
    fdi_priority: Optional[str] = None
    certification: Optional[str] = None
    esg_tag: Optional[str] = None
    export_market: Optional[str] = None
    buyer_country: Optional[str] = None

    min_members: float = DEFAULT_MIN_MEMBERS
    max_members: float = DEFAULT_MAX_MEMBERS
    min_capacity: float = DEFAULT_MIN_CAPACITY
    max_capacity: float = DEFAULT_MAX_CAPACITY

    def with_selector(self, kind: str, value: Optional[str]) -> "FilterSpec":
        """Copy with exactly one selector changed. "" or None unsets it."""
        if kind not in SELECTORS:
            raise InvalidFieldKind(f"Unknown selector '{kind}'")
        return replace(self, **{kind: value or None})

    def updated(self, **changes) -> "FilterSpec":
        changes = {k: (v or None) if k in SELECTORS else v for k, v in changes.items()}
        if "query" in changes and changes["query"] is None:
            changes["query"] = ""
        return replace(self, **changes)

    def without_selectors(self) -> "FilterSpec":
        return replace(self, **{k: None for k in SELECTORS})

    def active_selectors(self) -> Dict[str, str]:
        return {k: getattr(self, k) for k in SELECTORS if getattr(self, k)}

    def is_default(self) -> bool:
        return self == FilterSpec()

    def to_dict(self) -> Dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def default_filters() -> FilterSpec:
    return FilterSpec()
