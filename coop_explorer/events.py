"""
Interaction events emitted by charts, the graph and the table.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoopActivated:
    coop_id: str


@dataclass(frozen=True)
class SectorActivated:
    sector: str


@dataclass(frozen=True)
class FdiActivated:
    priority: str


@dataclass(frozen=True)
class DistrictActivated:
    district: str


@dataclass(frozen=True)
class BuyerActivated:
    buyer: str


@dataclass(frozen=True)
class CountryActivated:
    country: str
