"""
Ecosystem graph: cooperatives linked to their sector, FDI priority,
district and buyer hubs, and buyers linked to their country.
"""

from __future__ import annotations

from typing import Iterable, Optional

import networkx as nx

from .buyers import BuyerDirectory, UnresolvedBuyerCountry
from .events import (
    BuyerActivated,
    CoopActivated,
    CountryActivated,
    DistrictActivated,
    FdiActivated,
    SectorActivated,
)
from .schema import Cooperative

HUB_PREFIXES = {
    "hub-sector": "Sector: ",
    "hub-fdi": "FDI: ",
    "hub-district": "District: ",
    "buyer": "Buyer: ",
    "hub-country": "Country: ",
}

_EVENTS = {
    "hub-sector": SectorActivated,
    "hub-fdi": FdiActivated,
    "hub-district": DistrictActivated,
    "buyer": BuyerActivated,
    "hub-country": CountryActivated,
}


def hub_id(kind: str, value: str) -> str:
    return f"{HUB_PREFIXES[kind]}{value}"


def _add_hub(g: nx.Graph, kind: str, value: str) -> str:
    node = hub_id(kind, value)
    if node not in g:
        g.add_node(node, kind=kind, label=value)
    return node


def build_ecosystem_graph(
    records: Iterable[Cooperative],
    buyers: Optional[BuyerDirectory] = None,
) -> nx.Graph:
    buyers = buyers or BuyerDirectory()
    g = nx.Graph()

    for c in records:
        g.add_node(c.id, kind="coop", label=c.name)
        for kind, value in (
            ("hub-sector", c.sector),
            ("hub-fdi", c.fdi_priority),
            ("hub-district", c.district),
        ):
            if value.strip():
                g.add_edge(c.id, _add_hub(g, kind, value))

        # blank buyer: no hub to click
        if not c.buyer.strip():
            continue
        buyer_node = _add_hub(g, "buyer", c.buyer)
        g.add_edge(c.id, buyer_node)
        try:
            country = buyers.country_for(c.buyer)
        except UnresolvedBuyerCountry:
            continue
        g.add_edge(buyer_node, _add_hub(g, "hub-country", country))

    return g


def event_for_node(g: nx.Graph, node_id: str):
    """Translate a clicked node into the matching activation event."""
    if node_id not in g:
        return None
    attrs = g.nodes[node_id]
    kind = attrs.get("kind")
    if kind == "coop":
        return CoopActivated(node_id)
    event_cls = _EVENTS.get(kind)
    if event_cls is None:
        return None
    return event_cls(attrs["label"])
