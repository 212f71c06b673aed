"""
Plotly figures for the explorer page.

Figures are built from a Summary or an ecosystem graph, never from the
raw catalog.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import networkx as nx
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .analytics import Summary

C_BG = "#0D0D0D"
C_PANEL = "#151515"
C_TEXT = "#A3A3A3"
C_GOLD = "#F9C74F"
C_ORANGE = "#F9844A"
C_SOFT = "#FFD166"
C_LINK = "#3A3A3A"

PALETTE = ["#F9C74F", "#90BE6D", "#43AA8B", "#577590", "#F8961E", "#F3722C", "#277DA1"]

NODE_COLORS = {
    "coop": "#FFFFFF",
    "hub-sector": C_GOLD,
    "hub-fdi": C_SOFT,
    "hub-district": C_ORANGE,
    "buyer": "#9CA3AF",
    "hub-country": "#93A3B3",
}

NODE_NAMES = {
    "coop": "Cooperatives",
    "hub-sector": "Sectors",
    "hub-fdi": "FDI priorities",
    "hub-district": "Districts",
    "buyer": "Buyers",
    "hub-country": "Buyer countries",
}


def _style(fig: go.Figure, height: int = 320) -> go.Figure:
    fig.update_layout(
        plot_bgcolor=C_PANEL,
        paper_bgcolor=C_PANEL,
        font_color=C_TEXT,
        margin=dict(l=10, r=10, t=10, b=10),
        height=height,
    )
    return fig


def sector_bar(summary: Summary) -> go.Figure:
    if not summary.by_sector:
        return _style(go.Figure())
    df = pd.DataFrame({"Sector": list(summary.by_sector), "Co-ops": list(summary.by_sector.values())})
    fig = px.bar(
        df,
        x="Sector",
        y="Co-ops",
        labels={"Sector": ""},
        color_discrete_sequence=[C_GOLD],
    )
    fig.update_yaxes(dtick=1)
    return _style(fig)


def value_chain_pie(summary: Summary) -> go.Figure:
    if not summary.by_value_chain:
        return _style(go.Figure())
    df = pd.DataFrame(
        {"Value Chain": list(summary.by_value_chain), "Co-ops": list(summary.by_value_chain.values())}
    )
    fig = px.pie(df, names="Value Chain", values="Co-ops", color_discrete_sequence=PALETTE)
    fig.update_traces(textinfo="value", sort=False)
    return _style(fig)


def capacity_by_district_bar(summary: Summary) -> go.Figure:
    if not summary.capacity_by_district:
        return _style(go.Figure())
    df = pd.DataFrame(
        {
            "District": list(summary.capacity_by_district),
            "Capacity": list(summary.capacity_by_district.values()),
        }
    )
    fig = px.bar(
        df,
        x="District",
        y="Capacity",
        labels={"District": ""},
        color_discrete_sequence=[C_ORANGE],
    )
    return _style(fig)


def ecosystem_figure(g: nx.Graph, seed: int = 7, height: int = 480) -> go.Figure:
    """
    Scatter rendering of the ecosystem graph.

    Every marker carries its node id in customdata so a selection can be
    mapped back to an event.
    """
    fig = go.Figure()
    if g.number_of_nodes() == 0:
        return _style(fig, height)

    pos = nx.spring_layout(g, seed=seed)

    edge_x: List[Optional[float]] = []
    edge_y: List[Optional[float]] = []
    for a, b in g.edges():
        edge_x += [pos[a][0], pos[b][0], None]
        edge_y += [pos[a][1], pos[b][1], None]
    fig.add_trace(
        go.Scatter(
            x=edge_x,
            y=edge_y,
            mode="lines",
            line=dict(color=C_LINK, width=1),
            hoverinfo="skip",
            showlegend=False,
        )
    )

    for kind, name in NODE_NAMES.items():
        nodes = [n for n, attrs in g.nodes(data=True) if attrs.get("kind") == kind]
        if not nodes:
            continue
        fig.add_trace(
            go.Scatter(
                x=[pos[n][0] for n in nodes],
                y=[pos[n][1] for n in nodes],
                mode="markers+text",
                name=name,
                text=[g.nodes[n]["label"] for n in nodes],
                textposition="middle right",
                customdata=nodes,
                hovertemplate="%{text}<extra></extra>",
                marker=dict(size=8 if kind == "coop" else 14, color=NODE_COLORS[kind]),
            )
        )

    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(legend=dict(orientation="h"), clickmode="event+select")
    return _style(fig, height)


def selected_node_ids(selection: Optional[Mapping[str, Any]]) -> List[str]:
    """Node ids from a plotly selection payload (points carry customdata)."""
    if not selection:
        return []
    out: List[str] = []
    for point in selection.get("points", []) or []:
        data = point.get("customdata")
        if isinstance(data, (list, tuple)):
            data = data[0] if data else None
        if data:
            out.append(str(data))
    return out
