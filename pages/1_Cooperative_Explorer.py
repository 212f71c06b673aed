import streamlit as st

from coop_explorer.analytics import compute_summary
from coop_explorer.catalog import selector_choices
from coop_explorer.charts import (
    capacity_by_district_bar,
    ecosystem_figure,
    sector_bar,
    selected_node_ids,
    value_chain_pie,
)
from coop_explorer.data_io import EXPORT_FILENAME, records_to_frame, to_csv_bytes
from coop_explorer.events import CoopActivated
from coop_explorer.filters import SELECTORS
from coop_explorer.graph import build_ecosystem_graph, event_for_node
from coop_explorer.labels import active_filters_caption, selector_label
from coop_explorer.state import explorer_state
from coop_explorer.ui import apply_theme, bootstrap, render_details, render_snapshot

# =============================================================================
# Page setup
# =============================================================================
st.set_page_config(page_title="Cooperative Explorer", page_icon="🔎", layout="wide")
apply_theme()

settings, catalog, buyers = bootstrap()

state = explorer_state(st.session_state)
state.prune_selection(catalog)

ALL = "All"
RANGE_FIELDS = ("min_members", "max_members", "min_capacity", "max_capacity")


# =============================================================================
# Widget <-> state plumbing
# =============================================================================
# Widgets only write through these callbacks; the state is the single source
# and is copied back into the widget keys before they render.

def _on_query() -> None:
    state.update_filters(query=st.session_state["f_query"])


def _on_selector(kind: str) -> None:
    value = st.session_state[f"f_{kind}"]
    state.update_filters(**{kind: None if value == ALL else value})


def _on_range(name: str) -> None:
    state.update_filters(**{name: st.session_state[f"f_{name}"]})


def _sync_widgets() -> None:
    f = state.filters
    st.session_state["f_query"] = f.query
    for kind in SELECTORS:
        st.session_state[f"f_{kind}"] = getattr(f, kind) or ALL
    for name in RANGE_FIELDS:
        st.session_state[f"f_{name}"] = float(getattr(f, name))


def _handle_pick(pick_key: str, value, event) -> None:
    """Dispatch a table/graph pick once; a pick persists across reruns."""
    if not value:
        st.session_state.pop(pick_key, None)
        return
    if st.session_state.get(pick_key) == value:
        return
    st.session_state[pick_key] = value
    if event is not None:
        state.dispatch(event)
        st.rerun()


def _close_details() -> None:
    # New widget keys drop the old row/point; forget the matching picks too
    state.clear_selection()
    for pick_key in ("_table_pick", "_graph_pick"):
        st.session_state.pop(pick_key, None)


_sync_widgets()


# =============================================================================
# Sidebar: filters
# =============================================================================
with st.sidebar:
    st.markdown("### Navigation")
    if st.button("🏠 Home", use_container_width=True):
        st.switch_page("Home.py")
    st.button("🔎 Cooperative Explorer", use_container_width=True, disabled=True)
    st.divider()

    st.header("Filters")

    st.text_input(
        "Search",
        key="f_query",
        placeholder="Search name, sector, partner, etc.",
        on_change=_on_query,
    )

    for kind in SELECTORS:
        st.selectbox(
            selector_label(kind),
            [ALL] + selector_choices(catalog, kind, buyers, current=getattr(state.filters, kind)),
            key=f"f_{kind}",
            on_change=_on_selector,
            args=(kind,),
        )

    st.subheader("Membership Range")
    m1, m2 = st.columns(2)
    m1.number_input("Min", min_value=0.0, step=5.0, key="f_min_members", on_change=_on_range, args=("min_members",))
    m2.number_input("Max", min_value=0.0, step=5.0, key="f_max_members", on_change=_on_range, args=("max_members",))

    st.subheader("Capacity Range")
    c1, c2 = st.columns(2)
    c1.number_input("Min", min_value=0.0, step=10.0, key="f_min_capacity", on_change=_on_range, args=("min_capacity",))
    c2.number_input("Max", min_value=0.0, step=10.0, key="f_max_capacity", on_change=_on_range, args=("max_capacity",))

    st.divider()
    b1, b2 = st.columns(2)
    b1.button("Reset", use_container_width=True, on_click=state.reset_all)
    b2.button(
        "Clear focus",
        use_container_width=True,
        on_click=state.clear_focus,
        disabled=not state.filters.active_selectors(),
    )


# =============================================================================
# Filtered view (one evaluation per run)
# =============================================================================
filtered = state.view(catalog, buyers)
summary = compute_summary(filtered)

head, export = st.columns([4, 1])
with head:
    st.title("Beltraide Dashboard")
    st.caption(active_filters_caption(state.filters))
with export:
    st.download_button(
        label="Export CSV",
        data=to_csv_bytes(filtered),
        file_name=EXPORT_FILENAME,
        mime="text/csv",
        use_container_width=True,
    )


# -----------------------
# Detail view
# -----------------------
if state.is_viewing:
    selected = state.selected_record(catalog)
    if selected is None:
        st.info("No record found for the selected cooperative.")
        if st.button("Close"):
            _close_details()
            st.rerun()
    elif render_details(selected):
        _close_details()
        st.rerun()


# -----------------------
# Table
# -----------------------
st.subheader(f"Cooperatives ({summary.coop_count})")

if not filtered:
    st.info("0 results. No cooperative matches the current filters.")
else:
    st.caption("Tip: click a row to open its details.")
    table = records_to_frame(filtered)
    table_event = st.dataframe(
        table.drop(columns=["ID"]),
        use_container_width=True,
        hide_index=True,
        selection_mode="single-row",
        on_select="rerun",
        key=state.widget_key("coop_table"),
    )
    rows = table_event.selection.get("rows", []) if table_event is not None else []
    picked = str(table.iloc[rows[0]]["ID"]) if rows else None
    _handle_pick("_table_pick", picked, CoopActivated(picked) if picked else None)

st.divider()


# -----------------------
# Snapshot + charts
# -----------------------
render_snapshot(summary)

col1, col2 = st.columns(2)
with col1:
    st.subheader("Co-ops by Sector")
    st.plotly_chart(sector_bar(summary), use_container_width=True)
with col2:
    st.subheader("Value Chain Mix")
    st.plotly_chart(value_chain_pie(summary), use_container_width=True)

st.subheader("Total Capacity by District")
st.plotly_chart(capacity_by_district_bar(summary), use_container_width=True)


# -----------------------
# Ecosystem graph
# -----------------------
if settings.show_graph:
    st.divider()
    st.subheader("🕸️ Ecosystem Graph")
    st.caption("Click a cooperative to open it, or a sector / FDI / district / buyer / country hub to focus on it.")

    graph = build_ecosystem_graph(filtered, buyers)
    if graph.number_of_nodes() == 0:
        st.info("Nothing to draw for the current filters.")
    else:
        graph_event = st.plotly_chart(
            ecosystem_figure(graph),
            use_container_width=True,
            on_select="rerun",
            selection_mode="points",
            key=state.widget_key("eco_graph"),
        )
        nodes = selected_node_ids(graph_event.selection if graph_event is not None else None)
        node = nodes[0] if nodes else None
        _handle_pick("_graph_pick", node, event_for_node(graph, node) if node else None)
