import streamlit as st

from coop_explorer.analytics import compute_summary
from coop_explorer.data_io import records_to_frame
from coop_explorer.ui import apply_theme, bootstrap, render_snapshot


# -----------------------
# Page config
# -----------------------
st.set_page_config(page_title="Beltraide Dashboard – Home", page_icon="🏠", layout="wide")
apply_theme(max_width_px=1100)

settings, catalog, buyers = bootstrap()


# -----------------------
# Sidebar navigation (Home is current)
# -----------------------
with st.sidebar:
    st.markdown("### Navigation")
    st.button("🏠 Home", use_container_width=True, disabled=True)
    if st.button("🔎 Cooperative Explorer", use_container_width=True):
        st.switch_page("pages/1_Cooperative_Explorer.py")
    st.divider()
    st.caption(f"Catalog: {settings.data_path.name}")

st.title("Beltraide Dashboard")
st.caption("Blue Economy cooperatives: filter the catalog, explore the ecosystem, export the current view.")

# -----------------------
# Catalog overview
# -----------------------
records = catalog.all_records()
render_snapshot(compute_summary(records))

st.divider()

c1, c2, c3 = st.columns(3)
with c1:
    st.markdown("**Sectors**")
    for s in catalog.sorted_values("sector"):
        st.markdown(f"- {s}")
with c2:
    st.markdown("**Districts**")
    for d in catalog.sorted_values("district"):
        st.markdown(f"- {d}")
with c3:
    st.markdown("**FDI priorities**")
    for p in catalog.sorted_values("fdi_priority"):
        st.markdown(f"- {p}")

st.divider()

st.subheader("All cooperatives")
st.dataframe(records_to_frame(records), use_container_width=True, hide_index=True)

if st.button("🔎 Open the Cooperative Explorer", use_container_width=True):
    st.switch_page("pages/1_Cooperative_Explorer.py")
