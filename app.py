import streamlit as st
from contextlib import contextmanager
from typing import Optional

from core.dashboard import CHARTS, build_dashboard


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-header {display: flex;justify-content: space-between;align-items: center;margin-bottom: 8px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .card-actions {font-size: 0.9rem;color: #6b7280;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, actions: Optional[str] = None):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-header">
            <div class="card-title">{title}</div>
            <div class="card-actions">{actions or ""}</div>
          </div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


# ---------- UI setup ----------
st.set_page_config(page_title="Fleet Operations Dashboard", layout="wide")
inject_base_styles()
st.title("Fleet Operations Dashboard")
st.caption("Delivery times, fuel efficiency, cargo mix, route efficiency and maintenance scores.")

if st.button("Refresh"):
    st.rerun()

specs = build_dashboard()
if not specs:
    st.error("No datasets could be loaded. Check the CSV files under web/data/.")
    st.stop()

cols = st.columns(2)
for idx, definition in enumerate(CHARTS):
    with cols[idx % 2]:
        with card(definition.options.get("label", definition.mount_id), actions=definition.path):
            spec = specs.get(definition.mount_id)
            if spec is None:
                st.warning(f"No data for {definition.path}.")
            else:
                st.vega_lite_chart(spec, use_container_width=True)
