import altair as alt
import pandas as pd
import streamlit as st
from contextlib import contextmanager
from typing import Optional

from statsboard import data as sd
from statsboard.colors import ColorAssigner
from statsboard.datasets import export_frame
from statsboard.page_home import build_home_view, home_chart
from statsboard.page_price import PRICE_TITLE, price_chart
from statsboard.pricing import price_frame

alt.data_transformers.disable_max_rows()

PAGES = {"Performance Stats": "home", "Price Stats": "price-screen"}


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .breadcrumb {color: #6b7280;font-size: 0.9rem;margin-bottom: 2px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-header {display: flex;justify-content: space-between;align-items: center;margin-bottom: 8px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-header">
            <div class="card-title">{title}</div>
          </div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def render_page_header(title: str, breadcrumb: str, export_df: Optional[pd.DataFrame] = None, export_name: str = "export.csv"):
    inject_base_styles()
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(
            f"<div class='app-top-bar'><div class='breadcrumb'>{breadcrumb}</div><div class='page-title'>{title}</div></div>",
            unsafe_allow_html=True,
        )
    with c2:
        btn_cols = st.columns(2)
        if btn_cols[0].button("Refresh", key=f"refresh-{export_name}"):
            sd.clear_caches()
            st.rerun()
        if export_df is not None and not export_df.empty:
            btn_cols[1].download_button(
                "Export CSV",
                data=export_df.to_csv(index=False).encode("utf-8"),
                file_name=export_name,
                mime="text/csv",
            )


def get_color_assigner() -> ColorAssigner:
    # Lives for the browser session; a full reload starts a new one.
    if "color_assigner" not in st.session_state:
        st.session_state["color_assigner"] = ColorAssigner()
    return st.session_state["color_assigner"]


# ----- Page renderers -----

def render_home_page(colors: ColorAssigner):
    table = sd.load_performance_table()
    view = build_home_view(table, st.session_state.get("selected_column"), colors)
    export_df = export_frame(view.visible) if view.status == "ready" else None
    render_page_header("Performance Stats", "HACO / Stats", export_df=export_df, export_name="performance.csv")

    if view.status == "loading":
        st.info("Loading...")
        return

    st.radio(
        "Stats",
        options=view.columns,
        index=view.columns.index(view.selection.column) if view.selection.column in view.columns else 0,
        horizontal=True,
        key="selected_column",
    )
    with card(view.title):
        st.altair_chart(home_chart(view), use_container_width=True, key=f"home-chart-{view.version}")


def render_price_page():
    report = sd.load_price_report()
    export_df = price_frame(report).drop(columns=["position"]) if not report.is_empty else None
    render_page_header("Price Stats", "HACO / Price Stats", export_df=export_df, export_name="price.csv")

    if report.is_empty:
        st.info("Loading...")
    else:
        with card(PRICE_TITLE):
            st.altair_chart(price_chart(report), use_container_width=True)

    if report.malformed:
        with st.expander(f"Diagnostics: {len(report.malformed)} malformed line(s) skipped"):
            st.dataframe(
                pd.DataFrame([{"line": m.line_number, "text": m.raw, "reason": m.reason} for m in report.malformed]),
                hide_index=True,
                use_container_width=True,
            )


# ---------- UI setup ----------
st.set_page_config(page_title="HACO Stats", layout="wide")
inject_base_styles()

with st.sidebar:
    st.markdown("### HACO")
    nav_choice = st.radio("Navigate", list(PAGES), index=0)

if PAGES[nav_choice] == "home":
    render_home_page(get_color_assigner())
else:
    render_price_page()
