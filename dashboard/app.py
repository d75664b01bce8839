"""Streamlit front end that renders the hotel operations view model."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd
import requests
import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.domain.classification import badge_variant
from backend.utils.config import get_settings
from dashboard.state import NAVIGATION_ITEMS, NavigationPanelState

# ==========================================
# Configuration & Constants
# ==========================================
API_BASE_URL = get_settings().api_base_url

# Cell styles per badge variant.
BADGE_STYLES: Dict[str, str] = {
    "default": "background-color: #f3f4f6; color: #1f2937",
    "success": "background-color: #d1fae5; color: #047857",
    "warning": "background-color: #fef3c7; color: #92400e",
    "destructive": "background-color: #ffe4e6; color: #be123c",
    "info": "background-color: #dbeafe; color: #1d4ed8",
    "outline": "border: 1px solid #d1d5db; color: #374151",
}

st.set_page_config(
    page_title="Hotel Manager",
    page_icon="🏨",
    layout="wide",
)


# ==========================================
# API Helper Functions
# ==========================================
def fetch_view_model() -> Optional[Dict[str, Any]]:
    """Calls the backend view model endpoint."""
    try:
        response = requests.get(f"{API_BASE_URL}/view_model", timeout=5)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        st.error(f"Backend connection failed: {e}")
        return None


def _badge_style(category: str) -> str:
    return BADGE_STYLES[badge_variant(category)]


def _styled_table(rows: list[Dict[str, Any]], columns: Dict[str, str], badge_column: str):
    """Build a styled frame whose badge column is coloured by display category."""
    frame = pd.DataFrame(rows)
    styles = [_badge_style(category) for category in frame["display_category"]]
    visible = frame[list(columns)].rename(columns=columns)
    badge_label = columns[badge_column]
    return visible.style.apply(
        lambda column: styles if column.name == badge_label else [""] * len(column),
        axis=0,
    )


# ==========================================
# UI Sections
# ==========================================
def render_header() -> None:
    if "navigation" not in st.session_state:
        st.session_state.navigation = NavigationPanelState()

    toggle_col, title_col = st.columns([1, 11])
    with toggle_col:
        icon = "◀" if st.session_state.navigation.expanded else "☰"
        if st.button(icon, help="Toggle navigation"):
            st.session_state.navigation = st.session_state.navigation.toggle()
            st.rerun()
    with title_col:
        st.title("🛏️ Hotel Manager")

    if st.session_state.navigation.expanded:
        with st.sidebar:
            for item in NAVIGATION_ITEMS:
                st.button(item, use_container_width=True)


def render_kpi_tiles(tiles: list[Dict[str, Any]]) -> None:
    columns = st.columns(len(tiles))
    for column, tile in zip(columns, tiles):
        column.metric(tile["label"], tile["value"])


def render_bookings(rows: list[Dict[str, Any]]) -> None:
    st.subheader("Guest Booking Details")
    if not rows:
        st.info("No bookings to show.")
        return
    st.dataframe(
        _styled_table(
            rows,
            {
                "guest_name": "Guest Name",
                "room": "Room Number",
                "check_in": "Check-in Date",
                "check_out": "Check-out Date",
                "status_label": "Status",
            },
            badge_column="status_label",
        ),
        use_container_width=True,
        hide_index=True,
    )


def render_staff(staff_count: int, rows: list[Dict[str, Any]]) -> None:
    st.subheader("Staff Overview")
    st.metric("Total Staff", staff_count)
    st.write("#### Staff Tasks")
    if not rows:
        st.info("No staff tasks assigned.")
        return
    st.dataframe(
        _styled_table(
            rows,
            {
                "staff_name": "Name",
                "role": "Role",
                "priority_label": "Job Priority",
                "description": "Current Task",
            },
            badge_column="priority_label",
        ),
        use_container_width=True,
        hide_index=True,
    )


def render_financials(series: Dict[str, Any]) -> None:
    st.subheader(series["title"])
    st.caption(series["currency_code"])
    st.markdown(f"Total Expenditure: **{series['total_expenditure']}**")
    if not series["samples"]:
        st.info("No financial samples in this window.")
        return

    legend = series["legend"]
    frame = pd.DataFrame(series["samples"]).rename(
        columns={entry["field"]: entry["name"] for entry in legend}
    )
    st.bar_chart(
        frame,
        x=series["x_field"],
        y=[entry["name"] for entry in legend],
        color=[entry["color"] for entry in legend],
        stack=False,
    )


def render_requests(items: list[Dict[str, Any]]) -> None:
    st.subheader("Guest Special Requests")
    for item in items:
        initials_col, text_col = st.columns([1, 6])
        initials_col.markdown(f"### {item['initials']}")
        text_col.markdown(f"**{item['guest_name']}** • Room {item['room']}")
        text_col.caption(item["request_text"])


# ==========================================
# Main App
# ==========================================
def main() -> None:
    render_header()

    view_model = fetch_view_model()
    if view_model is None:
        return

    render_kpi_tiles(view_model["kpi_tiles"])

    bookings_col, staff_col = st.columns([2, 1])
    with bookings_col:
        render_bookings(view_model["booking_rows"])
    with staff_col:
        render_staff(view_model["staff_count"], view_model["staff_task_rows"])

    finance_col, requests_col = st.columns([2, 1])
    with finance_col:
        render_financials(view_model["financial_series"])
    with requests_col:
        render_requests(view_model["request_feed_items"])


if __name__ == "__main__":
    main()
