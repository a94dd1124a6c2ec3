"""Admin dashboard UI: registration statistics and listing."""
import logging
from typing import Any, Dict, List, Optional

import streamlit as st

from src.services.api_client import RegistrationApiClient
from src.ui.html_utils import html_block, stat_card_html
from src.utils.date_utils import format_timestamp
from src.utils.exceptions import ApiClientError

logger = logging.getLogger(__name__)

TYPE_OPTIONS = {
    "all": "All types",
    "student": "🎓 Students",
    "professional": "💼 Professionals",
}

SORT_OPTIONS = {
    "desc": "Newest first",
    "asc": "Oldest first",
}

STAT_CARDS = (
    ("total", "Total registrations", "#667eea"),
    ("students", "Students", "#6366f1"),
    ("professionals", "Professionals", "#ec4899"),
)


def registration_rows(registrations: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten API records into table rows.

    Args:
        registrations: Records from GET /admin/registrations

    Returns:
        One row per record with display labels; missing company/phone shown as "—"
    """
    rows = []
    for record in registrations:
        registration_type = record.get("registration_type", "")
        rows.append({
            "Name": record.get("name", ""),
            "Email": record.get("email", ""),
            "Type": registration_type.capitalize(),
            "Company": record.get("company") or "—",
            "Phone": record.get("phone") or "—",
            "Registered": format_timestamp(record.get("created_at", "")),
        })
    return rows


def _render_stats(client: RegistrationApiClient) -> None:
    try:
        stats = client.get_stats()
    except ApiClientError as e:
        logger.error("Failed to load dashboard stats: %s", e)
        st.error("❌ Failed to fetch dashboard statistics")
        return

    cols = st.columns(len(STAT_CARDS), gap="small")
    for col, (key, label, accent) in zip(cols, STAT_CARDS):
        with col:
            st.markdown(stat_card_html(label, stats.get(key, 0), accent), unsafe_allow_html=True)


def _render_registrations(client: RegistrationApiClient) -> None:
    filter_col, sort_col, search_col = st.columns([1, 1, 2], gap="small")
    with filter_col:
        type_filter = st.selectbox(
            "Type",
            options=list(TYPE_OPTIONS),
            format_func=TYPE_OPTIONS.get,
            key="admin_type_filter",
        )
    with sort_col:
        sort_order = st.selectbox(
            "Sort",
            options=list(SORT_OPTIONS),
            format_func=SORT_OPTIONS.get,
            key="admin_sort_order",
        )
    with search_col:
        search: Optional[str] = st.text_input(
            "Search",
            placeholder="Search by name or email",
            key="admin_search",
        )

    try:
        registrations = client.list_registrations(type_filter, sort_order, search or None)
    except ApiClientError as e:
        logger.error("Failed to load registrations: %s", e)
        st.error("❌ Failed to fetch registrations")
        return

    if not registrations:
        st.info("📝 No registrations found")
        return

    st.caption(f"Showing {len(registrations)} registration(s)")
    st.dataframe(registration_rows(registrations), use_container_width=True, hide_index=True)


def render_admin_dashboard(client: Optional[RegistrationApiClient] = None) -> None:
    """Render the admin dashboard."""
    client = client or RegistrationApiClient()

    header_col, refresh_col = st.columns([4, 1], gap="small")
    with header_col:
        st.markdown(
            html_block(
                """
                <div class="page-header">
                    <h1>📊 Admin Dashboard</h1>
                    <div class="page-subtitle">Conference registrations overview</div>
                </div>
                """
            ),
            unsafe_allow_html=True,
        )
    with refresh_col:
        if st.button("🔄 Refresh", key="admin_refresh", use_container_width=True):
            st.rerun()

    _render_stats(client)
    st.markdown("### Registrations")
    _render_registrations(client)
