"""
Conference Registration
Streamlit front end: public registration form and admin dashboard.
"""
import logging
import streamlit as st

from src.core.config import settings
from src.core.logging_config import setup_logging
from src.ui.admin_dashboard import render_admin_dashboard
from src.ui.registration_page import render_registration_page

logger = logging.getLogger(__name__)

PAGES = ("register", "admin")


# Streamlit page configuration
st.set_page_config(
    page_title="Conference Registration",
    page_icon="📝",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Initialize session state defaults."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "register"

    # Allow direct links such as ?page=admin
    if "url_params_processed" not in st.session_state:
        page = st.query_params.get("page")
        if page in PAGES:
            st.session_state.current_page = page
        st.session_state.url_params_processed = True


def apply_custom_css():
    """Apply custom CSS styles."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .page-header h1 {
            color: #f1f5f9;
            margin-bottom: 0;
        }

        .page-subtitle {
            color: #94a3b8;
            margin-bottom: 24px;
        }

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            border: none;
        }

        .stTextInput > div > div > input {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 8px;
            color: #f1f5f9;
        }

        .field-error {
            color: #f87171;
            font-size: 0.85rem;
            margin: -8px 0 12px 0;
        }

        .field-valid {
            color: #34d399;
            font-size: 0.85rem;
            margin: -8px 0 12px 0;
        }

        .stat-card {
            background: #16213e;
            border-radius: 12px;
            padding: 20px;
            text-align: center;
        }

        .stat-value {
            color: #f1f5f9;
            font-size: 2.2rem;
            font-weight: 700;
        }

        .stat-label {
            color: #94a3b8;
        }

        .type-badge {
            border-radius: 999px;
            color: white;
            padding: 2px 10px;
            font-size: 0.8rem;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """Render navigation buttons."""
    nav_col1, nav_col2, _ = st.columns([1, 1, 3], gap="small")

    with nav_col1:
        if st.button("📝 Register", use_container_width=True, key="nav_register"):
            st.session_state.current_page = "register"

    with nav_col2:
        if st.button("📊 Admin", use_container_width=True, key="nav_admin"):
            st.session_state.current_page = "admin"


def render_current_page():
    """Render the page selected in session state."""
    try:
        if st.session_state.current_page == "register":
            render_registration_page()

        elif st.session_state.current_page == "admin":
            render_admin_dashboard()

        else:
            st.error(f"Unknown page: {st.session_state.current_page}")
            if st.button("Back to registration"):
                st.session_state.current_page = "register"
                st.rerun()

    except Exception as e:
        # Error boundary
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong, please try again later")

        with st.expander("🔍 Error details"):
            st.code(str(e))

        if st.button("Back to registration"):
            st.session_state.current_page = "register"
            st.rerun()


def main():
    """Application entry point."""
    setup_logging(settings.log_level, settings.log_file or None)
    initialize_session_state()
    apply_custom_css()
    render_navigation()
    render_current_page()


if __name__ == "__main__":
    main()
