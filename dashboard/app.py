"""
Traffic Reports Dashboard - Streamlit Application

Overview of traffic report aggregates served by the dashboard backend.
"""

import asyncio
import sys
from pathlib import Path

import streamlit as st
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit

# Add src and the repository root to the path for `streamlit run dashboard/app.py`
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root / "src"))
sys.path.insert(0, str(repo_root))

from config.config import LOADING_MESSAGE, PAGE_TITLE
from config.models import DashboardConfig
from service.overview_controller import OverviewController
from utils.logging import get_logger, setup_logging
from dashboard.components import overview

_CONTROLLER_KEY = "_overview_controller"


def get_controller() -> OverviewController:
    """Return the session's controller, creating it from the environment once."""
    if _CONTROLLER_KEY not in st.session_state:
        config = DashboardConfig.from_env()
        setup_logging(config.log_level)
        st.session_state[_CONTROLLER_KEY] = OverviewController(config)
    return st.session_state[_CONTROLLER_KEY]


def main():
    """Main dashboard application."""

    # Page configuration
    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon="🚦",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    controller = get_controller()
    logger = get_logger(__name__)

    # Sidebar backend selection
    st.sidebar.title("⚙️ Backend")
    backend_url = st.sidebar.text_input("Backend URL:", value=controller.backend_url).strip()
    if not backend_url:
        st.sidebar.warning("⚠️ Backend URL cannot be empty; keeping the current address.")
        backend_url = controller.backend_url

    retry = st.sidebar.button("🔄 Retry")

    if retry or controller.needs_reload(backend_url):
        with st.spinner(LOADING_MESSAGE):
            asyncio.run(controller.reload(backend_url))

    try:
        panel_result = overview.render_panel(controller)

        st.sidebar.subheader("📊 Panel Status")
        status = panel_result.get("status", "unknown")

        if status == "success":
            st.sidebar.success(f"✅ Loaded - {panel_result.get('total_queries', 0)} reports")
        elif status == "error":
            st.sidebar.error("❌ Backend unavailable")
        elif status == "loading":
            st.sidebar.info("⏳ Loading")
        else:
            st.sidebar.info(f"ℹ️ Status: {status}")

    except Exception as e:
        logger.exception("Error rendering overview panel")
        st.error(f"❌ Error rendering overview panel: {e}")
        st.sidebar.error("❌ Panel Error")


if __name__ == "__main__":
    main()
