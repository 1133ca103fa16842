"""Session-state helpers for the Streamlit UI.

Only reads and writes ``st.session_state``.
"""
import streamlit as st
from typing import Optional

from courseboard.api.schemas.dashboard import DashboardRead


def init_session() -> None:
    """Initialize session state variables."""
    if "last_dashboard" not in st.session_state:
        st.session_state["last_dashboard"] = None


def get_api_url() -> str:
    """Backend base URL, defaulting to the configured one."""
    if "courseboard_api_url" not in st.session_state:
        from courseboard.config import settings
        st.session_state["courseboard_api_url"] = settings.DASHBOARD_API_URL
    return st.session_state["courseboard_api_url"]


def get_last_dashboard() -> Optional[DashboardRead]:
    """Most recent dashboard response that carried a view."""
    return st.session_state.get("last_dashboard")


def remember_dashboard(dashboard: DashboardRead) -> None:
    """Keep *dashboard* for redisplay; responses without a view never evict a good one."""
    if dashboard.view is not None:
        st.session_state["last_dashboard"] = dashboard
