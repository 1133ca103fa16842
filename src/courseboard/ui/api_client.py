"""Typed HTTP client for Streamlit pages.

Only imports from ``courseboard.api.schemas``; never metrics or loaders.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

import httpx
import streamlit as st

from courseboard.api.schemas.dashboard import CourseList, DashboardRead


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


class CourseboardClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        raise APIError(resp.status_code, str(detail))

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def get_dashboard(self) -> DashboardRead:
        resp = self._client.get("/dashboard")
        self._raise_for_status(resp)
        return DashboardRead.model_validate(resp.json())

    def reload_dashboard(self) -> DashboardRead:
        resp = self._client.post("/dashboard/reload")
        self._raise_for_status(resp)
        return DashboardRead.model_validate(resp.json())

    def get_upcoming(self, limit: int = 5) -> CourseList:
        resp = self._client.get("/dashboard/upcoming", params={"limit": limit})
        self._raise_for_status(resp)
        return CourseList.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def health(self) -> dict:
        resp = self._client.get("/health")
        self._raise_for_status(resp)
        return resp.json()


# ------------------------------------------------------------------
# Streamlit helper: one client per session
# ------------------------------------------------------------------

def get_client() -> CourseboardClient:
    """Return a cached ``CourseboardClient`` for the current Streamlit session."""
    from courseboard.ui.state import get_api_url

    if "courseboard_api_client" not in st.session_state:
        st.session_state["courseboard_api_client"] = CourseboardClient(base_url=get_api_url())
    return st.session_state["courseboard_api_client"]
