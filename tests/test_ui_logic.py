import httpx
import pytest

from courseboard.api.schemas.dashboard import CourseRead, StatusBucketRead
from courseboard.ui.api_client import APIError, CourseboardClient
from courseboard.ui.presenters import (
    CHART_COLORS, PLACEHOLDER, bar_colors, course_subtitle, kpi_value,
    paid_ratio_text, rate_text, status_label,
)


def test_kpi_placeholder_while_loading():
    assert kpi_value(12, loading=True) == PLACEHOLDER
    assert kpi_value(12, loading=False) == "12"


def test_rate_text():
    assert rate_text(None) == PLACEHOLDER
    assert rate_text(0) == "0%"
    assert rate_text(50) == "50%"


def test_paid_ratio_text():
    assert paid_ratio_text(2, 4) == "2/4"


def test_status_label_falls_back_to_raw_value():
    assert status_label("planned") == "Planned"
    assert status_label("archived") == "archived"
    assert status_label(None) == PLACEHOLDER


def test_bar_colors_are_positional():
    buckets = [StatusBucketRead(label=label, count=1) for label in ("active", "cancelled")]
    assert bar_colors(buckets) == [CHART_COLORS[0], CHART_COLORS[1]]


def test_course_subtitle():
    course = CourseRead(id="1", start_date="2024-07-01", price=12.5)
    assert course_subtitle(course) == "01 July 2024 · 12.50 €"
    assert course_subtitle(CourseRead(id="2")) == PLACEHOLDER
    assert course_subtitle(CourseRead(id="3", start_date="soon")) == "soon"


DASHBOARD_JSON = {
    "state": "loaded",
    "view": {
        "as_of": "2024-06-01",
        "counts": {
            "instructors": 1, "participants": 2, "rooms": 3, "courses": 1,
            "registrations": 0, "active_courses": 1, "planned_courses": 0,
        },
        "status_distribution": [{"label": "active", "count": 1}],
        "upcoming": [],
        "payments": {"paid_count": 0, "outstanding_count": 0, "rate": None},
    },
    "error": None,
    "loaded_at": "2024-06-01T08:00:00Z",
}


def _client(handler) -> CourseboardClient:
    return CourseboardClient("http://api.test", transport=httpx.MockTransport(handler))


def test_client_parses_dashboard():
    client = _client(lambda request: httpx.Response(200, json=DASHBOARD_JSON))
    dashboard = client.get_dashboard()
    assert dashboard.state.value == "loaded"
    assert dashboard.view.counts.rooms == 3
    assert dashboard.view.payments.rate is None


def test_client_raises_api_error_with_detail():
    client = _client(lambda request: httpx.Response(409, json={"detail": "not loaded"}))
    with pytest.raises(APIError) as info:
        client.get_upcoming(limit=3)
    assert info.value.status_code == 409
    assert info.value.detail == "not loaded"


def test_client_reload_posts():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path))
        return httpx.Response(200, json={"state": "failed", "error": "Failed to load rooms: boom"})

    dashboard = _client(handler).reload_dashboard()
    assert seen == [("POST", "/dashboard/reload")]
    assert dashboard.view is None
    assert dashboard.error.startswith("Failed to load rooms")
