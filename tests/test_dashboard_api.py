"""Integration tests for the /dashboard endpoints."""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from conftest import failing_loader

from courseboard.api.app import create_app
from courseboard.orchestration.dashboard_model import DashboardModel


@pytest.fixture
def failing_client(sample_snapshot):
    model = DashboardModel(failing_loader(sample_snapshot, "courses"), today=lambda: date(2024, 6, 1))
    with TestClient(create_app(model=model)) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_reload_returns_loaded_dashboard(client):
    resp = client.post("/dashboard/reload")
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"] == "loaded"
    assert body["error"] is None
    assert body["loaded_at"] is not None

    view = body["view"]
    assert view["as_of"] == "2024-06-01"
    assert view["counts"] == {
        "instructors": 2,
        "participants": 5,
        "rooms": 1,
        "courses": 5,
        "registrations": 4,
        "active_courses": 2,
        "planned_courses": 1,
    }
    assert view["status_distribution"] == [
        {"label": "planned", "count": 1},
        {"label": "active", "count": 2},
        {"label": "completed", "count": 1},
    ]
    assert [c["id"] for c in view["upcoming"]] == ["c3", "c2", "c5"]
    assert view["upcoming"][1]["price"] == 140.0
    assert view["payments"] == {"paid_count": 2, "outstanding_count": 2, "rate": 50}


def test_get_dashboard_after_reload(client):
    client.post("/dashboard/reload")
    resp = client.get("/dashboard")
    assert resp.status_code == 200
    assert resp.json()["state"] == "loaded"


def test_upcoming_with_limit(client):
    client.post("/dashboard/reload")
    resp = client.get("/dashboard/upcoming", params={"limit": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 2
    assert [c["id"] for c in body["items"]] == ["c3", "c2"]


def test_upcoming_uses_the_view_reference_date(client):
    client.post("/dashboard/reload")
    view = client.app.state.dashboard_model.recompute(as_of=date(2024, 7, 1))

    body = client.get("/dashboard/upcoming").json()

    assert [c["id"] for c in body["items"]] == [c.id for c in view.upcoming] == ["c3", "c5"]
    assert [c["id"] for c in client.get("/dashboard").json()["view"]["upcoming"]] == ["c3", "c5"]


def test_upcoming_defaults_to_configured_limit(static_loader):
    model = DashboardModel(static_loader, upcoming_limit=1, today=lambda: date(2024, 6, 1))
    with TestClient(create_app(model=model)) as c:
        c.post("/dashboard/reload")
        body = c.get("/dashboard/upcoming").json()
    assert [item["id"] for item in body["items"]] == ["c3"]


def test_upcoming_limit_must_be_positive(client):
    resp = client.get("/dashboard/upcoming", params={"limit": 0})
    assert resp.status_code == 422


def test_failed_reload_reports_failure(failing_client):
    resp = failing_client.post("/dashboard/reload")
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"] == "failed"
    assert body["view"] is None
    assert "courses" in body["error"]


def test_upcoming_before_any_load_returns_409(failing_client):
    resp = failing_client.get("/dashboard/upcoming")
    assert resp.status_code == 409
    assert "not been loaded" in resp.json()["detail"]


def test_shutdown_closes_loader(static_loader):
    model = DashboardModel(static_loader)
    with TestClient(create_app(model=model)) as c:
        c.get("/health")
    assert static_loader.closed
