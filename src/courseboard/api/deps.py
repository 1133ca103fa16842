"""FastAPI dependencies."""
from __future__ import annotations
from fastapi import Request
from courseboard.orchestration.dashboard_model import DashboardModel
from courseboard.services.dashboard_service import DashboardService


def get_dashboard_model(request: Request) -> DashboardModel:
    """The single DashboardModel owned by this app instance."""
    return request.app.state.dashboard_model


def get_dashboard_service(request: Request) -> DashboardService:
    return DashboardService(get_dashboard_model(request))
