"""Dashboard endpoints."""
from fastapi import APIRouter, Depends, Query
from courseboard.api.deps import get_dashboard_service
from courseboard.api.schemas.dashboard import CourseList, DashboardRead
from courseboard.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardRead)
def get_dashboard(service: DashboardService = Depends(get_dashboard_service)) -> DashboardRead:
    return service.get_dashboard()


@router.post("/reload", response_model=DashboardRead)
async def reload_dashboard(service: DashboardService = Depends(get_dashboard_service)) -> DashboardRead:
    return await service.reload()


@router.get("/upcoming", response_model=CourseList)
def get_upcoming(
    limit: int | None = Query(default=None, ge=1, le=100),
    service: DashboardService = Depends(get_dashboard_service),
) -> CourseList:
    return service.get_upcoming(limit)
