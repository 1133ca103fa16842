"""Dashboard use-case service. Owns model-to-DTO mapping; routers never see domain objects."""
from __future__ import annotations
from courseboard.domain.exceptions import NotLoadedError
from courseboard.metrics.upcoming import select_upcoming
from courseboard.metrics.view import DashboardView
from courseboard.orchestration.dashboard_model import DashboardModel
from courseboard.api.schemas.dashboard import (
    CourseList, CourseRead, DashboardCountsRead, DashboardRead,
    DashboardViewRead, LoadStateDTO, PaymentSummaryRead, StatusBucketRead,
)


def view_to_dto(view: DashboardView) -> DashboardViewRead:
    return DashboardViewRead(
        as_of=view.as_of,
        counts=DashboardCountsRead.model_validate(view.counts),
        status_distribution=[StatusBucketRead.model_validate(b) for b in view.status_distribution],
        upcoming=[CourseRead.model_validate(c) for c in view.upcoming],
        payments=PaymentSummaryRead.model_validate(view.payments),
    )


class DashboardService:
    def __init__(self, model: DashboardModel) -> None:
        self._model = model

    def get_dashboard(self) -> DashboardRead:
        model = self._model
        return DashboardRead(
            state=LoadStateDTO(model.state.value),
            view=view_to_dto(model.view) if model.view is not None else None,
            error=model.error.message if model.error is not None else None,
            loaded_at=model.loaded_at,
        )

    async def reload(self) -> DashboardRead:
        await self._model.load()
        return self.get_dashboard()

    def get_upcoming(self, limit: int | None = None) -> CourseList:
        model = self._model
        if model.snapshot is None:
            raise NotLoadedError("Dashboard data has not been loaded yet")
        # Same reference date as the published view.
        as_of = model.view.as_of if model.view is not None else model.current_date()
        if limit is None:
            limit = model.upcoming_limit
        courses = select_upcoming(model.snapshot.courses, as_of, limit)
        return CourseList(items=[CourseRead.model_validate(c) for c in courses], total=len(courses))
