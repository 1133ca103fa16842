"""Display helpers for the overview page. Pure functions, no Streamlit."""
from __future__ import annotations

from datetime import date

from courseboard.api.schemas.dashboard import CourseRead, StatusBucketRead

PLACEHOLDER = "—"

# Assigned by bucket position, so colours stay put across renders.
CHART_COLORS: tuple[str, ...] = ("#3b4fd8", "#6a7ef0", "#2f9aa8", "#9b4fc9")

_STATUS_LABELS = {
    "planned": "Planned",
    "active": "Active",
    "completed": "Completed",
    "cancelled": "Cancelled",
}


def kpi_value(value: int | str, *, loading: bool) -> str:
    return PLACEHOLDER if loading else str(value)


def rate_text(rate: int | None) -> str:
    """Payment rate as a percentage; no registrations means no rate at all."""
    return PLACEHOLDER if rate is None else f"{rate}%"


def paid_ratio_text(paid: int, total: int) -> str:
    return f"{paid}/{total}"


def status_label(status: str | None) -> str:
    """Badge text; unrecognized statuses are shown verbatim."""
    if not status:
        return PLACEHOLDER
    return _STATUS_LABELS.get(status, status)


def bar_colors(buckets: list[StatusBucketRead]) -> list[str]:
    return [CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(buckets))]


def course_subtitle(course: CourseRead) -> str:
    """Start date and price line under a course title."""
    text = PLACEHOLDER
    if course.start_date:
        try:
            text = date.fromisoformat(course.start_date[:10]).strftime("%d %B %Y")
        except ValueError:
            text = course.start_date
    if course.price is not None:
        text += f" · {course.price:.2f} €"
    return text
