"""Selection of the "upcoming courses" list."""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from courseboard.domain.entities import Course, CourseStatus

DEFAULT_UPCOMING_LIMIT = 5


def is_upcoming(course: Course, as_of: date) -> bool:
    """A course is upcoming if it starts after *as_of* or is still planned.

    Planned courses qualify with or without a start date. A malformed start
    date never satisfies the date condition.
    """
    start = course.start
    if start is not None and start > as_of:
        return True
    return course.status_kind is CourseStatus.PLANNED


def start_sort_key(course: Course) -> str:
    """ISO calendar string of the start date; undated courses sort first."""
    start = course.start
    return start.isoformat() if start is not None else ""


def select_upcoming(
    courses: Iterable[Course],
    as_of: date,
    limit: int = DEFAULT_UPCOMING_LIMIT,
) -> list[Course]:
    """Upcoming courses, earliest first, at most *limit* of them.

    ``sorted`` is stable, so courses sharing a start date keep their input order.
    """
    if limit <= 0:
        return []
    selected = [course for course in courses if is_upcoming(course, as_of)]
    return sorted(selected, key=start_sort_key)[:limit]
