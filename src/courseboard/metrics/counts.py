"""Cardinality counts over snapshot collections."""
from __future__ import annotations

from collections.abc import Iterable, Sized

from courseboard.domain.entities import Course, CourseStatus


def count(entities: Sized | None) -> int:
    """Number of entities; a collection that was never loaded counts as 0."""
    if entities is None:
        return 0
    return len(entities)


def count_by_status(courses: Iterable[Course], status: CourseStatus | str) -> int:
    """Courses whose status matches *status* exactly.

    Matching is case-sensitive with no normalization. A raw string is compared
    against the stored value as-is. Missing or unrecognized statuses only ever
    match ``CourseStatus.UNKNOWN``.
    """
    if isinstance(status, CourseStatus):
        return sum(1 for course in courses if course.status_kind is status)
    return sum(1 for course in courses if course.status == status)
