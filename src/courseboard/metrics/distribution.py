"""Course status distribution for the status bar chart."""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from courseboard.domain.entities import KNOWN_STATUSES, Course


@dataclass(frozen=True, slots=True)
class StatusBucket:
    label: str
    count: int


def build_status_distribution(courses: Iterable[Course]) -> list[StatusBucket]:
    """Non-empty status buckets in the fixed order planned, active, completed, cancelled.

    Courses with an unknown status are not counted. An empty result means
    there is nothing to chart.
    """
    tally = Counter(course.status_kind for course in courses)
    buckets = [StatusBucket(label=status.value, count=tally[status]) for status in KNOWN_STATUSES]
    return [bucket for bucket in buckets if bucket.count > 0]
