"""Derived dashboard view: every metric computed from one snapshot."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from courseboard.domain.entities import Course, CourseStatus, EntitySnapshot
from courseboard.metrics.counts import count, count_by_status
from courseboard.metrics.distribution import StatusBucket, build_status_distribution
from courseboard.metrics.payments import PaymentSummaryResult, summarize_payments
from courseboard.metrics.upcoming import DEFAULT_UPCOMING_LIMIT, select_upcoming


@dataclass(frozen=True, slots=True)
class DashboardCounts:
    instructors: int
    participants: int
    rooms: int
    courses: int
    registrations: int
    active_courses: int
    planned_courses: int


@dataclass(frozen=True, slots=True)
class DashboardView:
    as_of: date
    counts: DashboardCounts
    status_distribution: tuple[StatusBucket, ...]
    upcoming: tuple[Course, ...]
    payments: PaymentSummaryResult

    @property
    def has_status_data(self) -> bool:
        return bool(self.status_distribution)

    @property
    def has_upcoming(self) -> bool:
        return bool(self.upcoming)


def compute_counts(snapshot: EntitySnapshot) -> DashboardCounts:
    return DashboardCounts(
        instructors=count(snapshot.instructors),
        participants=count(snapshot.participants),
        rooms=count(snapshot.rooms),
        courses=count(snapshot.courses),
        registrations=count(snapshot.registrations),
        active_courses=count_by_status(snapshot.courses, CourseStatus.ACTIVE),
        planned_courses=count_by_status(snapshot.courses, CourseStatus.PLANNED),
    )


def compute_view(
    snapshot: EntitySnapshot,
    *,
    as_of: date,
    upcoming_limit: int = DEFAULT_UPCOMING_LIMIT,
) -> DashboardView:
    """Recompute all four aggregates in full. Pure: same snapshot, same view."""
    return DashboardView(
        as_of=as_of,
        counts=compute_counts(snapshot),
        status_distribution=tuple(build_status_distribution(snapshot.courses)),
        upcoming=tuple(select_upcoming(snapshot.courses, as_of, upcoming_limit)),
        payments=summarize_payments(snapshot.registrations),
    )
