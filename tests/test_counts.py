"""Pure unit tests for cardinality counts."""

from conftest import make_course

from courseboard.domain.entities import CourseStatus, Instructor
from courseboard.metrics.counts import count, count_by_status


def test_count_is_length():
    assert count([Instructor(id="a"), Instructor(id="b")]) == 2


def test_count_empty_and_never_loaded():
    assert count([]) == 0
    assert count(()) == 0
    assert count(None) == 0


def test_count_by_status_enum():
    courses = [
        make_course("1", "active"),
        make_course("2", "active"),
        make_course("3", "planned"),
    ]
    assert count_by_status(courses, CourseStatus.ACTIVE) == 2
    assert count_by_status(courses, CourseStatus.PLANNED) == 1
    assert count_by_status(courses, CourseStatus.CANCELLED) == 0


def test_count_by_status_is_case_sensitive():
    courses = [make_course("1", "Active"), make_course("2", "ACTIVE"), make_course("3", "active")]
    assert count_by_status(courses, "active") == 1
    assert count_by_status(courses, CourseStatus.ACTIVE) == 1
    assert count_by_status(courses, "Active") == 1


def test_missing_and_unrecognized_status_only_match_unknown():
    courses = [make_course("1", None), make_course("2", "archived"), make_course("3", "completed")]
    known = sum(
        count_by_status(courses, status)
        for status in (CourseStatus.PLANNED, CourseStatus.ACTIVE, CourseStatus.COMPLETED, CourseStatus.CANCELLED)
    )
    assert known == 1
    assert count_by_status(courses, CourseStatus.UNKNOWN) == 2
