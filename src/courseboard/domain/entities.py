"""Read-only course administration entities and the snapshot that bundles them.

Entities are frozen Pydantic models so they can be validated straight from
store records. Field validators are lenient: a value the store sends in the
wrong shape degrades to ``None`` instead of failing the whole collection.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CourseStatus(str, Enum):
    PLANNED = "planned"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: str | None) -> "CourseStatus":
        """Exact, case-sensitive lookup; anything else is ``UNKNOWN``."""
        if value is None:
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# Display order of the known statuses; chart colours are assigned by position.
KNOWN_STATUSES: tuple[CourseStatus, ...] = (
    CourseStatus.PLANNED,
    CourseStatus.ACTIVE,
    CourseStatus.COMPLETED,
    CourseStatus.CANCELLED,
)

# Status values as the course store writes them.
_STORE_STATUS_NAMES: dict[str, str] = {
    "geplant": CourseStatus.PLANNED.value,
    "aktiv": CourseStatus.ACTIVE.value,
    "abgeschlossen": CourseStatus.COMPLETED.value,
    "abgesagt": CourseStatus.CANCELLED.value,
}


class EntityKind(str, Enum):
    INSTRUCTORS = "instructors"
    PARTICIPANTS = "participants"
    ROOMS = "rooms"
    COURSES = "courses"
    REGISTRATIONS = "registrations"


def parse_calendar_date(value: str | None) -> date | None:
    """Parse an ISO calendar date. A trailing time component is ignored.

    Returns ``None`` for missing or unparseable values.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v


class Instructor(_Entity):
    pass


class Participant(_Entity):
    pass


class Room(_Entity):
    pass


class Course(_Entity):
    title: str | None = Field(None, validation_alias=AliasChoices("title", "titel"))
    status: str | None = None
    start_date: str | None = Field(None, validation_alias=AliasChoices("start_date", "startdatum"))
    price: Decimal | None = Field(None, validation_alias=AliasChoices("price", "preis"))

    @field_validator("title", "status", "start_date", mode="before")
    @classmethod
    def _text_or_none(cls, v: Any) -> str | None:
        if v is None or isinstance(v, str):
            return v or None
        return None

    @field_validator("status")
    @classmethod
    def _canonical_status(cls, v: str | None) -> str | None:
        return _STORE_STATUS_NAMES.get(v, v) if v is not None else None

    @field_validator("price", mode="before")
    @classmethod
    def _non_negative_price(cls, v: Any) -> Decimal | None:
        if v is None or isinstance(v, bool):
            return None
        try:
            price = Decimal(str(v))
        except InvalidOperation:
            return None
        if not price.is_finite() or price < 0:
            return None
        return price

    @property
    def status_kind(self) -> CourseStatus:
        return CourseStatus.from_raw(self.status)

    @property
    def start(self) -> date | None:
        """Parsed start date; ``None`` when absent or malformed."""
        return parse_calendar_date(self.start_date)


class Registration(_Entity):
    paid: bool | None = Field(None, validation_alias=AliasChoices("paid", "bezahlt"))

    @field_validator("paid", mode="before")
    @classmethod
    def _strict_bool(cls, v: Any) -> bool | None:
        # Only real booleans count; 1, "true" and friends are treated as absent.
        return v if isinstance(v, bool) else None

    @property
    def is_paid(self) -> bool:
        return self.paid is True


@dataclass(frozen=True, slots=True)
class EntitySnapshot:
    """All five collections as of one successful load. Replaced, never mutated."""

    instructors: tuple[Instructor, ...] = ()
    participants: tuple[Participant, ...] = ()
    rooms: tuple[Room, ...] = ()
    courses: tuple[Course, ...] = ()
    registrations: tuple[Registration, ...] = ()

    @classmethod
    def of(
        cls,
        *,
        instructors=(),
        participants=(),
        rooms=(),
        courses=(),
        registrations=(),
    ) -> "EntitySnapshot":
        """Build a snapshot from any iterables, copying them into tuples."""
        return cls(
            instructors=tuple(instructors),
            participants=tuple(participants),
            rooms=tuple(rooms),
            courses=tuple(courses),
            registrations=tuple(registrations),
        )

    def sizes(self) -> dict[str, int]:
        return {
            EntityKind.INSTRUCTORS.value: len(self.instructors),
            EntityKind.PARTICIPANTS.value: len(self.participants),
            EntityKind.ROOMS.value: len(self.rooms),
            EntityKind.COURSES.value: len(self.courses),
            EntityKind.REGISTRATIONS.value: len(self.registrations),
        }
