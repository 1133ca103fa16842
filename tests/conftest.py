"""Shared test fixtures.

Builders:
  make_course / make_registration: terse entity construction.
Loaders:
  StaticLoader  : returns fixed collections, optionally after a gate opens.
  failing_loader: StaticLoader whose one collection raises.
Fixtures:
  sample_snapshot: a small mixed snapshot used across metric tests.
  client         : FastAPI TestClient over a StaticLoader.
"""
import asyncio

import pytest

from courseboard.domain.entities import (
    Course, EntitySnapshot, Instructor, Participant, Registration, Room,
)


def make_course(course_id, status=None, start_date=None, title=None, price=None) -> Course:
    return Course(id=course_id, status=status, start_date=start_date, title=title, price=price)


def make_registration(reg_id, paid=None) -> Registration:
    return Registration(id=reg_id, paid=paid)


class StaticLoader:
    """EntityLoader returning fixed collections; counts calls per kind.

    Setting ``failing_kind`` makes that one collection raise ``error``.
    """

    def __init__(
        self,
        snapshot: EntitySnapshot,
        gate: asyncio.Event | None = None,
        failing_kind: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.snapshot = snapshot
        self.gate = gate
        self.failing_kind = failing_kind
        self.error = error or ConnectionError("store unreachable")
        self.calls: dict[str, int] = {}
        self.closed = False

    async def _serve(self, kind, value):
        self.calls[kind] = self.calls.get(kind, 0) + 1
        if kind == self.failing_kind:
            raise self.error
        if self.gate is not None:
            await self.gate.wait()
        return list(value)

    async def get_instructors(self):
        return await self._serve("instructors", self.snapshot.instructors)

    async def get_participants(self):
        return await self._serve("participants", self.snapshot.participants)

    async def get_rooms(self):
        return await self._serve("rooms", self.snapshot.rooms)

    async def get_courses(self):
        return await self._serve("courses", self.snapshot.courses)

    async def get_registrations(self):
        return await self._serve("registrations", self.snapshot.registrations)

    async def aclose(self):
        self.closed = True


def failing_loader(snapshot: EntitySnapshot, failing_kind: str, error: Exception | None = None) -> StaticLoader:
    return StaticLoader(snapshot, failing_kind=failing_kind, error=error)


@pytest.fixture
def sample_snapshot() -> EntitySnapshot:
    return EntitySnapshot.of(
        instructors=[Instructor(id="i1"), Instructor(id="i2")],
        participants=[Participant(id=f"p{n}") for n in range(5)],
        rooms=[Room(id="r1")],
        courses=[
            make_course("c1", "active", "2024-05-01", "Pottery I", 120),
            make_course("c2", "active", "2024-07-01", "Pottery II", 140),
            make_course("c3", "planned", None, "Watercolour"),
            make_course("c4", "completed", "2024-01-10", "Drawing"),
            make_course("c5", None, "2024-09-01", "Untitled"),
        ],
        registrations=[
            make_registration("g1", True),
            make_registration("g2", True),
            make_registration("g3", False),
            make_registration("g4", None),
        ],
    )


@pytest.fixture
def static_loader(sample_snapshot) -> StaticLoader:
    return StaticLoader(sample_snapshot)


@pytest.fixture
def client(static_loader):
    """FastAPI TestClient whose model reads from ``static_loader``."""
    from datetime import date
    from fastapi.testclient import TestClient
    from courseboard.api.app import create_app
    from courseboard.orchestration.dashboard_model import DashboardModel

    model = DashboardModel(static_loader, today=lambda: date(2024, 6, 1))
    app = create_app(model=model)
    with TestClient(app) as c:
        yield c
