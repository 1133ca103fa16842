"""EntityLoader protocol: five independent async reads, one per entity kind.

The dashboard only depends on this shape. Transport, authentication and
storage format are the implementation's business.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from courseboard.domain.entities import Course, Instructor, Participant, Registration, Room


@runtime_checkable
class EntityLoader(Protocol):
    """Each method returns the full collection or raises."""

    async def get_instructors(self) -> Sequence[Instructor]:
        ...

    async def get_participants(self) -> Sequence[Participant]:
        ...

    async def get_rooms(self) -> Sequence[Room]:
        ...

    async def get_courses(self) -> Sequence[Course]:
        ...

    async def get_registrations(self) -> Sequence[Registration]:
        ...
