"""Loader backed by a JSON export: one top-level key per entity kind."""
from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from courseboard.domain.entities import (
    Course, EntityKind, Instructor, Participant, Registration, Room,
)
from courseboard.domain.exceptions import EntityFetchError
from courseboard.infra.loader.records import parse_records


class JsonFileEntityLoader:
    """Reads the export file again on every fetch, so a reload sees its current contents."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    async def _collection(self, kind: EntityKind) -> Any:
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except OSError as exc:
            raise EntityFetchError(kind.value, f"cannot read {self._path}: {exc}") from exc
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise EntityFetchError(kind.value, f"{self._path} is not valid JSON") from exc
        if not isinstance(document, dict):
            raise EntityFetchError(kind.value, f"{self._path} must contain a JSON object")
        # A kind missing from the export is an empty collection.
        return document.get(kind.value, [])

    async def _records(self, model: type, kind: EntityKind) -> list[Any]:
        return parse_records(model, kind.value, await self._collection(kind))

    async def get_instructors(self) -> list[Instructor]:
        return await self._records(Instructor, EntityKind.INSTRUCTORS)

    async def get_participants(self) -> list[Participant]:
        return await self._records(Participant, EntityKind.PARTICIPANTS)

    async def get_rooms(self) -> list[Room]:
        return await self._records(Room, EntityKind.ROOMS)

    async def get_courses(self) -> list[Course]:
        return await self._records(Course, EntityKind.COURSES)

    async def get_registrations(self) -> list[Registration]:
        return await self._records(Registration, EntityKind.REGISTRATIONS)
