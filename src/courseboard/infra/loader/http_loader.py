"""Async HTTP loader for the record store.

One GET per entity kind on a shared ``httpx.AsyncClient``. Close it with
``aclose()`` (or use it as an async context manager).
"""
from __future__ import annotations

from typing import Any

import httpx

from courseboard.config import Settings
from courseboard.domain.entities import (
    Course, EntityKind, Instructor, Participant, Registration, Room,
)
from courseboard.domain.exceptions import EntityFetchError
from courseboard.infra.loader.records import parse_records


class HttpEntityLoader:
    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        timeout: float = 30.0,
        paths: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_key:
            headers["X-API-Key"] = api_key
        self._paths = paths or {}
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, headers=headers, transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "HttpEntityLoader":
        api_key = settings.STORE_API_KEY.get_secret_value() if settings.STORE_API_KEY else None
        return cls(
            settings.STORE_BASE_URL,
            api_key=api_key,
            timeout=settings.STORE_TIMEOUT_SECONDS,
            paths=dict(settings.STORE_PATHS),
            **kwargs,
        )

    async def __aenter__(self) -> "HttpEntityLoader":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _fetch(self, kind: EntityKind) -> Any:
        path = self._paths.get(kind.value, f"/{kind.value}")
        try:
            resp = await self._client.get(path)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise EntityFetchError(kind.value, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise EntityFetchError(kind.value, str(exc) or type(exc).__name__) from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise EntityFetchError(kind.value, "response is not valid JSON") from exc

    # ------------------------------------------------------------------
    # EntityLoader
    # ------------------------------------------------------------------

    async def get_instructors(self) -> list[Instructor]:
        return parse_records(Instructor, EntityKind.INSTRUCTORS.value, await self._fetch(EntityKind.INSTRUCTORS))

    async def get_participants(self) -> list[Participant]:
        return parse_records(Participant, EntityKind.PARTICIPANTS.value, await self._fetch(EntityKind.PARTICIPANTS))

    async def get_rooms(self) -> list[Room]:
        return parse_records(Room, EntityKind.ROOMS.value, await self._fetch(EntityKind.ROOMS))

    async def get_courses(self) -> list[Course]:
        return parse_records(Course, EntityKind.COURSES.value, await self._fetch(EntityKind.COURSES))

    async def get_registrations(self) -> list[Registration]:
        return parse_records(Registration, EntityKind.REGISTRATIONS.value, await self._fetch(EntityKind.REGISTRATIONS))
