"""DashboardModel: load lifecycle plus the derived view of the latest snapshot.

State machine::

    IDLE -> LOADING -> LOADED
                    -> FAILED

A model created with ``autoload=True`` (the default) starts in LOADING, as a
load is always initiated on creation. Each new load re-enters LOADING. The
last good snapshot and view survive both LOADING and FAILED.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from courseboard.domain.entities import EntityKind, EntitySnapshot
from courseboard.domain.exceptions import LoadFailure
from courseboard.infra.loader.protocol import EntityLoader
from courseboard.metrics.upcoming import DEFAULT_UPCOMING_LIMIT
from courseboard.metrics.view import DashboardView, compute_view
from courseboard.orchestration.barrier import gather_all

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


_ALLOWED_TRANSITIONS: dict[LoadState, frozenset[LoadState]] = {
    LoadState.IDLE: frozenset({LoadState.LOADING}),
    LoadState.LOADING: frozenset({LoadState.LOADED, LoadState.FAILED}),
    LoadState.LOADED: frozenset({LoadState.LOADING}),
    LoadState.FAILED: frozenset({LoadState.LOADING}),
}


async def _fetch_kind(kind: EntityKind, fetch: Callable[[], Awaitable[Any]]) -> Any:
    try:
        return await fetch()
    except Exception as exc:
        raise LoadFailure(kind.value, exc) from exc


async def load_snapshot(loader: EntityLoader) -> EntitySnapshot:
    """Fetch all five collections concurrently and bundle them.

    Raises ``LoadFailure`` naming the first collection that failed; the
    remaining fetches are cancelled.
    """
    instructors, participants, rooms, courses, registrations = await gather_all(
        _fetch_kind(EntityKind.INSTRUCTORS, loader.get_instructors),
        _fetch_kind(EntityKind.PARTICIPANTS, loader.get_participants),
        _fetch_kind(EntityKind.ROOMS, loader.get_rooms),
        _fetch_kind(EntityKind.COURSES, loader.get_courses),
        _fetch_kind(EntityKind.REGISTRATIONS, loader.get_registrations),
    )
    return EntitySnapshot.of(
        instructors=instructors,
        participants=participants,
        rooms=rooms,
        courses=courses,
        registrations=registrations,
    )


class DashboardModel:
    """Load state and derived view for one loader.

    With ``autoload=True`` the model starts in ``LOADING`` but does not fetch
    anything by itself: the caller must await ``load()`` (or build the model
    with ``open()``, which does).
    """

    def __init__(
        self,
        loader: EntityLoader,
        *,
        upcoming_limit: int = DEFAULT_UPCOMING_LIMIT,
        today: Callable[[], date] = date.today,
        autoload: bool = True,
    ) -> None:
        self._loader = loader
        self._upcoming_limit = upcoming_limit
        self._today = today
        self._state = LoadState.LOADING if autoload else LoadState.IDLE
        self._transitions: list[tuple[LoadState, LoadState]] = []
        self._snapshot: EntitySnapshot | None = None
        self._view: DashboardView | None = None
        self._error: LoadFailure | None = None
        self._loaded_at: datetime | None = None
        # Overlapping load() calls run one after the other.
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, loader: EntityLoader, **kwargs: Any) -> "DashboardModel":
        """Create a model and run its initial load to completion."""
        model = cls(loader, **kwargs)
        await model.load()
        return model

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def transitions(self) -> list[tuple[LoadState, LoadState]]:
        """Every state change so far, oldest first."""
        return list(self._transitions)

    @property
    def snapshot(self) -> EntitySnapshot | None:
        return self._snapshot

    @property
    def view(self) -> DashboardView | None:
        return self._view

    @property
    def error(self) -> LoadFailure | None:
        """Failure of the most recent load, cleared when a new load starts."""
        return self._error

    @property
    def loaded_at(self) -> datetime | None:
        return self._loaded_at

    @property
    def upcoming_limit(self) -> int:
        return self._upcoming_limit

    @property
    def loader(self) -> EntityLoader:
        return self._loader

    def current_date(self) -> date:
        return self._today()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _transition(self, new: LoadState) -> None:
        old = self._state
        if old is new:
            return
        if new not in _ALLOWED_TRANSITIONS[old]:
            raise RuntimeError(f"Illegal dashboard transition {old.value} -> {new.value}")
        self._state = new
        self._transitions.append((old, new))
        logger.debug("Dashboard state %s -> %s", old.value, new.value)

    async def load(self) -> LoadState:
        """Run one load attempt and return the resulting state.

        A failed fetch never raises out of here: it is logged, the state
        becomes FAILED and the previous snapshot/view stay in place.
        """
        async with self._lock:
            self._transition(LoadState.LOADING)
            self._error = None
            try:
                snapshot = await load_snapshot(self._loader)
            except LoadFailure as exc:
                logger.error("Dashboard load failed (%s): %s", exc.kind, exc.cause)
                self._error = exc
                self._transition(LoadState.FAILED)
                return self._state

            self._snapshot = snapshot
            self._view = compute_view(
                snapshot, as_of=self._today(), upcoming_limit=self._upcoming_limit,
            )
            self._loaded_at = datetime.now(timezone.utc)
            self._transition(LoadState.LOADED)
            logger.info("Dashboard loaded: %s", snapshot.sizes())
            return self._state

    def recompute(self, as_of: date | None = None) -> DashboardView | None:
        """Re-derive the view from the held snapshot without fetching."""
        if self._snapshot is None:
            return None
        self._view = compute_view(
            self._snapshot,
            as_of=as_of or self._today(),
            upcoming_limit=self._upcoming_limit,
        )
        return self._view
