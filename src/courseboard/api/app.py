"""FastAPI application factory."""
from __future__ import annotations
import asyncio
import contextlib
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from courseboard.config import Settings, settings as default_settings
from courseboard.domain.exceptions import CourseboardError, NotLoadedError
from courseboard.infra.loader.protocol import EntityLoader
from courseboard.logging import logger
from courseboard.orchestration.dashboard_model import DashboardModel


def create_app(
    loader: EntityLoader | None = None,
    *,
    app_settings: Settings | None = None,
    model: DashboardModel | None = None,
) -> FastAPI:
    cfg = app_settings or default_settings

    if model is None:
        if loader is None:
            from courseboard.infra.loader.http_loader import HttpEntityLoader
            loader = HttpEntityLoader.from_settings(cfg)
        model = DashboardModel(loader, upcoming_limit=cfg.UPCOMING_LIMIT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Initial load runs in the background; a hung store must not block startup.
        initial_load = asyncio.create_task(model.load())
        yield
        if not initial_load.done():
            initial_load.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await initial_load
        aclose = getattr(model.loader, "aclose", None)
        if aclose is not None:
            await aclose()

    app = FastAPI(
        title="Courseboard API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.dashboard_model = model

    # Import routers inside create_app() to avoid circular imports at module load time
    from courseboard.api.routers.dashboard import router as dashboard_router

    app.include_router(dashboard_router)

    @app.exception_handler(NotLoadedError)
    def _not_loaded(request: Request, exc: NotLoadedError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message})

    @app.exception_handler(CourseboardError)
    def _courseboard_error(request: Request, exc: CourseboardError) -> JSONResponse:
        logger.error("Unhandled %s: %s", type(exc).__name__, exc.message)
        return JSONResponse(status_code=500, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
