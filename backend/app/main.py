"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.routes import api_router
from app.config import AppSettings, get_settings
from app.core.logging import setup_logging
from app.core.telemetry import setup_telemetry

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the dashboard API, mounting static dashboards when present."""

    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, version="0.1.0")
    setup_telemetry(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["traceparent", "tracestate", "x-request-id"],
    )

    @app.on_event("startup")
    async def startup() -> None:
        logger.info("Sales dashboard configuration: %s", settings.dict_for_logging())
        if not settings.ido_token:
            logger.warning("No IDO token configured; upstream loads will be rejected")

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Return service readiness metadata."""

        return {"status": "ok", "timestamp": datetime.now().isoformat()}

    app.include_router(api_router)

    # Mounted last so /api and /health take precedence over static files
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found; serving API only", static_dir)

    return app


setup_logging()
app = create_app()

__all__ = ["app", "create_app"]
