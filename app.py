"""
app.py: FastAPI application factory.

This is the ASGI application object imported by uvicorn. It wires the
repository and dashboard service onto app.state and registers the router.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from backend.controllers.dashboard_controller import router as dashboard_router
from backend.repository.data_repository import DashboardRepository
from backend.services.dashboard_service import DashboardService
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[DashboardRepository] = None,
) -> FastAPI:
    """
    Build and wire the FastAPI application.

    Every dependency is created here and injected via app.state so tests can
    substitute their own repository or settings.
    """
    settings = settings or get_settings()
    repository = repository or DashboardRepository()
    dashboard_service = DashboardService(repository=repository, settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Startup complete, %s %s ready", settings.app_name, settings.app_version)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(dashboard_router)

    app.state.repository = repository
    app.state.dashboard_service = dashboard_service

    return app


# Module-level app object for uvicorn
app = create_app()
