"""FastAPI application factory for the lab dashboard."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from cicd_lab.dashboard.config import DashboardSettings
from cicd_lab.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the backend client, start/stop the poller."""
    settings: DashboardSettings = app.state.settings

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    from cicd_lab.dashboard.client import BackendClient
    from cicd_lab.dashboard.poller import DashboardPoller

    client = BackendClient(
        settings.api_url,
        timeout_s=settings.request_timeout_s,
        transport=app.state.backend_transport,
    )
    poller = DashboardPoller(
        client,
        interval_s=settings.refresh_interval_s,
        overlap_policy=settings.overlap_policy,
    )
    app.state.poller = poller
    await poller.start()

    yield

    # --- Shutdown ---
    await poller.stop()
    await client.aclose()


def create_app(
    settings: DashboardSettings | None = None,
    backend_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``backend_transport`` replaces the network transport used to reach the
    backend (an in-process ASGI app or a mock).
    """
    if settings is None:
        settings = DashboardSettings()

    from cicd_lab import __version__
    from cicd_lab.models.error import ErrorResponse

    app = FastAPI(
        title="K8s CI/CD Lab Dashboard",
        version=__version__,
        summary="Polls the lab backend and renders its status",
        lifespan=lifespan,
        responses={409: {"model": ErrorResponse}},
    )

    app.state.settings = settings
    app.state.backend_transport = backend_transport

    register_exception_handlers(app)

    from cicd_lab.dashboard.routers import dashboard

    app.include_router(dashboard.router)

    return app


# Default app instance for uvicorn
app = create_app()
