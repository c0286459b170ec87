"""FastAPI application factory for the lab backend."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cicd_lab.backend.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build the info provider."""
    settings: Settings = app.state.settings

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    from cicd_lab.backend.services.info_provider import InfoProvider

    provider = InfoProvider.from_settings(settings, version=app.state.version)
    app.state.info_provider = provider

    info = provider.get_info()
    logger.info(
        "%s %s started (environment=%s, python=%s)",
        info.name,
        info.version,
        info.environment,
        info.nodeVersion,
    )

    yield

    logger.info("%s stopped", info.name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    version = settings.resolve_version()

    app = FastAPI(
        title=settings.app_name,
        version=version,
        summary="Greeting, health and build metadata for the K8s CI/CD lab",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.version = version

    from cicd_lab.backend.middleware.access_log import AccessLogMiddleware

    # Middleware is applied in reverse order (last added = first executed)
    app.add_middleware(AccessLogMiddleware, quiet_paths={"/api/health"})
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parse_cors_origins(),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from cicd_lab.backend.routers import api

    app.include_router(api.router)

    return app


# Default app instance for uvicorn
app = create_app()
