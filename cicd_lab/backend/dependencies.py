"""FastAPI dependency injection via Depends()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from cicd_lab.backend.config import Settings
    from cicd_lab.backend.services.info_provider import InfoProvider


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_info_provider(request: Request) -> InfoProvider:
    return request.app.state.info_provider
