"""Greeting, health and service info endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from cicd_lab.backend.dependencies import get_info_provider
from cicd_lab.models.health import HealthSnapshot
from cicd_lab.models.info import ServiceInfo

router = APIRouter(prefix="/api", tags=["lab"])


@router.get("", response_class=PlainTextResponse)
async def greeting(provider=Depends(get_info_provider)) -> PlainTextResponse:
    return PlainTextResponse(provider.get_greeting())


@router.get("/health", response_model=HealthSnapshot)
async def health(provider=Depends(get_info_provider)) -> HealthSnapshot:
    return provider.get_health()


@router.get("/info", response_model=ServiceInfo)
async def info(provider=Depends(get_info_provider)) -> ServiceInfo:
    return provider.get_info()
