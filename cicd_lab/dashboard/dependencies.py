"""FastAPI dependency injection via Depends()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from cicd_lab.dashboard.config import DashboardSettings
    from cicd_lab.dashboard.poller import DashboardPoller


def get_settings(request: Request) -> DashboardSettings:
    return request.app.state.settings


def get_poller(request: Request) -> DashboardPoller:
    return request.app.state.poller
