"""Dashboard page, view state and manual refresh endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from cicd_lab.dashboard.dependencies import get_poller, get_settings
from cicd_lab.dashboard.render import render_dashboard
from cicd_lab.dashboard.state import ViewState
from cicd_lab.exceptions import RefreshInFlightError

router = APIRouter(tags=["dashboard"])


@router.get("/", response_class=HTMLResponse)
async def dashboard_page(
    poller=Depends(get_poller),
    settings=Depends(get_settings),
) -> HTMLResponse:
    html = render_dashboard(
        poller.state,
        api_url=settings.api_url,
        refresh_interval_s=settings.refresh_interval_s,
    )
    return HTMLResponse(html)


@router.get("/api/state", response_model=ViewState)
async def view_state(poller=Depends(get_poller)) -> ViewState:
    return poller.state


@router.post("/refresh")
async def manual_refresh(poller=Depends(get_poller)) -> RedirectResponse:
    if not await poller.refresh():
        raise RefreshInFlightError()
    return RedirectResponse("/", status_code=303)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
