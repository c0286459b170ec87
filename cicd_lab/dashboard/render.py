"""HTML rendering of the dashboard view state."""

from __future__ import annotations

import math
from datetime import datetime
from html import escape

from cicd_lab.dashboard.state import ViewState

_STYLE = """\
body { font-family: system-ui, sans-serif; background: #0f172a; color: #e2e8f0; margin: 0; }
header, footer { text-align: center; padding: 1.5rem; }
.dashboard { display: grid; grid-template-columns: repeat(auto-fit, minmax(18rem, 1fr));
  gap: 1.5rem; max-width: 64rem; margin: 0 auto; padding: 0 1.5rem; }
.card { background: #1e293b; border-radius: 0.75rem; padding: 1.25rem; }
.info-item { display: flex; justify-content: space-between; padding: 0.4rem 0; }
.info-label { color: #94a3b8; }
.status-badge.online { color: #4ade80; }
.status-badge.offline { color: #f87171; }
.error-message { background: #7f1d1d; max-width: 64rem; margin: 0 auto 1.5rem; padding: 1rem;
  border-radius: 0.5rem; }
.empty-state { color: #94a3b8; text-align: center; padding: 1rem; }
.actions { text-align: center; padding: 1.5rem; }
"""


def format_uptime(seconds: float) -> str:
    """Format an uptime in seconds as ``"<h>h <m>m <s>s"``, flooring each unit."""
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return f"{hours}h {minutes}m {secs}s"


def format_clock(moment: datetime) -> str:
    """Local wall-clock time of ``moment``."""
    return moment.astimezone().strftime("%H:%M:%S")


def _item(label: str, value: str) -> str:
    return (
        '<div class="info-item">'
        f'<span class="info-label">{escape(label)}</span>'
        f'<span class="info-value">{escape(value)}</span>'
        "</div>"
    )


def _empty(text: str) -> str:
    return f'<div class="empty-state">{escape(text)}</div>'


def _health_card(state: ViewState) -> str:
    if state.loading:
        body = _empty("Checking connection...")
    else:
        connected = state.is_connected
        rows = [
            '<div class="info-item"><span class="info-label">Status</span>'
            f'<span class="status-badge {"online" if connected else "offline"}">'
            f'{"Connected" if connected else "Disconnected"}</span></div>'
        ]
        if state.health is not None:
            rows.append(_item("Uptime", format_uptime(state.health.uptime)))
            rows.append(_item("Last Check", format_clock(state.health.timestamp)))
        body = "".join(rows)
    return f'<section class="card"><h2>Backend Status</h2>{body}</section>'


def _info_card(state: ViewState) -> str:
    if state.loading:
        body = _empty("Loading...")
    elif state.info is not None:
        info = state.info
        body = "".join(
            [
                _item("Name", info.name),
                _item("Version", f"v{info.version}"),
                _item("Environment", info.environment),
                _item("Runtime", info.nodeVersion),
            ]
        )
    else:
        body = _empty("No data available")
    return f'<section class="card"><h2>Service Info</h2>{body}</section>'


def _message_card(state: ViewState) -> str:
    if state.loading:
        body = _empty("Loading...")
    elif state.message:
        body = (
            f'<p class="message-text">{escape(state.message)}</p>'
            f'<p class="message-timestamp">Last updated: {format_clock(state.last_refreshed_at)}</p>'
        )
    else:
        body = _empty("No message received")
    return f'<section class="card"><h2>API Response</h2>{body}</section>'


def render_dashboard(state: ViewState, api_url: str, refresh_interval_s: float) -> str:
    """Render the full dashboard page for ``state``."""
    error = f'<div class="error-message">&#9888; {escape(state.error)}</div>' if state.error else ""
    disabled = " disabled" if state.loading else ""
    label = "Refreshing..." if state.loading else "Refresh Data"
    reload_s = max(1, math.ceil(refresh_interval_s))

    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f'<meta http-equiv="refresh" content="{reload_s}">'
        "<title>K8s CI/CD Lab</title>"
        f"<style>{_STYLE}</style></head><body>"
        "<header><h1>K8s CI/CD Lab</h1><p>FastAPI Microservices Dashboard</p></header>"
        f"{error}"
        '<main class="dashboard">'
        f"{_health_card(state)}{_info_card(state)}{_message_card(state)}"
        "</main>"
        '<div class="actions">'
        f'<form method="post" action="/refresh"><button type="submit"{disabled}>{label}</button></form>'
        f'<a href="{escape(api_url)}/api/health" target="_blank" rel="noopener">View Raw API</a>'
        "</div>"
        "<footer><p>Built for Kubernetes CI/CD demonstration</p></footer>"
        "</body></html>"
    )
