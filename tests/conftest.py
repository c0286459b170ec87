"""Shared test fixtures for the K8s CI/CD lab."""

from __future__ import annotations

import asyncio
from collections import defaultdict, deque
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cicd_lab.backend.config import Settings
from cicd_lab.dashboard.config import DashboardSettings

HEALTH_PAYLOAD = {"status": "ok", "timestamp": "2024-01-01T00:00:00Z", "uptime": 5}
INFO_PAYLOAD = {"name": "X", "version": "1.0.0", "environment": "dev", "nodeVersion": "v20"}
GREETING_TEXT = "hi"


@pytest.fixture
def backend_settings(tmp_path: Path) -> Settings:
    """Backend settings with a VERSION file under tmp_path."""
    version_file = tmp_path / "VERSION"
    version_file.write_text("2.3.4\n")
    return Settings(
        app_name="Lab Test Backend",
        environment="test",
        version_file=version_file,
        cors_origins="http://dashboard.test",
        log_level="WARNING",
    )


@pytest.fixture
def dashboard_settings() -> DashboardSettings:
    return DashboardSettings(
        api_url="http://backend.test",
        refresh_interval_s=30.0,
        request_timeout_s=1.0,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def backend_app(backend_settings: Settings):
    """Real backend app with lifespan started."""
    from cicd_lab.backend.main import create_app

    app = create_app(settings=backend_settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def app_client(backend_app):
    """AsyncClient backed by the real backend app."""
    transport = ASGITransport(app=backend_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@dataclass
class Reply:
    """One scripted backend response."""

    status: int = 200
    json: Any = None
    text: str | None = None
    gate: asyncio.Event | None = None
    connect_error: bool = False

    def build(self) -> httpx.Response:
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.json)


class ScriptedBackend:
    """httpx MockTransport handler replaying queued replies per path.

    Queued replies are consumed in order; once a path's queue is empty its
    default reply is used.
    """

    def __init__(self):
        self.defaults: dict[str, Reply] = {
            "/api/health": Reply(json=HEALTH_PAYLOAD),
            "/api/info": Reply(json=INFO_PAYLOAD),
            "/api": Reply(text=GREETING_TEXT),
        }
        self._queued: dict[str, deque[Reply]] = defaultdict(deque)
        self.calls: list[str] = []

    def queue(self, path: str, reply: Reply) -> None:
        self._queued[path].append(reply)

    def queue_cycle(
        self,
        health: dict = HEALTH_PAYLOAD,
        info: dict = INFO_PAYLOAD,
        message: str = GREETING_TEXT,
        gate: asyncio.Event | None = None,
    ) -> None:
        """Queue one full cycle of successful replies; ``gate`` holds back health."""
        self.queue("/api/health", Reply(json=health, gate=gate))
        self.queue("/api/info", Reply(json=info))
        self.queue("/api", Reply(text=message))

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        queue = self._queued[path]
        reply = queue.popleft() if queue else self.defaults[path]
        if reply.gate is not None:
            await reply.gate.wait()
        if reply.connect_error:
            raise httpx.ConnectError("connection refused", request=request)
        return reply.build()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def scripted_backend() -> ScriptedBackend:
    return ScriptedBackend()


async def wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Yield to the event loop until ``predicate()`` holds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.005)
