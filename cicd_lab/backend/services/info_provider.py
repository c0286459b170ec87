"""Greeting, health snapshot and service metadata for the lab backend."""

from __future__ import annotations

import platform
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from cicd_lab.models.health import HealthSnapshot
from cicd_lab.models.info import ServiceInfo

if TYPE_CHECKING:
    from cicd_lab.backend.config import Settings

GREETING = "Hello from the K8s CI/CD Lab Backend!"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InfoProvider:
    """Answer the three read-only queries served under ``/api``.

    Service metadata is fixed at construction; health is computed per call
    from the wall clock and a monotonic uptime counter.
    """

    def __init__(
        self,
        name: str,
        version: str,
        environment: str,
        runtime_version: str | None = None,
        clock: Callable[[], datetime] = _utcnow,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._info = ServiceInfo(
            name=name,
            version=version,
            environment=environment,
            nodeVersion=runtime_version or platform.python_version(),
        )
        self._clock = clock
        self._monotonic = monotonic
        self._started = monotonic()

    @classmethod
    def from_settings(cls, settings: Settings, version: str) -> InfoProvider:
        return cls(
            name=settings.app_name,
            version=version,
            environment=settings.environment,
        )

    def get_greeting(self) -> str:
        return GREETING

    def get_health(self) -> HealthSnapshot:
        uptime = max(0.0, self._monotonic() - self._started)
        return HealthSnapshot(status="ok", timestamp=self._clock(), uptime=uptime)

    def get_info(self) -> ServiceInfo:
        return self._info
