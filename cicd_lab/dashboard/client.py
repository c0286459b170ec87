"""Async HTTP client for the backend's three read endpoints."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import httpx

from cicd_lab.exceptions import FetchError
from cicd_lab.models.health import HealthSnapshot
from cicd_lab.models.info import ServiceInfo

logger = logging.getLogger(__name__)

HEALTH_PATH = "/api/health"
INFO_PATH = "/api/info"
GREETING_PATH = "/api"


@dataclass(frozen=True)
class BackendSnapshot:
    """Results of one successful fan-out over the three endpoints."""

    health: HealthSnapshot
    info: ServiceInfo
    message: str


class BackendClient:
    """Fetch health, info and greeting from the backend concurrently."""

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout_s, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_all(self) -> BackendSnapshot:
        """Issue all three reads at once and return them together.

        Raises:
            FetchError: any request failed, returned a non-success status, or
                returned a body that does not parse.
        """
        health_res, info_res, message_res = await asyncio.gather(
            self._get(HEALTH_PATH),
            self._get(INFO_PATH),
            self._get(GREETING_PATH),
        )

        try:
            health = HealthSnapshot.model_validate(health_res.json())
            info = ServiceInfo.model_validate(info_res.json())
        except ValueError as exc:
            raise FetchError(f"Malformed response body: {exc}") from exc

        return BackendSnapshot(health=health, info=info, message=message_res.text)

    async def _get(self, path: str) -> httpx.Response:
        try:
            response = await self._http.get(path)
        except (httpx.HTTPError, httpx.InvalidURL, RuntimeError) as exc:
            raise FetchError(f"GET {path} failed: {exc!r}") from exc

        if not response.is_success:
            raise FetchError(f"GET {path} returned HTTP {response.status_code}")
        return response
