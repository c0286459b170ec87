"""Per-request access log middleware."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request.

    Paths in ``quiet_paths`` (probe endpoints hit by the kubelet) are logged
    at DEBUG instead of INFO.
    """

    def __init__(self, app, quiet_paths: set[str] | None = None):
        super().__init__(app)
        self._quiet_paths = quiet_paths or set()

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        level = logging.DEBUG if request.url.path in self._quiet_paths else logging.INFO
        logger.log(
            level,
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
