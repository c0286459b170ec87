"""Custom exceptions and FastAPI exception handlers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

FETCH_FAILED_MESSAGE = "Failed to fetch data from backend"


class AppError(Exception):
    """Base application error."""

    def __init__(self, error: str, message: str, status_code: int = 400, details: dict | None = None):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class RefreshInFlightError(AppError):
    def __init__(self, message: str = "A refresh cycle is already in flight"):
        super().__init__("REFRESH_IN_FLIGHT", message, 409)


class FetchError(Exception):
    """A refresh cycle could not read one of the backend endpoints.

    ``str(exc)`` is always the fixed display message; ``detail`` carries the
    underlying reason for the logs.
    """

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(FETCH_FAILED_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""

    @app.exception_handler(AppError)
    async def _app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
        body: dict = {"error": exc.error, "message": exc.message}
        if exc.details:
            body["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=body)
