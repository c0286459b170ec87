"""Dashboard configuration via pydantic-settings."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from cicd_lab.dashboard.poller import OverlapPolicy


class DashboardSettings(BaseSettings):
    """Lab dashboard configuration.

    Loaded from environment variables with the ``DASHBOARD_`` prefix.
    """

    model_config = {"env_prefix": "DASHBOARD_"}

    # -- Backend -------------------------------------------------------------
    api_url: str = "http://localhost:3000"
    request_timeout_s: float = Field(default=10.0, gt=0)

    # -- Polling -------------------------------------------------------------
    refresh_interval_s: float = Field(default=30.0, gt=0)
    overlap_policy: OverlapPolicy = OverlapPolicy.SINGLE_FLIGHT

    # -- HTTP ----------------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8080

    # -- Misc ----------------------------------------------------------------
    log_level: str = "INFO"

    @field_validator("api_url")
    @classmethod
    def _normalise_api_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_url must be an http:// or https:// URL")
        return v

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, v: str) -> str:
        return v.upper()
