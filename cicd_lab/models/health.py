"""Health snapshot model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthSnapshot(BaseModel):
    """Point-in-time health of one backend process.

    ``status`` is always ``"ok"``: the backend has no degraded state.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"]
    timestamp: datetime
    uptime: float = Field(ge=0, description="Seconds since the backend started")
