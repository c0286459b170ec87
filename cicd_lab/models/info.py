"""Service metadata model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ServiceInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    environment: str = Field(min_length=1)
    # Wire name kept for existing dashboard clients; carries the interpreter version.
    nodeVersion: str = Field(min_length=1)
