"""Backend configuration via pydantic-settings."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from cicd_lab import __version__

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "development"

_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(?:[-+][0-9A-Za-z.\-+]+)?$")


class Settings(BaseSettings):
    """Lab backend configuration.

    Loaded from environment variables with the ``LAB_`` prefix.
    """

    model_config = {"env_prefix": "LAB_"}

    # -- Service metadata ----------------------------------------------------
    app_name: str = "K8s CI/CD Lab Backend"
    environment: str = DEFAULT_ENVIRONMENT
    version_file: Path = Path(__file__).resolve().parents[2] / "VERSION"

    # -- HTTP ----------------------------------------------------------------
    cors_origins: str = "*"  # comma-separated
    host: str = "0.0.0.0"
    port: int = 3000

    # -- Misc ----------------------------------------------------------------
    log_level: str = "INFO"

    def resolve_version(self) -> str:
        """Read the build version from ``version_file``, else the package version."""
        try:
            text = self.version_file.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return __version__
        except OSError:
            logger.warning("Could not read %s, using %s", self.version_file, __version__, exc_info=True)
            return __version__

        if not _SEMVER_RE.match(text):
            logger.warning("Ignoring non-semver version %r in %s", text, self.version_file)
            return __version__
        return text

    def parse_cors_origins(self) -> list[str]:
        """Split the comma-separated CORS origin list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @field_validator("environment", mode="before")
    @classmethod
    def _default_environment(cls, v: str | None) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_ENVIRONMENT
        return str(v).strip()

    @field_validator("app_name")
    @classmethod
    def _require_app_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("app_name must not be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, v: str) -> str:
        return v.upper()
