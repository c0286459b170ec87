"""Wire models shared by the backend and the dashboard."""

from cicd_lab.models.error import ErrorResponse
from cicd_lab.models.health import HealthSnapshot
from cicd_lab.models.info import ServiceInfo

__all__ = [
    "ErrorResponse",
    "HealthSnapshot",
    "ServiceInfo",
]
