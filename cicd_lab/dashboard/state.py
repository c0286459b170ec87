"""Dashboard view state and its refresh-cycle transitions.

A ``ViewState`` is an immutable value. The poller owns the current one and
replaces it only through the transition functions below, so a refresh cycle
either swaps in all data fields together or leaves them untouched.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from cicd_lab.models.health import HealthSnapshot
from cicd_lab.models.info import ServiceInfo

if TYPE_CHECKING:
    from cicd_lab.dashboard.client import BackendSnapshot


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    health: HealthSnapshot | None = None
    info: ServiceInfo | None = None
    message: str = ""
    loading: bool = True
    error: str | None = None
    last_refreshed_at: datetime
    cycle: int = 0  # sequence number of the cycle whose data is displayed

    @property
    def is_connected(self) -> bool:
        return self.health is not None and self.health.status == "ok"


def initial_state(now: datetime) -> ViewState:
    return ViewState(last_refreshed_at=now)


def begin_cycle(state: ViewState) -> ViewState:
    return state.model_copy(update={"loading": True, "error": None})


def apply_success(
    state: ViewState, snapshot: BackendSnapshot, cycle: int, now: datetime
) -> ViewState:
    """Replace all data fields with one cycle's results."""
    return state.model_copy(
        update={
            "health": snapshot.health,
            "info": snapshot.info,
            "message": snapshot.message,
            "last_refreshed_at": now,
            "error": None,
            "cycle": cycle,
        }
    )


def apply_failure(state: ViewState, error: str) -> ViewState:
    """Record a failed cycle; previously displayed data stays as-is."""
    return state.model_copy(update={"error": error})


def finish_cycle(state: ViewState) -> ViewState:
    return state.model_copy(update={"loading": False})
