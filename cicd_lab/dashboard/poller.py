"""Periodic refresh of the dashboard view state from the backend."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Callable

from cicd_lab.dashboard.state import (
    ViewState,
    apply_failure,
    apply_success,
    begin_cycle,
    finish_cycle,
    initial_state,
)
from cicd_lab.exceptions import FetchError

if TYPE_CHECKING:
    from cicd_lab.dashboard.client import BackendClient

logger = logging.getLogger(__name__)


class OverlapPolicy(str, Enum):
    """What to do with a refresh trigger while another cycle is in flight."""

    SINGLE_FLIGHT = "single_flight"  # ignore the new trigger
    LAST_WINS = "last_wins"  # run it; whichever cycle resolves last is displayed


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DashboardPoller:
    """Own the dashboard ``ViewState`` and keep it fresh.

    ``start()`` runs a cycle immediately and then every ``interval_s`` seconds
    without waiting for earlier cycles to finish. ``refresh()`` is the manual
    trigger and runs the same cycle.
    """

    def __init__(
        self,
        client: BackendClient,
        interval_s: float = 30.0,
        overlap_policy: OverlapPolicy = OverlapPolicy.SINGLE_FLIGHT,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._client = client
        self._interval_s = interval_s
        self._policy = overlap_policy
        self._clock = clock
        self._state = initial_state(clock())
        self._sequence = 0
        self._in_flight = 0
        self._task: asyncio.Task | None = None
        self._cycles: set[asyncio.Task] = set()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def overlap_policy(self) -> OverlapPolicy:
        return self._policy

    async def start(self) -> None:
        """Start the periodic refresh loop in background."""
        self._task = asyncio.create_task(self._poll_loop(), name="dashboard-poller")
        logger.info(
            "DashboardPoller started (backend=%s, interval=%.1fs, policy=%s)",
            self._client.base_url,
            self._interval_s,
            self._policy.value,
        )

    async def stop(self) -> None:
        """Cancel the timer and let in-flight cycles settle."""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._cycles:
            await asyncio.gather(*self._cycles, return_exceptions=True)
        logger.info("DashboardPoller stopped")

    async def refresh(self) -> bool:
        """Run one refresh cycle.

        Returns False without doing anything when the single-flight policy
        rejects the trigger, True once the cycle has completed.
        """
        if self._policy is OverlapPolicy.SINGLE_FLIGHT and self._in_flight:
            logger.debug("Refresh skipped: cycle %d still in flight", self._sequence)
            return False

        self._sequence += 1
        cycle = self._sequence
        self._in_flight += 1
        self._state = begin_cycle(self._state)

        try:
            snapshot = await self._client.fetch_all()
        except FetchError as exc:
            logger.warning("Refresh cycle %d failed: %s", cycle, exc.detail or exc)
            self._state = apply_failure(self._state, str(exc))
        else:
            self._state = apply_success(self._state, snapshot, cycle, self._clock())
            logger.debug("Refresh cycle %d applied", cycle)
        finally:
            self._in_flight -= 1
            self._state = finish_cycle(self._state)

        return True

    async def _poll_loop(self) -> None:
        while True:
            self._spawn_cycle()
            await asyncio.sleep(self._interval_s)

    def _spawn_cycle(self) -> None:
        task = asyncio.create_task(self.refresh(), name="refresh-cycle")
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)
