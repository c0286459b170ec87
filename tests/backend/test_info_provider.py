"""Tests for InfoProvider."""

from __future__ import annotations

import platform
from datetime import datetime, timedelta, timezone

import pytest

from cicd_lab.backend.config import Settings
from cicd_lab.backend.services.info_provider import GREETING, InfoProvider


class FakeClock:
    """Wall clock and monotonic counter advanced by hand."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.ticks = 100.0

    def wall(self) -> datetime:
        return self.now

    def monotonic(self) -> float:
        return self.ticks

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)
        self.ticks += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def provider(clock: FakeClock) -> InfoProvider:
    return InfoProvider(
        name="Lab",
        version="1.0.0",
        environment="staging",
        runtime_version="3.12.0",
        clock=clock.wall,
        monotonic=clock.monotonic,
    )


def test_greeting_is_fixed(provider: InfoProvider):
    assert provider.get_greeting() == GREETING
    assert provider.get_greeting() == provider.get_greeting()


def test_health_starts_at_zero_uptime(provider: InfoProvider, clock: FakeClock):
    snap = provider.get_health()
    assert snap.status == "ok"
    assert snap.uptime == 0
    assert snap.timestamp == clock.now


def test_health_tracks_elapsed_time(provider: InfoProvider, clock: FakeClock):
    clock.advance(3661)
    snap = provider.get_health()
    assert snap.uptime == pytest.approx(3661)
    assert snap.timestamp == datetime(2024, 1, 1, 1, 1, 1, tzinfo=timezone.utc)


def test_health_uptime_never_negative(clock: FakeClock):
    readings = iter([10.0, 9.0])
    provider = InfoProvider("Lab", "1.0.0", "dev", monotonic=lambda: next(readings), clock=clock.wall)
    assert provider.get_health().uptime == 0


def test_info_is_constant(provider: InfoProvider, clock: FakeClock):
    first = provider.get_info()
    clock.advance(60)
    assert provider.get_info() == first
    assert first.nodeVersion == "3.12.0"


def test_runtime_version_defaults_to_interpreter():
    provider = InfoProvider("Lab", "1.0.0", "dev")
    assert provider.get_info().nodeVersion == platform.python_version()


def test_from_settings(tmp_path):
    settings = Settings(app_name="From Settings", environment="", version_file=tmp_path / "missing")
    info = InfoProvider.from_settings(settings, version="9.9.9").get_info()
    assert info.name == "From Settings"
    assert info.version == "9.9.9"
    assert info.environment == "development"


def test_empty_metadata_rejected():
    with pytest.raises(ValueError):
        InfoProvider(name="", version="1.0.0", environment="dev")
