"""Shared fixtures for edgetile tests."""

import pytest

from edgetile.config.settings import MemorySettingsStore, TilingSettings
from edgetile.core.host import VirtualHost
from edgetile.tiling.engine import TilingEngine
from edgetile.tiling.gaps import GapSizeController
from edgetile.tiling.rect import Rect

WORK_AREA = Rect(0, 0, 1000, 800)
FRAME = Rect(100, 100, 400, 300)


class FakeClock:
    """Controllable millisecond clock."""

    def __init__(self, start: int = 1_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> MemorySettingsStore:
    """Settings with no gap and three-step sequences."""
    return MemorySettingsStore(
        TilingSettings(
            gap_size=0,
            tiling_steps_center="1,0.75,0.5",
            tiling_steps_side="0.5,0.25,0.75",
        )
    )


@pytest.fixture
def host() -> VirtualHost:
    """Host with one focused window (id 1) and a second one (id 2)."""
    h = VirtualHost(WORK_AREA)
    h.add_window(2, Rect(50, 50, 300, 200), focus=False)
    h.add_window(1, FRAME, maximized=True)
    return h


@pytest.fixture
def engine(host, settings, clock) -> TilingEngine:
    return TilingEngine(host, settings, clock=clock)


@pytest.fixture
def gaps(host, settings) -> GapSizeController:
    return GapSizeController(settings, host)
