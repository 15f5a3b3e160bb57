"""Pytest fixtures for MiniRace game tests."""
import os
import random

# Headless pygame for surface and font tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from games.MiniRace.config import RaceSettings
from games.MiniRace.game_mode import MiniRaceMode
from minirace.logging import disable_logging


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep test output free of game log lines."""
    disable_logging()
    yield


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    """Default tunables, independent of any local .env."""
    return RaceSettings(
        car_width=100.0,
        car_height=200.0,
        car_bottom_margin=20.0,
        obstacle_height=200.0,
        spawn_interval_ms=1500,
        base_speed=10.0,
        speed_jitter=10.0,
    )


@pytest.fixture
def game(settings, clock, rng):
    """A game laid out on a 1000x2000 playfield (lanes at x=200 / 700, car at y=1780)."""
    mode = MiniRaceMode(settings=settings, clock=clock, rng=rng)
    mode.on_start(1000, 2000)
    return mode
