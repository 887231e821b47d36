"""Pytest fixtures for Coffee Catcher tests.

Default arena 480x800 gives: player 125px at x=177.5 (range 20..335),
speed 9, catch zone x 190..290 / y 675.5..775.5, items 58px spawning in
x 20..402, miss line at y=850.
"""
import pytest

from catcher.logging import disable_logging, reset_logging
from games.CoffeeCatcher.engine import SimulationEngine
from games.CoffeeCatcher.game.spawning import RandomSource
from models import CatcherConfig


class LowRandom(RandomSource):
    """Always returns the low bound: items spawn at the left margin, vy=3."""

    def uniform(self, low: float, high: float) -> float:
        return low


class MidRandom(RandomSource):
    """Always returns the midpoint: items spawn at x=211 (over the centered player), vy=4."""

    def uniform(self, low: float, high: float) -> float:
        return (low + high) / 2


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence engine logging for every test."""
    disable_logging()
    yield
    reset_logging()


@pytest.fixture
def config():
    """Default configuration with a fixed seed."""
    return CatcherConfig(seed=1234)


@pytest.fixture
def low_engine(config):
    """Engine whose items always fall far left of the centered player."""
    return SimulationEngine(config, random_source=LowRandom())


@pytest.fixture
def mid_engine(config):
    """Engine whose items always fall straight onto the centered player."""
    return SimulationEngine(config, random_source=MidRandom())


@pytest.fixture
def run_ticks():
    """Tick an engine `count` times and return the last snapshot."""
    def _run(engine, count):
        frame = engine.snapshot()
        for _ in range(count):
            frame = engine.tick()
        return frame
    return _run


@pytest.fixture
def low_random():
    return LowRandom()


@pytest.fixture
def mid_random():
    return MidRandom()
