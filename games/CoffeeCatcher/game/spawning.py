"""
Coffee Catcher - Item spawning with difficulty progression.

SpawnScheduler drops one item every `interval` ticks; DifficultyController
shortens that interval on a fixed tick cadence, down to a floor. Fall
speed grows with the score at spawn time only, so an item keeps the speed
it was born with.
"""
import random
from typing import Optional

from catcher.logging import get_logger
from models import CatcherConfig

from .entities.falling_item import FallingItem, FallingItemPool

log = get_logger('spawning')


class RandomSource:
    """Seedable uniform generator for spawn position and speed.

    With a seed the sequence is reproducible and reset() rewinds it;
    without one it draws from system entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def uniform(self, low: float, high: float) -> float:
        """Return a float in [low, high]."""
        return self._random.uniform(low, high)

    def reset(self) -> None:
        """Rewind to the start of the seeded sequence."""
        if self._seed is not None:
            self._random.seed(self._seed)


class SpawnScheduler:
    """Countdown-driven spawner.

    At most one item is created per tick.
    """

    def __init__(self, config: CatcherConfig):
        """Initialize the scheduler.

        Args:
            config: Engine configuration (interval, item size, spawn range)
        """
        self._config = config
        self.interval = config.initial_spawn_interval
        self.countdown = config.initial_spawn_countdown
        self.spawned_total = 0

    def reset(self) -> None:
        """Restore the initial interval and countdown."""
        self.interval = self._config.initial_spawn_interval
        self.countdown = self._config.initial_spawn_countdown
        self.spawned_total = 0

    def tick(self, pool: FallingItemPool, rng: RandomSource, score: int) -> Optional[FallingItem]:
        """Count down one tick and spawn when the countdown runs out.

        Args:
            pool: Pool receiving the new item
            rng: Random source for position and speed
            score: Current score, biases the new item's fall speed

        Returns:
            The spawned item, or None if nothing spawned this tick
        """
        self.countdown = max(0, self.countdown - 1)
        if self.countdown > 0:
            return None

        cfg = self._config
        size = float(cfg.item_size)
        item = FallingItem(
            x=rng.uniform(cfg.item_min_x, cfg.item_max_x),
            y=-size,
            width=size,
            height=size,
            vy=rng.uniform(cfg.fall_speed_min, cfg.fall_speed_max) + score * cfg.score_speed_bias,
        )
        pool.add(item)
        self.countdown = self.interval
        self.spawned_total += 1
        log.trace("spawned item #%d at x=%.1f vy=%.2f", self.spawned_total, item.x, item.vy)
        return item


class DifficultyController:
    """Shortens the spawn interval every `difficulty_step_ticks` ticks.

    This is the only code that changes SpawnScheduler.interval after
    construction.
    """

    def __init__(self, config: CatcherConfig):
        self._step_ticks = config.difficulty_step_ticks
        self._step_amount = config.difficulty_step_amount
        self._floor = config.spawn_interval_floor
        self.elapsed_ticks = 0

    def reset(self) -> None:
        self.elapsed_ticks = 0

    def on_tick(self, scheduler: SpawnScheduler) -> bool:
        """Advance the ramp clock by one tick.

        Args:
            scheduler: Scheduler whose interval may be shortened

        Returns:
            True if the interval changed this tick
        """
        self.elapsed_ticks += 1
        if self.elapsed_ticks % self._step_ticks != 0:
            return False
        if scheduler.interval <= self._floor:
            return False

        scheduler.interval = max(self._floor, scheduler.interval - self._step_amount)
        log.debug("difficulty step at tick %d: spawn interval now %d",
                  self.elapsed_ticks, scheduler.interval)
        return True
