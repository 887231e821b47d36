"""Coffee Catcher simulation engine.

One SimulationEngine owns every entity of a game. The host calls tick()
once per frame and hands the returned snapshot to its renderer; input
collaborators write to engine.input between ticks.

Per-tick order while PLAYING:
    player move -> spawn -> difficulty -> items fall -> collisions -> miss limit
"""

from typing import Optional

from catcher.game_state import GameState
from catcher.logging import get_logger
from models import CatcherConfig

from .game.entities.falling_item import FallingItemPool
from .game.entities.player import Player, PlayerController
from .game.physics.collision import CollisionDetector
from .game.spawning import DifficultyController, RandomSource, SpawnScheduler
from .game.state_machine import GameStateMachine
from .input.input_state import InputState
from .snapshot import FrameSnapshot

log = get_logger('engine')


class SimulationEngine:
    """Deterministic, single-threaded catch-the-falling-items simulation.

    Usage:
        engine = SimulationEngine(CatcherConfig(seed=42))
        engine.input.set_right(True)
        frame = engine.tick()
        draw(frame.player, frame.items, frame.score)
    """

    def __init__(
        self,
        config: Optional[CatcherConfig] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """Create an engine in the PLAYING state.

        Args:
            config: Validated configuration (defaults if None)
            random_source: Random source override; seeded from config.seed if None
        """
        self.config = config or CatcherConfig()
        self.input = InputState()
        self._rng = random_source or RandomSource(self.config.seed)

        self._player = Player(self.config)
        self._controller = PlayerController(self.config)
        self._pool = FallingItemPool()
        self._scheduler = SpawnScheduler(self.config)
        self._difficulty = DifficultyController(self.config)
        self._collisions = CollisionDetector(self.config)
        self._state = GameStateMachine(self.config.miss_limit)

        self.tick_count = 0

        log.debug("engine created: arena=%sx%s player=%dpx item=%dpx seed=%s",
                  self.config.arena_width, self.config.arena_height,
                  self.config.player_size, self.config.item_size, self.config.seed)

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def state(self) -> GameState:
        return self._state.state

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def misses(self) -> int:
        return self._state.misses

    @property
    def spawn_interval(self) -> int:
        return self._scheduler.interval

    @property
    def spawned_total(self) -> int:
        return self._scheduler.spawned_total

    def snapshot(self) -> FrameSnapshot:
        """Build the read-only view of the current state."""
        return FrameSnapshot(
            tick=self.tick_count,
            player=self._player.rect,
            items=tuple(self._pool.rects()),
            score=self._state.score,
            misses=self._state.misses,
            miss_limit=self._state.miss_limit,
            state=self._state.state,
            spawn_interval=self._scheduler.interval,
        )

    # =========================================================================
    # Simulation
    # =========================================================================

    def tick(self) -> FrameSnapshot:
        """Advance one tick and return the resulting snapshot.

        A pending restart request is consumed first. While GAME_OVER the
        world is frozen and only the snapshot is produced.
        """
        if self.input.consume_restart():
            self.restart()

        if self._state.running:
            self._step()

        return self.snapshot()

    def _step(self) -> None:
        """One PLAYING tick, in the fixed order documented above."""
        self._controller.advance(self._player, self.input.net_direction())
        self._scheduler.tick(self._pool, self._rng, self._state.score)
        self._difficulty.on_tick(self._scheduler)
        self._pool.advance_all()
        self._collisions.resolve(self._player, self._pool, self._state)
        self._state.check_miss_limit()
        self.tick_count += 1

    def restart(self) -> bool:
        """Start a new game if the current one is over.

        Ignored while PLAYING so stray input cannot reset a live game.

        Returns:
            True if the engine was reset
        """
        if self._state.running:
            log.trace("restart ignored while playing")
            return False

        self._state.reset()
        self._player.reset()
        self._pool.clear()
        self._scheduler.reset()
        self._difficulty.reset()
        self._rng.reset()
        self.tick_count = 0
        log.info("game restarted")
        return True
