"""Catch and miss resolution for Coffee Catcher.

Runs once per tick after every item has moved. Each live item is tested
exactly once: a catch is checked first, then the miss line.
"""

from typing import TYPE_CHECKING, Tuple

from models import CatcherConfig, Rectangle

if TYPE_CHECKING:
    from ..entities.player import Player
    from ..entities.falling_item import FallingItem, FallingItemPool
    from ..state_machine import GameStateMachine


class CollisionDetector:
    """Resolves items against the player's catch zone and the miss line."""

    def __init__(self, config: CatcherConfig):
        self._miss_line = config.miss_line

    def is_missed(self, item: 'FallingItem') -> bool:
        """True once the item has fallen past the arena bottom plus tolerance."""
        return item.y > self._miss_line

    def settle(self, item: 'FallingItem', zone: Rectangle, state: 'GameStateMachine') -> bool:
        """Resolve a single item.

        Args:
            item: Item to test
            zone: Player catch zone for this tick
            state: Receives the catch or miss

        Returns:
            True if the item was caught or missed and must be removed
        """
        if zone.overlaps(item.rect):
            state.record_catch()
            return True
        if self.is_missed(item):
            state.record_miss()
            return True
        return False

    def resolve(
        self,
        player: 'Player',
        pool: 'FallingItemPool',
        state: 'GameStateMachine',
    ) -> Tuple[int, int]:
        """Resolve all live items for this tick.

        Args:
            player: Player whose catch zone is tested
            pool: Live items; caught and missed items are removed
            state: Receives catches and misses

        Returns:
            Tuple of (catches, misses) recorded this tick
        """
        zone = player.catch_zone
        score_before, misses_before = state.score, state.misses
        pool.resolve(lambda item: self.settle(item, zone, state))
        return state.score - score_before, state.misses - misses_before
