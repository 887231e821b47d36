"""
Immutable per-tick view of the simulation for the renderer.

A FrameSnapshot shares no mutable state with the engine: rectangles are
frozen pydantic models and the item list is a tuple, so a renderer can
hold on to a snapshot for as long as it likes.
"""

from dataclasses import dataclass
from typing import Tuple

from catcher.game_state import GameState
from models import Rectangle


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only state of one engine at the end of a tick."""
    tick: int
    player: Rectangle
    items: Tuple[Rectangle, ...]
    score: int
    misses: int
    miss_limit: int
    state: GameState
    spawn_interval: int

    @property
    def running(self) -> bool:
        """True while the game is being played."""
        return self.state == GameState.PLAYING

    @property
    def item_count(self) -> int:
        return len(self.items)
