"""Coffee Catcher game entities."""

from .player import Player, PlayerController
from .falling_item import FallingItem, FallingItemPool

__all__ = [
    'Player', 'PlayerController',
    'FallingItem', 'FallingItemPool',
]
