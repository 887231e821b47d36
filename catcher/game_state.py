"""Standard game states reported by the Coffee Catcher engine.

The renderer and the front end only ever see one of these values via
the frame snapshot; they never inspect engine internals.
"""
from enum import Enum


class GameState(Enum):
    """Externally visible game states.

    States:
        PLAYING: Active gameplay in progress, ticks mutate the world
        GAME_OVER: Miss limit reached, the world is frozen until restart
    """
    PLAYING = "playing"
    GAME_OVER = "game_over"
