"""
Coffee Catcher platform package.

Provides:
- logging: per-module loggers configured from the environment
- game_state: GameState enum shared by the engine and the front end
"""

from catcher.game_state import GameState
from catcher.logging import get_logger, configure_logging, disable_logging

__all__ = [
    'GameState',
    'get_logger',
    'configure_logging',
    'disable_logging',
]
