"""
Models library for Coffee Catcher.

This package provides the Pydantic data models shared by the engine and
the front end:
- Primitives: Rectangle
- Catcher: CatcherConfig (validated engine configuration)

Usage:
    >>> from models import Rectangle, CatcherConfig
    >>> config = CatcherConfig(arena_width=480, arena_height=800, seed=7)
"""

from .primitives import Rectangle
from .catcher import CatcherConfig, round_half_up

__all__ = [
    'Rectangle',
    'CatcherConfig',
    'round_half_up',
]
