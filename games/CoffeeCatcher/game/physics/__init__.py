"""Coffee Catcher collision detection."""

from .collision import CollisionDetector

__all__ = [
    'CollisionDetector',
]
