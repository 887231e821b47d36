"""
Shared primitive data types for the simulation engine.

Rectangles are the only geometry the engine needs: the player, every
falling item and the catch zone are axis-aligned boxes whose position is
the top-left corner (pygame convention).
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from typing import Tuple


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Used for bounding boxes, collision detection and the snapshot handed
    to the renderer.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.right
        150.0
        >>> rect.inset(10.0)
        Rectangle(x=105.0, y=105.0, width=40.0, height=40.0)
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    @property
    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame drawing calls."""
        return (self.x, self.y, self.width, self.height)

    def overlaps(self, other: 'Rectangle') -> bool:
        """Check whether the interiors of two rectangles intersect.

        Uses strict inequalities on both axes, so rectangles that only
        share an edge do not overlap.

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
            >>> a.overlaps(Rectangle(x=10.0, y=0.0, width=10.0, height=10.0))
            False
            >>> a.overlaps(Rectangle(x=9.0, y=9.0, width=10.0, height=10.0))
            True
        """
        return (self.x < other.right and
                self.right > other.x and
                self.y < other.bottom and
                self.bottom > other.y)

    def inset(self, amount: float) -> 'Rectangle':
        """Shrink by ``amount`` in each dimension, keeping the same center.

        Half of ``amount`` is removed from every side.

        Args:
            amount: Total reduction in width and in height

        Raises:
            ValueError: If the inset would leave no area
        """
        return Rectangle(
            x=self.x + amount / 2,
            y=self.y + amount / 2,
            width=self.width - amount,
            height=self.height - amount,
        )

    def __repr__(self) -> str:
        return (f"Rectangle(x={self.x}, y={self.y}, "
                f"width={self.width}, height={self.height})")

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
