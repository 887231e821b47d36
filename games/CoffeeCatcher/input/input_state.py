"""
Input State - Directional intent consumed by the simulation engine.

Front ends (keyboard, touch, scripted tests) only ever write to this
object. The engine reads the derived net direction once per tick and
consumes the edge-triggered restart request.
"""
from enum import Enum


class Direction(Enum):
    """Horizontal directions the player can hold."""
    LEFT = "left"
    RIGHT = "right"


class InputState:
    """Two independent held flags plus a pending restart request.

    Holding both directions cancels out: net_direction() is 0 whenever
    both or neither are held.
    """

    def __init__(self):
        self._left_held = False
        self._right_held = False
        self._restart_requested = False

    @property
    def left_held(self) -> bool:
        return self._left_held

    @property
    def right_held(self) -> bool:
        return self._right_held

    @property
    def restart_requested(self) -> bool:
        """True if a restart was requested and not yet consumed."""
        return self._restart_requested

    def set_held(self, direction: Direction, held: bool) -> None:
        """Set whether a direction is currently held.

        Args:
            direction: Direction to update
            held: New held state
        """
        if direction is Direction.LEFT:
            self._left_held = bool(held)
        else:
            self._right_held = bool(held)

    def set_left(self, held: bool) -> None:
        self.set_held(Direction.LEFT, held)

    def set_right(self, held: bool) -> None:
        self.set_held(Direction.RIGHT, held)

    def release_all(self) -> None:
        """Clear both directions (e.g. touch end, focus lost)."""
        self._left_held = False
        self._right_held = False

    def net_direction(self) -> int:
        """Derived horizontal sign.

        Returns:
            -1 for left only, +1 for right only, 0 for both or neither
        """
        return int(self._right_held) - int(self._left_held)

    def request_restart(self) -> None:
        """Raise the restart edge; the next tick consumes it."""
        self._restart_requested = True

    def consume_restart(self) -> bool:
        """Return and clear the pending restart request."""
        requested = self._restart_requested
        self._restart_requested = False
        return requested
