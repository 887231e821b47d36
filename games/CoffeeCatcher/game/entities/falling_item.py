"""Falling items and the pool that owns them.

Items fall at a constant speed chosen at spawn time. The pool removes
resolved items with a swap-remove, so removal is O(1) and the order of
the remaining items stays well defined.
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterator, List

from models import Rectangle


@dataclass
class FallingItem:
    """A single falling item.

    Physics:
        y += vy every tick; x and vy never change after spawn.
    """
    x: float
    y: float
    width: float
    height: float
    vy: float

    @property
    def rect(self) -> Rectangle:
        """Bounding box."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    def advance(self) -> None:
        """Fall for one tick."""
        self.y += self.vy


class FallingItemPool:
    """Exclusive owner of all live falling items."""

    def __init__(self):
        self._items: List[FallingItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FallingItem]:
        """Yield detached copies; the live items never leave the pool."""
        return (replace(item) for item in self._items)

    def add(self, item: FallingItem) -> None:
        """Insert a newly spawned item."""
        self._items.append(item)

    def clear(self) -> None:
        """Drop every live item."""
        self._items.clear()

    def advance_all(self) -> None:
        """Move every live item down by its own speed."""
        for item in self._items:
            item.advance()

    def resolve(self, should_remove: Callable[[FallingItem], bool]) -> int:
        """Visit every live item exactly once, removing the ones resolved.

        Iterates from the back; a removed slot is filled by the current
        last item, which has already been visited.

        Args:
            should_remove: Called once per item; True removes it

        Returns:
            Number of items removed
        """
        removed = 0
        items = self._items
        for i in range(len(items) - 1, -1, -1):
            if should_remove(items[i]):
                items[i] = items[-1]
                items.pop()
                removed += 1
        return removed

    def rects(self) -> List[Rectangle]:
        """Bounding boxes of all live items, in pool order."""
        return [item.rect for item in self._items]
