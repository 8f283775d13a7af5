from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Position:
    """Integer grid coordinate. (0, 0) is top-left; y grows downward.

    Positions are never clamped; the map decides whether one is valid.
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


class Direction(Enum):
    """The four player movement directions.

    Horizontal steps are uneven on purpose: terminal cells are about twice as
    tall as they are wide, so an east or west step covers two columns.
    """

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (2, 0)
    WEST = (-2, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


__all__ = ["Position", "Direction"]
