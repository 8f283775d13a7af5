from __future__ import annotations

import logging
import random
import secrets
from dataclasses import dataclass
from typing import List, Optional

from ..map.grid import GridMap
from ..map.position import Position
from ..map.tiles import TileType

logger = logging.getLogger(__name__)

MIN_DIMENSION = 4


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    def contains(self, pos: Position) -> bool:
        return self.x <= pos.x < self.x + self.w and self.y <= pos.y < self.y + self.h

    def cells(self) -> List[Position]:
        return [Position(x, y) for y in range(self.y, self.y + self.h) for x in range(self.x, self.x + self.w)]


def central_room(width: int, height: int) -> Room:
    """The room covering the middle half of the map, kept off the border."""
    x0 = max(1, width // 4)
    y0 = max(1, height // 4)
    x1 = min(width // 4 + width // 2, width - 1)
    y1 = min(height // 4 + height // 2, height - 1)
    return Room(x0, y0, x1 - x0, y1 - y0)


def spawn_point(width: int, height: int) -> Position:
    """Fixed player start: one cell in from the room's top-left corner."""
    return Position(width // 4 + 1, height // 4 + 1)


class DungeonGenerator:
    """Seeded single-room level generator.

    Every level is one rectangular room in the middle of an all-wall map, with
    a StairsDown cell somewhere inside it that the player can walk to from the
    spawn point. The generator's ``random.Random`` is
    also the only randomness source for enemy and item placement, so a fixed
    seed reproduces a whole session.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = secrets.randbits(32)
            logger.info("No seed provided; generated random seed: %d", seed)
        else:
            logger.debug("Using seed: %d", seed)
        self._seed = int(seed)
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    def generate(self, width: int, height: int) -> GridMap:
        """Build a fresh map: carve the central room and place the stairs.

        Raises ValueError for maps smaller than 4x4, where the room would be
        too small to hold both the player start and the stairs.
        """
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise ValueError(
                f"Map must be at least {MIN_DIMENSION}x{MIN_DIMENSION}; got {width}x{height}"
            )
        grid = GridMap(width, height)
        room = central_room(width, height)
        for pos in room.cells():
            grid.set_tile(pos.x, pos.y, TileType.FLOOR)

        # Horizontal steps are two columns wide, so the player only ever stands
        # on columns with the spawn's parity. Stairs must share it to be reachable.
        start = spawn_point(width, height)
        while True:
            stairs = Position(
                self._rng.randint(room.x, room.x + room.w - 1),
                self._rng.randint(room.y, room.y + room.h - 1),
            )
            if stairs != start and (stairs.x - start.x) % 2 == 0:
                break
        grid.set_stairs_down(stairs)
        logger.debug("Generated %dx%d level: room=%s stairs=%s", width, height, room, stairs)
        return grid


__all__ = ["DungeonGenerator", "Room", "central_room", "spawn_point", "MIN_DIMENSION"]
