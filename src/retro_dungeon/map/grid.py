from __future__ import annotations

import logging
from typing import Generator, List, Optional, Sequence, Tuple

from .position import Position
from .tiles import SYMBOL_TO_TYPE, Tile, TileType, tile_for

logger = logging.getLogger(__name__)


class GridMap:
    """A bounds-checked 2D tile grid with an optional descent point.

    Tiles are stored row-major (``tiles[y][x]``) and every cell starts out as a
    wall. Writes go through :meth:`set_tile`, which always stores the canonical
    tile for the requested type, so symbol and walkability can never drift
    from the terrain type.
    """

    __slots__ = ("_w", "_h", "_tiles", "_stairs_down")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("GridMap dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        wall = tile_for(TileType.WALL)
        self._tiles: List[List[Tile]] = [[wall for _ in range(self._w)] for _ in range(self._h)]
        self._stairs_down: Optional[Position] = None
        logger.debug("Initialized GridMap %dx%d", self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def stairs_down(self) -> Optional[Position]:
        """Position of the StairsDown cell, or None when unset."""
        return self._stairs_down

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self._w and 0 <= y < self._h

    def get_tile(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y).

        Raises IndexError when out of bounds; use :meth:`safe_get` when the
        coordinate may be off the map.
        """
        if not self.is_valid_position(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        return self._tiles[y][x]

    def safe_get(self, x: int, y: int) -> Optional[Tile]:
        if not self.is_valid_position(x, y):
            return None
        return self._tiles[y][x]

    def tile_type_at(self, pos: Position) -> Optional[TileType]:
        tile = self.safe_get(pos.x, pos.y)
        return tile.type if tile is not None else None

    def is_walkable(self, x: int, y: int) -> bool:
        tile = self.safe_get(x, y)
        if tile is None:
            return False
        return tile.walkable

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        """Overwrite a cell with the canonical tile for ``tile_type``.

        Out-of-bounds writes are ignored. Overwriting the recorded stairs cell
        with another type unsets ``stairs_down``.
        """
        if not self.is_valid_position(x, y):
            logger.debug("Ignoring set_tile outside the map at (%d,%d)", x, y)
            return
        self._tiles[y][x] = tile_for(tile_type)
        if (
            tile_type is not TileType.STAIRS_DOWN
            and self._stairs_down is not None
            and self._stairs_down == Position(x, y)
        ):
            self._stairs_down = None

    def set_stairs_down(self, pos: Position) -> None:
        """Mark ``pos`` as the descent point and record it."""
        if not self.is_valid_position(pos.x, pos.y):
            raise IndexError(f"Stairs position out of bounds: {pos}")
        self.set_tile(pos.x, pos.y, TileType.STAIRS_DOWN)
        self._stairs_down = pos

    def clear(self) -> None:
        """Reset every cell to wall and forget the stairs."""
        wall = tile_for(TileType.WALL)
        for row in self._tiles:
            for x in range(self._w):
                row[x] = wall
        self._stairs_down = None
        logger.debug("GridMap %dx%d cleared", self._w, self._h)

    def neighbors(self, x: int, y: int) -> Generator[Tuple[int, int], None, None]:
        """Yield the in-bounds 4-way neighbours of (x, y)."""
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = x + dx, y + dy
            if self.is_valid_position(nx, ny):
                yield (nx, ny)

    def cells_of(self, tile_type: TileType) -> List[Position]:
        return [
            Position(x, y)
            for y in range(self._h)
            for x in range(self._w)
            if self._tiles[y][x].type is tile_type
        ]

    def count(self, tile_type: TileType) -> int:
        return sum(1 for row in self._tiles for tile in row if tile.type is tile_type)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "GridMap":
        """Build a map from ASCII rows using the canonical tile symbols.

        Unknown characters become walls. A ``>`` cell is recorded as the stairs.
        """
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")

        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                tile_type = SYMBOL_TO_TYPE.get(ch, TileType.WALL)
                if tile_type is TileType.STAIRS_DOWN:
                    grid.set_stairs_down(Position(x, y))
                else:
                    grid.set_tile(x, y, tile_type)
        return grid

    def to_lines(self) -> List[str]:
        return ["".join(tile.symbol for tile in row) for row in self._tiles]

    def __repr__(self) -> str:
        return f"GridMap(width={self._w}, height={self._h}, stairs_down={self._stairs_down})"


__all__ = ["GridMap"]
