from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TileType(Enum):
    """Terrain classification for a single map cell."""

    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    STAIRS_UP = "stairs_up"
    STAIRS_DOWN = "stairs_down"
    TRAP = "trap"


@dataclass(frozen=True)
class Tile:
    """A cell's terrain plus its derived display symbol and walkability.

    Symbol and walkable are fully determined by the type. Build tiles with
    :func:`tile_for` rather than calling the constructor directly.
    """

    type: TileType
    symbol: str
    walkable: bool


_CANONICAL: Dict[TileType, Tile] = {
    TileType.FLOOR: Tile(TileType.FLOOR, ".", True),
    TileType.WALL: Tile(TileType.WALL, "#", False),
    TileType.DOOR: Tile(TileType.DOOR, "+", True),
    TileType.STAIRS_UP: Tile(TileType.STAIRS_UP, "<", True),
    TileType.STAIRS_DOWN: Tile(TileType.STAIRS_DOWN, ">", True),
    TileType.TRAP: Tile(TileType.TRAP, "^", True),
}

SYMBOL_TO_TYPE: Dict[str, TileType] = {t.symbol: kind for kind, t in _CANONICAL.items()}


def tile_for(tile_type: TileType) -> Tile:
    """Return the canonical tile for a type."""
    if not isinstance(tile_type, TileType):
        raise TypeError("tile_type must be a TileType member")
    return _CANONICAL[tile_type]


__all__ = ["TileType", "Tile", "tile_for", "SYMBOL_TO_TYPE"]
