from .grid import GridMap
from .position import Direction, Position
from .tiles import Tile, TileType, tile_for

__all__ = ["GridMap", "Direction", "Position", "Tile", "TileType", "tile_for"]
