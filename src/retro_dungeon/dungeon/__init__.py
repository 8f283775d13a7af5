from .generator import DungeonGenerator, MIN_DIMENSION, spawn_point
from .pathfinding import path_length, reachable_from

__all__ = ["DungeonGenerator", "MIN_DIMENSION", "spawn_point", "path_length", "reachable_from"]
