"""retro_dungeon: turn-based ASCII dungeon crawler core."""

__all__ = ["__version__"]

__version__ = "0.1.0"
