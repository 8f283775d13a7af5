from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from ..entities.models import Enemy, Player
from ..items.models import FloorItem
from ..map.grid import GridMap
from ..map.position import Position
from .message_log import MessageLog


class GameState(Enum):
    MAIN_MENU = "main_menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class World:
    """All mutable state of one running session.

    The session controller owns exactly one World; a level transition swaps
    ``grid`` for a newly generated map rather than editing the old one.
    """

    grid: GridMap
    player: Player
    log: MessageLog
    enemies: List[Enemy] = field(default_factory=list)
    floor_items: List[FloorItem] = field(default_factory=list)
    state: GameState = GameState.PLAYING

    def alive_enemies(self) -> Iterator[Enemy]:
        return (e for e in self.enemies if e.is_alive)

    def enemy_at(self, pos: Position) -> Optional[Enemy]:
        """First living enemy standing on ``pos``."""
        for enemy in self.enemies:
            if enemy.position == pos and enemy.is_alive:
                return enemy
        return None

    def items_at(self, pos: Position) -> List[FloorItem]:
        return [fi for fi in self.floor_items if fi.position == pos]


__all__ = ["GameState", "World"]
