from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..map.position import Position
from .state import GameState, World

PLAYER_SYMBOL = "@"


@dataclass(frozen=True)
class StatSnapshot:
    name: str
    health: int
    max_health: int
    level: int
    experience: int
    gold: int
    dungeon_level: int


@dataclass(frozen=True)
class EntityMarker:
    position: Position
    symbol: str


@dataclass(frozen=True)
class RenderView:
    """Read-only copy of everything a renderer draws for one frame."""

    width: int
    height: int
    rows: Tuple[str, ...]
    player: EntityMarker
    enemies: Tuple[EntityMarker, ...]
    items: Tuple[EntityMarker, ...]
    stats: StatSnapshot
    messages: Tuple[str, ...]
    state: GameState

    @classmethod
    def from_world(cls, world: World) -> "RenderView":
        p = world.player
        return cls(
            width=world.grid.width,
            height=world.grid.height,
            rows=tuple(world.grid.to_lines()),
            player=EntityMarker(p.position, PLAYER_SYMBOL),
            enemies=tuple(EntityMarker(e.position, e.symbol) for e in world.alive_enemies()),
            items=tuple(EntityMarker(fi.position, fi.item.symbol) for fi in world.floor_items),
            stats=StatSnapshot(
                name=p.name,
                health=p.health,
                max_health=p.max_health,
                level=p.level,
                experience=p.experience,
                gold=p.gold,
                dungeon_level=p.dungeon_level,
            ),
            messages=tuple(world.log.messages()),
            state=world.state,
        )


__all__ = ["RenderView", "StatSnapshot", "EntityMarker", "PLAYER_SYMBOL"]
