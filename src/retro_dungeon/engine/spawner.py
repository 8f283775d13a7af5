from __future__ import annotations

import logging
import random
from typing import Callable, Collection, List, Optional

from ..config.settings import Settings
from ..entities.archetypes import SPAWN_ORDER, EnemyType
from ..entities.models import Enemy
from ..items.models import FloorItem, health_potion
from ..map.grid import GridMap
from ..map.position import Position

logger = logging.getLogger(__name__)


class Spawner:
    """Places enemies and floor items on a freshly generated map.

    Coordinates are drawn uniformly from the map interior (everything but the
    outer border). With ``walkable_spawns_only`` the draw is restricted to
    walkable interior cells not listed in ``avoid``; otherwise any interior
    cell may be chosen, walls included.
    """

    def __init__(self, rng: random.Random, settings: Optional[Settings] = None) -> None:
        self._rng = rng
        self._settings = settings or Settings()

    def _candidates(self, grid: GridMap, avoid: Collection[Position]) -> Optional[List[Position]]:
        if not self._settings.walkable_spawns_only:
            return None
        cells = [
            Position(x, y)
            for y in range(1, grid.height - 1)
            for x in range(1, grid.width - 1)
            if grid.is_walkable(x, y) and Position(x, y) not in avoid
        ]
        if not cells:
            logger.warning("No free walkable cell to spawn on; falling back to any interior cell")
            return None
        return cells

    def _roll_position(self, grid: GridMap, candidates: Optional[List[Position]]) -> Position:
        if candidates is not None:
            return self._rng.choice(candidates)
        return Position(
            self._rng.randint(1, grid.width - 2),
            self._rng.randint(1, grid.height - 2),
        )

    def roll_enemy_type(self) -> EnemyType:
        return self._rng.choice(SPAWN_ORDER)

    def spawn_enemies(
        self,
        grid: GridMap,
        count: int,
        next_id: Callable[[], int],
        avoid: Collection[Position] = (),
    ) -> List[Enemy]:
        candidates = self._candidates(grid, avoid)
        enemies: List[Enemy] = []
        for _ in range(count):
            pos = self._roll_position(grid, candidates)
            enemy_type = self.roll_enemy_type()
            spawn_dead = self._settings.dragon_spawns_dead and enemy_type is EnemyType.DRAGON
            enemies.append(Enemy.spawn(next_id(), enemy_type, pos, spawn_dead=spawn_dead))
        logger.debug("Spawned %d enemies: %s", len(enemies), enemies)
        return enemies

    def spawn_items(
        self,
        grid: GridMap,
        count: int,
        avoid: Collection[Position] = (),
    ) -> List[FloorItem]:
        candidates = self._candidates(grid, avoid)
        items = [FloorItem(health_potion(), self._roll_position(grid, candidates)) for _ in range(count)]
        logger.debug("Spawned %d floor items", len(items))
        return items


__all__ = ["Spawner"]
