from __future__ import annotations

import logging
from typing import Callable, Optional

from ..config.settings import Settings
from ..dungeon.generator import DungeonGenerator, spawn_point
from ..entities.models import Enemy
from ..map.grid import GridMap
from ..map.position import Direction, Position
from ..map.tiles import TileType
from .combat import CombatOutcome, resolve_attack
from .progression import apply_level_ups
from .spawner import Spawner
from .state import GameState, World

logger = logging.getLogger(__name__)


class TurnEngine:
    """Resolves player actions against a :class:`World`.

    One call to :meth:`handle_movement` is one turn: the step itself, any
    fight it starts, item pickup and descent all complete before it returns.
    """

    def __init__(
        self,
        generator: DungeonGenerator,
        next_id: Callable[[], int],
        settings: Optional[Settings] = None,
        spawner: Optional[Spawner] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.generator = generator
        self.spawner = spawner or Spawner(generator.rng, self.settings)
        self._next_id = next_id

    # ------------------------ Levels ------------------------
    def spawn_point(self) -> Position:
        return spawn_point(self.settings.map_width, self.settings.map_height)

    def new_grid(self) -> GridMap:
        return self.generator.generate(self.settings.map_width, self.settings.map_height)

    def populate(self, world: World, enemy_count: int, item_count: int) -> None:
        """Put the player on the start cell and fill the current map."""
        world.player.position = self.spawn_point()
        avoid = {world.player.position}
        if world.grid.stairs_down is not None:
            avoid.add(world.grid.stairs_down)
        world.enemies = self.spawner.spawn_enemies(world.grid, enemy_count, self._next_id, avoid)
        world.floor_items = self.spawner.spawn_items(world.grid, item_count, avoid)

    def next_level(self, world: World) -> None:
        player = world.player
        player.dungeon_level += 1
        world.grid = self.new_grid()
        self.populate(
            world,
            enemy_count=self.settings.base_enemy_count + player.dungeon_level,
            item_count=self.settings.floor_item_count,
        )
        world.log.add(f"You descend to dungeon level {player.dungeon_level}")
        logger.info("Player %s reached dungeon level %d", player.name, player.dungeon_level)

    # ------------------------ Turns ------------------------
    def handle_movement(self, world: World, direction: Direction) -> bool:
        """Resolve one movement turn. Returns True when the turn was taken.

        Walking into a living enemy attacks it instead of moving. Walking into
        a wall is refused (and costs no turn) unless ``block_walls`` is off.
        """
        if world.state is not GameState.PLAYING:
            logger.debug("Ignoring move %s; game state is %s", direction.name, world.state.name)
            return False

        player = world.player
        target = player.destination(direction)

        enemy = world.enemy_at(target)
        if enemy is not None:
            self.fight(world, enemy)
            return True

        if self.settings.block_walls and not world.grid.is_walkable(target.x, target.y):
            world.log.add("You bump into a wall.")
            logger.debug("Blocked move %s to %s", direction.name, target)
            return False

        player.move(direction)
        logger.debug("Player moved %s to %s", direction.name, player.position)
        self.pick_up(world)

        if world.grid.tile_type_at(player.position) is TileType.STAIRS_DOWN:
            self.next_level(world)
        return True

    def fight(self, world: World, enemy: Enemy) -> CombatOutcome:
        outcome = resolve_attack(world.player, enemy, world.log)
        if outcome.player_killed:
            world.state = GameState.GAME_OVER
            logger.info("Player %s was slain by %s", world.player.name, enemy.name)
        elif outcome.enemy_killed:
            apply_level_ups(world.player, self.settings.xp_per_level, world.log)
        return outcome

    def pick_up(self, world: World) -> int:
        """Move floor items under the player into the pack while there is room."""
        picked = 0
        for floor_item in world.items_at(world.player.position):
            if not world.player.add_item(floor_item.item):
                world.log.add("Your pack is full.")
                break
            world.floor_items.remove(floor_item)
            world.log.add(f"You pick up a {floor_item.item.name}.")
            picked += 1
        return picked

    # ------------------------ World tick ------------------------
    def reap_dead(self, world: World) -> int:
        """Remove dead enemies from the live set; returns how many were removed."""
        if self.settings.reap_one_per_tick:
            for i, enemy in enumerate(world.enemies):
                if not enemy.is_alive:
                    del world.enemies[i]
                    return 1
            return 0
        before = len(world.enemies)
        world.enemies = [e for e in world.enemies if e.is_alive]
        removed = before - len(world.enemies)
        if removed:
            logger.debug("Reaped %d dead enemies", removed)
        return removed


__all__ = ["TurnEngine"]
