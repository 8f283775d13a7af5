from __future__ import annotations

import itertools
import logging
from typing import Optional

from .config.settings import Settings
from .dungeon.generator import DungeonGenerator
from .engine.message_log import MessageLog
from .engine.state import GameState, World
from .engine.turns import TurnEngine
from .engine.view import RenderView
from .entities.models import Player
from .exceptions import SaveFormatError
from .map.position import Direction
from .persistence.save_file import PathLike, SaveRecord, read_save, write_save

logger = logging.getLogger(__name__)


def _check_name(name: str) -> None:
    if not name.strip():
        raise ValueError("Player name must not be blank")
    if name.splitlines() != [name]:
        raise ValueError(f"Player name must be a single line; got {name!r}")


class GameSession:
    """Owns one game's state from new game (or load) until shutdown.

    The session is the only holder of the :class:`World`. Actions received
    while no game is running, or after the player has died, are ignored and
    reported as not taken.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        generator: Optional[DungeonGenerator] = None,
    ) -> None:
        self.settings = (settings or Settings()).validate()
        self.generator = generator or DungeonGenerator(self.settings.seed)
        self._ids = itertools.count(1)
        self.engine = TurnEngine(self.generator, self._next_id, self.settings)
        self._world: Optional[World] = None
        logger.debug("GameSession created with seed %d", self.generator.seed)

    def _next_id(self) -> int:
        return next(self._ids)

    # ------------------------ State ------------------------
    @property
    def world(self) -> Optional[World]:
        return self._world

    @property
    def state(self) -> GameState:
        if self._world is None:
            return GameState.MAIN_MENU
        return self._world.state

    @property
    def is_active(self) -> bool:
        return self._world is not None and self._world.state is GameState.PLAYING

    def _fresh_world(self, player: Player) -> World:
        return World(grid=self.engine.new_grid(), player=player, log=MessageLog(self.settings.max_messages))

    # ------------------------ Lifecycle ------------------------
    def new_game(self, name: str) -> World:
        """Start a fresh run on dungeon level 1.

        Raises ValueError for a blank name or one containing a line break.
        """
        _check_name(name)
        player = Player.create(
            self._next_id(),
            name,
            self.engine.spawn_point(),
            inventory_capacity=self.settings.inventory_capacity,
        )
        world = self._fresh_world(player)
        self.engine.populate(
            world,
            enemy_count=self.settings.base_enemy_count,
            item_count=self.settings.floor_item_count,
        )
        world.state = GameState.PLAYING
        world.log.clear()
        world.log.add(f"Welcome to the dungeon, {name}!")
        self._world = world
        logger.info("New game started for %s", name)
        return world

    def shutdown(self) -> None:
        """Drop all session state and return to the main menu."""
        if self._world is not None:
            logger.info("Shutting down session for %s", self._world.player.name)
        self._world = None

    # ------------------------ Turns ------------------------
    def handle_action(self, direction: Direction) -> bool:
        """Apply one movement turn, then advance the world tick.

        Returns False without touching anything when no game is running.
        """
        if not self.is_active:
            logger.debug("Ignoring %s: session not active (state=%s)", direction.name, self.state.name)
            return False
        taken = self.engine.handle_movement(self._world, direction)
        self.update()
        return taken

    def update(self) -> int:
        if self._world is None:
            return 0
        return self.engine.reap_dead(self._world)

    def view(self) -> Optional[RenderView]:
        if self._world is None:
            return None
        return RenderView.from_world(self._world)

    # ------------------------ Persistence ------------------------
    def save_game(self, path: PathLike) -> bool:
        if self._world is None:
            logger.warning("Nothing to save: no game in progress")
            return False
        try:
            write_save(path, SaveRecord.from_player(self._world.player))
        except OSError as exc:
            logger.error("Failed to save game to %s: %s", path, exc)
            return False
        return True

    def load_game(self, path: PathLike) -> bool:
        """Restore the player from ``path`` into a freshly generated dungeon.

        On any read or format error the current session is left untouched.
        Inventory and floor items are not part of the save.
        """
        try:
            record = read_save(path)
        except OSError as exc:
            logger.error("Failed to open save %s: %s", path, exc)
            return False
        except SaveFormatError as exc:
            logger.error("Corrupt save %s: %s", path, exc)
            return False

        player = Player.create(
            self._next_id(),
            record.name,
            self.engine.spawn_point(),
            inventory_capacity=self.settings.inventory_capacity,
        )
        record.apply_to(player)
        world = self._fresh_world(player)
        self.engine.populate(world, enemy_count=self.settings.base_enemy_count, item_count=0)
        world.state = GameState.PLAYING if player.is_alive else GameState.GAME_OVER
        world.log.add(f"Welcome back, {record.name}!")
        self._world = world
        logger.info("Loaded %s at dungeon level %d from %s", record.name, record.dungeon_level, path)
        return True


__all__ = ["GameSession"]
