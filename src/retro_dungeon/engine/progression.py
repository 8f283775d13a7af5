from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..entities.models import Player
from .message_log import MessageLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelGrowth:
    """Stat increases granted on each level up."""

    max_health: int = 10
    attack_power: int = 2
    defense: int = 1


DEFAULT_GROWTH = LevelGrowth()


def xp_threshold(level: int, xp_per_level: int) -> int:
    """Total experience needed to advance past ``level``."""
    return level * xp_per_level


def apply_level_ups(
    player: Player,
    xp_per_level: int,
    log: Optional[MessageLog] = None,
    growth: LevelGrowth = DEFAULT_GROWTH,
) -> int:
    """Raise the player's level while cumulative experience allows.

    Each level grants the growth stats and restores health to the new
    maximum. Returns the number of levels gained.
    """
    gained = 0
    while player.experience >= xp_threshold(player.level, xp_per_level):
        player.level += 1
        player.max_health += growth.max_health
        player.attack_power += growth.attack_power
        player.defense += growth.defense
        player.health = player.max_health
        gained += 1
        logger.debug("Level up: %r", player)
        if log is not None:
            log.add(f"You reached level {player.level}!")
    return gained


__all__ = ["LevelGrowth", "DEFAULT_GROWTH", "xp_threshold", "apply_level_ups"]
