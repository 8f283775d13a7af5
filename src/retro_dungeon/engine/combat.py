from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..entities.models import Enemy, Player
from .message_log import MessageLog

logger = logging.getLogger(__name__)

MIN_DAMAGE = 1


@dataclass(frozen=True)
class CombatOutcome:
    """Result of one player-initiated exchange."""

    enemy_name: str
    damage_dealt: int
    damage_taken: int
    enemy_killed: bool
    player_killed: bool
    exp_gained: int = 0
    gold_gained: int = 0


def retaliation_damage(attacker: Enemy, defender: Player) -> int:
    """Enemy hit against the player, reduced by defense but never below 1."""
    return max(MIN_DAMAGE, attacker.attack_power - defender.defense)


def resolve_attack(player: Player, enemy: Enemy, log: Optional[MessageLog] = None) -> CombatOutcome:
    """Run one exchange: the player strikes, a surviving enemy strikes back.

    The player's hit ignores the enemy's defense. A killed enemy does not
    retaliate and pays out its experience and gold rewards.
    """
    dealt = player.attack_power
    enemy.take_damage(dealt)
    _say(log, f"You hit {enemy.name} for {dealt} damage!")
    logger.debug("Player hits %r for %d", enemy, dealt)

    if enemy.is_alive:
        taken = retaliation_damage(enemy, player)
        player.take_damage(taken)
        _say(log, f"{enemy.name} hits you for {taken} damage!")
        died = not player.is_alive
        if died:
            _say(log, "You have been slain!")
        return CombatOutcome(
            enemy_name=enemy.name,
            damage_dealt=dealt,
            damage_taken=taken,
            enemy_killed=False,
            player_killed=died,
        )

    player.experience += enemy.exp_reward
    player.gold += enemy.gold_reward
    _say(log, f"You defeated {enemy.name}! +{enemy.exp_reward} XP")
    return CombatOutcome(
        enemy_name=enemy.name,
        damage_dealt=dealt,
        damage_taken=0,
        enemy_killed=True,
        player_killed=False,
        exp_gained=enemy.exp_reward,
        gold_gained=enemy.gold_reward,
    )


def _say(log: Optional[MessageLog], message: str) -> None:
    if log is not None:
        log.add(message)


__all__ = ["CombatOutcome", "resolve_attack", "retaliation_damage", "MIN_DAMAGE"]
