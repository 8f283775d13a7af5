from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping


class EnemyType(Enum):
    GOBLIN = "goblin"
    ORC = "orc"
    SKELETON = "skeleton"
    ZOMBIE = "zombie"
    DRAGON = "dragon"
    RAT = "rat"
    SPIDER = "spider"


@dataclass(frozen=True)
class Archetype:
    """Base stats shared by every enemy of one type."""

    name: str
    symbol: str
    max_health: int
    attack_power: int
    defense: int
    exp_reward: int = 10
    gold_reward: int = 5


ARCHETYPES: Mapping[EnemyType, Archetype] = {
    EnemyType.GOBLIN: Archetype("Goblin", "g", max_health=20, attack_power=5, defense=2),
    EnemyType.ORC: Archetype("Orc", "o", max_health=40, attack_power=10, defense=5),
    EnemyType.SKELETON: Archetype("Skeleton", "s", max_health=25, attack_power=8, defense=3),
    EnemyType.ZOMBIE: Archetype("Zombie", "z", max_health=35, attack_power=6, defense=8),
    EnemyType.DRAGON: Archetype("Dragon", "D", max_health=200, attack_power=30, defense=20),
    EnemyType.RAT: Archetype("Rat", "r", max_health=5, attack_power=2, defense=0),
    EnemyType.SPIDER: Archetype("Spider", "x", max_health=15, attack_power=6, defense=1),
}

# Order used when rolling a random archetype.
SPAWN_ORDER = (
    EnemyType.GOBLIN,
    EnemyType.ORC,
    EnemyType.SKELETON,
    EnemyType.ZOMBIE,
    EnemyType.RAT,
    EnemyType.SPIDER,
    EnemyType.DRAGON,
)


def archetype_for(enemy_type: EnemyType) -> Archetype:
    try:
        return ARCHETYPES[enemy_type]
    except KeyError as e:
        raise KeyError(f"Unknown enemy type: {enemy_type}") from e


__all__ = ["EnemyType", "Archetype", "ARCHETYPES", "SPAWN_ORDER", "archetype_for"]
