from __future__ import annotations

from dataclasses import dataclass, field

from ..items.models import Inventory, Item
from ..map.position import Direction, Position
from .archetypes import EnemyType, archetype_for

PLAYER_MAX_HEALTH = 100
PLAYER_ATTACK = 5
PLAYER_DEFENSE = 2
INVENTORY_CAPACITY = 21


@dataclass
class Entity:
    """Anything on the map that has health and fights."""

    id: int
    position: Position
    health: int
    max_health: int
    attack_power: int
    defense: int

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> int:
        """Subtract ``amount`` from health, never going below zero.

        Returns the health actually lost.
        """
        if amount < 0:
            raise ValueError("Damage amount must not be negative")
        before = self.health
        self.health = max(0, self.health - amount)
        return before - self.health


@dataclass
class Player(Entity):
    name: str = "Hero"
    level: int = 1
    experience: int = 0
    gold: int = 0
    dungeon_level: int = 1
    inventory: Inventory = field(default_factory=lambda: Inventory(capacity=INVENTORY_CAPACITY))

    @classmethod
    def create(
        cls,
        entity_id: int,
        name: str,
        position: Position,
        inventory_capacity: int = INVENTORY_CAPACITY,
    ) -> "Player":
        return cls(
            id=entity_id,
            position=position,
            health=PLAYER_MAX_HEALTH,
            max_health=PLAYER_MAX_HEALTH,
            attack_power=PLAYER_ATTACK,
            defense=PLAYER_DEFENSE,
            name=name,
            inventory=Inventory(capacity=inventory_capacity),
        )

    def heal(self, amount: int) -> int:
        """Restore health up to max_health. Returns the health gained."""
        if amount < 0:
            raise ValueError("Heal amount must not be negative")
        before = self.health
        self.health = min(self.health + amount, self.max_health)
        return self.health - before

    def destination(self, direction: Direction) -> Position:
        dx, dy = direction.delta
        return self.position.offset(dx, dy)

    def move(self, direction: Direction) -> Position:
        self.position = self.destination(direction)
        return self.position

    def add_item(self, item: Item) -> bool:
        return self.inventory.add(item)

    def __repr__(self) -> str:
        return (
            f"Player({self.name}@{self.position.x},{self.position.y} "
            f"hp={self.health}/{self.max_health} lvl={self.level} depth={self.dungeon_level})"
        )


@dataclass
class Enemy(Entity):
    type: EnemyType = EnemyType.GOBLIN
    name: str = ""
    symbol: str = "?"
    exp_reward: int = 0
    gold_reward: int = 0

    @classmethod
    def spawn(cls, entity_id: int, enemy_type: EnemyType, position: Position, spawn_dead: bool = False) -> "Enemy":
        """Build an enemy from its archetype at full health.

        ``spawn_dead`` reproduces the old behaviour where a dragon appeared
        with zero health.
        """
        arch = archetype_for(enemy_type)
        health = 0 if spawn_dead else arch.max_health
        return cls(
            id=entity_id,
            position=position,
            health=health,
            max_health=arch.max_health,
            attack_power=arch.attack_power,
            defense=arch.defense,
            type=enemy_type,
            name=arch.name,
            symbol=arch.symbol,
            exp_reward=arch.exp_reward,
            gold_reward=arch.gold_reward,
        )

    def __repr__(self) -> str:
        return f"Enemy({self.name}#{self.id}@{self.position.x},{self.position.y} hp={self.health}/{self.max_health})"


__all__ = [
    "Entity",
    "Player",
    "Enemy",
    "PLAYER_MAX_HEALTH",
    "PLAYER_ATTACK",
    "PLAYER_DEFENSE",
    "INVENTORY_CAPACITY",
]
