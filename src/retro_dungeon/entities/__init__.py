from .archetypes import ARCHETYPES, Archetype, EnemyType, archetype_for
from .models import Enemy, Entity, Player

__all__ = ["ARCHETYPES", "Archetype", "EnemyType", "archetype_for", "Enemy", "Entity", "Player"]
