import pytest

from retro_dungeon.entities.archetypes import ARCHETYPES, SPAWN_ORDER, EnemyType, archetype_for
from retro_dungeon.entities.models import Enemy, Player
from retro_dungeon.items.models import Inventory, Item, ItemType, health_potion
from retro_dungeon.map.position import Direction, Position


def test_archetype_table_covers_every_type():
    assert set(ARCHETYPES) == set(EnemyType)
    assert set(SPAWN_ORDER) == set(EnemyType)
    orc = archetype_for(EnemyType.ORC)
    assert (orc.name, orc.symbol, orc.max_health, orc.attack_power, orc.defense) == ("Orc", "o", 40, 10, 5)
    assert (orc.exp_reward, orc.gold_reward) == (10, 5)


@pytest.mark.parametrize("enemy_type", list(EnemyType))
def test_enemies_spawn_at_full_health(enemy_type):
    enemy = Enemy.spawn(3, enemy_type, Position(4, 5))
    arch = ARCHETYPES[enemy_type]
    assert enemy.health == enemy.max_health == arch.max_health
    assert enemy.is_alive
    assert enemy.symbol == arch.symbol
    assert enemy.position == Position(4, 5)


def test_dragon_corpse_can_be_reproduced():
    dragon = Enemy.spawn(1, EnemyType.DRAGON, Position(1, 1), spawn_dead=True)
    assert dragon.max_health == 200
    assert dragon.health == 0
    assert not dragon.is_alive


def test_player_defaults():
    p = Player.create(1, "Hero", Position(5, 5))
    assert (p.health, p.max_health, p.attack_power, p.defense) == (100, 100, 5, 2)
    assert (p.level, p.experience, p.gold, p.dungeon_level) == (1, 0, 0, 1)
    assert p.inventory.capacity == 21


def test_heal_clamps_at_max_health():
    p = Player.create(1, "Hero", Position(0, 0))
    p.take_damage(30)
    assert p.heal(10) == 10
    assert p.health == 80
    assert p.heal(500) == 20
    assert p.health == p.max_health


def test_negative_heal_is_rejected():
    p = Player.create(1, "Hero", Position(0, 0))
    p.take_damage(30)
    with pytest.raises(ValueError):
        p.heal(-5)
    assert p.health == 70


def test_take_damage_floors_at_zero():
    p = Player.create(1, "Hero", Position(0, 0))
    assert p.take_damage(250) == 100
    assert p.health == 0
    assert not p.is_alive


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Direction.NORTH, Position(10, 9)),
        (Direction.SOUTH, Position(10, 11)),
        (Direction.EAST, Position(12, 10)),
        (Direction.WEST, Position(8, 10)),
    ],
)
def test_move_changes_one_axis_by_fixed_delta(direction, expected):
    p = Player.create(1, "Hero", Position(10, 10))
    p.move(direction)
    assert p.position == expected


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_moves_return_home(direction):
    p = Player.create(1, "Hero", Position(10, 10))
    for _ in range(3):
        p.move(direction)
    for _ in range(3):
        p.move(direction.opposite())
    assert p.position == Position(10, 10)


def test_inventory_capacity_is_enforced():
    inv = Inventory(capacity=21)
    for _ in range(21):
        assert inv.add(health_potion())
    assert inv.is_full
    assert not inv.add(health_potion())
    assert len(inv) == 21


def test_player_add_item_uses_inventory():
    p = Player.create(1, "Hero", Position(0, 0), inventory_capacity=1)
    sword = Item("Short Sword", ItemType.WEAPON, ")", power=3, value=40)
    assert p.add_item(sword)
    assert not p.add_item(health_potion())
    assert list(p.inventory) == [sword]


def test_health_potion_record():
    potion = health_potion()
    assert (potion.name, potion.type, potion.symbol, potion.power, potion.secondary, potion.value) == (
        "Health Potion",
        ItemType.POTION,
        "!",
        20,
        0,
        25,
    )
