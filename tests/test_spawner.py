import random

from retro_dungeon.config.settings import Settings
from retro_dungeon.entities.archetypes import EnemyType
from retro_dungeon.map.grid import GridMap
from retro_dungeon.map.position import Position
from retro_dungeon.engine.spawner import Spawner

ROOM = [
    "#######",
    "#.....#",
    "#.###.#",
    "#.....#",
    "#######",
]


def _ids():
    counter = iter(range(1, 1000))
    return lambda: next(counter)


def test_enemies_land_on_free_walkable_cells():
    grid = GridMap.from_lines(ROOM)
    avoid = {Position(1, 1), Position(5, 3)}
    enemies = Spawner(random.Random(3)).spawn_enemies(grid, 40, _ids(), avoid)
    assert len(enemies) == 40
    for e in enemies:
        assert grid.is_walkable(e.position.x, e.position.y)
        assert e.position not in avoid


def test_ids_are_taken_from_the_counter():
    grid = GridMap.from_lines(ROOM)
    enemies = Spawner(random.Random(3)).spawn_enemies(grid, 3, _ids())
    assert [e.id for e in enemies] == [1, 2, 3]


def test_legacy_mode_may_pick_walls_but_not_the_border():
    grid = GridMap.from_lines(ROOM)
    spawner = Spawner(random.Random(5), Settings(walkable_spawns_only=False))
    positions = [e.position for e in spawner.spawn_enemies(grid, 200, _ids())]
    assert all(1 <= p.x <= 5 and 1 <= p.y <= 3 for p in positions)
    assert any(not grid.is_walkable(p.x, p.y) for p in positions)


def test_no_free_cell_falls_back_to_interior():
    grid = GridMap(6, 6)
    items = Spawner(random.Random(1)).spawn_items(grid, 4)
    assert len(items) == 4
    assert all(1 <= fi.position.x <= 4 and 1 <= fi.position.y <= 4 for fi in items)


def test_every_archetype_can_be_rolled():
    spawner = Spawner(random.Random(9))
    assert {spawner.roll_enemy_type() for _ in range(500)} == set(EnemyType)


def test_floor_items_are_potions():
    grid = GridMap.from_lines(ROOM)
    items = Spawner(random.Random(2)).spawn_items(grid, 3)
    assert [fi.item.name for fi in items] == ["Health Potion"] * 3
