import pytest

from retro_dungeon.dungeon.generator import DungeonGenerator, central_room, spawn_point
from retro_dungeon.dungeon.pathfinding import path_length, reachable_from
from retro_dungeon.map.position import Position
from retro_dungeon.map.tiles import TileType


def assert_navigable(grid):
    # Border must be walls everywhere
    for x in range(grid.width):
        assert grid.get_tile(x, 0).type is TileType.WALL
        assert grid.get_tile(x, grid.height - 1).type is TileType.WALL
    for y in range(grid.height):
        assert grid.get_tile(0, y).type is TileType.WALL
        assert grid.get_tile(grid.width - 1, y).type is TileType.WALL

    # Exactly one stairs cell, recorded on the map
    assert grid.count(TileType.STAIRS_DOWN) == 1
    assert grid.cells_of(TileType.STAIRS_DOWN) == [grid.stairs_down]

    start = spawn_point(grid.width, grid.height)
    assert grid.get_tile(start.x, start.y).type is TileType.FLOOR
    region = reachable_from(grid, start)
    assert grid.stairs_down in region
    assert path_length(grid, start, grid.stairs_down) > 0


@pytest.mark.parametrize("size", [(8, 8), (9, 13), (20, 12), (80, 24), (33, 41)])
def test_generated_maps_are_navigable(size):
    gen = DungeonGenerator(seed=7)
    for _ in range(10):
        assert_navigable(gen.generate(*size))


def test_room_covers_central_half():
    grid = DungeonGenerator(seed=3).generate(80, 24)
    room = central_room(80, 24)
    assert (room.x, room.y, room.w, room.h) == (20, 6, 40, 12)
    walkable = grid.count(TileType.FLOOR) + grid.count(TileType.STAIRS_DOWN)
    assert walkable == 40 * 12
    assert grid.is_walkable(20, 6)
    assert not grid.is_walkable(19, 6)
    assert not grid.is_walkable(60, 6)


def test_small_maps_keep_room_off_the_border():
    grid = DungeonGenerator(seed=1).generate(4, 4)
    assert grid.to_lines()[0] == "####"
    assert grid.to_lines()[3] == "####"
    assert grid.count(TileType.FLOOR) + grid.count(TileType.STAIRS_DOWN) == 4


def test_stairs_share_spawn_column_parity_and_never_on_spawn():
    gen = DungeonGenerator(seed=99)
    start = spawn_point(20, 12)
    for _ in range(50):
        stairs = gen.generate(20, 12).stairs_down
        assert stairs != start
        assert (stairs.x - start.x) % 2 == 0


def test_same_seed_same_maps():
    a = DungeonGenerator(seed=2024)
    b = DungeonGenerator(seed=2024)
    for _ in range(5):
        assert a.generate(30, 20).to_lines() == b.generate(30, 20).to_lines()


def test_different_seeds_differ_somewhere():
    layouts_a = DungeonGenerator(seed=1)
    layouts_b = DungeonGenerator(seed=2)
    stairs_a = [layouts_a.generate(40, 20).stairs_down for _ in range(10)]
    stairs_b = [layouts_b.generate(40, 20).stairs_down for _ in range(10)]
    assert stairs_a != stairs_b


def test_unseeded_generator_draws_a_seed():
    gen = DungeonGenerator()
    assert isinstance(gen.seed, int)
    replay = DungeonGenerator(seed=gen.seed)
    assert gen.generate(16, 10).to_lines() == replay.generate(16, 10).to_lines()


@pytest.mark.parametrize("size", [(3, 8), (8, 3), (0, 0)])
def test_degenerate_sizes_rejected(size):
    with pytest.raises(ValueError):
        DungeonGenerator(seed=1).generate(*size)


def test_reachable_from_wall_is_empty():
    grid = DungeonGenerator(seed=5).generate(10, 10)
    assert reachable_from(grid, Position(0, 0)) == set()
    assert path_length(grid, Position(0, 0), grid.stairs_down) is None
