import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from retro_dungeon.config.settings import Settings  # noqa: E402
from retro_dungeon.engine.message_log import MessageLog  # noqa: E402
from retro_dungeon.engine.state import World  # noqa: E402
from retro_dungeon.entities.models import Player  # noqa: E402
from retro_dungeon.map.grid import GridMap  # noqa: E402
from retro_dungeon.map.position import Position  # noqa: E402

ROOM = [
    "##########",
    "#........#",
    "#........#",
    "#....>...#",
    "##########",
]


@pytest.fixture
def settings():
    return Settings(map_width=20, map_height=12, seed=1234)


@pytest.fixture
def make_world():
    """Build a World on an ASCII map with the player at ``player_at``."""

    def _make(lines=ROOM, player_at=(1, 1)):
        grid = GridMap.from_lines(lines)
        player = Player.create(1, "Tester", Position(*player_at))
        return World(grid=grid, player=player, log=MessageLog())

    return _make
