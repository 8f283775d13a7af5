"""Terminal renderer.

Draws the map row by row, then jumps the cursor with ANSI escapes to paint
the player, enemies and the status lines on top. The core never calls into
this module; it only consumes a :class:`RenderView`.
"""
from __future__ import annotations

from typing import List

from ..engine.state import GameState
from ..engine.view import RenderView

CLEAR_SCREEN = "\033[2J\033[H"


def _goto(row: int, col: int) -> str:
    """Cursor to a 1-based (row, col)."""
    return f"\033[{row};{col}H"


def status_line(view: RenderView) -> str:
    s = view.stats
    return f"Health: {s.health}/{s.max_health}  Level: {s.level}  Gold: {s.gold}  Dungeon: {s.dungeon_level}"


def render_frame(view: RenderView) -> str:
    out: List[str] = [CLEAR_SCREEN]
    for row in view.rows:
        out.append(row)
        out.append("\n")

    for marker in view.items:
        out.append(_goto(marker.position.y + 1, marker.position.x + 1) + marker.symbol)
    out.append(_goto(view.player.position.y + 1, view.player.position.x + 1) + view.player.symbol)
    for marker in view.enemies:
        out.append(_goto(marker.position.y + 1, marker.position.x + 1) + marker.symbol)

    out.append(_goto(view.height + 2, 1) + status_line(view))
    row = view.height + 4
    for message in view.messages:
        out.append(_goto(row, 1) + message)
        row += 1
    if view.state is GameState.GAME_OVER:
        out.append(_goto(row + 1, 1) + "*** GAME OVER ***")
    out.append(_goto(row + 2, 1))
    return "".join(out)


def render_plain(view: RenderView) -> str:
    """Escape-free composite of the same frame, for logs and tests."""
    grid = [list(row) for row in view.rows]

    def put(x: int, y: int, ch: str) -> None:
        if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
            grid[y][x] = ch

    for marker in view.items:
        put(marker.position.x, marker.position.y, marker.symbol)
    put(view.player.position.x, view.player.position.y, view.player.symbol)
    for marker in view.enemies:
        put(marker.position.x, marker.position.y, marker.symbol)

    lines = ["".join(r) for r in grid]
    lines.append("")
    lines.append(status_line(view))
    lines.append("")
    lines.extend(view.messages)
    if view.state is GameState.GAME_OVER:
        lines.append("*** GAME OVER ***")
    return "\n".join(lines)
