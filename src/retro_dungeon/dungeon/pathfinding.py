from collections import deque
from typing import Optional, Set

from ..map.grid import GridMap
from ..map.position import Position


def reachable_from(grid: GridMap, start: Position) -> Set[Position]:
    """Return every walkable cell connected to ``start`` (4-neighbour BFS).

    An empty set is returned when ``start`` itself is not walkable.
    """
    if not grid.is_walkable(start.x, start.y):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nx, ny in grid.neighbors(cur.x, cur.y):
            nxt = Position(nx, ny)
            if nxt not in seen and grid.is_walkable(nx, ny):
                seen.add(nxt)
                q.append(nxt)
    return seen


def path_length(grid: GridMap, start: Position, goal: Position) -> Optional[int]:
    """Shortest 4-directional walk from start to goal in steps, or None."""
    if not grid.is_walkable(start.x, start.y) or not grid.is_walkable(goal.x, goal.y):
        return None

    q = deque([(start, 0)])
    seen = {start}
    while q:
        cur, d = q.popleft()
        if cur == goal:
            return d
        for nx, ny in grid.neighbors(cur.x, cur.y):
            nxt = Position(nx, ny)
            if nxt not in seen and grid.is_walkable(nx, ny):
                seen.add(nxt)
                q.append((nxt, d + 1))
    return None
