import random
from collections import deque
from typing import Dict, Optional

from mazeengine import CellKind, Grid, Position


class FirstChoiceRandom(random.Random):
    """Random source that always draws the first candidate."""

    def choice(self, seq):
        return seq[0]


def reference_distances(grid: Grid, start: Position) -> Dict[Position, int]:
    """Edge distance from ``start`` to every reachable open cell."""

    dist = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nxt = Position(x + dx, y + dy)
            if grid.in_bounds(*nxt) and grid.is_open(*nxt) and nxt not in dist:
                dist[nxt] = dist[Position(x, y)] + 1
                queue.append(nxt)
    return dist


def open_grid(width: int, height: int, walls: Optional[set] = None) -> Grid:
    """Grid with an open interior, a wall border and the given extra walls."""

    grid = Grid(width, height)
    walls = walls or set()
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if (x, y) not in walls:
                grid.set_kind(x, y, CellKind.OPEN)
    return grid


def grid_from_snapshot(snapshot) -> Grid:
    """Rebuild a grid with the snapshot's cell kinds."""

    grid = Grid(snapshot.width, snapshot.height)
    for y in range(snapshot.height):
        for x in range(snapshot.width):
            grid.set_kind(x, y, snapshot.kind_at(x, y))
    return grid
