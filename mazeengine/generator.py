"""Perfect maze generation by randomized recursive backtracking."""

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional

from .base import AbstractMazeGenerator, CellKind, Position
from .grid import Grid

logger = logging.getLogger(__name__)

# Lattice neighbours two cells away: right, left, down, up.
LATTICE_STEPS = [(2, 0), (-2, 0), (0, 2), (0, -2)]


class BacktrackingGenerator(AbstractMazeGenerator):
    """Carve a spanning tree over the odd-coordinate cells of a grid.

    The walk keeps an explicit stack instead of recursing. One random stream
    lives as long as the generator; consecutive mazes continue it.
    """

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        if rng is not None:
            self._rng = rng
        else:
            self._rng = random.Random(seed if seed is not None else time.time_ns())

    def carve(self, grid: Grid) -> None:
        grid.fill(CellKind.WALL)
        grid.clear_visited()

        start = Position(1, 1)
        grid.set_kind(start.x, start.y, CellKind.OPEN)
        grid.mark_visited(start.x, start.y)
        grid.set_kind(grid.width - 2, grid.height - 2, CellKind.OPEN)

        stack: List[Position] = [start]
        while stack:
            current = stack[-1]
            candidates = self._unvisited_neighbors(grid, current)
            if not candidates:
                stack.pop()
                continue
            nxt = self._rng.choice(candidates)
            mid_x = (current.x + nxt.x) // 2
            mid_y = (current.y + nxt.y) // 2
            grid.set_kind(mid_x, mid_y, CellKind.OPEN)
            grid.set_kind(nxt.x, nxt.y, CellKind.OPEN)
            grid.mark_visited(nxt.x, nxt.y)
            stack.append(nxt)

        logger.debug(
            "Carved %dx%d maze with %d open cells",
            grid.width,
            grid.height,
            sum(1 for _ in grid.open_cells()),
        )

    @staticmethod
    def _unvisited_neighbors(grid: Grid, cell: Position) -> List[Position]:
        neighbors: List[Position] = []
        for dx, dy in LATTICE_STEPS:
            nx, ny = cell.x + dx, cell.y + dy
            if 1 <= nx <= grid.width - 2 and 1 <= ny <= grid.height - 2 and not grid.is_visited(nx, ny):
                neighbors.append(Position(nx, ny))
        return neighbors


__all__ = ["BacktrackingGenerator", "LATTICE_STEPS"]
