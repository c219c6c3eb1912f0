"""Breadth-first shortest path search over open grid cells."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .base import OutOfBoundsError, Position
from .grid import Grid

# Right, left, down, up. Order only matters when several shortest paths exist.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class PathResult:
    found: bool
    path: List[Position] = field(default_factory=list)
    explored: int = 0

    def __len__(self) -> int:
        return len(self.path)

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "length": len(self.path),
            "explored": self.explored,
            "path": [list(pos) for pos in self.path],
        }


def find_shortest_path(grid: Grid, start: Position, goal: Position) -> PathResult:
    """Return the minimum-edge open path from ``start`` to ``goal``, inclusive.

    The search keeps its own parent map as the visited set and never touches
    the grid's scratch flags. An unreachable goal, or an endpoint sitting on a
    wall, yields ``PathResult(found=False)``.
    """

    start = Position(*start)
    goal = Position(*goal)
    for pos in (start, goal):
        if not grid.in_bounds(pos.x, pos.y):
            raise OutOfBoundsError(pos.x, pos.y, grid.width, grid.height)
    if not grid.is_open(start.x, start.y) or not grid.is_open(goal.x, goal.y):
        return PathResult(found=False)

    queue: deque[Position] = deque([start])
    parents: Dict[Position, Optional[Position]] = {start: None}
    explored = 0
    while queue:
        current = queue.popleft()
        explored += 1
        if current == goal:
            return PathResult(found=True, path=_reconstruct(parents, goal), explored=explored)
        for dx, dy in NEIGHBOR_STEPS:
            nxt = Position(current.x + dx, current.y + dy)
            if grid.in_bounds(nxt.x, nxt.y) and nxt not in parents and grid.is_open(nxt.x, nxt.y):
                parents[nxt] = current
                queue.append(nxt)

    return PathResult(found=False, explored=explored)


def _reconstruct(parents: Dict[Position, Optional[Position]], goal: Position) -> List[Position]:
    node: Optional[Position] = goal
    result: List[Position] = []
    while node is not None:
        result.append(node)
        node = parents[node]
    result.reverse()
    return result


__all__ = ["NEIGHBOR_STEPS", "PathResult", "find_shortest_path"]
