"""Structural checks for generated mazes and candidate solution paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .base import CellKind, Position


@dataclass
class PerfectnessReport:
    open_cells: int
    edges: int
    components: int
    is_perfect: bool
    message: str

    def to_dict(self) -> dict:
        return {
            "open_cells": self.open_cells,
            "edges": self.edges,
            "components": self.components,
            "is_perfect": self.is_perfect,
            "message": self.message,
        }


@dataclass
class PathEvaluation:
    length: int
    starts_at_start: bool
    touches_goal: bool
    connected: bool
    stray_in_walls: bool
    message: str

    @property
    def is_valid(self) -> bool:
        return self.starts_at_start and self.touches_goal and self.connected and not self.stray_in_walls

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "starts_at_start": self.starts_at_start,
            "touches_goal": self.touches_goal,
            "connected": self.connected,
            "stray_in_walls": self.stray_in_walls,
            "is_valid": self.is_valid,
            "message": self.message,
        }


class MazeEvaluator:
    """Evaluate a 0/1 maze matrix (``[y][x]``, ``0`` = open).

    Accepts anything exposing ``as_array()`` (a ``Grid`` or ``MazeSnapshot``)
    or a nested sequence / ndarray directly.
    """

    def __init__(self, maze) -> None:
        arr = maze.as_array() if hasattr(maze, "as_array") else np.asarray(maze)
        if arr.ndim != 2:
            raise ValueError("Maze must be a 2D matrix")
        self._open = arr == int(CellKind.OPEN)
        self.height, self.width = self._open.shape

    def check_perfect(self) -> PerfectnessReport:
        open_mask = self._open
        open_cells = int(open_mask.sum())
        horizontal = int(np.sum(open_mask[:, :-1] & open_mask[:, 1:]))
        vertical = int(np.sum(open_mask[:-1, :] & open_mask[1:, :]))
        edges = horizontal + vertical
        components = self._count_components()

        is_perfect = open_cells > 0 and components == 1 and edges == open_cells - 1
        if open_cells == 0:
            message = "Maze has no open cells."
        elif components != 1:
            message = f"Open cells form {components} disconnected regions."
        elif edges != open_cells - 1:
            message = f"Open cells contain cycles ({edges} edges for {open_cells} cells)."
        else:
            message = "Open cells form a single spanning tree."
        return PerfectnessReport(
            open_cells=open_cells,
            edges=edges,
            components=components,
            is_perfect=is_perfect,
            message=message,
        )

    def evaluate_path(
        self,
        path: Sequence[Tuple[int, int]],
        start: Tuple[int, int],
        goal: Tuple[int, int],
    ) -> PathEvaluation:
        cells = [Position(*pos) for pos in path]
        stray_in_walls = any(not self._is_open(pos) for pos in cells)
        connected = all(
            abs(a.x - b.x) + abs(a.y - b.y) == 1 for a, b in zip(cells, cells[1:])
        )
        starts_at_start = bool(cells) and cells[0] == tuple(start)
        touches_goal = bool(cells) and cells[-1] == tuple(goal)

        if not cells:
            message = "Path is empty."
        elif stray_in_walls:
            message = "Path overlaps walls or leaves the grid."
        elif not starts_at_start:
            message = "Path does not begin at the start cell."
        elif not touches_goal:
            message = "Path does not reach the goal."
        elif not connected:
            message = "Path is not continuous from start to goal."
        else:
            message = "Path successfully connects start to goal."

        return PathEvaluation(
            length=len(cells),
            starts_at_start=starts_at_start,
            touches_goal=touches_goal,
            connected=connected,
            stray_in_walls=stray_in_walls,
            message=message,
        )

    # ------------------------------------------------------------------

    def _is_open(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height and bool(self._open[pos.y, pos.x])

    def _count_components(self) -> int:
        seen = np.zeros_like(self._open, dtype=bool)
        components = 0
        ys, xs = np.nonzero(self._open)
        for y0, x0 in zip(ys.tolist(), xs.tolist()):
            if seen[y0, x0]:
                continue
            components += 1
            seen[y0, x0] = True
            queue: List[Tuple[int, int]] = [(x0, y0)]
            while queue:
                x, y = queue.pop()
                for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                    nx, ny = x + dx, y + dy
                    if self._is_open(Position(nx, ny)) and not seen[ny, nx]:
                        seen[ny, nx] = True
                        queue.append((nx, ny))
        return components


__all__ = ["MazeEvaluator", "PathEvaluation", "PerfectnessReport"]
