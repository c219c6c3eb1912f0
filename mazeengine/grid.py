"""Rectangular cell lattice holding wall/open topology and agent overlays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np

from .base import CellKind, Occupancy, OutOfBoundsError, Position


@dataclass
class Cell:
    kind: CellKind = CellKind.WALL
    occupancy: Occupancy = Occupancy.NONE
    visited: bool = False


class Grid:
    """A ``width`` x ``height`` grid of cells, addressed as ``(x, y)``.

    Both dimensions must be odd and at least 3 so that a one-cell wall border
    surrounds the odd-coordinate lattice the generator carves.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 3 or height < 3:
            raise ValueError("width and height must be at least 3")
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError("width and height must be odd")
        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._cells[y][x]

    def kind_at(self, x: int, y: int) -> CellKind:
        return self.cell(x, y).kind

    def set_kind(self, x: int, y: int, kind: CellKind) -> None:
        cell = self.cell(x, y)
        cell.kind = kind
        if kind == CellKind.WALL:
            cell.occupancy = Occupancy.NONE

    def is_open(self, x: int, y: int) -> bool:
        return self.cell(x, y).kind == CellKind.OPEN

    def occupancy_at(self, x: int, y: int) -> Occupancy:
        return self.cell(x, y).occupancy

    def set_occupancy(self, x: int, y: int, occupancy: Occupancy) -> None:
        cell = self.cell(x, y)
        if occupancy is not Occupancy.NONE and cell.kind == CellKind.WALL:
            raise ValueError(f"Cannot place {occupancy.value} on wall cell ({x}, {y})")
        cell.occupancy = occupancy

    def is_visited(self, x: int, y: int) -> bool:
        return self.cell(x, y).visited

    def mark_visited(self, x: int, y: int) -> None:
        self.cell(x, y).visited = True

    # ------------------------------------------------------------------

    def fill(self, kind: CellKind) -> None:
        for row in self._cells:
            for cell in row:
                cell.kind = kind
                if kind == CellKind.WALL:
                    cell.occupancy = Occupancy.NONE

    def clear_visited(self) -> None:
        for row in self._cells:
            for cell in row:
                cell.visited = False

    def clear_occupancy(self) -> None:
        for row in self._cells:
            for cell in row:
                cell.occupancy = Occupancy.NONE

    def open_cells(self) -> Iterator[Position]:
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell.kind == CellKind.OPEN:
                    yield Position(x, y)

    def to_list(self) -> List[List[int]]:
        """Rows of ``0`` (open) and ``1`` (wall), indexed ``[y][x]``."""

        return [[int(cell.kind) for cell in row] for row in self._cells]

    def as_array(self) -> np.ndarray:
        return np.asarray(self.to_list(), dtype=np.uint8)


__all__ = ["Cell", "Grid"]
