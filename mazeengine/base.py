"""Shared value types, errors and the abstract maze generator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple, Union

if TYPE_CHECKING:  # pragma: no cover
    from .grid import Grid

PathLike = Union[str, Path]


class MazeError(Exception):
    """Base class for errors raised by the maze engine."""


class OutOfBoundsError(MazeError, IndexError):
    """A grid coordinate lies outside the grid. Always a caller bug."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Position ({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class CellKind(IntEnum):
    OPEN = 0
    WALL = 1


class Occupancy(Enum):
    NONE = "none"
    AGENT = "agent"
    TARGET = "target"


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Position(NamedTuple):
    x: int
    y: int


class AbstractMazeGenerator(ABC):
    """Base class for algorithms that carve a maze into a grid."""

    @abstractmethod
    def carve(self, grid: "Grid") -> None:
        """Rewrite every cell kind of ``grid`` in place."""

    def generate(self, width: int, height: int) -> "Grid":
        """Build a fresh grid of the given size and carve it."""

        from .grid import Grid

        grid = Grid(width, height)
        self.carve(grid)
        return grid


__all__ = [
    "AbstractMazeGenerator",
    "CellKind",
    "Direction",
    "MazeError",
    "Occupancy",
    "OutOfBoundsError",
    "PathLike",
    "Position",
]
