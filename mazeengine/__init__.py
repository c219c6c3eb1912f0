"""Perfect maze generation, shortest-path search and auto-solve animation."""

__all__ = [
    "AbstractMazeGenerator",
    "AgentController",
    "AnimationStep",
    "BacktrackingGenerator",
    "Cell",
    "CellKind",
    "ControllerState",
    "Direction",
    "Grid",
    "MazeError",
    "MazeEvaluator",
    "MazeRenderer",
    "MazeSession",
    "MazeSnapshot",
    "Occupancy",
    "OutOfBoundsError",
    "PathEvaluation",
    "PathResult",
    "PerfectnessReport",
    "Position",
    "find_shortest_path",
]

from .base import (
    AbstractMazeGenerator,
    CellKind,
    Direction,
    MazeError,
    Occupancy,
    OutOfBoundsError,
    Position,
)
from .grid import Cell, Grid
from .generator import BacktrackingGenerator
from .pathfinder import PathResult, find_shortest_path
from .agent import AgentController, AnimationStep, ControllerState
from .session import MazeSession, MazeSnapshot
from .evaluator import MazeEvaluator, PathEvaluation, PerfectnessReport
from .render import MazeRenderer
