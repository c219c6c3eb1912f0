"""Session orchestrator composing grid, generator, path finder and agent."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .agent import AgentController, AnimationStep
from .base import AbstractMazeGenerator, CellKind, Direction, Occupancy, Position
from .generator import BacktrackingGenerator
from .pathfinder import PathResult, find_shortest_path

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 21
DEFAULT_HEIGHT = 21


@dataclass(frozen=True)
class MazeSnapshot:
    """Read-only copy of everything a renderer needs for one frame."""

    width: int
    height: int
    kinds: Tuple[Tuple[CellKind, ...], ...]
    occupancy: Tuple[Tuple[Occupancy, ...], ...]
    path: Tuple[Position, ...]
    agent: Position
    target: Position
    animating: bool
    path_found: bool

    def kind_at(self, x: int, y: int) -> CellKind:
        return self.kinds[y][x]

    def occupancy_at(self, x: int, y: int) -> Occupancy:
        return self.occupancy[y][x]

    def as_array(self) -> np.ndarray:
        return np.asarray([[int(kind) for kind in row] for row in self.kinds], dtype=np.uint8)

    def to_dict(self) -> dict:
        return {
            "grid_size": [self.width, self.height],
            "maze_grid": [[int(kind) for kind in row] for row in self.kinds],
            "agent": list(self.agent),
            "target": list(self.target),
            "path": [list(pos) for pos in self.path],
            "path_found": self.path_found,
            "animating": self.animating,
        }


class MazeSession:
    """Owns one maze and all of its transient state.

    Hosts (renderers, input handlers, timers) hold a reference to a session
    and call into it; nothing else keeps references into the grid. Pass either
    a ``seed`` for the default generator or a ready ``generator``, not both.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        seed: Optional[int] = None,
        generator: Optional[AbstractMazeGenerator] = None,
    ) -> None:
        if generator is not None and seed is not None:
            raise ValueError("seed only applies to the default generator; seed the generator instead")
        self._generator = generator or BacktrackingGenerator(seed=seed)
        self._grid = self._generator.generate(width, height)
        self._path: List[Position] = []
        self._path_found = False
        self._solve_origin: Optional[Position] = None
        self._agent = AgentController(self._grid, self._start_corner(), self._target_corner())
        self.reset()

    # -- queries -------------------------------------------------------

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def agent_pos(self) -> Position:
        return self._agent.agent_pos

    @property
    def target_pos(self) -> Position:
        return self._agent.target_pos

    @property
    def path(self) -> Tuple[Position, ...]:
        return tuple(self._path)

    @property
    def solve_origin(self) -> Optional[Position]:
        """Agent cell the highlighted path was computed from, if any."""

        return self._solve_origin

    @property
    def is_animating(self) -> bool:
        return self._agent.is_animating

    @property
    def is_path_found(self) -> bool:
        return self._path_found

    def kind_at(self, x: int, y: int) -> CellKind:
        return self._grid.kind_at(x, y)

    def occupancy_at(self, x: int, y: int) -> Occupancy:
        return self._grid.occupancy_at(x, y)

    def snapshot(self) -> MazeSnapshot:
        kinds = tuple(
            tuple(self._grid.kind_at(x, y) for x in range(self.width)) for y in range(self.height)
        )
        occupancy = tuple(
            tuple(self._grid.occupancy_at(x, y) for x in range(self.width)) for y in range(self.height)
        )
        return MazeSnapshot(
            width=self.width,
            height=self.height,
            kinds=kinds,
            occupancy=occupancy,
            path=self.path,
            agent=self.agent_pos,
            target=self.target_pos,
            animating=self.is_animating,
            path_found=self._path_found,
        )

    # -- commands ------------------------------------------------------

    def generate_new(self) -> None:
        self._agent.cancel()
        self._generator.carve(self._grid)
        logger.debug("Generated new %dx%d maze", self.width, self.height)
        self.reset()

    def reset(self) -> None:
        self._grid.clear_visited()
        self._agent.place(self._start_corner(), self._target_corner())
        self._path = []
        self._path_found = False
        self._solve_origin = None
        logger.debug("Reset maze")

    def try_move(self, direction: Direction) -> bool:
        moved = self._agent.try_move(direction.dx, direction.dy)
        if moved:
            self._path = []
            self._path_found = False
            self._solve_origin = None
        logger.debug("Move %s %s", direction.name, "accepted" if moved else "rejected")
        return moved

    def request_solve(self) -> PathResult:
        origin = self.agent_pos
        result = find_shortest_path(self._grid, origin, self.target_pos)
        self._store(result, origin)
        logger.debug("Show shortest path: found=%s length=%d", result.found, len(result))
        return result

    def prepare_auto_solve(self) -> bool:
        origin = self.agent_pos
        result = self._agent.prepare_auto_solve()
        self._store(result, origin)
        logger.debug("Start auto-solve: found=%s", result.found)
        return result.found

    def advance_animation(self) -> AnimationStep:
        step = self._agent.advance()
        logger.debug("Auto-solve step: moved=%s reached=%s at %s", step.moved, step.reached_target, step.position)
        return step

    # ------------------------------------------------------------------

    def _store(self, result: PathResult, origin: Position) -> None:
        self._path = list(result.path)
        self._path_found = result.found
        self._solve_origin = origin if result.found else None

    def _start_corner(self) -> Position:
        return Position(1, 1)

    def _target_corner(self) -> Position:
        return Position(self._grid.width - 2, self._grid.height - 2)


__all__ = ["DEFAULT_HEIGHT", "DEFAULT_WIDTH", "MazeSession", "MazeSnapshot"]
