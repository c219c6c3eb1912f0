"""Agent movement and the step-wise auto-solve state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .base import CellKind, Occupancy, Position
from .grid import Grid
from .pathfinder import PathResult, find_shortest_path

logger = logging.getLogger(__name__)


class ControllerState(Enum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass(frozen=True)
class AnimationStep:
    """Outcome of one ``advance()`` call."""

    moved: bool
    reached_target: bool
    position: Position


class AgentController:
    """Owns the agent and target positions on a grid it does not own.

    Manual moves are accepted only while idle. ``prepare_auto_solve`` loads the
    shortest path and switches to animating; each ``advance`` then walks one
    cell until the target is reached.
    """

    def __init__(self, grid: Grid, agent: Position, target: Position) -> None:
        self._grid = grid
        self._agent = Position(*agent)
        self._target = Position(*target)
        self._state = ControllerState.IDLE
        self._animation_path: List[Position] = []
        self._cursor = 0
        self.place(agent, target)

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def is_animating(self) -> bool:
        return self._state is ControllerState.ANIMATING

    @property
    def agent_pos(self) -> Position:
        return self._agent

    @property
    def target_pos(self) -> Position:
        return self._target

    @property
    def animation_path(self) -> Tuple[Position, ...]:
        return tuple(self._animation_path)

    @property
    def cursor(self) -> int:
        return self._cursor

    def place(self, agent: Position, target: Position) -> None:
        """Put agent and target on their cells and drop any animation."""

        self.cancel()
        self._grid.clear_occupancy()
        self._agent = Position(*agent)
        self._target = Position(*target)
        self._grid.set_occupancy(self._target.x, self._target.y, Occupancy.TARGET)
        self._grid.set_occupancy(self._agent.x, self._agent.y, Occupancy.AGENT)

    def cancel(self) -> None:
        self._state = ControllerState.IDLE
        self._animation_path = []
        self._cursor = 0

    def try_move(self, dx: int, dy: int) -> bool:
        if self.is_animating:
            return False
        if abs(dx) + abs(dy) != 1:
            return False
        dest = Position(self._agent.x + dx, self._agent.y + dy)
        if not self._grid.in_bounds(dest.x, dest.y):
            return False
        if self._grid.kind_at(dest.x, dest.y) != CellKind.OPEN:
            return False
        self._relocate(dest)
        return True

    def prepare_auto_solve(self) -> PathResult:
        result = find_shortest_path(self._grid, self._agent, self._target)
        if not result.found:
            logger.debug("No path from %s to %s; staying idle", self._agent, self._target)
            return result
        # The path already starts at the agent's own cell, so cursor 0 is "here".
        self._animation_path = list(result.path)
        self._cursor = 0
        self._state = ControllerState.ANIMATING
        return result

    def advance(self) -> AnimationStep:
        if not self.is_animating or self._cursor >= len(self._animation_path) - 1:
            self.cancel()
            return AnimationStep(moved=False, reached_target=False, position=self._agent)

        self._cursor += 1
        self._relocate(self._animation_path[self._cursor])
        reached = self._agent == self._target
        if reached:
            self._state = ControllerState.IDLE
        return AnimationStep(moved=True, reached_target=reached, position=self._agent)

    def _relocate(self, dest: Position) -> None:
        old = self._agent
        left_behind = Occupancy.TARGET if old == self._target else Occupancy.NONE
        self._grid.set_occupancy(old.x, old.y, left_behind)
        self._grid.set_occupancy(dest.x, dest.y, Occupancy.AGENT)
        self._agent = dest


__all__ = ["AgentController", "AnimationStep", "ControllerState"]
