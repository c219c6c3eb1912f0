"""Pillow rendering of maze snapshots and auto-solve animations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .base import CellKind, Occupancy, PathLike, Position
from .session import MazeSession, MazeSnapshot

logger = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 32
DEFAULT_FRAME_MS = 20

WALL_COLOR = (77, 77, 77)
OPEN_COLOR = (230, 230, 230)
AGENT_COLOR = (66, 135, 245)
TARGET_COLOR = (245, 66, 66)
PATH_COLOR = (66, 245, 173)


class MazeRenderer:
    """Draw snapshots cell by cell; the highlighted path is a centred marker."""

    def __init__(self, *, cell_size: int = DEFAULT_CELL_SIZE) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size

    def canvas_dimensions(self, snapshot: MazeSnapshot) -> Tuple[int, int]:
        return snapshot.width * self.cell_size, snapshot.height * self.cell_size

    def cell_bbox(self, x: int, y: int) -> Tuple[int, int, int, int]:
        left = x * self.cell_size
        top = y * self.cell_size
        return left, top, left + self.cell_size - 1, top + self.cell_size - 1

    def render(self, snapshot: MazeSnapshot, *, show_path: bool = True) -> Image.Image:
        canvas = Image.new("RGB", self.canvas_dimensions(snapshot), WALL_COLOR)
        draw = ImageDraw.Draw(canvas)

        for y in range(snapshot.height):
            for x in range(snapshot.width):
                occupancy = snapshot.occupancy_at(x, y)
                if occupancy is Occupancy.AGENT:
                    fill = AGENT_COLOR
                elif occupancy is Occupancy.TARGET:
                    fill = TARGET_COLOR
                else:
                    fill = OPEN_COLOR if snapshot.kind_at(x, y) == CellKind.OPEN else WALL_COLOR
                draw.rectangle(self.cell_bbox(x, y), fill=fill)

        if show_path and snapshot.path_found:
            self._draw_path(draw, snapshot, snapshot.path)
        return canvas

    def render_animation(
        self,
        session: MazeSession,
        *,
        max_frames: Optional[int] = None,
    ) -> List[Image.Image]:
        """Run an auto-solve on ``session``, one frame per animation step.

        The first frame shows the agent before it moves. Returns a single frame
        when no path exists.
        """

        frames = [self.render(session.snapshot())]
        if not session.prepare_auto_solve():
            logger.warning("Auto-solve found no path from %s to %s", session.agent_pos, session.target_pos)
            return frames
        while max_frames is None or len(frames) < max_frames:
            step = session.advance_animation()
            if not step.moved:
                break
            frames.append(self.render(session.snapshot()))
            if step.reached_target:
                break
        return frames

    def save_animation(
        self,
        frames: Sequence[Image.Image],
        path: PathLike,
        *,
        frame_ms: int = DEFAULT_FRAME_MS,
    ) -> Path:
        if not frames:
            raise ValueError("At least one frame is required")
        destination = Path(path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        first, *rest = frames
        first.save(
            destination,
            save_all=True,
            append_images=list(rest),
            duration=frame_ms,
            loop=0,
        )
        return destination

    # ------------------------------------------------------------------

    def _draw_path(
        self,
        draw: ImageDraw.ImageDraw,
        snapshot: MazeSnapshot,
        path: Sequence[Position],
    ) -> None:
        quarter = self.cell_size // 4
        for x, y in path:
            if snapshot.occupancy_at(x, y) is not Occupancy.NONE:
                continue
            cx = x * self.cell_size + self.cell_size // 2
            cy = y * self.cell_size + self.cell_size // 2
            draw.rectangle((cx - quarter, cy - quarter, cx + quarter, cy + quarter), fill=PATH_COLOR)


__all__ = ["DEFAULT_CELL_SIZE", "DEFAULT_FRAME_MS", "MazeRenderer"]
