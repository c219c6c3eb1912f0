"""Command-line driver: build a maze, replay key commands, write images."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .base import Direction
from .evaluator import MazeEvaluator
from .render import DEFAULT_CELL_SIZE, DEFAULT_FRAME_MS, MazeRenderer
from .session import DEFAULT_HEIGHT, DEFAULT_WIDTH, MazeSession

logger = logging.getLogger(__name__)

MOVE_KEYS: Dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}
COMMAND_KEYS = ("space", "r", "n", "a")
KEY_CHOICES = tuple(MOVE_KEYS) + COMMAND_KEYS


def run_keys(session: MazeSession, keys: List[str]) -> List[dict]:
    """Apply key commands the way the interactive bindings would.

    ``space`` shows the shortest path, ``r`` resets, ``n`` builds a new maze,
    ``a`` auto-solves to completion and arrow names move the agent.
    """

    results: List[dict] = []
    for key in keys:
        if key in MOVE_KEYS:
            ok = session.try_move(MOVE_KEYS[key])
            results.append({"key": key, "accepted": ok, "agent": list(session.agent_pos)})
        elif key == "space":
            found = session.request_solve().found
            if not found:
                logger.warning("No path from %s to %s", session.agent_pos, session.target_pos)
            results.append({"key": key, "path_found": found, "path_length": len(session.path)})
        elif key == "r":
            session.reset()
            results.append({"key": key})
        elif key == "n":
            session.generate_new()
            results.append({"key": key})
        elif key == "a":
            steps = 0
            if session.prepare_auto_solve():
                while session.advance_animation().moved:
                    steps += 1
            else:
                logger.warning("Auto-solve found no path from %s to %s", session.agent_pos, session.target_pos)
            results.append({"key": key, "steps": steps, "agent": list(session.agent_pos)})
        else:
            raise ValueError(f"Unknown key command: {key!r}")
    return results


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and solve a random perfect maze")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid width in cells (odd, >= 3)")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid height in cells (odd, >= 3)")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--keys",
        nargs="*",
        choices=KEY_CHOICES,
        default=[],
        help="Key commands to replay in order: up/down/left/right move, space shows the path, "
        "r resets, n generates a new maze, a auto-solves",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Where to save rendered images")
    parser.add_argument("--animate", action="store_true", help="Also write an animated GIF of the auto-solve")
    parser.add_argument("--frame-ms", type=int, default=DEFAULT_FRAME_MS)
    parser.add_argument("--verify", action="store_true", help="Include maze and path checks in the summary")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> dict:
    """Build the session described by ``args`` and return the JSON summary."""

    session = MazeSession(args.width, args.height, seed=args.seed)
    commands = run_keys(session, args.keys)
    snapshot = session.snapshot()

    summary = {
        "grid_size": [session.width, session.height],
        "agent": list(session.agent_pos),
        "target": list(session.target_pos),
        "path_found": session.is_path_found,
        "path_length": len(session.path),
        "solve_origin": list(session.solve_origin) if session.solve_origin is not None else None,
        "commands": commands,
        "images": {},
    }

    if args.verify:
        evaluator = MazeEvaluator(snapshot)
        summary["perfectness"] = evaluator.check_perfect().to_dict()
        if session.is_path_found:
            summary["path_check"] = evaluator.evaluate_path(
                session.path, session.solve_origin, session.target_pos
            ).to_dict()

    if args.output_dir is not None:
        renderer = MazeRenderer(cell_size=args.cell_size)
        args.output_dir.mkdir(parents=True, exist_ok=True)
        maze_path = args.output_dir / "maze.png"
        renderer.render(snapshot, show_path=False).save(maze_path)
        summary["images"]["maze"] = maze_path.as_posix()
        if session.is_path_found:
            solution_path = args.output_dir / "solution.png"
            renderer.render(snapshot).save(solution_path)
            summary["images"]["solution"] = solution_path.as_posix()
        if args.animate:
            frames = renderer.render_animation(session)
            gif_path = renderer.save_animation(frames, args.output_dir / "autosolve.gif", frame_ms=args.frame_ms)
            summary["images"]["animation"] = gif_path.as_posix()
            summary["animation_frames"] = len(frames)

    return summary


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    print(json.dumps(run(args), indent=2))


if __name__ == "__main__":
    main()
