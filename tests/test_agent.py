import unittest

from helpers import open_grid

from mazeengine import AgentController, CellKind, ControllerState, Occupancy, Position


class AgentControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        # Wall column at x=3 with a single gap at the bottom.
        self.grid = open_grid(7, 7, walls={(3, 1), (3, 2), (3, 3), (3, 4)})
        self.controller = AgentController(self.grid, Position(1, 1), Position(5, 1))

    def test_initial_placement(self) -> None:
        self.assertIs(self.controller.state, ControllerState.IDLE)
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.AGENT)
        self.assertIs(self.grid.occupancy_at(5, 1), Occupancy.TARGET)

    def test_accepted_move_updates_overlay(self) -> None:
        self.assertTrue(self.controller.try_move(1, 0))
        self.assertEqual(self.controller.agent_pos, Position(2, 1))
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.NONE)
        self.assertIs(self.grid.occupancy_at(2, 1), Occupancy.AGENT)

    def test_rejected_moves_leave_state_alone(self) -> None:
        self.controller.try_move(1, 0)
        for dx, dy in ((1, 0), (0, -1), (0, 0), (1, 1), (2, 0), (-1, -1)):
            with self.subTest(dx=dx, dy=dy):
                self.assertFalse(self.controller.try_move(dx, dy))
                self.assertEqual(self.controller.agent_pos, Position(2, 1))
                self.assertIs(self.grid.occupancy_at(2, 1), Occupancy.AGENT)

    def test_out_of_bounds_move_is_rejected(self) -> None:
        self.grid.set_kind(0, 2, CellKind.OPEN)
        controller = AgentController(self.grid, Position(0, 2), Position(5, 1))
        self.assertFalse(controller.try_move(-1, 0))
        self.assertEqual(controller.agent_pos, Position(0, 2))

    def test_leaving_the_target_restores_it(self) -> None:
        controller = AgentController(self.grid, Position(1, 1), Position(2, 1))
        self.assertTrue(controller.try_move(1, 0))
        self.assertIs(self.grid.occupancy_at(2, 1), Occupancy.AGENT)
        self.assertTrue(controller.try_move(-1, 0))
        self.assertIs(self.grid.occupancy_at(2, 1), Occupancy.TARGET)

    def test_auto_solve_walks_to_target(self) -> None:
        result = self.controller.prepare_auto_solve()
        self.assertTrue(result.found)
        self.assertTrue(self.controller.is_animating)
        self.assertEqual(self.controller.animation_path[0], Position(1, 1))
        self.assertEqual(self.controller.cursor, 0)

        steps = []
        while True:
            step = self.controller.advance()
            if not step.moved:
                break
            steps.append(step)

        self.assertEqual(len(steps), len(result.path) - 1)
        self.assertEqual(self.controller.agent_pos, Position(5, 1))
        self.assertTrue(steps[-1].reached_target)
        self.assertFalse(any(step.reached_target for step in steps[:-1]))
        self.assertIs(self.controller.state, ControllerState.IDLE)
        self.assertIs(self.grid.occupancy_at(5, 1), Occupancy.AGENT)
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.NONE)

    def test_manual_moves_rejected_while_animating(self) -> None:
        self.controller.prepare_auto_solve()
        self.assertFalse(self.controller.try_move(0, 1))
        self.assertEqual(self.controller.agent_pos, Position(1, 1))
        self.controller.advance()
        self.assertFalse(self.controller.try_move(-1, 0))

    def test_unreachable_target_stays_idle(self) -> None:
        self.grid.set_kind(3, 5, CellKind.WALL)
        result = self.controller.prepare_auto_solve()
        self.assertFalse(result.found)
        self.assertIs(self.controller.state, ControllerState.IDLE)
        self.assertEqual(self.controller.animation_path, ())
        step = self.controller.advance()
        self.assertFalse(step.moved)
        self.assertEqual(step.position, Position(1, 1))

    def test_agent_already_on_target(self) -> None:
        controller = AgentController(self.grid, Position(4, 4), Position(4, 4))
        self.assertTrue(controller.prepare_auto_solve().found)
        step = controller.advance()
        self.assertFalse(step.moved)
        self.assertFalse(controller.is_animating)

    def test_cancel_aborts_animation(self) -> None:
        self.controller.prepare_auto_solve()
        self.controller.advance()
        self.controller.cancel()
        self.assertFalse(self.controller.is_animating)
        self.assertEqual(self.controller.animation_path, ())
        self.assertEqual(self.controller.cursor, 0)
        self.assertFalse(self.controller.advance().moved)


if __name__ == "__main__":
    unittest.main()
