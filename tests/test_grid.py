import unittest

import numpy as np

from mazeengine import CellKind, Grid, Occupancy, OutOfBoundsError, Position


class GridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid(5, 7)

    def test_new_grid_is_all_wall(self) -> None:
        self.assertEqual(self.grid.width, 5)
        self.assertEqual(self.grid.height, 7)
        self.assertEqual(list(self.grid.open_cells()), [])
        self.assertTrue(all(value == 1 for row in self.grid.to_list() for value in row))

    def test_rejects_even_or_tiny_dimensions(self) -> None:
        for width, height in ((4, 5), (5, 6), (1, 5), (5, 1), (2, 2)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(ValueError):
                    Grid(width, height)

    def test_smallest_grid_is_accepted(self) -> None:
        grid = Grid(3, 3)
        self.assertTrue(grid.in_bounds(2, 2))
        self.assertFalse(grid.in_bounds(3, 0))

    def test_out_of_bounds_access_raises(self) -> None:
        for x, y in ((-1, 0), (0, -1), (5, 0), (0, 7)):
            with self.subTest(x=x, y=y):
                with self.assertRaises(OutOfBoundsError):
                    self.grid.kind_at(x, y)
                with self.assertRaises(IndexError):
                    self.grid.set_kind(x, y, CellKind.OPEN)
                with self.assertRaises(OutOfBoundsError):
                    self.grid.occupancy_at(x, y)

    def test_set_kind_and_open_cells(self) -> None:
        self.grid.set_kind(1, 1, CellKind.OPEN)
        self.grid.set_kind(3, 5, CellKind.OPEN)
        self.assertTrue(self.grid.is_open(1, 1))
        self.assertEqual(self.grid.kind_at(3, 5), CellKind.OPEN)
        self.assertEqual(list(self.grid.open_cells()), [Position(1, 1), Position(3, 5)])
        self.assertEqual(self.grid.to_list()[5][3], 0)

    def test_occupancy_refuses_walls(self) -> None:
        with self.assertRaises(ValueError):
            self.grid.set_occupancy(0, 0, Occupancy.AGENT)
        self.grid.set_kind(1, 1, CellKind.OPEN)
        self.grid.set_occupancy(1, 1, Occupancy.TARGET)
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.TARGET)
        self.grid.clear_occupancy()
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.NONE)

    def test_walling_a_cell_drops_its_overlay(self) -> None:
        self.grid.set_kind(1, 1, CellKind.OPEN)
        self.grid.set_occupancy(1, 1, Occupancy.AGENT)
        self.grid.set_kind(1, 1, CellKind.WALL)
        self.assertEqual(self.grid.kind_at(1, 1), CellKind.WALL)
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.NONE)

    def test_reopening_keeps_overlay(self) -> None:
        self.grid.set_kind(1, 1, CellKind.OPEN)
        self.grid.set_occupancy(1, 1, Occupancy.TARGET)
        self.grid.set_kind(1, 1, CellKind.OPEN)
        self.assertIs(self.grid.occupancy_at(1, 1), Occupancy.TARGET)

    def test_fill_with_wall_drops_every_overlay(self) -> None:
        self.grid.fill(CellKind.OPEN)
        self.grid.set_occupancy(1, 1, Occupancy.AGENT)
        self.grid.set_occupancy(3, 5, Occupancy.TARGET)
        self.grid.fill(CellKind.WALL)
        self.assertFalse(
            any(self.grid.occupancy_at(x, y) is not Occupancy.NONE for y in range(7) for x in range(5))
        )

    def test_clear_visited(self) -> None:
        self.grid.mark_visited(2, 3)
        self.grid.mark_visited(4, 6)
        self.assertTrue(self.grid.is_visited(2, 3))
        self.grid.clear_visited()
        self.assertFalse(any(self.grid.is_visited(x, y) for y in range(7) for x in range(5)))

    def test_fill_rewrites_every_kind(self) -> None:
        self.grid.fill(CellKind.OPEN)
        self.assertEqual(len(list(self.grid.open_cells())), 35)
        self.grid.fill(CellKind.WALL)
        self.assertEqual(list(self.grid.open_cells()), [])

    def test_as_array_matches_list(self) -> None:
        self.grid.set_kind(1, 2, CellKind.OPEN)
        arr = self.grid.as_array()
        self.assertEqual(arr.shape, (7, 5))
        self.assertEqual(arr.dtype, np.uint8)
        self.assertEqual(int(arr[2, 1]), 0)
        self.assertEqual(int(arr.sum()), 34)


if __name__ == "__main__":
    unittest.main()
