import unittest
import numpy as np
from disksample.geometry import (
    DiscGrid,
    is_valid_position,
    min_pairwise_distance,
    points_to_array,
    to_vector3,
)

class TestDiscGrid(unittest.TestCase):
    def setUp(self):
        """A 10x10 grid over a disc of radius 5 with unit spread."""
        self.grid = DiscGrid(max_radius=5.0, spread=1.0)

    # --- Test Grid Sizing ---

    def test_cells_at_least_spread_wide(self):
        """Cell width never drops below spread, whatever the ratio."""
        self.assertEqual(self.grid.cells_per_axis, 10)
        self.assertAlmostEqual(self.grid.cell_width, 1.0)

        odd = DiscGrid(max_radius=5.0, spread=3.0)
        # 10 / 3 = 3.33 -> 3 cells of width 3.33
        self.assertEqual(odd.cells_per_axis, 3)
        self.assertGreaterEqual(odd.cell_width, 3.0)

    def test_spread_larger_than_disc(self):
        """A spread wider than the disc collapses to a single cell."""
        tiny = DiscGrid(max_radius=1.0, spread=10.0)
        self.assertEqual(tiny.cells_per_axis, 1)
        self.assertEqual(tiny.cell_coordinate_of((0.9, -0.9)), (0, 0))

    # --- Test Cell Mapping ---

    def test_cell_coordinate_of(self):
        """Points are offset by the radius and floored into cells."""
        self.assertEqual(self.grid.cell_coordinate_of((0.0, 0.0)), (5, 5))
        self.assertEqual(self.grid.cell_coordinate_of((-5.0, -5.0)), (0, 0))
        self.assertEqual(self.grid.cell_coordinate_of((-0.1, 0.1)), (4, 5))

    def test_cell_coordinate_clamped(self):
        """Out-of-range positions land in the nearest edge cell."""
        self.assertEqual(self.grid.cell_coordinate_of((5.0, 5.0)), (9, 9))
        self.assertEqual(self.grid.cell_coordinate_of((100.0, -100.0)), (9, 0))

    def test_neighbourhood_clipped_at_corner(self):
        """The 3x3 block shrinks to 2x2 in a corner cell."""
        self.assertEqual(len(list(self.grid.neighbourhood((0, 0)))), 4)
        self.assertEqual(len(list(self.grid.neighbourhood((5, 5)))), 9)

    # --- Test Neighbour Rejection ---

    def test_rejects_close_point(self):
        """A stored point closer than spread invalidates the candidate."""
        origin = (0.0, 0.0)
        self.grid.insert(self.grid.cell_coordinate_of(origin), origin)

        close = (0.5, 0.0)
        self.assertFalse(self.grid.is_valid_candidate(self.grid.cell_coordinate_of(close), close, 1.0))

    def test_accepts_point_at_exact_spread(self):
        """Distance equal to spread is allowed (strict less-than rejection)."""
        origin = (0.0, 0.0)
        self.grid.insert(self.grid.cell_coordinate_of(origin), origin)

        edge = (1.0, 0.0)
        self.assertTrue(self.grid.is_valid_candidate(self.grid.cell_coordinate_of(edge), edge, 1.0))

    def test_far_cells_are_ignored(self):
        """Occupants outside the 3x3 block never affect the result."""
        corner = (-4.5, -4.5)
        self.grid.insert(self.grid.cell_coordinate_of(corner), corner)

        # Even with a huge spread, the opposite corner does not see it
        opposite = (4.5, 4.5)
        self.assertTrue(self.grid.is_valid_candidate(self.grid.cell_coordinate_of(opposite), opposite, 100.0))

    def test_cell_keeps_every_occupant(self):
        """Two separated points in one cell are both stored and both checked."""
        a, b = (0.05, 0.05), (0.95, 0.95)
        self.grid.insert(self.grid.cell_coordinate_of(a), a)
        self.grid.insert(self.grid.cell_coordinate_of(b), b)

        self.assertEqual(len(self.grid), 2)
        self.assertEqual(self.grid.occupied_cells, 1)
        self.assertCountEqual(list(self.grid.points()), [a, b])

        near_a = (0.1, 0.1)
        self.assertFalse(self.grid.is_valid_candidate(self.grid.cell_coordinate_of(near_a), near_a, 0.5))

    def test_matches_brute_force(self):
        """Grid answers agree with a full scan of all stored points."""
        rng = np.random.default_rng(3)
        stored = []
        for x, y in rng.uniform(-3.5, 3.5, size=(40, 2)):
            point = (float(x), float(y))
            self.grid.insert(self.grid.cell_coordinate_of(point), point)
            stored.append(point)

        for x, y in rng.uniform(-3.5, 3.5, size=(300, 2)):
            point = (float(x), float(y))
            cell = self.grid.cell_coordinate_of(point)
            self.assertEqual(
                self.grid.is_valid_candidate(cell, point, 1.0),
                is_valid_position(point, 1.0, 5.0, stored),
            )


class TestDiscHelpers(unittest.TestCase):

    def test_valid_position_off_disc(self):
        """Points beyond the radius are rejected before any distance check."""
        self.assertFalse(is_valid_position((4.0, 4.0), 1.0, 5.0, []))
        self.assertTrue(is_valid_position((3.0, 4.0), 1.0, 5.0, []))

    def test_valid_position_spacing(self):
        self.assertFalse(is_valid_position((0.0, 0.0), 1.0, 5.0, [(0.0, 0.9)]))
        self.assertTrue(is_valid_position((0.0, 0.0), 1.0, 5.0, [(0.0, 1.1)]))

    def test_points_to_array(self):
        self.assertEqual(points_to_array([]).shape, (0, 2))
        self.assertEqual(points_to_array([(1.0, 2.0), (3.0, 4.0)]).shape, (2, 2))

    def test_to_vector3_planes(self):
        """The disc can be lifted onto the xy or xz plane."""
        points = [(1.0, 2.0)]
        np.testing.assert_array_equal(to_vector3(points), [[1.0, 2.0, 0.0]])
        np.testing.assert_array_equal(to_vector3(points, plane="xz"), [[1.0, 0.0, 2.0]])
        with self.assertRaises(ValueError):
            to_vector3(points, plane="yz")

    def test_min_pairwise_distance(self):
        self.assertEqual(min_pairwise_distance([(0.0, 0.0)]), float('inf'))
        self.assertAlmostEqual(min_pairwise_distance([(0.0, 0.0), (3.0, 4.0), (10.0, 10.0)]), 5.0)

if __name__ == '__main__':
    unittest.main()
