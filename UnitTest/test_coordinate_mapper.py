import os
import sys
import unittest

import numpy as np

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from LivePoints.CoordinateMapper import CoordinateMapper, map_points, to_screen, to_screen_x, to_screen_y
from LivePoints.Errors import InvalidConfiguration
from LivePoints.Geometry import LogicalRange, PixelBounds, Point


class TestCoordinateMapper(unittest.TestCase):
    def setUp(self):
        self.rng = LogicalRange(0.0, 100.0, 0.0, 100.0)
        self.bounds = PixelBounds(600, 400, 20)

    def test_worked_example_centre(self):
        self.assertEqual(to_screen_x(50, self.rng, self.bounds), 300)
        self.assertEqual(to_screen_y(50, self.rng, self.bounds), 200)

    def test_x_boundaries(self):
        self.assertEqual(to_screen_x(0, self.rng, self.bounds), 20)
        self.assertEqual(to_screen_x(100, self.rng, self.bounds), 580)

    def test_y_boundaries_are_inverted(self):
        self.assertEqual(to_screen_y(0, self.rng, self.bounds), 380)
        self.assertEqual(to_screen_y(100, self.rng, self.bounds), 20)

    def test_negative_and_offset_range(self):
        rng = LogicalRange(-10.0, 10.0, 5.0, 15.0)
        bounds = PixelBounds(220, 120, 10)
        self.assertEqual(to_screen(( -10, 5), rng, bounds), (10, 110))
        self.assertEqual(to_screen((10, 15), rng, bounds), (210, 10))
        self.assertEqual(to_screen((0, 10), rng, bounds), (110, 60))

    def test_rounds_to_nearest(self):
        bounds = PixelBounds(13, 13, 0)
        # 1/3 * 13 = 4.33 -> 4, 2/3 * 13 = 8.67 -> 9
        rng = LogicalRange(0.0, 3.0, 0.0, 3.0)
        self.assertEqual(to_screen_x(1, rng, bounds), 4)
        self.assertEqual(to_screen_x(2, rng, bounds), 9)

    def test_deterministic(self):
        results = {to_screen((12.345, 67.89), self.rng, self.bounds) for _ in range(100)}
        self.assertEqual(len(results), 1)

    def test_out_of_range_points_map_outside_drawable_area(self):
        self.assertLess(to_screen_x(-50, self.rng, self.bounds), 20)
        self.assertGreater(to_screen_x(150, self.rng, self.bounds), 580)
        self.assertGreater(to_screen_y(-50, self.rng, self.bounds), 380)

    def test_extreme_values_do_not_raise(self):
        x = to_screen_x(1e308, self.rng, self.bounds)
        self.assertIsInstance(x, int)
        y = to_screen_y(-1e308, self.rng, self.bounds)
        self.assertIsInstance(y, int)

    def test_zero_drawable_area_clamps_to_padding(self):
        bounds = PixelBounds(30, 30, 20)
        self.assertEqual(to_screen_x(0, self.rng, bounds), 20)
        self.assertEqual(to_screen_x(100, self.rng, bounds), 20)
        self.assertEqual(to_screen_y(100, self.rng, bounds), 10)
        self.assertEqual(to_screen_y(0, self.rng, bounds), 10)

    def test_zero_drawable_area_with_overflowing_fraction(self):
        bounds = PixelBounds(30, 30, 20)
        tiny = LogicalRange(0.0, 1e-300, 0.0, 1e-300)
        self.assertEqual(to_screen_x(1e300, tiny, bounds), 20)
        self.assertEqual(to_screen_y(1e300, tiny, bounds), 10)
        self.assertEqual(map_points([(1e300, -1e300)], tiny, bounds).tolist(), [[20, 10]])

    def test_range_wider_than_float_max(self):
        wide = LogicalRange(-1e308, 1e308, -1e308, 1e308)
        self.assertEqual(wide.span_x, float("inf"))
        self.assertEqual(to_screen_x(1e308, wide, self.bounds), 580)
        self.assertEqual(to_screen_x(-1e308, wide, self.bounds), 20)
        self.assertEqual(to_screen_x(0.0, wide, self.bounds), 300)
        self.assertEqual(to_screen_y(1e308, wide, self.bounds), 20)
        self.assertEqual(to_screen_y(0.0, wide, self.bounds), 200)

    def test_map_points_wide_range_matches_scalar(self):
        wide = LogicalRange(-1e308, 1e308, 0.0, 1.0)
        pts = [(1e308, 0.0), (0.0, 1.0), (-1e308, 0.5), (float("inf"), 2.0)]
        arr = map_points(pts, wide, self.bounds)
        expected = np.array([to_screen(p, wide, self.bounds) for p in pts])
        np.testing.assert_array_equal(arr, expected)
        self.assertEqual(arr[:3].tolist(), [[580, 380], [300, 20], [20, 200]])

    def test_nan_coordinates_map_without_raising(self):
        self.assertEqual(to_screen_x(float("nan"), self.rng, self.bounds), 20)
        self.assertEqual(map_points([(float("nan"), 50.0)], self.rng, self.bounds).tolist(), [[20, 200]])

    def test_map_points_matches_scalar(self):
        pts = [Point(0, 0), Point(50, 50), Point(100, 100), Point(33.3, 71.9), Point(-5, 120)]
        arr = map_points(pts, self.rng, self.bounds)
        expected = np.array([to_screen(p, self.rng, self.bounds) for p in pts])
        np.testing.assert_array_equal(arr, expected)

    def test_map_points_empty(self):
        self.assertEqual(map_points([], self.rng, self.bounds).shape, (0, 2))

    def test_mapper_object_uses_updated_bounds_and_range(self):
        mapper = CoordinateMapper(self.rng)
        self.assertEqual(mapper.to_screen_x(50, self.bounds), 300)
        self.assertEqual(mapper.to_screen_x(50, PixelBounds(100, 100, 0)), 50)
        mapper.set_range(LogicalRange(0.0, 50.0, 0.0, 50.0))
        self.assertEqual(mapper.to_screen(Point(50, 50), self.bounds), (580, 20))
        self.assertEqual(mapper.map_points([(25, 25)], self.bounds).tolist(), [[300, 200]])


class TestGeometry(unittest.TestCase):
    def test_range_requires_min_below_max(self):
        with self.assertRaises(InvalidConfiguration) as ctx:
            LogicalRange(1.0, 1.0, 0.0, 1.0)
        self.assertEqual(ctx.exception.field, "min_x")
        with self.assertRaises(InvalidConfiguration) as ctx:
            LogicalRange(0.0, 1.0, 5.0, 2.0)
        self.assertEqual(ctx.exception.field, "min_y")

    def test_range_requires_finite_reals(self):
        with self.assertRaises(InvalidConfiguration):
            LogicalRange(float("nan"), 1.0, 0.0, 1.0)
        with self.assertRaises(InvalidConfiguration):
            LogicalRange(0.0, float("inf"), 0.0, 1.0)
        with self.assertRaises(InvalidConfiguration):
            LogicalRange("0", 1.0, 0.0, 1.0)

    def test_range_is_immutable_value(self):
        rng = LogicalRange(0, 1, 0, 1)
        self.assertEqual(rng, LogicalRange(0.0, 1.0, 0.0, 1.0))
        with self.assertRaises(Exception):
            rng.min_x = 5

    def test_bounds_validation(self):
        with self.assertRaises(InvalidConfiguration):
            PixelBounds(0, 10)
        with self.assertRaises(InvalidConfiguration):
            PixelBounds(10, -1)
        with self.assertRaises(InvalidConfiguration):
            PixelBounds(10, 10, -1)
        self.assertEqual(PixelBounds(600, 400).drawable_width, 560)

    def test_point_is_a_value(self):
        self.assertEqual(Point(1, 2), Point(1.0, 2.0))
        self.assertEqual(Point.coerce([3, 4]), Point(3.0, 4.0))
        x, y = Point(5, 6)
        self.assertEqual((x, y), (5, 6))


if __name__ == "__main__":
    unittest.main(verbosity=2)
