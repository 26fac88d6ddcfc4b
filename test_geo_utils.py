import unittest
from seaplanner.geo_utils import (
    point_to_segment_distance, point_in_polygon, calculate_bearing, calculate_distance,
    path_distance, segment_distances, interpolate, quadratic_bezier, format_duration
)


class TestGeoUtils(unittest.TestCase):
    def setUp(self):
        self.square = [(0, 0), (4, 0), (4, 4), (0, 4)]

    def test_point_to_segment_distance_projection(self):
        self.assertAlmostEqual(point_to_segment_distance((0, 1), (-1, 0), (1, 0)), 1.0)

    def test_point_to_segment_distance_clamped(self):
        """Points past the segment end measure to the end point"""
        self.assertAlmostEqual(point_to_segment_distance((3, 0), (-1, 0), (1, 0)), 2.0)
        self.assertAlmostEqual(point_to_segment_distance((-4, 4), (-1, 0), (1, 0)), 5.0)

    def test_point_to_segment_distance_degenerate(self):
        self.assertAlmostEqual(point_to_segment_distance((3, 4), (0, 0), (0, 0)), 5.0)

    def test_point_in_polygon(self):
        self.assertTrue(point_in_polygon((2, 2), self.square))
        self.assertFalse(point_in_polygon((5, 2), self.square))
        self.assertFalse(point_in_polygon((-1, -1), self.square))

    def test_point_in_polygon_concave(self):
        # U shape open to the north
        ring = [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]
        self.assertTrue(point_in_polygon((0.5, 2), ring))
        self.assertFalse(point_in_polygon((1.5, 2), ring))
        self.assertTrue(point_in_polygon((2.5, 2), ring))

    def test_calculate_bearing_cardinal(self):
        self.assertAlmostEqual(calculate_bearing((0, 0), (1, 0)), 90, places=6)
        self.assertAlmostEqual(calculate_bearing((0, 0), (0, 1)), 0, places=6)
        self.assertAlmostEqual(calculate_bearing((0, 0), (-1, 0)), 270, places=6)
        self.assertAlmostEqual(calculate_bearing((0, 0), (0, -1)), 180, places=6)

    def test_calculate_bearing_is_planar(self):
        """Longitude is not scaled by latitude"""
        self.assertAlmostEqual(calculate_bearing((0, 60), (1, 61)), 45, places=6)

    def test_calculate_bearing_same_point(self):
        self.assertEqual(calculate_bearing((10, 10), (10, 10)), 0.0)

    def test_calculate_distance(self):
        self.assertAlmostEqual(calculate_distance(0, 0, 1, 0), 111.32, delta=0.5)
        self.assertAlmostEqual(calculate_distance(0, 0, 0, 1), 110.57, delta=0.5)
        self.assertEqual(calculate_distance(5, 5, 5, 5), 0)

    def test_calculate_distance_symmetric(self):
        a = calculate_distance(55.27, 25.27, 72.85, 18.92)
        b = calculate_distance(72.85, 18.92, 55.27, 25.27)
        self.assertAlmostEqual(a, b, places=6)
        self.assertGreater(a, 1800)
        self.assertLess(a, 2100)

    def test_path_distance(self):
        points = [(0, 0), (1, 0), (1, 1)]
        expected = calculate_distance(0, 0, 1, 0) + calculate_distance(1, 0, 1, 1)
        self.assertAlmostEqual(path_distance(points), expected)
        self.assertEqual(path_distance([(0, 0)]), 0)

    def test_segment_distances(self):
        points = [(0, 0), (1, 0), (1, 1)]
        legs = segment_distances(points)
        self.assertEqual(len(legs), 2)
        self.assertAlmostEqual(legs[0], calculate_distance(0, 0, 1, 0))
        self.assertAlmostEqual(sum(legs), path_distance(points))
        self.assertEqual(segment_distances([(0, 0)]), [])

    def test_interpolate(self):
        self.assertEqual(interpolate((0, 0), (4, 2), 0.5), (2, 1))

    def test_quadratic_bezier(self):
        start, control, end = (0, 0), (1, 2), (2, 0)
        self.assertEqual(quadratic_bezier(start, control, end, 0), start)
        self.assertEqual(quadratic_bezier(start, control, end, 1), end)
        self.assertEqual(quadratic_bezier(start, control, end, 0.5), (1.0, 1.0))

    def test_format_duration(self):
        self.assertEqual(format_duration(78.5), "3d 6h")
        self.assertEqual(format_duration(5.9), "5h")
        self.assertEqual(format_duration(0), "0h")
        self.assertEqual(format_duration(24), "1d 0h")


if __name__ == "__main__":
    unittest.main()
