"""
Tests for GeoBoundingBox.
"""

import unittest

from geocore.geo import GeoBoundingBox, GeoPoint


class TestGeoBoundingBox(unittest.TestCase):
    """Test GeoBoundingBox class."""

    def setUp(self):
        self.box = GeoBoundingBox(min_latitude=50, min_longitude=-1, max_latitude=52, max_longitude=1)

    def test_contains_inside_point(self):
        """Test a point strictly inside the box."""
        self.assertTrue(self.box.contains(GeoPoint(51, 0)))

    def test_does_not_contain_outside_point(self):
        """Test points past either bound are rejected."""
        self.assertFalse(self.box.contains(GeoPoint(53, 0)))
        self.assertFalse(self.box.contains(GeoPoint(51, 1.0000001)))

    def test_edges_are_inclusive(self):
        """Test that points on the box edges are contained."""
        self.assertTrue(self.box.contains(GeoPoint(50, 1)))
        self.assertTrue(self.box.contains(GeoPoint(52, -1)))
        self.assertTrue(self.box.contains(GeoPoint(51, -1)))

    def test_antimeridian_box_does_not_wrap(self):
        """Test that a box with min_longitude > max_longitude contains nothing."""
        box = GeoBoundingBox(-10, 170, 10, -170)
        self.assertFalse(box.contains(GeoPoint(0, 180)))
        self.assertFalse(box.contains(GeoPoint(0, 0)))

    def test_is_value_type(self):
        """Test equality by field values."""
        self.assertEqual(GeoBoundingBox(0, 0, 1, 1), GeoBoundingBox(0, 0, 1, 1))

    def test_str(self):
        """Test string representation."""
        self.assertEqual(
            str(self.box),
            "BoundingBox(Lat: 50.000000 to 52.000000, Lon: -1.000000 to 1.000000)",
        )


if __name__ == "__main__":
    unittest.main()
