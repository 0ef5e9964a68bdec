"""
Tests for great-circle distance, bearing, destination and radius boxes.
"""

import math
import unittest

import numpy as np

from geocore.config import EARTH_RADIUS_KM
from geocore.geo import (
    GeoPoint,
    bearing,
    bounding_box_from_radius,
    destination,
    distance,
    distance_matrix,
    distances,
)
from geocore.unit import DistanceUnit


LONDON = GeoPoint(51.5074, -0.1278)
PARIS = GeoPoint(48.8566, 2.3522)
NEW_YORK = GeoPoint(40.7128, -74.0060)


class TestDistance(unittest.TestCase):
    """Test haversine distance."""

    def test_london_to_paris(self):
        """Test distance between London and Paris."""
        self.assertTrue(340 <= distance(LONDON, PARIS) <= 360)
        self.assertTrue(340 <= distance(LONDON, PARIS, DistanceUnit.KILOMETERS) <= 350)

    def test_london_to_new_york(self):
        """Test a transatlantic distance."""
        self.assertTrue(5500 <= distance(LONDON, NEW_YORK) <= 5700)

    def test_symmetry_is_exact(self):
        """Test distance(a, b) equals distance(b, a) exactly."""
        pairs = [(LONDON, PARIS), (PARIS, NEW_YORK), (GeoPoint(-33.9, 151.2), GeoPoint(35.7, 139.7))]
        for a, b in pairs:
            for unit in DistanceUnit:
                self.assertEqual(distance(a, b, unit), distance(b, a, unit))

    def test_identity_is_zero(self):
        """Test distance from a point to itself is zero."""
        for point in (LONDON, GeoPoint(0, 0), GeoPoint(-89.9, 179.9)):
            for unit in DistanceUnit:
                self.assertEqual(distance(point, point, unit), 0.0)

    def test_units(self):
        """Test distance in other units."""
        km = distance(LONDON, PARIS)
        self.assertAlmostEqual(distance(LONDON, PARIS, DistanceUnit.METERS), km * 1000, places=6)
        self.assertAlmostEqual(distance(LONDON, PARIS, DistanceUnit.MILES), km * 0.621371, places=9)

    def test_one_degree_at_equator(self):
        """Test one degree of longitude on the equator."""
        expected = EARTH_RADIUS_KM * math.pi / 180
        self.assertAlmostEqual(distance(GeoPoint(0, 0), GeoPoint(0, 1)), expected, places=9)

    def test_antipodal_points(self):
        """Test half the circumference for antipodal points."""
        self.assertAlmostEqual(distance(GeoPoint(0, 0), GeoPoint(0, 180)), EARTH_RADIUS_KM * math.pi, places=6)

    def test_invalid_unit_raises(self):
        """Test an unsupported unit raises ValueError."""
        with self.assertRaises(ValueError):
            distance(LONDON, PARIS, "km")


class TestBearing(unittest.TestCase):
    """Test initial bearing."""

    def test_london_to_paris(self):
        """Test bearing from London to Paris."""
        self.assertTrue(147 <= bearing(LONDON, PARIS) <= 151)

    def test_london_to_new_york(self):
        """Test bearing from London to New York."""
        self.assertTrue(285 <= bearing(LONDON, NEW_YORK) <= 295)

    def test_cardinal_directions(self):
        """Test bearings toward north, east, south and west."""
        origin = GeoPoint(0, 0)
        self.assertAlmostEqual(bearing(origin, GeoPoint(1, 0)), 0.0)
        self.assertAlmostEqual(bearing(origin, GeoPoint(0, 1)), 90.0)
        self.assertAlmostEqual(bearing(origin, GeoPoint(-1, 0)), 180.0)
        self.assertAlmostEqual(bearing(origin, GeoPoint(0, -1)), 270.0)

    def test_range(self):
        """Test that bearings always fall in [0, 360)."""
        points = [LONDON, PARIS, NEW_YORK, GeoPoint(0, 0), GeoPoint(-45, 170), GeoPoint(45, -170), GeoPoint(0, -1e-12)]
        for a in points:
            for b in points:
                result = bearing(a, b)
                self.assertGreaterEqual(result, 0.0)
                self.assertLess(result, 360.0)

    def test_coincident_points_return_zero(self):
        """Test bearing between identical points."""
        self.assertEqual(bearing(LONDON, LONDON), 0.0)


class TestDestination(unittest.TestCase):
    """Test destination-point projection."""

    def test_east_from_london(self):
        """Test projecting due east."""
        result = destination(LONDON, 250, 90)
        self.assertGreater(result.longitude, LONDON.longitude)
        self.assertTrue(50.5 <= result.latitude <= 52)

    def test_north_from_paris(self):
        """Test projecting due north."""
        result = destination(PARIS, 100, 0, DistanceUnit.KILOMETERS)
        self.assertGreater(result.latitude, PARIS.latitude)

    def test_units(self):
        """Test the distance unit is honored."""
        in_km = destination(PARIS, 12.5, 45)
        in_m = destination(PARIS, 12_500, 45, DistanceUnit.METERS)
        self.assertTrue(in_km.equals_with_tolerance(in_m, 1e-9))

    def test_zero_distance(self):
        """Test zero distance returns the origin."""
        result = destination(LONDON, 0, 123)
        self.assertTrue(result.equals_with_tolerance(LONDON, 1e-9))

    def test_crossing_antimeridian(self):
        """Test longitude wraps when travelling east over 180."""
        two_degrees_km = EARTH_RADIUS_KM * math.radians(2)
        result = destination(GeoPoint(0, 179), two_degrees_km, 90)
        self.assertAlmostEqual(result.latitude, 0.0, places=9)
        self.assertAlmostEqual(result.longitude, -179.0, places=6)

    def test_crossing_antimeridian_westward(self):
        """Test longitude wraps when travelling west over -180."""
        two_degrees_km = EARTH_RADIUS_KM * math.radians(2)
        result = destination(GeoPoint(0, -179), two_degrees_km, 270)
        self.assertAlmostEqual(result.longitude, 179.0, places=6)

    def test_round_trip_with_distance_and_bearing(self):
        """Test projecting by distance and bearing reaches the target."""
        target = destination(LONDON, distance(LONDON, PARIS), bearing(LONDON, PARIS))
        self.assertTrue(target.equals_with_tolerance(PARIS, 1e-6))


class TestBoundingBoxFromRadius(unittest.TestCase):
    """Test the planar radius bounding box."""

    def test_london_ten_km(self):
        """Test a 10 km box around London."""
        box = bounding_box_from_radius(LONDON, 10, DistanceUnit.KILOMETERS)
        self.assertTrue(51.40 <= box.min_latitude <= 51.50)
        self.assertTrue(51.51 <= box.max_latitude <= 51.60)
        self.assertLess(box.min_longitude, LONDON.longitude)
        self.assertGreater(box.max_longitude, LONDON.longitude)

    def test_deltas(self):
        """Test latitude and longitude deltas at 60 degrees north."""
        box = bounding_box_from_radius(GeoPoint(60, 10), 111.32)
        self.assertAlmostEqual(box.min_latitude, 59.0)
        self.assertAlmostEqual(box.max_latitude, 61.0)
        self.assertAlmostEqual(box.min_longitude, 8.0)
        self.assertAlmostEqual(box.max_longitude, 12.0)

    def test_contains_center(self):
        """Test the box contains its center."""
        self.assertTrue(bounding_box_from_radius(LONDON, 5).contains(LONDON))

    def test_radius_unit(self):
        """Test the radius unit is honored."""
        in_km = bounding_box_from_radius(PARIS, 3)
        in_m = bounding_box_from_radius(PARIS, 3000, DistanceUnit.METERS)
        self.assertAlmostEqual(in_km.max_latitude, in_m.max_latitude)
        self.assertAlmostEqual(in_km.max_longitude, in_m.max_longitude)

    def test_near_pole_degenerates_without_error(self):
        """Test a box at the pole does not raise."""
        box = bounding_box_from_radius(GeoPoint(90, 0), 10)
        self.assertGreater(box.max_longitude, 180)
        self.assertLess(box.min_longitude, -180)


class TestBatchDistances(unittest.TestCase):
    """Test the numpy batch distance functions."""

    def test_distances_match_scalar(self):
        """Test pairwise batch distances match the scalar function."""
        origins = [LONDON, PARIS, GeoPoint(0, 0)]
        targets = [PARIS, NEW_YORK, GeoPoint(0, 1)]
        result = distances(origins, targets)
        self.assertIsInstance(result, np.ndarray)
        self.assertEqual(result.shape, (3,))
        for value, a, b in zip(result, origins, targets):
            self.assertAlmostEqual(value, distance(a, b), places=6)

    def test_distances_unit(self):
        """Test batch distances in miles."""
        result = distances([LONDON], [PARIS], DistanceUnit.MILES)
        self.assertAlmostEqual(result[0], distance(LONDON, PARIS, DistanceUnit.MILES), places=6)

    def test_distances_length_mismatch(self):
        """Test unequal input lengths raise ValueError."""
        with self.assertRaises(ValueError):
            distances([LONDON, PARIS], [NEW_YORK])

    def test_distance_matrix(self):
        """Test the full origin by target matrix."""
        origins = [LONDON, PARIS]
        targets = [PARIS, NEW_YORK, LONDON]
        matrix = distance_matrix(origins, targets)
        self.assertEqual(matrix.shape, (2, 3))
        for i, a in enumerate(origins):
            for j, b in enumerate(targets):
                self.assertAlmostEqual(matrix[i][j], distance(a, b), places=6)
        self.assertAlmostEqual(matrix[0][2], 0.0)

    def test_empty_inputs(self):
        """Test empty inputs give empty arrays."""
        self.assertEqual(distances([], []).shape, (0,))
        self.assertEqual(distance_matrix([], [LONDON]).shape, (0, 1))


if __name__ == "__main__":
    unittest.main()
