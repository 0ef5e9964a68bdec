"""Geographic point value type.

GeoPoint is the base value every other component operates on: an immutable
latitude/longitude pair in decimal degrees. Coordinates are accepted as
given; no range check or normalization is applied, so callers are
responsible for supplying sensible values.

Equality comes in two flavors:
    - ``==`` compares both fields exactly (dataclass value equality)
    - ``equals_with_tolerance`` compares each axis independently against an
      absolute tolerance in degrees
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocore.config import DEFAULT_TOLERANCE
from geocore.unit import DistanceUnit, radians_to_degrees

if TYPE_CHECKING:
    from .bounding_box import GeoBoundingBox


@dataclass(frozen=True)
class GeoPoint:
    """Represents a geographic point with latitude and longitude coordinates.

    The class is immutable (frozen dataclass) so points can be shared freely
    between polygons, routes and concurrent callers. Geodesic calculations
    assume a spherical Earth of fixed mean radius; see ``geocore.geo.geodesy``
    for the formulas behind the convenience methods below.

    Attributes:
        latitude (float): Latitude in decimal degrees (North positive).
        longitude (float): Longitude in decimal degrees (East positive).

    Example:
        >>> london = GeoPoint(51.5074, -0.1278)
        >>> paris = GeoPoint(48.8566, 2.3522)
        >>> round(london.distance_to(paris))
        344
        >>> round(london.bearing_to(paris))
        148
    """

    latitude: float
    longitude: float

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from latitude and longitude values in radians.

        Args:
            lat (float): Latitude in radians (-π/2 to +π/2).
            lon (float): Longitude in radians (-π to +π).

        Returns:
            GeoPoint: New point with the coordinates converted to degrees.

        Example:
            >>> import math
            >>> point = GeoPoint.from_rad(math.pi / 4, math.pi / 3)  # 45°N, 60°E
            >>> round(point.longitude, 9)
            60.0
        """
        return cls(radians_to_degrees(lat), radians_to_degrees(lon))

    def to_tuple(self) -> tuple[float, float]:
        """Return the point as a ``(latitude, longitude)`` tuple."""
        return (self.latitude, self.longitude)

    def equals_with_tolerance(self, other: GeoPoint, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Check whether two points agree on both axes within ``tolerance``.

        Each axis is compared on its own (absolute difference strictly below
        ``tolerance`` degrees); this is not a distance metric.

        Args:
            other (GeoPoint): Point to compare against.
            tolerance (float): Maximum per-axis difference in degrees.

        Returns:
            bool: True if both latitude and longitude are within tolerance.
        """
        return (
            abs(self.latitude - other.latitude) < tolerance
            and abs(self.longitude - other.longitude) < tolerance
        )

    def distance_to(self, other: GeoPoint, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
        """Great-circle distance to ``other`` in ``unit``."""
        from .geodesy import distance

        return distance(self, other, unit)

    def bearing_to(self, other: GeoPoint) -> float:
        """Initial bearing to ``other`` in degrees, in the range [0, 360)."""
        from .geodesy import bearing

        return bearing(self, other)

    def move(
        self,
        distance: float,
        bearing_degrees: float,
        unit: DistanceUnit = DistanceUnit.KILOMETERS,
    ) -> GeoPoint:
        """Project a new point ``distance`` away along ``bearing_degrees``.

        This method returns a new GeoPoint; the current instance is never
        modified.

        Example:
            >>> london = GeoPoint(51.5074, -0.1278)
            >>> east = london.move(250, 90)
            >>> east.longitude > london.longitude
            True
        """
        from .geodesy import destination

        return destination(self, distance, bearing_degrees, unit)

    def bounding_box(
        self, radius: float, unit: DistanceUnit = DistanceUnit.KILOMETERS
    ) -> GeoBoundingBox:
        """Approximate bounding box enclosing a circle of ``radius`` around this point."""
        from .geodesy import bounding_box_from_radius

        return bounding_box_from_radius(self, radius, unit)

    def __str__(self) -> str:
        return f"GeoPoint(Latitude: {self.latitude:.6f}, Longitude: {self.longitude:.6f})"
