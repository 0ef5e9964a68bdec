"""Axis-aligned latitude/longitude rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .geo_point import GeoPoint


@dataclass(frozen=True)
class GeoBoundingBox:
    """Rectangle bounded by minimum and maximum latitude and longitude.

    Callers must supply ``min <= max`` on each axis; the ordering is neither
    enforced nor repaired. A box whose ``min_longitude`` exceeds its
    ``max_longitude`` is not treated as wrapping across the antimeridian, so
    it contains no points.

    Attributes:
        min_latitude (float): Southern edge in degrees.
        min_longitude (float): Western edge in degrees.
        max_latitude (float): Northern edge in degrees.
        max_longitude (float): Eastern edge in degrees.

    Example:
        >>> from geocore.geo import GeoPoint
        >>> box = GeoBoundingBox(50, -1, 52, 1)
        >>> box.contains(GeoPoint(51, 0))
        True
        >>> box.contains(GeoPoint(50, 1))  # edges are inclusive
        True
    """

    min_latitude: float
    min_longitude: float
    max_latitude: float
    max_longitude: float

    def contains(self, point: GeoPoint) -> bool:
        """Check whether ``point`` lies inside the box, edges included."""
        return (
            self.min_latitude <= point.latitude <= self.max_latitude
            and self.min_longitude <= point.longitude <= self.max_longitude
        )

    def __str__(self) -> str:
        return (
            f"BoundingBox(Lat: {self.min_latitude:.6f} to {self.max_latitude:.6f}, "
            f"Lon: {self.min_longitude:.6f} to {self.max_longitude:.6f})"
        )
