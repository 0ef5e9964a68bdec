"""Geographic value types and great-circle calculations.

This package provides the immutable point type, the stateless geodesy
functions built on it, and the aggregate structures that compose those
functions over a list of points. The Earth is modelled as a sphere of fixed
mean radius.

Components:
    GeoPoint: Latitude/longitude pair in decimal degrees
    GeoBoundingBox: Axis-aligned latitude/longitude rectangle
    GeoPolygon: Closed vertex ring with containment and area
    GeoRoute: Open point sequence with length, bearings and interpolation
    geodesy: distance, bearing, destination, bounding_box_from_radius and
             their numpy batch forms

Typical Usage:
    >>> from geocore.geo import GeoPoint, GeoRoute
    >>> from geocore.unit import DistanceUnit
    >>>
    >>> london = GeoPoint(51.5074, -0.1278)
    >>> paris = GeoPoint(48.8566, 2.3522)
    >>> km = london.distance_to(paris)
    >>> miles = london.distance_to(paris, DistanceUnit.MILES)
    >>>
    >>> route = GeoRoute([london, paris])
    >>> halfway = route.move_along_route_by_fraction(0.5)
"""

from .bounding_box import GeoBoundingBox
from .geo_point import GeoPoint
from .geodesy import bearing, bounding_box_from_radius, destination, distance, distance_matrix, distances
from .polygon import GeoPolygon
from .route import GeoRoute

__all__ = [
    "GeoPoint",
    "GeoBoundingBox",
    "GeoPolygon",
    "GeoRoute",
    "distance",
    "bearing",
    "destination",
    "bounding_box_from_radius",
    "distances",
    "distance_matrix",
]
