"""Spherical-Earth geodesy core for points, polygons and routes.

GeoCore models points on a spherical approximation of the Earth and provides
the great-circle operations most location-aware applications need: distance,
bearing, destination projection, search bounding boxes, point-in-polygon
tests, polygon area, and route measurement and interpolation, together with
conversions between distance, angle and area units.

Framework Architecture:
    The package is layered leaf-first, and data flows in one direction:
    raw coordinates → GeoPoint → geodesy functions (pure) → aggregate
    structures (GeoPolygon, GeoRoute, GeoBoundingBox) that compose those
    functions over a list of points.

    Component Integration:
        • Unit Layer: closed unit enumerations and conversion arithmetic
        • Value Layer: immutable GeoPoint and GeoBoundingBox
        • Geodesy Layer: haversine distance, bearing, destination, boxes
        • Aggregate Layer: GeoPolygon and GeoRoute
        • Presentation: DMS formatting and matplotlib plotting

Framework Components:
    Unit Conversion (geocore.unit):
        • DistanceUnit: km, m, mi, nmi, ft, yd
        • AreaUnit: km², m², mi², ha, ac
        • degrees_to_radians / radians_to_degrees

    Geographic Systems (geocore.geo):
        • GeoPoint: latitude/longitude value type with tolerance equality
        • distance, bearing, destination, bounding_box_from_radius
        • distances, distance_matrix: numpy batch forms of distance
        • GeoBoundingBox, GeoPolygon, GeoRoute

    Presentation (geocore.formatting, geocore.plotting):
        • to_dms_string: degrees/minutes/seconds with hemisphere letters
        • plot_points, plot_polygon, plot_route

Accuracy:
    • Spherical model with mean radius 6371.0088 km (no ellipsoid)
    • Polygon area by spherical excess, valid for small polygons
    • No antimeridian handling beyond longitude normalization in destination

Concurrency:
    Every type is immutable after construction and every function is pure,
    so all of it can be used from multiple threads without coordination.

Usage Patterns:
    >>> from geocore import GeoPoint, GeoPolygon, GeoRoute, DistanceUnit, AreaUnit
    >>>
    >>> london = GeoPoint(51.5074, -0.1278)
    >>> paris = GeoPoint(48.8566, 2.3522)
    >>> london.distance_to(paris, DistanceUnit.MILES)  # doctest: +SKIP
    >>> london.bearing_to(paris)  # doctest: +SKIP
    >>>
    >>> square = GeoPolygon([GeoPoint(0, 0), GeoPoint(0, 10), GeoPoint(10, 10), GeoPoint(10, 0)])
    >>> square.contains(GeoPoint(5, 5))
    True
    >>> square.area(AreaUnit.HECTARES)  # doctest: +SKIP
    >>>
    >>> route = GeoRoute([GeoPoint(0, 0), GeoPoint(0, 2)])
    >>> waypoints = route.interpolate_points(5)

Logging:
    Modules log degenerate numeric conditions at DEBUG level under the
    ``geocore`` logger hierarchy. The package installs a NullHandler; enable
    output with ``logging.getLogger("geocore").setLevel(logging.DEBUG)`` and
    a handler of your choice.
"""

import logging

from geocore.config import EARTH_RADIUS_KM
from geocore.geo import (
    GeoBoundingBox,
    GeoPoint,
    GeoPolygon,
    GeoRoute,
    bearing,
    bounding_box_from_radius,
    destination,
    distance,
    distance_matrix,
    distances,
)
from geocore.unit import AreaUnit, DistanceUnit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "GeoBoundingBox",
    "GeoPolygon",
    "GeoRoute",
    "DistanceUnit",
    "AreaUnit",
    "distance",
    "bearing",
    "destination",
    "bounding_box_from_radius",
    "distances",
    "distance_matrix",
]
