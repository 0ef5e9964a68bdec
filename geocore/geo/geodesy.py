"""Great-circle operations on pairs of geographic points.

All functions here are pure: they depend only on their arguments and the
fixed Earth radius from ``geocore.config``, and allocate only their return
value. The Earth is treated as a sphere, which keeps every formula closed
form at the cost of up to ~0.5% error against an ellipsoidal model.

Functions:
    distance: Haversine great-circle distance.
    bearing: Initial bearing (forward azimuth) in [0, 360).
    destination: Direct geodetic problem on the sphere.
    bounding_box_from_radius: Planar approximation of a search box.
    distances: Element-wise batch haversine over two point sequences.
    distance_matrix: All-pairs batch haversine.

Known limitations:
    - ``bearing`` between coincident points is atan2(0, 0), which yields 0.
    - ``bounding_box_from_radius`` blows up near the poles where
      cos(latitude) approaches zero.
    - Nothing here is antimeridian-aware except the longitude normalization
      in ``destination``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from math import asin, atan2, cos, pi, sin, sqrt

import numpy as np

from geocore.config import EARTH_RADIUS_KM, KM_PER_DEGREE, POLE_COSINE_THRESHOLD
from geocore.unit import DistanceUnit, degrees_to_radians, from_kilometers, radians_to_degrees, to_kilometers

from .bounding_box import GeoBoundingBox
from .geo_point import GeoPoint

logger = logging.getLogger(__name__)


def distance(a: GeoPoint, b: GeoPoint, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
    """Calculate the great-circle distance between two points.

    Uses the haversine formula on the unit sphere scaled by the mean Earth
    radius. The result is symmetric in ``a`` and ``b`` and exactly zero for
    identical points.

    Args:
        a (GeoPoint): Starting point.
        b (GeoPoint): Destination point.
        unit (DistanceUnit): Unit of the returned distance.

    Returns:
        float: Distance along the Earth's surface in ``unit``.

    Raises:
        ValueError: If ``unit`` is not a DistanceUnit.

    Example:
        >>> london = GeoPoint(51.5074, -0.1278)
        >>> new_york = GeoPoint(40.7128, -74.0060)
        >>> 5500 < distance(london, new_york) < 5700
        True
    """
    lat_a = degrees_to_radians(a.latitude)
    lon_a = degrees_to_radians(a.longitude)
    lat_b = degrees_to_radians(b.latitude)
    lon_b = degrees_to_radians(b.longitude)

    delta_lat = lat_b - lat_a
    delta_lon = lon_b - lon_a

    h = sin(delta_lat / 2) ** 2 + cos(lat_a) * cos(lat_b) * sin(delta_lon / 2) ** 2
    # rounding can push h a hair above 1 for antipodal points
    h = min(h, 1.0)

    central_angle = 2 * atan2(sqrt(h), sqrt(1 - h))
    return from_kilometers(EARTH_RADIUS_KM * central_angle, unit)


def bearing(a: GeoPoint, b: GeoPoint) -> float:
    """Calculate the initial bearing (forward azimuth) from ``a`` to ``b``.

    The bearing is measured clockwise from true north and normalized into
    [0, 360). When ``a == b`` the direction is undefined; the formula
    degenerates to atan2(0, 0) and the result (0.0) is returned as is.

    Args:
        a (GeoPoint): Starting point.
        b (GeoPoint): Destination point.

    Returns:
        float: Initial bearing in degrees.
    """
    if a == b:
        logger.debug("Bearing requested between coincident points %s", a)

    lat_a = degrees_to_radians(a.latitude)
    lon_a = degrees_to_radians(a.longitude)
    lat_b = degrees_to_radians(b.latitude)
    lon_b = degrees_to_radians(b.longitude)

    delta_lon = lon_b - lon_a

    y = sin(delta_lon) * cos(lat_b)
    x = cos(lat_a) * sin(lat_b) - sin(lat_a) * cos(lat_b) * cos(delta_lon)

    bearing_deg = radians_to_degrees(atan2(y, x))
    # the outer modulo folds a tiny negative angle that rounded up to 360
    return ((bearing_deg % 360) + 360) % 360


def destination(
    point: GeoPoint,
    distance: float,
    bearing_degrees: float,
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
) -> GeoPoint:
    """Project a point ``distance`` away from ``point`` along a bearing.

    Solves the direct geodetic problem on the sphere. The resulting longitude
    is normalized with ``((lon + 3π) mod 2π) − π`` so that paths crossing the
    antimeridian come back into range. Latitude stays within [-90, 90] by
    construction of asin and is not clamped separately.

    Args:
        point (GeoPoint): Starting point.
        distance (float): Distance to travel, in ``unit``.
        bearing_degrees (float): Initial bearing, degrees clockwise from north.
        unit (DistanceUnit): Unit of ``distance``.

    Returns:
        GeoPoint: The projected destination.

    Example:
        >>> paris = GeoPoint(48.8566, 2.3522)
        >>> destination(paris, 100, 0).latitude > paris.latitude
        True
    """
    angular_distance = to_kilometers(distance, unit) / EARTH_RADIUS_KM
    bearing_rad = degrees_to_radians(bearing_degrees)

    from_lat = degrees_to_radians(point.latitude)
    from_lon = degrees_to_radians(point.longitude)

    sin_to_lat = sin(from_lat) * cos(angular_distance) + cos(from_lat) * sin(angular_distance) * cos(bearing_rad)
    to_lat = asin(max(-1.0, min(1.0, sin_to_lat)))

    to_lon = from_lon + atan2(
        sin(bearing_rad) * sin(angular_distance) * cos(from_lat),
        cos(angular_distance) - sin(from_lat) * sin(to_lat),
    )
    to_lon = (to_lon + 3 * pi) % (2 * pi) - pi

    return GeoPoint(radians_to_degrees(to_lat), radians_to_degrees(to_lon))


def bounding_box_from_radius(
    point: GeoPoint, radius: float, unit: DistanceUnit = DistanceUnit.KILOMETERS
) -> GeoBoundingBox:
    """Return a box that encloses a circle of ``radius`` around ``point``.

    This is a planar approximation (one degree of latitude is taken as
    111.32 km, one degree of longitude as 111.32·cos(latitude) km), not a
    true geodesic envelope. Near the poles the longitude span grows without
    bound; that loss of accuracy is accepted, not corrected.

    Args:
        point (GeoPoint): Center of the circle.
        radius (float): Circle radius in ``unit``.
        unit (DistanceUnit): Unit of ``radius``.

    Returns:
        GeoBoundingBox: Box centered on ``point``.
    """
    radius_km = to_kilometers(radius, unit)

    delta_lat = radius_km / KM_PER_DEGREE

    lat_rad = degrees_to_radians(point.latitude)
    cos_lat = cos(lat_rad)
    if abs(cos_lat) < POLE_COSINE_THRESHOLD:
        logger.debug("Bounding box around %s is degenerate near the pole", point)
    delta_lon = radius_km / (KM_PER_DEGREE * cos_lat)

    return GeoBoundingBox(
        min_latitude=point.latitude - delta_lat,
        min_longitude=point.longitude - delta_lon,
        max_latitude=point.latitude + delta_lat,
        max_longitude=point.longitude + delta_lon,
    )


def _radians_arrays(points: Iterable[GeoPoint]) -> tuple[np.ndarray, np.ndarray]:
    coords = np.array([(p.latitude, p.longitude) for p in points], dtype=float).reshape(-1, 2)
    return degrees_to_radians(coords[:, 0]), degrees_to_radians(coords[:, 1])


def _haversine(lat_a, lon_a, lat_b, lon_b) -> np.ndarray:
    h = np.sin((lat_b - lat_a) / 2) ** 2 + np.cos(lat_a) * np.cos(lat_b) * np.sin((lon_b - lon_a) / 2) ** 2
    h = np.minimum(h, 1.0)
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def distances(
    origins: Iterable[GeoPoint],
    destinations: Iterable[GeoPoint],
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
) -> np.ndarray:
    """Element-wise great-circle distances between two point sequences.

    Args:
        origins: Starting points.
        destinations: End points, paired with ``origins`` by position.
        unit (DistanceUnit): Unit of the returned distances.

    Returns:
        np.ndarray: 1-D array where element i is the distance from
        ``origins[i]`` to ``destinations[i]``.

    Raises:
        ValueError: If the sequences differ in length or ``unit`` is invalid.
    """
    lat_a, lon_a = _radians_arrays(origins)
    lat_b, lon_b = _radians_arrays(destinations)
    if lat_a.shape != lat_b.shape:
        msg = f"Point sequences differ in length: {lat_a.size} != {lat_b.size}"
        raise ValueError(msg)
    return from_kilometers(_haversine(lat_a, lon_a, lat_b, lon_b), unit)


def distance_matrix(
    origins: Iterable[GeoPoint],
    destinations: Iterable[GeoPoint],
    unit: DistanceUnit = DistanceUnit.KILOMETERS,
) -> np.ndarray:
    """Calculate great-circle distances between every origin and destination.

    Returns:
        np.ndarray: 2-D array where element [i][j] is the distance from
        origin i to destination j.
    """
    lat_a, lon_a = _radians_arrays(origins)
    lat_b, lon_b = _radians_arrays(destinations)
    km = _haversine(lat_a[:, np.newaxis], lon_a[:, np.newaxis], lat_b[np.newaxis, :], lon_b[np.newaxis, :])
    return from_kilometers(km, unit)
