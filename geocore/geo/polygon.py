"""Closed polygons on the Earth's surface.

A GeoPolygon is an ordered ring of vertices that is always stored closed:
when the caller's first and last points differ (by exact equality), a copy
of the first point is appended. The bounding box is computed once from the
closed ring and never changes afterwards.

Holes, multi-polygons and antimeridian-crossing rings are not supported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from math import sin

from geocore.config import EARTH_RADIUS_KM, RAY_CAST_EPSILON
from geocore.unit import AreaUnit, degrees_to_radians, from_square_kilometers

from .bounding_box import GeoBoundingBox
from .geo_point import GeoPoint

logger = logging.getLogger(__name__)

MIN_VERTICES = 3


class GeoPolygon:
    """Represents a closed polygon defined by an ordered list of GeoPoints.

    Attributes:
        vertices (tuple[GeoPoint, ...]): Closed vertex ring; the last vertex
            equals the first.
        bounding_box (GeoBoundingBox): Min/max latitude and longitude of the
            ring.

    Example:
        >>> square = GeoPolygon([GeoPoint(0, 0), GeoPoint(0, 10), GeoPoint(10, 10), GeoPoint(10, 0)])
        >>> len(square.vertices)
        5
        >>> square.contains(GeoPoint(5, 5))
        True
        >>> 1_230_000 < square.area() < 1_250_000
        True
    """

    def __init__(self, vertices: Iterable[GeoPoint]):
        """Build the closed ring and its bounding box.

        Args:
            vertices: At least three points, optionally already closed.

        Raises:
            ValueError: If fewer than three points are given.
        """
        ring = list(vertices)
        if len(ring) < MIN_VERTICES:
            msg = f"A polygon must have at least {MIN_VERTICES} points, got {len(ring)}"
            raise ValueError(msg)

        if ring[0] != ring[-1]:
            ring.append(ring[0])

        self._vertices = tuple(ring)
        self._bounding_box = self._calculate_bounding_box(self._vertices)

    @staticmethod
    def _calculate_bounding_box(points: tuple[GeoPoint, ...]) -> GeoBoundingBox:
        latitudes = [p.latitude for p in points]
        longitudes = [p.longitude for p in points]
        return GeoBoundingBox(min(latitudes), min(longitudes), max(latitudes), max(longitudes))

    @property
    def vertices(self) -> tuple[GeoPoint, ...]:
        return self._vertices

    @property
    def bounding_box(self) -> GeoBoundingBox:
        return self._bounding_box

    def contains(self, point: GeoPoint) -> bool:
        """Determine whether ``point`` lies inside the polygon by ray casting.

        A ray of constant latitude is cast from the point and the edges it
        crosses are counted; an odd count means inside. Whenever the query
        latitude equals an endpoint latitude of the current edge, the query
        point is nudged north by ``RAY_CAST_EPSILON``. The nudge accumulates:
        later edges see the already-nudged point. This tie-break is part of
        the contract and must not be reset per edge.

        Points exactly on a vertex or a sloped edge may be reported either
        way depending on floating-point rounding.

        Args:
            point (GeoPoint): Point to test.

        Returns:
            bool: True if the point is inside the polygon.
        """
        probe = point
        crossings = 0

        for a, b in zip(self._vertices, self._vertices[1:]):
            if a.latitude > b.latitude:
                a, b = b, a

            if probe.latitude == a.latitude or probe.latitude == b.latitude:
                probe = GeoPoint(probe.latitude + RAY_CAST_EPSILON, probe.longitude)
                logger.debug("Ray-cast probe nudged to latitude %r", probe.latitude)

            if a.latitude < probe.latitude < b.latitude:
                edge_longitude = (b.longitude - a.longitude) * (probe.latitude - a.latitude) / (
                    b.latitude - a.latitude
                ) + a.longitude
                if probe.longitude < edge_longitude:
                    crossings += 1

        return crossings % 2 == 1

    def area(self, unit: AreaUnit = AreaUnit.SQUARE_KILOMETERS) -> float:
        """Calculate the approximate surface area using spherical excess.

        Accumulates ``(lon2 - lon1) * (2 + sin(lat1) + sin(lat2))`` over every
        edge of the closed ring and scales ``|sum| * R² / 2``. Winding order
        does not matter. The approximation holds for polygons that are small
        relative to the Earth and do not cross the antimeridian.

        Args:
            unit (AreaUnit): Unit of the returned area.

        Returns:
            float: Polygon area in ``unit``.

        Raises:
            ValueError: If ``unit`` is not an AreaUnit.
        """
        total = 0.0

        for p1, p2 in zip(self._vertices, self._vertices[1:]):
            lon1 = degrees_to_radians(p1.longitude)
            lat1 = degrees_to_radians(p1.latitude)
            lon2 = degrees_to_radians(p2.longitude)
            lat2 = degrees_to_radians(p2.latitude)

            total += (lon2 - lon1) * (2 + sin(lat1) + sin(lat2))

        area_km2 = abs(total) * EARTH_RADIUS_KM * EARTH_RADIUS_KM / 2
        return from_square_kilometers(area_km2, unit)

    def __repr__(self) -> str:
        return f"GeoPolygon(vertices={list(self._vertices)!r})"

    def __str__(self) -> str:
        return f"GeoPolygon(Vertices: {len(self._vertices) - 1}, BoundingBox: {self._bounding_box})"
