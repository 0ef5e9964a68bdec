"""Ordered routes through a sequence of geographic points.

Unlike a polygon, a route is open: its first and last points are kept as
given. All derived quantities (length, bearings, positions along the route)
are computed on demand from the stored points and never cached.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import pandas as pd

from geocore.unit import DistanceUnit, from_kilometers, to_kilometers

from .geo_point import GeoPoint
from . import geodesy

logger = logging.getLogger(__name__)

MIN_POINTS = 2


class GeoRoute:
    """Represents a sequential collection of GeoPoints forming a route.

    Attributes:
        points (tuple[GeoPoint, ...]): Ordered route points (at least two).

    Example:
        >>> route = GeoRoute([GeoPoint(0, 0), GeoPoint(0, 2)])
        >>> round(route.total_distance())
        222
        >>> midpoint = route.move_along_route_by_fraction(0.5)
        >>> round(midpoint.longitude, 6)
        1.0
    """

    def __init__(self, points: Iterable[GeoPoint]):
        """Initialize the route.

        Args:
            points: Sequence of points making up the route.

        Raises:
            ValueError: If ``points`` is None or holds fewer than two points.
        """
        if points is None:
            msg = "A route requires a sequence of points, got None"
            raise ValueError(msg)

        sequence = tuple(points)
        if len(sequence) < MIN_POINTS:
            msg = f"A route must contain at least {MIN_POINTS} points, got {len(sequence)}"
            raise ValueError(msg)

        self._points = sequence

    @property
    def points(self) -> tuple[GeoPoint, ...]:
        return self._points

    @property
    def start(self) -> GeoPoint:
        """First point of the route."""
        return self._points[0]

    @property
    def end(self) -> GeoPoint:
        """Last point of the route."""
        return self._points[-1]

    def _segments(self) -> Iterator[tuple[GeoPoint, GeoPoint]]:
        return zip(self._points, self._points[1:])

    def segment_distances(self, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> list[float]:
        """Length of every segment, in route order."""
        return [geodesy.distance(a, b, unit) for a, b in self._segments()]

    def total_distance(self, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
        """Calculate the total length of the route.

        Segment lengths are summed in kilometers and converted to ``unit``
        once at the end, so unit rounding does not compound per segment.

        Args:
            unit (DistanceUnit): Unit of the returned length.

        Returns:
            float: Route length in ``unit``.
        """
        total_km = 0.0
        for a, b in self._segments():
            total_km += geodesy.distance(a, b, DistanceUnit.KILOMETERS)
        return from_kilometers(total_km, unit)

    def bearings_between_points(self) -> Iterator[float]:
        """Yield the initial bearing of each segment, in route order.

        The result is a one-shot generator with one bearing fewer than the
        number of route points; call again to recompute.
        """
        for a, b in self._segments():
            yield geodesy.bearing(a, b)

    def move_along_route(self, distance: float, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> GeoPoint:
        """Return the point located ``distance`` from the start of the route.

        Segments are walked in order. When the remaining distance falls
        within a segment, the point is projected from that segment's start
        along that segment's own initial bearing. If the distance reaches or
        passes the end of the route, the final point is returned exactly.

        Args:
            distance (float): Distance to travel from the start.
            unit (DistanceUnit): Unit of ``distance``.

        Returns:
            GeoPoint: Position on the route.
        """
        remaining_km = to_kilometers(distance, unit)

        for segment_start, segment_end in self._segments():
            segment_km = geodesy.distance(segment_start, segment_end, DistanceUnit.KILOMETERS)
            if remaining_km <= segment_km:
                heading = geodesy.bearing(segment_start, segment_end)
                return geodesy.destination(segment_start, remaining_km, heading, DistanceUnit.KILOMETERS)
            remaining_km -= segment_km

        logger.debug("Distance %r %s is beyond the route end", distance, unit)
        return self.end

    def move_along_route_by_fraction(self, fraction: float) -> GeoPoint:
        """Return the point at ``fraction`` of the route length (0.5 is halfway).

        Raises:
            ValueError: If ``fraction`` is outside [0.0, 1.0].
        """
        if fraction < 0.0 or fraction > 1.0:
            msg = f"Fraction must be between 0.0 and 1.0, got {fraction}"
            raise ValueError(msg)

        total_km = self.total_distance(DistanceUnit.KILOMETERS)
        return self.move_along_route(fraction * total_km, DistanceUnit.KILOMETERS)

    def interpolate_points(self, count: int) -> list[GeoPoint]:
        """Return ``count`` evenly spaced points along the route.

        Points are spaced at equal arc length from the start to the end of
        the route. The first and last entries are the route's own start and
        end points; the ones in between come from ``move_along_route``.

        Args:
            count (int): Number of points to generate (at least two).

        Returns:
            list[GeoPoint]: Interpolated points in route order.

        Raises:
            ValueError: If ``count`` is below two.
        """
        if count < MIN_POINTS:
            msg = f"Must request at least {MIN_POINTS} points, got {count}"
            raise ValueError(msg)

        total_km = self.total_distance(DistanceUnit.KILOMETERS)
        step_km = total_km / (count - 1)
        interior = [self.move_along_route(step_km * i, DistanceUnit.KILOMETERS) for i in range(1, count - 1)]
        return [self.start, *interior, self.end]

    def to_frame(self, unit: DistanceUnit = DistanceUnit.KILOMETERS) -> pd.DataFrame:
        """Tabulate the route, one row per point.

        Columns are ``latitude``, ``longitude``, ``segment_distance`` (length
        of the segment ending at the row's point, 0 for the start),
        ``cumulative_distance`` and ``bearing`` (initial bearing of the
        segment starting at the row's point, NaN for the end).

        Args:
            unit (DistanceUnit): Unit of the distance columns.

        Returns:
            pd.DataFrame: Route table indexed by point position.
        """
        segments = [0.0] + self.segment_distances(unit)
        headings = list(self.bearings_between_points()) + [float("nan")]

        frame = pd.DataFrame(
            {
                "latitude": [p.latitude for p in self._points],
                "longitude": [p.longitude for p in self._points],
                "segment_distance": segments,
                "bearing": headings,
            }
        )
        frame["cumulative_distance"] = frame["segment_distance"].cumsum()
        return frame[["latitude", "longitude", "segment_distance", "cumulative_distance", "bearing"]]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"GeoRoute(points={list(self._points)!r})"
