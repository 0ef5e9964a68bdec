"""Matplotlib rendering of points, polygons and routes.

Coordinates are drawn as an equirectangular plot: longitude on the x axis,
latitude on the y axis. Every function draws onto the given axes (or a new
figure when none is given) and returns the axes, so calls can be layered:

    >>> from geocore.geo import GeoPoint, GeoPolygon, GeoRoute
    >>> square = GeoPolygon([GeoPoint(0, 0), GeoPoint(0, 10), GeoPoint(10, 10), GeoPoint(10, 0)])
    >>> ax = plot_polygon(square)
    >>> ax = plot_route(GeoRoute([GeoPoint(2, 2), GeoPoint(8, 8)]), ax=ax)
    >>> ax.figure.savefig("square.png")  # doctest: +SKIP
"""

from __future__ import annotations

from collections.abc import Iterable

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geocore.geo import GeoPoint, GeoPolygon, GeoRoute


def _axes(ax: Axes | None) -> Axes:
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
        ax.set_xlabel("Longitude (°)")
        ax.set_ylabel("Latitude (°)")
        ax.grid(True, alpha=0.3)
    return ax


def plot_points(points: Iterable[GeoPoint], ax: Axes | None = None, label: str | None = None, **kwargs) -> Axes:
    """Scatter a collection of points."""
    ax = _axes(ax)
    points = list(points)
    ax.scatter([p.longitude for p in points], [p.latitude for p in points], label=label, **kwargs)
    if label:
        ax.legend()
    return ax


def plot_polygon(polygon: GeoPolygon, ax: Axes | None = None, label: str | None = None, **kwargs) -> Axes:
    """Draw the closed outline of a polygon, shaded.

    Extra keyword arguments go to ``Axes.fill``.
    """
    ax = _axes(ax)
    kwargs.setdefault("alpha", 0.3)
    ax.fill([v.longitude for v in polygon.vertices], [v.latitude for v in polygon.vertices], label=label, **kwargs)
    if label:
        ax.legend()
    return ax


def plot_route(route: GeoRoute, ax: Axes | None = None, label: str | None = None, **kwargs) -> Axes:
    """Draw a route as a polyline with its start and end marked.

    Args:
        route (GeoRoute): Route to draw.
        ax (Axes | None): Axes to draw on; a new figure is created if None.
        label (str | None): Legend label for the polyline.
        **kwargs: Passed to ``Axes.plot``.

    Returns:
        Axes: The axes drawn on.
    """
    ax = _axes(ax)
    ax.plot([p.longitude for p in route.points], [p.latitude for p in route.points], label=label, **kwargs)
    ax.scatter([route.start.longitude], [route.start.latitude], c="green", marker="^", zorder=3)
    ax.scatter([route.end.longitude], [route.end.latitude], c="red", marker="o", zorder=3)
    if label:
        ax.legend()
    return ax
