"""Human-readable rendering of geographic points.

These helpers sit on top of the core value types: given a point they
produce a deterministic string and never modify the point.
"""

from __future__ import annotations

from math import floor

from geocore.geo import GeoPoint


def _format_dms(decimal_degrees: float, is_latitude: bool) -> str:
    magnitude = abs(decimal_degrees)
    degrees = floor(magnitude)
    minutes_full = (magnitude - degrees) * 60
    minutes = floor(minutes_full)
    seconds = (minutes_full - minutes) * 60

    if is_latitude:
        hemisphere = "N" if decimal_degrees >= 0 else "S"
    else:
        hemisphere = "E" if decimal_degrees >= 0 else "W"

    return f"{degrees}°{minutes:02d}'{seconds:05.2f}\"{hemisphere}"


def to_dms_string(point: GeoPoint) -> str:
    """Format a point as degrees, minutes and seconds with hemisphere letters.

    Args:
        point (GeoPoint): Point to format.

    Returns:
        str: Text such as ``51°30'26.64"N, 0°07'40.08"E``.

    Example:
        >>> to_dms_string(GeoPoint(-33.9249, -18.4241))
        '33°55\\'29.64"S, 18°25\\'26.76"W'
    """
    return f"{_format_dms(point.latitude, True)}, {_format_dms(point.longitude, False)}"


def to_decimal_string(point: GeoPoint, precision: int = 6) -> str:
    """Format a point as ``latitude, longitude`` in decimal degrees."""
    return f"{point.latitude:.{precision}f}, {point.longitude:.{precision}f}"
