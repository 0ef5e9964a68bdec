"""Distance unit definitions and conversions.

All distances are computed internally in kilometers (the canonical unit) and
converted at the public boundary. The scale factors are fixed and express how
many of each unit make up one kilometer.

These units are commonly used for:
- Great-circle distances between points
- Destination projections and search radii
- Route lengths and positions along a route

Classes:
    DistanceUnit: Closed enumeration of supported distance units.

Functions:
    to_kilometers: Convert a distance into kilometers.
    from_kilometers: Convert kilometers into another distance unit.
    convert_distance: Convert between any two distance units.

Example:
    >>> from_kilometers(1.5, DistanceUnit.METERS)
    1500.0
    >>> round(convert_distance(10, DistanceUnit.MILES, DistanceUnit.KILOMETERS), 3)
    16.093
"""

from __future__ import annotations

from .unit_base import Number, UnitEnum


class DistanceUnit(UnitEnum):
    """Supported units of distance measurement.

    Attributes:
        KILOMETERS: Kilometers, the canonical unit.
        METERS: Meters (1 km = 1,000 m).
        MILES: Statute miles (1 km = 0.621371 mi).
        NAUTICAL_MILES: Nautical miles (1 km = 0.539957 NM).
        FEET: Feet (1 km = 3,280.84 ft).
        YARDS: Yards (1 km = 1,093.61 yd).
    """

    KILOMETERS = ("km", 1.0)
    METERS = ("m", 1_000.0)
    MILES = ("mi", 0.621371)
    NAUTICAL_MILES = ("nmi", 0.539957)
    FEET = ("ft", 3_280.84)
    YARDS = ("yd", 1_093.61)


def to_kilometers(value: Number, unit: DistanceUnit) -> float:
    """Convert a distance expressed in ``unit`` to kilometers.

    Raises:
        ValueError: If ``unit`` is not a DistanceUnit.
    """
    return DistanceUnit.to_canonical(value, unit)


def from_kilometers(kilometers: Number, unit: DistanceUnit) -> float:
    """Convert a distance in kilometers to ``unit``.

    Raises:
        ValueError: If ``unit`` is not a DistanceUnit.
    """
    return DistanceUnit.from_canonical(kilometers, unit)


def convert_distance(value: Number, from_unit: DistanceUnit, to_unit: DistanceUnit) -> float:
    """Convert a distance between two units via kilometers."""
    return DistanceUnit.convert(value, from_unit, to_unit)
