"""Unit conversion tables for angles, distances and areas.

This package provides the stateless arithmetic the geodesy core calls into
whenever a value crosses the public boundary. Distances are computed in
kilometers and areas in square kilometers internally; angles are carried in
degrees at the surface and converted to radians for trigonometry.

Architecture:
    - unit_base: UnitEnum, the closed-family base with argument checking
    - unit_angle: degrees <-> radians
    - unit_distance: DistanceUnit and kilometer conversions
    - unit_area: AreaUnit and square-kilometer conversions

Unit Families:
    - Distance: KILOMETERS (canonical), METERS, MILES, NAUTICAL_MILES, FEET, YARDS
    - Area: SQUARE_KILOMETERS (canonical), SQUARE_METERS, SQUARE_MILES,
      HECTARES, ACRES

Example:
    >>> from geocore.unit import DistanceUnit, convert_distance
    >>> convert_distance(5, DistanceUnit.KILOMETERS, DistanceUnit.METERS)
    5000.0
    >>> convert_distance(5, "km", DistanceUnit.METERS)
    Traceback (most recent call last):
        ...
    ValueError: Unsupported DistanceUnit: 'km'
"""

from .unit_angle import degrees_to_radians, radians_to_degrees
from .unit_area import AreaUnit, convert_area, from_square_kilometers, to_square_kilometers
from .unit_base import UnitEnum
from .unit_distance import DistanceUnit, convert_distance, from_kilometers, to_kilometers

__all__ = [
    # Base class
    "UnitEnum",
    # Angular conversions
    "degrees_to_radians",
    "radians_to_degrees",
    # Distance units
    "DistanceUnit",
    "to_kilometers",
    "from_kilometers",
    "convert_distance",
    # Area units
    "AreaUnit",
    "to_square_kilometers",
    "from_square_kilometers",
    "convert_area",
]
