"""Area unit definitions and conversions.

Polygon areas are computed in square kilometers (the canonical unit) and
converted on request.

Classes:
    AreaUnit: Closed enumeration of supported area units.

Example:
    >>> from_square_kilometers(2.0, AreaUnit.HECTARES)
    200.0
"""

from __future__ import annotations

from .unit_base import Number, UnitEnum


class AreaUnit(UnitEnum):
    """Supported units of area measurement, as units per square kilometer."""

    SQUARE_KILOMETERS = ("km²", 1.0)
    SQUARE_METERS = ("m²", 1_000_000.0)
    SQUARE_MILES = ("mi²", 0.386102)
    HECTARES = ("ha", 100.0)
    ACRES = ("ac", 247.105)


def to_square_kilometers(value: Number, unit: AreaUnit) -> float:
    return AreaUnit.to_canonical(value, unit)


def from_square_kilometers(square_kilometers: Number, unit: AreaUnit) -> float:
    return AreaUnit.from_canonical(square_kilometers, unit)


def convert_area(value: Number, from_unit: AreaUnit, to_unit: AreaUnit) -> float:
    """Convert an area between two units via square kilometers.

    Raises:
        ValueError: If either unit is not an AreaUnit.
    """
    return AreaUnit.convert(value, from_unit, to_unit)
