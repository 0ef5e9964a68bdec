"""Angular conversions between degrees and radians.

Geographic coordinates and bearings are expressed in degrees at the public
surface, while every trigonometric computation works in radians. These two
functions are the only place where that conversion happens, so the exact
operation order (multiply first, then divide) is shared by every caller.

No range restriction or wraparound is applied: 540 degrees converts to 3π
radians.

Example:
    >>> from math import pi
    >>> degrees_to_radians(180.0) == pi
    True
    >>> radians_to_degrees(pi / 2)
    90.0
"""

from __future__ import annotations

from math import pi

Number = int | float


def degrees_to_radians(degrees: Number) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * pi / 180


def radians_to_degrees(radians: Number) -> float:
    """Convert an angle from radians to degrees."""
    return radians * 180 / pi
