"""Global constants and type definitions for the geodesy core.

This module centralizes the fixed numeric parameters shared by every geodesy
computation. All of them are process-wide and immutable by convention: the
Earth is modelled as a sphere of a single mean radius, and the tolerance
values below are part of the observable behavior of point equality and
polygon containment.

Constants:
    EARTH_RADIUS_KM: Mean Earth radius in kilometers (IUGG mean radius R1).
    KM_PER_DEGREE: Approximate length of one degree of latitude in kilometers,
                   used by the planar bounding-box approximation.
    RAY_CAST_EPSILON: Latitude nudge applied when a ray-cast query point sits
                      exactly on an edge endpoint latitude.
    DEFAULT_TOLERANCE: Per-axis tolerance in degrees for approximate point
                       equality.
    POLE_COSINE_THRESHOLD: Below this value of cos(latitude) the bounding-box
                           longitude span is reported as degenerate.

Type Definitions:
    BASE_TYPE: Union type of accepted numeric inputs, including NumPy arrays
               for the batch distance functions.

Example:
    >>> from geocore.config import EARTH_RADIUS_KM
    >>> round(EARTH_RADIUS_KM * 3.141592653589793, 1)  # half a great circle
    20015.1
"""

from numpy import ndarray

EARTH_RADIUS_KM = 6371.0088

KM_PER_DEGREE = 111.32

RAY_CAST_EPSILON = 1e-10

DEFAULT_TOLERANCE = 1e-6

POLE_COSINE_THRESHOLD = 1e-12

BASE_TYPE = int | float | ndarray
