"""Base unit enumeration for closed families of measurement units.

Every unit family (distance, area) is a closed enumeration. Each member
carries its display symbol and a scale factor expressed as "units per
canonical unit", where the canonical unit is the family member whose factor
is exactly 1.0. Conversions are plain multiplications or divisions by that
factor, so converting to and from the canonical unit never goes through an
intermediate unit.

Key Concepts:
- Canonical unit: the family member with ``per_canonical == 1.0``
- Closed family: members are fixed at class creation and cannot be extended
- Argument checking: passing anything that is not a member of the expected
  family is a programming error and raises ``ValueError``

Classes:
    UnitEnum: Base enumeration for unit families.

Example:
    >>> class Length(UnitEnum):
    ...     METERS = ("m", 1.0)
    ...     CENTIMETERS = ("cm", 100.0)
    >>> Length.CENTIMETERS.symbol
    'cm'
    >>> Length.to_canonical(250.0, Length.CENTIMETERS)
    2.5
"""

from __future__ import annotations

from enum import Enum

from geocore.config import BASE_TYPE

Number = BASE_TYPE


class UnitEnum(Enum):
    """Base class for closed unit families.

    Members are declared as ``NAME = (symbol, per_canonical)``.

    Attributes:
        symbol (str): Unit symbol for display purposes.
        per_canonical (float): How many of this unit make one canonical unit.
    """

    def __init__(self, symbol: str, per_canonical: float):
        self.symbol = symbol
        self.per_canonical = per_canonical

    @classmethod
    def check(cls, unit: UnitEnum) -> UnitEnum:
        """Ensure ``unit`` is a member of this family.

        Args:
            unit: Value supplied by the caller as a unit of this family.

        Returns:
            UnitEnum: The same unit, for chaining.

        Raises:
            ValueError: If ``unit`` is not a member of this enumeration.
        """
        if not isinstance(unit, cls):
            msg = f"Unsupported {cls.__name__}: {unit!r}"
            raise ValueError(msg)
        return unit

    @classmethod
    def to_canonical(cls, value: Number, unit: UnitEnum) -> float:
        """Convert ``value`` expressed in ``unit`` to the canonical unit."""
        return value / cls.check(unit).per_canonical

    @classmethod
    def from_canonical(cls, value: Number, unit: UnitEnum) -> float:
        """Convert a canonical ``value`` into ``unit``."""
        return value * cls.check(unit).per_canonical

    @classmethod
    def convert(cls, value: Number, from_unit: UnitEnum, to_unit: UnitEnum) -> float:
        """Convert ``value`` between two members of this family.

        Identical units short-circuit and return ``value`` untouched, which
        is the same result the canonical round trip yields for them.

        Raises:
            ValueError: If either unit is not a member of this enumeration.
        """
        cls.check(from_unit)
        cls.check(to_unit)
        if from_unit is to_unit:
            return value
        return cls.from_canonical(cls.to_canonical(value, from_unit), to_unit)

    def __str__(self) -> str:
        return self.symbol
