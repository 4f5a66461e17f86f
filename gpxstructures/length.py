"""
Representation of a non-negative length, e.g. a distance between two points
"""

__all__ = ['Length', 'LengthUnit']

from enum import Enum
from functools import total_ordering
import math

from pydantic import validate_call

from gpxstructures.utils.mixins import ImmutableMixin


class LengthUnit(Enum):
    """Units of length, carrying their size in meters and their symbol"""

    METER = (1.0, 'm')
    KILOMETER = (1_000.0, 'km')
    INCH = (0.0254, 'in')
    FOOT = (0.3048, 'ft')
    YARD = (0.9144, 'yd')
    MILE = (1_609.344, 'mi')
    NAUTICAL_MILE = (1_852.0, 'nmi')
    FATHOM = (1.8288, 'ftm')

    def __init__(self, meters: float, symbol: str):
        self.meters = meters
        self.symbol = symbol

    def to_meters(self, value: float) -> float:
        """Converts a value in this unit to meters"""
        return value * self.meters

    def from_meters(self, value: float) -> float:
        """Converts a value in meters to this unit"""
        return value / self.meters


@total_ordering
class Length(ImmutableMixin):
    """
    A non-negative length. Values are held in meters regardless of the unit
    they were created with, so equality and ordering compare magnitudes.

    Args:
        value:
            The magnitude of the length, expressed in `unit`

        unit:
            (Default LengthUnit.METER) The unit `value` is expressed in
    """

    @validate_call
    def __init__(self, value: float, unit: LengthUnit = LengthUnit.METER):
        meters = unit.to_meters(value)
        if not math.isfinite(meters) or meters < 0:
            raise ValueError(f'Length must be a finite, non-negative value; got {value} {unit.symbol}')

        self._meters = meters
        self._freeze()

    def __add__(self, other):
        if not isinstance(other, Length):
            return NotImplemented

        return Length(self._meters + other._meters)

    def __radd__(self, other):
        # Permits sum() over an iterable of lengths
        if other == 0:
            return self

        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Length):
            return False

        return self._meters == other._meters

    def __float__(self):
        return self._meters

    def __hash__(self):
        return hash(self._meters)

    def __lt__(self, other):
        if not isinstance(other, Length):
            return NotImplemented

        return self._meters < other._meters

    def __repr__(self):
        return f'<Length {self._meters} m>'

    @classmethod
    def of(cls, value: float, unit: LengthUnit) -> 'Length':
        """Creates a length from a value in the given unit"""
        return cls(value, unit)

    @classmethod
    def of_meters(cls, value: float) -> 'Length':
        """Creates a length from a value in meters"""
        return cls(value)

    @classmethod
    def zero(cls) -> 'Length':
        """A length of zero meters"""
        return cls(0.)

    def to(self, unit: LengthUnit) -> float:
        """
        Expresses this length in another unit.

        Args:
            unit:
                The target unit

        Returns:
            float
        """
        return unit.from_meters(self._meters)

    def to_meters(self) -> float:
        """Expresses this length in meters"""
        return self._meters
