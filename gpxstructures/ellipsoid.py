"""
Earth models used by the geodetic calculations
"""

__all__ = ['Ellipsoid', 'DEFAULT', 'IERS_1989', 'IERS_2003', 'WGS84']

import math
import re
from typing import Dict

from pydantic import validate_call

from gpxstructures._const import (
    IERS_1989_A, IERS_1989_B, IERS_2003_A, IERS_2003_B, WGS84_A, WGS84_B
)
from gpxstructures.utils.mixins import ImmutableMixin


def _normalise_name(name: str) -> str:
    return re.sub(r'[-_\s]', '', name).upper()


class Ellipsoid(ImmutableMixin):
    """
    An oblate ellipsoid of revolution, described by its semi-major axis `a` and
    semi-minor axis `b` (both in meters).

    Args:
        name:
            A human-readable name for the ellipsoid

        a:
            The semi-major (equatorial) axis, in meters. Must be positive.

        b:
            The semi-minor (polar) axis, in meters. Must be positive and no
            larger than `a`.
    """

    @validate_call
    def __init__(self, name: str, a: float, b: float):
        if not (math.isfinite(a) and a > 0):
            raise ValueError(f'Semi-major axis must be a positive number; got {a}')

        if not (math.isfinite(b) and 0 < b <= a):
            raise ValueError(
                f'Semi-minor axis must be positive and no larger than the '
                f'semi-major axis ({a}); got {b}'
            )

        self.name = name
        self.a = a
        self.b = b
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (self.name, self.a, self.b) == (other.name, other.a, other.b)

    def __hash__(self):
        return hash((self.name, self.a, self.b))

    def __repr__(self):
        return f'<Ellipsoid {self.name} (a={self.a}, b={self.b})>'

    @property
    def f(self) -> float:
        """The flattening, (a - b) / a"""
        return (self.a - self.b) / self.a

    @property
    def inverse_flattening(self) -> float:
        """The inverse flattening, 1 / f. Infinite for a perfect sphere."""
        if self.a == self.b:
            return math.inf

        return self.a / (self.a - self.b)

    @classmethod
    def of(cls, a: float, b: float, name: str = 'Custom') -> 'Ellipsoid':
        """
        Creates an ellipsoid from its semi-major and semi-minor axes.

        Args:
            a:
                The semi-major axis, in meters

            b:
                The semi-minor axis, in meters

            name:
                (Default 'Custom') A name for the ellipsoid

        Returns:
            Ellipsoid
        """
        return cls(name, a, b)

    @classmethod
    def from_name(cls, name: str) -> 'Ellipsoid':
        """
        Looks up one of the predefined ellipsoids by name. Matching ignores case
        as well as hyphens, underscores and spaces, so 'WGS-84', 'wgs84' and
        'WGS_84' all name the same ellipsoid.
        """
        key = _normalise_name(name)
        if key not in _ELLIPSOIDS:
            raise ValueError(
                f"Unknown ellipsoid '{name}'. Options: {[x.name for x in _ELLIPSOIDS.values()]}"
            )

        return _ELLIPSOIDS[key]


WGS84 = Ellipsoid('WGS-84', WGS84_A, WGS84_B)
IERS_1989 = Ellipsoid('IERS-1989', IERS_1989_A, IERS_1989_B)
IERS_2003 = Ellipsoid('IERS-2003', IERS_2003_A, IERS_2003_B)

DEFAULT = WGS84

_ELLIPSOIDS: Dict[str, Ellipsoid] = {
    _normalise_name(x.name): x for x in (WGS84, IERS_1989, IERS_2003)
}
