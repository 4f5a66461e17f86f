"""
Geodetic calculations on an ellipsoidal earth model.

Distances are computed with Vincenty's inverse formula; see
http://www.ngs.noaa.gov/PUBS_LIB/inverse.pdf and
http://www.movable-type.co.uk/scripts/latlong-vincenty.html
"""

__all__ = [
    'Geom', 'PathLengthReducer', 'DEFAULT', 'IERS_1989', 'IERS_2003', 'WGS84',
    'distance', 'get_default_geom', 'path_length', 'set_default_ellipsoid',
]

import math
from typing import Iterable, Iterator, Optional, Union

import numpy as np
from pydantic import validate_call

from gpxstructures import ellipsoid as _ellipsoid
from gpxstructures._const import DISTANCE_ITERATION_EPSILON, DISTANCE_ITERATION_MAX
from gpxstructures.ellipsoid import Ellipsoid
from gpxstructures.length import Length
from gpxstructures.typing import Point
from gpxstructures.utils.mixins import ImmutableMixin, LoggingMixin


def _require_point(point, name: str) -> Point:
    if point is None:
        raise ValueError(f'{name} point must not be None')

    if not isinstance(point, Point):
        raise ValueError(
            f'{name} point must expose latitude, longitude and elevation; '
            f'got {type(point).__name__}'
        )

    return point


class Geom(LoggingMixin, ImmutableMixin):
    """
    Geodetic functions bound to a single ellipsoid. Instances hold no mutable
    state and may be shared freely.

    Args:
        ellipsoid:
            The earth model used for all calculations
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, ellipsoid: Ellipsoid):
        self.ellipsoid = ellipsoid

        self._b = ellipsoid.b

        # Second eccentricity squared, (a² - b²) / b²
        self._aabbbb = (ellipsoid.a ** 2 - ellipsoid.b ** 2) / ellipsoid.b ** 2

        self._f = ellipsoid.f
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, Geom):
            return False

        return self.ellipsoid == other.ellipsoid

    def __hash__(self):
        return hash(self.ellipsoid)

    def __repr__(self):
        return f'<Geom on {self.ellipsoid.name}>'

    @classmethod
    def of(cls, ellipsoid: Ellipsoid) -> 'Geom':
        """Creates a Geom bound to the given ellipsoid"""
        return cls(ellipsoid)

    def distance(self, start: Point, end: Point) -> Length:
        """
        Calculate the distance between two points on the ellipsoid. If either
        point carries an elevation, the surface distance is combined with the
        elevation difference (a missing elevation counts as 0 m).

        Near-antipodal point pairs may not converge within the iteration limit;
        the last estimate is returned in that case rather than raising.

        Args:
            start:
                The start point

            end:
                The end point

        Returns:
            Length
        """
        start = _require_point(start, 'Start')
        end = _require_point(end, 'End')

        lat1, lon1 = math.radians(start.latitude), math.radians(start.longitude)
        lat2, lon2 = math.radians(end.latitude), math.radians(end.longitude)

        omega = lon2 - lon1

        U1 = math.atan((1. - self._f) * math.tan(lat1))
        U2 = math.atan((1. - self._f) * math.tan(lat2))
        sinU1, cosU1 = math.sin(U1), math.cos(U1)
        sinU2, cosU2 = math.sin(U2), math.cos(U2)

        sinU1sinU2 = sinU1 * sinU2
        cosU1sinU2 = cosU1 * sinU2
        sinU1cosU2 = sinU1 * cosU2
        cosU1cosU2 = cosU1 * cosU2

        # eq. 13
        Lambda = omega

        for _ in range(DISTANCE_ITERATION_MAX):
            Lambda_prev = Lambda
            sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

            # eq. 14
            sinSqSigma = (
                (cosU2 * sinLambda) ** 2 +
                (cosU1sinU2 - sinU1cosU2 * cosLambda) ** 2
            )
            sinSigma = math.sqrt(sinSqSigma)

            # eq. 15
            cosSigma = sinU1sinU2 + cosU1cosU2 * cosLambda

            # eq. 16
            sigma = math.atan2(sinSigma, cosSigma)

            # eq. 17; sinSqSigma is zero for coincident points
            sinAlpha = 0. if sinSqSigma == 0. else cosU1cosU2 * sinLambda / sinSigma
            cosSqAlpha = 1. - sinAlpha ** 2

            # eq. 18; cosSqAlpha is zero along the equator
            cos2SigmaM = 0. if cosSqAlpha == 0. else cosSigma - 2 * sinU1sinU2 / cosSqAlpha
            cos2SigmaMSq = cos2SigmaM ** 2

            uSq = cosSqAlpha * self._aabbbb

            # eq. 3
            A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))

            # eq. 4
            B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

            # eq. 6
            deltaSigma = B * sinSigma * (
                cos2SigmaM + B / 4 * (
                    cosSigma * (-1 + 2 * cos2SigmaMSq) -
                    B / 6 * cos2SigmaM * (-3 + 4 * sinSqSigma) * (-3 + 4 * cos2SigmaMSq)
                )
            )

            # eq. 10
            C = self._f / 16 * cosSqAlpha * (4 + self._f * (4 - 3 * cosSqAlpha))

            # eq. 11
            Lambda = omega + (1 - C) * self._f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaMSq))
            )

            if Lambda == 0. or abs((Lambda - Lambda_prev) / Lambda) <= DISTANCE_ITERATION_EPSILON:
                break
        else:
            self.logger.debug(
                'Distance between %s and %s did not converge after %d iterations; '
                'returning the last estimate',
                (start.latitude, start.longitude),
                (end.latitude, end.longitude),
                DISTANCE_ITERATION_MAX,
            )

        # eq. 19
        s = self._b * A * (sigma - deltaSigma)

        e = (start.elevation or 0.) - (end.elevation or 0.)

        return Length.of_meters(math.sqrt(s * s + e * e))

    def distances(self, points: Iterable[Point]) -> np.ndarray:
        """
        Provides an array of the distances (in meters) between consecutive
        points. The length of the returned array is always one less than the
        number of points (or zero, for fewer than two points).

        Args:
            points:
                An ordered iterable of points

        Returns:
            numpy.ndarray
        """
        previous: Optional[Point] = None
        out = []
        for point in points:
            if previous is not None:
                out.append(self.distance(previous, point).to_meters())
            previous = point

        return np.array(out, dtype=float)

    def cumulative_distances(self, points: Iterable[Point]) -> np.ndarray:
        """
        Provides an array of the running path length (in meters) at each point.
        The first value is always 0; the last is the total path length.

        Args:
            points:
                An ordered iterable of points

        Returns:
            numpy.ndarray
        """
        return np.array(
            [x.to_meters() for x in self.path_length_reducer().running(points)],
            dtype=float
        )

    def path_length(self, points: Iterable[Point]) -> Length:
        """
        The total length of the path through the points, in order.

        Args:
            points:
                An ordered iterable of points

        Returns:
            Length
        """
        return self.path_length_reducer()(points)

    def path_length_reducer(self) -> 'PathLengthReducer':
        """Creates a reducer which sums the distances along a sequence of points"""
        return PathLengthReducer(self)


class PathLengthReducer:
    """
    Reduces an ordered sequence of points to the length of the path through
    them. Each call starts from an empty accumulator, so a single reducer can
    be applied to any number of sequences.

    Args:
        geom:
            The Geom used to measure each leg of the path
    """

    def __init__(self, geom: Geom):
        self.geom = geom

    def __call__(self, points: Iterable[Point]) -> Length:
        total = Length.zero()
        for total in self.running(points):
            pass

        return total

    def __repr__(self):
        return f'<PathLengthReducer on {self.geom.ellipsoid.name}>'

    def running(self, points: Iterable[Point]) -> Iterator[Length]:
        """
        Lazily yields the running path length after each point. The first
        value yielded is zero.

        Args:
            points:
                An ordered iterable of points

        Yields:
            Length
        """
        previous: Optional[Point] = None
        total = 0.
        for point in points:
            if previous is not None:
                total += self.geom.distance(previous, point).to_meters()
            else:
                _require_point(point, 'Path')

            previous = point
            yield Length.of_meters(total)


WGS84 = Geom(_ellipsoid.WGS84)
IERS_1989 = Geom(_ellipsoid.IERS_1989)
IERS_2003 = Geom(_ellipsoid.IERS_2003)

DEFAULT = WGS84

_default_geom = DEFAULT


def get_default_geom() -> Geom:
    """The Geom used by the module-level `distance` and `path_length` functions"""
    return _default_geom


def set_default_ellipsoid(ellipsoid: Union[Ellipsoid, str]):
    """
    Set the ellipsoid used by the module-level `distance` and `path_length`
    functions.

    Args:
        ellipsoid:
            An Ellipsoid, or the name of a predefined one (e.g. 'WGS-84')
    """
    global _default_geom

    if isinstance(ellipsoid, str):
        ellipsoid = Ellipsoid.from_name(ellipsoid)

    _default_geom = Geom.of(ellipsoid)


def distance(start: Point, end: Point) -> Length:
    """The distance between two points, using the default Geom"""
    return _default_geom.distance(start, end)


def path_length(points: Iterable[Point]) -> Length:
    """The length of the path through the points, using the default Geom"""
    return _default_geom.path_length(points)
