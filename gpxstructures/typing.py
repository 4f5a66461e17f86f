"""Module for gpxstructures type hinting"""

__all__ = ['Point']

from typing import Optional

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class Point(Protocol):
    """
    The minimal, read-only view of a location required by the geodetic
    calculations. Any object exposing these three attributes qualifies, e.g.
    Coordinate and WayPoint.
    """

    @property
    def latitude(self) -> float:
        """Latitude in degrees, [-90, 90]"""

    @property
    def longitude(self) -> float:
        """Longitude in degrees, [-180, 180]"""

    @property
    def elevation(self) -> Optional[float]:
        """Elevation in meters, if known"""


