"""
Representation of a single GPS fix, i.e. a GPX waypoint
"""

__all__ = ['WayPoint', 'WayPointBuilder']

from datetime import datetime
from typing import Optional

from pydantic import validate_call

from gpxstructures._base import BuilderBase, EntityBase
from gpxstructures.utils.functions import (
    default_to_zulu, validate_latitude, validate_longitude, validate_optional_range
)


class WayPoint(EntityBase):
    """
    A point of interest or a fix recorded along a track or route. Satisfies the
    Point protocol, so it may be passed directly to Geom calculations.

    Args:
        latitude:
            Latitude in degrees, [-90, 90]

        longitude:
            Longitude in degrees, [-180, 180]

        elevation:
            (Optional) Elevation in meters

        time:
            (Optional) The time the point was recorded. Naive datetimes are assumed UTC.

        speed:
            (Optional) Speed over ground in meters per second

        course:
            (Optional) Course over ground in degrees, [0, 360)

        name, comment, description, source, symbol, type:
            (Optional) Descriptive text fields
    """

    _FIELDS = (
        'latitude', 'longitude', 'elevation', 'time', 'speed', 'course',
        'name', 'comment', 'description', 'source', 'symbol', 'type',
    )

    @validate_call
    def __init__(  # pylint: disable=too-many-arguments,redefined-builtin
        self,
        latitude: float,
        longitude: float,
        elevation: Optional[float] = None,
        time: Optional[datetime] = None,
        speed: Optional[float] = None,
        course: Optional[float] = None,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        description: Optional[str] = None,
        source: Optional[str] = None,
        symbol: Optional[str] = None,
        type: Optional[str] = None,
    ):
        self.latitude = validate_latitude(latitude)
        self.longitude = validate_longitude(longitude)
        self.elevation = validate_optional_range('Elevation', elevation, -float('inf'))
        self.time = default_to_zulu(time) if time is not None else None
        self.speed = validate_optional_range('Speed', speed, 0.)
        self.course = validate_optional_range('Course', course, 0., 360., upper_inclusive=False)
        self.name = name
        self.comment = comment
        self.description = description
        self.source = source
        self.symbol = symbol
        self.type = type
        self._freeze()

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.latitude, self.longitude, self.elevation))
        return f'<WayPoint({", ".join(map(str, parts))})>'

    @classmethod
    def builder(cls) -> 'WayPointBuilder':
        """Creates an empty WayPoint builder"""
        return WayPointBuilder()

    @classmethod
    def of(
        cls,
        latitude: float,
        longitude: float,
        elevation: Optional[float] = None,
        time: Optional[datetime] = None,
    ) -> 'WayPoint':
        """Shorthand for a waypoint carrying only a location and, optionally, a time"""
        return cls(latitude, longitude, elevation=elevation, time=time)

    def to_builder(self) -> 'WayPointBuilder':
        """Creates a builder pre-filled with the fields of this waypoint"""
        return WayPointBuilder(**self._as_dict())


class WayPointBuilder(BuilderBase[WayPoint]):
    """Fluent builder for WayPoint values"""

    _ENTITY = WayPoint

    def latitude(self, value: float) -> 'WayPointBuilder':
        return self._set('latitude', value)

    def longitude(self, value: float) -> 'WayPointBuilder':
        return self._set('longitude', value)

    def elevation(self, value: Optional[float]) -> 'WayPointBuilder':
        return self._set('elevation', value)

    def time(self, value: Optional[datetime]) -> 'WayPointBuilder':
        return self._set('time', value)

    def speed(self, value: Optional[float]) -> 'WayPointBuilder':
        return self._set('speed', value)

    def course(self, value: Optional[float]) -> 'WayPointBuilder':
        return self._set('course', value)

    def name(self, value: Optional[str]) -> 'WayPointBuilder':
        return self._set('name', value)

    def comment(self, value: Optional[str]) -> 'WayPointBuilder':
        return self._set('comment', value)

    def description(self, value: Optional[str]) -> 'WayPointBuilder':
        return self._set('description', value)

    def source(self, value: Optional[str]) -> 'WayPointBuilder':
        return self._set('source', value)

    def symbol(self, value: Optional[str]) -> 'WayPointBuilder':
        return self._set('symbol', value)

    def type(self, value: Optional[str]) -> 'WayPointBuilder':
        return self._set('type', value)
