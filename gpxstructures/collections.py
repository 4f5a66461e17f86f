"""
Module for the ordered aggregates of a GPX document: track segments, tracks,
routes and the document itself
"""

__all__ = [
    'CollectionBase', 'GPX', 'GPXBuilder', 'Route', 'RouteBuilder', 'Track',
    'TrackBuilder', 'TrackSegment', 'TrackSegmentBuilder',
]

from abc import ABC
from datetime import datetime, timedelta
from itertools import chain
from typing import Any, ClassVar, Iterable, Iterator, Literal, Optional, Tuple, Union

from pydantic import validate_call

from gpxstructures._base import BuilderBase, EntityBase
from gpxstructures.structures import WayPoint
from gpxstructures.transform import TransformBuilder
from gpxstructures.utils.functions import default_to_zulu, validate_optional_range


class CollectionBase(EntityBase, ABC):
    """
    An immutable aggregate with a primary, ordered sequence of children, named
    by `_CHILDREN`.
    """

    _CHILDREN: ClassVar[str]

    def __bool__(self):
        return bool(self._children())

    def __contains__(self, item):
        return item in self._children()

    def __iter__(self):
        """Iterate through the children"""
        return iter(self._children())

    def __len__(self):
        """The number of children"""
        return len(self._children())

    def _children(self) -> Tuple:
        return getattr(self, self._CHILDREN)

    def _transform(self, field: str) -> TransformBuilder:
        return TransformBuilder(
            self,
            getattr(self, field),
            lambda source, children: source._replace(**{field: children})
        )

    def transform(self) -> TransformBuilder:
        """
        Creates a single-use builder which derives a new value of this type by
        filtering and/or mapping its children. Every other field is carried over
        unchanged.

        Returns:
            TransformBuilder
        """
        return self._transform(self._CHILDREN)


class TrackSegment(CollectionBase):

    """
    A sequence of waypoints in recording order. Duplicate points are permitted.
    """

    _FIELDS = ('points',)
    _CHILDREN = 'points'

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, points: Tuple[WayPoint, ...] = ()):
        self.points = points
        self._freeze()

    def __add__(self, other):
        if not isinstance(other, TrackSegment):
            raise ValueError('You can only combine a TrackSegment with another TrackSegment')

        return TrackSegment(self.points + other.points)

    def __getitem__(self, val: Union[int, slice]):
        """
        Index into the points, or slice them. Slicing by datetime returns a new
        TrackSegment containing only the timestamped points within the range.

        Args:
            val:
                An index, a slice of indices, or a slice of datetimes

        Examples:
            ```python
            # Returns all points from 1 JAN 2020 00:00 (inclusive) through
            # 2 JAN 2020 00:00 (not inclusive)
            segment[datetime(2020, 1, 1):datetime(2020, 1, 2)]
            ```

        Returns:
            WayPoint, a tuple of WayPoints, or a TrackSegment
        """
        if isinstance(val, slice) and (
            isinstance(val.start, datetime) or isinstance(val.stop, datetime)
        ):
            timed = [x.time for x in self.points if x.time is not None]
            if not timed:
                return TrackSegment()

            _start = default_to_zulu(val.start or min(timed))
            _stop = default_to_zulu(val.stop or max(timed) + timedelta(seconds=1))
            return self.transform().filter(
                lambda x: x.time is not None and _start <= x.time < _stop
            ).build()

        return self.points[val]

    def __repr__(self):
        """REPL representation"""
        if not self.points:
            return '<Empty TrackSegment>'

        return f'<TrackSegment with {len(self.points)} points>'

    @classmethod
    def builder(cls) -> 'TrackSegmentBuilder':
        """Creates an empty TrackSegment builder"""
        return TrackSegmentBuilder()

    @classmethod
    def of(cls, points: Iterable[WayPoint]) -> 'TrackSegment':
        """Creates a segment from an iterable of waypoints"""
        return cls(tuple(points))

    def to_builder(self) -> 'TrackSegmentBuilder':
        """Creates a builder pre-filled with the points of this segment"""
        return TrackSegmentBuilder(**self._as_dict())


class Track(CollectionBase):

    """
    An ordered sequence of track segments, along with descriptive metadata
    """

    _FIELDS = ('name', 'comment', 'description', 'source', 'number', 'type', 'segments')
    _CHILDREN = 'segments'

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(  # pylint: disable=too-many-arguments,redefined-builtin
        self,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        description: Optional[str] = None,
        source: Optional[str] = None,
        number: Optional[int] = None,
        type: Optional[str] = None,
        segments: Tuple[TrackSegment, ...] = (),
    ):
        self.name = name
        self.comment = comment
        self.description = description
        self.source = source
        self.number = validate_optional_range('Track number', number, 0)
        self.type = type
        self.segments = segments
        self._freeze()

    def __repr__(self):
        """REPL representation"""
        label = f' {self.name!r}' if self.name else ''
        return f'<Track{label} with {len(self.segments)} segments>'

    @classmethod
    def builder(cls) -> 'TrackBuilder':
        """Creates an empty Track builder"""
        return TrackBuilder()

    def points(self) -> Iterator[WayPoint]:
        """Iterate through the waypoints of every segment, in order"""
        return chain.from_iterable(x.points for x in self.segments)

    def to_builder(self) -> 'TrackBuilder':
        """Creates a builder pre-filled with the fields of this track"""
        return TrackBuilder(**self._as_dict())


class Route(CollectionBase):

    """
    An ordered sequence of waypoints describing a planned path, along with
    descriptive metadata
    """

    _FIELDS = ('name', 'comment', 'description', 'source', 'number', 'type', 'points')
    _CHILDREN = 'points'

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(  # pylint: disable=too-many-arguments,redefined-builtin
        self,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        description: Optional[str] = None,
        source: Optional[str] = None,
        number: Optional[int] = None,
        type: Optional[str] = None,
        points: Tuple[WayPoint, ...] = (),
    ):
        self.name = name
        self.comment = comment
        self.description = description
        self.source = source
        self.number = validate_optional_range('Route number', number, 0)
        self.type = type
        self.points = points
        self._freeze()

    def __repr__(self):
        """REPL representation"""
        label = f' {self.name!r}' if self.name else ''
        return f'<Route{label} with {len(self.points)} points>'

    @classmethod
    def builder(cls) -> 'RouteBuilder':
        """Creates an empty Route builder"""
        return RouteBuilder()

    def to_builder(self) -> 'RouteBuilder':
        """Creates a builder pre-filled with the fields of this route"""
        return RouteBuilder(**self._as_dict())


class GPX(CollectionBase):

    """
    The root of a GPX document. Iterating over a GPX yields its tracks; the
    waypoints and routes are available as attributes.
    """

    _FIELDS = ('creator', 'version', 'waypoints', 'routes', 'tracks')
    _CHILDREN = 'tracks'

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        creator: str = 'gpxstructures',
        version: Literal['1.0', '1.1'] = '1.1',
        waypoints: Tuple[WayPoint, ...] = (),
        routes: Tuple[Route, ...] = (),
        tracks: Tuple[Track, ...] = (),
    ):
        self.creator = creator
        self.version = version
        self.waypoints = waypoints
        self.routes = routes
        self.tracks = tracks
        self._freeze()

    def __repr__(self):
        """REPL representation"""
        return (
            f'<GPX {self.version} with {len(self.waypoints)} waypoints, '
            f'{len(self.routes)} routes, {len(self.tracks)} tracks>'
        )

    @classmethod
    def builder(cls) -> 'GPXBuilder':
        """Creates an empty GPX builder"""
        return GPXBuilder()

    def to_builder(self) -> 'GPXBuilder':
        """Creates a builder pre-filled with the contents of this document"""
        return GPXBuilder(**self._as_dict())

    def track_points(self) -> Iterator[WayPoint]:
        """Iterate through the waypoints of every track, in order"""
        return chain.from_iterable(x.points() for x in self.tracks)

    def transform_routes(self) -> TransformBuilder:
        """Like `transform()`, but operating on the routes of the document"""
        return self._transform('routes')

    def transform_waypoints(self) -> TransformBuilder:
        """Like `transform()`, but operating on the waypoints of the document"""
        return self._transform('waypoints')


class TrackSegmentBuilder(BuilderBase[TrackSegment]):
    """Fluent builder for TrackSegment values"""

    _ENTITY = TrackSegment

    def add_point(self, point: WayPoint) -> 'TrackSegmentBuilder':
        return self._append('points', point)

    def points(self, points: Iterable[WayPoint]) -> 'TrackSegmentBuilder':
        return self._set('points', list(points))


class _DescribedBuilder(BuilderBase[Any]):
    """Setters for the descriptive fields shared by tracks and routes"""

    def name(self, value: Optional[str]):
        return self._set('name', value)

    def comment(self, value: Optional[str]):
        return self._set('comment', value)

    def description(self, value: Optional[str]):
        return self._set('description', value)

    def source(self, value: Optional[str]):
        return self._set('source', value)

    def number(self, value: Optional[int]):
        return self._set('number', value)

    def type(self, value: Optional[str]):
        return self._set('type', value)


class TrackBuilder(_DescribedBuilder):
    """Fluent builder for Track values"""

    _ENTITY = Track

    def add_segment(self, segment: TrackSegment) -> 'TrackBuilder':
        return self._append('segments', segment)

    def segments(self, segments: Iterable[TrackSegment]) -> 'TrackBuilder':
        return self._set('segments', list(segments))


class RouteBuilder(_DescribedBuilder):
    """Fluent builder for Route values"""

    _ENTITY = Route

    def add_point(self, point: WayPoint) -> 'RouteBuilder':
        return self._append('points', point)

    def points(self, points: Iterable[WayPoint]) -> 'RouteBuilder':
        return self._set('points', list(points))


class GPXBuilder(BuilderBase[GPX]):
    """Fluent builder for GPX documents"""

    _ENTITY = GPX

    def creator(self, value: str) -> 'GPXBuilder':
        return self._set('creator', value)

    def version(self, value: str) -> 'GPXBuilder':
        return self._set('version', value)

    def add_waypoint(self, waypoint: WayPoint) -> 'GPXBuilder':
        return self._append('waypoints', waypoint)

    def waypoints(self, waypoints: Iterable[WayPoint]) -> 'GPXBuilder':
        return self._set('waypoints', list(waypoints))

    def add_route(self, route: Route) -> 'GPXBuilder':
        return self._append('routes', route)

    def routes(self, routes: Iterable[Route]) -> 'GPXBuilder':
        return self._set('routes', list(routes))

    def add_track(self, track: Track) -> 'GPXBuilder':
        return self._append('tracks', track)

    def tracks(self, tracks: Iterable[Track]) -> 'GPXBuilder':
        return self._set('tracks', list(tracks))
