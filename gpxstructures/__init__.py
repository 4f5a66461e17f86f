
from gpxstructures._version import __version__  # noqa: F401
from gpxstructures.utils.logging import LOGGER
from gpxstructures.length import Length, LengthUnit
from gpxstructures.ellipsoid import Ellipsoid
from gpxstructures.coordinates import Coordinate
from gpxstructures.typing import Point
from gpxstructures.geom import Geom, PathLengthReducer
from gpxstructures.structures import WayPoint
from gpxstructures.collections import GPX, Route, Track, TrackSegment
from gpxstructures.transform import TransformBuilder


__all__ = [
    'Coordinate',
    'Ellipsoid',
    'Geom',
    'GPX',
    'Length',
    'LengthUnit',
    'PathLengthReducer',
    'Point',
    'Route',
    'Track',
    'TrackSegment',
    'TransformBuilder',
    'WayPoint',
    'LOGGER',
]
