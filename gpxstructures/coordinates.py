"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Optional, Tuple, Union

from gpxstructures.utils.functions import (
    round_half_up, validate_latitude, validate_longitude, validate_optional_range
)
from gpxstructures.utils.mixins import ImmutableMixin


class Coordinate(ImmutableMixin):
    """Representation of a coordinate on the globe (i.e., a lat/lon pair with optional elevation)"""

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        elevation: Optional[Union[float, int, str]] = None,
    ):
        self.latitude = validate_latitude(float(latitude))
        self.longitude = validate_longitude(float(longitude))
        self.elevation = validate_optional_range(
            'Elevation',
            None if elevation is None else float(elevation),
            -float('inf')
        )
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.elevation == other.elevation
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.elevation))

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.latitude, self.longitude, self.elevation))
        return f'<Coordinate({", ".join(map(str, parts))})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lat, lon) pair.

        The hemisphere value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str))

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Coordinate(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude in decimal degrees to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted (latitude, longitude) as (degrees, minutes, seconds, hemisphere)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, ...]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude).
        If the Coordinate has an elevation, the tuple will be extended to include it.

        Returns:
            Tuple of up to length 3, consisting of (latitude, longitude, elevation)
        """
        if self.elevation is None:
            return self.latitude, self.longitude

        return self.latitude, self.longitude, self.elevation
