"""Module for miscellaneous multi-use functions"""

__all__ = [
    'default_to_zulu', 'round_half_up', 'validate_latitude', 'validate_longitude',
    'validate_optional_range'
]

from datetime import datetime, timezone
import math
from typing import Optional

from gpxstructures.utils.logging import warn_once


def default_to_zulu(dt: datetime) -> datetime:
    """Add Zulu/UTC as timezone, if timezone not present"""
    if not dt.tzinfo:
        warn_once(
            'Datetime does not contain timezone information; Zulu/UTC time assumed. '
            '(this warning will not repeat)'
        )
        return dt.replace(tzinfo=timezone.utc)

    return dt


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def validate_latitude(value: float) -> float:
    """Ensures a latitude lies within [-90, 90] degrees"""
    if not -90. <= value <= 90.:
        raise ValueError(f'Latitude must be within [-90, 90] degrees; got {value}')

    return value


def validate_longitude(value: float) -> float:
    """Ensures a longitude lies within [-180, 180] degrees"""
    if not -180. <= value <= 180.:
        raise ValueError(f'Longitude must be within [-180, 180] degrees; got {value}')

    return value


def validate_optional_range(
    name: str,
    value: Optional[float],
    lower: float,
    upper: float = math.inf,
    upper_inclusive: bool = True,
) -> Optional[float]:
    """
    Ensures an optional value, if present, is finite and lies within the given bounds.

    Args:
        name:
            The name of the field, used in the error message

        value:
            The value to check; None passes through untouched

        lower:
            The inclusive lower bound

        upper:
            The upper bound

        upper_inclusive:
            (Default True) Whether the upper bound itself is a permitted value

    Returns:
        The value, unchanged
    """
    if value is None:
        return None

    in_upper = value <= upper if upper_inclusive else value < upper
    if not math.isfinite(value) or not (lower <= value and in_upper):
        raise ValueError(f'{name} out of range: {value}')

    return value
