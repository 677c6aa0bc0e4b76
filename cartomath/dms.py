"""
cartomath.dms - Degrees-minutes-seconds coordinate text

Converts decimal degrees to and from the DMS form ``DD°MM′SS″C`` where
C is one of N, S, E, W. The separators are the degree sign (U+00B0),
prime (U+2032) and double prime (U+2033).

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from .errors import DMSFormatError, InvalidArgumentError
from .settings import get_dms_precision, validate_dms_precision
from .types import GeoCoordinate

__all__ = [
    'DEGREE_SIGN',
    'MINUTE_SIGN',
    'SECOND_SIGN',
    'decimal_to_dms',
    'dms_to_decimal',
    'format_coordinate',
    'parse_dms',
]

DEGREE_SIGN = '°'
MINUTE_SIGN = '′'
SECOND_SIGN = '″'

_SEPARATORS = re.compile(f'[{DEGREE_SIGN}{MINUTE_SIGN}{SECOND_SIGN}]')
_DIGITS = re.compile(r'[0-9]+')
_UNSIGNED_DECIMAL = re.compile(r'[0-9]+(\.[0-9]*)?|\.[0-9]+')
_SIGNS = {'N': 1.0, 'E': 1.0, 'S': -1.0, 'W': -1.0}


def decimal_to_dms(
    value: float,
    is_latitude: bool,
    seconds_decimal_places: Optional[int] = None,
) -> str:
    """
    Format decimal degrees as a DMS string

    Parameters
    ----------
    value : float
        Angle (decimal degrees)
    is_latitude : bool
        True for N/S cardinals, False for E/W
    seconds_decimal_places : int, optional
        Decimal places of the seconds field; the configured default
        (CARTOMATH_DMS_PRECISION) when None

    Returns
    -------
    str
        DMS text, each field padded to two integer digits

    Examples
    --------
    >>> decimal_to_dms(38.8897, True, 0)
    '38°53′23″N'
    >>> decimal_to_dms(-77.0089, False, 0)
    '77°00′32″W'
    """
    if seconds_decimal_places is None:
        places = get_dms_precision()
    else:
        places = validate_dms_precision(seconds_decimal_places)

    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Cannot format non-finite angle as DMS: {value}")

    if is_latitude:
        cardinal = 'N' if value >= 0.0 else 'S'
    else:
        cardinal = 'E' if value >= 0.0 else 'W'

    value = abs(value)
    degrees = int(value)
    fraction = value - degrees
    minutes = int(fraction * 60.0)
    seconds = round(fraction * 3600.0 - minutes * 60.0, places)

    # carry a seconds field rounded up to 60
    if seconds <= 0.0:
        seconds = 0.0
    elif seconds >= 60.0:
        seconds -= 60.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    width = 2 if places == 0 else places + 3
    return (
        f"{degrees:02d}{DEGREE_SIGN}"
        f"{minutes:02d}{MINUTE_SIGN}"
        f"{seconds:0{width}.{places}f}{SECOND_SIGN}"
        f"{cardinal}"
    )


def dms_to_decimal(degrees: float, minutes: float, seconds: float, cardinal: str) -> float:
    """
    Convert DMS components to decimal degrees

    Parameters
    ----------
    degrees, minutes, seconds : float
        Unsigned angle components
    cardinal : str
        'N' or 'E' (positive), 'S' or 'W' (negative)

    Returns
    -------
    float
        Signed angle (decimal degrees)
    """
    sign = _SIGNS.get(cardinal)
    if sign is None:
        raise InvalidArgumentError(
            f"Unknown cardinal direction: {cardinal!r}. Expected one of N, S, E, W"
        )
    return sign * (degrees + minutes / 60.0 + seconds / 3600.0)


def parse_dms(text: str) -> float:
    """
    Parse DMS text into decimal degrees

    Parameters
    ----------
    text : str
        Text such as ``'38°53′23″N'`` or ``'77°00′32.25″W'``

    Returns
    -------
    float
        Signed angle (decimal degrees)

    Raises
    ------
    DMSFormatError
        Wrong number of fields, non-integer degrees or minutes,
        non-numeric seconds, or a cardinal that is not one character
    InvalidArgumentError
        Cardinal character is not N, S, E or W
    """
    parts = _SEPARATORS.split(text)
    if len(parts) != 4:
        raise DMSFormatError(
            f"Expected degrees, minutes, seconds and cardinal in {text!r}, "
            f"found {len(parts)} field(s)"
        )

    # unsigned fields only; the cardinal carries the sign
    if not (_DIGITS.fullmatch(parts[0]) and _DIGITS.fullmatch(parts[1])):
        raise DMSFormatError(f"Degrees and minutes must be unsigned integers in {text!r}")
    degrees = int(parts[0])
    minutes = int(parts[1])

    if not _UNSIGNED_DECIMAL.fullmatch(parts[2]):
        raise DMSFormatError(f"Seconds must be numeric in {text!r}")
    seconds = float(parts[2])

    cardinal = parts[3]
    if len(cardinal) != 1:
        raise DMSFormatError(f"Cardinal must be a single character in {text!r}")

    return dms_to_decimal(degrees, minutes, seconds, cardinal)


def format_coordinate(coord: GeoCoordinate, seconds_decimal_places: Optional[int] = None) -> str:
    """Latitude and longitude of ``coord`` as DMS, separated by a space"""
    return (
        f"{decimal_to_dms(coord.latitude, True, seconds_decimal_places)} "
        f"{decimal_to_dms(coord.longitude, False, seconds_decimal_places)}"
    )
