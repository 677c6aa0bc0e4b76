"""
cartomath.types - Value types shared by the map and ephemeris modules

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

__all__ = [
    'GeoCoordinate',
    'OrbitalElements',
    'SunPosition',
    'TileIndex',
    'unwrap_scalar',
]


@dataclass(frozen=True)
class GeoCoordinate:
    """
    Geographic position

    Parameters
    ----------
    latitude : float
        Latitude (degrees, -90 to 90)
    longitude : float
        Longitude (degrees, -180 to 180)
    altitude : float, optional
        Altitude (meters)

    Examples
    --------
    >>> GeoCoordinate(38.8897, -77.0089)
    GeoCoordinate(latitude=38.8897, longitude=-77.0089, altitude=None)
    >>> str(GeoCoordinate(38.8897, -77.0089, 12.0))
    '38.8897, -77.0089, 12.0'
    """

    latitude: float
    longitude: float
    altitude: Optional[float] = None

    def has_altitude(self) -> bool:
        """True if an altitude is set"""
        return self.altitude is not None

    def __str__(self) -> str:
        if self.has_altitude():
            return f"{self.latitude}, {self.longitude}, {self.altitude}"
        return f"{self.latitude}, {self.longitude}"


@dataclass(frozen=True)
class TileIndex:
    """
    Position in the Web Mercator tile pyramid

    ``x`` and ``y`` are fractional while a position is being projected and
    integral once resolved to a single tile. Both lie in ``[0, 2**zoom]``.

    Parameters
    ----------
    x : float
        Column, counted eastwards from the antimeridian
    y : float
        Row, counted southwards from the northern edge
    zoom : int
        Zoom level (>= 0)
    """

    x: float
    y: float
    zoom: int

    def resolve(self) -> TileIndex:
        """Tile containing this position (floor of both components)"""
        return TileIndex(int(math.floor(self.x)), int(math.floor(self.y)), self.zoom)

    @property
    def is_resolved(self) -> bool:
        return float(self.x).is_integer() and float(self.y).is_integer()

    @property
    def key(self) -> str:
        """Storage key of the resolved tile, ``"{zoom}-{x}-{y}"``"""
        tile = self.resolve()
        return f"{tile.zoom}-{tile.x}-{tile.y}"


@dataclass(frozen=True)
class OrbitalElements:
    """
    Orbital elements of the sun (as seen from Earth) for one day number

    Attributes
    ----------
    mean_anomaly : float
        Mean anomaly (degrees, 0-360)
    eccentricity : float
        Orbital eccentricity
    argument_of_perihelion : float
        Argument of perihelion (degrees)
    obliquity_of_ecliptic : float
        Obliquity of the ecliptic (degrees)
    """

    mean_anomaly: float
    eccentricity: float
    argument_of_perihelion: float
    obliquity_of_ecliptic: float


@dataclass(frozen=True)
class SunPosition:
    """Equatorial position of the sun (degrees)"""

    right_ascension: float
    declination: float


def unwrap_scalar(value):
    """Return a plain float for 0-d input, the array unchanged otherwise"""
    if np.ndim(value) == 0:
        return float(value)
    return value
