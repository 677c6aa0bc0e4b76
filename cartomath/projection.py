"""
cartomath.projection - Web Mercator projection and tile pyramid

Provides the slippy-map tile arithmetic used to decide which raster tiles
cover a view, plus the same projection expressed as a continuous axis
transform.

Functions:
    lat_lon_to_tile: Geographic position to fractional tile coordinates
    tile_to_lat_lon: Tile coordinates to geographic position
    latitude_to_y: Latitude to pseudo-Mercator axis value
    y_to_latitude: Pseudo-Mercator axis value to latitude
    mercator_adjustment: Horizontal scale factor at a latitude
    tile_range: Integer tile ranges covering a view
    tiles_for_view: Iterate over the tiles covering a view
    zoom_for_view: Zoom level matching a view width

Latitudes beyond MAX_MERCATOR_LATITUDE are NOT clamped here: the
log-tangent term diverges towards the poles and the outputs become very
large, infinite or NaN. Use clamp_latitude before projecting.

References:
    https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames
    https://wiki.openstreetmap.org/wiki/Mercator

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterator

import numpy as np

from .errors import InvalidArgumentError
from .types import GeoCoordinate, TileIndex, unwrap_scalar

__all__ = [
    'MAX_MERCATOR_LATITUDE',
    'clamp_latitude',
    'lat_lon_to_tile',
    'latitude_to_y',
    'mercator_adjustment',
    'tile_bounds',
    'tile_range',
    'tile_to_lat_lon',
    'tiles_for_view',
    'y_to_latitude',
    'zoom_for_view',
]

# Latitude at which the Web Mercator square closes: atan(sinh(pi)) in degrees
MAX_MERCATOR_LATITUDE = 85.05112878

_DEG_TO_RAD = np.pi / 180.0
_RAD_TO_DEG = 180.0 / np.pi


def _check_zoom(zoom) -> int:
    if isinstance(zoom, bool) or not isinstance(zoom, numbers.Integral) or zoom < 0:
        raise InvalidArgumentError(f"Zoom must be a non-negative integer: {zoom!r}")
    return int(zoom)


def clamp_latitude(lat: np.ndarray) -> np.ndarray:
    """Clamp latitude (degrees) to the Web Mercator range"""
    return unwrap_scalar(np.clip(lat, -MAX_MERCATOR_LATITUDE, MAX_MERCATOR_LATITUDE))


def lat_lon_to_tile(
    lat: np.ndarray,
    lon: np.ndarray,
    zoom: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Convert a geographic position to fractional tile coordinates

    Parameters
    ----------
    lat : float or np.ndarray
        Latitude (degrees), expected within +/-MAX_MERCATOR_LATITUDE
    lon : float or np.ndarray
        Longitude (degrees), not normalized
    zoom : int
        Zoom level (>= 0)

    Returns
    -------
    x, y : float or np.ndarray
        Tile coordinates; the integer parts identify the tile

    Examples
    --------
    >>> lat_lon_to_tile(0.0, 0.0, 1)
    (1.0, 1.0)
    """
    n = float(1 << _check_zoom(zoom))
    lat_rad = np.asarray(lat, dtype=np.float64) * _DEG_TO_RAD
    lon = np.asarray(lon, dtype=np.float64)

    with np.errstate(all='ignore'):
        x = (lon + 180.0) / 360.0 * n
        y = (1.0 - np.log(np.tan(lat_rad) + 1.0 / np.cos(lat_rad)) / np.pi) / 2.0 * n

    return unwrap_scalar(x), unwrap_scalar(y)


def tile_to_lat_lon(x: np.ndarray, y: np.ndarray, zoom: int) -> GeoCoordinate:
    """
    Convert tile coordinates to a geographic position

    Exact inverse of lat_lon_to_tile. Integer inputs give the north-west
    corner of the tile.

    Parameters
    ----------
    x, y : float or np.ndarray
        Tile coordinates
    zoom : int
        Zoom level (>= 0)

    Returns
    -------
    GeoCoordinate
        Latitude and longitude (degrees); array-valued for array input
    """
    n = float(1 << _check_zoom(zoom))
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    with np.errstate(all='ignore'):
        lon = x / n * 360.0 - 180.0
        lat = np.arctan(np.sinh(np.pi * (1.0 - 2.0 * y / n))) * _RAD_TO_DEG

    return GeoCoordinate(unwrap_scalar(lat), unwrap_scalar(lon))


def tile_bounds(x: int, y: int, zoom: int) -> tuple[GeoCoordinate, GeoCoordinate]:
    """North-west and south-east corners of a tile"""
    return tile_to_lat_lon(x, y, zoom), tile_to_lat_lon(x + 1, y + 1, zoom)


def latitude_to_y(lat: np.ndarray) -> np.ndarray:
    """
    Latitude (degrees) to pseudo-Mercator axis value

    The axis value is expressed in "degrees" so that it matches longitude
    along the equator.
    """
    lat = np.asarray(lat, dtype=np.float64)
    with np.errstate(all='ignore'):
        y = np.log(np.tan((lat + 90.0) / 360.0 * np.pi)) / np.pi * 180.0
    return unwrap_scalar(y)


def y_to_latitude(y: np.ndarray) -> np.ndarray:
    """Pseudo-Mercator axis value to latitude (degrees)"""
    y = np.asarray(y, dtype=np.float64)
    with np.errstate(all='ignore'):
        lat = np.arctan(np.exp(y / 180.0 * np.pi)) / np.pi * 360.0 - 90.0
    return unwrap_scalar(lat)


def mercator_adjustment(lat: np.ndarray) -> np.ndarray:
    """
    Mercator adjustment factor, the secant of the latitude

    Horizontal distances on the map are stretched by this factor
    relative to the equator.
    """
    lat = np.asarray(lat, dtype=np.float64)
    with np.errstate(all='ignore'):
        adj = 1.0 / np.cos(np.abs(lat) * _DEG_TO_RAD)
    return unwrap_scalar(adj)


def _span(a: float, b: float, n: float) -> tuple[int, int]:
    # NaN bounds fall back to the edge of the grid
    if math.isnan(a) or math.isnan(b):
        return 0, int(n)
    lo = max(min(a, b), 0.0)
    hi = min(max(a, b), n)
    return int(math.floor(lo)), int(math.ceil(hi))


def tile_range(
    lat0: float,
    lon0: float,
    lat1: float,
    lon1: float,
    zoom: int,
) -> tuple[int, int, int, int]:
    """
    Integer tile ranges covering a view

    Parameters
    ----------
    lat0, lon0 : float
        First corner of the view (degrees)
    lat1, lon1 : float
        Opposite corner of the view (degrees)
    zoom : int
        Zoom level (>= 0)

    Returns
    -------
    xmin, xmax, ymin, ymax : int
        Half-open ranges ``range(xmin, xmax)`` and ``range(ymin, ymax)``,
        clamped to the ``2**zoom`` grid
    """
    n = float(1 << _check_zoom(zoom))
    x0, y0 = lat_lon_to_tile(lat0, lon0, zoom)
    x1, y1 = lat_lon_to_tile(lat1, lon1, zoom)

    xmin, xmax = _span(x0, x1, n)
    ymin, ymax = _span(y0, y1, n)
    return xmin, xmax, ymin, ymax


def tiles_for_view(
    lat0: float,
    lon0: float,
    lat1: float,
    lon1: float,
    zoom: int,
) -> Iterator[TileIndex]:
    """Yield every tile covering a view, column by column"""
    xmin, xmax, ymin, ymax = tile_range(lat0, lon0, lat1, lon1, zoom)
    for x in range(xmin, xmax):
        for y in range(ymin, ymax):
            yield TileIndex(x, y, zoom)


def zoom_for_view(
    lon0: float,
    lon1: float,
    width_pixels: float,
    tile_size: int = 256,
    min_zoom: int = 0,
    max_zoom: int = 20,
) -> int:
    """
    Zoom level at which a longitude span fills a view

    Parameters
    ----------
    lon0, lon1 : float
        Longitude span of the view (degrees)
    width_pixels : float
        View width (pixels)
    tile_size : int, default 256
        Tile edge length (pixels)
    min_zoom, max_zoom : int
        Allowed zoom range

    Returns
    -------
    int
        Zoom level, clamped to [min_zoom, max_zoom]
    """
    _check_zoom(min_zoom)
    _check_zoom(max_zoom)
    if min_zoom > max_zoom:
        raise InvalidArgumentError(f"min_zoom ({min_zoom}) is greater than max_zoom ({max_zoom})")

    # desired number of tiles horizontally
    tiles_x = width_pixels / tile_size
    span = abs(lon1 - lon0) / 360.0
    if span == 0.0:
        return max_zoom
    if not (tiles_x > 0.0 and math.isfinite(span)):
        return min_zoom

    zoom = int(round(math.log2(tiles_x / span)))
    return min(max(zoom, min_zoom), max_zoom)
