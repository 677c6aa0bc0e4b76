"""
cartomath.scale - Scale bar rounding and labels

Rounds raw map distances to "nice" values for a scale bar and formats
them in metric and imperial units.

Functions:
    round_nice: Round to the 1-2-5 preferred number sequence
    round_nice_decadic: Round to one significant digit
    format_meters: Metre/kilometre label
    format_feet: Foot/mile label
    tile_width_meters: Ground width of one tile along a parallel
    meters_per_pixel: Ground resolution of a tile pixel
    scale_bar: Both bars of a metric/imperial scale legend

The ground resolution assumes a spherical Earth with the WGS84
equatorial radius; the error from flattening peaks near 0.3% at
mid-latitudes.

References:
    https://wiki.openstreetmap.org/wiki/Zoom_levels

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidArgumentError
from .projection import _check_zoom
from .types import unwrap_scalar

__all__ = [
    'EARTH_CIRCUMFERENCE',
    'ScaleBar',
    'feet_to_meters',
    'format_feet',
    'format_meters',
    'meters_per_pixel',
    'meters_to_feet',
    'round_nice',
    'round_nice_decadic',
    'scale_bar',
    'tile_width_meters',
]

# Equatorial circumference (metres) of the sphere used by web tile services
EARTH_CIRCUMFERENCE = 2.0 * np.pi * 6378137.0

_METERS_PER_FOOT = 0.3048
_FEET_PER_MILE = 5280.0
_METERS_PER_KILOMETER = 1000.0


def _leading_digit(distance: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    # whole units, minimum 1
    d = np.maximum(np.round(np.asarray(distance, dtype=np.float64)), 1.0)
    with np.errstate(all='ignore'):
        factor = 10.0 ** np.floor(np.log10(d))
        r = np.round(d / factor)
    return r, factor


def round_nice(distance: np.ndarray) -> np.ndarray:
    """
    Round a distance to the 1-2-5 preferred number sequence

    The leading digit ``r`` of the distance (after rounding to whole
    units, minimum 1) maps to 1 or 2 when ``r <= 2``, to 2 when
    ``2 < r < 5`` and to 5 otherwise. Monotonic non-decreasing and
    idempotent.

    A leading digit of exactly 5 is kept as 5. The classic "2 < r <= 5
    maps to 2" rule sends 500 to 200, so rounding twice would not give
    the same result; fixtures ported from that rule differ only there.

    Parameters
    ----------
    distance : float or np.ndarray
        Raw distance (any unit)

    Returns
    -------
    float or np.ndarray
        Rounded distance, one of {1, 2, 5} x 10^m

    Examples
    --------
    >>> round_nice(347.0)
    200.0
    >>> round_nice(780.0)
    500.0
    """
    r, factor = _leading_digit(distance)
    with np.errstate(all='ignore'):
        nice = np.where(r <= 2.0, r, np.where(r < 5.0, 2.0, 5.0)) * factor
    return unwrap_scalar(nice)


def round_nice_decadic(distance: np.ndarray) -> np.ndarray:
    """
    Round a distance to one significant digit

    Same as round_nice without the 1-2-5 restriction.

    Examples
    --------
    >>> round_nice_decadic(347.0)
    300.0
    """
    r, factor = _leading_digit(distance)
    with np.errstate(all='ignore'):
        nice = r * factor
    return unwrap_scalar(nice)


def format_meters(meters: float) -> str:
    """Label in metres up to 1000 m, whole kilometres above"""
    if meters > _METERS_PER_KILOMETER:
        return f"{meters / _METERS_PER_KILOMETER:.0f} km"
    return f"{meters:.0f} m"


def format_feet(feet: float) -> str:
    """Label in feet up to one mile, whole miles above"""
    if feet > _FEET_PER_MILE:
        return f"{feet / _FEET_PER_MILE:.0f} mi"
    return f"{feet:.0f} ft"


def meters_to_feet(meters: np.ndarray) -> np.ndarray:
    return unwrap_scalar(np.asarray(meters, dtype=np.float64) / _METERS_PER_FOOT)


def feet_to_meters(feet: np.ndarray) -> np.ndarray:
    return unwrap_scalar(np.asarray(feet, dtype=np.float64) * _METERS_PER_FOOT)


def tile_width_meters(lat: np.ndarray, zoom: int) -> np.ndarray:
    """
    Ground distance covered by one tile along a parallel

    Parameters
    ----------
    lat : float or np.ndarray
        Latitude (degrees)
    zoom : int
        Zoom level (>= 0)

    Returns
    -------
    float or np.ndarray
        Tile width (metres)
    """
    n = float(1 << _check_zoom(zoom))
    lat = np.asarray(lat, dtype=np.float64)
    width = EARTH_CIRCUMFERENCE * np.cos(np.radians(lat)) / n
    return unwrap_scalar(width)


def meters_per_pixel(lat: np.ndarray, zoom: int, tile_pixels: float = 256.0) -> np.ndarray:
    """Ground distance covered by one pixel of a ``tile_pixels`` wide tile"""
    return unwrap_scalar(np.asarray(tile_width_meters(lat, zoom)) / tile_pixels)


@dataclass(frozen=True)
class ScaleBar:
    """
    Metric and imperial scale bars

    Attributes
    ----------
    meters : float
        Length of the metric bar (metres)
    meters_pixels : float
        Length of the metric bar on screen (pixels)
    feet : float
        Length of the imperial bar (feet, whole miles above 5280 ft)
    feet_pixels : float
        Length of the imperial bar on screen (pixels)
    visible : bool
        False when the longer of the two bars (metric or imperial)
        exceeds 2.5 times the requested length
    """

    meters: float
    meters_pixels: float
    feet: float
    feet_pixels: float
    visible: bool

    @property
    def meters_label(self) -> str:
        return format_meters(self.meters)

    @property
    def feet_label(self) -> str:
        return format_feet(self.feet)

    @property
    def width_pixels(self) -> float:
        """Width of the longer bar"""
        return max(self.meters_pixels, self.feet_pixels)


def scale_bar(
    meters_per_px: float,
    target_pixels: float = 100.0,
    decadic: bool = False,
) -> ScaleBar:
    """
    Compute both bars of a scale legend

    Parameters
    ----------
    meters_per_px : float
        Ground resolution (metres per pixel)
    target_pixels : float, default 100
        Approximate length of the bars (pixels)
    decadic : bool, default False
        Use round_nice_decadic instead of round_nice

    Returns
    -------
    ScaleBar
    """
    if not meters_per_px > 0.0:
        raise InvalidArgumentError(f"Ground resolution must be positive: {meters_per_px!r}")
    rounder = round_nice_decadic if decadic else round_nice

    scale_m = float(rounder(meters_per_px * target_pixels))
    scale_m_px = float(np.round(scale_m / meters_per_px))

    feet = meters_to_feet(scale_m)
    if feet > _FEET_PER_MILE:
        scale_ft = float(rounder(feet / _FEET_PER_MILE)) * _FEET_PER_MILE
    else:
        scale_ft = float(rounder(feet))
    scale_ft_px = float(np.round(feet_to_meters(scale_ft) / meters_per_px))

    visible = max(scale_m_px, scale_ft_px) <= 2.5 * target_pixels
    return ScaleBar(scale_m, scale_m_px, scale_ft, scale_ft_px, visible)
