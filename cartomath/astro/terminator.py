"""
Sub-solar point and day/night terminator

The terminator is the great circle 90 degrees away from the sub-solar
point. It is traced by rotating the sub-solar point with a sweep angle
``phi``, the distance along the terminator from one of its equator
crossings.

References:
    L. Strous, "Position of the Sun",
        https://www.aa.quae.nl/en/antwoorden/zonpositie.html

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..errors import InvalidArgumentError
from ..settings import resolve_declination_method
from ..types import GeoCoordinate, unwrap_scalar
from .ephemeris import declination, hours_of_day, normalize180, sun_position_at

_DEG_TO_RAD = np.pi / 180.0
_RAD_TO_DEG = 180.0 / np.pi


def subsolar_point(date, method: Optional[str] = None) -> GeoCoordinate:
    """
    Point on Earth where the sun is at the zenith

    Parameters
    ----------
    date : datetime, np.datetime64, array-like of either
        UTC date(s)
    method : str, optional
        Declination source: 'ephemeris' (orbital elements) or 'fast'
        (closed form). Defaults to CARTOMATH_DECLINATION_METHOD.

    Returns
    -------
    GeoCoordinate
        Latitude equal to the solar declination and longitude
        ``180 - 15*hours`` reduced to [-180, 180]

    Notes
    -----
    The longitude ignores the equation of time, which shifts the true
    sub-solar meridian by up to about 4 degrees.
    """
    if resolve_declination_method(method) == 'fast':
        lat = declination(date)
    else:
        lat = sun_position_at(date).declination
    lon = normalize180(180.0 - 15.0 * np.asarray(hours_of_day(date)))
    return GeoCoordinate(lat, lon)


def terminator_point(b: np.ndarray, l: np.ndarray, phi: np.ndarray) -> GeoCoordinate:
    """
    Point on the terminator of a sub-solar point

    Parameters
    ----------
    b : float or np.ndarray
        Sub-solar latitude (degrees)
    l : float or np.ndarray
        Sub-solar longitude (degrees)
    phi : float or np.ndarray
        Distance along the terminator from its equator crossing at
        longitude ``l + 90`` (degrees)

    Returns
    -------
    GeoCoordinate
        Latitude and longitude (degrees) of the terminator point
    """
    b = np.asarray(b, dtype=np.float64) * _DEG_TO_RAD
    l = np.asarray(l, dtype=np.float64) * _DEG_TO_RAD
    phi = np.asarray(phi, dtype=np.float64) * _DEG_TO_RAD

    sin_b, cos_b = np.sin(b), np.cos(b)
    sin_l, cos_l = np.sin(l), np.cos(l)
    sin_phi, cos_phi = np.sin(phi), np.cos(phi)

    with np.errstate(invalid='ignore'):
        B = np.arcsin(cos_b * sin_phi)
        x = -cos_l * sin_b * sin_phi - sin_l * cos_phi
        y = -sin_l * sin_b * sin_phi + cos_l * cos_phi
        L = np.arctan2(y, x)

    return GeoCoordinate(unwrap_scalar(B * _RAD_TO_DEG), unwrap_scalar(L * _RAD_TO_DEG))


def terminator(date, phi: np.ndarray, method: Optional[str] = None) -> GeoCoordinate:
    """
    Point on the day/night terminator at a UTC date

    Parameters
    ----------
    date : datetime or np.datetime64
        UTC date
    phi : float or np.ndarray
        Sweep angle along the terminator (degrees); 0 and 180 are the
        equator crossings and 0-360 traces the closed curve
    method : str, optional
        Declination source, see subsolar_point

    Returns
    -------
    GeoCoordinate
    """
    sun = subsolar_point(date, method=method)
    return terminator_point(sun.latitude, sun.longitude, phi)


def terminator_curve(
    date,
    step: float = 0.5,
    method: Optional[str] = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample the whole terminator as a closed polyline

    Parameters
    ----------
    date : datetime or np.datetime64
        UTC date
    step : float, default 0.5
        Sweep increment (degrees)
    method : str, optional
        Declination source, see subsolar_point

    Returns
    -------
    lat, lon : np.ndarray
        Terminator vertices (degrees); the last vertex repeats the first
    """
    if not step > 0.0:
        raise InvalidArgumentError(f"Sweep step must be positive: {step!r}")
    phi = np.linspace(0.0, 360.0, int(np.ceil(360.0 / step)) + 1)
    point = terminator(date, phi, method=method)
    return point.latitude, point.longitude
