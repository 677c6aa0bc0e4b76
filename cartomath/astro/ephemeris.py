"""
Low-precision solar ephemeris

Computes the position of the sun from a handful of orbital elements,
following Paul Schlyter's "How to compute planetary positions". All
functions operate on a continuous day number ``d`` counted from
1999-12-31T00:00 UTC and accept scalars or NumPy arrays. The ``*_at``
variants take calendar dates and only convert them to a day number.

Accuracy is on the order of one arcminute: the eccentric anomaly is
obtained with a single first-order correction rather than by solving
Kepler's equation iteratively. This is sufficient for map overlays, not
for precise ephemerides.

References:
    P. Schlyter, "How to compute planetary positions",
        http://www.stjarnhimlen.se/comp/ppcomp.html
    P. Schlyter, "Computing planetary positions - a tutorial with
        worked examples", http://www.stjarnhimlen.se/comp/tutorial.html
    L. Strous, "Position of the Sun",
        https://www.aa.quae.nl/en/reken/zonpositie.html

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from datetime import datetime, timezone

import numpy as np

from ..errors import UnsupportedOperationError
from ..types import OrbitalElements, SunPosition, unwrap_scalar

# Constants
_DAY_NUMBER_OFFSET = 730530  # Calendar formula value of 1999-12-31
_DAY_MICROSECONDS = 86400.0e6  # Microseconds per day
_DEG_TO_RAD = np.pi / 180.0
_RAD_TO_DEG = 180.0 / np.pi


# ============================================================
# Angle normalization
# ============================================================

def normalize360(x: np.ndarray) -> np.ndarray:
    """
    Reduce an angle to [0, 360)

    Parameters
    ----------
    x : float or np.ndarray
        Angle (degrees)

    Returns
    -------
    float or np.ndarray
        x - 360*floor(x/360)
    """
    x = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid='ignore'):
        return unwrap_scalar(x - 360.0 * np.floor(x / 360.0))


def normalize180(x: np.ndarray) -> np.ndarray:
    """
    Reduce an angle to [-180, 180]

    Equivalent to adding or subtracting 360 until the angle is within
    range, so both -180 and 180 are left unchanged.
    """
    x = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid='ignore'):
        y = np.where(
            x > 180.0,
            x - 360.0 * np.ceil((x - 180.0) / 360.0),
            np.where(x < -180.0, x - 360.0 * np.floor((x + 180.0) / 360.0), x),
        )
    return unwrap_scalar(y)


# ============================================================
# Calendar conversion
# ============================================================

def _as_datetime64(date) -> np.ndarray:
    """Calendar date(s) as UTC datetime64[us]; naive datetimes are UTC"""
    if isinstance(date, datetime):
        if date.tzinfo is not None:
            date = date.astimezone(timezone.utc).replace(tzinfo=None)
        return np.datetime64(date, 'us')
    if isinstance(date, (list, tuple)):
        return np.array([_as_datetime64(t) for t in date], dtype='datetime64[us]')
    return np.asarray(date, dtype='datetime64[us]')


def _split_nat(t: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Dates with NaT replaced by the Unix epoch, and the NaT mask"""
    nat = np.isnat(t)
    return np.where(nat, np.datetime64(0, 'us'), t), nat


def _calendar(t: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Year, month, day of month and fraction of day of datetime64 values"""
    days = t.astype('datetime64[D]')
    months = t.astype('datetime64[M]')
    year = t.astype('datetime64[Y]').astype(np.int64) + 1970
    month = months.astype(np.int64) % 12 + 1
    day = (days - months.astype('datetime64[D]')).astype(np.int64) + 1
    fraction = (t - days).astype('timedelta64[us]').astype(np.float64) / _DAY_MICROSECONDS
    return year, month, day, fraction


def day_number(date) -> np.ndarray:
    """
    Compute the day number of a UTC date

    Uses the integer-division calendar formula
    ``367*y - 7*(y + (m+9)//12)//4 + 275*m//9 + D - 730530``
    plus the fraction of the day, which gives 0 at 1999-12-31T00:00.
    The formula is valid from March 1900 to February 2100.

    Parameters
    ----------
    date : datetime, np.datetime64, array-like of either
        UTC date(s); naive datetimes are taken as UTC

    Returns
    -------
    float or np.ndarray
        Day number (days); NaN for NaT

    Examples
    --------
    >>> day_number(datetime(1990, 4, 19))
    -3543.0
    """
    t, nat = _split_nat(_as_datetime64(date))
    y, m, D, fraction = _calendar(t)
    d = 367 * y - 7 * (y + (m + 9) // 12) // 4 + 275 * m // 9 + D - _DAY_NUMBER_OFFSET
    return unwrap_scalar(np.where(nat, np.nan, d + fraction))


def day_of_year(date) -> np.ndarray:
    """Day of the year (1 on January 1st) plus the fraction of the day"""
    t, nat = _split_nat(_as_datetime64(date))
    days = t.astype('datetime64[D]')
    doy = (days - t.astype('datetime64[Y]').astype('datetime64[D]')).astype(np.int64) + 1
    fraction = (t - days).astype('timedelta64[us]').astype(np.float64) / _DAY_MICROSECONDS
    return unwrap_scalar(np.where(nat, np.nan, doy + fraction))


def hours_of_day(date) -> np.ndarray:
    """UTC time of day (hours)"""
    t, nat = _split_nat(_as_datetime64(date))
    us = (t - t.astype('datetime64[D]')).astype('timedelta64[us]').astype(np.float64)
    return unwrap_scalar(np.where(nat, np.nan, us / 3600.0e6))


# ============================================================
# Orbital elements
# ============================================================

def mean_anomaly(d: np.ndarray) -> np.ndarray:
    """Mean anomaly of the sun (degrees, 0-360)"""
    d = np.asarray(d, dtype=np.float64)
    return normalize360(356.0470 + 0.9856002585 * d)


def eccentricity(d: np.ndarray) -> np.ndarray:
    """Eccentricity of Earth's orbit"""
    d = np.asarray(d, dtype=np.float64)
    return unwrap_scalar(0.016709 - 1.151e-9 * d)


def argument_of_perihelion(d: np.ndarray) -> np.ndarray:
    """Argument of perihelion of the sun (degrees)"""
    d = np.asarray(d, dtype=np.float64)
    return unwrap_scalar(282.9404 + 4.70935e-5 * d)


def obliquity_of_ecliptic(d: np.ndarray) -> np.ndarray:
    """Obliquity of the ecliptic (degrees)"""
    d = np.asarray(d, dtype=np.float64)
    return unwrap_scalar(23.4393 - 3.563e-7 * d)


def orbital_elements(d: np.ndarray) -> OrbitalElements:
    """All orbital elements for a day number"""
    return OrbitalElements(
        mean_anomaly=mean_anomaly(d),
        eccentricity=eccentricity(d),
        argument_of_perihelion=argument_of_perihelion(d),
        obliquity_of_ecliptic=obliquity_of_ecliptic(d),
    )


def eccentric_anomaly(M: np.ndarray, e: np.ndarray) -> np.ndarray:
    """
    Eccentric anomaly from mean anomaly and eccentricity

    Single first-order step ``E = M + e*(180/pi)*sin(M)*(1 + e*cos(M))``.
    Good to about one arcminute for Earth's small eccentricity.

    Parameters
    ----------
    M : float or np.ndarray
        Mean anomaly (degrees)
    e : float or np.ndarray
        Eccentricity

    Returns
    -------
    float or np.ndarray
        Eccentric anomaly (degrees)
    """
    M = np.asarray(M, dtype=np.float64)
    e = np.asarray(e, dtype=np.float64)
    M_rad = M * _DEG_TO_RAD
    with np.errstate(invalid='ignore'):
        E = M + e * _RAD_TO_DEG * np.sin(M_rad) * (1.0 + e * np.cos(M_rad))
    return unwrap_scalar(E)


def sun_ecliptic(
    M: np.ndarray,
    e: np.ndarray,
    w: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Ecliptic longitude and distance of the sun

    Parameters
    ----------
    M : float or np.ndarray
        Mean anomaly (degrees)
    e : float or np.ndarray
        Eccentricity
    w : float or np.ndarray
        Argument of perihelion (degrees)

    Returns
    -------
    longitude : float or np.ndarray
        Ecliptic longitude (degrees, 0-360)
    distance : float or np.ndarray
        Distance (astronomical units)
    """
    e = np.asarray(e, dtype=np.float64)
    E_rad = np.asarray(eccentric_anomaly(M, e)) * _DEG_TO_RAD

    with np.errstate(invalid='ignore'):
        # position in the orbital plane
        xv = np.cos(E_rad) - e
        yv = np.sqrt(1.0 - e * e) * np.sin(E_rad)

        # true anomaly and distance
        v = np.arctan2(yv, xv) * _RAD_TO_DEG
        r = np.hypot(xv, yv)

    return normalize360(v + np.asarray(w, dtype=np.float64)), unwrap_scalar(r)


def sun_position(
    M: np.ndarray,
    e: np.ndarray,
    w: np.ndarray,
    obliquity: np.ndarray,
) -> SunPosition:
    """
    Right ascension and declination of the sun

    Parameters
    ----------
    M : float or np.ndarray
        Mean anomaly (degrees)
    e : float or np.ndarray
        Eccentricity
    w : float or np.ndarray
        Argument of perihelion (degrees)
    obliquity : float or np.ndarray
        Obliquity of the ecliptic (degrees)

    Returns
    -------
    SunPosition
        Right ascension (degrees, 0-360) and declination (degrees)

    Examples
    --------
    >>> d = day_number(datetime(1990, 4, 19))
    >>> el = orbital_elements(d)
    >>> pos = sun_position(el.mean_anomaly, el.eccentricity,
    ...                    el.argument_of_perihelion, el.obliquity_of_ecliptic)
    >>> round(pos.right_ascension, 3), round(pos.declination, 4)
    (26.658, 11.0084)
    """
    longitude, r = sun_ecliptic(M, e, w)
    lon_rad = np.asarray(longitude) * _DEG_TO_RAD
    ecl_rad = np.asarray(obliquity, dtype=np.float64) * _DEG_TO_RAD

    with np.errstate(invalid='ignore'):
        # ecliptic rectangular coordinates
        xs = r * np.cos(lon_rad)
        ys = r * np.sin(lon_rad)

        # rotate about the X-axis by the obliquity
        xe = xs
        ye = ys * np.cos(ecl_rad)
        ze = ys * np.sin(ecl_rad)

        ra = np.arctan2(ye, xe) * _RAD_TO_DEG
        dec = np.arctan2(ze, np.hypot(xe, ye)) * _RAD_TO_DEG

    return SunPosition(normalize360(ra), unwrap_scalar(dec))


def sun_position_for_day(d: np.ndarray) -> SunPosition:
    """Sun position for a day number"""
    el = orbital_elements(d)
    return sun_position(
        el.mean_anomaly, el.eccentricity,
        el.argument_of_perihelion, el.obliquity_of_ecliptic,
    )


def right_ascension_hours(ra: np.ndarray) -> np.ndarray:
    """Right ascension (degrees) as hours, 0-24"""
    return unwrap_scalar(np.asarray(normalize360(ra)) / 15.0)


# ============================================================
# Calendar date wrappers
# ============================================================

def mean_anomaly_at(date) -> np.ndarray:
    return mean_anomaly(day_number(date))


def eccentricity_at(date) -> np.ndarray:
    return eccentricity(day_number(date))


def eccentric_anomaly_at(date) -> np.ndarray:
    d = day_number(date)
    return eccentric_anomaly(mean_anomaly(d), eccentricity(d))


def sun_position_at(date) -> SunPosition:
    """Sun position for UTC date(s)"""
    return sun_position_for_day(day_number(date))


# ============================================================
# Closed-form declination
# ============================================================

def declination(date) -> np.ndarray:
    """
    Approximate declination of the sun

    Closed form ``22.8*sin(L) + 0.6*sin(L)**3`` where L is the ecliptic
    longitude derived from a simplified mean anomaly. Cheaper than
    sun_position_at and independent of it; the two agree to a few
    hundredths of a degree around the solstices and equinoxes of the
    current epoch.

    Parameters
    ----------
    date : datetime, np.datetime64, array-like of either
        UTC date(s)

    Returns
    -------
    float or np.ndarray
        Declination (degrees)
    """
    n = np.asarray(day_of_year(date), dtype=np.float64)
    # simplified mean anomaly and equation of centre
    M = -3.6 + 0.9856 * n
    nu = M + 1.9 * np.sin(M * _DEG_TO_RAD)
    # ecliptic longitude of the sun: perihelion longitude of Earth plus 180
    lam = nu + 282.9
    sin_lam = np.sin(lam * _DEG_TO_RAD)
    return unwrap_scalar(22.8 * sin_lam + 0.6 * sin_lam ** 3)


def solar_hour_angle(date, lon):
    """Hour angle of the sun at a longitude (not implemented)"""
    raise UnsupportedOperationError("Solar hour angle is not implemented")
