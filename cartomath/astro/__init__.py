"""
cartomath.astro - Solar ephemeris module

Provides functions for:
- Day numbers and orbital elements of the sun
- Solar right ascension and declination
- Sub-solar point and day/night terminator

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from .ephemeris import (
    argument_of_perihelion,
    day_number,
    day_of_year,
    declination,
    eccentric_anomaly,
    eccentric_anomaly_at,
    eccentricity,
    eccentricity_at,
    hours_of_day,
    mean_anomaly,
    mean_anomaly_at,
    normalize180,
    normalize360,
    obliquity_of_ecliptic,
    orbital_elements,
    right_ascension_hours,
    solar_hour_angle,
    sun_ecliptic,
    sun_position,
    sun_position_at,
    sun_position_for_day,
)
from .terminator import (
    subsolar_point,
    terminator,
    terminator_curve,
    terminator_point,
)

__all__ = [
    'argument_of_perihelion',
    'day_number',
    'day_of_year',
    'declination',
    'eccentric_anomaly',
    'eccentric_anomaly_at',
    'eccentricity',
    'eccentricity_at',
    'hours_of_day',
    'mean_anomaly',
    'mean_anomaly_at',
    'normalize180',
    'normalize360',
    'obliquity_of_ecliptic',
    'orbital_elements',
    'right_ascension_hours',
    'solar_hour_angle',
    'subsolar_point',
    'sun_ecliptic',
    'sun_position',
    'sun_position_at',
    'sun_position_for_day',
    'terminator',
    'terminator_curve',
    'terminator_point',
]
