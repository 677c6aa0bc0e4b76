"""
cartomath - Map projection and solar position math for tile-based maps

Stateless functions used by a map renderer: Web Mercator tile indices,
degrees-minutes-seconds labels, scale bar rounding and the day/night
terminator.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    from datetime import datetime, timezone
    import cartomath

    # Tiles covering a view at zoom 12
    tiles = list(cartomath.tiles_for_view(40.68, -74.03, 40.88, -73.90, 12))

    # Coordinate label
    cartomath.decimal_to_dms(38.8897, True, 0)   # '38°53′23″N'

    # Scale bar at the view's latitude
    bar = cartomath.scale_bar(cartomath.meters_per_pixel(40.7, 12))

    # Day/night boundary polyline
    lat, lon = cartomath.terminator_curve(datetime.now(timezone.utc))
"""

from . import astro
from . import dms
from . import projection
from . import scale
from . import settings
from .astro import (
    argument_of_perihelion,
    day_number,
    declination,
    eccentric_anomaly,
    eccentricity,
    mean_anomaly,
    normalize180,
    normalize360,
    obliquity_of_ecliptic,
    orbital_elements,
    solar_hour_angle,
    subsolar_point,
    sun_position,
    sun_position_at,
    terminator,
    terminator_curve,
)
from .dms import (
    decimal_to_dms,
    dms_to_decimal,
    format_coordinate,
    parse_dms,
)
from .errors import (
    CartomathError,
    DMSFormatError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from .projection import (
    MAX_MERCATOR_LATITUDE,
    clamp_latitude,
    lat_lon_to_tile,
    latitude_to_y,
    mercator_adjustment,
    tile_bounds,
    tile_range,
    tile_to_lat_lon,
    tiles_for_view,
    y_to_latitude,
    zoom_for_view,
)
from .scale import (
    ScaleBar,
    feet_to_meters,
    format_feet,
    format_meters,
    meters_per_pixel,
    meters_to_feet,
    round_nice,
    round_nice_decadic,
    scale_bar,
    tile_width_meters,
)
from .settings import (
    declination_method,
    get_settings,
    set_declination_method,
    set_dms_precision,
    show_settings,
)
from .types import (
    GeoCoordinate,
    OrbitalElements,
    SunPosition,
    TileIndex,
)

__version__ = '0.1.0'
__all__ = [
    'astro',
    'dms',
    'projection',
    'scale',
    'settings',
    # Types
    'GeoCoordinate',
    'OrbitalElements',
    'SunPosition',
    'TileIndex',
    # Errors
    'CartomathError',
    'DMSFormatError',
    'InvalidArgumentError',
    'UnsupportedOperationError',
    # Projection
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
    # DMS
    'decimal_to_dms',
    'dms_to_decimal',
    'format_coordinate',
    'parse_dms',
    # Scale
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
    # Solar ephemeris
    'argument_of_perihelion',
    'day_number',
    'declination',
    'eccentric_anomaly',
    'eccentricity',
    'mean_anomaly',
    'normalize180',
    'normalize360',
    'obliquity_of_ecliptic',
    'orbital_elements',
    'solar_hour_angle',
    'subsolar_point',
    'sun_position',
    'sun_position_at',
    'terminator',
    'terminator_curve',
    # Settings
    'declination_method',
    'get_settings',
    'set_declination_method',
    'set_dms_precision',
    'show_settings',
]
