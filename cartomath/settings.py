"""
cartomath.settings - Process-wide defaults

Defaults are read from environment variables at import time and can be
changed at runtime:

- CARTOMATH_DECLINATION_METHOD: 'ephemeris' (default) or 'fast'
- CARTOMATH_DMS_PRECISION: decimal places of DMS seconds (default 0)

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import numbers
import os
import threading
import warnings
from contextlib import contextmanager

from .errors import InvalidArgumentError

__all__ = [
    'DECLINATION_METHODS',
    'declination_method',
    'get_declination_method',
    'get_dms_precision',
    'get_settings',
    'reset_settings',
    'resolve_declination_method',
    'set_declination_method',
    'set_dms_precision',
    'show_settings',
    'validate_dms_precision',
]

DECLINATION_METHODS = ('ephemeris', 'fast')
_DEFAULT_DECLINATION_METHOD = 'ephemeris'
_DEFAULT_DMS_PRECISION = 0


def _check_method(method: str) -> str:
    method = str(method).strip().lower()
    if method not in DECLINATION_METHODS:
        raise InvalidArgumentError(
            f"Unknown declination method: {method}. "
            f"Supported: {list(DECLINATION_METHODS)}"
        )
    return method


def validate_dms_precision(places) -> int:
    """Number of DMS seconds decimal places as a non-negative int."""
    if isinstance(places, str) and places.strip().isdigit():
        return int(places)
    if isinstance(places, numbers.Integral) and not isinstance(places, bool) and places >= 0:
        return int(places)
    raise InvalidArgumentError(f"DMS precision must be a non-negative integer: {places!r}")


# =============================================================================
# Global State
# =============================================================================

class _SettingsState:
    """Thread-safe settings manager."""

    def __init__(self):
        self._lock = threading.Lock()
        self._declination_method = _DEFAULT_DECLINATION_METHOD
        self._dms_precision = _DEFAULT_DMS_PRECISION

        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        # CARTOMATH_DECLINATION_METHOD
        method = os.environ.get('CARTOMATH_DECLINATION_METHOD', '')
        if method:
            try:
                self._declination_method = _check_method(method)
            except InvalidArgumentError:
                warnings.warn(
                    f"Ignoring CARTOMATH_DECLINATION_METHOD={method!r}. "
                    f"Using '{_DEFAULT_DECLINATION_METHOD}' instead.",
                    RuntimeWarning,
                    stacklevel=2
                )

        # CARTOMATH_DMS_PRECISION
        precision = os.environ.get('CARTOMATH_DMS_PRECISION', '').strip()
        if precision:
            try:
                self._dms_precision = validate_dms_precision(precision)
            except InvalidArgumentError:
                warnings.warn(
                    f"Ignoring CARTOMATH_DMS_PRECISION={precision!r}. "
                    f"Using {_DEFAULT_DMS_PRECISION} instead.",
                    RuntimeWarning,
                    stacklevel=2
                )

    @property
    def declination_method(self) -> str:
        with self._lock:
            return self._declination_method

    @declination_method.setter
    def declination_method(self, value: str):
        with self._lock:
            self._declination_method = value

    @property
    def dms_precision(self) -> int:
        with self._lock:
            return self._dms_precision

    @dms_precision.setter
    def dms_precision(self, value: int):
        with self._lock:
            self._dms_precision = value


_state = _SettingsState()


# =============================================================================
# Accessors
# =============================================================================

def get_declination_method() -> str:
    """Default declination method for sub-solar point and terminator."""
    return _state.declination_method


def set_declination_method(method: str) -> None:
    """Set the default declination method.

    Parameters
    ----------
    method : str
        'ephemeris' (orbital elements pipeline) or 'fast' (closed form)
    """
    _state.declination_method = _check_method(method)


def resolve_declination_method(method=None) -> str:
    """Validate ``method``, falling back to the configured default."""
    if method is None:
        return _state.declination_method
    return _check_method(method)


def get_dms_precision() -> int:
    """Default number of decimal places for DMS seconds."""
    return _state.dms_precision


def set_dms_precision(places: int) -> None:
    """Set the default number of decimal places for DMS seconds."""
    _state.dms_precision = validate_dms_precision(places)


@contextmanager
def declination_method(method: str):
    """Context manager to temporarily switch the declination method.

    Example
    -------
    >>> with declination_method('fast'):
    ...     point = subsolar_point(now)
    """
    method = _check_method(method)
    prev = _state.declination_method
    _state.declination_method = method
    try:
        yield
    finally:
        _state.declination_method = prev


def reset_settings() -> None:
    """Restore defaults and re-read the environment."""
    global _state
    _state = _SettingsState()


# =============================================================================
# Status Functions
# =============================================================================

def get_settings() -> dict:
    """Current settings as a dictionary."""
    return {
        'declination_method': _state.declination_method,
        'dms_precision': _state.dms_precision,
    }


def show_settings() -> None:
    """Print current settings to stdout."""
    for name, value in get_settings().items():
        print(f"{name:<20} {value}")
