"""
cartomath.errors - Exception types

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

__all__ = [
    'CartomathError',
    'DMSFormatError',
    'InvalidArgumentError',
    'UnsupportedOperationError',
]


class CartomathError(Exception):
    """Base class for all cartomath errors."""


class InvalidArgumentError(CartomathError, ValueError):
    """An argument is outside the domain accepted by the operation."""


class DMSFormatError(CartomathError, ValueError):
    """Text could not be parsed as a degrees-minutes-seconds coordinate."""


class UnsupportedOperationError(CartomathError, NotImplementedError):
    """The operation is declared but has no implementation."""
