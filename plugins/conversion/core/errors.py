"""Exception hierarchy for the conversion form core."""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for conversion failures."""


class InvalidUnitError(ConversionError):
    """Raised when a unit is unknown or not offered by the selected category."""


class BadInputError(ConversionError):
    """Raised when user supplied values or categories cannot be normalised."""


class DimensionMismatchError(ConversionError):
    """Raised when two units do not share the same dimensionality."""


class OutOfRangeError(ConversionError):
    """Raised when a converted value cannot be represented as a finite number."""


__all__ = [
    "ConversionError",
    "InvalidUnitError",
    "BadInputError",
    "DimensionMismatchError",
    "OutOfRangeError",
]
