"""Measurement building, conversion and formatting backed by :mod:`pint`."""

from __future__ import annotations

import math
from typing import Literal

from pint import Quantity
from pint.errors import DimensionalityError, UndefinedUnitError

from .catalog import Unit
from .errors import (
    BadInputError,
    DimensionMismatchError,
    InvalidUnitError,
    OutOfRangeError,
)
from .registry import get_registry

UnitStyle = Literal["short", "medium"]
UNIT_STYLES: tuple[str, ...] = ("short", "medium")
DEFAULT_FRACTION_DIGITS = 3


def coerce_finite(value: float | int) -> float:
    """Return ``value`` as a float, rejecting NaN, infinities and non-numbers."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BadInputError("Value must be a number.")
    if math.isnan(value) or math.isinf(value):
        raise BadInputError("Value must be a finite number.")
    return float(value)


def measurement(value: float | int, unit: Unit) -> Quantity:
    """Build a quantity of ``value`` expressed in ``unit``."""

    registry = get_registry()
    try:
        return registry.Quantity(coerce_finite(value), unit.definition)
    except UndefinedUnitError as exc:
        raise InvalidUnitError(str(exc)) from exc


def convert(quantity: Quantity, unit: Unit) -> Quantity:
    """Convert ``quantity`` into ``unit``.

    Pint routes the conversion through the base unit, applying the offset of
    affine units such as temperatures. Results that overflow to a non-finite
    magnitude raise :class:`OutOfRangeError`.
    """

    try:
        converted = quantity.to(unit.definition)
    except UndefinedUnitError as exc:  # pragma: no cover - catalog units are defined
        raise InvalidUnitError(str(exc)) from exc
    except DimensionalityError as exc:
        raise DimensionMismatchError(str(exc)) from exc
    if not math.isfinite(float(converted.magnitude)):
        raise OutOfRangeError(
            f"{quantity.magnitude:g} cannot be expressed in {unit.name}."
        )
    return converted


def format_number(value: float, *, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
    """Format ``value`` with grouping and at most ``max_fraction_digits`` decimals."""

    if max_fraction_digits < 0:
        raise BadInputError("Fraction digits must be non-negative.")
    text = f"{value:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class MeasurementFormatter:
    """Render measurements for display.

    ``medium`` joins the number and the unit name with a space
    (``"1,000 Meter"``); ``short`` appends the bare symbol (``"1,000m"``).
    The unit given is always the one shown; no rescaling to a "natural" unit
    is attempted.
    """

    def __init__(
        self,
        unit_style: UnitStyle = "medium",
        *,
        max_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
    ) -> None:
        if unit_style not in UNIT_STYLES:
            raise BadInputError(f"Unit style must be one of {', '.join(UNIT_STYLES)}.")
        if max_fraction_digits < 0:
            raise BadInputError("Fraction digits must be non-negative.")
        self.unit_style = unit_style
        self.max_fraction_digits = max_fraction_digits

    def format(self, quantity: Quantity, unit: Unit) -> str:
        number = format_number(
            float(quantity.magnitude), max_fraction_digits=self.max_fraction_digits
        )
        if self.unit_style == "short":
            return f"{number}{unit.symbol}"
        return f"{number} {unit.name}"

    def unit_label(self, unit: Unit) -> str:
        """Return the label shown for ``unit`` in the unit selectors."""

        return unit.symbol


__all__ = [
    "UnitStyle",
    "UNIT_STYLES",
    "DEFAULT_FRACTION_DIGITS",
    "coerce_finite",
    "measurement",
    "convert",
    "format_number",
    "MeasurementFormatter",
]
