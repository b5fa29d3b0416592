"""Configuration helpers for the conversion form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .catalog import Category
from .errors import BadInputError
from .measurement import DEFAULT_FRACTION_DIGITS, UNIT_STYLES, MeasurementFormatter


@dataclass(frozen=True)
class ConversionSettings:
    default_category: Category
    unit_style: str
    max_fraction_digits: int

    def formatter(self) -> MeasurementFormatter:
        return MeasurementFormatter(
            self.unit_style,  # type: ignore[arg-type]
            max_fraction_digits=self.max_fraction_digits,
        )


def load_settings(raw: Mapping[str, object] | None) -> ConversionSettings:
    """Build settings from the ``plugins.conversion`` block of ``config.yml``.

    Missing or malformed values fall back to the built-in defaults.
    """

    raw = raw or {}

    try:
        default_category = Category.parse(raw.get("default_category", Category.LENGTH))  # type: ignore[arg-type]
    except BadInputError:
        default_category = Category.LENGTH

    unit_style = str(raw.get("unit_style", "medium")).strip().lower()
    if unit_style not in UNIT_STYLES:
        unit_style = "medium"

    try:
        max_fraction_digits = int(float(raw.get("max_fraction_digits", DEFAULT_FRACTION_DIGITS)))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        max_fraction_digits = DEFAULT_FRACTION_DIGITS
    max_fraction_digits = max(0, min(max_fraction_digits, 15))

    return ConversionSettings(
        default_category=default_category,
        unit_style=unit_style,
        max_fraction_digits=max_fraction_digits,
    )


__all__ = ["ConversionSettings", "load_settings"]
