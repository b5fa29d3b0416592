"""Facade for the conversion form core."""

from __future__ import annotations

from typing import Dict, List

from .catalog import (
    UNIT_CATALOG,
    Category,
    Unit,
    default_units,
    find_unit,
    ordered_categories,
    units_for,
)
from .errors import (
    BadInputError,
    ConversionError,
    DimensionMismatchError,
    InvalidUnitError,
    OutOfRangeError,
)
from .form import ConversionForm, ConversionState
from .measurement import MeasurementFormatter, convert, format_number, measurement
from .settings import ConversionSettings, load_settings


def list_categories() -> List[Dict[str, str]]:
    """Return the categories in selector order."""

    return [
        {"value": category.value, "label": category.label}
        for category in ordered_categories()
    ]


def list_units(category: Category | str) -> List[Dict[str, str]]:
    """Return metadata for the units offered by ``category``."""

    return [unit.to_dict() for unit in units_for(category)]


__all__ = [
    "BadInputError",
    "ConversionError",
    "DimensionMismatchError",
    "InvalidUnitError",
    "OutOfRangeError",
    "Category",
    "Unit",
    "UNIT_CATALOG",
    "ConversionForm",
    "ConversionState",
    "ConversionSettings",
    "MeasurementFormatter",
    "convert",
    "default_units",
    "find_unit",
    "format_number",
    "list_categories",
    "list_units",
    "load_settings",
    "measurement",
    "ordered_categories",
    "units_for",
]
