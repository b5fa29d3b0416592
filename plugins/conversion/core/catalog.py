"""Categories and the units each one offers in the form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Tuple

from .errors import BadInputError, InvalidUnitError


class Category(str, Enum):
    """Families of mutually convertible units.

    Members compare by their string value, so ``sorted(Category)`` yields the
    display order of the category selector.
    """

    LENGTH = "length"
    TEMPERATURE = "temperature"
    TIME = "time"
    VOLUME = "volume"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """Resolve a category from a member, its value or its short label."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text in (member.value, member.label):
                    return member
        raise BadInputError(f"Unknown category '{value}'.")


_CATEGORY_LABELS: Dict[Category, str] = {
    Category.LENGTH: "length",
    Category.TEMPERATURE: "temp",
    Category.TIME: "time",
    Category.VOLUME: "volume",
}


@dataclass(frozen=True, slots=True)
class Unit:
    """A unit offered by the form.

    ``definition`` is the Pint expression used to build measurements; the
    conversion coefficients and offsets live in the registry.
    """

    key: str
    symbol: str
    name: str
    definition: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "symbol": self.symbol, "name": self.name}


METER = Unit("meter", "m", "Meter", "meter")
KILOMETER = Unit("kilometer", "km", "Kilometer", "kilometer")
FOOT = Unit("foot", "ft", "Feet", "foot")
YARD = Unit("yard", "yd", "Yards", "yard")
MILE = Unit("mile", "mi", "Miles", "mile")

CELSIUS = Unit("celsius", "°C", "Celsius", "degree_Celsius")
FAHRENHEIT = Unit("fahrenheit", "°F", "Fahrenheit", "degree_Fahrenheit")
KELVIN = Unit("kelvin", "K", "Kelvin", "kelvin")

LITER = Unit("liter", "L", "Liters", "liter")
MILLILITER = Unit("milliliter", "mL", "Milliliters", "milliliter")
CUP = Unit("cup", "cup", "Cups", "conversion_cup")
PINT = Unit("pint", "pt", "Pints", "pint")
GALLON = Unit("gallon", "gal", "Gallons", "gallon")

SECOND = Unit("second", "s", "Seconds", "second")
MINUTE = Unit("minute", "min", "Minutes", "minute")
HOUR = Unit("hour", "hr", "Hours", "hour")
DAY = Unit("day", "days", "Days", "conversion_day")


UNIT_CATALOG: Mapping[Category, Tuple[Unit, ...]] = {
    Category.LENGTH: (METER, KILOMETER, FOOT, YARD, MILE),
    Category.TEMPERATURE: (CELSIUS, FAHRENHEIT, KELVIN),
    Category.VOLUME: (LITER, MILLILITER, CUP, PINT, GALLON),
    Category.TIME: (SECOND, MINUTE, HOUR, DAY),
}


def ordered_categories() -> List[Category]:
    """Return the categories in selector order."""

    return sorted(UNIT_CATALOG)


def units_for(category: Category | str) -> Tuple[Unit, ...]:
    return UNIT_CATALOG[Category.parse(category)]


def default_units(category: Category | str) -> Tuple[Unit, Unit]:
    """Return the source/target pair selected after switching to ``category``."""

    units = units_for(category)
    return units[0], units[1]


def find_unit(category: Category | str, unit: Unit | str) -> Unit:
    """Return the catalog member matching ``unit`` within ``category``.

    ``unit`` may be a :class:`Unit`, its key or its symbol.
    """

    units = units_for(category)
    if isinstance(unit, Unit):
        if unit in units:
            return unit
    elif isinstance(unit, str):
        text = unit.strip()
        for candidate in units:
            if text in (candidate.key, candidate.symbol):
                return candidate
    raise InvalidUnitError(
        f"Unit '{getattr(unit, 'key', unit)}' is not available for "
        f"category '{Category.parse(category).value}'."
    )


__all__ = [
    "Category",
    "Unit",
    "UNIT_CATALOG",
    "ordered_categories",
    "units_for",
    "default_units",
    "find_unit",
    "METER",
    "KILOMETER",
    "FOOT",
    "YARD",
    "MILE",
    "CELSIUS",
    "FAHRENHEIT",
    "KELVIN",
    "LITER",
    "MILLILITER",
    "CUP",
    "PINT",
    "GALLON",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
]
