"""Shared Pint registry helpers for the conversion form."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from pint import UnitRegistry

SECONDS_PER_DAY = 86_400

_CUSTOM_DEFINITIONS: tuple[str, ...] = (
    f"conversion_day = {SECONDS_PER_DAY} * second",
    "conversion_cup = 0.24 * liter",
)


def _build_registry() -> UnitRegistry:
    registry = UnitRegistry(autoconvert_offset_to_baseunit=True)
    for definition in _CUSTOM_DEFINITIONS:
        registry.define(definition)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` instance."""

    return _build_registry()


def iter_custom_units() -> Iterable[str]:
    """Yield the custom unit definitions injected into the registry."""

    return tuple(_CUSTOM_DEFINITIONS)


__all__ = ["SECONDS_PER_DAY", "get_registry", "iter_custom_units"]
