"""State and operations of the single-screen conversion form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from common.forms import get_float, get_str
from common.logging import get_logger
from common.validation import ValidationError

from .catalog import (
    FOOT,
    METER,
    Category,
    Unit,
    default_units,
    find_unit,
    ordered_categories,
    units_for,
)
from .errors import BadInputError, InvalidUnitError, OutOfRangeError
from .measurement import MeasurementFormatter, coerce_finite, convert, measurement
from .settings import ConversionSettings, load_settings

logger = get_logger("form")


@dataclass(slots=True)
class ConversionState:
    """Selections and input held by the form.

    ``source_unit`` and ``target_unit`` always belong to the catalog entry of
    ``category``.
    """

    category: Category = Category.LENGTH
    source_unit: Unit = METER
    target_unit: Unit = FOOT
    input_value: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "source_unit": self.source_unit.key,
            "target_unit": self.target_unit.key,
            "input_value": self.input_value,
        }


@dataclass
class ConversionForm:
    """Controller that mutates :class:`ConversionState` and derives the output."""

    state: ConversionState = field(default_factory=ConversionState)
    formatter: MeasurementFormatter = field(default_factory=MeasurementFormatter)

    @classmethod
    def initial(
        cls,
        category: Category | str = Category.LENGTH,
        *,
        formatter: Optional[MeasurementFormatter] = None,
    ) -> "ConversionForm":
        """Return a fresh form showing ``category``.

        Length starts at meters to feet; other categories start on their first
        two catalog units.
        """

        form = cls(formatter=formatter or MeasurementFormatter())
        resolved = Category.parse(category)
        if resolved != form.state.category:
            form.select_category(resolved)
        return form

    @classmethod
    def from_settings(cls, settings: ConversionSettings) -> "ConversionForm":
        return cls.initial(settings.default_category, formatter=settings.formatter())

    @classmethod
    def from_fields(
        cls,
        fields: Mapping[str, Any] | Any,
        *,
        settings: Optional[ConversionSettings] = None,
    ) -> "ConversionForm":
        """Rebuild the form from submitted fields.

        ``previous_category`` carries the category the page was rendered with;
        when it differs from ``category`` the units are reset rather than read
        from the submitted ``source`` and ``target`` fields. Anything that does
        not fit the selected category falls back to its defaults.
        """

        settings = settings or load_settings(None)
        form = cls.from_settings(settings)

        category = form.state.category
        raw_category = get_str(fields, "category")
        if raw_category:
            try:
                category = Category.parse(raw_category)
            except BadInputError:
                logger.debug("Ignoring unknown category %r", raw_category)

        raw_previous = get_str(fields, "previous_category")
        try:
            previous = Category.parse(raw_previous) if raw_previous else category
        except BadInputError:
            previous = None

        if previous != category:
            form.select_category(category)
        else:
            if category != form.state.category:
                form.select_category(category)
            for key, select in (
                ("source", form.select_source_unit),
                ("target", form.select_target_unit),
            ):
                raw_unit = get_str(fields, key)
                if not raw_unit:
                    continue
                try:
                    select(raw_unit)
                except InvalidUnitError:
                    logger.debug("Ignoring %s unit %r for %s", key, raw_unit, category.value)

        form.apply_input_text(get_str(fields, "value"))
        return form

    # ---- Operations ------------------------------------------------------
    def select_category(self, category: Category | str) -> None:
        resolved = Category.parse(category)
        source, target = default_units(resolved)
        self.state.category = resolved
        self.state.source_unit = source
        self.state.target_unit = target
        self._reset_unconvertible_input()
        logger.debug(
            "Category set to %s; units reset to %s -> %s",
            resolved.value,
            source.key,
            target.key,
        )

    def select_source_unit(self, unit: Unit | str) -> None:
        self.state.source_unit = find_unit(self.state.category, unit)
        self._reset_unconvertible_input()

    def select_target_unit(self, unit: Unit | str) -> None:
        self.state.target_unit = find_unit(self.state.category, unit)
        self._reset_unconvertible_input()

    def set_input(self, value: float | int) -> None:
        """Set the input value.

        Raises :class:`OutOfRangeError` and keeps the current value when
        ``value`` would overflow in the selected target unit.
        """

        candidate = coerce_finite(value)
        convert(measurement(candidate, self.state.source_unit), self.state.target_unit)
        self.state.input_value = candidate

    def apply_input_text(self, text: Optional[str]) -> bool:
        """Apply keypad text to the input value.

        Returns ``False`` and keeps the current value when ``text`` is blank,
        not a finite decimal number, or too large for the selected units.
        """

        if text is None or not str(text).strip():
            return False
        try:
            value = get_float(
                {"value": text},
                "value",
                self.state.input_value,
                field_name="Value",
                finite=True,
            )
        except ValidationError:
            logger.debug("Rejected input %r; keeping %s", text, self.state.input_value)
            return False
        try:
            self.set_input(value)
        except OutOfRangeError:
            logger.debug("Input %r out of range; keeping %s", text, self.state.input_value)
            return False
        return True

    def _reset_unconvertible_input(self) -> None:
        try:
            convert(
                measurement(self.state.input_value, self.state.source_unit),
                self.state.target_unit,
            )
        except OutOfRangeError:
            logger.debug(
                "Input %s does not fit %s -> %s; reset to 0",
                self.state.input_value,
                self.state.source_unit.key,
                self.state.target_unit.key,
            )
            self.state.input_value = 0.0

    # ---- Derived values --------------------------------------------------
    def converted_value(self) -> float:
        quantity = measurement(self.state.input_value, self.state.source_unit)
        return float(convert(quantity, self.state.target_unit).magnitude)

    def formatted_output(self) -> str:
        quantity = measurement(self.state.input_value, self.state.source_unit)
        converted = convert(quantity, self.state.target_unit)
        return self.formatter.format(converted, self.state.target_unit)

    def unit_options(self) -> List[Dict[str, str]]:
        """Units offered by both selectors for the current category."""

        return [
            {**unit.to_dict(), "label": self.formatter.unit_label(unit)}
            for unit in units_for(self.state.category)
        ]

    def category_options(self) -> List[Dict[str, str]]:
        return [
            {"value": category.value, "label": category.label}
            for category in ordered_categories()
        ]

    def snapshot(self) -> Dict[str, Any]:
        return {
            **self.state.to_dict(),
            "converted_value": self.converted_value(),
            "formatted_output": self.formatted_output(),
        }


__all__ = ["ConversionState", "ConversionForm"]
