import pytest

from plugins.conversion.core import (
    BadInputError,
    Category,
    ConversionForm,
    InvalidUnitError,
    MeasurementFormatter,
    OutOfRangeError,
    load_settings,
)
from plugins.conversion.core.catalog import (
    CELSIUS,
    DAY,
    FAHRENHEIT,
    FOOT,
    KILOMETER,
    LITER,
    METER,
    MILLILITER,
    SECOND,
    UNIT_CATALOG,
)


def test_initial_state_is_meters_to_feet():
    form = ConversionForm.initial()
    assert form.state.category is Category.LENGTH
    assert form.state.source_unit == METER
    assert form.state.target_unit == FOOT
    assert form.state.input_value == 0.0
    assert form.formatted_output() == "0 Feet"


@pytest.mark.parametrize("category", list(UNIT_CATALOG))
def test_select_category_resets_units(category):
    form = ConversionForm.initial()
    form.select_category(category)
    units = UNIT_CATALOG[category]
    assert form.state.source_unit == units[0]
    assert form.state.target_unit == units[1]


def test_length_scenario():
    form = ConversionForm.initial()
    form.set_input(1.0)
    form.select_source_unit(KILOMETER)
    form.select_target_unit("meter")
    assert form.converted_value() == pytest.approx(1000.0)
    assert form.formatted_output() == "1,000 Meter"


def test_temperature_scenario():
    form = ConversionForm.initial()
    form.select_category("temp")
    form.select_source_unit(CELSIUS)
    form.select_target_unit(FAHRENHEIT)
    form.set_input(0.0)
    assert form.converted_value() == pytest.approx(32.0)
    assert form.formatted_output() == "32 Fahrenheit"


def test_time_scenario():
    form = ConversionForm.initial()
    form.select_category(Category.TIME)
    form.select_source_unit(DAY)
    form.select_target_unit(SECOND)
    form.set_input(1)
    assert form.converted_value() == pytest.approx(86_400.0)
    assert form.formatted_output() == "86,400 Seconds"


def test_switching_category_discards_previous_units():
    form = ConversionForm.initial()
    form.select_source_unit("mile")
    form.select_target_unit("yard")
    form.select_category(Category.VOLUME)
    assert form.state.source_unit == LITER
    assert form.state.target_unit == MILLILITER


def test_identity_conversion_returns_input():
    form = ConversionForm.initial()
    form.select_target_unit(METER)
    form.set_input(42.125)
    assert form.converted_value() == pytest.approx(42.125)


def test_foreign_unit_is_rejected_and_state_kept():
    form = ConversionForm.initial()
    with pytest.raises(InvalidUnitError):
        form.select_source_unit(CELSIUS)
    assert form.state.source_unit == METER


def test_set_input_rejects_non_finite_values():
    form = ConversionForm.initial()
    form.set_input(5)
    with pytest.raises(BadInputError):
        form.set_input(float("inf"))
    assert form.state.input_value == 5.0


@pytest.mark.parametrize("text", ["abc", "", "   ", None, "nan", "inf", "1,5", "1_000"])
def test_apply_input_text_keeps_previous_value(text):
    form = ConversionForm.initial()
    form.set_input(7.5)
    assert form.apply_input_text(text) is False
    assert form.state.input_value == 7.5


def test_apply_input_text_accepts_decimals():
    form = ConversionForm.initial()
    assert form.apply_input_text(" 12.5 ") is True
    assert form.state.input_value == 12.5


def test_from_fields_resets_units_on_category_change():
    form = ConversionForm.from_fields(
        {
            "category": "volume",
            "previous_category": "length",
            "source": "kilometer",
            "target": "meter",
            "value": "2",
        }
    )
    assert form.state.category is Category.VOLUME
    assert form.state.source_unit == LITER
    assert form.state.target_unit == MILLILITER
    assert form.converted_value() == pytest.approx(2000.0)


def test_from_fields_keeps_units_within_category():
    form = ConversionForm.from_fields(
        {
            "category": "time",
            "previous_category": "time",
            "source": "day",
            "target": "second",
            "value": "1",
        }
    )
    assert form.formatted_output() == "86,400 Seconds"


def test_from_fields_falls_back_for_unknown_values():
    form = ConversionForm.from_fields(
        {
            "category": "length",
            "previous_category": "length",
            "source": "cup",
            "target": "yard",
            "value": "oops",
        }
    )
    assert form.state.source_unit == METER
    assert form.state.target_unit.key == "yard"
    assert form.state.input_value == 0.0


def test_from_fields_without_data_uses_settings():
    settings = load_settings({"default_category": "temp", "unit_style": "short"})
    form = ConversionForm.from_fields({}, settings=settings)
    assert form.state.source_unit == CELSIUS
    assert form.state.target_unit == FAHRENHEIT
    assert form.formatted_output() == "32°F"


def test_options_and_snapshot():
    form = ConversionForm.initial(formatter=MeasurementFormatter(max_fraction_digits=2))
    form.set_input(1)
    assert [option["label"] for option in form.category_options()] == [
        "length",
        "temp",
        "time",
        "volume",
    ]
    assert [unit["label"] for unit in form.unit_options()] == ["m", "km", "ft", "yd", "mi"]
    snapshot = form.snapshot()
    assert snapshot["category"] == "length"
    assert snapshot["source_unit"] == "meter"
    assert snapshot["target_unit"] == "foot"
    assert snapshot["converted_value"] == pytest.approx(3.280839895)
    assert snapshot["formatted_output"] == "3.28 Feet"


def test_set_input_rejects_values_that_overflow_target_unit():
    form = ConversionForm.initial()
    form.select_source_unit(KILOMETER)
    form.select_target_unit(METER)
    form.set_input(3)
    with pytest.raises(OutOfRangeError):
        form.set_input(1e308)
    assert form.state.input_value == 3.0
    assert form.formatted_output() == "3,000 Meter"


def test_apply_input_text_keeps_value_when_result_overflows():
    form = ConversionForm.initial()
    form.select_source_unit(KILOMETER)
    form.select_target_unit(METER)
    form.set_input(2)
    assert form.apply_input_text("1e308") is False
    assert form.state.input_value == 2.0


def test_unit_change_resets_input_that_no_longer_fits():
    form = ConversionForm.initial()
    form.select_target_unit(KILOMETER)
    form.set_input(1e308)
    assert form.converted_value() == pytest.approx(1e305)
    form.select_target_unit(FOOT)
    assert form.state.input_value == 0.0
    assert form.formatted_output() == "0 Feet"


def test_from_fields_ignores_value_too_large_for_units():
    form = ConversionForm.from_fields(
        {
            "category": "length",
            "previous_category": "length",
            "source": "kilometer",
            "target": "meter",
            "value": "1e308",
        }
    )
    assert form.state.input_value == 0.0
    assert form.formatted_output() == "0 Meter"
