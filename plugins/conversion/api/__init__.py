"""Conversion form API with standardized responses."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request
from pydantic import StrictFloat, StrictInt, StrictStr

from common.errors import ValidationAppError
from common.forms import get_float
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    BadInputError,
    Category,
    ConversionForm,
    ConversionSettings,
    DimensionMismatchError,
    InvalidUnitError,
    OutOfRangeError,
    list_categories,
    list_units,
    load_settings,
    ordered_categories,
)


class ConvertPayload(SchemaModel):
    category: str
    source_unit: str
    target_unit: str
    value: StrictFloat | StrictInt | StrictStr = 0.0


class SelectCategoryPayload(SchemaModel):
    category: str
    value: StrictFloat | StrictInt | StrictStr | None = None


api_bp = Blueprint("conversion_api", __name__, url_prefix="/api/conversion")


def _settings() -> ConversionSettings:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("conversion", {})
    return load_settings(settings)


def _out_of_range(exc: OutOfRangeError) -> Response:
    return fail(ValidationAppError(message=str(exc), code="conversion.out_of_range"))


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="conversion.invalid_request",
            details=getattr(exc, "details", None),
        )
    )


def _apply_value(form: ConversionForm, value: float | int | str | None) -> None:
    if value is None:
        return
    if isinstance(value, str):
        value = get_float({"value": value}, "value", 0.0, field_name="Value", finite=True)
    form.set_input(value)


@api_bp.get("/categories")
def categories() -> Response:
    payload = {category.value: list_units(category) for category in ordered_categories()}
    return ok({"categories": list_categories(), "units": payload})


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = list_units(category)
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_category"))
    return ok({"category": Category.parse(category).value, "units": units})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)

    form = ConversionForm.from_settings(_settings())
    try:
        form.select_category(payload.category)
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_category"))
    try:
        form.select_source_unit(payload.source_unit)
        form.select_target_unit(payload.target_unit)
    except InvalidUnitError as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_unit"))
    try:
        _apply_value(form, payload.value)
    except OutOfRangeError as exc:
        return _out_of_range(exc)
    except (ValidationError, BadInputError) as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_value"))

    try:
        result = form.snapshot()
    except DimensionMismatchError as exc:  # pragma: no cover - units share a category
        return fail(
            ValidationAppError(
                message=str(exc), code="conversion.dimension_mismatch", status_code=422
            )
        )
    return ok(result)


@api_bp.post("/select_category")
def select_category_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(SelectCategoryPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)

    form = ConversionForm.from_settings(_settings())
    try:
        form.select_category(payload.category)
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_category"))
    try:
        _apply_value(form, payload.value)
    except OutOfRangeError as exc:
        return _out_of_range(exc)
    except (ValidationError, BadInputError) as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_value"))
    return ok({**form.snapshot(), "units": form.unit_options()})


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
    "select_category_endpoint",
]
