"""Form value parsing helpers shared across plugins."""

from __future__ import annotations

import math
from typing import Mapping, Any

from .validation import ValidationError


FormDataLike = Mapping[str, Any] | Any


def _lookup(data: FormDataLike, key: str) -> Any:
    if data is None:
        return None
    getter = getattr(data, "get", None)
    if callable(getter):
        return getter(key)
    return data[key] if isinstance(data, Mapping) and key in data else None


def get_float(
    data: FormDataLike,
    key: str,
    default: float,
    *,
    field_name: str | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
    finite: bool = False,
) -> float:
    """Extract a float from *data* with validation.

    Missing or blank values fall back to ``default``. ``minimum`` and
    ``maximum`` bounds are optional and inclusive. With ``finite`` set, NaN
    and infinities are rejected as well. Digit separators (``1_000``) are not
    accepted in text values.
    """

    field_label = field_name or key
    raw = _lookup(data, key)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        value = default
    elif isinstance(raw, str) and "_" in raw:
        raise ValidationError(f"Invalid value for {field_label}")
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid value for {field_label}") from exc

    if finite and not math.isfinite(value):
        raise ValidationError(f"{field_label} must be a finite number")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{field_label} must be ≥ {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field_label} must be ≤ {maximum}")

    return value


def get_str(data: FormDataLike, key: str, default: str = "") -> str:
    """Extract a stripped string from *data*, falling back to ``default``."""

    raw = _lookup(data, key)
    if raw is None:
        return default
    text = str(raw).strip()
    return text or default


__all__ = ["get_float", "get_str"]
