from __future__ import annotations

import math
from typing import Any, Mapping

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_iso_date(value: Any, field_name: str):
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def require_date_order(start: Any, end: Any, *, start_field: str, end_field: str) -> None:
    start_date = require_iso_date(start, start_field)
    end_date = require_iso_date(end, end_field)
    if end_date < start_date:
        raise ValidationError(f"{end_field} must be on or after {start_field}")


def require_fields(fields: Mapping[str, Any], names: tuple[str, ...]) -> None:
    """Fail on the first missing field, in declaration order."""
    for name in names:
        require_non_empty(fields.get(name), name)
