from __future__ import annotations

import re
from typing import Any, Mapping

from ..core.exceptions import ValidationError

HHMM_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(payload: Mapping[str, Any], *names: str) -> None:
    for name in names:
        value = payload.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError("Missing required fields")


def require_hhmm(*values: str) -> None:
    for value in values:
        if not isinstance(value, str) or not HHMM_RE.match(value):
            raise ValidationError("Invalid time format. Use HH:MM format")


def require_day_of_week(value: Any) -> int:
    try:
        day = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Day of week must be between 0 and 6")
    if day < 0 or day > 6:
        raise ValidationError("Day of week must be between 0 and 6")
    return day


def require_enum(enum_cls, value: Any, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {field_name}. Expected one of: {allowed}")
