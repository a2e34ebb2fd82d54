from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_password(value: Any) -> str:
    # Kept verbatim: leading/trailing spaces are part of the password.
    if not isinstance(value, str) or not value:
        raise ValidationError("password is required")
    return value


def optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
