"""Lenient conversions for untyped spreadsheet cells and JSON payloads."""
from __future__ import annotations

from typing import Any, Optional


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value or "").strip().lower()
    return text in {"1", "true", "yes", "on"}


def as_int(value: Any) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def to_cell_bool(value: bool) -> str:
    return "true" if value else "false"


def cell(row: list, index: int) -> str:
    """Positional cell access; the Sheets API trims trailing empty cells."""
    if index < len(row) and row[index] is not None:
        return str(row[index])
    return ""
