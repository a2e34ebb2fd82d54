"""Positional row <-> entity conversion for the three spreadsheet tabs."""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from werkzeug.security import generate_password_hash

from ..attendance.model import AttendanceRecord, Location
from ..common.parsing import as_bool, as_int, cell, to_cell_bool
from ..core.constants import LEGACY_HASH_METHOD
from ..leave.model import LeaveRequest
from ..users.model import Employee

logger = logging.getLogger(__name__)

# Prefixes produced by werkzeug.security.generate_password_hash.
HASH_METHODS = ("pbkdf2:", "scrypt:")


def looks_hashed(password: str) -> bool:
    return password.startswith(HASH_METHODS) and "$" in password


def coerce_location(raw: Any) -> Optional[Location]:
    """Build a Location from ``{"lat", "lng"}`` (or latitude/longitude).

    Empty values give None; anything else that is not a coordinate pair raises
    ValueError.
    """
    if raw is None or raw == {} or raw == "":
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"location must be an object, got {type(raw).__name__}")
    lat = raw.get("lat", raw.get("latitude"))
    lng = raw.get("lng", raw.get("longitude"))
    if lat is None and lng is None:
        return None
    if isinstance(lat, bool) or isinstance(lng, bool):
        raise ValueError("coordinates must be numbers")
    try:
        return Location(lat=float(lat), lng=float(lng))
    except (TypeError, ValueError):
        raise ValueError("coordinates must be numbers")


def employee_from_row(row: List[str]) -> Optional[Employee]:
    employee_id = cell(row, 0).strip()
    name = cell(row, 1).strip()
    if not employee_id or not name:
        return None
    password = cell(row, 2)
    if not looks_hashed(password):
        # Legacy sheets keep plaintext; only the hash is kept in memory.
        password = generate_password_hash(password, method=LEGACY_HASH_METHOD)
    return Employee(employee_id=employee_id, name=name, password_hash=password, is_admin=as_bool(cell(row, 3)))


def employee_to_row(employee: Employee) -> List[str]:
    return [employee.employee_id, employee.name, employee.password_hash, to_cell_bool(employee.is_admin)]


def _parse_locations(raw: str) -> dict:
    if not raw.strip():
        return {}
    try:
        loaded = json.loads(raw)
    except ValueError:
        logger.warning("Malformed location JSON %r, using empty locations", raw)
        return {}
    return loaded if isinstance(loaded, dict) else {}


def _lenient_location(raw: Any) -> Optional[Location]:
    try:
        return coerce_location(raw)
    except ValueError:
        return None


def attendance_from_row(row: List[str]) -> AttendanceRecord:
    locations = _parse_locations(cell(row, 4))
    return AttendanceRecord(
        employee_id=cell(row, 0),
        date=cell(row, 1),
        check_in=cell(row, 2) or None,
        check_out=cell(row, 3) or None,
        check_in_location=_lenient_location(locations.get("checkIn")),
        check_out_location=_lenient_location(locations.get("checkOut")),
        is_late=as_bool(cell(row, 5)),
        is_half_day=as_bool(cell(row, 6)),
    )


def attendance_to_row(record: AttendanceRecord) -> List[str]:
    locations = {
        "checkIn": record.check_in_location.to_dict() if record.check_in_location else {},
        "checkOut": record.check_out_location.to_dict() if record.check_out_location else {},
    }
    return [
        record.employee_id,
        record.date,
        record.check_in or "",
        record.check_out or "",
        json.dumps(locations),
        to_cell_bool(record.is_late),
        to_cell_bool(record.is_half_day),
    ]


def leave_from_row(row: List[str]) -> LeaveRequest:
    return LeaveRequest(
        employee_id=cell(row, 0),
        leave_id=as_int(cell(row, 1)),
        leave_type=cell(row, 2),
        from_date=cell(row, 3),
        to_date=cell(row, 4),
        reason=cell(row, 5),
        status=cell(row, 6),
        applied_on=cell(row, 7),
    )


def leave_to_row(leave: LeaveRequest) -> List[str]:
    return [
        leave.employee_id,
        "" if leave.leave_id is None else str(leave.leave_id),
        leave.leave_type,
        leave.from_date,
        leave.to_date,
        leave.reason,
        leave.status,
        leave.applied_on,
    ]
