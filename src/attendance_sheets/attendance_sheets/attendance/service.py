from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.validators import require_non_empty
from ..core.constants import ATTENDANCE_RANGE
from ..core.enums import WritePolicy
from ..core.exceptions import ValidationError
from ..mirror.mirror import Mirror
from ..mirror.rows import attendance_to_row, coerce_location
from ..mirror.write_through import WriteResult, write_through
from ..store.repository import RecordStore
from .model import AttendanceRecord, Location


def _location(raw: Any, field_name: str) -> Optional[Location]:
    try:
        return coerce_location(raw)
    except ValueError as e:
        raise ValidationError(f"{field_name}: {e}") from e


class AttendanceService:
    def __init__(self, mirror: Mirror, store: RecordStore, *, policy: WritePolicy = WritePolicy.MIRROR_FIRST):
        self._mirror = mirror
        self._store = store
        self._policy = policy

    def record(
        self,
        *,
        employee_id: str,
        date: str,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        check_in_location: Any = None,
        check_out_location: Any = None,
        is_late: bool = False,
        is_half_day: bool = False,
    ) -> WriteResult:
        """Store the day's record for an employee.

        The mirror keeps one record per (employee, date) and a second call
        replaces the first; the spreadsheet gets one more row per call.
        """
        record = AttendanceRecord(
            employee_id=require_non_empty(employee_id, "empId"),
            date=require_non_empty(date, "date"),
            check_in=check_in or None,
            check_out=check_out or None,
            check_in_location=_location(check_in_location, "checkInLocation"),
            check_out_location=_location(check_out_location, "checkOutLocation"),
            is_late=bool(is_late),
            is_half_day=bool(is_half_day),
        )
        return write_through(
            policy=self._policy,
            apply_to_mirror=lambda: self._mirror.put_attendance(record),
            persist=lambda: self._store.append_row(ATTENDANCE_RANGE, attendance_to_row(record)),
            description=f"attendance {record.employee_id}/{record.date}",
        )

    def for_employee(self, employee_id: str) -> Dict[str, AttendanceRecord]:
        return self._mirror.get_attendance(employee_id)

    def all(self) -> Dict[str, Dict[str, AttendanceRecord]]:
        return self._mirror.all_attendance()
