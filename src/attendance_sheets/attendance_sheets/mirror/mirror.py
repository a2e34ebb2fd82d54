from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Set

from ..attendance.model import AttendanceRecord
from ..core.enums import Readiness
from ..leave.model import LeaveRequest
from ..users.model import Employee

SECTIONS = ("employees", "attendance", "leave")


class Mirror:
    """In-process copy of the spreadsheet, the only source for reads.

    Three independent mappings:
    - employees:  employee_id -> Employee
    - attendance: employee_id -> {date -> AttendanceRecord}
    - leave:      employee_id -> [LeaveRequest, ...] in insertion order

    Every mutation and snapshot holds one re-entrant lock, so readers never
    see half of a cascade. Store I/O never happens under this lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._employees: Dict[str, Employee] = {}
        self._attendance: Dict[str, Dict[str, AttendanceRecord]] = {}
        self._leave: Dict[str, List[LeaveRequest]] = {}
        self._readiness = Readiness.LOADING
        self._failed: Set[str] = set()

    # Readiness

    @property
    def readiness(self) -> Readiness:
        return self._readiness

    def failed_sections(self) -> List[str]:
        with self._lock:
            return sorted(self._failed)

    def finish_load(self, failed: Iterable[str]) -> Readiness:
        with self._lock:
            self._failed = set(failed)
            self._readiness = Readiness.DEGRADED if self._failed else Readiness.READY
            return self._readiness

    # Employees

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._employees.get(employee_id)

    def put_employee(self, employee: Employee) -> None:
        with self._lock:
            self._employees[employee.employee_id] = employee

    def merge_employees(self, employees: Iterable[Employee]) -> int:
        count = 0
        with self._lock:
            for employee in employees:
                self._employees[employee.employee_id] = employee
                count += 1
        return count

    def delete_employee(self, employee_id: str) -> bool:
        """Remove the employee and their attendance and leave in one step."""
        with self._lock:
            found = employee_id in self._employees or employee_id in self._attendance or employee_id in self._leave
            self._employees.pop(employee_id, None)
            self._attendance.pop(employee_id, None)
            self._leave.pop(employee_id, None)
            return found

    # Attendance

    def get_attendance(self, employee_id: str) -> Dict[str, AttendanceRecord]:
        with self._lock:
            return dict(self._attendance.get(employee_id, {}))

    def all_attendance(self) -> Dict[str, Dict[str, AttendanceRecord]]:
        with self._lock:
            return {emp: dict(days) for emp, days in self._attendance.items()}

    def put_attendance(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._attendance.setdefault(record.employee_id, {})[record.date] = record

    def merge_attendance(self, records: Iterable[AttendanceRecord]) -> int:
        count = 0
        with self._lock:
            for record in records:
                self.put_attendance(record)
                count += 1
        return count

    # Leave

    def get_leave(self, employee_id: str) -> List[LeaveRequest]:
        with self._lock:
            return list(self._leave.get(employee_id, []))

    def all_leave(self) -> Dict[str, List[LeaveRequest]]:
        with self._lock:
            return {emp: list(items) for emp, items in self._leave.items()}

    def find_leave(self, employee_id: str, leave_id: int) -> Optional[LeaveRequest]:
        with self._lock:
            for leave in self._leave.get(employee_id, []):
                if leave.leave_id == leave_id:
                    return leave
            return None

    def put_leave(self, leave: LeaveRequest) -> None:
        """Append, or replace the entry with the same (employee, id)."""
        with self._lock:
            items = self._leave.setdefault(leave.employee_id, [])
            for i, existing in enumerate(items):
                if leave.leave_id is not None and existing.leave_id == leave.leave_id:
                    items[i] = leave
                    return
            items.append(leave)

    def merge_leave(self, leaves: Iterable[LeaveRequest]) -> int:
        count = 0
        with self._lock:
            for leave in leaves:
                self.put_leave(leave)
                count += 1
        return count

    def set_leave_status(self, employee_id: str, leave_id: int, status: str) -> Optional[LeaveRequest]:
        with self._lock:
            current = self.find_leave(employee_id, leave_id)
            if current is None:
                return None
            updated = replace(current, status=status)
            self.put_leave(updated)
            return updated

    def max_leave_id(self) -> int:
        with self._lock:
            ids = [leave.leave_id for items in self._leave.values() for leave in items if leave.leave_id is not None]
            return max(ids, default=0)
