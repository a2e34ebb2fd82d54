from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from ..common.datetime_utils import epoch_millis, now_local
from ..common.validators import optional_text, require_non_empty
from ..core.constants import HEADER_ROWS, LEAVE_RANGE, LEAVE_STATUS_COLUMN
from ..core.enums import LeaveStatus, WritePolicy
from ..core.exceptions import NotFoundError, StoreError
from ..mirror.mirror import Mirror
from ..mirror.rows import leave_to_row
from ..mirror.write_through import WriteResult, write_through
from ..store.repository import RecordStore
from .model import LeaveRequest


class LeaveIdAllocator:
    """Millisecond-timestamp ids that never repeat or go backwards in-process."""

    def __init__(self, clock: Callable[[], datetime] = now_local, *, floor: int = 0):
        self._clock = clock
        self._last = int(floor)
        self._lock = threading.Lock()

    def bump_floor(self, value: int) -> None:
        with self._lock:
            self._last = max(self._last, int(value))

    def next_id(self) -> int:
        with self._lock:
            self._last = max(epoch_millis(self._clock()), self._last + 1)
            return self._last


class LeaveService:
    def __init__(
        self,
        mirror: Mirror,
        store: RecordStore,
        *,
        policy: WritePolicy = WritePolicy.MIRROR_FIRST,
        clock: Callable[[], datetime] = now_local,
    ):
        self._mirror = mirror
        self._store = store
        self._policy = policy
        self._clock = clock
        self._ids = LeaveIdAllocator(clock)

    def apply(
        self,
        *,
        employee_id: str,
        leave_type: str,
        from_date: str,
        to_date: str,
        reason: str = "",
    ) -> Tuple[LeaveRequest, WriteResult]:
        # Ids already in the sheet stay below anything handed out here.
        self._ids.bump_floor(self._mirror.max_leave_id())
        leave = LeaveRequest(
            employee_id=require_non_empty(employee_id, "empId"),
            leave_id=self._ids.next_id(),
            leave_type=optional_text(leave_type),
            from_date=optional_text(from_date),
            to_date=optional_text(to_date),
            reason=optional_text(reason),
            status=LeaveStatus.PENDING.value,
            applied_on=self._clock().date().isoformat(),
        )
        result = write_through(
            policy=self._policy,
            apply_to_mirror=lambda: self._mirror.put_leave(leave),
            persist=lambda: self._store.append_row(LEAVE_RANGE, leave_to_row(leave)),
            description=f"leave {leave.employee_id}/{leave.leave_id}",
        )
        return leave, result

    def for_employee(self, employee_id: str) -> List[LeaveRequest]:
        return self._mirror.get_leave(employee_id)

    def all(self) -> Dict[str, List[LeaveRequest]]:
        return self._mirror.all_leave()

    def _locate_row(self, employee_id: str, leave_id: int) -> Optional[int]:
        """1-based sheet row of the leave, found by scanning the whole range."""
        rows = self._store.read_range(LEAVE_RANGE)
        wanted = str(leave_id)
        for index, row in enumerate(rows):
            if index < HEADER_ROWS or len(row) < 2:
                continue
            if row[0] == employee_id and row[1].strip() == wanted:
                return index + 1
        return None

    def _patch_status(self, employee_id: str, leave_id: int, status: str) -> None:
        row_number = self._locate_row(employee_id, leave_id)
        if row_number is None:
            raise StoreError(f"Leave {employee_id}/{leave_id} has no row in the spreadsheet")
        self._store.update_cell(f"Leave!{LEAVE_STATUS_COLUMN}{row_number}", status)

    def update_status(self, *, employee_id: str, leave_id: str, status: str) -> WriteResult:
        try:
            wanted = int(str(leave_id).strip())
        except ValueError:
            raise NotFoundError("Leave not found") from None
        if self._mirror.find_leave(employee_id, wanted) is None:
            raise NotFoundError("Leave not found")

        status = require_non_empty(status, "status")
        return write_through(
            policy=self._policy,
            apply_to_mirror=lambda: self._mirror.set_leave_status(employee_id, wanted, status),
            persist=lambda: self._patch_status(employee_id, wanted, status),
            description=f"leave status {employee_id}/{wanted}",
        )
