from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LeaveRequest:
    employee_id: str
    leave_id: Optional[int]
    leave_type: str
    from_date: str
    to_date: str
    reason: str
    status: str
    applied_on: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.leave_id,
            "type": self.leave_type,
            "fromDate": self.from_date,
            "toDate": self.to_date,
            "reason": self.reason,
            "status": self.status,
            "appliedOn": self.applied_on,
            "employeeId": self.employee_id,
        }
