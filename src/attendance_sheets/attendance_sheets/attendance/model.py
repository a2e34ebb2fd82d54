from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class AttendanceRecord:
    employee_id: str
    date: str
    check_in: Optional[str]
    check_out: Optional[str]
    check_in_location: Optional[Location] = None
    check_out_location: Optional[Location] = None
    is_late: bool = False
    is_half_day: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "checkInLocation": self.check_in_location.to_dict() if self.check_in_location else {},
            "checkOutLocation": self.check_out_location.to_dict() if self.check_out_location else {},
            "isLate": self.is_late,
            "isHalfDay": self.is_half_day,
            "date": self.date,
        }
