from __future__ import annotations

import json

import pytest

from src.attendance_sheets.attendance_sheets.attendance.service import AttendanceService
from src.attendance_sheets.attendance_sheets.core.enums import WriteOutcome, WritePolicy
from src.attendance_sheets.attendance_sheets.core.exceptions import ValidationError


def test_record_updates_mirror_and_appends_row(mirror, store):
    service = AttendanceService(mirror, store)

    result = service.record(
        employee_id="E1",
        date="2026-03-02",
        check_in="09:02",
        check_out="18:00",
        check_in_location={"lat": 10.5, "lng": 106.7},
        is_late=True,
    )

    assert result.outcome is WriteOutcome.APPLIED
    assert service.for_employee("E1")["2026-03-02"].to_dict() == {
        "checkIn": "09:02",
        "checkOut": "18:00",
        "checkInLocation": {"lat": 10.5, "lng": 106.7},
        "checkOutLocation": {},
        "isLate": True,
        "isHalfDay": False,
        "date": "2026-03-02",
    }
    [row] = store.data_rows("Attendance")
    assert row[:4] == ["E1", "2026-03-02", "09:02", "18:00"]
    assert json.loads(row[4]) == {"checkIn": {"lat": 10.5, "lng": 106.7}, "checkOut": {}}
    assert row[5:] == ["true", "false"]


def test_mirror_first_keeps_record_when_store_append_fails(mirror, store):
    store.fail_writes = True
    service = AttendanceService(mirror, store, policy=WritePolicy.MIRROR_FIRST)

    result = service.record(employee_id="E1", date="2026-03-02", check_in="09:00")

    assert result.outcome is WriteOutcome.PARTIALLY_APPLIED
    assert service.for_employee("E1")["2026-03-02"].check_in == "09:00"
    assert store.data_rows("Attendance") == []


def test_store_first_drops_record_when_store_append_fails(mirror, store):
    store.fail_writes = True
    service = AttendanceService(mirror, store, policy=WritePolicy.STORE_FIRST)

    result = service.record(employee_id="E1", date="2026-03-02", check_in="09:00")

    assert result.outcome is WriteOutcome.REJECTED
    assert service.for_employee("E1") == {}


def test_second_record_for_same_day_overwrites_mirror_but_duplicates_rows(mirror, store):
    service = AttendanceService(mirror, store)

    service.record(employee_id="E1", date="2026-03-02", check_in="09:00", is_late=True)
    service.record(employee_id="E1", date="2026-03-02", check_in="09:00", check_out="12:00", is_half_day=True)

    record = service.for_employee("E1")["2026-03-02"]
    assert record.check_out == "12:00"
    assert record.is_late is False
    assert record.is_half_day is True
    assert len(service.for_employee("E1")) == 1
    assert len(store.data_rows("Attendance")) == 2


def test_all_returns_every_employee(mirror, store):
    service = AttendanceService(mirror, store)
    service.record(employee_id="E1", date="2026-03-02")
    service.record(employee_id="admin", date="2026-03-02")
    service.record(employee_id="admin", date="2026-03-03")

    everything = service.all()

    assert sorted(everything) == ["E1", "admin"]
    assert sorted(everything["admin"]) == ["2026-03-02", "2026-03-03"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"employee_id": "", "date": "2026-03-02"},
        {"employee_id": "E1", "date": None},
        {"employee_id": "E1", "date": "2026-03-02", "check_in_location": {"lat": "north", "lng": 1}},
        {"employee_id": "E1", "date": "2026-03-02", "check_out_location": [1, 2]},
    ],
)
def test_invalid_input_is_rejected_before_any_write(mirror, store, kwargs):
    with pytest.raises(ValidationError):
        AttendanceService(mirror, store).record(**kwargs)

    assert mirror.all_attendance() == {}
    assert store.data_rows("Attendance") == []
