from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_sheets.attendance_sheets.common.datetime_utils import epoch_millis
from src.attendance_sheets.attendance_sheets.core.enums import WriteOutcome, WritePolicy
from src.attendance_sheets.attendance_sheets.core.exceptions import NotFoundError
from src.attendance_sheets.attendance_sheets.leave.service import LeaveIdAllocator, LeaveService
from src.attendance_sheets.attendance_sheets.mirror.loader import MirrorLoader

FROZEN = datetime(2026, 3, 1, 9, 30, 0)


def _service(mirror, store, **kwargs):
    return LeaveService(mirror, store, clock=lambda: FROZEN, **kwargs)


def _apply(service, employee_id="E1"):
    return service.apply(employee_id=employee_id, leave_type="Sick", from_date="2026-03-02", to_date="2026-03-03", reason="flu")


def test_apply_creates_pending_leave_and_appends_row(mirror, store):
    service = _service(mirror, store)

    leave, result = _apply(service)

    assert result.outcome is WriteOutcome.APPLIED
    assert leave.status == "Pending"
    assert leave.applied_on == "2026-03-01"
    assert leave.leave_id == epoch_millis(FROZEN)
    assert service.for_employee("E1") == [leave]
    assert store.data_rows("Leave") == [
        ["E1", str(leave.leave_id), "Sick", "2026-03-02", "2026-03-03", "flu", "Pending", "2026-03-01"]
    ]


def test_ids_strictly_increase_even_with_a_frozen_clock(mirror, store):
    service = _service(mirror, store)

    first, _ = _apply(service)
    second, _ = _apply(service)
    third, _ = _apply(service, employee_id="admin")

    assert first.leave_id < second.leave_id < third.leave_id


def test_new_ids_stay_above_ids_loaded_from_the_sheet(mirror, store):
    future = epoch_millis(FROZEN) + 10_000
    store.tabs["Leave"].append(["E1", str(future), "Sick", "a", "b", "", "Pending", "x"])
    MirrorLoader(store, mirror).load_leave()

    leave, _ = _apply(_service(mirror, store))
    assert leave.leave_id == future + 1


def test_allocator_follows_the_clock_when_it_moves_forward():
    moments = iter([datetime(2026, 3, 1, 9, 0, 0), datetime(2026, 3, 1, 9, 0, 5)])
    allocator = LeaveIdAllocator(lambda: next(moments))

    first = allocator.next_id()
    second = allocator.next_id()

    assert second - first == 5000


def test_update_status_patches_the_status_cell_of_the_matching_row(mirror, store):
    service = _service(mirror, store)
    store.tabs["Leave"].append(["E2", "1", "Other", "a", "b", "", "Pending", "x"])
    leave, _ = _apply(service)
    reads_before = len(store.reads)

    result = service.update_status(employee_id="E1", leave_id=str(leave.leave_id), status="Approved")

    assert result.outcome is WriteOutcome.APPLIED
    assert service.for_employee("E1")[0].status == "Approved"
    # header, E2 row, then ours at sheet row 3
    assert store.tabs["Leave"][2][6] == "Approved"
    assert store.tabs["Leave"][1][6] == "Pending"
    # The whole range is re-read to find the row.
    assert store.reads[reads_before:] == ["Leave"]


def test_update_status_accepts_any_status_text(mirror, store):
    service = _service(mirror, store)
    leave, _ = _apply(service)

    service.update_status(employee_id="E1", leave_id=leave.leave_id, status="Escalated")

    assert service.for_employee("E1")[0].status == "Escalated"


@pytest.mark.parametrize("employee_id,leave_id", [("E1", "999"), ("ghost", "1"), ("E1", "not-a-number")])
def test_update_status_unknown_leave_raises_not_found(mirror, store, employee_id, leave_id):
    service = _service(mirror, store)
    _apply(service)

    with pytest.raises(NotFoundError):
        service.update_status(employee_id=employee_id, leave_id=leave_id, status="Approved")


def test_update_status_with_no_sheet_row_is_partial_under_mirror_first(mirror, store):
    service = _service(mirror, store)
    store.fail_writes = True
    leave, first = _apply(service)
    store.fail_writes = False

    result = service.update_status(employee_id="E1", leave_id=str(leave.leave_id), status="Rejected")

    assert first.outcome is WriteOutcome.PARTIALLY_APPLIED
    assert result.outcome is WriteOutcome.PARTIALLY_APPLIED
    assert service.for_employee("E1")[0].status == "Rejected"


def test_update_status_store_first_keeps_old_status_on_failure(mirror, store):
    service = _service(mirror, store, policy=WritePolicy.STORE_FIRST)
    leave, _ = _apply(service)
    store.fail_writes = True

    result = service.update_status(employee_id="E1", leave_id=str(leave.leave_id), status="Approved")

    assert result.outcome is WriteOutcome.REJECTED
    assert service.for_employee("E1")[0].status == "Pending"
