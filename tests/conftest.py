from __future__ import annotations

import re
from typing import Dict, List, Sequence

import pytest

from src.attendance_sheets.attendance_sheets.core.constants import (
    ATTENDANCE_HEADER,
    EMPLOYEES_HEADER,
    LEAVE_HEADER,
)
from src.attendance_sheets.attendance_sheets.core.exceptions import StoreError
from src.attendance_sheets.attendance_sheets.main import create_app
from src.attendance_sheets.attendance_sheets.mirror.loader import MirrorLoader
from src.attendance_sheets.attendance_sheets.mirror.mirror import Mirror

CELL = re.compile(r"^(?P<tab>[^!]+)!(?P<col>[A-Z])(?P<row>\d+)$")


class FakeRecordStore:
    """In-memory spreadsheet: one list of rows per tab, header row included."""

    def __init__(self):
        self.tabs: Dict[str, List[List[str]]] = {
            "Employees": [list(EMPLOYEES_HEADER)],
            "Attendance": [list(ATTENDANCE_HEADER)],
            "Leave": [list(LEAVE_HEADER)],
        }
        self.fail_reads: set = set()
        self.fail_writes = False
        self.reads: List[str] = []

    @staticmethod
    def _tab(range_name: str) -> str:
        return range_name.split("!", 1)[0]

    def read_range(self, range_name: str) -> List[List[str]]:
        tab = self._tab(range_name)
        self.reads.append(tab)
        if tab in self.fail_reads:
            raise StoreError(f"read {range_name} failed: unreachable")
        return [list(row) for row in self.tabs[tab]]

    def append_row(self, range_name: str, values: Sequence[str]) -> None:
        if self.fail_writes:
            raise StoreError(f"append to {range_name} failed: unreachable")
        self.tabs[self._tab(range_name)].append([str(v) for v in values])

    def update_cell(self, cell_range: str, value: str) -> None:
        if self.fail_writes:
            raise StoreError(f"update {cell_range} failed: unreachable")
        m = CELL.match(cell_range)
        assert m, cell_range
        row = self.tabs[m["tab"]][int(m["row"]) - 1]
        col = ord(m["col"]) - ord("A")
        row.extend([""] * (col + 1 - len(row)))
        row[col] = value

    def data_rows(self, tab: str) -> List[List[str]]:
        return self.tabs[tab][1:]


@pytest.fixture
def store() -> FakeRecordStore:
    s = FakeRecordStore()
    # Plaintext passwords, as legacy sheets hold them.
    s.tabs["Employees"] += [
        ["admin", "Ada Admin", "admin-pass", "true"],
        ["E1", "Eve Employee", "eve-pass", "false"],
    ]
    return s


@pytest.fixture
def mirror(store) -> Mirror:
    """A mirror already loaded from the fake store."""
    m = Mirror()
    MirrorLoader(store, m).reload()
    return m


@pytest.fixture
def app(store, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"LOAD_ASYNC": False}, store=store)


@pytest.fixture
def container(app):
    return app.extensions["attendance_sheets"]


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, employee_id: str, password: str) -> str:
    resp = client.post("/api/login", json={"id": employee_id, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()["token"]


@pytest.fixture
def admin_headers(client):
    return {"Authorization": f"Bearer {_login(client, 'admin', 'admin-pass')}"}


@pytest.fixture
def employee_headers(client):
    return {"Authorization": f"Bearer {_login(client, 'E1', 'eve-pass')}"}
