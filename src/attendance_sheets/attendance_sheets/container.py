from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_TOKEN_TTL_SECONDS
from .core.enums import WritePolicy
from .leave.service import LeaveService
from .mirror.loader import MirrorLoader
from .mirror.mirror import Mirror
from .store.connection import SheetsConfig, SpreadsheetConnection
from .store.gspread_record_store import GSpreadRecordStore
from .store.repository import RecordStore
from .users.service import AuthService, EmployeeService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    store: RecordStore
    mirror: Mirror
    loader: MirrorLoader

    tokens: TokenService
    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService


def build_store(sheets_config: dict) -> RecordStore:
    config = SheetsConfig(
        spreadsheet_id=str(sheets_config["spreadsheet_id"]),
        service_account_key=str(sheets_config.get("service_account_key") or ""),
        service_account_file=str(sheets_config.get("service_account_file") or ""),
    )
    return GSpreadRecordStore(SpreadsheetConnection.get_instance(config))


def build_container(
    *,
    sheets_config: dict,
    token_secret: str,
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
    write_policy: str = WritePolicy.MIRROR_FIRST.value,
    store: Optional[RecordStore] = None,
) -> Container:
    store = store if store is not None else build_store(sheets_config)
    policy = WritePolicy(write_policy)
    mirror = Mirror()

    tokens = TokenService(token_secret, ttl_seconds=token_ttl_seconds)

    return Container(
        store=store,
        mirror=mirror,
        loader=MirrorLoader(store, mirror),
        tokens=tokens,
        auth_service=AuthService(mirror, tokens),
        employee_service=EmployeeService(mirror, store, policy=policy),
        attendance_service=AttendanceService(mirror, store, policy=policy),
        leave_service=LeaveService(mirror, store, policy=policy),
    )
