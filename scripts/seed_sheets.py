from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from werkzeug.security import generate_password_hash

from config import get_settings_module

from src.attendance_sheets.attendance_sheets.container import build_store
from src.attendance_sheets.attendance_sheets.core.constants import EMPLOYEES_RANGE
from src.attendance_sheets.attendance_sheets.mirror.rows import employee_to_row
from src.attendance_sheets.attendance_sheets.users.model import Employee


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings.SHEETS_CONFIG)

    admin = Employee(
        employee_id=os.getenv("SEED_ADMIN_ID", "admin"),
        name=os.getenv("SEED_ADMIN_NAME", "Administrator"),
        password_hash=generate_password_hash(os.getenv("SEED_ADMIN_PASSWORD", "admin123")),
        is_admin=True,
    )
    store.append_row(EMPLOYEES_RANGE, employee_to_row(admin))

    print(f"OK: appended admin employee {admin.employee_id!r}")


if __name__ == "__main__":
    main()
