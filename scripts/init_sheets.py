from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from gspread.exceptions import WorksheetNotFound

from config import get_settings_module

from src.attendance_sheets.attendance_sheets.core.constants import (
    ATTENDANCE_HEADER,
    EMPLOYEES_HEADER,
    LEAVE_HEADER,
)
from src.attendance_sheets.attendance_sheets.store.connection import SheetsConfig, SpreadsheetConnection

TABS = {
    "Employees": EMPLOYEES_HEADER,
    "Attendance": ATTENDANCE_HEADER,
    "Leave": LEAVE_HEADER,
}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    book = SpreadsheetConnection.get_instance(SheetsConfig(**settings.SHEETS_CONFIG)).open()

    for title, header in TABS.items():
        try:
            ws = book.worksheet(title)
        except WorksheetNotFound:
            ws = book.add_worksheet(title=title, rows=1000, cols=len(header))
            print(f"Created tab {title}")
        if ws.row_values(1) != header:
            ws.update([header], "A1")
            print(f"Wrote header row for {title}")

    print(f"OK: spreadsheet {settings.SHEETS_CONFIG['spreadsheet_id']} has {', '.join(TABS)}")


if __name__ == "__main__":
    main()
