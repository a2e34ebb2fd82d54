from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional

from ..core.constants import ATTENDANCE_RANGE, EMPLOYEES_RANGE, HEADER_ROWS, LEAVE_RANGE
from ..core.enums import Readiness
from ..core.exceptions import StoreError
from ..store.repository import RecordStore
from .mirror import SECTIONS, Mirror
from .rows import attendance_from_row, employee_from_row, leave_from_row

logger = logging.getLogger(__name__)


class MirrorLoader:
    """Fills the mirror from the store.

    Each load reads the whole range and merges row by row, overwriting keys
    that already exist. A failed load is logged and leaves its mapping as it
    was; the readiness state records which sections failed.
    """

    def __init__(self, store: RecordStore, mirror: Mirror):
        self._store = store
        self._mirror = mirror
        self._reload_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    def _data_rows(self, range_name: str) -> List[List[str]]:
        rows = self._store.read_range(range_name)
        return rows[HEADER_ROWS:]

    def load_employees(self) -> bool:
        return self._load("employees", self._merge_employees)

    def load_attendance(self) -> bool:
        return self._load("attendance", self._merge_attendance)

    def load_leave(self) -> bool:
        return self._load("leave", self._merge_leave)

    def _merge_employees(self) -> int:
        rows = self._data_rows(EMPLOYEES_RANGE)
        employees = [e for e in (employee_from_row(r) for r in rows) if e is not None]
        skipped = len(rows) - len(employees)
        if skipped:
            logger.info("Skipped %d employee rows without id or name", skipped)
        return self._mirror.merge_employees(employees)

    def _merge_attendance(self) -> int:
        # Sheet order is append order, so a later duplicate row wins.
        return self._mirror.merge_attendance(attendance_from_row(r) for r in self._data_rows(ATTENDANCE_RANGE))

    def _merge_leave(self) -> int:
        return self._mirror.merge_leave(leave_from_row(r) for r in self._data_rows(LEAVE_RANGE))

    def _load(self, section: str, merge: Callable[[], int]) -> bool:
        try:
            count = merge()
        except (StoreError, ValueError, TypeError, AttributeError):
            logger.exception("Error loading %s from the spreadsheet", section)
            return False
        logger.info("%s loaded from the spreadsheet (%d rows)", section.capitalize(), count)
        return True

    def reload(self) -> Readiness:
        """Run all three loads and settle the readiness state."""
        loads = (
            ("employees", self.load_employees),
            ("attendance", self.load_attendance),
            ("leave", self.load_leave),
        )
        with self._reload_lock:
            results: Dict[str, bool] = dict.fromkeys(SECTIONS, False)
            try:
                for section, load in loads:
                    results[section] = load()
            finally:
                # An unexpected error still leaves the mirror out of LOADING.
                failed = [s for s in SECTIONS if not results[s]]
                state = self._mirror.finish_load(failed)
        if failed:
            logger.warning("Mirror is degraded, failed sections: %s", ", ".join(failed))
        else:
            logger.info("Mirror ready")
        return state

    def start(self) -> threading.Thread:
        """Load in the background; the caller does not wait."""
        self._thread = threading.Thread(target=self.reload, name="mirror-loader", daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)
