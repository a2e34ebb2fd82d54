from __future__ import annotations

from typing import List, Sequence

from .connection import SpreadsheetConnection
from .repository import RecordStore
from .sheets_base import sheets_call, values_of

RAW = {"valueInputOption": "RAW"}


class GSpreadRecordStore(RecordStore):
    def __init__(self, conn_factory: SpreadsheetConnection):
        self._conn_factory = conn_factory

    def read_range(self, range_name: str) -> List[List[str]]:
        with sheets_call(self._conn_factory, f"read {range_name}") as book:
            response = book.values_get(range_name)
        return values_of(response)

    def append_row(self, range_name: str, values: Sequence[str]) -> None:
        with sheets_call(self._conn_factory, f"append to {range_name}") as book:
            book.values_append(range_name, params=RAW, body={"values": [list(values)]})

    def update_cell(self, cell_range: str, value: str) -> None:
        with sheets_call(self._conn_factory, f"update {cell_range}") as book:
            book.values_update(cell_range, params=RAW, body={"values": [[value]]})
