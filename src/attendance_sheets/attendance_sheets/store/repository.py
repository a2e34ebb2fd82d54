from __future__ import annotations

from typing import List, Protocol, Sequence


class RecordStore(Protocol):
    """Interface of the tabular store behind the mirror.

    Note (DIP): services and the mirror loader depend on this interface, not on
    gspread. Implementations raise StoreError on any failure.
    """

    def read_range(self, range_name: str) -> List[List[str]]:
        """Return every row of ``range_name`` (header included), in sheet order."""
        raise NotImplementedError

    def append_row(self, range_name: str, values: Sequence[str]) -> None:
        raise NotImplementedError

    def update_cell(self, cell_range: str, value: str) -> None:
        raise NotImplementedError
