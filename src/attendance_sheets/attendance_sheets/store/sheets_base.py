from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List

from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException

from ..core.exceptions import StoreError
from .connection import SpreadsheetConnection


@contextmanager
def sheets_call(conn_factory: SpreadsheetConnection, operation: str) -> Iterator[Any]:
    """Yield the open spreadsheet; transport and API errors become StoreError.

    requests' exceptions derive from IOError, so OSError covers the network
    side as well as local credential files. Credential refresh goes through
    google-auth, which raises its own TransportError and RefreshError.
    """
    try:
        yield conn_factory.open()
    except (GSpreadException, GoogleAuthError, OSError, ValueError) as e:
        raise StoreError(f"{operation} failed: {e}") from e


def values_of(response: Any) -> List[List[str]]:
    if not isinstance(response, dict):
        raise StoreError(f"Unexpected values payload: {type(response)!r}")
    values = response.get("values") or []
    if not isinstance(values, list):
        raise StoreError("Unexpected values payload: 'values' is not a list")
    return [[str(c) for c in row] for row in values]
