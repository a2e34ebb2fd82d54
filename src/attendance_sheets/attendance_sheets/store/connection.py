from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import gspread


@dataclass
class SheetsConfig:
    spreadsheet_id: str
    service_account_key: str = ""
    service_account_file: str = ""


class SpreadsheetConnection:
    """Singleton-like spreadsheet handle factory.

    Note: The spreadsheet is opened lazily on first use so the app can start
    (and report a degraded mirror) while Google is unreachable.
    """

    _instance: Optional["SpreadsheetConnection"] = None

    def __init__(self, config: SheetsConfig):
        self._config = config
        self._spreadsheet = None

    @classmethod
    def get_instance(cls, config: SheetsConfig) -> "SpreadsheetConnection":
        if cls._instance is None:
            cls._instance = SpreadsheetConnection(config)
        return cls._instance

    def _client(self) -> gspread.Client:
        if self._config.service_account_key:
            return gspread.service_account_from_dict(json.loads(self._config.service_account_key))
        if self._config.service_account_file:
            return gspread.service_account(filename=self._config.service_account_file)
        return gspread.service_account()

    def open(self) -> gspread.Spreadsheet:
        if self._spreadsheet is None:
            self._spreadsheet = self._client().open_by_key(self._config.spreadsheet_id)
        return self._spreadsheet
