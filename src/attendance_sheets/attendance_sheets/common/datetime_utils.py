from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)
