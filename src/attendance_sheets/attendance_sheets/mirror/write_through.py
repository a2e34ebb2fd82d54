from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.enums import WriteOutcome, WritePolicy
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a write that touches both the mirror and the store.

    APPLIED: both sides changed.
    PARTIALLY_APPLIED: the mirror changed, the store call failed. Reads will
    show the change until the next reload drops it.
    REJECTED: neither side changed.
    """

    outcome: WriteOutcome
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is WriteOutcome.APPLIED

    @property
    def mirror_applied(self) -> bool:
        return self.outcome is not WriteOutcome.REJECTED

    @classmethod
    def applied(cls) -> "WriteResult":
        return cls(WriteOutcome.APPLIED)


def write_through(
    *,
    policy: WritePolicy,
    apply_to_mirror: Callable[[], None],
    persist: Callable[[], None],
    description: str,
) -> WriteResult:
    if policy is WritePolicy.STORE_FIRST:
        try:
            persist()
        except StoreError as e:
            logger.exception("Error saving %s, mirror left unchanged", description)
            return WriteResult(WriteOutcome.REJECTED, str(e))
        apply_to_mirror()
        return WriteResult.applied()

    apply_to_mirror()
    try:
        persist()
    except StoreError as e:
        logger.exception("Error saving %s", description)
        logger.warning("Mirror and spreadsheet diverge: %s is only in memory", description)
        return WriteResult(WriteOutcome.PARTIALLY_APPLIED, str(e))
    return WriteResult.applied()
